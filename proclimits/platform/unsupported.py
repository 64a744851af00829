"""Fallback for platforms without a per-process limits report."""

from typing import TYPE_CHECKING

from proclimits.lib.errors import UnsupportedOSError
from proclimits.lib.limits import Limits

if TYPE_CHECKING:
    from proclimits.core.context import Context
    from proclimits.core.logging import QueryLogger

SUPPORTED = False


def limits_for(
    pid: int,
    context: "Context | None" = None,
    logger: "QueryLogger | None" = None,
) -> Limits:
    """Always raise UnsupportedOSError; no I/O is attempted."""
    raise UnsupportedOSError()
