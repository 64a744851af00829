"""Per-process resource limits, read from /proc/<pid>/limits."""

from typing import TYPE_CHECKING

from proclimits.lib import (
    Limit,
    Limits,
    LimitsError,
    ProcFileNotFoundError,
    UnsupportedOSError,
    parse_limits,
    parse_limits_text,
)
from proclimits.platform import SUPPORTED, limits_for

if TYPE_CHECKING:
    from proclimits.core.context import Context
    from proclimits.core.logging import QueryLogger

__version__ = "0.1.0"


def limits_for_self(
    context: "Context | None" = None,
    logger: "QueryLogger | None" = None,
) -> Limits:
    """Get the limits of the running process."""
    if context is None:
        from proclimits.core.context import Context
        context = Context()

    return limits_for(context.getpid(), context=context, logger=logger)


__all__ = [
    "Limit",
    "Limits",
    "LimitsError",
    "ProcFileNotFoundError",
    "SUPPORTED",
    "UnsupportedOSError",
    "__version__",
    "limits_for",
    "limits_for_self",
    "parse_limits",
    "parse_limits_text",
]
