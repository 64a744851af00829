"""Process limits read from procfs on GNU/Linux."""

from typing import TYPE_CHECKING

from proclimits.lib.errors import ProcFileNotFoundError
from proclimits.lib.limits import Limits
from proclimits.lib.parser import parse_limits

if TYPE_CHECKING:
    from proclimits.core.context import Context
    from proclimits.core.logging import QueryLogger

SUPPORTED = True


def limits_path(pid: int) -> str:
    return f"/proc/{pid}/limits"


def limits_for(
    pid: int,
    context: "Context | None" = None,
    logger: "QueryLogger | None" = None,
) -> Limits:
    """
    Get the limits of a process.

    Args:
        pid: Process ID
        context: Execution context (for testing)
        logger: Receives debug entries for skipped rows

    Returns:
        Limits parsed from /proc/<pid>/limits

    Raises:
        ProcFileNotFoundError: If the limits file cannot be opened
    """
    if context is None:
        from proclimits.core.context import Context
        context = Context()

    path = limits_path(pid)
    try:
        stream = context.open_file(path)
    except OSError as e:
        raise ProcFileNotFoundError(path, e) from e

    with stream:
        return parse_limits(stream, logger=logger)
