"""Core proclimits functionality."""

from proclimits.core.config import load_config
from proclimits.core.context import Context
from proclimits.core.logging import QueryLogger, get_log_path
from proclimits.core.output import Output

__all__ = [
    "Context",
    "Output",
    "QueryLogger",
    "get_log_path",
    "load_config",
]
