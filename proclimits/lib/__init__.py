"""Data model and parser for process resource limits."""

from proclimits.lib.errors import LimitsError, ProcFileNotFoundError, UnsupportedOSError
from proclimits.lib.limit import Limit, parse_limit_value
from proclimits.lib.limits import PROPERTY_LABELS, PROPERTY_NAMES, Limits, normalize_property
from proclimits.lib.parser import iter_lines, parse_limits, parse_limits_text, split_row

__all__ = [
    "Limit",
    "Limits",
    "LimitsError",
    "PROPERTY_LABELS",
    "PROPERTY_NAMES",
    "ProcFileNotFoundError",
    "UnsupportedOSError",
    "iter_lines",
    "normalize_property",
    "parse_limit_value",
    "parse_limits",
    "parse_limits_text",
    "split_row",
]
