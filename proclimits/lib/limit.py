"""Soft/hard limit values as reported by /proc/<pid>/limits."""

import re
from dataclasses import dataclass
from typing import Any

UNLIMITED = "unlimited"

# Largest value a limit column can hold before it degrades to unlimited.
MAX_LIMIT_VALUE = 2**32 - 1

_DECIMAL = re.compile(r"\+?[0-9]+")


def parse_limit_value(token: str) -> int | None:
    """
    Parse one limit column.

    Args:
        token: Column text, e.g. "1024" or "unlimited"

    Returns:
        The value as an int, or None for "unlimited" and for anything
        that is not an unsigned 32-bit decimal number
    """
    if token == UNLIMITED:
        return None
    if not _DECIMAL.fullmatch(token):
        return None

    value = int(token)
    if value > MAX_LIMIT_VALUE:
        return None
    return value


@dataclass(frozen=True)
class Limit:
    """
    A soft and a hard limit for one limitable property.

    None on either side means no limit is enforced on that side.
    """

    soft: int | None = None
    hard: int | None = None

    @classmethod
    def from_strings(cls, soft_token: str, hard_token: str) -> "Limit":
        """Build a limit from the soft and hard column text."""
        return cls(soft=parse_limit_value(soft_token), hard=parse_limit_value(hard_token))

    @property
    def is_unlimited(self) -> bool:
        return self.soft is None and self.hard is None

    def to_dict(self) -> dict[str, Any]:
        return {"soft": self.soft, "hard": self.hard}
