"""Structured output for limit reports."""

import json
from typing import Any

FORMATS = ("plain", "json", "table")


def format_value(value: int | None) -> str:
    """Render one side of a limit the way the kernel prints it."""
    return "unlimited" if value is None else str(value)


def display_name(field_name: str) -> str:
    """Turn a Limits field name into a row label, e.g. "Max open files"."""
    return field_name.replace("_", " ").capitalize()


class Output:
    """Helper for structured limit output."""

    def __init__(self):
        self.data: dict[str, Any] = {}
        self._printed: bool = False

    def emit(self, data: dict[str, Any]) -> None:
        """Store structured output data."""
        self.data.update(data)

    def to_json(self) -> str:
        """Return data as JSON string."""
        return json.dumps(self.data, indent=2, default=str)

    def to_plain(self) -> str:
        """Return limits in the shape of /proc/<pid>/limits."""
        lines = []
        if "pid" in self.data:
            lines.append(f"Pid: {self.data['pid']}")
            lines.append("")

        lines.append(f"{'Limit':<26}{'Soft Limit':<21}{'Hard Limit':<21}".rstrip())
        for name, limit in self.data.get("limits", {}).items():
            soft = format_value(limit["soft"])
            hard = format_value(limit["hard"])
            lines.append(f"{display_name(name):<26}{soft:<21}{hard}")

        return "\n".join(lines)

    def to_table(self) -> str:
        """Return limits as a fixed-width table."""
        limits = self.data.get("limits", {})
        if not limits:
            return "No limits to show."

        lines = [f"{'Property':<24} {'Soft':<12} {'Hard':<12}", "-" * 50]
        for name, limit in limits.items():
            soft = format_value(limit["soft"])
            hard = format_value(limit["hard"])
            lines.append(f"{name:<24} {soft:<12} {hard:<12}".rstrip())

        lines.append("")
        lines.append(f"Total: {len(limits)} properties shown")
        return "\n".join(lines)

    def render(self, format: str = "plain") -> None:
        """Print output in the specified format.

        Args:
            format: Output format - "plain", "json" or "table"
        """
        if self._printed:
            return
        self._printed = True

        if not self.data:
            return

        if format == "json":
            print(self.to_json())
        elif format == "table":
            print(self.to_table())
        else:
            print(self.to_plain())
