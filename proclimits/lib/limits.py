"""The fixed catalog of limitable properties and the record that holds them."""

from dataclasses import dataclass, fields
from typing import Any, Iterator

from proclimits.lib.limit import Limit

# Lowercased row labels mapped to Limits fields. "max file_size" is matched
# literally; the kernel prints "Max file size", which is left unrecognized.
PROPERTY_LABELS = {
    "max cpu time": "max_cpu_time",
    "max file_size": "max_file_size",
    "max data size": "max_data_size",
    "max stack size": "max_stack_size",
    "max core file size": "max_core_file_size",
    "max resident set": "max_resident_set",
    "max processes": "max_processes",
    "max open files": "max_open_files",
    "max locked memory": "max_locked_memory",
    "max address space": "max_address_space",
    "max file locks": "max_file_locks",
    "max pending signals": "max_pending_signals",
    "max msgqueue size": "max_msgqueue_size",
    "max nice priority": "max_nice_priority",
    "max realtime priority": "max_realtime_priority",
    "max realtime timeout": "max_realtime_timeout",
}


def normalize_property(label: str) -> str | None:
    """
    Map a row label to the Limits field it describes.

    Args:
        label: Row label, e.g. "Max open files"

    Returns:
        Field name, or None if the label is not a known property
    """
    return PROPERTY_LABELS.get(label.lower())


@dataclass(slots=True)
class Limits:
    """Every property a Linux kernel can limit for a process."""

    max_cpu_time: Limit = Limit()
    max_file_size: Limit = Limit()
    max_data_size: Limit = Limit()
    max_stack_size: Limit = Limit()
    max_core_file_size: Limit = Limit()
    max_resident_set: Limit = Limit()
    max_processes: Limit = Limit()
    max_open_files: Limit = Limit()
    max_locked_memory: Limit = Limit()
    max_address_space: Limit = Limit()
    max_file_locks: Limit = Limit()
    max_pending_signals: Limit = Limit()
    max_msgqueue_size: Limit = Limit()
    max_nice_priority: Limit = Limit()
    max_realtime_priority: Limit = Limit()
    max_realtime_timeout: Limit = Limit()

    def set_property_from_strings(self, name: str, soft_string: str, hard_string: str) -> None:
        """
        Store a limit read from one table row.

        Unknown property names are ignored.

        Args:
            name: Row label, e.g. "Max file locks"
            soft_string: Soft limit column text
            hard_string: Hard limit column text
        """
        field_name = normalize_property(name)
        if field_name is None:
            return
        setattr(self, field_name, Limit.from_strings(soft_string, hard_string))

    def items(self) -> Iterator[tuple[str, Limit]]:
        """Yield (field name, limit) pairs in catalog order."""
        for f in fields(self):
            yield f.name, getattr(self, f.name)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {name: limit.to_dict() for name, limit in self.items()}


PROPERTY_NAMES = tuple(f.name for f in fields(Limits))
