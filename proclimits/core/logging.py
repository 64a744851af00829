"""JSONL log of limit queries and the table rows they skipped."""

import json
import os
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any

LOG_LEVELS = {"debug": 0, "info": 1, "error": 2}


def get_log_path(source: str, base_path: Path | None = None) -> Path:
    """
    Get the log file path for a log source.

    Args:
        source: Name of the component writing the log
        base_path: Base directory for logs (default: ~/var/log/proclimits)

    Returns:
        Path to the log file: {base}/{date}/{source}.jsonl
    """
    if base_path is None:
        home = Path(os.environ.get("HOME", "/tmp"))
        base_path = home / "var" / "log" / "proclimits"

    return base_path / date.today().isoformat() / f"{source}.jsonl"


class QueryLogger:
    """
    Appends one JSON object per event to a JSONL file.

    Every entry carries timestamp, level, source and event. The file is
    opened on the first entry at or above min_level.
    """

    def __init__(self, source: str, log_path: Path | None = None, min_level: str = "debug"):
        self.source = source
        self.log_path = log_path or get_log_path(source)
        self.min_level = min_level
        self._file = None

    def _write(self, level: str, event: str, **fields: Any) -> None:
        if LOG_LEVELS[level] < LOG_LEVELS.get(self.min_level, 0):
            return
        if self._file is None:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file = open(self.log_path, "a")
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "source": self.source,
            "event": event,
            **fields,
        }
        self._file.write(json.dumps(entry, default=str) + "\n")
        self._file.flush()

    def row_skipped(self, row: int, reason: str, **fields: Any) -> None:
        """Record a table row the parser could not use."""
        self._write("debug", "row_skipped", row=row, reason=reason, **fields)

    def query_succeeded(self, pid: int, limits: dict[str, Any]) -> None:
        self._write("info", "query_succeeded", pid=pid, limits=limits)

    def query_failed(self, pid: int, error: Exception) -> None:
        self._write("error", "query_failed", pid=pid, error=str(error), error_type=type(error).__name__)

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "QueryLogger":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
