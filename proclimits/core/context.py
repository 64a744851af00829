"""Execution context for testability."""

import os
from typing import BinaryIO


class Context:
    """
    Wraps filesystem and process access for testability.

    In production: touches the real system
    In tests: can be replaced with MockContext
    """

    def open_file(self, path: str) -> BinaryIO:
        """Open a file for binary reading."""
        return open(path, "rb")

    def getpid(self) -> int:
        """Get the id of the running process."""
        return os.getpid()
