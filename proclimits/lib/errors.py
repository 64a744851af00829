"""Errors raised when limits cannot be read."""


class LimitsError(Exception):
    """Base class for process limit lookup failures."""

    pass


class UnsupportedOSError(LimitsError):
    """The platform has no way to report process limits."""

    def __init__(self) -> None:
        super().__init__("Unsupported OS. Could not get process limits.")


class ProcFileNotFoundError(LimitsError):
    """The limits file for a process could not be opened."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Proc file not found at `{path}`: {cause}")

    def __repr__(self) -> str:
        return f"ProcFileNotFoundError({self.path!r}, {self.cause!r})"
