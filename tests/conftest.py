"""Shared test fixtures."""

import errno
import io
import sys
from pathlib import Path

import pytest

# Add project root to path for package imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

FIXTURES_DIR = Path(__file__).parent / "fixtures"

linux_only = pytest.mark.skipif(
    not sys.platform.startswith("linux"), reason="requires /proc (Linux)"
)


class MockContext:
    """Mock Context for testing without real system access."""

    def __init__(
        self,
        file_contents: dict[str, str | bytes] | None = None,
        pid: int = 4242,
    ):
        self.file_contents = file_contents or {}
        self.pid = pid
        self.files_opened: list[str] = []
        self.streams: list[io.BytesIO] = []

    def open_file(self, path: str) -> io.BytesIO:
        """Return mocked file content as a binary stream."""
        self.files_opened.append(path)
        if path not in self.file_contents:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        content = self.file_contents[path]
        if isinstance(content, str):
            content = content.encode()
        stream = io.BytesIO(content)
        self.streams.append(stream)
        return stream

    def getpid(self) -> int:
        """Return mocked process id."""
        return self.pid


@pytest.fixture
def mock_context():
    """Factory fixture for creating MockContext instances."""
    def _create(**kwargs) -> MockContext:
        return MockContext(**kwargs)
    return _create


def load_fixture(category: str, name: str) -> str:
    """Load a fixture file by category and name."""
    fixture_path = FIXTURES_DIR / category / name
    if not fixture_path.exists():
        raise FileNotFoundError(f"Fixture not found: {fixture_path}")
    return fixture_path.read_text()


@pytest.fixture
def sample_table() -> str:
    """The canonical 16-row limits table."""
    return load_fixture("limits", "sample.txt")
