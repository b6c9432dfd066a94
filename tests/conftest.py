"""
conftest.py
-----------
Shared pytest fixtures for WebWeaver tests.

Provides fixtures for:
- Temporary directories
- Content directories below a `.content` anchor
- Content file factories
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def content_dir(tmp_dir):
    """Empty content directory with lineage ['blog']."""
    path = tmp_dir / "site" / ".content" / "blog"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def output_dir(tmp_dir):
    """Output root (not created)."""
    return tmp_dir / "out"


@pytest.fixture
def log_dir(tmp_dir):
    """Log directory for CLI runs."""
    return tmp_dir / "logs"


# ----- Content Fixtures -----

@pytest.fixture
def write_content(content_dir):
    """Factory writing a content file into content_dir."""

    def _write(filename: str, body: str = "Body text.\n", directory: Path = None) -> Path:
        target = (directory or content_dir) / filename
        target.write_text(body, encoding="utf-8")
        return target

    return _write


@pytest.fixture
def sample_content(write_content):
    """Three posts across two years."""
    return [
        write_content("2023-05-01_Spring Notes.adoc", "Spring body.\n"),
        write_content("2023-01-10_New Year, New Plans!.adoc", "January body.\n"),
        write_content("2022-12-31_Year in Review.adoc", "December body.\n"),
    ]
