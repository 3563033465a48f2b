"""
Pytest configuration and fixtures for dirsort tests.
"""

from pathlib import Path

import pytest

SAMPLE_FILES = {
    "a.jpg": "jpeg bytes",
    "notes": "no extension here",
    "README.MD": "# readme",
    "script.py": "print('hi')\n",
}


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """Create a source directory with a few files and one nested file."""
    source = tmp_path / "source"
    source.mkdir()

    for name, content in SAMPLE_FILES.items():
        (source / name).write_text(content)

    nested = source / "sub"
    nested.mkdir()
    (nested / "nested.txt").write_text("nested")

    return source


@pytest.fixture
def empty_dir(tmp_path: Path) -> Path:
    """Create an empty directory."""
    empty = tmp_path / "empty"
    empty.mkdir()
    return empty
