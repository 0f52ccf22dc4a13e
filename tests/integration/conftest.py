"""
Fixtures for pipeline and CLI integration tests.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import shutil

# --- Third-party imports ---
import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def exports_dir(tmp_path, example_export_path):
    """Directory holding a copy of the example export and a small second file."""
    directory = tmp_path / "exports"
    directory.mkdir()
    shutil.copy(example_export_path, directory / "example.txt")
    (directory / "notes.txt").write_text(
        "TITLE: Untitled note\nDATE: 03/01/2003 10:00:00\n-----\nBODY:\nNote.\n-----\n--------\n",
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def broken_export(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text(
        "AUTHOR: Foo\nSTATUS: Hidden\nDATE: 01/31/2002 03:31:05 PM\n-----\n--------\n",
        encoding="utf-8",
    )
    return path
