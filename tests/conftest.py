"""
conftest.py
-----------
Shared pytest fixtures for mtif tests.

Provides fixtures for:
- Fixture file locations
- Sample export documents
- Temporary directories
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def test_data_dir():
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def mtif_exports_dir(test_data_dir):
    """Path to sample Movable Type export files."""
    return test_data_dir / "mtif_exports"


@pytest.fixture
def example_export_path(mtif_exports_dir):
    """Two-entry export with comments, a ping and an excerpt."""
    return mtif_exports_dir / "example.txt"


@pytest.fixture
def example_export_text(example_export_path):
    return example_export_path.read_text(encoding="utf-8")


@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Export Content Fixtures -----

@pytest.fixture
def minimal_entry_text():
    """Smallest valid entry: a DATE line and nothing else."""
    return "DATE: 01/31/2002 03:31:05 PM\n-----\n--------"


@pytest.fixture
def full_metadata_entry_text():
    """Entry using every metadata key once, plus all plain sections."""
    return (
        "AUTHOR: Foo Bar\n"
        "TITLE: Every field\n"
        "BASENAME: every-field\n"
        "STATUS: Publish\n"
        "ALLOW COMMENTS: 1\n"
        "ALLOW PINGS: 0\n"
        "CONVERT BREAKS: markdown_with_smartypants\n"
        "PRIMARY CATEGORY: Media\n"
        "CATEGORY: News\n"
        "CATEGORY: Politics\n"
        'TAGS: "Movable Type",foo,bar\n'
        "DATE: 12/31/2012 13:34:56\n"
        "NO ENTRY: 1\n"
        "IMAGE: http://example.com/cover.png\n"
        "-----\n"
        "BODY:\n"
        "Body text.\n"
        "-----\n"
        "EXTENDED BODY:\n"
        "More text.\n"
        "-----\n"
        "EXCERPT:\n"
        "Short.\n"
        "-----\n"
        "KEYWORDS:\n"
        "alpha beta\n"
        "-----\n"
        "--------"
    )
