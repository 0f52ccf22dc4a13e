"""
Tests for CLI statistics and logger setup.
"""
import pytest

from mtif.core.cli import ConversionStats, OperationStats, setup_logger
from mtif.core.logging_manager import MTIFLogger


class TestSetupLogger:

    def test_logs_under_operations(self, tmp_path):
        logger = setup_logger(tmp_path, "mtif2yaml")
        try:
            assert isinstance(logger, MTIFLogger)
            assert logger.log_dir == tmp_path / "operations"
            assert (tmp_path / "operations").is_dir()
        finally:
            logger.close()


class TestOperationStats:

    def test_defaults(self):
        stats = OperationStats()
        assert stats.files_processed == 0
        assert stats.errors == 0
        assert stats.duration() >= 0

    def test_negative_counts_rejected(self):
        with pytest.raises(ValueError):
            OperationStats(errors=-1)

    def test_duration_is_cached(self):
        stats = OperationStats()
        assert stats.duration() == stats.duration()


class TestConversionStats:

    def test_merge(self):
        total = ConversionStats()
        total.merge(ConversionStats(files_processed=1, entries_parsed=2, entries_written=2, comments=3, pings=1))
        total.merge(ConversionStats(files_processed=1, entries_parsed=1, entries_skipped=1, errors=1))
        assert total.files_processed == 2
        assert total.entries_parsed == 3
        assert total.entries_written == 2
        assert total.entries_skipped == 1
        assert total.comments == 3
        assert total.pings == 1
        assert total.errors == 1

    def test_negative_entry_count_rejected(self):
        with pytest.raises(ValueError):
            ConversionStats(entries_parsed=-1)

    def test_summary(self):
        summary = ConversionStats(files_processed=1, entries_parsed=2).summary()
        assert "1 files processed" in summary
        assert "2 entries parsed" in summary

    def test_to_dict(self):
        data = ConversionStats(pings=4).to_dict()
        assert data["pings"] == 4
        assert set(data) >= {"files_processed", "errors", "duration", "entries_written"}
