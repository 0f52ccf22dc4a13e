#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and statistics for mtif commands.

Functions:
    setup_logger: Initialize MTIFLogger for CLI operations

Classes:
    OperationStats: Base class for all statistics
    ConversionStats: For export file conversions (mtif2yaml, validate)

Usage:
    from mtif.core.cli import setup_logger, ConversionStats

    logger = setup_logger(log_dir, "mtif2yaml")
    stats = ConversionStats()
    stats.files_processed += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from mtif.core.logging_manager import MTIFLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> MTIFLogger:
    """
    Setup logging for CLI operations.

    Log files go to ``<log_dir>/operations``.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier (e.g. 'mtif2yaml')

    Returns:
        Configured MTIFLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return MTIFLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        files_processed: Number of files successfully processed
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    files_processed: int = 0
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.files_processed < 0:
            raise ValueError(f"files_processed must be non-negative, got {self.files_processed}")
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Elapsed seconds since start_time, cached after the first call."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return (
            f"{self.files_processed} files processed, "
            f"{self.errors} errors, "
            f"{self.duration():.2f}s"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "files_processed": self.files_processed,
            "errors": self.errors,
            "duration": self.duration(),
        }


@dataclass
class ConversionStats(OperationStats):
    """
    Statistics for export file conversions.

    Attributes:
        entries_parsed: Entries read from export files
        entries_written: YAML files written
        entries_skipped: Entries skipped because the output already existed
        comments: Comments found across all parsed entries
        pings: Pings found across all parsed entries
    """
    entries_parsed: int = 0
    entries_written: int = 0
    entries_skipped: int = 0
    comments: int = 0
    pings: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in ("entries_parsed", "entries_written", "entries_skipped", "comments", "pings"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def merge(self, other: ConversionStats) -> None:
        """Add the counters of another run (one file) into this one."""
        self.files_processed += other.files_processed
        self.errors += other.errors
        self.entries_parsed += other.entries_parsed
        self.entries_written += other.entries_written
        self.entries_skipped += other.entries_skipped
        self.comments += other.comments
        self.pings += other.pings

    def summary(self) -> str:
        parts = [
            f"{self.files_processed} files processed",
            f"{self.entries_parsed} entries parsed",
            f"{self.entries_written} written",
            f"{self.entries_skipped} skipped",
            f"{self.comments} comments",
            f"{self.pings} pings",
            f"{self.errors} errors",
            f"{self.duration():.2f}s",
        ]
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "entries_parsed": self.entries_parsed,
            "entries_written": self.entries_written,
            "entries_skipped": self.entries_skipped,
            "comments": self.comments,
            "pings": self.pings,
        })
        return d
