#!/usr/bin/env python3
"""
mtif2yaml.py
-------------------
Convert Movable Type export files into one YAML file per entry.

Each entry becomes a YAML document holding its metadata, text blocks,
comments and pings (see MTIFEntry.to_dict()). Files are grouped by year:

    data/
    ├── exports/
    │   └── <blog>.txt
    └── yaml/
        └── <YYYY>
            └── <YYYY-MM-DD>_<basename>.yaml

Entries without a BASENAME are named by their position in the export
file instead (``2002-01-31_003.yaml``). Path separators in a BASENAME
are written as ``-`` so every file stays inside its year directory.

Programmatic API:
    from mtif.pipeline.mtif2yaml import convert_file, convert_directory
    stats = convert_file(input_path, output_dir, force_overwrite, logger)
    stats = convert_directory(input_dir, output_dir, force_overwrite=True)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import re
from pathlib import Path
from typing import Optional

# --- Third party ---
import yaml

# --- Local imports ---
from mtif.core.cli import ConversionStats
from mtif.core.exceptions import Mtif2YamlError
from mtif.core.logging_manager import MTIFLogger, safe_logger
from mtif.dataclasses.mtif_entry import MTIFEntry


_PATH_SEPARATORS = re.compile(r"[\\/\x00]")


# --- YAML ---
class _EntryDumper(yaml.SafeDumper):
    """SafeDumper writing multi-line text as literal blocks."""


def _str_representer(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


_EntryDumper.add_representer(str, _str_representer)


# --- Helpers ---
def entry_filename(entry: MTIFEntry, index: int) -> str:
    """
    File name for an entry: ``<YYYY-MM-DD>_<basename-or-index>.yaml``.

    Args:
        entry: Assembled entry
        index: 1-based position of the entry in its export file
    """
    stem = _PATH_SEPARATORS.sub("-", entry.metadata.basename or "") or f"{index:03d}"
    return f"{entry.metadata.date.date().isoformat()}_{stem}.yaml"


def entry_to_yaml(entry: MTIFEntry) -> str:
    """Serialize one entry as a YAML document (keys in record order)."""
    return yaml.dump(
        entry.to_dict(),
        Dumper=_EntryDumper,
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
    )


# --- Conversion ---
def process_entry(
    entry: MTIFEntry,
    output_dir: Path,
    force_overwrite: bool,
    logger: Optional[MTIFLogger] = None,
    index: int = 1,
) -> Optional[Path]:
    """
    Write a single MTIFEntry to its YAML file.

    Processing Flow:
    1. Creates the year directory (output_dir/YYYY/)
    2. Skips the entry if its file exists and force_overwrite is off
    3. Serializes with PyYAML and writes as UTF-8

    Args:
        entry: Assembled entry
        output_dir: Base output directory (typically YAML_DIR)
        force_overwrite: If True, overwrite existing files
        logger: Optional logger for debug output
        index: 1-based position of the entry, used when it has no basename

    Returns:
        Path to the written file, or None if skipped

    Raises:
        Mtif2YamlError: If serialization or the write fails
    """
    safe_logger(logger).log_debug(
        f"Processing entry dated {entry.metadata.date.isoformat()}"
    )

    year_dir = output_dir / str(entry.metadata.date.year)
    output_path = year_dir / entry_filename(entry, index)

    existed = output_path.exists()
    if existed and not force_overwrite:
        safe_logger(logger).log_debug(f"{output_path.name} exists, skipping")
        return None

    try:
        content = entry_to_yaml(entry)
        year_dir.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
    except (OSError, yaml.YAMLError) as e:
        raise Mtif2YamlError(f"Failed to write {output_path}: {e}") from e

    action = "Overwrote" if existed else "Created"
    safe_logger(logger).log_debug(f"{action} file: {output_path.name}")

    return output_path


def convert_file(
    input_path: Path,
    output_dir: Path,
    force_overwrite: bool = False,
    logger: Optional[MTIFLogger] = None,
    fix_encoding: bool = False,
) -> ConversionStats:
    """
    Convert one export file into per-entry YAML files.

    Parsing is all-or-nothing: a malformed file produces no YAML at all.
    Once parsed, a failure to write one entry is counted and logged, and
    the remaining entries are still written.

    Args:
        input_path: Export file (UTF-8 text)
        output_dir: Base output directory (typically YAML_DIR)
        force_overwrite: If True, overwrite existing YAML files
        logger: Optional logger for operation tracking
        fix_encoding: Repair mojibake with ftfy before parsing

    Returns:
        ConversionStats object with processing results

    Raises:
        Mtif2YamlError: If the input is missing or cannot be parsed
    """
    stats = ConversionStats()

    if not input_path.exists():
        raise Mtif2YamlError(f"Input file not found: {input_path}")

    safe_logger(logger).log_operation(
        "convert_file_start", {"input": str(input_path), "output": str(output_dir)}
    )

    try:
        entries = MTIFEntry.from_file(input_path, fix_encoding=fix_encoding)
    except Exception as e:
        safe_logger(logger).log_error(e, {"operation": "parse_file", "file": str(input_path)})
        raise Mtif2YamlError(f"Failed to parse {input_path}: {e}") from e

    stats.entries_parsed = len(entries)
    stats.comments = sum(len(entry.comments) for entry in entries)
    stats.pings = sum(len(entry.pings) for entry in entries)
    safe_logger(logger).log_operation(
        "entries_parsed", {"file": input_path.name, "count": len(entries)}
    )

    if not entries:
        safe_logger(logger).log_info(f"No entries found in {input_path}")
        stats.files_processed = 1
        return stats

    output_dir.mkdir(parents=True, exist_ok=True)

    for index, entry in enumerate(entries, start=1):
        try:
            result = process_entry(entry, output_dir, force_overwrite, logger, index)
            if result:
                stats.entries_written += 1
            else:
                stats.entries_skipped += 1
        except Mtif2YamlError as e:
            stats.errors += 1
            safe_logger(logger).log_error(
                e, {"operation": "process_entry", "date": str(entry.metadata.date)}
            )

    stats.files_processed = 1

    safe_logger(logger).log_operation("convert_file_complete", {"stats": stats.summary()})

    return stats


def convert_directory(
    input_dir: Path,
    output_dir: Path,
    pattern: str = "*.txt",
    force_overwrite: bool = False,
    logger: Optional[MTIFLogger] = None,
    fix_encoding: bool = False,
) -> ConversionStats:
    """
    Convert every export file under a directory.

    A file that fails to parse is counted as an error and skipped.

    Returns:
        ConversionStats with results

    Raises:
        Mtif2YamlError: If directory not found
    """
    total_stats = ConversionStats()

    if not input_dir.is_dir():
        raise Mtif2YamlError(f"Input directory not found: {input_dir}")

    export_files = sorted(input_dir.rglob(pattern))
    if not export_files:
        safe_logger(logger).log_info(f"No {pattern} files found in {input_dir}")
        return total_stats

    safe_logger(logger).log_operation(
        "convert_directory_start",
        {"input": str(input_dir), "files_found": len(export_files)},
    )

    for export_file in export_files:
        try:
            safe_logger(logger).log_info(f"Processing {export_file.name}")
            stats = convert_file(
                export_file, output_dir, force_overwrite, logger, fix_encoding
            )
            total_stats.merge(stats)
        except Mtif2YamlError as e:
            total_stats.errors += 1
            safe_logger(logger).log_error(
                e, {"operation": "convert_file", "file": str(export_file)}
            )

    safe_logger(logger).log_operation(
        "convert_directory_complete", {"stats": total_stats.summary()}
    )

    return total_stats
