#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants for the mtif tools.

All paths are relative to the project root:
    ROOT/
    ├── mtif/          # Package sources
    ├── data/
    │   ├── exports/   # Movable Type export files (.txt)
    │   └── yaml/      # Per-entry YAML output
    └── logs/          # Application logs

The command line uses these as option defaults; every one of them can
be overridden per invocation.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/mtif/core/paths.py.
    """
    # paths.py -> core/ -> mtif/ -> ROOT/
    return Path(__file__).resolve().parent.parent.parent


# ----- Project directory -----
ROOT: Path = _get_project_root()
PACKAGE_DIR = ROOT / "mtif"

# ---- Data ----
DATA_DIR = ROOT / "data"
EXPORT_DIR = DATA_DIR / "exports"
YAML_DIR = DATA_DIR / "yaml"

# ---- Logs ----
LOG_DIR = ROOT / "logs"
