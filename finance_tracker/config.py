"""Configuration management for the finance tracker.

This module centralizes all configuration values including paths,
domain defaults, and environment variable overrides.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base project root - assumes this file is in finance_tracker/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directories
DATA_DIR = Path(os.getenv("FINTRACK_DATA_DIR", _PROJECT_ROOT / "data"))
EXPORTS_DIR = Path(os.getenv("FINTRACK_EXPORTS_DIR", DATA_DIR / "exports"))

# Remembered filter/sort selections
PREFERENCES_PATH = Path(
    os.getenv("FINTRACK_PREFERENCES_PATH", DATA_DIR / "preferences.json")
).resolve()

LOG_LEVEL = os.getenv("FINTRACK_LOG_LEVEL", "INFO").upper()

# Labels substituted for absent optional data
UNCATEGORIZED_LABEL = "Uncategorized"
NO_GROUP_LABEL = "No group"
NO_GROUP_ID = "no_group"
FIXED_EXPENSE_PREFIX = "(Fixed expense) "

# External due-date format used by fixed expenses (dd/MM/yyyy)
DUE_DATE_FORMAT = "%d/%m/%Y"

ITEMS_PER_PAGE = 20
PROJECTION_MONTHS = 6


def ensure_data_directories() -> None:
    """Create all required data directories if they don't exist."""
    for directory in [DATA_DIR, EXPORTS_DIR, PREFERENCES_PATH.parent]:
        directory.mkdir(parents=True, exist_ok=True)
