"""
Constants and configuration for fmtsize.

Defines the threshold families, the unit label table, and path configuration.
"""
from __future__ import annotations

from pathlib import Path
from typing import NamedTuple, Tuple


class Thresholds(NamedTuple):
    """Byte counts at which each unit starts."""
    kilobyte: int
    megabyte: int
    gigabyte: int


# --- Threshold Families ------------------------------------------------------

# Old-school: a megabyte is 1024 kilobytes
CONVENTIONAL = Thresholds(
    kilobyte=1 << 10,
    megabyte=1 << 20,
    gigabyte=1 << 30,
)

DECIMAL = Thresholds(
    kilobyte=1000,
    megabyte=1_000_000,
    gigabyte=1_000_000_000,
)


# --- Unit Labels -------------------------------------------------------------

# Indexed by bucket. Shared by every strategy, Decimal included.
CONVENTIONAL_LABELS: Tuple[str, str, str] = ('KB', 'MB', 'GB')


# --- Size Limits -------------------------------------------------------------

UINT64_MAX = (1 << 64) - 1


# --- Path Configuration ------------------------------------------------------

LOG_DIR = Path('./logs')
LOG_FILE_NAME = 'fmtsize.log'
