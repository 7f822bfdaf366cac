"""
fmtsize - Human-readable byte sizes

Formats byte counts such as file or memory sizes as short strings
("469.93 MB"), picking the largest unit up to gigabytes.
"""
from __future__ import annotations

__version__ = "0.1.0"

# Re-export main components for convenient imports
from fmtsize.units import (
    UnitStrategy,
    Conventional,
    Decimal,
)
from fmtsize.formatter import (
    ByteSizeFormatter,
    SizeOutOfRangeError,
    fmt_size,
)
from fmtsize.logging import setup_logging, teardown_logging

__all__ = [
    # Version info
    "__version__",
    # Strategies
    "UnitStrategy",
    "Conventional",
    "Decimal",
    # Formatter
    "ByteSizeFormatter",
    "SizeOutOfRangeError",
    "fmt_size",
    # Logging
    "setup_logging",
    "teardown_logging",
]
