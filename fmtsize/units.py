"""
Unit strategies for fmtsize.

A strategy decides, for a given byte count, which divisor to scale by and
which label to print. Both answers come from the same bucket, so a size is
never divided by the megabyte threshold and labelled "KB".
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from fmtsize.constants import (
    CONVENTIONAL,
    CONVENTIONAL_LABELS,
    DECIMAL,
    Thresholds,
)


class UnitStrategy(ABC):
    """Selects a display divisor and unit name for a byte count.

    Subclasses only pick a threshold family; the bucketing rules are shared.
    """

    labels: ClassVar[tuple] = CONVENTIONAL_LABELS

    @property
    @abstractmethod
    def thresholds(self) -> Thresholds:
        """Byte counts at which KB, MB and GB start."""

    def bucket(self, size: int) -> int:
        """Index of the bucket ``size`` falls into (0=KB, 1=MB, 2=GB)."""
        if size < self.thresholds.megabyte:
            return 0
        if size < self.thresholds.gigabyte:
            return 1
        return 2

    def divisor(self, size: int) -> int:
        """The appropriate divisor for a given size.

        E.g. to get the number of megabytes in a file, divide the file size
        by the size in bytes of one megabyte.
        """
        return self.thresholds[self.bucket(size)]

    def name(self, size: int) -> str:
        """The appropriate unit name for a given size.

        Anything at least one megabyte and smaller than one gigabyte is
        called "MB".
        """
        return self.labels[self.bucket(size)]


@dataclass(frozen=True)
class Conventional(UnitStrategy):
    """Old-school formatting: a megabyte is 1024 kilobytes."""

    thresholds: ClassVar[Thresholds] = CONVENTIONAL


@dataclass(frozen=True)
class Decimal(UnitStrategy):
    """Powers of 1000, still labelled KB/MB/GB."""

    thresholds: ClassVar[Thresholds] = DECIMAL

