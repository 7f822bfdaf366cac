"""
Lazy byte-size formatting.

``fmt_size`` captures a byte count and a unit strategy; nothing is computed
until the resulting formatter is turned into text.

    >>> str(fmt_size(492_752_310, Conventional()))
    '469.93 MB'
"""
from __future__ import annotations

import operator
import struct
from dataclasses import dataclass, field

from fmtsize.constants import UINT64_MAX
from fmtsize.logging import logger
from fmtsize.units import Conventional, UnitStrategy


_SINGLE = struct.Struct('<f')


class SizeOutOfRangeError(ValueError):
    """Raised when a size is not a valid unsigned 64-bit byte count."""


def _single(value: float) -> float:
    """Round ``value`` to the nearest IEEE-754 single-precision float."""
    return _SINGLE.unpack(_SINGLE.pack(value))[0]


def _int_to_single(n: int) -> float:
    """Round a non-negative int to binary32 in one step, ties to even.

    float() alone would round to 53 bits first and then again to 24.
    """
    shift = n.bit_length() - 24
    if shift <= 0:
        return float(n)
    q, r = divmod(n, 1 << shift)
    half = 1 << (shift - 1)
    if r > half or (r == half and q & 1):
        q += 1
    return float(q << shift)


def _check_size(size: int) -> int:
    """Coerce ``size`` to a plain int and make sure it fits in a u64."""
    if isinstance(size, bool):
        raise TypeError("size must be an integer byte count, not bool")
    try:
        n = operator.index(size)
    except TypeError:
        raise TypeError(
            f"size must be an integer byte count, not {type(size).__name__}"
        ) from None
    if not 0 <= n <= UINT64_MAX:
        logger.warning(f"Rejected byte count outside u64 range: {n}")
        raise SizeOutOfRangeError(f"size must be between 0 and {UINT64_MAX}, got {n}")
    return n


@dataclass(frozen=True)
class ByteSizeFormatter:
    """Lazy memory size formatter.

    Attributes:
        size: Raw byte count
        fmt: Unit strategy used to pick the divisor and label
    """
    size: int
    fmt: UnitStrategy = field(default_factory=Conventional)

    def __post_init__(self) -> None:
        object.__setattr__(self, 'size', _check_size(self.size))

    @property
    def value(self) -> float:
        """Size scaled by the strategy's divisor, in single precision."""
        divisor = _int_to_single(self.fmt.divisor(self.size))
        return _single(_int_to_single(self.size) / divisor)

    @property
    def unit(self) -> str:
        """Unit label for the size."""
        return self.fmt.name(self.size)

    def __str__(self) -> str:
        return f"{self.value:.2f} {self.unit}"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)


def fmt_size(size: int, fmt: UnitStrategy | None = None) -> ByteSizeFormatter:
    """Format a memory size value according to a given unit strategy.

    The formatter resulting from this call is lazy.

    Args:
        size: Byte count, 0 through 2**64 - 1
        fmt: Unit strategy; defaults to Conventional

    Returns:
        ByteSizeFormatter that renders on str() or format()

    Raises:
        TypeError: If size is not an integer
        SizeOutOfRangeError: If size is negative or larger than a u64
    """
    if fmt is None:
        fmt = Conventional()
    formatter = ByteSizeFormatter(size, fmt)
    logger.debug(f"Wrapped {formatter.size} bytes with {formatter.fmt!r}")
    return formatter
