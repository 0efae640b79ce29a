"""Unit-tagged size arithmetic.

Raw byte counts and thresholds expressed in kilobytes or megabytes are kept
apart by tagging every quantity with its unit. Conversions use truncating
integer division one step at a time, so bytes to megabytes is two
divisions by 1024, never a single division by 1024 * 1024.
"""

from dataclasses import dataclass
from enum import Enum

BYTES_PER_KILOBYTE = 1024
KILOBYTES_PER_MEGABYTE = 1024


class SizeUnit(str, Enum):
    """Unit a size quantity is expressed in.

    Attributes:
        BYTES: Raw byte count.
        KILOBYTES: Units of 1024 bytes.
        MEGABYTES: Units of 1024 kilobytes.
    """

    BYTES = "bytes"
    KILOBYTES = "kilobytes"
    MEGABYTES = "megabytes"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS: dict[SizeUnit, str] = {
    SizeUnit.BYTES: "B",
    SizeUnit.KILOBYTES: "KB",
    SizeUnit.MEGABYTES: "MB",
}

# Units ordered from smallest to largest
_UNIT_ORDER: tuple[SizeUnit, ...] = (SizeUnit.BYTES, SizeUnit.KILOBYTES, SizeUnit.MEGABYTES)


def bytes_to_kilobytes(value: int) -> int:
    """Convert a byte count to whole kilobytes (truncating)."""
    return value // BYTES_PER_KILOBYTE


def bytes_to_megabytes(value: int) -> int:
    """Convert a byte count to whole megabytes (two truncating divisions)."""
    return value // BYTES_PER_KILOBYTE // KILOBYTES_PER_MEGABYTE


@dataclass(frozen=True, slots=True)
class Size:
    """Integer quantity tagged with a unit.

    Comparison and addition are only defined between quantities of the
    same unit; mixing units raises TypeError. Use ``to()`` to convert first.

    Attributes:
        value: Non-negative integer amount.
        unit: Unit of ``value``.
    """

    value: int
    unit: SizeUnit

    def __post_init__(self) -> None:
        """Validate size data after initialization."""
        if self.value < 0:
            msg = f"Size cannot be negative, got {self.value}"
            raise ValueError(msg)

    @classmethod
    def of_bytes(cls, value: int) -> "Size":
        return cls(value, SizeUnit.BYTES)

    @classmethod
    def of_kilobytes(cls, value: int) -> "Size":
        return cls(value, SizeUnit.KILOBYTES)

    @classmethod
    def of_megabytes(cls, value: int) -> "Size":
        return cls(value, SizeUnit.MEGABYTES)

    def to(self, unit: SizeUnit) -> "Size":
        """Convert this quantity to another unit.

        Converting to a larger unit truncates at every step. Converting to
        a smaller unit is exact.

        Args:
            unit: Target unit.

        Returns:
            New Size expressed in ``unit``.
        """
        current = _UNIT_ORDER.index(self.unit)
        target = _UNIT_ORDER.index(unit)
        value = self.value
        while current < target:
            value //= 1024
            current += 1
        while current > target:
            value *= 1024
            current -= 1
        return Size(value, unit)

    def _check_unit(self, other: object) -> "Size":
        if not isinstance(other, Size):
            msg = f"Cannot compare Size with {type(other).__name__}"
            raise TypeError(msg)
        if other.unit != self.unit:
            msg = f"Cannot mix {self.unit.value} with {other.unit.value}"
            raise TypeError(msg)
        return other

    def __lt__(self, other: object) -> bool:
        return self.value < self._check_unit(other).value

    def __le__(self, other: object) -> bool:
        return self.value <= self._check_unit(other).value

    def __gt__(self, other: object) -> bool:
        return self.value > self._check_unit(other).value

    def __ge__(self, other: object) -> bool:
        return self.value >= self._check_unit(other).value

    def __add__(self, other: object) -> "Size":
        return Size(self.value + self._check_unit(other).value, self.unit)

    def __str__(self) -> str:
        return f"{self.value} {self.unit.symbol}"
