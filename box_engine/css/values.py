"""
CSS value types.

Values are immutable and compare by content.
"""

from enum import Enum
from typing import Tuple


class Unit(Enum):
    """Length units."""
    PX = "px"


class Value:
    """Base class for specified CSS values."""

    def to_px(self) -> float:
        """Return the size of a length in px, or zero for non-lengths."""
        return 0.0

    def _key(self) -> Tuple:
        raise NotImplementedError("Subclasses must implement _key")

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._key())


class Keyword(Value):
    """An identifier value such as ``auto`` or ``block``."""

    __slots__ = ('name',)

    def __init__(self, name: str):
        self.name = name

    def _key(self) -> Tuple:
        return (self.name,)

    def __repr__(self) -> str:
        return f"Keyword({self.name!r})"


class Length(Value):
    """A numeric magnitude with a unit."""

    __slots__ = ('value', 'unit')

    def __init__(self, value: float, unit: Unit = Unit.PX):
        self.value = float(value)
        self.unit = unit

    def to_px(self) -> float:
        if self.unit == Unit.PX:
            return self.value
        return 0.0

    def _key(self) -> Tuple:
        return (self.value, self.unit)

    def __repr__(self) -> str:
        return f"Length({self.value:g}, {self.unit.value})"


class ColorValue(Value):
    """An RGBA color, 0-255 per channel."""

    __slots__ = ('r', 'g', 'b', 'a')

    def __init__(self, r: int, g: int, b: int, a: int = 255):
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    def _key(self) -> Tuple:
        return (self.r, self.g, self.b, self.a)

    def __repr__(self) -> str:
        return f"ColorValue({self.r}, {self.g}, {self.b}, {self.a})"


AUTO = Keyword("auto")


def px(value: float) -> Length:
    """Shorthand for a pixel length."""
    return Length(value, Unit.PX)
