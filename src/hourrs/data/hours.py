"""
Duration value type for worked hours.
"""
import math
from typing import Iterable


class Hours:
    """A number of hours, rendered as ``HH:MM``.

    Rendering floors the hour part and truncates the minutes, it never
    rounds. Negative values go through the same arithmetic, so
    ``Hours(-1.5)`` renders as ``-2:30``.
    """

    __slots__ = ('value',)

    def __init__(self, value: float = 0.0):
        self.value = float(value)

    @classmethod
    def from_seconds(cls, seconds: float) -> 'Hours':
        return cls(seconds / 3600.0)

    @classmethod
    def total(cls, items: Iterable['Hours']) -> 'Hours':
        return sum(items, cls(0.0))

    def __add__(self, other):
        if isinstance(other, Hours):
            return Hours(self.value + other.value)
        if isinstance(other, (int, float)):
            return Hours(self.value + other)
        return NotImplemented

    def __radd__(self, other):
        # sum() starts from int 0 unless given a start value
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Hours):
            return Hours(self.value - other.value)
        if isinstance(other, (int, float)):
            return Hours(self.value - other)
        return NotImplemented

    def __eq__(self, other):
        if isinstance(other, Hours):
            return self.value == other.value
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Hours):
            return self.value < other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __float__(self):
        return self.value

    def __bool__(self):
        return self.value != 0.0

    def __str__(self):
        if not math.isfinite(self.value):
            return "?"
        hours = math.floor(self.value)
        minutes = math.trunc((self.value - hours) * 60)
        return f"{hours:02d}:{minutes:02d}"

    def __repr__(self):
        return f"Hours({self.value!r})"
