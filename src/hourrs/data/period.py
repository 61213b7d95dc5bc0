"""
Calendar month buckets used to group and report sessions.
"""
import datetime
import re
from dataclasses import dataclass

from ..utils.errors import ParseError

_PERIOD_RE = re.compile(r'^\s*(\d{1,4})[/-](\d{1,2})\s*$')


@dataclass(frozen=True, order=True)
class Period:
    """A (year, month) pair ordered by year, then month.

    The month is not range checked on construction; only ``next`` and
    ``previous`` roll over.
    """
    year: int
    month: int

    @classmethod
    def current(cls, clock=None) -> 'Period':
        now = clock.now() if clock is not None else datetime.datetime.now()
        return cls.of(now)

    @classmethod
    def of(cls, moment) -> 'Period':
        """Period containing a date or datetime"""
        return cls(moment.year, moment.month)

    @classmethod
    def parse(cls, text: str) -> 'Period':
        """Parse ``YYYY/MM`` (or ``YYYY-MM``)."""
        match = _PERIOD_RE.match(text or '')
        if not match:
            raise ParseError(f"Invalid period: {text!r} (expected YYYY/MM)")
        year, month = int(match.group(1)), int(match.group(2))
        if not 1 <= month <= 12:
            raise ParseError(f"Invalid month in period: {text!r}")
        return cls(year, month)

    def next(self) -> 'Period':
        if self.month == 12:
            return Period(self.year + 1, 1)
        return Period(self.year, self.month + 1)

    def previous(self) -> 'Period':
        if self.month == 1:
            return Period(self.year - 1, 12)
        return Period(self.year, self.month - 1)

    def is_sentinel(self) -> bool:
        return self in (FIRST_PERIOD_SEED, LAST_PERIOD_SEED)

    def __str__(self):
        return f"{self.year:04d}/{self.month:02d}"


# Fold seeds for first_period/last_period; returned unchanged for an empty frame.
FIRST_PERIOD_SEED = Period(9999, 99)
LAST_PERIOD_SEED = Period(0, 0)
