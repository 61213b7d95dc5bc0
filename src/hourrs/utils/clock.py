"""
Clock sources for hourrs.

Everything that needs "now" takes a clock instead of calling
``datetime.now()`` directly, so tests can pin time.
"""
import datetime


class SystemClock:
    """Local wall clock"""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now()


class FixedClock:
    """Clock that only moves when told to"""

    def __init__(self, moment: datetime.datetime):
        self.moment = moment

    def now(self) -> datetime.datetime:
        return self.moment

    def set(self, moment: datetime.datetime):
        self.moment = moment

    def advance(self, **kwargs) -> datetime.datetime:
        """Move the clock forward by ``datetime.timedelta(**kwargs)``."""
        self.moment = self.moment + datetime.timedelta(**kwargs)
        return self.moment
