"""
Session records and the column schema they are stored with.
"""
import datetime
import logging
import math
from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional

from ..utils.errors import ParseError
from .hours import Hours
from .period import Period

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
MAX_SECONDS = 15 * 3600

UNFINISHED = "unfinished"
UNKNOWN = "?"
NOT_COMPUTED = "-"
NOT_STARTED = "Not started"
NOT_FINISHED = "Not finished"


def format_timestamp(moment: datetime.datetime) -> str:
    return moment.strftime(TIMESTAMP_FORMAT)


def parse_timestamp(text: str) -> datetime.datetime:
    try:
        return datetime.datetime.strptime(text, TIMESTAMP_FORMAT)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Invalid timestamp {text!r}: {e}") from e


def parse_hours(text: str) -> Optional[float]:
    """Manual hours override as float, or None when empty or unparseable"""
    if not text:
        return None
    try:
        value = float(text)
    except ValueError:
        logger.debug(f"Ignoring unparseable hours override {text!r}")
        return None
    if not math.isfinite(value):
        logger.debug(f"Ignoring non-finite hours override {text!r}")
        return None
    return value


@dataclass
class Field:
    name: str
    type: str


@dataclass
class Schema:
    """Column metadata in the pandas ``orient='table'`` layout"""
    fields: List[Field]
    primary_key: List[str] = field(default_factory=lambda: ['index'])
    pandas_version: str = '1.4.0'

    @classmethod
    def default(cls) -> 'Schema':
        return cls(fields=[
            Field('index', 'integer'),
            Field('rowid', 'integer'),
            Field('name', 'string'),
            Field('year', 'integer'),
            Field('month', 'integer'),
            Field('start', 'string'),
            Field('end', 'string'),
            Field('hours', 'string'),
        ])

    def to_dict(self) -> Dict:
        return {
            'fields': [asdict(f) for f in self.fields],
            'primaryKey': list(self.primary_key),
            'pandas_version': self.pandas_version,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'Schema':
        try:
            return cls(
                fields=[Field(f['name'], f['type']) for f in data.get('fields', [])],
                primary_key=list(data.get('primaryKey', ['index'])),
                pandas_version=data.get('pandas_version', '1.4.0'),
            )
        except (AttributeError, KeyError, TypeError) as e:
            raise ParseError(f"Invalid schema {data!r}: {e}") from e


@dataclass
class HoursRecord:
    """One work session of one person.

    ``start`` and ``end`` hold ``YYYY-MM-DD HH:MM:SS`` strings; an empty
    string means the value is absent. ``hours`` is a manual override,
    empty unless an admin set it.
    """
    index: int
    rowid: int
    name: str
    year: int
    month: int
    start: str = ''
    end: str = ''
    hours: str = ''

    FIELDS = ('index', 'rowid', 'name', 'year', 'month', 'start', 'end', 'hours')

    def period(self) -> Period:
        return Period(self.year, self.month)

    def is_open(self) -> bool:
        return self.end == ''

    def start_dt(self) -> Optional[datetime.datetime]:
        if not self.start:
            return None
        return parse_timestamp(self.start)

    def end_dt(self) -> Optional[datetime.datetime]:
        if not self.end:
            return None
        return parse_timestamp(self.end)

    def duration(self) -> Optional[datetime.timedelta]:
        """Elapsed time, None while either timestamp is absent"""
        start = self.start_dt()
        end = self.end_dt()
        if start is None or end is None:
            return None
        return end - start

    def calculate_hours(self) -> float:
        duration = self.duration()
        if duration is None:
            raise ParseError(f"Record {self.rowid} has no complete start/end pair")
        return duration.total_seconds() / 3600.0

    def hours_worked(self) -> Hours:
        manual = parse_hours(self.hours)
        if manual is not None:
            return Hours(manual)
        try:
            return Hours(self.calculate_hours())
        except ParseError:
            return Hours(0.0)

    def display_hours(self) -> str:
        """Hours shown to the user: manual override first, then computed"""
        manual = parse_hours(self.hours)
        if manual is not None:
            return str(Hours(manual))
        try:
            duration = self.duration()
        except ParseError as e:
            logger.debug(f"Record {self.rowid}: {e}")
            return UNKNOWN
        if duration is not None and 0 < duration.total_seconds() < MAX_SECONDS:
            return str(Hours.from_seconds(duration.total_seconds()))
        return UNFINISHED

    def finished(self) -> bool:
        try:
            duration = self.duration()
        except ParseError:
            return False
        return duration is not None and 0 < duration.total_seconds() < MAX_SECONDS

    def worked(self) -> str:
        if not self.start:
            return NOT_STARTED
        try:
            duration = self.duration()
        except ParseError:
            return UNKNOWN
        if duration is None:
            return NOT_FINISHED
        seconds = int(duration.total_seconds())
        if seconds <= 0 or seconds >= MAX_SECONDS:
            return NOT_FINISHED
        return f"{(seconds // 3600) % 24:02d}:{(seconds // 60) % 60:02d}"

    def date(self) -> str:
        try:
            start = self.start_dt()
        except ParseError:
            return UNKNOWN
        if start is None:
            return UNKNOWN
        return start.strftime("%Y-%m-%d")

    def start_time(self) -> str:
        return self._time_of(self.start)

    def end_time(self) -> str:
        return self._time_of(self.end)

    def original_hours(self) -> str:
        """Computed duration, ignoring any manual override"""
        try:
            return str(Hours(self.calculate_hours()))
        except ParseError:
            return NOT_COMPUTED

    @staticmethod
    def _time_of(text: str) -> str:
        if not text:
            return ''
        try:
            return parse_timestamp(text).strftime("%H:%M")
        except ParseError:
            return UNKNOWN

    def to_dict(self) -> Dict:
        return {name: getattr(self, name) for name in self.FIELDS}

    @classmethod
    def from_dict(cls, data: Dict) -> 'HoursRecord':
        try:
            return cls(
                index=int(data['index']),
                rowid=int(data['rowid']),
                name=str(data['name']),
                year=int(data['year']),
                month=int(data['month']),
                start=data.get('start') or '',
                end=data.get('end') or '',
                hours=_text(data.get('hours')),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(f"Invalid hours record {data!r}: {e}") from e


def _text(value) -> str:
    # older documents stored hours as a number or null
    if value is None:
        return ''
    return str(value)
