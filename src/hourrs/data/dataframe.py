"""
Ordered collection of session records and the queries run over it.
"""
from typing import Dict, Iterator, List, Optional

from ..utils.errors import ParseError
from .hours import Hours
from .period import Period, FIRST_PERIOD_SEED, LAST_PERIOD_SEED
from .record import HoursRecord, Schema

NO_STATUS = " - "


class HoursDataFrame:
    """Records in append order plus their column schema.

    Append order matters: "last record for a name" always means the one
    appended most recently.
    """

    def __init__(self, schema: Optional[Schema] = None, data: Optional[List[HoursRecord]] = None):
        self.schema = schema or Schema.default()
        self.data = data if data is not None else []

    def __len__(self):
        return len(self.data)

    def __iter__(self) -> Iterator[HoursRecord]:
        return iter(self.data)

    def append(self, record: HoursRecord) -> HoursRecord:
        self.data.append(record)
        return record

    def get(self, rowid: int) -> Optional[HoursRecord]:
        for record in self.data:
            if record.rowid == rowid:
                return record
        return None

    def records_for(self, name: str) -> List[HoursRecord]:
        return [record for record in self.data if record.name == name]

    def last_for(self, name: str) -> Optional[HoursRecord]:
        records = self.records_for(name)
        return records[-1] if records else None

    def for_period(self, name: str, period: Period) -> 'HoursDataFrame':
        return HoursDataFrame(
            schema=self.schema,
            data=[r for r in self.data if r.name == name and r.period() == period],
        )

    def hours_for_period(self, name: str, period: Period) -> Hours:
        return Hours.total(r.hours_worked() for r in self.for_period(name, period))

    def status_for_period(self, name: str, period: Period) -> str:
        matching = self.for_period(name, period).data
        if not matching:
            return NO_STATUS
        return matching[-1].worked()

    def first_period(self) -> Period:
        """Earliest period present, or ``Period(9999, 99)`` when empty"""
        first = FIRST_PERIOD_SEED
        for record in self.data:
            first = min(first, record.period())
        return first

    def last_period(self) -> Period:
        """Latest period present, or ``Period(0, 0)`` when empty"""
        last = LAST_PERIOD_SEED
        for record in self.data:
            last = max(last, record.period())
        return last

    def to_dict(self) -> Dict:
        return {
            'schema': self.schema.to_dict(),
            'data': [record.to_dict() for record in self.data],
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'HoursDataFrame':
        rows = data.get('data') or []
        if not isinstance(rows, list):
            raise ParseError(f"Record table must be a list, got {type(rows).__name__}")
        schema = Schema.from_dict(data['schema']) if data.get('schema') else Schema.default()
        return cls(
            schema=schema,
            data=[HoursRecord.from_dict(row) for row in rows],
        )
