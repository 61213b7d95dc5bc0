"""
Aggregate root: session records plus the roster of known names.
"""
import enum
import logging
from typing import List, Optional

from ..utils.clock import SystemClock
from ..utils.errors import AlreadyStartedError, NotFoundError, ParseError, ValidationError
from .dataframe import HoursDataFrame
from .hours import Hours
from .period import Period
from .record import HoursRecord, format_timestamp, parse_hours

logger = logging.getLogger(__name__)


class EndHoursPolicy(enum.Enum):
    """What ``end`` does with the ``hours`` column"""
    DEFER = 'defer'  # clear it, display derives from timestamps
    STORE = 'store'  # write the elapsed hours as a float string


class HoursData:
    """Records and roster, loaded and saved together.

    Mutations only change memory; call ``save`` afterwards. A failed
    save leaves memory ahead of the store until the next good save.
    """

    def __init__(self, dataframe: Optional[HoursDataFrame] = None, names: Optional[List[str]] = None,
                 clock=None, strict_start: bool = True,
                 end_policy: EndHoursPolicy = EndHoursPolicy.DEFER):
        self.dataframe = dataframe if dataframe is not None else HoursDataFrame()
        self.names = list(names) if names is not None else []
        self.clock = clock or SystemClock()
        self.strict_start = strict_start
        self.end_policy = EndHoursPolicy(end_policy)

    # --- persistence ---

    @classmethod
    def load(cls, store, **options) -> 'HoursData':
        return store.load(**options)

    @classmethod
    def from_store(cls, path, **options) -> 'HoursData':
        """Load from a JSON store directory"""
        from .store import JsonStore
        return JsonStore(path).load(**options)

    def save(self, store):
        store.save(self)

    # --- session transitions ---

    def is_started(self, name: str) -> bool:
        last = self.dataframe.last_for(name)
        return last is not None and last.is_open()

    def started_names(self) -> List[str]:
        return [name for name in self.names if self.is_started(name)]

    def start(self, name: str) -> HoursRecord:
        if self.strict_start and self.is_started(name):
            raise AlreadyStartedError(f"{name} already has an open session")
        if self.is_started(name):
            logger.warning(f"Starting a second open session for {name}")

        now = self.clock.now()
        position = len(self.dataframe)
        record = self.dataframe.append(HoursRecord(
            index=position,
            rowid=position,
            name=name,
            year=now.year,
            month=now.month,
            start=format_timestamp(now),
            end='',
            hours='',
        ))
        logger.info(f"Session started: {name} @ {record.start}")
        return record

    def end(self, name: str) -> HoursRecord:
        open_record = None
        for record in self.dataframe:
            if record.name == name and record.end == '':
                open_record = record
        if open_record is None:
            raise NotFoundError(f"no start record found for {name}")

        open_record.end = format_timestamp(self.clock.now())
        open_record.hours = ''
        if self.end_policy is EndHoursPolicy.STORE:
            try:
                open_record.hours = str(open_record.calculate_hours())
            except ParseError as e:
                logger.warning(f"Could not store hours for record {open_record.rowid}: {e}")
        logger.info(f"Session ended: {name} @ {open_record.end} ({open_record.display_hours()})")
        return open_record

    # --- admin edits ---

    def set_hours(self, rowid: int, value: str) -> HoursRecord:
        """Set or clear the manual hours override of one record"""
        value = (value or '').strip()
        if value and parse_hours(value) is None:
            raise ValidationError(f"Hours must be a finite number, got {value!r}")
        record = self.dataframe.get(rowid)
        if record is None:
            raise NotFoundError(f"No record with rowid {rowid}")
        record.hours = value
        logger.info(f"Hours of record {rowid} ({record.name}) set to {value or '<computed>'}")
        return record

    # --- roster ---

    def add_name(self, name: str):
        name = (name or '').strip()
        if not name:
            raise ValidationError("Name cannot be empty")
        if name in self.names:
            raise ValidationError(f"Name already exists: {name}")
        self.names.append(name)
        logger.info(f"Name added: {name}")

    def remove_name(self, name: str):
        if name not in self.names:
            raise NotFoundError(f"Unknown name: {name}")
        # records are kept, only the roster entry goes
        self.names.remove(name)
        logger.info(f"Name removed: {name}")

    def move_name_up(self, name: str):
        position = self._position_of(name)
        if position > 0:
            self.names[position - 1], self.names[position] = self.names[position], self.names[position - 1]

    def move_name_down(self, name: str):
        position = self._position_of(name)
        if position < len(self.names) - 1:
            self.names[position + 1], self.names[position] = self.names[position], self.names[position + 1]

    def _position_of(self, name: str) -> int:
        try:
            return self.names.index(name)
        except ValueError:
            raise NotFoundError(f"Unknown name: {name}") from None

    # --- queries ---

    def hours_for_period(self, name: str, period: Period) -> Hours:
        return self.dataframe.hours_for_period(name, period)

    def status_for_period(self, name: str, period: Period) -> str:
        return self.dataframe.status_for_period(name, period)

    def first_period(self) -> Period:
        return self.dataframe.first_period()

    def last_period(self) -> Period:
        return self.dataframe.last_period()
