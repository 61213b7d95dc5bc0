"""
Data layer for hourrs.

Contains the value types, session records, the record collection, the
aggregate and its stores.
"""

from .period import Period, FIRST_PERIOD_SEED, LAST_PERIOD_SEED
from .hours import Hours
from .record import HoursRecord, Schema, Field, MAX_SECONDS, TIMESTAMP_FORMAT
from .dataframe import HoursDataFrame
from .hours_data import HoursData, EndHoursPolicy
from .store import JsonStore, SqliteStore

__all__ = [
    'Period',
    'FIRST_PERIOD_SEED',
    'LAST_PERIOD_SEED',
    'Hours',
    'HoursRecord',
    'Schema',
    'Field',
    'MAX_SECONDS',
    'TIMESTAMP_FORMAT',
    'HoursDataFrame',
    'HoursData',
    'EndHoursPolicy',
    'JsonStore',
    'SqliteStore',
]
