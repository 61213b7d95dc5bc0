"""
hourrs: personal time tracking by month.
"""

from .data import Period, Hours, HoursRecord, HoursDataFrame, HoursData, EndHoursPolicy, JsonStore, SqliteStore

__version__ = "0.3.0"

__all__ = [
    'Period',
    'Hours',
    'HoursRecord',
    'HoursDataFrame',
    'HoursData',
    'EndHoursPolicy',
    'JsonStore',
    'SqliteStore',
]
