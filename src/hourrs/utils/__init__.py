"""
Utilities for hourrs.
"""

from .errors import (
    HourrsError,
    ParseError,
    NotFoundError,
    AlreadyStartedError,
    StoreError,
    ValidationError,
    AdminSessionError,
)
from .clock import SystemClock, FixedClock
from .export_utils import (
    get_export_directory,
    safe_filename,
    write_file,
)

__all__ = [
    'HourrsError',
    'ParseError',
    'NotFoundError',
    'AlreadyStartedError',
    'StoreError',
    'ValidationError',
    'AdminSessionError',
    'SystemClock',
    'FixedClock',
    'get_export_directory',
    'safe_filename',
    'write_file',
]
