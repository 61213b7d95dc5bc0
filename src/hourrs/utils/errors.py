"""
Error handling utilities for hourrs.
"""


class HourrsError(Exception):
    """Base exception for hourrs"""
    pass


class ParseError(HourrsError, ValueError):
    """Raised when a timestamp, period or hours string is malformed"""
    pass


class NotFoundError(HourrsError):
    """Raised when a session, name or record is not found"""
    pass


class AlreadyStartedError(HourrsError):
    """Raised when a session is started while another one is still open"""
    pass


class StoreError(HourrsError):
    """Raised when loading or saving hours data fails"""
    pass


class ValidationError(HourrsError):
    """Raised when validation fails"""
    pass


class AdminSessionError(HourrsError):
    """Raised when an admin action is attempted without an active admin session"""
    pass
