"""
Service layer for hourrs business logic.
"""

from .session_service import SessionService, SessionResult
from .state_service import AdminSession
from .report_service import PeriodReport, generate_period_report

__all__ = ['SessionService', 'SessionResult', 'AdminSession', 'PeriodReport', 'generate_period_report']
