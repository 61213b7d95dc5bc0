"""
Session service for handling start/end business logic.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from ..data.hours_data import HoursData
from ..data.record import HoursRecord
from ..utils.errors import HourrsError

logger = logging.getLogger(__name__)


@dataclass
class SessionResult:
    """Result of a toggle action"""
    success: bool
    action: str
    name: str
    record: Optional[HoursRecord] = None
    error: Optional[str] = None


class SessionService:
    """Starts and ends sessions and saves after every change"""

    def __init__(self, hours_data: HoursData, store):
        """
        Initialize session service.

        Args:
            hours_data: Data to mutate
            store: Store the data is saved to after each mutation
        """
        self.hours_data = hours_data
        self.store = store

    def start(self, name: str) -> HoursRecord:
        record = self.hours_data.start(name)
        self.hours_data.save(self.store)
        return record

    def end(self, name: str) -> HoursRecord:
        record = self.hours_data.end(name)
        self.hours_data.save(self.store)
        return record

    def toggle(self, name: str) -> SessionResult:
        """
        Start a session for name, or end the open one.

        Args:
            name: Person to toggle

        Returns:
            SessionResult with action details
        """
        action = self._determine_action(name)
        try:
            if action == 'start':
                record = self.start(name)
            else:
                record = self.end(name)

            logger.info(f"Toggled {action.upper()} - {name}")
            return SessionResult(
                success=True,
                action=action,
                name=name,
                record=record
            )

        except HourrsError as e:
            logger.error(f"Error performing {action} for {name}: {e}")
            return SessionResult(
                success=False,
                action=action,
                name=name,
                error=str(e)
            )

    def _determine_action(self, name: str) -> str:
        if self.hours_data.is_started(name):
            return 'end'
        return 'start'
