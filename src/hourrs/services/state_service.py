"""
Admin session state.
Tracks whether admin mode is unlocked and until when.
"""
import datetime
import hmac
import logging
from typing import Optional

from ..utils.clock import SystemClock
from ..utils.errors import AdminSessionError

logger = logging.getLogger(__name__)

DEFAULT_ADMIN_TIMEOUT_SECONDS = 600


class AdminSession:
    """Admin login that expires after a fixed time.

    Passed explicitly to whatever needs admin rights; there is no
    process-wide admin flag.
    """

    def __init__(self, clock=None, timeout_seconds: int = DEFAULT_ADMIN_TIMEOUT_SECONDS,
                 password: Optional[str] = None):
        self.clock = clock or SystemClock()
        self.timeout_seconds = timeout_seconds
        self._password = password
        self._logged_in_until: Optional[datetime.datetime] = None

    @property
    def logged_in_until(self) -> Optional[datetime.datetime]:
        return self._logged_in_until

    def login(self, password: Optional[str] = None):
        """Unlock admin mode; checks the password when one is configured"""
        if self._password and not hmac.compare_digest(
                (password or '').encode('utf-8'), self._password.encode('utf-8')):
            logger.warning("Admin login rejected")
            raise AdminSessionError("Wrong admin password")
        self._logged_in_until = self.clock.now() + datetime.timedelta(seconds=self.timeout_seconds)
        logger.info(f"Admin logged in until {self._logged_in_until}")

    def logout(self):
        self._logged_in_until = None
        logger.info("Admin logged out")

    def is_active(self) -> bool:
        if self._logged_in_until is None:
            return False
        if self.clock.now() >= self._logged_in_until:
            logger.debug("Admin session expired")
            self._logged_in_until = None
            return False
        return True

    def touch(self):
        """Extend an active session by the full timeout"""
        if self.is_active():
            self._logged_in_until = self.clock.now() + datetime.timedelta(seconds=self.timeout_seconds)

    def remaining(self) -> int:
        """Seconds left, 0 when inactive"""
        if not self.is_active():
            return 0
        return int((self._logged_in_until - self.clock.now()).total_seconds())

    def require(self):
        if not self.is_active():
            raise AdminSessionError("Admin session required")
