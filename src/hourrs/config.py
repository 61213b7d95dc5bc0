"""
Runtime settings for hourrs, read from environment variables.
"""
import logging
import os
from dataclasses import dataclass
from typing import Optional

from .data.hours_data import EndHoursPolicy
from .services.state_service import DEFAULT_ADMIN_TIMEOUT_SECONDS
from .utils.errors import ValidationError

ENV_PREFIX = "HOURRS_"
STORE_KINDS = ('json', 'sqlite')
_TRUE = ('1', 'true', 'yes', 'on')
_FALSE = ('0', 'false', 'no', 'off')


def _env(name: str, default=None):
    return os.getenv(ENV_PREFIX + name, default)


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValidationError(f"{ENV_PREFIX}{name} must be a boolean, got {value!r}")


@dataclass
class Settings:
    data_dir: str = 'data'
    store: str = 'json'
    db_file: str = 'hours.db'
    end_policy: EndHoursPolicy = EndHoursPolicy.DEFER
    strict_start: bool = True
    admin_password: Optional[str] = None
    admin_timeout: int = DEFAULT_ADMIN_TIMEOUT_SECONDS
    export_path: Optional[str] = None
    log_level: str = 'WARNING'

    @classmethod
    def from_env(cls) -> 'Settings':
        settings = cls(
            data_dir=_env('DATA_DIR', 'data'),
            store=_env('STORE', 'json').strip().lower(),
            db_file=_env('DB_FILE', 'hours.db'),
            admin_password=_env('ADMIN_PASSWORD') or None,
            export_path=_env('EXPORT_PATH') or None,
            log_level=_env('LOG_LEVEL', 'WARNING').strip().upper(),
        )

        policy = _env('END_POLICY', 'defer').strip().lower()
        try:
            settings.end_policy = EndHoursPolicy(policy)
        except ValueError:
            raise ValidationError(f"{ENV_PREFIX}END_POLICY must be 'defer' or 'store', got {policy!r}") from None

        settings.strict_start = _parse_bool('STRICT_START', _env('STRICT_START', '1'))

        timeout = _env('ADMIN_TIMEOUT', str(DEFAULT_ADMIN_TIMEOUT_SECONDS))
        try:
            settings.admin_timeout = int(timeout)
        except ValueError:
            raise ValidationError(f"{ENV_PREFIX}ADMIN_TIMEOUT must be an integer, got {timeout!r}") from None

        settings.validate()
        return settings

    def validate(self):
        if self.store not in STORE_KINDS:
            raise ValidationError(f"Store must be one of {STORE_KINDS}, got {self.store!r}")
        if self.admin_timeout <= 0:
            raise ValidationError("Admin timeout must be positive")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValidationError(f"Unknown log level: {self.log_level}")

    def make_store(self):
        from .data.store import JsonStore, SqliteStore
        if self.store == 'sqlite':
            return SqliteStore(os.path.join(self.data_dir, self.db_file))
        return JsonStore(self.data_dir)

    def data_options(self, clock=None) -> dict:
        """Keyword arguments for HoursData/store.load"""
        return {
            'clock': clock,
            'strict_start': self.strict_start,
            'end_policy': self.end_policy,
        }
