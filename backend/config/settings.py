"""
Runtime settings

Read once from environment variables:

- FASTFEET_DATABASE_URL: SQLAlchemy URL for the persistence adapter
- FASTFEET_LOG_LEVEL: Root log level name (DEBUG, INFO, ...)
- FASTFEET_LOG_FILE: Optional path of a rotating log file
- FASTFEET_BCRYPT_ROUNDS: bcrypt cost factor for new password hashes
"""
import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

from constants import SettingDefaults, SettingKeys
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    database_url: str = SettingDefaults.DATABASE_URL
    log_level: str = SettingDefaults.LOG_LEVEL
    log_file: Optional[str] = None
    bcrypt_rounds: int = SettingDefaults.BCRYPT_ROUNDS

    @property
    def safe_database_url(self) -> str:
        """Database URL with any password masked, for logging."""
        return make_url(self.database_url).render_as_string(hide_password=True)


def _parse_rounds(raw: str) -> int:
    try:
        rounds = int(raw)
    except ValueError:
        raise ConfigurationError(
            f"{SettingKeys.BCRYPT_ROUNDS} must be an integer, got {raw!r}",
            [SettingKeys.BCRYPT_ROUNDS],
        )

    if not SettingDefaults.MIN_BCRYPT_ROUNDS <= rounds <= SettingDefaults.MAX_BCRYPT_ROUNDS:
        raise ConfigurationError(
            f"{SettingKeys.BCRYPT_ROUNDS} must be between "
            f"{SettingDefaults.MIN_BCRYPT_ROUNDS} and {SettingDefaults.MAX_BCRYPT_ROUNDS}, got {rounds}",
            [SettingKeys.BCRYPT_ROUNDS],
        )
    return rounds


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        environ: Mapping to read instead of os.environ (tests)

    Returns:
        Settings with defaults filled in for unset keys

    Raises:
        ConfigurationError: If a value is present but invalid
    """
    env = os.environ if environ is None else environ

    database_url = env.get(SettingKeys.DATABASE_URL, '').strip() or SettingDefaults.DATABASE_URL
    try:
        make_url(database_url)
    except ArgumentError:
        raise ConfigurationError(
            f"{SettingKeys.DATABASE_URL} is not a valid SQLAlchemy URL",
            [SettingKeys.DATABASE_URL],
        )

    log_level = env.get(SettingKeys.LOG_LEVEL, '').strip().upper() or SettingDefaults.LOG_LEVEL
    if log_level not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"{SettingKeys.LOG_LEVEL} must be one of {', '.join(VALID_LOG_LEVELS)}, got {log_level!r}",
            [SettingKeys.LOG_LEVEL],
        )

    log_file = env.get(SettingKeys.LOG_FILE, '').strip() or None

    raw_rounds = env.get(SettingKeys.BCRYPT_ROUNDS, '').strip()
    bcrypt_rounds = _parse_rounds(raw_rounds) if raw_rounds else SettingDefaults.BCRYPT_ROUNDS

    settings = Settings(
        database_url=database_url,
        log_level=log_level,
        log_file=log_file,
        bcrypt_rounds=bcrypt_rounds,
    )
    logger.debug(f"Loaded settings: database={settings.safe_database_url} log_level={log_level} log_file={log_file}")
    return settings
