"""
Application-wide constants and configuration keys.

This module centralizes all magic strings and numbers used throughout the application
to improve maintainability and reduce duplication.
"""
from enum import Enum


class NotificationType(str, Enum):
    """
    Delivery channel for recipient notifications.

    Only email is produced today; the channel is stored so other transports
    can be added without a schema change.
    """

    EMAIL = "email"
    SMS = "sms"


class NotificationDefaults:
    """Notification templating constants"""

    MESSAGE_TEMPLATE = "Order status updated to {status}"
    TYPE = NotificationType.EMAIL

    @classmethod
    def message_for(cls, status: str) -> str:
        """Render the recipient message for a status value"""
        return cls.MESSAGE_TEMPLATE.format(status=status)


class SettingKeys:
    """Environment variable names read by config/settings.py"""

    DATABASE_URL = "FASTFEET_DATABASE_URL"
    LOG_LEVEL = "FASTFEET_LOG_LEVEL"
    LOG_FILE = "FASTFEET_LOG_FILE"
    BCRYPT_ROUNDS = "FASTFEET_BCRYPT_ROUNDS"


class SettingDefaults:
    """Fallback values when a setting is not provided"""

    DATABASE_URL = "sqlite:///:memory:"
    LOG_LEVEL = "INFO"
    BCRYPT_ROUNDS = 12
    MIN_BCRYPT_ROUNDS = 4
    MAX_BCRYPT_ROUNDS = 31


class LogConfig:
    """Logging constants"""

    FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    MAX_BYTES = 10 * 1024 * 1024  # 10MB
    BACKUP_COUNT = 5
