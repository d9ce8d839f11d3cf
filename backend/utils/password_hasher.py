"""
Password hashing helpers backed by bcrypt.
"""

import bcrypt

from constants import SettingDefaults


def hash_password(password: str, rounds: int = SettingDefaults.BCRYPT_ROUNDS) -> str:
    """
    Hash a plaintext password.

    Args:
        password: Plaintext password
        rounds: bcrypt cost factor

    Returns:
        The bcrypt hash as text, salt included
    """
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
