"""
UUID generation helper for the application.

Provides the default value for every UniqueEntityID.
"""
import uuid


def generate_uuid() -> str:
    """
    Generate a new UUID string.

    Returns:
        str: A new UUID4 string
    """
    return str(uuid.uuid4())
