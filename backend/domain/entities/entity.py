"""
Base behaviour shared by every entity.
"""

from datetime import datetime
from typing import Any, Iterable


class Entity:
    """
    Mixin for mutable entities with an ``updated_at`` marker.

    Subclasses are dataclasses declaring ``id``, ``created_at`` and
    ``updated_at``. Every update operation mutates the instance in place and
    calls ``touch``.
    """

    def touch(self) -> None:
        """Refresh the modification marker, never moving it before creation."""
        now = datetime.utcnow()
        self.updated_at = max(now, self.created_at)

    def _apply_changes(self, allowed: Iterable[str], changes: dict[str, Any]) -> list[str]:
        """
        Assign ``changes`` onto the entity.

        Args:
            allowed: Field names callers may update
            changes: Field values to assign

        Returns:
            Names of the fields that were assigned

        Raises:
            ValueError: If a field is not updatable
        """
        allowed = set(allowed)
        unknown = sorted(set(changes) - allowed)
        if unknown:
            raise ValueError(f"{type(self).__name__} fields cannot be updated: {', '.join(unknown)}")

        for name, value in changes.items():
            setattr(self, name, value)

        if changes:
            self.touch()
        return list(changes)

    def _ensure_defaults(self) -> None:
        """Fill ``updated_at`` for freshly created entities."""
        if self.updated_at is None:
            self.updated_at = self.created_at
