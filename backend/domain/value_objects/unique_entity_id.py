"""
UniqueEntityID Value Object

Opaque identifier shared by every entity and every cross-entity reference.
"""

from dataclasses import dataclass, field

from utils.uuid_helper import generate_uuid


@dataclass(frozen=True)
class UniqueEntityID:
    """
    Immutable entity identifier.

    Two ids are equal when their string values are equal, so an id rebuilt
    from a request string matches the one stored on the entity.
    """

    value: str = field(default_factory=generate_uuid)

    def __post_init__(self):
        """Validate identifier."""
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"Entity id must be a non-empty string: {self.value!r}")

    @classmethod
    def of(cls, value: "str | UniqueEntityID | None") -> "UniqueEntityID | None":
        """Coerce a raw string (or None) into an id."""
        if value is None or isinstance(value, UniqueEntityID):
            return value
        return cls(value)

    def equals(self, other: "str | UniqueEntityID | None") -> bool:
        """Compare against another id or its raw string form."""
        if other is None:
            return False
        if isinstance(other, UniqueEntityID):
            return self.value == other.value
        return self.value == other

    def __str__(self) -> str:
        """String representation."""
        return self.value
