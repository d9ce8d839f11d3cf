"""
Recipient entity
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Optional

from domain.entities.entity import Entity
from domain.value_objects import UniqueEntityID


@dataclass
class Recipient(Entity):
    """Person an order is delivered to, with optional geocoordinates."""

    UPDATABLE_FIELDS: ClassVar[tuple[str, ...]] = (
        "name",
        "street",
        "number",
        "neighborhood",
        "city",
        "state",
        "zip_code",
        "phone",
        "email",
        "latitude",
        "longitude",
    )

    name: str
    street: str
    number: str
    neighborhood: str
    city: str
    state: str
    zip_code: str
    phone: Optional[str] = None
    email: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    id: UniqueEntityID = field(default_factory=UniqueEntityID)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.id = UniqueEntityID.of(self.id)
        self._ensure_defaults()

    def update(self, **changes) -> list[str]:
        """Apply a partial update in place; only the given fields change."""
        return self._apply_changes(self.UPDATABLE_FIELDS, changes)
