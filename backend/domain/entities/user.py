"""
User entity

Admins and deliverymen share this record; ``role`` tells them apart.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Optional

from domain.entities.entity import Entity
from domain.value_objects import UniqueEntityID, UserRole, UserStatus


@dataclass
class User(Entity):
    """
    Back-office user.

    ``cpf`` is the natural key used to log in. ``password_hash`` holds a bcrypt
    hash, never the plaintext.
    """

    UPDATABLE_FIELDS: ClassVar[tuple[str, ...]] = ("name", "email", "phone")

    name: str
    cpf: str
    password_hash: str
    role: UserRole
    status: UserStatus = UserStatus.ACTIVE
    email: Optional[str] = None
    phone: Optional[str] = None
    id: UniqueEntityID = field(default_factory=UniqueEntityID)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.id = UniqueEntityID.of(self.id)
        self.role = UserRole(self.role)
        self.status = UserStatus(self.status)
        self._ensure_defaults()

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    def has_role(self, *roles: UserRole) -> bool:
        return self.role in roles

    def update(self, **changes) -> list[str]:
        """Apply a partial profile update in place (name, email, phone)."""
        return self._apply_changes(self.UPDATABLE_FIELDS, changes)

    def change_password(self, password_hash: str) -> None:
        """Replace the stored hash in place."""
        self.password_hash = password_hash
        self.touch()

    def deactivate(self) -> None:
        """Mark the user inactive in place."""
        self.status = UserStatus.INACTIVE
        self.touch()

    def activate(self) -> None:
        """Mark the user active in place."""
        self.status = UserStatus.ACTIVE
        self.touch()

    def set_status(self, status: UserStatus) -> None:
        """Move the user to ``status`` through activate/deactivate."""
        if UserStatus(status) == UserStatus.INACTIVE:
            self.deactivate()
        else:
            self.activate()
