"""
Base classes for use-case request DTOs.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class UseCaseRequest(BaseModel):
    """
    Flat, immutable field set passed to ``UseCase.execute``.

    Unknown fields are rejected so a typo never turns into a silent no-op.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")


class PartialUpdateRequest(UseCaseRequest):
    """
    Request whose optional fields are applied only when explicitly given.

    Fields named in ``KEY_FIELDS`` identify the actor and the target and are
    never part of the changes. An explicit None counts as "not given".
    """

    KEY_FIELDS: ClassVar[tuple[str, ...]] = ()

    def changes(self) -> dict[str, Any]:
        """
        Collect the fields the caller actually set to a value.

        Returns:
            Mapping of field name to new value, ids excluded
        """
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if name not in self.KEY_FIELDS and getattr(self, name) is not None
        }
