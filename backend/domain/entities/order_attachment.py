"""
OrderAttachment entity

Links an uploaded proof-of-delivery photo to the order it belongs to.
"""

from dataclasses import dataclass, field

from domain.value_objects import UniqueEntityID


@dataclass
class OrderAttachment:
    order_id: UniqueEntityID
    attachment_id: UniqueEntityID
    id: UniqueEntityID = field(default_factory=UniqueEntityID)

    def __post_init__(self):
        self.id = UniqueEntityID.of(self.id)
        self.order_id = UniqueEntityID.of(self.order_id)
        self.attachment_id = UniqueEntityID.of(self.attachment_id)

    @classmethod
    def for_photos(cls, order_id: UniqueEntityID, photo_ids: list[str]) -> list["OrderAttachment"]:
        """Build one attachment per photo id, preserving request order."""
        return [cls(order_id=order_id, attachment_id=UniqueEntityID(photo_id)) for photo_id in photo_ids]
