"""
SQLAlchemy adapters for the repository ports.

Each adapter maps domain entities to the ORM rows in models.py and back. Every
write commits immediately; concurrent writers to the same row are
last-writer-wins.
"""

from typing import List, Optional

from sqlalchemy.orm import Session

from domain.entities import Notification, Order, OrderAttachment, Recipient, User
from domain.value_objects import OrderStatus, UserStatus
from exceptions import UserNotFoundError
from models import Notification as NotificationModel
from models import Order as OrderModel
from models import OrderAttachment as OrderAttachmentModel
from models import Recipient as RecipientModel
from models import User as UserModel
from .base_repository import BaseRepository
from .interfaces import (
    NotificationsRepository,
    OrdersRepository,
    RecipientsRepository,
    UsersRepository,
)
from .order_specifications import (
    OrdersByDeliverymanSpec,
    OrdersInNeighborhoodSpec,
    UsersByCpfSpec,
    deliverymen_spec,
)


def _id(value) -> Optional[str]:
    return None if value is None else str(value)


class SqlAlchemyUsersRepository(UsersRepository):
    def __init__(self, db: Session):
        self.rows = BaseRepository(db, UserModel)

    @staticmethod
    def _to_domain(row: UserModel) -> User:
        return User(
            id=row.id,
            name=row.name,
            cpf=row.cpf,
            password_hash=row.password_hash,
            role=row.role,
            status=row.status,
            email=row.email,
            phone=row.phone,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @staticmethod
    def _to_model(user: User) -> UserModel:
        return UserModel(
            id=str(user.id),
            name=user.name,
            cpf=user.cpf,
            password_hash=user.password_hash,
            role=user.role.value,
            status=user.status.value,
            email=user.email,
            phone=user.phone,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    async def find_by_cpf(self, cpf: str) -> Optional[User]:
        row = self.rows.first(UsersByCpfSpec(cpf))
        return self._to_domain(row) if row else None

    async def find_by_id(self, id: str) -> Optional[User]:
        row = self.rows.get_by_id(str(id))
        return self._to_domain(row) if row else None

    async def create(self, user: User) -> None:
        self.rows.add(self._to_model(user))
        self.rows.commit("create user")

    async def save(self, user: User) -> User:
        row = self.rows.merge(self._to_model(user))
        self.rows.commit("save user")
        return self._to_domain(row)

    async def patch(self, id: str, status: UserStatus) -> User:
        row = self.rows.get_by_id(str(id))
        if row is None:
            raise UserNotFoundError(str(id))

        user = self._to_domain(row)
        user.set_status(status)

        row.status = user.status.value
        row.updated_at = user.updated_at
        self.rows.commit("patch user")
        return user

    async def find_all_deliverymen(self) -> List[User]:
        return [self._to_domain(row) for row in self.rows.find(deliverymen_spec())]


class SqlAlchemyOrdersRepository(OrdersRepository):
    def __init__(self, db: Session):
        self.rows = BaseRepository(db, OrderModel)

    @staticmethod
    def _to_domain(row: OrderModel) -> Order:
        return Order(
            id=row.id,
            recipient_id=row.recipient_id,
            deliveryman_id=row.deliveryman_id,
            status=OrderStatus.from_string(row.status),
            street=row.street,
            number=row.number,
            neighborhood=row.neighborhood,
            city=row.city,
            state=row.state,
            zip_code=row.zip_code,
            delivery_photos=[
                OrderAttachment(id=a.id, order_id=a.order_id, attachment_id=a.attachment_id)
                for a in row.attachments
            ],
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @staticmethod
    def _to_model(order: Order) -> OrderModel:
        return OrderModel(
            id=str(order.id),
            recipient_id=_id(order.recipient_id),
            deliveryman_id=_id(order.deliveryman_id),
            status=order.status.value,
            street=order.street,
            number=order.number,
            neighborhood=order.neighborhood,
            city=order.city,
            state=order.state,
            zip_code=order.zip_code,
            attachments=[
                OrderAttachmentModel(
                    id=str(a.id),
                    order_id=str(order.id),
                    attachment_id=str(a.attachment_id),
                    position=position,
                )
                for position, a in enumerate(order.delivery_photos)
            ],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )

    async def create(self, order: Order) -> None:
        self.rows.add(self._to_model(order))
        self.rows.commit("create order")

    async def find_by_id(self, id: str) -> Optional[Order]:
        row = self.rows.get_by_id(str(id))
        return self._to_domain(row) if row else None

    async def save(self, order: Order) -> Order:
        row = self.rows.merge(self._to_model(order))
        self.rows.commit("save order")
        return self._to_domain(row)

    async def delete(self, order: Order) -> None:
        row = self.rows.get_by_id(str(order.id))
        if row is None:
            return
        self.rows.remove(row)
        self.rows.commit("delete order")

    async def find_all(self) -> List[Order]:
        return [self._to_domain(row) for row in self.rows.get_all()]

    async def find_nearby(self, neighborhood: str) -> List[Order]:
        return [self._to_domain(row) for row in self.rows.find(OrdersInNeighborhoodSpec(neighborhood))]

    async def find_by_deliveryman_id(self, id: str) -> List[Order]:
        return [self._to_domain(row) for row in self.rows.find(OrdersByDeliverymanSpec(id))]


class SqlAlchemyRecipientsRepository(RecipientsRepository):
    def __init__(self, db: Session):
        self.rows = BaseRepository(db, RecipientModel)

    @staticmethod
    def _to_domain(row: RecipientModel) -> Recipient:
        return Recipient(
            id=row.id,
            name=row.name,
            street=row.street,
            number=row.number,
            neighborhood=row.neighborhood,
            city=row.city,
            state=row.state,
            zip_code=row.zip_code,
            phone=row.phone,
            email=row.email,
            latitude=row.latitude,
            longitude=row.longitude,
            created_at=row.created_at,
            updated_at=row.updated_at,
        )

    @staticmethod
    def _to_model(recipient: Recipient) -> RecipientModel:
        return RecipientModel(
            id=str(recipient.id),
            name=recipient.name,
            street=recipient.street,
            number=recipient.number,
            neighborhood=recipient.neighborhood,
            city=recipient.city,
            state=recipient.state,
            zip_code=recipient.zip_code,
            phone=recipient.phone,
            email=recipient.email,
            latitude=recipient.latitude,
            longitude=recipient.longitude,
            created_at=recipient.created_at,
            updated_at=recipient.updated_at,
        )

    async def create(self, recipient: Recipient) -> None:
        self.rows.add(self._to_model(recipient))
        self.rows.commit("create recipient")

    async def find_by_id(self, id: str) -> Optional[Recipient]:
        row = self.rows.get_by_id(str(id))
        return self._to_domain(row) if row else None

    async def save(self, recipient: Recipient) -> Recipient:
        row = self.rows.merge(self._to_model(recipient))
        self.rows.commit("save recipient")
        return self._to_domain(row)

    async def delete(self, recipient: Recipient) -> None:
        row = self.rows.get_by_id(str(recipient.id))
        if row is None:
            return
        self.rows.remove(row)
        self.rows.commit("delete recipient")

    async def find_all(self) -> List[Recipient]:
        return [self._to_domain(row) for row in self.rows.get_all()]


class SqlAlchemyNotificationsRepository(NotificationsRepository):
    def __init__(self, db: Session):
        self.rows = BaseRepository(db, NotificationModel)

    async def create(self, notification: Notification) -> None:
        self.rows.add(NotificationModel(
            id=str(notification.id),
            order_id=str(notification.order_id),
            message=notification.message,
            type=notification.type.value,
            created_at=notification.created_at,
        ))
        self.rows.commit("create notification")

    async def find_by_order_id(self, order_id: str) -> List[Notification]:
        rows = (
            self.rows.db.query(NotificationModel)
            .filter(NotificationModel.order_id == str(order_id))
            .order_by(NotificationModel.created_at)
            .all()
        )
        return [
            Notification(
                id=row.id,
                order_id=row.order_id,
                message=row.message,
                type=row.type,
                created_at=row.created_at,
            )
            for row in rows
        ]
