"""
Dependency providers.

Factory functions that wire repository adapters into use cases, following the
Dependency Inversion Principle: use cases only see the ports in
repositories/interfaces.py, and the caller picks the adapters here.
"""

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.orm import Session, sessionmaker

from config.settings import Settings, load_settings
from database import create_db_engine, create_session_factory, init_database
from repositories.in_memory import (
    InMemoryNotificationsRepository,
    InMemoryOrdersRepository,
    InMemoryRecipientsRepository,
    InMemoryUsersRepository,
)
from repositories.interfaces import (
    NotificationsRepository,
    OrdersRepository,
    RecipientsRepository,
    UsersRepository,
)
from repositories.sqlalchemy_repositories import (
    SqlAlchemyNotificationsRepository,
    SqlAlchemyOrdersRepository,
    SqlAlchemyRecipientsRepository,
    SqlAlchemyUsersRepository,
)
from services.authentication import LoginUserUseCase
from services.deliveryman_management import (
    ChangeUserPasswordUseCase,
    CreateDeliverymanUseCase,
    DeactivateDeliverymanUseCase,
    ListDeliverymenUseCase,
    UpdateDeliverymanUseCase,
)
from services.notifications import NotifyRecipientUseCase
from services.order_lifecycle import (
    MarkOrderAsDeliveredUseCase,
    MarkOrderAsPendingUseCase,
    MarkOrderAsReturnedUseCase,
    PickUpOrderUseCase,
)
from services.order_management import (
    CreateOrderUseCase,
    DeleteOrderUseCase,
    ListNearbyOrdersUseCase,
    ListOrdersUseCase,
    ListUserDeliveriesUseCase,
    UpdateOrderUseCase,
)
from services.recipient_management import (
    CreateRecipientUseCase,
    DeleteRecipientUseCase,
    ListRecipientsUseCase,
    UpdateRecipientUseCase,
)
from utils.logging_utils import StructuredLogger, configure_logging

logger = StructuredLogger(__name__)


@dataclass
class Repositories:
    """One adapter per port, sharing a backing store."""

    users: UsersRepository
    orders: OrdersRepository
    recipients: RecipientsRepository
    notifications: NotificationsRepository


def get_in_memory_repositories() -> Repositories:
    """
    Factory function for a fresh set of in-memory adapters.

    Returns:
        Repositories with empty stores
    """
    return Repositories(
        users=InMemoryUsersRepository(),
        orders=InMemoryOrdersRepository(),
        recipients=InMemoryRecipientsRepository(),
        notifications=InMemoryNotificationsRepository(),
    )


def get_sqlalchemy_repositories(db: Session) -> Repositories:
    """
    Factory function for SQLAlchemy adapters over one session.

    Args:
        db: Database session

    Returns:
        Repositories committing through ``db``
    """
    return Repositories(
        users=SqlAlchemyUsersRepository(db),
        orders=SqlAlchemyOrdersRepository(db),
        recipients=SqlAlchemyRecipientsRepository(db),
        notifications=SqlAlchemyNotificationsRepository(db),
    )


def init_app(settings: Optional[Settings] = None) -> sessionmaker:
    """
    Configure logging and the database for a process.

    Args:
        settings: Settings to use; read from the environment when omitted

    Returns:
        Session factory for get_sqlalchemy_repositories
    """
    settings = settings or load_settings()
    configure_logging(settings)

    engine = create_db_engine(settings.database_url)
    init_database(engine)
    logger.info("Database ready", extra={"database_url": settings.safe_database_url})
    return create_session_factory(engine)


@dataclass
class UseCases:
    """Every use case, wired to one set of repositories."""

    create_order: CreateOrderUseCase
    update_order: UpdateOrderUseCase
    delete_order: DeleteOrderUseCase
    list_orders: ListOrdersUseCase
    list_nearby_orders: ListNearbyOrdersUseCase
    list_user_deliveries: ListUserDeliveriesUseCase
    pick_up_order: PickUpOrderUseCase
    mark_order_as_delivered: MarkOrderAsDeliveredUseCase
    mark_order_as_returned: MarkOrderAsReturnedUseCase
    mark_order_as_pending: MarkOrderAsPendingUseCase
    create_recipient: CreateRecipientUseCase
    update_recipient: UpdateRecipientUseCase
    delete_recipient: DeleteRecipientUseCase
    list_recipients: ListRecipientsUseCase
    create_deliveryman: CreateDeliverymanUseCase
    update_deliveryman: UpdateDeliverymanUseCase
    deactivate_deliveryman: DeactivateDeliverymanUseCase
    list_deliverymen: ListDeliverymenUseCase
    change_user_password: ChangeUserPasswordUseCase
    login_user: LoginUserUseCase
    notify_recipient: NotifyRecipientUseCase


def get_use_cases(repos: Repositories, settings: Optional[Settings] = None) -> UseCases:
    """
    Factory function wiring every use case to ``repos``.

    Args:
        repos: Adapters to use
        settings: Supplies the bcrypt cost factor; defaults apply when omitted

    Returns:
        UseCases bundle
    """
    settings = settings or Settings()
    rounds = settings.bcrypt_rounds

    return UseCases(
        create_order=CreateOrderUseCase(repos.orders, repos.users, repos.recipients),
        update_order=UpdateOrderUseCase(repos.orders, repos.users, repos.recipients),
        delete_order=DeleteOrderUseCase(repos.orders, repos.users),
        list_orders=ListOrdersUseCase(repos.orders, repos.users),
        list_nearby_orders=ListNearbyOrdersUseCase(repos.orders, repos.users),
        list_user_deliveries=ListUserDeliveriesUseCase(repos.orders, repos.users),
        pick_up_order=PickUpOrderUseCase(repos.orders, repos.users),
        mark_order_as_delivered=MarkOrderAsDeliveredUseCase(repos.orders, repos.users),
        mark_order_as_returned=MarkOrderAsReturnedUseCase(repos.orders, repos.users),
        mark_order_as_pending=MarkOrderAsPendingUseCase(repos.orders, repos.users),
        create_recipient=CreateRecipientUseCase(repos.recipients, repos.users),
        update_recipient=UpdateRecipientUseCase(repos.recipients, repos.users),
        delete_recipient=DeleteRecipientUseCase(repos.recipients, repos.users),
        list_recipients=ListRecipientsUseCase(repos.recipients, repos.users),
        create_deliveryman=CreateDeliverymanUseCase(repos.users, rounds),
        update_deliveryman=UpdateDeliverymanUseCase(repos.users, rounds),
        deactivate_deliveryman=DeactivateDeliverymanUseCase(repos.users, rounds),
        list_deliverymen=ListDeliverymenUseCase(repos.users, rounds),
        change_user_password=ChangeUserPasswordUseCase(repos.users, rounds),
        login_user=LoginUserUseCase(repos.users),
        notify_recipient=NotifyRecipientUseCase(repos.orders, repos.notifications),
    )
