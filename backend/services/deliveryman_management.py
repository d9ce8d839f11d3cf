"""
Deliveryman management use cases

Admins create, edit, deactivate and list deliverymen, and reset any user's
password. Passwords are hashed with bcrypt before they reach the repository.
"""

from typing import List

from constants import SettingDefaults
from domain.entities import User
from domain.value_objects import UserRole, UserStatus
from dtos.request import (
    ChangeUserPasswordRequest,
    CreateDeliverymanRequest,
    DeactivateDeliverymanRequest,
    ListDeliverymenRequest,
    UpdateDeliverymanRequest,
)
from exceptions import DeliverymanNotFoundError, UserAlreadyExistsError, UserNotFoundError
from repositories.interfaces import UsersRepository
from repositories.order_specifications import ActiveUsersSpec, deliverymen_spec
from utils.error_handlers import handle_use_case_errors
from utils.logging_utils import StructuredLogger
from utils.password_hasher import hash_password
from .authorization import ActorAuthorizer, is_active_with_role

logger = StructuredLogger(__name__)


class _UserUseCase:
    def __init__(self, users_repository: UsersRepository, bcrypt_rounds: int = SettingDefaults.BCRYPT_ROUNDS):
        self.users_repository = users_repository
        self.bcrypt_rounds = bcrypt_rounds
        self.authorizer = ActorAuthorizer(users_repository)

    async def _load_active_deliveryman(self, deliveryman_id: str) -> User:
        deliveryman = await self.users_repository.find_by_id(deliveryman_id)
        if not is_active_with_role(deliveryman, UserRole.DELIVERYMAN):
            raise DeliverymanNotFoundError(deliveryman_id)
        return deliveryman


class CreateDeliverymanUseCase(_UserUseCase):
    """Admin registers a deliveryman; the cpf must not be taken."""

    @handle_use_case_errors("Create deliveryman")
    async def execute(self, request: CreateDeliverymanRequest) -> User:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="create deliverymen")

        if await self.users_repository.find_by_cpf(request.cpf) is not None:
            raise UserAlreadyExistsError(request.cpf)

        deliveryman = User(
            name=request.name,
            cpf=request.cpf,
            password_hash=hash_password(request.password, self.bcrypt_rounds),
            role=UserRole.DELIVERYMAN,
            email=request.email,
            phone=request.phone,
        )
        await self.users_repository.create(deliveryman)

        logger.info("Deliveryman created", extra={"user_id": str(deliveryman.id)})
        return deliveryman


class UpdateDeliverymanUseCase(_UserUseCase):
    @handle_use_case_errors("Update deliveryman")
    async def execute(self, request: UpdateDeliverymanRequest) -> User:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="update deliverymen")
        deliveryman = await self._load_active_deliveryman(request.deliveryman_id)

        deliveryman.update(**request.changes())
        return await self.users_repository.save(deliveryman)


class DeactivateDeliverymanUseCase(_UserUseCase):
    """Deliverymen are never deleted, only set inactive."""

    @handle_use_case_errors("Deactivate deliveryman")
    async def execute(self, request: DeactivateDeliverymanRequest) -> User:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="deactivate deliverymen")
        await self._load_active_deliveryman(request.deliveryman_id)

        deliveryman = await self.users_repository.patch(request.deliveryman_id, UserStatus.INACTIVE)
        logger.info("Deliveryman deactivated")
        return deliveryman


class ListDeliverymenUseCase(_UserUseCase):
    """Active deliverymen only."""

    @handle_use_case_errors("List deliverymen")
    async def execute(self, request: ListDeliverymenRequest) -> List[User]:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="list deliverymen")
        deliverymen = await self.users_repository.find_all_deliverymen()
        active = deliverymen_spec() & ActiveUsersSpec()
        return [user for user in deliverymen if active.is_satisfied_by(user)]


class ChangeUserPasswordUseCase(_UserUseCase):
    """Admin sets a new password for any user, admins included."""

    @handle_use_case_errors("Change user password")
    async def execute(self, request: ChangeUserPasswordRequest) -> User:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="change user passwords")

        user = await self.users_repository.find_by_id(request.user_id)
        if user is None:
            raise UserNotFoundError(request.user_id)

        user.change_password(hash_password(request.new_password, self.bcrypt_rounds))
        return await self.users_repository.save(user)
