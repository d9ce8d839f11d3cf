"""
Recipient management use cases (admin only).
"""

from typing import List

from domain.entities import Recipient
from domain.value_objects import UserRole
from dtos.request import (
    CreateRecipientRequest,
    DeleteRecipientRequest,
    ListRecipientsRequest,
    UpdateRecipientRequest,
)
from exceptions import RecipientNotFoundError
from repositories.interfaces import RecipientsRepository, UsersRepository
from utils.error_handlers import handle_use_case_errors
from utils.logging_utils import StructuredLogger
from .authorization import ActorAuthorizer

logger = StructuredLogger(__name__)


class _RecipientUseCase:
    def __init__(self, recipients_repository: RecipientsRepository, users_repository: UsersRepository):
        self.recipients_repository = recipients_repository
        self.authorizer = ActorAuthorizer(users_repository)

    async def _load(self, recipient_id: str) -> Recipient:
        recipient = await self.recipients_repository.find_by_id(recipient_id)
        if recipient is None:
            raise RecipientNotFoundError(recipient_id)
        return recipient


class CreateRecipientUseCase(_RecipientUseCase):
    @handle_use_case_errors("Create recipient")
    async def execute(self, request: CreateRecipientRequest) -> Recipient:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="create recipients")

        recipient = Recipient(**request.model_dump(exclude={"admin_id"}))
        await self.recipients_repository.create(recipient)

        logger.info("Recipient created", extra={"recipient_id": str(recipient.id)})
        return recipient


class UpdateRecipientUseCase(_RecipientUseCase):
    @handle_use_case_errors("Update recipient")
    async def execute(self, request: UpdateRecipientRequest) -> Recipient:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="update recipients")
        recipient = await self._load(request.recipient_id)

        recipient.update(**request.changes())
        return await self.recipients_repository.save(recipient)


class DeleteRecipientUseCase(_RecipientUseCase):
    @handle_use_case_errors("Delete recipient")
    async def execute(self, request: DeleteRecipientRequest) -> None:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="delete recipients")
        recipient = await self._load(request.recipient_id)
        await self.recipients_repository.delete(recipient)
        logger.info("Recipient deleted")


class ListRecipientsUseCase(_RecipientUseCase):
    @handle_use_case_errors("List recipients")
    async def execute(self, request: ListRecipientsRequest) -> List[Recipient]:
        await self.authorizer.require(request.admin_id, UserRole.ADMIN, action="list recipients")
        return await self.recipients_repository.find_all()
