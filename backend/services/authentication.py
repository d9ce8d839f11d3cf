"""
Login use case

Checks a cpf/password pair. No token or session is issued here.
"""

from domain.value_objects import UserRole
from dtos.request import LoginUserRequest
from dtos.response import LoginResponse
from exceptions import InactiveUserError, InvalidCredentialsError
from repositories.interfaces import UsersRepository
from utils.error_handlers import handle_use_case_errors
from utils.logging_utils import StructuredLogger
from utils.password_hasher import verify_password

logger = StructuredLogger(__name__)


class LoginUserUseCase:
    def __init__(self, users_repository: UsersRepository):
        self.users_repository = users_repository

    @handle_use_case_errors("Login user")
    async def execute(self, request: LoginUserRequest) -> LoginResponse:
        user = await self.users_repository.find_by_cpf(request.cpf)

        # Unknown cpf and wrong password are indistinguishable to the caller
        if user is None or not verify_password(request.password, user.password_hash):
            raise InvalidCredentialsError()

        if not user.is_active:
            raise InactiveUserError(actor_id=str(user.id))

        logger.info("User logged in", extra={"user_id": str(user.id)})
        return LoginResponse(user_id=str(user.id), role=UserRole(user.role))
