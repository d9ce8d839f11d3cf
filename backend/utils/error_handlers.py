"""
Error handling decorator for use cases.

Every use case returns a UseCaseResult. This module centralizes turning a
raised ApplicationError into a failed result, so ``execute`` bodies can raise
on the first violated rule.
"""

from functools import wraps
from typing import Callable

from dtos.internal import UseCaseResult
from exceptions import ApplicationError, ConfigurationError, DatabaseError
from .logging_utils import StructuredLogger, logging_context

logger = StructuredLogger(__name__)


def _request_identifiers(request) -> dict:
    """Pick the ``*_id`` fields of a request for the logging context."""
    if request is None or not hasattr(request, "model_dump"):
        return {}
    return {
        key: value
        for key, value in request.model_dump().items()
        if key.endswith("_id") and value is not None
    }


def handle_use_case_errors(operation_name: str):
    """
    Decorator for ``async def execute(self, request)``.

    - Binds ``operation`` and the request ids to the logging context
    - Wraps the returned value in ``UseCaseResult.success``
    - Converts ApplicationError into ``UseCaseResult.failure``
    - Logs and re-raises anything else

    Args:
        operation_name: Human-readable name of the operation (e.g., "Pick up order")

    Example:
        class PickUpOrderUseCase:
            @handle_use_case_errors("Pick up order")
            async def execute(self, request):
                ...
                return order
    """
    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(self, request=None, *args, **kwargs):
            with logging_context(operation=operation_name, **_request_identifiers(request)):
                try:
                    value = await func(self, request, *args, **kwargs)
                except (DatabaseError, ConfigurationError) as e:
                    logger.error(f"{operation_name} - {type(e).__name__}: {e.message}", exc_info=True)
                    return UseCaseResult.failure(e)
                except ApplicationError as e:
                    logger.warning(
                        f"{operation_name} - {type(e).__name__}: {e.message}",
                        extra=e.details,
                    )
                    return UseCaseResult.failure(e)
                except Exception as e:
                    logger.error(f"{operation_name} - Unexpected error: {e}", exc_info=True)
                    raise

                logger.debug(f"{operation_name} succeeded")
                return UseCaseResult.success(value)

        return wrapper

    return decorator
