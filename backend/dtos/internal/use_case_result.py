"""
Use-case result DTO

The single success/failure channel returned by every use case.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from exceptions import ApplicationError

T = TypeVar("T")


@dataclass(frozen=True)
class UseCaseResult(Generic[T]):
    """
    Internal DTO for use-case outcomes.

    Exactly one of ``value`` / ``error`` is meaningful: a failed result carries
    the ApplicationError describing the violated rule. Callers either branch on
    ``is_success()`` or call ``unwrap()`` to get the value and let the error
    propagate as an exception.
    """

    value: Optional[T] = None
    error: Optional[ApplicationError] = None

    @classmethod
    def success(cls, value: T = None) -> "UseCaseResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ApplicationError) -> "UseCaseResult[T]":
        return cls(error=error)

    def is_success(self) -> bool:
        return self.error is None

    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """
        Return the value of a successful result.

        Raises:
            ApplicationError: The captured error, if the result failed
        """
        if self.error is not None:
            raise self.error
        return self.value
