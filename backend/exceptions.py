"""
Custom exception classes for the application.

This module defines the domain-specific exceptions raised when a business rule
is violated. Use cases never let these escape: they are captured at the use-case
boundary and returned inside a failed UseCaseResult (see utils/error_handlers.py).
"""


class ApplicationError(Exception):
    """Base exception for all application errors"""

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationError(ApplicationError):
    """Raised when there's a configuration issue"""

    def __init__(self, message: str, keys: list[str] | None = None):
        details = {"keys": keys} if keys else {}
        super().__init__(message, details)


class DatabaseError(ApplicationError):
    """Raised when database operations fail"""

    def __init__(self, operation: str, message: str):
        details = {"operation": operation}
        super().__init__(message, details)


# ---------------------------------------------------------------------------
# Authorization
# ---------------------------------------------------------------------------


class UnauthorizedError(ApplicationError):
    """Raised when the actor is missing, has the wrong role or is inactive"""

    def __init__(self, message: str, actor_id: str | None = None, required_roles: list[str] | None = None):
        details = {}
        if actor_id is not None:
            details["actor_id"] = actor_id
        if required_roles:
            details["required_roles"] = required_roles
        super().__init__(message, details)


class OnlyActiveDeliverymenCanMarkOrdersAsDeliveredError(UnauthorizedError):
    def __init__(self, actor_id: str | None = None, required_roles: list[str] | None = None):
        super().__init__(
            "Only active deliverymen can mark orders as delivered",
            actor_id=actor_id,
            required_roles=required_roles,
        )


class OnlyAssignedDeliverymanCanMarkOrderAsDeliveredError(UnauthorizedError):
    def __init__(self, actor_id: str | None = None):
        super().__init__(
            "Only the assigned deliveryman can mark the order as delivered",
            actor_id=actor_id,
        )


class OnlyAssignedDeliverymanCanMarkOrderAsReturnedError(UnauthorizedError):
    def __init__(self, actor_id: str | None = None):
        super().__init__(
            "Only the assigned deliveryman or an admin can mark the order as returned",
            actor_id=actor_id,
        )


class InvalidCredentialsError(UnauthorizedError):
    def __init__(self):
        super().__init__("Invalid credentials")


class InactiveUserError(UnauthorizedError):
    def __init__(self, actor_id: str | None = None):
        super().__init__("User account is inactive", actor_id=actor_id)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


class NotFoundError(ApplicationError):
    """Raised when a referenced entity does not exist"""

    def __init__(self, entity: str, entity_id: str, message: str | None = None):
        details = {"entity": entity, "id": entity_id}
        super().__init__(message or f"{entity} not found", details)


class OrderNotFoundError(NotFoundError):
    def __init__(self, order_id: str):
        super().__init__("Order", order_id)


class RecipientNotFoundError(NotFoundError):
    def __init__(self, recipient_id: str):
        super().__init__("Recipient", recipient_id)


class UserNotFoundError(NotFoundError):
    def __init__(self, user_id: str):
        super().__init__("User", user_id)


class DeliverymanNotFoundError(NotFoundError):
    """Raised when the target is not an active deliveryman"""

    def __init__(self, deliveryman_id: str):
        super().__init__("Deliveryman", deliveryman_id, "Active deliveryman not found")


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class InvalidStateTransitionError(ApplicationError):
    """Raised when an order is not in the status the requested action needs"""

    def __init__(self, current: str, target: str, message: str | None = None):
        details = {"current_status": current, "target_status": target}
        super().__init__(message or f"Cannot move order from {current} to {target}", details)


class OrderMustBePendingToBePickedUpError(InvalidStateTransitionError):
    def __init__(self, current: str):
        super().__init__(current, "picked_up", "Order must be pending to be picked up")


class OrderMustBePickedUpToBeMarkedAsDeliveredError(InvalidStateTransitionError):
    def __init__(self, current: str):
        super().__init__(current, "delivered", "Order must be picked up to be marked as delivered")


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------


class MissingRequiredInputError(ApplicationError):
    """Raised when a request lacks a value the rule requires"""

    def __init__(self, field: str, message: str | None = None):
        details = {"field": field}
        super().__init__(message or f"{field} is required", details)


class DeliveryPhotoIsRequiredError(MissingRequiredInputError):
    def __init__(self):
        super().__init__("delivery_photo_ids", "At least one delivery photo is required")


class ConflictError(ApplicationError):
    """Raised when a natural key is already taken"""

    def __init__(self, entity: str, field: str, value: str):
        details = {"entity": entity, "field": field}
        super().__init__(f"{entity} with this {field} already exists", details)
        self.value = value


class UserAlreadyExistsError(ConflictError):
    def __init__(self, cpf: str):
        super().__init__("User", "cpf", cpf)
