"""Custom exception classes for the BrontoBoard API.

Every failure an operation can report is a subclass of ``BrontoBoardError``.
The ``kind`` class attribute is the stable, machine-readable error kind that
ends up in the response envelope; the exception message is the human-readable
part.
"""

from core.entity_kind import EntityKind


class BrontoBoardError(Exception):
    """Base exception for all BrontoBoard errors."""

    kind = "Error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class SessionInvalidError(BrontoBoardError):
    """Raised when a session token cannot be resolved to a user."""

    kind = "SessionInvalid"

    def __init__(self, message: str = "Session is invalid or has expired."):
        super().__init__(message)


class AuthenticationError(BrontoBoardError):
    """Raised when a username/password pair does not authenticate."""

    kind = "AuthenticationFailed"

    def __init__(self):
        # Same message for unknown user and wrong password
        super().__init__("Invalid username or password.")


class UserAlreadyExistsError(BrontoBoardError):
    """Raised when registering a username that is already taken."""

    kind = "UserAlreadyExists"

    def __init__(self, username: str):
        self.username = username
        super().__init__("Username already taken.")


class EntityNotFoundError(BrontoBoardError):
    """Raised when a referenced entity does not exist."""

    kind = "NotFound"

    def __init__(self, entity_kind: EntityKind, entity_id: str):
        """Initialize the exception.

        Args:
            entity_kind: Kind of the missing entity.
            entity_id: The ID that was looked up.
        """
        self.entity_kind = entity_kind
        self.entity_id = entity_id
        super().__init__(f"{entity_kind.label} with ID {entity_id} not found.")


class InternalInconsistencyError(BrontoBoardError):
    """Raised when an entity's parent chain is broken.

    This is a referential-integrity violation in stored data, not a bad
    request, and is reported separately from ``EntityNotFoundError``.
    """

    kind = "InternalInconsistency"

    def __init__(self, entity_kind: EntityKind, entity_id: str, detail: str):
        """Initialize the exception.

        Args:
            entity_kind: Kind of the entity whose chain is broken.
            entity_id: ID of that entity.
            detail: What is wrong with the chain.
        """
        self.entity_kind = entity_kind
        self.entity_id = entity_id
        self.detail = detail
        super().__init__(
            f"Data inconsistency for {entity_kind.label} {entity_id}: {detail}"
        )


class UnauthorizedError(BrontoBoardError):
    """Raised when the caller does not own the entity they are accessing."""

    kind = "Unauthorized"

    def __init__(self):
        super().__init__("You are not authorized to access this resource.")


class ValidationError(BrontoBoardError):
    """Raised when an input field is malformed."""

    kind = "ValidationError"

    def __init__(self, field: str, reason: str):
        """Initialize the exception.

        Args:
            field: Name of the offending input field.
            reason: Human-readable explanation, used as the message.
        """
        self.field = field
        self.reason = reason
        super().__init__(reason)


class StoreFailureError(BrontoBoardError):
    """Raised when the underlying database operation fails."""

    kind = "StoreFailure"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__("A storage error occurred. Please try again later.")
