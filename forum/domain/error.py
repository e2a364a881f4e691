"""Domain layer errors.

Every domain error carries an ``ErrorKind`` so callers can branch on a
machine-readable value instead of matching message text.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable error kinds."""

    NOT_CONTAIN_NEEDED_PROPERTY = "NOT_CONTAIN_NEEDED_PROPERTY"
    NOT_MEET_DATA_TYPE_SPECIFICATION = "NOT_MEET_DATA_TYPE_SPECIFICATION"
    THREAD_NOT_FOUND = "THREAD_NOT_FOUND"
    COMMENT_NOT_FOUND = "COMMENT_NOT_FOUND"
    REPLY_NOT_FOUND = "REPLY_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    THREAD_TITLE_TAKEN = "THREAD_TITLE_TAKEN"


class DomainError(Exception):
    """Base domain error."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        super().__init__(message)


class ValidationError(DomainError):
    """Payload is missing a required property or has the wrong type.

    The message has the form ``ADD_THREAD.NOT_CONTAIN_NEEDED_PROPERTY``.
    """

    def __init__(self, entity: str, kind: ErrorKind):
        self.entity = entity
        super().__init__(kind, f"{entity}.{kind.value}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            ErrorKind(f"{resource.upper()}_NOT_FOUND"),
            f"{resource} not found: {identifier}",
        )


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str | None):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            ErrorKind.NOT_AUTHORIZED,
            f"User {user_id} is not authorized to modify {resource} {resource_id}",
        )


class ConflictError(DomainError):
    """Raised when a write would duplicate existing content."""

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(kind, message)


class ThreadTitleTakenError(ConflictError):
    """Raised when a thread with the same title already exists."""

    def __init__(self, title: str):
        self.title = title
        super().__init__(
            ErrorKind.THREAD_TITLE_TAKEN, f"Thread with title already exists: {title}"
        )
