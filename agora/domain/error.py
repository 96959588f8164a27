"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (e.g. empty content)."""

    pass


class ConflictError(DomainError):
    """Raised when a change does not apply to the current state.

    For example banning a user who is already banned.
    """

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they neither own nor moderate."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class StoreError(DomainError):
    """Raised when the backing store fails a read or write."""

    pass
