"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class ConnectionSendError(AdapterError):
    """A write to one live connection failed or timed out."""

    def __init__(self, user_id: str, reason: str):
        self.user_id = user_id
        self.reason = reason
        super().__init__(f"Send to connection of user {user_id} failed: {reason}")
