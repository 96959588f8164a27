"""User aggregate root.

Accounts are created and authenticated elsewhere; the chatroom only
reads them for author attribution and permission checks.
"""

from datetime import datetime

from pydantic import Field

from agora.domain.model.common import DomainModel
from agora.domain.value import Role, UserId


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    name: str = Field(min_length=1, max_length=255)
    role: Role = Role.USER
    active: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        """Whether the user holds moderation privileges."""
        return self.role == Role.ADMIN
