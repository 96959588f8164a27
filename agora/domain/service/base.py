"""Base service class for domain services."""

from agora.domain.error import NotAuthorizedError
from agora.domain.model.user import User
from agora.domain.value import UserId


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def ensure_author_or_admin(
        actor: User,
        author_id: UserId,
        action: str,
        resource: str,
        resource_id: str,
    ) -> None:
        """Allow the action only for the content's author or an administrator.

        Raises:
            NotAuthorizedError: If the actor is neither
        """
        if actor.id != author_id and not actor.is_admin:
            raise NotAuthorizedError(action, resource, resource_id, str(actor.id))

    @staticmethod
    def ensure_admin(
        actor: User, action: str, resource: str, resource_id: str
    ) -> None:
        """Allow the action only for administrators.

        Raises:
            NotAuthorizedError: If the actor is not an administrator
        """
        if not actor.is_admin:
            raise NotAuthorizedError(action, resource, resource_id, str(actor.id))
