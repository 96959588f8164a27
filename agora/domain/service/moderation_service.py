"""Moderation domain service.

Bans and role changes. A ban deactivates the account, so every other
service treats a banned user as unknown until they are unbanned.
"""

from datetime import datetime
from typing import Optional

import logfire

from agora.domain.error import ConflictError, NotFoundError, ValidationError
from agora.domain.model.user import User
from agora.domain.repository import UserRepository
from agora.domain.value import Role, UserId

from .base import Service


class ModerationService(Service):
    """Domain service for administrator actions on user accounts."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize moderation service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def _target(self, user_id: UserId) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if not user:
            logfire.warn("Moderation target not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return user

    async def _store(self, user: User, **changes: object) -> User:
        updated = user.model_copy(update={**changes, "updated_at": datetime.now()})
        return await self.user_repository.save(updated)

    async def ban_user(self, actor: User, user_id: UserId) -> User:
        """Ban a user.

        Args:
            actor: Administrator performing the ban
            user_id: User to ban

        Returns:
            The banned user

        Raises:
            NotAuthorizedError: If the actor is not an administrator
            NotFoundError: If the user does not exist
            ValidationError: If the actor tries to ban themselves
            ConflictError: If the user is an administrator or already banned
        """
        with logfire.span(
            "moderation_service.ban_user", actor_id=str(actor.id), user_id=str(user_id)
        ):
            self.ensure_admin(actor, "ban", "User", str(user_id))
            if actor.id == user_id:
                raise ValidationError("Administrators cannot ban themselves")

            target = await self._target(user_id)
            if target.is_admin:
                raise ConflictError("Administrators must be demoted before a ban")
            if not target.active:
                raise ConflictError(f"User {user_id} is already banned")

            banned = await self._store(target, active=False)
            logfire.info("User banned", user_id=str(user_id), by=str(actor.id))
            return banned

    async def unban_user(self, actor: User, user_id: UserId) -> User:
        """Lift a ban.

        Raises:
            NotAuthorizedError: If the actor is not an administrator
            NotFoundError: If the user does not exist
            ConflictError: If the user is not banned
        """
        with logfire.span(
            "moderation_service.unban_user",
            actor_id=str(actor.id),
            user_id=str(user_id),
        ):
            self.ensure_admin(actor, "unban", "User", str(user_id))
            target = await self._target(user_id)
            if target.active:
                raise ConflictError(f"User {user_id} is not banned")

            unbanned = await self._store(target, active=True)
            logfire.info("User unbanned", user_id=str(user_id), by=str(actor.id))
            return unbanned

    async def promote_user(self, actor: User, user_id: UserId) -> User:
        """Grant administrator rights.

        Raises:
            NotAuthorizedError: If the actor is not an administrator
            NotFoundError: If the user does not exist
            ConflictError: If the user is banned or already an administrator
        """
        with logfire.span(
            "moderation_service.promote_user",
            actor_id=str(actor.id),
            user_id=str(user_id),
        ):
            self.ensure_admin(actor, "promote", "User", str(user_id))
            target = await self._target(user_id)
            if not target.active:
                raise ConflictError(f"User {user_id} is banned")
            if target.is_admin:
                raise ConflictError(f"User {user_id} is already an administrator")

            promoted = await self._store(target, role=Role.ADMIN)
            logfire.info("User promoted", user_id=str(user_id), by=str(actor.id))
            return promoted

    async def demote_user(self, actor: User, user_id: UserId) -> User:
        """Take administrator rights away.

        Raises:
            NotAuthorizedError: If the actor is not an administrator
            NotFoundError: If the user does not exist
            ValidationError: If the actor tries to demote themselves
            ConflictError: If the user is not an administrator
        """
        with logfire.span(
            "moderation_service.demote_user",
            actor_id=str(actor.id),
            user_id=str(user_id),
        ):
            self.ensure_admin(actor, "demote", "User", str(user_id))
            if actor.id == user_id:
                raise ValidationError("Administrators cannot demote themselves")

            target = await self._target(user_id)
            if not target.is_admin:
                raise ConflictError(f"User {user_id} is not an administrator")

            demoted = await self._store(target, role=Role.USER)
            logfire.info("User demoted", user_id=str(user_id), by=str(actor.id))
            return demoted

    async def list_users(
        self,
        actor: User,
        banned: Optional[bool] = None,
        role: Optional[Role] = None,
        page: int = 0,
        limit: int = 0,
    ) -> tuple[list[User], int]:
        """List accounts for the moderation console.

        Args:
            actor: Administrator asking
            banned: Only banned (True) or only active (False) users, if given
            role: Only users with this role, if given
            page: 1-based page number
            limit: Page size, 0 for everything

        Returns:
            Users on the page and the total matching
        """
        with logfire.span("moderation_service.list_users", actor_id=str(actor.id)):
            self.ensure_admin(actor, "list", "User", "*")
            active = None if banned is None else not banned
            return await self.user_repository.list_users(
                active=active, role=role, page=page, limit=limit
            )
