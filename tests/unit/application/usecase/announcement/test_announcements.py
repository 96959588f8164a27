"""Unit tests for the announcement use cases."""

import pytest

from agora.application.usecase.announcement import (
    CreateAnnouncementRequest,
    CreateAnnouncementUseCase,
    DeleteAnnouncementRequest,
    DeleteAnnouncementUseCase,
    GetAnnouncementRequest,
    GetAnnouncementsRequest,
    GetAnnouncementsUseCase,
    GetAnnouncementUseCase,
    UpdateAnnouncementRequest,
    UpdateAnnouncementUseCase,
)
from agora.domain.error import NotAuthorizedError, NotFoundError
from agora.domain.repository import UnitOfWork
from agora.domain.value import Role
from tests.conftest import seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def announce(unit_env, admin, title: str, published: bool):
    use_case = await unit_env.get(CreateAnnouncementUseCase)
    response = await use_case.execute(
        CreateAnnouncementRequest(
            author_id=str(admin.id),
            title=title,
            content=f"{title} body",
            published=published,
        )
    )
    return response.announcement


class TestReadAnnouncements:
    """Tests for the public and admin listings."""

    @pytest.mark.asyncio
    async def test_public_listing_skips_drafts(self, unit_env):
        # Arrange
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        live = await announce(unit_env, admin, "Live", published=True)
        await announce(unit_env, admin, "Draft", published=False)
        use_case = await unit_env.get(GetAnnouncementsUseCase)

        # Act
        public = await use_case.execute(GetAnnouncementsRequest())
        console = await use_case.execute(
            GetAnnouncementsRequest(include_drafts=True, actor_id=str(admin.id))
        )

        # Assert
        assert [a.id for a in public.announcements] == [live.id]
        assert public.total == 1
        assert console.total == 2

    @pytest.mark.asyncio
    async def test_members_cannot_see_drafts(self, unit_env):
        member = await seed_user(unit_env)
        use_case = await unit_env.get(GetAnnouncementsUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                GetAnnouncementsRequest(include_drafts=True, actor_id=str(member.id))
            )

    @pytest.mark.asyncio
    async def test_single_draft_is_not_found_publicly(self, unit_env):
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        draft = await announce(unit_env, admin, "Draft", published=False)
        use_case = await unit_env.get(GetAnnouncementUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetAnnouncementRequest(announcement_id=str(draft.id))
            )
        response = await use_case.execute(
            GetAnnouncementRequest(
                announcement_id=str(draft.id),
                include_drafts=True,
                actor_id=str(admin.id),
            )
        )
        assert response.announcement.id == draft.id


class TestWriteAnnouncements:
    """Tests for create, update and delete."""

    @pytest.mark.asyncio
    async def test_publish_draft_then_delete(self, unit_env):
        """A draft becomes public when published and disappears on delete."""
        # Arrange
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        draft = await announce(unit_env, admin, "Draft", published=False)
        update = await unit_env.get(UpdateAnnouncementUseCase)
        delete = await unit_env.get(DeleteAnnouncementUseCase)
        read = await unit_env.get(GetAnnouncementUseCase)

        # Act
        updated = await update.execute(
            UpdateAnnouncementRequest(
                announcement_id=str(draft.id), actor_id=str(admin.id), published=True
            )
        )
        public = await read.execute(
            GetAnnouncementRequest(announcement_id=str(draft.id))
        )
        await delete.execute(
            DeleteAnnouncementRequest(
                announcement_id=str(draft.id), actor_id=str(admin.id)
            )
        )

        # Assert
        assert updated.announcement.published is True
        assert public.announcement.title == "Draft"
        assert (await unit_env.get(UnitOfWork)).commits == 3
        with pytest.raises(NotFoundError):
            await read.execute(GetAnnouncementRequest(announcement_id=str(draft.id)))

    @pytest.mark.asyncio
    async def test_member_update_is_forbidden_even_for_drafts(self, unit_env):
        """Members get 403 rather than learning whether a draft exists."""
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        member = await seed_user(unit_env)
        draft = await announce(unit_env, admin, "Draft", published=False)
        update = await unit_env.get(UpdateAnnouncementUseCase)

        with pytest.raises(NotAuthorizedError):
            await update.execute(
                UpdateAnnouncementRequest(
                    announcement_id=str(draft.id),
                    actor_id=str(member.id),
                    title="Mine now",
                )
            )
