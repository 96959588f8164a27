"""Unit tests for AnnouncementService."""

from uuid import uuid4

import pytest

from agora.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from agora.domain.service import AnnouncementService
from agora.domain.value import AnnouncementId, AnnouncementType, Role
from tests.conftest import seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateAnnouncement:
    """Tests for create_announcement."""

    @pytest.mark.asyncio
    async def test_published_announcement_is_stamped(self, unit_env):
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        service = await unit_env.get(AnnouncementService)

        announcement = await service.create_announcement(
            admin,
            title="Meetup",
            content="Friday at six",
            announcement_type=AnnouncementType.EVENT,
            published=True,
        )

        assert announcement.author.name == "mod"
        assert announcement.type == AnnouncementType.EVENT
        assert announcement.published_at == announcement.created_at

    @pytest.mark.asyncio
    async def test_draft_is_hidden_from_members(self, unit_env):
        """Drafts are only found when drafts are explicitly included."""
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        service = await unit_env.get(AnnouncementService)
        draft = await service.create_announcement(admin, "Soon", "Not yet")

        with pytest.raises(NotFoundError):
            await service.get_announcement(draft.id)
        assert (await service.get_announcement(draft.id, include_drafts=True)) == draft
        assert draft.published_at is None

    @pytest.mark.asyncio
    async def test_members_cannot_announce(self, unit_env):
        member = await seed_user(unit_env)
        service = await unit_env.get(AnnouncementService)

        with pytest.raises(NotAuthorizedError):
            await service.create_announcement(member, "Hi", "All")

    @pytest.mark.asyncio
    async def test_blank_title_is_rejected(self, unit_env):
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        service = await unit_env.get(AnnouncementService)

        with pytest.raises(ValidationError, match="Title"):
            await service.create_announcement(admin, "   ", "Body")


class TestUpdateAnnouncement:
    """Tests for update_announcement and delete_announcement."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, unit_env):
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        service = await unit_env.get(AnnouncementService)
        draft = await service.create_announcement(admin, "Title", "Body")

        updated = await service.update_announcement(draft, admin, title="New title")

        assert updated.title == "New title"
        assert updated.content == "Body"
        assert updated.published is False

    @pytest.mark.asyncio
    async def test_first_publication_time_is_kept(self, unit_env):
        """Unpublishing and republishing keeps the original publication time."""
        # Arrange
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        service = await unit_env.get(AnnouncementService)
        draft = await service.create_announcement(admin, "Title", "Body")

        # Act
        published = await service.update_announcement(draft, admin, published=True)
        pulled = await service.update_announcement(published, admin, published=False)
        again = await service.update_announcement(pulled, admin, published=True)

        # Assert
        assert published.published_at is not None
        assert pulled.published_at == published.published_at
        assert again.published_at == published.published_at

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        service = await unit_env.get(AnnouncementService)
        announcement = await service.create_announcement(
            admin, "Title", "Body", published=True
        )

        await service.delete_announcement(announcement.id, admin)

        with pytest.raises(NotFoundError):
            await service.get_announcement(announcement.id)
        with pytest.raises(NotFoundError):
            await service.delete_announcement(AnnouncementId(uuid4()), admin)
