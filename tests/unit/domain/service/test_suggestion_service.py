"""Unit tests for SuggestionService."""

import pytest

from agora.domain.error import NotAuthorizedError, ValidationError
from agora.domain.service import SuggestionService
from agora.domain.value import Role, SuggestionStatus
from tests.conftest import seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestSuggestions:
    """Tests for creating and reviewing suggestions."""

    @pytest.mark.asyncio
    async def test_new_suggestion_is_pending(self, unit_env):
        member = await seed_user(unit_env)
        service = await unit_env.get(SuggestionService)

        suggestion = await service.create_suggestion(
            member, "Dark mode", "Please add a dark theme"
        )

        assert suggestion.status == SuggestionStatus.PENDING
        assert suggestion.author.id == member.id
        assert suggestion.reviewed_by is None

    @pytest.mark.asyncio
    async def test_blank_description_is_rejected(self, unit_env):
        member = await seed_user(unit_env)
        service = await unit_env.get(SuggestionService)

        with pytest.raises(ValidationError, match="Description"):
            await service.create_suggestion(member, "Title", " ")

    @pytest.mark.asyncio
    async def test_review_records_reviewer_and_keeps_notes(self, unit_env):
        """A later review without notes keeps the earlier notes."""
        # Arrange
        member = await seed_user(unit_env)
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        service = await unit_env.get(SuggestionService)
        suggestion = await service.create_suggestion(member, "Idea", "Details")

        # Act
        approved = await service.update_status(
            suggestion, admin, SuggestionStatus.APPROVED, admin_notes="Good one"
        )
        shipped = await service.update_status(
            approved, admin, SuggestionStatus.IMPLEMENTED
        )

        # Assert
        assert approved.reviewed_by == admin.id
        assert approved.reviewed_at is not None
        assert shipped.status == SuggestionStatus.IMPLEMENTED
        assert shipped.admin_notes == "Good one"
        assert (await service.get_suggestion(suggestion.id)) == shipped

    @pytest.mark.asyncio
    async def test_members_cannot_review(self, unit_env):
        member = await seed_user(unit_env)
        service = await unit_env.get(SuggestionService)
        suggestion = await service.create_suggestion(member, "Idea", "Details")

        with pytest.raises(NotAuthorizedError):
            await service.update_status(suggestion, member, SuggestionStatus.APPROVED)

    @pytest.mark.asyncio
    async def test_list_filters_by_status_and_author(self, unit_env):
        alice = await seed_user(unit_env, name="alice")
        bob = await seed_user(unit_env, name="bob")
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        service = await unit_env.get(SuggestionService)
        first = await service.create_suggestion(alice, "One", "First")
        await service.create_suggestion(bob, "Two", "Second")
        await service.update_status(first, admin, SuggestionStatus.REJECTED)

        rejected, rejected_total = await service.list_suggestions(
            status=SuggestionStatus.REJECTED
        )
        bobs, _ = await service.list_suggestions(author_id=bob.id)

        assert [s.id for s in rejected] == [first.id]
        assert rejected_total == 1
        assert [s.title for s in bobs] == ["Two"]
