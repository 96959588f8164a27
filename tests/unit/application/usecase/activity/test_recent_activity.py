"""Unit tests for GetRecentActivityTotalUseCase."""

import pytest

from agora.application.usecase.activity import GetRecentActivityTotalUseCase
from agora.domain.repository import CommentRepository, PostRepository
from agora.domain.service import PostService
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRecentActivity:
    """Tests for the recent activity counter."""

    @pytest.mark.asyncio
    async def test_counts_recent_posts_and_their_top_level_comments(self, unit_env):
        """Old posts are ignored and replies do not count."""
        # Arrange
        post_service = await unit_env.get(PostService)
        comment_repo = await unit_env.get(CommentRepository)
        recent = await post_service.create_post(make_user(), "recent")
        top = await comment_repo.save(make_comment(recent, minutes=1))
        await comment_repo.save(make_comment(recent, minutes=2))
        await comment_repo.save(make_comment(top, minutes=3))
        old = await (await unit_env.get(PostRepository)).save(make_post())
        await comment_repo.save(make_comment(old))
        use_case = await unit_env.get(GetRecentActivityTotalUseCase)

        # Act
        response = await use_case.execute()

        # Assert
        assert response.posts == 1
        assert response.comments == 2
        assert response.total == 3
        assert response.window_hours == 48

    @pytest.mark.asyncio
    async def test_empty_room_counts_zero(self, unit_env):
        use_case = await unit_env.get(GetRecentActivityTotalUseCase)

        response = await use_case.execute()

        assert response.total == 0
