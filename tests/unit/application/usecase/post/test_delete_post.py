"""Unit tests for DeletePostUseCase."""

import pytest
from pydantic import TypeAdapter

from agora.application.usecase.post import DeletePostRequest, DeletePostUseCase
from agora.domain.error import NotAuthorizedError
from agora.domain.model import ChatroomEvent, DeletePostEvent
from agora.domain.repository import CommentRepository, PostRepository, UnitOfWork
from agora.domain.value import Role
from tests.conftest import listen, make_comment, make_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

events = TypeAdapter(ChatroomEvent)


class TestDeletePost:
    """Tests for the delete post flow."""

    @pytest.mark.asyncio
    async def test_author_delete_cascades_and_broadcasts(self, unit_env):
        """The post and its comments go; clients get ``delete_post``."""
        # Arrange
        author = await seed_user(unit_env)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(author=author))
        top = await comment_repo.save(make_comment(post, minutes=1))
        await comment_repo.save(make_comment(top, minutes=2))
        client = await listen(unit_env)
        use_case = await unit_env.get(DeletePostUseCase)

        # Act
        response = await use_case.execute(
            DeletePostRequest(post_id=str(post.id), actor_id=str(author.id))
        )

        # Assert
        assert response.comments_removed == 2
        assert await post_repo.find_by_id(post.id) is None
        assert (await unit_env.get(UnitOfWork)).commits == 1

        [frame] = client.sent
        event = events.validate_json(frame)
        assert isinstance(event, DeletePostEvent)
        assert event.payload.post_id == post.id

    @pytest.mark.asyncio
    async def test_admin_may_delete_others_posts(self, unit_env):
        admin = await seed_user(unit_env, name="mod", role=Role.ADMIN)
        post = await (await unit_env.get(PostRepository)).save(make_post())
        use_case = await unit_env.get(DeletePostUseCase)

        response = await use_case.execute(
            DeletePostRequest(post_id=str(post.id), actor_id=str(admin.id))
        )

        assert response.post_id == str(post.id)

    @pytest.mark.asyncio
    async def test_permission_denied_changes_nothing(self, unit_env):
        """A stranger's delete fails, commits nothing and broadcasts nothing."""
        # Arrange
        stranger = await seed_user(unit_env, name="mallory")
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post())
        comment = await comment_repo.save(make_comment(post))
        client = await listen(unit_env)
        use_case = await unit_env.get(DeletePostUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeletePostRequest(post_id=str(post.id), actor_id=str(stranger.id))
            )

        assert await post_repo.find_by_id(post.id) == post
        assert await comment_repo.find_by_id(comment.id) == comment
        assert (await unit_env.get(UnitOfWork)).commits == 0
        assert client.sent == []
