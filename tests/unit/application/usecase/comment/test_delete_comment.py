"""Unit tests for DeleteCommentUseCase."""

import pytest
from pydantic import TypeAdapter

from agora.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from agora.domain.error import NotAuthorizedError
from agora.domain.model import ChatroomEvent, DeleteCommentEvent
from agora.domain.repository import CommentRepository, UnitOfWork
from agora.domain.value import ReferenceKind
from tests.conftest import listen, make_comment, make_post, seed_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

events = TypeAdapter(ChatroomEvent)


class TestDeleteComment:
    """Tests for the delete comment flow."""

    @pytest.mark.asyncio
    async def test_delete_reply_broadcasts_its_parent(self, unit_env):
        """The event carries the deleted comment and where it hung."""
        # Arrange
        author = await seed_user(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        top = await comment_repo.save(make_comment(make_post(), minutes=1))
        reply = await comment_repo.save(make_comment(top, author=author, minutes=2))
        await comment_repo.save(make_comment(reply, minutes=3))
        client = await listen(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(comment_id=str(reply.id), actor_id=str(author.id))
        )

        # Assert
        assert response.replies_removed == 1
        assert await comment_repo.find_by_id(reply.id) is None
        assert await comment_repo.find_by_id(top.id) is not None

        event = events.validate_json(client.sent[0])
        assert isinstance(event, DeleteCommentEvent)
        assert event.payload.comment_id == reply.id
        assert event.payload.reference == ReferenceKind.COMMENT
        assert event.payload.reference_id == top.id

    @pytest.mark.asyncio
    async def test_permission_denied_changes_nothing(self, unit_env):
        stranger = await seed_user(unit_env, name="mallory")
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(make_post()))
        client = await listen(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeleteCommentRequest(
                    comment_id=str(comment.id), actor_id=str(stranger.id)
                )
            )

        assert await comment_repo.find_by_id(comment.id) == comment
        assert (await unit_env.get(UnitOfWork)).commits == 0
        assert client.sent == []
