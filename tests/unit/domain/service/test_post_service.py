"""Unit tests for PostService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from agora.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from agora.domain.repository import CommentRepository, PostRepository
from agora.domain.service import PostService
from agora.domain.value import PostId, PostType, Role
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_snapshots_author(self, unit_env):
        """The post carries the author's ID and name and starts unliked."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        author = make_user(name="alice")

        # Act
        post = await post_service.create_post(author, "First!", PostType.IMAGE)

        # Assert
        assert post.author.id == author.id
        assert post.author.name == "alice"
        assert post.type == PostType.IMAGE
        assert post.likes == 0
        assert post.liked_user_ids == []
        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "\n\t"])
    async def test_blank_content_is_rejected(self, unit_env, content):
        """Blank content raises ValidationError and stores nothing."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)

        with pytest.raises(ValidationError, match="Content is required"):
            await post_service.create_post(make_user(), content)

        _, total = await post_repo.list_posts()
        assert total == 0


class TestGetAndList:
    """Tests for get_post, list_posts and list_recent_posts."""

    @pytest.mark.asyncio
    async def test_get_missing_post_raises_not_found(self, unit_env):
        """Unknown IDs raise NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="Post not found"):
            await post_service.get_post(PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_list_posts_is_newest_first_and_paged(self, unit_env):
        """Pages follow creation time descending; total counts every post."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        posts = [make_post(content=f"post {i}", minutes=i) for i in range(5)]
        for post in posts:
            await post_repo.save(post)

        # Act
        first, total = await post_service.list_posts(page=1, limit=2)
        last, _ = await post_service.list_posts(page=3, limit=2)
        everything, _ = await post_service.list_posts(page=0, limit=0)

        # Assert
        assert total == 5
        assert [p.content for p in first] == ["post 4", "post 3"]
        assert [p.content for p in last] == ["post 0"]
        assert len(everything) == 5

    @pytest.mark.asyncio
    async def test_list_recent_posts_respects_window(self, unit_env):
        """Only posts created inside the window are returned."""
        post_service = await unit_env.get(PostService)
        fresh = await post_service.create_post(make_user(), "fresh")
        # make_post dates from 2024, far outside any window
        await (await unit_env.get(PostRepository)).save(make_post(content="stale"))

        recent = await post_service.list_recent_posts(timedelta(hours=48))

        assert [p.id for p in recent] == [fresh.id]


class TestDeletePost:
    """Tests for delete_post method."""

    @pytest.mark.asyncio
    async def test_author_deletes_post_and_comment_tree(self, unit_env):
        """Deleting removes the post and every comment and reply below it."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = make_user()
        post = make_post(author=author)
        await post_repo.save(post)
        top = make_comment(post, minutes=1)
        reply = make_comment(top, minutes=2)
        nested = make_comment(reply, minutes=3)
        for comment in (top, reply, nested):
            await comment_repo.save(comment)

        # Act
        removed = await post_service.delete_post(post, author)

        # Assert
        assert removed == 3
        assert await post_repo.find_by_id(post.id) is None
        for comment in (top, reply, nested):
            assert await comment_repo.find_by_id(comment.id) is None

    @pytest.mark.asyncio
    async def test_admin_may_delete_any_post(self, unit_env):
        """Administrators bypass the author check."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.save(post)

        await post_service.delete_post(post, make_user(name="mod", role=Role.ADMIN))

        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """A non-author, non-admin is refused and nothing changes."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        await post_repo.save(post)
        comment = make_comment(post)
        await comment_repo.save(comment)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.delete_post(post, make_user(name="mallory"))

        assert await post_repo.find_by_id(post.id) is not None
        assert await comment_repo.find_by_id(comment.id) is not None


class TestToggleLike:
    """Tests for toggle_like method."""

    @pytest.mark.asyncio
    async def test_like_then_unlike_restores_state(self, unit_env):
        """Two toggles by the same user cancel out."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = make_post()
        await post_repo.save(post)
        liker = make_user(name="bob")

        # Act
        liked_post, liked = await post_service.toggle_like(post.id, liker.id)
        unliked_post, unliked = await post_service.toggle_like(post.id, liker.id)

        # Assert
        assert liked is True
        assert liked_post.likes == 1
        assert liked_post.liked_user_ids == [liker.id]
        assert unliked is False
        assert unliked_post.likes == 0
        assert unliked_post.liked_user_ids == []

    @pytest.mark.asyncio
    async def test_likes_from_different_users_accumulate(self, unit_env):
        """Each user counts once."""
        post_service = await unit_env.get(PostService)
        post = make_post()
        await (await unit_env.get(PostRepository)).save(post)
        users = [make_user(name=f"u{i}") for i in range(3)]

        for user in users:
            updated, _ = await post_service.toggle_like(post.id, user.id)

        assert updated.likes == 3
        assert set(updated.liked_user_ids) == {u.id for u in users}

    @pytest.mark.asyncio
    async def test_like_missing_post_raises_not_found(self, unit_env):
        """Liking an unknown post raises NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.toggle_like(PostId(uuid4()), make_user().id)
