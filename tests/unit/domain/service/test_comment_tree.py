"""Unit tests for CommentTreeFetcher."""

import asyncio
from contextlib import asynccontextmanager
from uuid import UUID

import pytest

from agora.domain.model import Post
from agora.domain.repository import CommentRepositoryFactory
from agora.domain.service import CommentTreeFetcher
from agora.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryCommentRepositoryFactory,
)
from tests.conftest import make_comment, make_post


class ScriptedCommentRepository(InMemoryCommentRepository):
    """In-memory repository whose listings can fail, hang, or pause."""

    def __init__(self, delay: float = 0.0) -> None:
        super().__init__()
        self.delay = delay
        self.failing: set[UUID] = set()
        self.hanging: set[UUID] = set()
        self.garbled: set[UUID] = set()

    async def list_by_reference(self, reference, reference_id, page=0, limit=0):
        if reference_id in self.failing:
            raise RuntimeError("connection reset")
        if reference_id in self.garbled:
            return [None], 1
        if reference_id in self.hanging:
            await asyncio.sleep(10)
        if self.delay:
            await asyncio.sleep(self.delay)
        return await super().list_by_reference(reference, reference_id, page, limit)


class CountingFactory(CommentRepositoryFactory):
    """Hands out one repository and records how many are open at once."""

    def __init__(self, repository) -> None:
        self.repository = repository
        self.opened = 0
        self.open_now = 0
        self.peak = 0

    @asynccontextmanager
    async def _open(self):
        self.opened += 1
        self.open_now += 1
        self.peak = max(self.peak, self.open_now)
        try:
            yield self.repository
        finally:
            self.open_now -= 1

    def open(self):
        return self._open()


async def seed_thread(repository, post: Post, width: int = 2, depth: int = 2):
    """Give ``post`` ``width`` comments, each with a reply chain ``depth`` deep.

    Returns:
        Number of comments created
    """
    created = 0
    for i in range(width):
        parent = make_comment(post, minutes=i)
        await repository.save(parent)
        created += 1
        for level in range(depth):
            reply = make_comment(parent, minutes=i * 10 + level + 1)
            await repository.save(reply)
            created += 1
            parent = reply
    return created


def count_comments(post: Post) -> int:
    return sum(comment.count_tree() for comment in post.comments)


class TestFetchShape:
    """Tests for the tree the fetcher builds."""

    @pytest.mark.asyncio
    async def test_replies_nest_under_their_parent_in_creation_order(self):
        """C1 at t1, C2 at t2 and R1 replying to C1 give [C1 -> [R1], C2]."""
        # Arrange
        repository = InMemoryCommentRepository()
        post = make_post()
        c1 = make_comment(post, content="C1", minutes=1)
        c2 = make_comment(post, content="C2", minutes=2)
        r1 = make_comment(c1, content="R1", minutes=3)
        # Saved out of order on purpose
        for comment in (c2, r1, c1):
            await repository.save(comment)
        fetcher = CommentTreeFetcher(
            InMemoryCommentRepositoryFactory(repository), listing_timeout=1.0
        )

        # Act
        [result] = await fetcher.fetch([post], workers=1)

        # Assert
        assert [c.content for c in result.comments] == ["C1", "C2"]
        assert [r.content for r in result.comments[0].comments] == ["R1"]
        assert result.comments[0].comments[0].comments == []
        assert result.comments[1].comments == []

    @pytest.mark.asyncio
    async def test_deep_chain_is_fully_populated(self):
        """Every level of a long reply chain is attached."""
        repository = InMemoryCommentRepository()
        post = make_post()
        created = await seed_thread(repository, post, width=1, depth=25)
        fetcher = CommentTreeFetcher(
            InMemoryCommentRepositoryFactory(repository), listing_timeout=1.0
        )

        [result] = await fetcher.fetch([post], workers=1)

        assert count_comments(result) == created == 26

    @pytest.mark.asyncio
    async def test_chain_deeper_than_recursion_limit_is_fully_populated(self):
        """A 1500-level chain is fetched whole and its sibling post still is too."""
        # Arrange
        repository = InMemoryCommentRepository()
        deep, shallow = make_post(minutes=1), make_post(minutes=2)
        created = await seed_thread(repository, deep, width=1, depth=1499)
        await repository.save(make_comment(shallow, minutes=1))
        fetcher = CommentTreeFetcher(
            InMemoryCommentRepositoryFactory(repository), listing_timeout=1.0
        )

        # Act
        result = await fetcher.fetch([deep, shallow], workers=1)

        # Assert
        assert count_comments(result[0]) == created == 1500
        assert count_comments(result[1]) == 1
        level = result[0].comments
        for _ in range(1499):
            assert len(level) == 1
            level = level[0].comments
        assert level[0].comments == []

    @pytest.mark.asyncio
    async def test_deleted_comments_are_left_out(self):
        """Soft-deleted comments and their subtrees do not appear."""
        repository = InMemoryCommentRepository()
        post = make_post()
        keep = make_comment(post, content="keep", minutes=1)
        gone = make_comment(post, content="gone", minutes=2)
        for comment in (keep, gone, make_comment(gone, minutes=3)):
            await repository.save(comment)
        await repository.delete(gone.id)
        fetcher = CommentTreeFetcher(
            InMemoryCommentRepositoryFactory(repository), listing_timeout=1.0
        )

        [result] = await fetcher.fetch([post], workers=1)

        assert [c.content for c in result.comments] == ["keep"]

    @pytest.mark.asyncio
    async def test_input_posts_are_not_modified(self):
        """Enriched posts are copies; the caller's posts keep empty trees."""
        repository = InMemoryCommentRepository()
        post = make_post()
        await seed_thread(repository, post)
        fetcher = CommentTreeFetcher(
            InMemoryCommentRepositoryFactory(repository), listing_timeout=1.0
        )

        [result] = await fetcher.fetch([post], workers=1)

        assert post.comments == []
        assert result.comments


class TestFetchConcurrency:
    """Tests for worker counts and ordering."""

    @pytest.mark.asyncio
    async def test_empty_batch_returns_empty_list(self):
        """No posts means no work and no repositories opened."""
        factory = CountingFactory(InMemoryCommentRepository())
        fetcher = CommentTreeFetcher(factory, listing_timeout=1.0)

        result = await fetcher.fetch([], workers=4)

        assert result == []
        assert factory.opened == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("workers", "expected"),
        [(0, 1), (1, 1), (5, 5), (15, 5), (-3, 1)],
    )
    async def test_any_worker_count_returns_complete_trees_in_order(
        self, workers, expected
    ):
        """Output order matches input and every tree is complete for any W."""
        # Arrange
        repository = ScriptedCommentRepository(delay=0.001)
        posts = [make_post(content=f"post {i}", minutes=i) for i in range(5)]
        created = {}
        for i, post in enumerate(posts):
            created[post.id] = await seed_thread(repository, post, width=i % 3, depth=2)
        factory = CountingFactory(repository)
        fetcher = CommentTreeFetcher(factory, listing_timeout=1.0)

        # Act
        result = await fetcher.fetch(posts, workers=workers)

        # Assert
        assert [p.id for p in result] == [p.id for p in posts]
        for post in result:
            assert count_comments(post) == created[post.id]
        assert factory.opened == expected
        assert factory.peak == expected

    @pytest.mark.asyncio
    async def test_each_worker_opens_its_own_repository(self):
        """Workers never share a repository handle."""
        repository = ScriptedCommentRepository(delay=0.001)
        posts = [make_post(minutes=i) for i in range(3)]
        factory = CountingFactory(repository)
        fetcher = CommentTreeFetcher(factory, listing_timeout=1.0)

        await fetcher.fetch(posts, workers=3)

        assert factory.opened == 3
        assert factory.open_now == 0


class TestFetchFailures:
    """Tests for listing errors and timeouts."""

    @pytest.mark.asyncio
    async def test_failed_top_level_listing_yields_empty_tree(self):
        """A post whose listing fails gets no comments; the others are intact."""
        # Arrange
        repository = ScriptedCommentRepository()
        broken, healthy = make_post(minutes=1), make_post(minutes=2)
        await seed_thread(repository, broken)
        created = await seed_thread(repository, healthy)
        repository.failing.add(broken.id)
        fetcher = CommentTreeFetcher(
            InMemoryCommentRepositoryFactory(repository), listing_timeout=1.0
        )

        # Act
        result = await fetcher.fetch([broken, healthy], workers=2)

        # Assert
        assert result[0].comments == []
        assert count_comments(result[1]) == created

    @pytest.mark.asyncio
    async def test_failed_reply_listing_keeps_parent(self):
        """A failed reply listing truncates only that branch."""
        repository = ScriptedCommentRepository()
        post = make_post()
        parent = make_comment(post, minutes=1)
        sibling = make_comment(post, minutes=2)
        for comment in (parent, sibling, make_comment(parent, minutes=3)):
            await repository.save(comment)
        repository.failing.add(parent.id)
        fetcher = CommentTreeFetcher(
            InMemoryCommentRepositoryFactory(repository), listing_timeout=1.0
        )

        [result] = await fetcher.fetch([post], workers=1)

        assert [c.id for c in result.comments] == [parent.id, sibling.id]
        assert result.comments[0].comments == []

    @pytest.mark.asyncio
    async def test_timed_out_listing_yields_empty_level(self):
        """A listing that exceeds the timeout counts as no comments."""
        repository = ScriptedCommentRepository()
        slow, fast = make_post(minutes=1), make_post(minutes=2)
        await seed_thread(repository, slow)
        created = await seed_thread(repository, fast)
        repository.hanging.add(slow.id)
        fetcher = CommentTreeFetcher(
            InMemoryCommentRepositoryFactory(repository), listing_timeout=0.05
        )

        result = await asyncio.wait_for(fetcher.fetch([slow, fast], workers=2), 2)

        assert result[0].comments == []
        assert count_comments(result[1]) == created

    @pytest.mark.asyncio
    async def test_failed_job_leaves_later_jobs_on_the_same_worker_intact(self):
        """A post whose tree cannot be assembled does not stop the queue."""
        # Arrange
        repository = ScriptedCommentRepository()
        broken, healthy = make_post(minutes=1), make_post(minutes=2)
        await seed_thread(repository, broken)
        created = await seed_thread(repository, healthy)
        repository.garbled.add(broken.id)
        fetcher = CommentTreeFetcher(
            InMemoryCommentRepositoryFactory(repository), listing_timeout=1.0
        )

        # Act
        result = await asyncio.wait_for(
            fetcher.fetch([broken, healthy], workers=1), 2
        )

        # Assert
        assert [p.id for p in result] == [broken.id, healthy.id]
        assert result[0].comments == []
        assert count_comments(result[1]) == created
