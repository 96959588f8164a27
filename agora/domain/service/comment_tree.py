"""Concurrent comment-tree fetcher.

Given a batch of posts, fills in every post's comment tree (top-level
comments, their replies, and so on to any depth) using a bounded pool of
asyncio workers. Each post's tree is built end-to-end by a single worker,
so no two workers ever touch the same post, and results are written back
by input position so the returned batch keeps its original order.
"""

import asyncio
from dataclasses import dataclass
from uuid import UUID

import logfire

from agora.domain.model.comment import Comment
from agora.domain.model.post import Post
from agora.domain.repository import CommentRepository, CommentRepositoryFactory
from agora.domain.value import ReferenceKind

from .base import Service


@dataclass(frozen=True)
class CommentJob:
    """One post whose comment tree must be populated."""

    position: int
    post: Post


class CommentTreeFetcher(Service):
    """Populates comment trees for batches of posts."""

    def __init__(
        self,
        repository_factory: CommentRepositoryFactory,
        listing_timeout: float,
    ) -> None:
        """Initialize the fetcher.

        Args:
            repository_factory: Opens one comment repository per worker
            listing_timeout: Upper bound in seconds for each listing call
        """
        self.repository_factory = repository_factory
        self.listing_timeout = listing_timeout

    async def fetch(self, posts: list[Post], workers: int) -> list[Post]:
        """Return ``posts`` with their full comment trees attached.

        Effective concurrency is clamped to ``[1, len(posts)]``, so any
        ``workers`` value is accepted. A failed or timed-out listing for any
        level is treated as that level having no comments.

        Args:
            posts: Posts to enrich, in display order
            workers: Requested worker count

        Returns:
            Enriched posts in the same order as ``posts``
        """
        if not posts:
            return []

        effective = max(1, min(workers, len(posts)))

        with logfire.span(
            "comment_tree.fetch", posts=len(posts), workers=effective
        ):
            queue: asyncio.Queue[CommentJob] = asyncio.Queue(maxsize=len(posts))
            for position, post in enumerate(posts):
                queue.put_nowait(CommentJob(position=position, post=post))

            results = list(posts)
            outcomes = await asyncio.gather(
                *(self._worker(queue, results) for _ in range(effective)),
                return_exceptions=True,
            )

            for outcome in outcomes:
                if isinstance(outcome, BaseException):
                    logfire.error("Comment tree worker failed", error=str(outcome))

            return results

    async def _worker(
        self, queue: "asyncio.Queue[CommentJob]", results: list[Post]
    ) -> None:
        async with self.repository_factory.open() as repository:
            while True:
                try:
                    job = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return

                try:
                    comments = await self._fetch_tree(repository, job.post.id)
                    results[job.position] = job.post.model_copy(
                        update={"comments": comments}
                    )
                except Exception as e:
                    # The post keeps the tree it arrived with
                    logfire.error(
                        "Comment tree job failed",
                        post_id=str(job.post.id),
                        error=str(e),
                        error_type=type(e).__name__,
                    )
                finally:
                    queue.task_done()

    async def _fetch_tree(
        self, repository: CommentRepository, post_id: UUID
    ) -> list[Comment]:
        """Depth-first fetch of everything below one post, oldest first.

        Walks with an explicit stack so thread depth is bounded only by
        memory. Listings are issued in pre-order; the tree is then assembled
        bottom-up from the recorded children.
        """
        roots = await self._list_level(repository, ReferenceKind.POST, post_id)

        seen = {comment.id for comment in roots}
        children: dict[UUID, list[Comment]] = {}
        visited: list[Comment] = []
        stack = list(reversed(roots))

        while stack:
            comment = stack.pop()
            visited.append(comment)

            replies = [
                reply
                for reply in await self._list_level(
                    repository, ReferenceKind.COMMENT, comment.id
                )
                if reply.id not in seen
            ]
            seen.update(reply.id for reply in replies)
            children[comment.id] = replies
            stack.extend(reversed(replies))

        # Reverse pre-order puts every reply before its parent
        built: dict[UUID, Comment] = {}
        for comment in reversed(visited):
            built[comment.id] = comment.model_copy(
                update={"comments": [built[r.id] for r in children[comment.id]]}
            )
        return [built[comment.id] for comment in roots]

    async def _list_level(
        self,
        repository: CommentRepository,
        reference: ReferenceKind,
        reference_id: UUID,
    ) -> list[Comment]:
        try:
            comments, _ = await asyncio.wait_for(
                repository.list_by_reference(reference, reference_id, 0, 0),
                timeout=self.listing_timeout,
            )
            return comments
        except asyncio.TimeoutError:
            logfire.warn(
                "Comment listing timed out",
                reference=reference.value,
                reference_id=str(reference_id),
                timeout=self.listing_timeout,
            )
            return []
        except Exception as e:
            logfire.warn(
                "Comment listing failed",
                reference=reference.value,
                reference_id=str(reference_id),
                error=str(e),
            )
            return []
