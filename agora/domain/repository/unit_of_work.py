"""Transaction boundary for a request."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Commits the repository changes made so far in the current request.

    Use cases commit before announcing a mutation, so clients are never told
    about a change that could still roll back.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make pending changes durable."""
        pass

    @abstractmethod
    async def release(self) -> None:
        """End the current read transaction and give back its connection.

        Read use cases call this before fanning out to the comment-tree
        fetcher, whose workers draw connections from the same pool.
        """
        pass
