"""Unit of work implementations."""

from sqlalchemy.ext.asyncio import AsyncSession

from agora.domain.repository.unit_of_work import UnitOfWork
from agora.persistence.error import store_errors


class SessionUnitOfWork(UnitOfWork):
    """Commits the request's SQLAlchemy session."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        with store_errors("unit_of_work.commit"):
            await self.session.commit()

    async def release(self) -> None:
        # Ends the autobegun transaction, returning its connection to the pool
        with store_errors("unit_of_work.release"):
            await self.session.commit()


class InMemoryUnitOfWork(UnitOfWork):
    """In-memory repositories apply changes immediately; counts calls."""

    def __init__(self) -> None:
        self.commits = 0
        self.releases = 0

    async def commit(self) -> None:
        self.commits += 1

    async def release(self) -> None:
        self.releases += 1
