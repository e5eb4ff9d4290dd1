"""PostgreSQL implementation of Thread repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from murmur.domain.error import StorageReadError, StorageWriteError
from murmur.domain.model import Thread
from murmur.domain.repository import ThreadRepository
from murmur.persistence.mappers import row_to_thread
from murmur.persistence.repository._errors import storage_errors
from murmur.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_uri(self, uri: str) -> Optional[Thread]:
        """Find a thread by its path."""
        with storage_errors("thread.find_by_uri", StorageReadError):
            stmt = select(threads_table).where(threads_table.c.uri == uri)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_thread(row._asdict()) if row else None

    async def create(self, uri: str, title: Optional[str]) -> Thread:
        """Create a thread.

        Two first comments on the same page may race to create its thread;
        the loser reads back the winner's row.
        """
        with storage_errors("thread.create", StorageWriteError):
            stmt = (
                pg_insert(threads_table)
                .values(uri=uri, title=title)
                .on_conflict_do_nothing(index_elements=[threads_table.c.uri])
                .returning(threads_table)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
        if row is not None:
            return row_to_thread(row._asdict())

        existing = await self.find_by_uri(uri)
        if existing is None:
            raise StorageWriteError("thread.create")
        return existing
