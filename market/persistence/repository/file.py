"""PostgreSQL implementation of File repository."""

from typing import List, Optional

from sqlalchemy import desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from market.domain.model import File
from market.domain.repository import FileRepository
from market.domain.value import FileId, UserId
from market.persistence.mappers import file_to_dict, row_to_file
from market.persistence.tables import files_table

_READY = (files_table.c.live.is_(True), files_table.c.approved.is_(True))


class PostgresFileRepository(FileRepository):
    """PostgreSQL implementation of FileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, file_id: FileId) -> Optional[File]:
        """Find a file by ID."""
        stmt = select(files_table).where(files_table.c.id == file_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_file(row._asdict()) if row else None

    async def find_ready(self, limit: int, offset: int = 0) -> List[File]:
        """Find live, approved files, newest first."""
        stmt = (
            select(files_table)
            .where(*_READY)
            .order_by(desc(files_table.c.created_at), desc(files_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_file(row._asdict()) for row in result.fetchall()]

    async def count_ready(self) -> int:
        """Count live, approved files."""
        stmt = select(func.count()).select_from(files_table).where(*_READY)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_approved_by_owner(
        self,
        owner_id: UserId,
        exclude_id: FileId | None = None,
        limit: int = 3,
    ) -> List[File]:
        """Find approved files of an owner, newest first."""
        stmt = select(files_table).where(
            files_table.c.owner_id == owner_id,
            files_table.c.approved.is_(True),
        )
        if exclude_id is not None:
            stmt = stmt.where(files_table.c.id != exclude_id)

        stmt = stmt.order_by(
            desc(files_table.c.created_at), desc(files_table.c.id)
        ).limit(limit)

        result = await self.session.execute(stmt)
        return [row_to_file(row._asdict()) for row in result.fetchall()]

    async def save(self, file: File) -> File:
        """Insert or update a file."""
        values = file_to_dict(file)
        if file.id is None:
            stmt = files_table.insert().values(**values).returning(files_table)
        else:
            stmt = (
                files_table.update()
                .where(files_table.c.id == file.id)
                .values(**values)
                .returning(files_table)
            )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_file(row._asdict())
