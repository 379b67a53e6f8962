"""PostgreSQL implementation of Upload repository."""

from collections import defaultdict
from typing import List

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from market.domain.model import Upload
from market.domain.repository import UploadRepository
from market.domain.value import FileId
from market.persistence.mappers import row_to_upload, upload_to_dict
from market.persistence.tables import uploads_table

_NEWEST_FIRST = (desc(uploads_table.c.created_at), desc(uploads_table.c.id))


class PostgresUploadRepository(UploadRepository):
    """PostgreSQL implementation of UploadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_approved_by_file(self, file_id: FileId) -> List[Upload]:
        """Find approved uploads of a file, newest first."""
        stmt = (
            select(uploads_table)
            .where(uploads_table.c.file_id == file_id)
            .where(uploads_table.c.approved.is_(True))
            .order_by(*_NEWEST_FIRST)
        )
        result = await self.session.execute(stmt)
        return [row_to_upload(row._asdict()) for row in result.fetchall()]

    async def find_approved_by_files(
        self, file_ids: List[FileId]
    ) -> dict[FileId, List[Upload]]:
        """Find approved uploads for many files in one query."""
        grouped: dict[FileId, List[Upload]] = defaultdict(list)
        if file_ids:
            stmt = (
                select(uploads_table)
                .where(uploads_table.c.file_id.in_(file_ids))
                .where(uploads_table.c.approved.is_(True))
                .order_by(*_NEWEST_FIRST)
            )
            result = await self.session.execute(stmt)
            for row in result.fetchall():
                upload = row_to_upload(row._asdict())
                grouped[upload.file_id].append(upload)

        return {file_id: grouped.get(file_id, []) for file_id in file_ids}

    async def save(self, upload: Upload) -> Upload:
        """Insert or update an upload."""
        values = upload_to_dict(upload)
        if upload.id is None:
            stmt = uploads_table.insert().values(**values).returning(uploads_table)
        else:
            stmt = (
                uploads_table.update()
                .where(uploads_table.c.id == upload.id)
                .values(**values)
                .returning(uploads_table)
            )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_upload(row._asdict())
