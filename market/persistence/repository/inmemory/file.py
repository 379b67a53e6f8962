"""In-memory file repository for testing."""

from itertools import count
from typing import Optional

from market.domain.model.file import File
from market.domain.repository.file import FileRepository
from market.domain.value import FileId, UserId


class InMemoryFileRepository(FileRepository):
    """In-memory implementation of FileRepository for testing."""

    def __init__(self) -> None:
        self._files: dict[FileId, File] = {}
        self._ids = count(1)

    @staticmethod
    def _newest_first(files: list[File]) -> list[File]:
        return sorted(files, key=lambda f: (f.created_at, f.id), reverse=True)

    async def find_by_id(self, file_id: FileId) -> Optional[File]:
        """Find a file by ID."""
        return self._files.get(file_id)

    async def find_ready(self, limit: int, offset: int = 0) -> list[File]:
        """Find live, approved files, newest first."""
        files = self._newest_first([f for f in self._files.values() if f.is_visible])
        return files[offset : offset + limit]

    async def count_ready(self) -> int:
        """Count live, approved files."""
        return sum(1 for f in self._files.values() if f.is_visible)

    async def find_approved_by_owner(
        self,
        owner_id: UserId,
        exclude_id: FileId | None = None,
        limit: int = 3,
    ) -> list[File]:
        """Find approved files of an owner, newest first."""
        files = [
            f
            for f in self._files.values()
            if f.owner_id == owner_id and f.approved and f.id != exclude_id
        ]
        return self._newest_first(files)[:limit]

    async def save(self, file: File) -> File:
        """Save a file, assigning an id on first save."""
        if file.id is None:
            file = file.model_copy(update={"id": FileId(next(self._ids))})
        self._files[file.id] = file
        return file
