"""File repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from market.domain.model.file import File
from market.domain.value import FileId, UserId


class FileRepository(ABC):
    """Repository for File aggregate."""

    @abstractmethod
    async def find_by_id(self, file_id: FileId) -> Optional[File]:
        """Find a file by ID regardless of its visibility."""
        pass

    @abstractmethod
    async def find_ready(self, limit: int, offset: int = 0) -> List[File]:
        """Find files ready to be shown (live and approved), newest first.

        Args:
            limit: Maximum number of files to return
            offset: Number of files to skip

        Returns:
            List of files
        """
        pass

    @abstractmethod
    async def count_ready(self) -> int:
        """Count files ready to be shown."""
        pass

    @abstractmethod
    async def find_approved_by_owner(
        self,
        owner_id: UserId,
        exclude_id: FileId | None = None,
        limit: int = 3,
    ) -> List[File]:
        """Find approved files of an owner, newest first.

        Args:
            owner_id: Owner user ID
            exclude_id: File to leave out of the result
            limit: Maximum number of files to return

        Returns:
            List of files
        """
        pass

    @abstractmethod
    async def save(self, file: File) -> File:
        """Save a file (insert when it has no id yet, update otherwise)."""
        pass
