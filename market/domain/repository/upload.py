"""Upload repository interface."""

from abc import ABC, abstractmethod
from typing import List

from market.domain.model.upload import Upload
from market.domain.value import FileId


class UploadRepository(ABC):
    """Repository for Upload entity."""

    @abstractmethod
    async def find_approved_by_file(self, file_id: FileId) -> List[Upload]:
        """Find approved uploads of a file, newest first."""
        pass

    @abstractmethod
    async def find_approved_by_files(
        self, file_ids: List[FileId]
    ) -> dict[FileId, List[Upload]]:
        """Find approved uploads for many files in one query.

        Args:
            file_ids: Files to fetch uploads for

        Returns:
            Mapping of file ID to its uploads (newest first); files without
            uploads map to an empty list
        """
        pass

    @abstractmethod
    async def save(self, upload: Upload) -> Upload:
        """Save an upload (insert when it has no id yet, update otherwise)."""
        pass
