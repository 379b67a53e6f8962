"""In-memory upload repository for testing."""

from itertools import count

from market.domain.model.upload import Upload
from market.domain.repository.upload import UploadRepository
from market.domain.value import FileId, UploadId


class InMemoryUploadRepository(UploadRepository):
    """In-memory implementation of UploadRepository for testing."""

    def __init__(self) -> None:
        self._uploads: dict[UploadId, Upload] = {}
        self._ids = count(1)

    async def find_approved_by_file(self, file_id: FileId) -> list[Upload]:
        """Find approved uploads of a file, newest first."""
        uploads = [
            u for u in self._uploads.values() if u.file_id == file_id and u.approved
        ]
        uploads.sort(key=lambda u: (u.created_at, u.id), reverse=True)
        return uploads

    async def find_approved_by_files(
        self, file_ids: list[FileId]
    ) -> dict[FileId, list[Upload]]:
        """Find approved uploads for many files."""
        return {
            file_id: await self.find_approved_by_file(file_id) for file_id in file_ids
        }

    async def save(self, upload: Upload) -> Upload:
        """Save an upload, assigning an id on first save."""
        if upload.id is None:
            upload = upload.model_copy(update={"id": UploadId(next(self._ids))})
        self._uploads[upload.id] = upload
        return upload
