"""File catalogue domain service."""

import logfire

from market.domain.error import NotFoundError
from market.domain.model import File, Upload
from market.domain.repository import FileRepository, UploadRepository
from market.domain.value import FileId, Page, page_offset

from .base import Service

FILES_PER_PAGE = 15
OTHER_FILES_LIMIT = 3


class FileService(Service):
    """Domain service for reading the file catalogue."""

    def __init__(
        self,
        file_repository: FileRepository,
        upload_repository: UploadRepository,
    ) -> None:
        """Initialize file service.

        Args:
            file_repository: File repository
            upload_repository: Upload repository
        """
        self.file_repository = file_repository
        self.upload_repository = upload_repository

    async def get_visible(self, file_id: FileId) -> File:
        """Get a file the public may see.

        Args:
            file_id: File ID

        Returns:
            The file

        Raises:
            NotFoundError: If the file does not exist or is not visible
        """
        with logfire.span("file_service.get_visible", file_id=file_id):
            file = await self.file_repository.find_by_id(file_id)
            if file is None or not file.is_visible:
                logfire.warn(
                    "File not found or not visible",
                    file_id=file_id,
                    exists=file is not None,
                )
                raise NotFoundError("File", str(file_id))
            return file

    async def list_ready(self, page: int = 1) -> Page[File]:
        """Get one page of files ready to be shown, newest first."""
        page = max(page, 1)
        with logfire.span("file_service.list_ready", page=page):
            total = await self.file_repository.count_ready()
            files = await self.file_repository.find_ready(
                limit=FILES_PER_PAGE, offset=page_offset(page, FILES_PER_PAGE)
            )
            logfire.info("Files listed", count=len(files), total=total)
            return Page(
                items=files,
                total=total,
                per_page=FILES_PER_PAGE,
                current_page=page,
            )

    async def list_approved_uploads(self, file_id: FileId) -> list[Upload]:
        """Get approved uploads of a file, newest first."""
        return await self.upload_repository.find_approved_by_file(file_id)

    async def list_approved_uploads_for(
        self, files: list[File]
    ) -> dict[FileId, list[Upload]]:
        """Get approved uploads for many files with a single query."""
        file_ids = [f.id for f in files if f.id is not None]
        if not file_ids:
            return {}
        return await self.upload_repository.find_approved_by_files(file_ids)

    async def list_other_files_by_owner(self, file: File) -> list[File]:
        """Get a few other approved files by the same owner, newest first."""
        with logfire.span(
            "file_service.list_other_files_by_owner",
            file_id=file.id,
            owner_id=file.owner_id,
        ):
            return await self.file_repository.find_approved_by_owner(
                file.owner_id, exclude_id=file.id, limit=OTHER_FILES_LIMIT
            )
