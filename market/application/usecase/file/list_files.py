"""List files use case."""

import logfire
from pydantic import BaseModel, Field

from market.domain.service import FileService

from .items import FileSummary, UploadItem, to_file_summary, to_upload_item


class FileListItem(FileSummary):
    """File list item with its approved uploads."""

    uploads: list[UploadItem]


class ListFilesRequest(BaseModel):
    """List files request."""

    page: int = Field(default=1, ge=1)


class ListFilesResponse(BaseModel):
    """List files response."""

    files: list[FileListItem]
    total: int
    per_page: int
    current_page: int
    last_page: int
    has_more_pages: bool


class ListFilesUseCase:
    """Use case for the paginated catalogue index."""

    def __init__(self, file_service: FileService) -> None:
        """Initialize list files use case.

        Args:
            file_service: File domain service
        """
        self.file_service = file_service

    async def execute(self, request: ListFilesRequest) -> ListFilesResponse:
        """Execute list files flow.

        Uploads for the whole page are fetched with one batch query.
        """
        with logfire.span("list_files.execute", page=request.page):
            page = await self.file_service.list_ready(page=request.page)
            uploads = await self.file_service.list_approved_uploads_for(page.items)

            items = [
                FileListItem(
                    **to_file_summary(file).model_dump(),
                    uploads=[to_upload_item(u) for u in uploads.get(file.id, [])],
                )
                for file in page.items
            ]

            return ListFilesResponse(
                files=items,
                total=page.total,
                per_page=page.per_page,
                current_page=page.current_page,
                last_page=page.last_page,
                has_more_pages=page.has_more_pages,
            )
