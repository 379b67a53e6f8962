"""Get file detail use case."""

from datetime import datetime
from decimal import Decimal

import logfire
from pydantic import BaseModel, Field

from market.application.usecase.comment.items import CommentPage, to_comment_page
from market.domain.service import CommentService, FileService, SaleService
from market.domain.value import CommentSubject, FileId, UserId
from market.domain.value.types import Handle

from .items import FileSummary, UploadItem, to_file_summary, to_upload_item


class GetFileRequest(BaseModel):
    """Get file request."""

    file_id: int
    comments_page: int = Field(default=1, ge=1)
    viewer_id: int | None = None  # Current user ID (if authenticated)


class GetFileResponse(BaseModel):
    """File detail view."""

    file_id: int
    title: str
    overview_short: str
    overview: str
    price: Decimal
    owner_id: int
    owner_handle: Handle
    created_at: datetime
    updated_at: datetime
    uploads: list[UploadItem]
    owns_file: bool
    other_files: list[FileSummary]
    comments: CommentPage


class GetFileUseCase:
    """Use case assembling the file detail view."""

    def __init__(
        self,
        file_service: FileService,
        sale_service: SaleService,
        comment_service: CommentService,
    ) -> None:
        """Initialize get file use case.

        Args:
            file_service: File domain service
            sale_service: Sale domain service (ownership)
            comment_service: Comment domain service
        """
        self.file_service = file_service
        self.sale_service = sale_service
        self.comment_service = comment_service

    async def execute(self, request: GetFileRequest) -> GetFileResponse:
        """Execute get file flow.

        Steps:
        1. Load the file, refusing invisible ones
        2. Approved uploads, newest first
        3. Whether the viewer bought the file
        4. Up to three other approved files by the same owner
        5. The requested page of top-level comments

        Raises:
            NotFoundError: If the file does not exist or is not visible
        """
        with logfire.span(
            "get_file.execute",
            file_id=request.file_id,
            viewer_id=request.viewer_id,
        ):
            file = await self.file_service.get_visible(FileId(request.file_id))

            uploads = await self.file_service.list_approved_uploads(file.id)
            owns_file = await self.sale_service.user_owns_file(
                file.id,
                UserId(request.viewer_id) if request.viewer_id is not None else None,
            )
            other_files = await self.file_service.list_other_files_by_owner(file)

            comments = await self.comment_service.list_top_level(
                CommentSubject.file(file.id), page=request.comments_page
            )
            reply_counts = await self.comment_service.count_replies(comments.items)

            return GetFileResponse(
                file_id=file.id,
                title=file.title,
                overview_short=file.overview_short,
                overview=file.overview,
                price=file.price,
                owner_id=file.owner_id,
                owner_handle=file.owner_handle,
                created_at=file.created_at,
                updated_at=file.updated_at,
                uploads=[to_upload_item(u) for u in uploads],
                owns_file=owns_file,
                other_files=[to_file_summary(f) for f in other_files],
                comments=to_comment_page(comments, reply_counts),
            )
