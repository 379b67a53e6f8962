"""Get comments use case."""

from pydantic import BaseModel, Field

from market.domain.service import CommentService, FileService
from market.domain.value import CommentSubject, FileId

from .items import CommentPage, to_comment_page


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    file_id: int
    page: int = Field(default=1, ge=1)


class GetCommentsResponse(CommentPage):
    """Get comments response."""

    file_id: int


class GetCommentsUseCase:
    """Use case for listing a page of top-level comments on a file."""

    def __init__(
        self,
        comment_service: CommentService,
        file_service: FileService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            file_service: File domain service
        """
        self.comment_service = comment_service
        self.file_service = file_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Each top-level comment carries the number of direct replies so the
        client can decide whether to expand it.

        Raises:
            NotFoundError: If the file does not exist or is not visible
        """
        file = await self.file_service.get_visible(FileId(request.file_id))

        page = await self.comment_service.list_top_level(
            CommentSubject.file(file.id), page=request.page
        )
        reply_counts = await self.comment_service.count_replies(page.items)

        return GetCommentsResponse(
            file_id=file.id,
            **to_comment_page(page, reply_counts).model_dump(),
        )
