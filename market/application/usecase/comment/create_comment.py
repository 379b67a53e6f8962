"""Create comment use case."""

from pydantic import BaseModel

from market.domain.service import CommentService, FileService
from market.domain.value import CommentSubject, FileId, UserId
from market.domain.value.types import Handle

from .items import CommentItem, to_comment_item


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    file_id: int
    body: str
    captcha_token: str | None = None
    author_id: int  # From the authenticated viewer
    author_handle: Handle  # From the authenticated viewer
    remote_ip: str | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    message: str = "Comment created."
    comment: CommentItem


class CreateCommentUseCase:
    """Use case for posting a top-level comment on a file."""

    def __init__(
        self,
        comment_service: CommentService,
        file_service: FileService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            file_service: File domain service
        """
        self.comment_service = comment_service
        self.file_service = file_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify the file exists and is visible
        2. Create the comment (validates body and captcha)

        Raises:
            NotFoundError: If the file is missing or not visible
            ValidationError: If the body or captcha is rejected
        """
        file = await self.file_service.get_visible(FileId(request.file_id))

        comment = await self.comment_service.create(
            subject=CommentSubject.file(file.id),
            author_id=UserId(request.author_id),
            author_handle=request.author_handle,
            body=request.body,
            captcha_token=request.captcha_token,
            remote_ip=request.remote_ip,
        )

        return CreateCommentResponse(comment=to_comment_item(comment))
