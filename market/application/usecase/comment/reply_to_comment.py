"""Reply to comment use case."""

from pydantic import BaseModel

from market.domain.service import CommentService, FileService
from market.domain.value import CommentId, CommentSubject, FileId, UserId
from market.domain.value.types import Handle

from .items import CommentItem, to_comment_item


class ReplyToCommentRequest(BaseModel):
    """Reply to comment request."""

    file_id: int
    parent_id: int
    reply_body: str
    captcha_token: str | None = None  # Only checked when replies require it
    author_id: int
    author_handle: Handle
    remote_ip: str | None = None


class ReplyToCommentResponse(BaseModel):
    """Reply to comment response."""

    message: str = "Reply created."
    comment: CommentItem


class ReplyToCommentUseCase:
    """Use case for replying to a comment on a file."""

    def __init__(
        self,
        comment_service: CommentService,
        file_service: FileService,
    ) -> None:
        self.comment_service = comment_service
        self.file_service = file_service

    async def execute(self, request: ReplyToCommentRequest) -> ReplyToCommentResponse:
        """Execute reply flow.

        Raises:
            NotFoundError: If the file or the parent comment is missing
            ValidationError: If the body is rejected
        """
        file = await self.file_service.get_visible(FileId(request.file_id))

        reply = await self.comment_service.reply(
            subject=CommentSubject.file(file.id),
            parent_id=CommentId(request.parent_id),
            author_id=UserId(request.author_id),
            author_handle=request.author_handle,
            body=request.reply_body,
            captcha_token=request.captcha_token,
            remote_ip=request.remote_ip,
        )

        return ReplyToCommentResponse(comment=to_comment_item(reply))
