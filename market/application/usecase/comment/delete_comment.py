"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from market.domain.error import NotAuthorizedError
from market.domain.repository import FileRepository
from market.domain.service import CommentService
from market.domain.value import CommentId, CommentSubject, FileId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    file_id: int
    user_id: int  # Current viewer; must be the author or the file owner


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str = "Comment deleted."
    deleted_ids: list[int]
    deleted_count: int


class DeleteCommentUseCase:
    """Use case for deleting a comment and its whole reply thread."""

    def __init__(
        self,
        comment_service: CommentService,
        file_repository: FileRepository,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            file_repository: File repository (ownership lookup, any visibility)
        """
        self.comment_service = comment_service
        self.file_repository = file_repository

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        A comment that does not exist on the file is a no-op and reports
        zero deletions.

        Raises:
            NotAuthorizedError: If the viewer is neither author nor file owner
        """
        comment_id = CommentId(request.comment_id)
        subject = CommentSubject.file(FileId(request.file_id))

        comment = await self.comment_service.get_comment(comment_id, subject)
        if comment is None:
            return DeleteCommentResponse(deleted_ids=[], deleted_count=0)

        if comment.author_id != request.user_id:
            file = await self.file_repository.find_by_id(FileId(request.file_id))
            if file is None or file.owner_id != request.user_id:
                logfire.warn(
                    "Comment delete refused",
                    comment_id=request.comment_id,
                    user_id=request.user_id,
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(request.comment_id), str(request.user_id)
                )

        deleted_ids = await self.comment_service.delete_thread(comment_id, subject)

        return DeleteCommentResponse(
            deleted_ids=deleted_ids, deleted_count=len(deleted_ids)
        )
