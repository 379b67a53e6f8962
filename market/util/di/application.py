"""Application layer DI providers."""

from dishka import Scope, provide

from market.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ReplyToCommentUseCase,
)
from market.application.usecase.file import GetFileUseCase, ListFilesUseCase
from market.domain.repository import FileRepository
from market.domain.service import CommentService, FileService, SaleService
from market.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Application use cases provider - concrete, no mocks needed."""

    # File use cases
    @provide(scope=Scope.REQUEST)
    def get_list_files_use_case(self, file_service: FileService) -> ListFilesUseCase:
        """Provide list files use case."""
        return ListFilesUseCase(file_service=file_service)

    @provide(scope=Scope.REQUEST)
    def get_get_file_use_case(
        self,
        file_service: FileService,
        sale_service: SaleService,
        comment_service: CommentService,
    ) -> GetFileUseCase:
        """Provide get file use case."""
        return GetFileUseCase(
            file_service=file_service,
            sale_service=sale_service,
            comment_service=comment_service,
        )

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self, comment_service: CommentService, file_service: FileService
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service, file_service=file_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService, file_service: FileService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service, file_service=file_service
        )

    @provide(scope=Scope.REQUEST)
    def get_reply_to_comment_use_case(
        self, comment_service: CommentService, file_service: FileService
    ) -> ReplyToCommentUseCase:
        """Provide reply to comment use case."""
        return ReplyToCommentUseCase(
            comment_service=comment_service, file_service=file_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, file_repository: FileRepository
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, file_repository=file_repository
        )
