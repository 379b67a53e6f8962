"""Mock persistence providers for testing."""

from dishka import Scope, provide

from market.domain.repository import (
    CommentRepository,
    FileRepository,
    SaleRepository,
    UploadRepository,
)
from market.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryFileRepository,
    InMemorySaleRepository,
    InMemoryUploadRepository,
)
from market.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data written by one HTTP request is visible to the
    next. Every test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_file_repository(self) -> FileRepository:
        """Provide in-memory file repository."""
        return InMemoryFileRepository()

    @provide(scope=Scope.APP)
    def get_upload_repository(self) -> UploadRepository:
        """Provide in-memory upload repository."""
        return InMemoryUploadRepository()

    @provide(scope=Scope.APP)
    def get_sale_repository(self) -> SaleRepository:
        """Provide in-memory sale repository."""
        return InMemorySaleRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()
