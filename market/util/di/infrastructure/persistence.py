"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from market.config import Settings
from market.domain.repository import (
    CommentRepository,
    FileRepository,
    SaleRepository,
    UploadRepository,
)
from market.persistence.database import create_engine, create_session_factory
from market.persistence.repository import (
    PostgresCommentRepository,
    PostgresFileRepository,
    PostgresSaleRepository,
    PostgresUploadRepository,
)
from market.util.di.base import ProviderBase
from market.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Committed at the end of the request if no exception occurred,
        rolled back otherwise.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_file_repository(self, session: AsyncSession) -> FileRepository:
        """Provide File repository."""
        return PostgresFileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_upload_repository(self, session: AsyncSession) -> UploadRepository:
        """Provide Upload repository."""
        return PostgresUploadRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_sale_repository(self, session: AsyncSession) -> SaleRepository:
        """Provide Sale repository."""
        return PostgresSaleRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)
