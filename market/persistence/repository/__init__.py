"""PostgreSQL repository implementations."""

from market.persistence.repository.comment import PostgresCommentRepository
from market.persistence.repository.file import PostgresFileRepository
from market.persistence.repository.sale import PostgresSaleRepository
from market.persistence.repository.upload import PostgresUploadRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresFileRepository",
    "PostgresSaleRepository",
    "PostgresUploadRepository",
]
