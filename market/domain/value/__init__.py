"""Domain value objects for the marketplace."""

from market.domain.value.identifiers import (
    CommentId,
    FileId,
    SaleId,
    UploadId,
    UserId,
)
from market.domain.value.pagination import Page, page_offset
from market.domain.value.types import CommentSubject, Handle, SubjectKind

__all__ = [
    # Identifiers
    "UserId",
    "FileId",
    "UploadId",
    "SaleId",
    "CommentId",
    # Types
    "CommentSubject",
    "Handle",
    "SubjectKind",
    # Pagination
    "Page",
    "page_offset",
]
