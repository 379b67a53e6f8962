"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict

from market.domain.model import Comment, File, Sale, Upload
from market.domain.value import (
    CommentId,
    CommentSubject,
    FileId,
    SaleId,
    SubjectKind,
    UploadId,
    UserId,
)
from market.domain.value.types import Handle


def _without_id(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop a missing id so the database assigns one."""
    if data.get("id") is None:
        data.pop("id", None)
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(row["id"]),
        subject=CommentSubject(
            kind=SubjectKind(row["subject_kind"]), id=row["subject_id"]
        ),
        author_id=UserId(row["author_id"]),
        author_handle=Handle(row["author_handle"]),
        body=row["body"],
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return _without_id(
        {
            "id": comment.id,
            "subject_kind": comment.subject.kind.value,
            "subject_id": comment.subject.id,
            "parent_id": comment.parent_id,
            "author_id": comment.author_id,
            "author_handle": comment.author_handle.root,
            "body": comment.body,
            "created_at": comment.created_at,
        }
    )


def row_to_file(row: Dict[str, Any]) -> File:
    """Convert database row to File domain model."""
    return File(
        id=FileId(row["id"]),
        owner_id=UserId(row["owner_id"]),
        owner_handle=Handle(row["owner_handle"]),
        title=row["title"],
        overview_short=row.get("overview_short") or "",
        overview=row.get("overview") or "",
        price=row["price"],
        live=row["live"],
        approved=row["approved"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def file_to_dict(file: File) -> Dict[str, Any]:
    """Convert File domain model to database dict."""
    data = file.model_dump()
    data["owner_handle"] = file.owner_handle.root
    return _without_id(data)


def row_to_upload(row: Dict[str, Any]) -> Upload:
    """Convert database row to Upload domain model."""
    return Upload(
        id=UploadId(row["id"]),
        file_id=FileId(row["file_id"]),
        filename=row["filename"],
        size=row["size"],
        approved=row["approved"],
        created_at=row["created_at"],
    )


def upload_to_dict(upload: Upload) -> Dict[str, Any]:
    """Convert Upload domain model to database dict."""
    return _without_id(upload.model_dump())


def row_to_sale(row: Dict[str, Any]) -> Sale:
    """Convert database row to Sale domain model."""
    return Sale(
        id=SaleId(row["id"]),
        file_id=FileId(row["file_id"]),
        buyer_id=UserId(row["buyer_id"]),
        sale_price=row["sale_price"],
        created_at=row["created_at"],
    )


def sale_to_dict(sale: Sale) -> Dict[str, Any]:
    """Convert Sale domain model to database dict."""
    return _without_id(sale.model_dump())
