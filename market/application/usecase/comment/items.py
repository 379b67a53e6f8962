"""Comment response items shared by comment and file use cases."""

from datetime import datetime

from pydantic import BaseModel

from market.domain.model import Comment
from market.domain.value import Page
from market.domain.value.types import Handle


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: int
    file_id: int
    author_id: int
    author_handle: Handle
    body: str
    parent_id: int | None
    reply_count: int = 0
    created_at: datetime


class CommentPage(BaseModel):
    """Page of top-level comments."""

    comments: list[CommentItem]
    total: int
    per_page: int
    current_page: int
    last_page: int
    has_more_pages: bool


def to_comment_item(comment: Comment, reply_count: int = 0) -> CommentItem:
    return CommentItem(
        comment_id=comment.id,
        file_id=comment.subject.id,
        author_id=comment.author_id,
        author_handle=comment.author_handle,
        body=comment.body,
        parent_id=comment.parent_id,
        reply_count=reply_count,
        created_at=comment.created_at,
    )


def to_comment_page(
    page: Page[Comment], reply_counts: dict[int, int] | None = None
) -> CommentPage:
    reply_counts = reply_counts or {}
    return CommentPage(
        comments=[to_comment_item(c, reply_counts.get(c.id, 0)) for c in page.items],
        total=page.total,
        per_page=page.per_page,
        current_page=page.current_page,
        last_page=page.last_page,
        has_more_pages=page.has_more_pages,
    )
