"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from decimal import Decimal

import logfire

from market.domain.model import Comment, File
from market.domain.value import CommentId, CommentSubject, FileId, UserId
from market.domain.value.types import Handle

# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_file(
    owner_id: int = 1,
    title: str = "Test File",
    live: bool = True,
    approved: bool = True,
    minutes: int = 0,
    owner_handle: str = "owner",
) -> File:
    """Helper function to build an unsaved test file.

    Args:
        owner_id: Owner user ID
        title: File title
        live: Whether the owner has published the file
        approved: Whether moderation approved the file
        minutes: Offset from BASE_TIME, larger is newer
        owner_handle: Owner display handle

    Returns:
        File without an id
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return File(
        owner_id=UserId(owner_id),
        owner_handle=Handle(owner_handle),
        title=title,
        overview_short="Short overview",
        overview="Longer overview",
        price=Decimal("9.99"),
        live=live,
        approved=approved,
        created_at=created_at,
        updated_at=created_at,
    )


def make_comment(
    file_id: int,
    author_id: int = 2,
    body: str = "A test comment",
    parent_id: int | None = None,
    minutes: int = 0,
    comment_id: int | None = None,
) -> Comment:
    """Helper function to build a test comment on a file.

    Args:
        file_id: File the comment hangs off
        author_id: Author user ID
        body: Comment text
        parent_id: Parent comment ID for replies
        minutes: Offset from BASE_TIME, larger is newer
        comment_id: Explicit ID (only for tests that bypass the store)

    Returns:
        Comment, unsaved unless ``comment_id`` is given
    """
    return Comment(
        id=CommentId(comment_id) if comment_id is not None else None,
        subject=CommentSubject.file(FileId(file_id)),
        author_id=UserId(author_id),
        author_handle=Handle(f"user{author_id}"),
        body=body,
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
