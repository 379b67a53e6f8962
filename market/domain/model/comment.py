"""Comment entity.

Comments form threads on a subject (currently always a file). A comment
without a parent is a top-level comment; any other comment is a reply.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from market.domain.model.common import DomainModel
from market.domain.value import CommentId, CommentSubject, UserId
from market.domain.value.types import Handle

COMMENT_BODY_MIN_LENGTH = 3
COMMENT_BODY_MAX_LENGTH = 2500
COMMENTS_PER_PAGE = 15


class Comment(DomainModel):
    """Comment entity.

    Comments are never edited after creation. Deleting one removes its
    whole reply subtree.
    """

    id: Optional[CommentId] = None  # Assigned by the store
    subject: CommentSubject
    author_id: UserId
    author_handle: Handle
    body: str = Field(
        min_length=COMMENT_BODY_MIN_LENGTH, max_length=COMMENT_BODY_MAX_LENGTH
    )
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        return self.parent_id is None
