"""In-memory comment repository for testing."""

from itertools import count
from typing import Optional

from market.domain.model.comment import Comment
from market.domain.repository.comment import CommentRepository
from market.domain.value import CommentId, CommentSubject


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    def _on_subject(self, subject: CommentSubject) -> list[Comment]:
        return [c for c in self._comments.values() if c.subject == subject]

    async def find_by_id(
        self, comment_id: CommentId, subject: CommentSubject
    ) -> Optional[Comment]:
        """Find a comment by ID within a subject."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.subject != subject:
            return None
        return comment

    async def find_by_subject(self, subject: CommentSubject) -> list[Comment]:
        """Find every comment on a subject, oldest first."""
        comments = self._on_subject(subject)
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def find_top_level(
        self,
        subject: CommentSubject,
        limit: int,
        offset: int = 0,
    ) -> list[Comment]:
        """Find top-level comments on a subject, newest first."""
        comments = [c for c in self._on_subject(subject) if c.is_top_level]
        comments.sort(key=lambda c: (c.created_at, c.id), reverse=True)
        return comments[offset : offset + limit]

    async def count_top_level(self, subject: CommentSubject) -> int:
        """Count top-level comments on a subject."""
        return sum(1 for c in self._on_subject(subject) if c.is_top_level)

    async def count_replies(
        self, parent_ids: list[CommentId]
    ) -> dict[CommentId, int]:
        """Count direct replies for each comment."""
        counts: dict[CommentId, int] = {parent_id: 0 for parent_id in parent_ids}
        for comment in self._comments.values():
            if comment.parent_id in counts:
                counts[comment.parent_id] += 1
        return counts

    async def add(self, comment: Comment) -> Comment:
        """Store a comment under the next free id."""
        stored = comment.model_copy(update={"id": CommentId(next(self._ids))})
        self._comments[stored.id] = stored
        return stored

    async def delete_many(self, comment_ids: list[CommentId]) -> list[CommentId]:
        """Delete the given comments."""
        deleted = []
        for comment_id in comment_ids:
            if self._comments.pop(comment_id, None) is not None:
                deleted.append(comment_id)
        return deleted
