"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from market.domain.model.comment import Comment
from market.domain.value import CommentId, CommentSubject


class CommentRepository(ABC):
    """Repository for Comment entity.

    Every lookup is scoped by subject so a comment id can never be resolved
    through a thread it does not belong to.
    """

    @abstractmethod
    async def find_by_id(
        self, comment_id: CommentId, subject: CommentSubject
    ) -> Optional[Comment]:
        """Find a comment by ID within a subject.

        Args:
            comment_id: The comment's unique identifier
            subject: The subject the comment must belong to

        Returns:
            The comment if found on that subject, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_subject(self, subject: CommentSubject) -> List[Comment]:
        """Find every comment (top-level and replies) on a subject.

        Args:
            subject: The subject

        Returns:
            Flat list of comments, oldest first
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        subject: CommentSubject,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments on a subject, newest first.

        Args:
            subject: The subject
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of top-level comments
        """
        pass

    @abstractmethod
    async def count_top_level(self, subject: CommentSubject) -> int:
        """Count top-level comments on a subject."""
        pass

    @abstractmethod
    async def count_replies(
        self, parent_ids: List[CommentId]
    ) -> dict[CommentId, int]:
        """Count direct replies for each of the given comments.

        Args:
            parent_ids: Comment IDs to count replies for

        Returns:
            Mapping of comment ID to direct reply count (0 when none)
        """
        pass

    @abstractmethod
    async def add(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to insert (its id is ignored)

        Returns:
            The stored comment with its store-assigned id
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: List[CommentId]) -> List[CommentId]:
        """Delete the given comments in one batch.

        Args:
            comment_ids: IDs to delete

        Returns:
            IDs of the comments actually removed; ids already gone are omitted
        """
        pass
