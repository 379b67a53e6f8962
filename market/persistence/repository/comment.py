"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import and_, desc, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from market.domain.model import Comment
from market.domain.repository import CommentRepository
from market.domain.value import CommentId, CommentSubject
from market.persistence.mappers import comment_to_dict, row_to_comment
from market.persistence.tables import comments_table


def _on_subject(subject: CommentSubject):
    return and_(
        comments_table.c.subject_kind == subject.kind.value,
        comments_table.c.subject_id == subject.id,
    )


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, comment_id: CommentId, subject: CommentSubject
    ) -> Optional[Comment]:
        """Find a comment by ID within a subject."""
        stmt = select(comments_table).where(
            comments_table.c.id == comment_id, _on_subject(subject)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_subject(self, subject: CommentSubject) -> List[Comment]:
        """Find every comment on a subject, oldest first."""
        stmt = (
            select(comments_table)
            .where(_on_subject(subject))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_top_level(
        self,
        subject: CommentSubject,
        limit: int,
        offset: int = 0,
    ) -> List[Comment]:
        """Find top-level comments on a subject, newest first."""
        stmt = (
            select(comments_table)
            .where(_on_subject(subject))
            .where(comments_table.c.parent_id.is_(None))
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.id))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_top_level(self, subject: CommentSubject) -> int:
        """Count top-level comments on a subject."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(_on_subject(subject))
            .where(comments_table.c.parent_id.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_replies(
        self, parent_ids: List[CommentId]
    ) -> dict[CommentId, int]:
        """Count direct replies for each comment with a grouped query."""
        counts: dict[CommentId, int] = {parent_id: 0 for parent_id in parent_ids}
        if not parent_ids:
            return counts

        stmt = (
            select(comments_table.c.parent_id, func.count())
            .where(comments_table.c.parent_id.in_(parent_ids))
            .group_by(comments_table.c.parent_id)
        )
        result = await self.session.execute(stmt)
        for parent_id, count in result.fetchall():
            counts[CommentId(parent_id)] = count
        return counts

    async def add(self, comment: Comment) -> Comment:
        """Insert a comment and return it with its assigned id."""
        stmt = (
            comments_table.insert()
            .values(**comment_to_dict(comment.model_copy(update={"id": None})))
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete_many(self, comment_ids: List[CommentId]) -> List[CommentId]:
        """Delete the given comments with a single statement."""
        if not comment_ids:
            return []

        stmt = (
            comments_table.delete()
            .where(comments_table.c.id.in_(comment_ids))
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return [CommentId(row.id) for row in result]
