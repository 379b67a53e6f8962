"""Comment domain service."""

from collections import defaultdict
from datetime import datetime
from typing import Iterable

import logfire

from market.domain.error import NotFoundError, ValidationError
from market.domain.model.comment import (
    COMMENT_BODY_MAX_LENGTH,
    COMMENT_BODY_MIN_LENGTH,
    COMMENTS_PER_PAGE,
    Comment,
)
from market.domain.repository import CommentRepository
from market.domain.value import CommentId, CommentSubject, Page, UserId, page_offset
from market.domain.value.types import Handle

from .base import Service
from .captcha_service import CaptchaService


def validate_body(body: str, field: str = "body") -> str:
    """Trim a comment body and check its length (inclusive bounds).

    Surrounding whitespace never counts towards the length, so blank text
    is treated as missing.

    Returns:
        The trimmed body, which is what gets stored

    Raises:
        ValidationError: If the body is blank, too short or too long
    """
    body = body.strip()
    if not body:
        raise ValidationError(field, "This field is required.")
    if len(body) < COMMENT_BODY_MIN_LENGTH:
        raise ValidationError(
            field, f"Must be at least {COMMENT_BODY_MIN_LENGTH} characters."
        )
    if len(body) > COMMENT_BODY_MAX_LENGTH:
        raise ValidationError(
            field, f"May not be greater than {COMMENT_BODY_MAX_LENGTH} characters."
        )
    return body


def collect_thread_ids(
    root_id: CommentId, comments: Iterable[Comment]
) -> list[CommentId]:
    """Collect a comment and all of its transitive replies.

    Builds a parent -> children adjacency map from a flat list and walks it
    depth-first with an explicit stack, so arbitrarily deep threads do not hit
    the recursion limit. Each id is emitted once even if the stored parent
    links contain a cycle.

    Args:
        root_id: Comment at the top of the subtree
        comments: Flat list of comments on the same subject

    Returns:
        The root id followed by its descendants in depth-first pre-order,
        children in creation order
    """
    adjacency: dict[CommentId, list[CommentId]] = defaultdict(list)
    for comment in sorted(comments, key=lambda c: (c.created_at, c.id or 0)):
        if comment.parent_id is not None and comment.id is not None:
            adjacency[comment.parent_id].append(comment.id)

    collected: list[CommentId] = []
    seen: set[CommentId] = set()
    stack = [root_id]
    while stack:
        comment_id = stack.pop()
        if comment_id in seen:
            continue
        seen.add(comment_id)
        collected.append(comment_id)
        # Reversed so the first child is popped first
        stack.extend(reversed(adjacency.get(comment_id, [])))

    return collected


class CommentService(Service):
    """Domain service for comment threads."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        captcha_service: CaptchaService,
        require_captcha_on_reply: bool = False,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            captcha_service: Captcha guard for new top-level comments
            require_captcha_on_reply: Also demand a captcha for replies
        """
        self.comment_repository = comment_repository
        self.captcha_service = captcha_service
        self.require_captcha_on_reply = require_captcha_on_reply

    async def list_top_level(
        self, subject: CommentSubject, page: int = 1
    ) -> Page[Comment]:
        """Get one page of top-level comments, newest first.

        The total is counted separately from the page query so the page
        knows how many pages exist. When there is nothing to show the page
        query is skipped.

        Args:
            subject: Subject whose thread to list
            page: 1-based page number (values below 1 are treated as 1)

        Returns:
            Page of top-level comments
        """
        page = max(page, 1)
        with logfire.span(
            "comment_service.list_top_level",
            subject_kind=subject.kind.value,
            subject_id=subject.id,
            page=page,
        ):
            total = await self.comment_repository.count_top_level(subject)
            if total == 0:
                return Page.empty(per_page=COMMENTS_PER_PAGE, current_page=page)

            comments = await self.comment_repository.find_top_level(
                subject,
                limit=COMMENTS_PER_PAGE,
                offset=page_offset(page, COMMENTS_PER_PAGE),
            )
            logfire.info(
                "Top-level comments retrieved",
                subject_id=subject.id,
                count=len(comments),
                total=total,
            )
            return Page(
                items=comments,
                total=total,
                per_page=COMMENTS_PER_PAGE,
                current_page=page,
            )

    async def count_replies(self, comments: list[Comment]) -> dict[CommentId, int]:
        """Count direct replies of each comment in one query."""
        comment_ids = [c.id for c in comments if c.id is not None]
        if not comment_ids:
            return {}
        return await self.comment_repository.count_replies(comment_ids)

    async def get_comment(
        self, comment_id: CommentId, subject: CommentSubject
    ) -> Comment | None:
        """Get a comment by ID within its subject."""
        with logfire.span(
            "comment_service.get_comment",
            comment_id=comment_id,
            subject_id=subject.id,
        ):
            comment = await self.comment_repository.find_by_id(comment_id, subject)
            if comment is None:
                logfire.warn(
                    "Comment not found", comment_id=comment_id, subject_id=subject.id
                )
            return comment

    async def create(
        self,
        subject: CommentSubject,
        author_id: UserId,
        author_handle: Handle,
        body: str,
        captcha_token: str | None,
        remote_ip: str | None = None,
    ) -> Comment:
        """Create a top-level comment.

        Args:
            subject: Subject to comment on
            author_id: Author user ID
            author_handle: Author handle
            body: Comment text
            captcha_token: Captcha response token
            remote_ip: Address of the author, passed to the captcha check

        Returns:
            Created comment with its store-assigned id

        Raises:
            ValidationError: If the body length or captcha check fails
        """
        with logfire.span(
            "comment_service.create",
            subject_kind=subject.kind.value,
            subject_id=subject.id,
            author_id=author_id,
        ):
            body = validate_body(body)
            await self.captcha_service.ensure_passed(captcha_token, remote_ip=remote_ip)

            saved = await self.comment_repository.add(
                Comment(
                    subject=subject,
                    author_id=author_id,
                    author_handle=author_handle,
                    body=body,
                    parent_id=None,
                    created_at=datetime.now(),
                )
            )
            logfire.info(
                "Comment created",
                comment_id=saved.id,
                subject_id=subject.id,
                author_handle=author_handle.root,
            )
            return saved

    async def reply(
        self,
        subject: CommentSubject,
        parent_id: CommentId,
        author_id: UserId,
        author_handle: Handle,
        body: str,
        captcha_token: str | None = None,
        remote_ip: str | None = None,
    ) -> Comment:
        """Reply to a comment.

        A captcha is only demanded when ``require_captcha_on_reply`` is set.

        Args:
            subject: Subject the thread belongs to
            parent_id: Comment being replied to
            author_id: Author user ID
            author_handle: Author handle
            body: Reply text
            captcha_token: Captcha response token (only checked when required)
            remote_ip: Address of the author

        Returns:
            Created reply with its store-assigned id

        Raises:
            ValidationError: If the body length (or required captcha) fails
            NotFoundError: If the parent does not exist on this subject
        """
        with logfire.span(
            "comment_service.reply",
            subject_kind=subject.kind.value,
            subject_id=subject.id,
            parent_id=parent_id,
            author_id=author_id,
        ):
            body = validate_body(body, field="reply_body")
            if self.require_captcha_on_reply:
                await self.captcha_service.ensure_passed(
                    captcha_token, remote_ip=remote_ip
                )

            parent = await self.comment_repository.find_by_id(parent_id, subject)
            if parent is None:
                logfire.error(
                    "Parent comment not found on subject",
                    parent_id=parent_id,
                    subject_id=subject.id,
                )
                raise NotFoundError("Comment", str(parent_id))

            saved = await self.comment_repository.add(
                Comment(
                    subject=subject,
                    author_id=author_id,
                    author_handle=author_handle,
                    body=body,
                    parent_id=parent.id,
                    created_at=datetime.now(),
                )
            )
            logfire.info(
                "Reply created",
                comment_id=saved.id,
                parent_id=parent_id,
                subject_id=subject.id,
            )
            return saved

    async def delete_thread(
        self, comment_id: CommentId, subject: CommentSubject
    ) -> list[CommentId]:
        """Delete a comment together with all of its replies.

        The comment is looked up by id and subject, so an id belonging to
        another subject is never touched. A missing comment is a no-op.

        Args:
            comment_id: Comment at the top of the subtree
            subject: Subject the comment must belong to

        Returns:
            IDs that were deleted (empty if the comment was not found)
        """
        with logfire.span(
            "comment_service.delete_thread",
            comment_id=comment_id,
            subject_id=subject.id,
        ):
            root = await self.comment_repository.find_by_id(comment_id, subject)
            if root is None:
                logfire.warn(
                    "Comment to delete not found",
                    comment_id=comment_id,
                    subject_id=subject.id,
                )
                return []

            thread = await self.comment_repository.find_by_subject(subject)
            ids = collect_thread_ids(comment_id, thread)

            removed = set(await self.comment_repository.delete_many(ids))
            if len(removed) != len(ids):
                # Rows already gone were deleted by a concurrent request
                logfire.warn(
                    "Comment thread partially deleted",
                    comment_id=comment_id,
                    subject_id=subject.id,
                    planned=len(ids),
                    deleted=len(removed),
                )
            logfire.info(
                "Comment thread deleted",
                comment_id=comment_id,
                subject_id=subject.id,
                deleted=len(removed),
            )
            return [i for i in ids if i in removed]
