"""Unit tests for CommentService."""

import pytest

from market.adapter.recaptcha import MockRecaptchaVerifier, RecaptchaVerifier
from market.domain.error import NotFoundError, ValidationError
from market.domain.repository import CommentRepository
from market.domain.service import CaptchaService, CommentService
from market.domain.value import CommentId, CommentSubject, FileId, UserId
from market.domain.value.types import Handle
from market.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked
unit_env = create_env_fixture()

FILE = CommentSubject.file(FileId(1))
OTHER_FILE = CommentSubject.file(FileId(2))
AUTHOR = UserId(5)
HANDLE = Handle("author")


async def _create(service: CommentService, body: str = "Nice file!", subject=FILE):
    return await service.create(
        subject=subject,
        author_id=AUTHOR,
        author_handle=HANDLE,
        body=body,
        captcha_token="valid-captcha",
    )


async def _reply(service: CommentService, parent_id, body: str = "Thanks!"):
    return await service.reply(
        subject=FILE,
        parent_id=parent_id,
        author_id=AUTHOR,
        author_handle=HANDLE,
        body=body,
    )


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_stores_top_level_comment(self, unit_env):
        """Created comment has an id, no parent and is stored."""
        # Arrange
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        # Act
        comment = await _create(service)

        # Assert
        assert comment.id is not None
        assert comment.parent_id is None
        assert comment.subject == FILE
        assert await repo.find_by_id(comment.id, FILE) == comment

    @pytest.mark.asyncio
    @pytest.mark.parametrize("length", [3, 2500])
    async def test_create_accepts_boundary_lengths(self, unit_env, length):
        """Bodies of exactly 3 and 2500 characters are accepted."""
        service = await unit_env.get(CommentService)

        comment = await _create(service, body="x" * length)

        assert len(comment.body) == length

    @pytest.mark.asyncio
    @pytest.mark.parametrize("length", [0, 2, 2501])
    async def test_create_rejects_out_of_range_lengths(self, unit_env, length):
        """Bodies shorter than 3 or longer than 2500 are rejected unstored."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError) as exc_info:
            await _create(service, body="x" * length)

        assert exc_info.value.field == "body"
        assert await repo.count_top_level(FILE) == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["   ", " ab ", "\n\t\n"])
    async def test_create_rejects_blank_or_short_after_trimming(self, unit_env, body):
        """Whitespace around the text does not count towards the minimum."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError) as exc_info:
            await _create(service, body=body)

        assert exc_info.value.field == "body"
        assert await repo.count_top_level(FILE) == 0

    @pytest.mark.asyncio
    async def test_create_stores_trimmed_body(self, unit_env):
        """The stored body has surrounding whitespace removed."""
        service = await unit_env.get(CommentService)

        comment = await _create(service, body="  Nice file!\n")

        assert comment.body == "Nice file!"

    @pytest.mark.asyncio
    async def test_create_without_captcha_fails(self, unit_env):
        """Missing captcha token is a validation error on the captcha field."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError) as exc_info:
            await service.create(
                subject=FILE,
                author_id=AUTHOR,
                author_handle=HANDLE,
                body="Nice file!",
                captcha_token=None,
            )

        assert exc_info.value.field == "captcha_token"
        assert await repo.count_top_level(FILE) == 0

    @pytest.mark.asyncio
    async def test_create_with_rejected_captcha_fails(self, unit_env):
        """A token the verifier rejects blocks the comment."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError, match="captcha check failed"):
            await service.create(
                subject=FILE,
                author_id=AUTHOR,
                author_handle=HANDLE,
                body="Nice file!",
                captcha_token=MockRecaptchaVerifier.REJECTED_TOKEN,
            )

        assert await repo.count_top_level(FILE) == 0

    @pytest.mark.asyncio
    async def test_body_checked_before_captcha(self, unit_env):
        """An invalid body never reaches the captcha verifier."""
        service = await unit_env.get(CommentService)
        verifier = await unit_env.get(RecaptchaVerifier)

        with pytest.raises(ValidationError):
            await _create(service, body="no")

        assert verifier.verified_tokens == []


class TestReply:
    """Tests for reply method."""

    @pytest.mark.asyncio
    async def test_reply_sets_parent_without_captcha(self, unit_env):
        """Replies need no captcha by default."""
        service = await unit_env.get(CommentService)
        verifier = await unit_env.get(RecaptchaVerifier)
        parent = await _create(service)
        verifier.verified_tokens.clear()

        reply = await _reply(service, parent.id)

        assert reply.parent_id == parent.id
        assert reply.subject == FILE
        assert verifier.verified_tokens == []

    @pytest.mark.asyncio
    async def test_reply_rejects_short_body_on_reply_field(self, unit_env):
        """Reply body errors are reported on the reply_body field."""
        service = await unit_env.get(CommentService)
        parent = await _create(service)

        with pytest.raises(ValidationError) as exc_info:
            await _reply(service, parent.id, body="ok")

        assert exc_info.value.field == "reply_body"

    @pytest.mark.asyncio
    async def test_reply_rejects_blank_body(self, unit_env):
        """A reply of only spaces is treated as missing."""
        service = await unit_env.get(CommentService)
        parent = await _create(service)

        with pytest.raises(ValidationError) as exc_info:
            await _reply(service, parent.id, body="   ")

        assert exc_info.value.field == "reply_body"
        assert exc_info.value.message == "This field is required."

    @pytest.mark.asyncio
    async def test_reply_to_missing_parent_fails(self, unit_env):
        """Replying to a comment that does not exist is Not-Found."""
        service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await _reply(service, CommentId(999))

    @pytest.mark.asyncio
    async def test_reply_to_parent_on_other_subject_fails(self, unit_env):
        """A parent must belong to the same subject as the reply."""
        service = await unit_env.get(CommentService)
        parent = await _create(service, subject=OTHER_FILE)

        with pytest.raises(NotFoundError):
            await _reply(service, parent.id)

    @pytest.mark.asyncio
    async def test_reply_requires_captcha_when_configured(self, unit_env):
        """With require_captcha_on_reply the reply goes through the captcha."""
        repo = await unit_env.get(CommentRepository)
        captcha_service = await unit_env.get(CaptchaService)
        service = CommentService(
            comment_repository=repo,
            captcha_service=captcha_service,
            require_captcha_on_reply=True,
        )
        parent = await _create(service)

        with pytest.raises(ValidationError) as exc_info:
            await _reply(service, parent.id)

        assert exc_info.value.field == "captcha_token"


class TestListTopLevel:
    """Tests for list_top_level method."""

    @pytest.mark.asyncio
    async def test_lists_only_top_level_newest_first(self, unit_env):
        """Replies are excluded and the newest comment comes first."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        older = await repo.add(make_comment(file_id=1, minutes=1))
        newer = await repo.add(make_comment(file_id=1, minutes=2))
        await repo.add(make_comment(file_id=1, parent_id=older.id, minutes=3))

        page = await service.list_top_level(FILE)

        assert [c.id for c in page.items] == [newer.id, older.id]
        assert page.total == 2

    @pytest.mark.asyncio
    async def test_pages_hold_at_most_fifteen(self, unit_env):
        """Twenty comments split into pages of 15 and 5."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        for minute in range(20):
            await repo.add(make_comment(file_id=1, minutes=minute))

        first = await service.list_top_level(FILE, page=1)
        second = await service.list_top_level(FILE, page=2)

        assert len(first.items) == 15
        assert len(second.items) == 5
        assert first.last_page == 2
        assert first.has_more_pages is True
        assert second.has_more_pages is False
        assert first.items[0].created_at > second.items[0].created_at

    @pytest.mark.asyncio
    async def test_empty_subject_gives_empty_page(self, unit_env):
        """No comments means an empty first page."""
        service = await unit_env.get(CommentService)

        page = await service.list_top_level(FILE)

        assert page.items == []
        assert page.total == 0
        assert page.last_page == 1

    @pytest.mark.asyncio
    async def test_other_subjects_are_not_listed(self, unit_env):
        """Comments on another file never show up."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        await repo.add(make_comment(file_id=2))

        page = await service.list_top_level(FILE)

        assert page.items == []


class TestDeleteThread:
    """Tests for delete_thread method."""

    @pytest.mark.asyncio
    async def test_delete_removes_root_and_descendants_only(self, unit_env):
        """[A, B, C reply A, D reply C]: deleting A leaves only B."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        a = await repo.add(make_comment(file_id=1, minutes=1))
        b = await repo.add(make_comment(file_id=1, minutes=2))
        c = await repo.add(make_comment(file_id=1, parent_id=a.id, minutes=3))
        d = await repo.add(make_comment(file_id=1, parent_id=c.id, minutes=4))

        deleted = await service.delete_thread(a.id, FILE)

        assert set(deleted) == {a.id, c.id, d.id}
        remaining = await repo.find_by_subject(FILE)
        assert [x.id for x in remaining] == [b.id]

    @pytest.mark.asyncio
    async def test_delete_leaf_removes_exactly_one(self, unit_env):
        """Deleting a reply without replies removes just that reply."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        root = await repo.add(make_comment(file_id=1, minutes=1))
        leaf = await repo.add(make_comment(file_id=1, parent_id=root.id, minutes=2))

        deleted = await service.delete_thread(leaf.id, FILE)

        assert deleted == [leaf.id]
        assert await repo.find_by_id(root.id, FILE) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_comment_is_noop(self, unit_env):
        """Unknown ids delete nothing and raise nothing."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        kept = await repo.add(make_comment(file_id=1))

        deleted = await service.delete_thread(CommentId(999), FILE)

        assert deleted == []
        assert await repo.find_by_id(kept.id, FILE) is not None

    @pytest.mark.asyncio
    async def test_delete_through_other_subject_is_noop(self, unit_env):
        """A comment on one file cannot be deleted through another file."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        on_first = await repo.add(make_comment(file_id=1))

        deleted = await service.delete_thread(on_first.id, OTHER_FILE)

        assert deleted == []
        assert await repo.find_by_id(on_first.id, FILE) is not None

    @pytest.mark.asyncio
    async def test_delete_deep_chain(self, unit_env):
        """A 5000 deep reply chain is removed without hitting recursion limits."""
        service = await unit_env.get(CommentService)
        repo = await unit_env.get(CommentRepository)
        root = await repo.add(make_comment(file_id=1))
        parent_id = root.id
        for minute in range(1, 5000):
            reply = await repo.add(
                make_comment(file_id=1, parent_id=parent_id, minutes=minute)
            )
            parent_id = reply.id

        deleted = await service.delete_thread(root.id, FILE)

        assert len(deleted) == 5000
        assert await repo.find_by_subject(FILE) == []

    @pytest.mark.asyncio
    async def test_delete_reports_only_rows_actually_removed(self):
        """A reply removed concurrently is not reported as deleted by us."""

        class RacingRepository(InMemoryCommentRepository):
            vanished: CommentId | None = None

            async def delete_many(self, comment_ids):
                self._comments.pop(self.vanished, None)
                return await super().delete_many(comment_ids)

        repo = RacingRepository()
        service = CommentService(
            comment_repository=repo,
            captcha_service=CaptchaService(verifier=MockRecaptchaVerifier()),
        )
        root = await repo.add(make_comment(file_id=1, minutes=1))
        gone = await repo.add(make_comment(file_id=1, parent_id=root.id, minutes=2))
        kept = await repo.add(make_comment(file_id=1, parent_id=root.id, minutes=3))
        repo.vanished = gone.id

        deleted = await service.delete_thread(root.id, FILE)

        assert set(deleted) == {root.id, kept.id}
        assert await repo.find_by_subject(FILE) == []
