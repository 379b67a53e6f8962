"""Unit tests for collect_thread_ids."""

from market.domain.service import collect_thread_ids
from market.domain.value import CommentId
from tests.conftest import make_comment


def test_collects_depth_first_preorder():
    """Children follow their parent, siblings in creation order."""
    comments = [
        make_comment(file_id=1, comment_id=1, minutes=0),
        make_comment(file_id=1, comment_id=2, parent_id=1, minutes=1),
        make_comment(file_id=1, comment_id=3, parent_id=1, minutes=2),
        make_comment(file_id=1, comment_id=4, parent_id=2, minutes=3),
        make_comment(file_id=1, comment_id=5, minutes=4),
    ]

    assert collect_thread_ids(CommentId(1), comments) == [1, 2, 4, 3]


def test_unknown_root_yields_only_root():
    """A root with no replies collects just itself."""
    comments = [make_comment(file_id=1, comment_id=1)]

    assert collect_thread_ids(CommentId(1), comments) == [1]


def test_cycle_terminates():
    """Corrupt parent links forming a loop are visited once each."""
    comments = [
        make_comment(file_id=1, comment_id=1, parent_id=3, minutes=0),
        make_comment(file_id=1, comment_id=2, parent_id=1, minutes=1),
        make_comment(file_id=1, comment_id=3, parent_id=2, minutes=2),
    ]

    assert collect_thread_ids(CommentId(1), comments) == [1, 2, 3]


def test_self_parent_terminates():
    """A comment listed as its own parent does not loop."""
    comments = [make_comment(file_id=1, comment_id=7, parent_id=7)]

    assert collect_thread_ids(CommentId(7), comments) == [7]
