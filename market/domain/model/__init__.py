"""Domain model entities for the marketplace."""

from market.domain.model.comment import Comment
from market.domain.model.file import File
from market.domain.model.sale import Sale
from market.domain.model.upload import Upload

__all__ = [
    "Comment",
    "File",
    "Sale",
    "Upload",
]
