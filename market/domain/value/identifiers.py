"""Strongly typed identifiers for marketplace domain entities.

Identifiers are assigned by the store (auto-incrementing integers), so an
entity that has not been persisted yet carries ``None`` as its id.
"""

from typing import NewType

UserId = NewType("UserId", int)
FileId = NewType("FileId", int)
UploadId = NewType("UploadId", int)
SaleId = NewType("SaleId", int)
CommentId = NewType("CommentId", int)
