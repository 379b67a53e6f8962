"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .file import InMemoryFileRepository
from .sale import InMemorySaleRepository
from .upload import InMemoryUploadRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryFileRepository",
    "InMemorySaleRepository",
    "InMemoryUploadRepository",
]
