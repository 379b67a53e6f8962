"""Repository interfaces for the marketplace domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from market.domain.repository.comment import CommentRepository
from market.domain.repository.file import FileRepository
from market.domain.repository.sale import SaleRepository
from market.domain.repository.upload import UploadRepository

__all__ = [
    "CommentRepository",
    "FileRepository",
    "SaleRepository",
    "UploadRepository",
]
