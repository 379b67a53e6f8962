"""Sale repository interface."""

from abc import ABC, abstractmethod

from market.domain.model.sale import Sale
from market.domain.value import FileId, UserId


class SaleRepository(ABC):
    """Repository for Sale records."""

    @abstractmethod
    async def count_by_file_and_buyer(self, file_id: FileId, buyer_id: UserId) -> int:
        """Count completed sales of a file to a buyer."""
        pass

    @abstractmethod
    async def save(self, sale: Sale) -> Sale:
        """Save a sale record."""
        pass
