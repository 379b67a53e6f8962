"""In-memory sale repository for testing."""

from itertools import count

from market.domain.model.sale import Sale
from market.domain.repository.sale import SaleRepository
from market.domain.value import FileId, SaleId, UserId


class InMemorySaleRepository(SaleRepository):
    """In-memory implementation of SaleRepository for testing."""

    def __init__(self) -> None:
        self._sales: dict[SaleId, Sale] = {}
        self._ids = count(1)

    async def count_by_file_and_buyer(self, file_id: FileId, buyer_id: UserId) -> int:
        """Count sales of a file to a buyer."""
        return sum(
            1
            for s in self._sales.values()
            if s.file_id == file_id and s.buyer_id == buyer_id
        )

    async def save(self, sale: Sale) -> Sale:
        """Save a sale, assigning an id on first save."""
        if sale.id is None:
            sale = sale.model_copy(update={"id": SaleId(next(self._ids))})
        self._sales[sale.id] = sale
        return sale
