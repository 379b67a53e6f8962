"""Sale domain service."""

import logfire

from market.domain.repository import SaleRepository
from market.domain.value import FileId, UserId

from .base import Service


class SaleService(Service):
    """Domain service answering ownership-by-purchase questions."""

    def __init__(self, sale_repository: SaleRepository) -> None:
        self.sale_repository = sale_repository

    async def user_owns_file(self, file_id: FileId, buyer_id: UserId | None) -> bool:
        """Whether the user has a completed purchase of the file.

        Args:
            file_id: File ID
            buyer_id: Viewer user ID, None for anonymous viewers

        Returns:
            True if at least one sale of the file to the user exists
        """
        if buyer_id is None:
            return False

        with logfire.span(
            "sale_service.user_owns_file", file_id=file_id, buyer_id=buyer_id
        ):
            count = await self.sale_repository.count_by_file_and_buyer(
                file_id, buyer_id
            )
            return count > 0
