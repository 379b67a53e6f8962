"""PostgreSQL implementation of Sale repository."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from market.domain.model import Sale
from market.domain.repository import SaleRepository
from market.domain.value import FileId, UserId
from market.persistence.mappers import row_to_sale, sale_to_dict
from market.persistence.tables import sales_table


class PostgresSaleRepository(SaleRepository):
    """PostgreSQL implementation of SaleRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def count_by_file_and_buyer(self, file_id: FileId, buyer_id: UserId) -> int:
        """Count sales of a file to a buyer."""
        stmt = (
            select(func.count())
            .select_from(sales_table)
            .where(sales_table.c.file_id == file_id)
            .where(sales_table.c.buyer_id == buyer_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, sale: Sale) -> Sale:
        """Insert a sale record."""
        stmt = sales_table.insert().values(**sale_to_dict(sale)).returning(sales_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_sale(row._asdict())
