"""Sale record: proof that a buyer purchased a file.

Sales are written by the payment flow; this service only reads them to
decide ownership.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from market.domain.model.common import DomainModel
from market.domain.value import FileId, SaleId, UserId


class Sale(DomainModel):
    id: Optional[SaleId] = None
    file_id: FileId
    buyer_id: UserId
    sale_price: Decimal = Field(default=Decimal("0"), ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
