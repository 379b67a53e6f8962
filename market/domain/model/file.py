"""File aggregate root.

Files are the products sold on the marketplace. Upload handling and the
approval workflow live elsewhere; here a file is read-only catalogue data.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from market.domain.model.common import DomainModel
from market.domain.value import FileId, UserId
from market.domain.value.types import Handle


class File(DomainModel):
    """A file offered for sale by its owner."""

    id: Optional[FileId] = None
    owner_id: UserId
    owner_handle: Handle  # Denormalised from users
    title: str = Field(min_length=1, max_length=255)
    overview_short: str = Field(default="", max_length=300)
    overview: str = ""
    price: Decimal = Field(default=Decimal("0"), ge=0)
    live: bool = False
    approved: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_visible(self) -> bool:
        """Whether the public may see the file (live and approved)."""
        return self.live and self.approved
