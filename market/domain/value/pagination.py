"""Length-aware pagination."""

import math
from typing import Generic, TypeVar

from pydantic import Field, computed_field

from market.domain.value.common import ValueObject

T = TypeVar("T")


class Page(ValueObject, Generic[T]):
    """One page of a larger result set.

    ``total`` is counted separately from the page query, so it reflects the
    whole result set even though ``items`` only holds one slice of it.
    """

    items: list[T]
    total: int = Field(ge=0)
    per_page: int = Field(ge=1)
    current_page: int = Field(ge=1)

    @computed_field
    @property
    def last_page(self) -> int:
        """Number of the last page (1 for an empty result)."""
        return max(1, math.ceil(self.total / self.per_page))

    @computed_field
    @property
    def has_more_pages(self) -> bool:
        """Whether a page exists after this one."""
        return self.current_page < self.last_page

    @classmethod
    def empty(cls, per_page: int, current_page: int = 1) -> "Page[T]":
        """Page with no items."""
        return cls(items=[], total=0, per_page=per_page, current_page=current_page)


def page_offset(page: int, per_page: int) -> int:
    """Row offset of the first item on ``page`` (pages below 1 count as 1)."""
    return (max(page, 1) - 1) * per_page
