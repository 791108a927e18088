import math
from typing import Generic, List, Optional, TypeVar

from pydantic import Field

from backoffice.core.config import settings
from backoffice.schemas.base import CamelModel
from backoffice.schemas.enums import SortOrderEnum

T = TypeVar("T")


class ListQuery(CamelModel):
    search: Optional[str] = None
    sort_field: Optional[str] = None
    sort_order: SortOrderEnum = SortOrderEnum.asc
    page: int = Field(1, ge=1)
    limit: int = Field(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class Page(CamelModel, Generic[T]):
    data: List[T]
    total: int
    page: int
    total_pages: int
    is_last_page: bool

    @classmethod
    def build(cls, data: List[T], total: int, query: ListQuery) -> "Page[T]":
        total_pages = math.ceil(total / query.limit)
        return cls(
            data=data,
            total=total,
            page=query.page,
            total_pages=total_pages,
            is_last_page=query.page >= total_pages,
        )
