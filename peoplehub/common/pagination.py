"""Page/offset slicing for list endpoints.

``paginate`` returns a :class:`Page`; routers turn it into the
``{"data": [...], "meta": {...}}`` envelope.
"""

from typing import Annotated, Any, NamedTuple, Optional

from fastapi import Query
from pydantic import BaseModel
from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from peoplehub.common.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


class PaginationParams:
    """``?page=&page_size=&sort=`` query parameters, used with ``Depends()``.

    *sort* names a mapped column; a leading ``-`` sorts descending.
    """

    def __init__(
        self,
        page: Annotated[int, Query(ge=1)] = 1,
        page_size: Annotated[int, Query(ge=1, le=MAX_PAGE_SIZE)] = DEFAULT_PAGE_SIZE,
        sort: Annotated[Optional[str], Query(max_length=64)] = None,
    ) -> None:
        self.page = page
        self.page_size = page_size
        self.sort = sort

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size

    def order_for(self, model: Any):
        """ORDER BY clause for *model*, or ``None`` when *sort* is unset or unknown."""
        if not self.sort:
            return None
        column = inspect(model).columns.get(self.sort.lstrip("-"))
        if column is None:
            return None
        return column.desc() if self.sort.startswith("-") else column.asc()


class PaginationMeta(BaseModel):
    page: int
    page_size: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def for_total(cls, params: PaginationParams, total: int) -> "PaginationMeta":
        pages = -(-total // params.page_size)
        return cls(
            page=params.page,
            page_size=params.page_size,
            total=total,
            total_pages=pages,
            has_next=params.page < pages,
            has_prev=params.page > 1,
        )


class Page(NamedTuple):
    data: list[Any]
    meta: PaginationMeta


async def paginate(
    session: AsyncSession,
    query: Select,
    params: PaginationParams,
    *,
    model: Any,
) -> Page:
    """Run *query* for one page of *model* rows and count the full result.

    A recognised *sort* replaces the query's own ordering.
    """
    order = params.order_for(model)
    if order is not None:
        query = query.order_by(None).order_by(order)

    counted = select(func.count()).select_from(query.order_by(None).subquery())
    total = (await session.execute(counted)).scalar_one()

    rows = await session.scalars(query.offset(params.offset).limit(params.page_size))
    return Page(list(rows), PaginationMeta.for_total(params, total))
