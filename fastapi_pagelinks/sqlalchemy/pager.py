"""SQLAlchemy pager producing paginated collections from select statements."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from fastapi_pagelinks.pagination.collection import PaginatedCollection, clamp_page


class SQLAlchemyPager:
    """Count and slice SQLAlchemy selects one page at a time."""

    def __init__(self, *, session: Session | AsyncSession) -> None:
        """Store the SQLAlchemy session."""
        self.session = session

    async def _execute(self, statement: Any) -> Any:
        if isinstance(self.session, AsyncSession):
            result = await self.session.execute(statement)
            return result
        return self.session.execute(statement)

    async def count(self, statement: Select) -> int:
        """Return the number of rows ``statement`` would produce."""
        count_statement = select(func.count()).select_from(
            statement.order_by(None).subquery()
        )
        result = await self._execute(count_statement)
        return int(result.scalar_one())

    async def paginate(
        self, statement: Select, *, page: int = 1, per_page: int = 30
    ) -> PaginatedCollection:
        """Return the requested page of ``statement``, clamped into range."""
        per_page = max(1, per_page)
        total_entries = await self.count(statement)
        page = clamp_page(page, total_entries, per_page)
        result = await self._execute(
            statement.limit(per_page).offset((page - 1) * per_page)
        )
        return PaginatedCollection(
            current_page=page,
            per_page=per_page,
            total_entries=total_entries,
            items=list(result.scalars().all()),
        )
