from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.scrap import Scrap, ScrapType
from app.repositories.pagination import PageRequest, Slice, to_slice


class ScrapRepository:
    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def find_slice_by_type(
        self, user_id: int, dtype: ScrapType, page_request: PageRequest
    ) -> Slice[Scrap]:
        stmt = (
            select(Scrap)
            .where(
                Scrap.user_id == user_id,
                Scrap.dtype == dtype,
                Scrap.deleted_date.is_(None),
            )
            .order_by(Scrap.created_date.desc(), Scrap.id.desc())
            .offset(page_request.offset)
            .limit(page_request.fetch_limit)
        )
        result = await self._db.execute(stmt)
        return to_slice(result.scalars().all(), page_request)

    async def count_active(self) -> int:
        result = await self._db.execute(
            select(func.count()).select_from(Scrap).where(Scrap.deleted_date.is_(None))
        )
        return result.scalar_one()
