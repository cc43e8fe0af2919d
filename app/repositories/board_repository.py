import uuid
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.models.board import Board
from app.repositories.pagination import PageRequest, Slice, to_slice


@dataclass(frozen=True)
class BoardFilter:
    """Where-clause specification for board queries."""

    user_id: int
    keyword: Optional[str] = None
    exclude_deleted: bool = True

    def clauses(self) -> list:
        conditions = [Board.user_id == self.user_id]
        if self.exclude_deleted:
            conditions.append(Board.deleted_date.is_(None))
        if self.keyword:
            conditions.append(Board.title.icontains(self.keyword, autoescape=True))
        return conditions


# Pinned boards first (most recently pinned on top), then most recently modified.
BOARD_ORDERING = (
    Board.fixed_date.desc().nulls_last(),
    Board.modified_date.desc(),
    Board.id.desc(),
)


class BoardRepository:
    """Access layer for the boards table."""

    def __init__(self, db: AsyncSession) -> None:
        self._db = db

    async def save(self, board: Board) -> Board:
        self._db.add(board)
        await self._db.flush()
        return board

    async def find_by_id(self, board_id: int) -> Optional[Board]:
        return await self._db.get(Board, board_id)

    async def find_by_user_and_id(
        self, user_id: int, board_id: int, exclude_deleted: bool = True
    ) -> Optional[Board]:
        stmt = select(Board).where(
            *BoardFilter(user_id, exclude_deleted=exclude_deleted).clauses(),
            Board.id == board_id,
        )
        result = await self._db.execute(stmt)
        return result.scalars().first()

    async def find_by_user_and_uuid(
        self, user_id: int, board_uuid: uuid.UUID, exclude_deleted: bool = True
    ) -> Optional[Board]:
        stmt = select(Board).where(
            *BoardFilter(user_id, exclude_deleted=exclude_deleted).clauses(),
            Board.uuid == board_uuid,
        )
        result = await self._db.execute(stmt)
        return result.scalars().first()

    async def find_by_user_and_title(self, user_id: int, title: str) -> Optional[Board]:
        result = await self._db.execute(
            select(Board).where(Board.user_id == user_id, Board.title == title)
        )
        return result.scalars().first()

    async def find_slice(
        self, board_filter: BoardFilter, page_request: PageRequest
    ) -> Slice[Board]:
        stmt = (
            select(Board)
            .where(*board_filter.clauses())
            .order_by(*BOARD_ORDERING)
            .offset(page_request.offset)
            .limit(page_request.fetch_limit)
        )
        result = await self._db.execute(stmt)
        return to_slice(result.scalars().all(), page_request)

    async def count(self, board_filter: BoardFilter) -> int:
        result = await self._db.execute(
            select(func.count()).select_from(Board).where(*board_filter.clauses())
        )
        return result.scalar_one()

    async def count_active(self) -> int:
        result = await self._db.execute(
            select(func.count()).select_from(Board).where(Board.deleted_date.is_(None))
        )
        return result.scalar_one()

    async def find_is_shared(self, user_id: int, board_uuid: uuid.UUID) -> Optional[bool]:
        result = await self._db.execute(
            select(Board.is_shared).where(
                *BoardFilter(user_id).clauses(), Board.uuid == board_uuid
            )
        )
        return result.scalar_one_or_none()

    async def find_is_public(self, user_id: int, board_uuid: uuid.UUID) -> Optional[bool]:
        result = await self._db.execute(
            select(Board.is_public).where(
                *BoardFilter(user_id).clauses(), Board.uuid == board_uuid
            )
        )
        return result.scalar_one_or_none()
