import logging
import uuid
from datetime import datetime

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ErrorCode, NotFoundException
from app.db.models.board import Board, Tag
from app.db.models.user import User
from app.db.session import get_db
from app.repositories.board_repository import BoardFilter, BoardRepository
from app.repositories.pagination import PageRequest, Slice
from app.repositories.user_repository import UserRepository
from app.schemas.board import (
    BoardContentsResponse,
    BoardResponse,
    CreateBoardRequest,
    CreateBoardResponse,
    UpdateBoardContentsRequest,
    UpdateBoardRequest,
)

logger = logging.getLogger(__name__)


class BoardService:
    """Business rules for boards.

    Every call resolves the caller by email first and only ever touches
    boards owned by that user, so another user's board id looks exactly
    like a missing one (NotFound).
    """

    def __init__(self, db: AsyncSession) -> None:
        self._db = db
        self._boards = BoardRepository(db)
        self._users = UserRepository(db)

    async def _get_user(self, email: str) -> User:
        user = await self._users.find_by_email(email)
        if user is None:
            raise NotFoundException(ErrorCode.NOT_EXISTS_MEMBER)
        return user

    async def _get_board(self, user: User, board_id: int) -> Board:
        board = await self._boards.find_by_user_and_id(user.id, board_id)
        if board is None:
            raise NotFoundException(ErrorCode.NOT_EXISTS_BOARD)
        return board

    async def _get_board_by_uuid(self, user: User, board_uuid: uuid.UUID) -> Board:
        board = await self._boards.find_by_user_and_uuid(user.id, board_uuid)
        if board is None:
            raise NotFoundException(ErrorCode.NOT_EXISTS_BOARD)
        return board

    async def create_board(
        self, email: str, request: CreateBoardRequest
    ) -> CreateBoardResponse:
        user = await self._get_user(email)
        tag = Tag.from_code(request.tag)

        board = Board(
            user_id=user.id,
            uuid=uuid.uuid4(),
            title=request.title,
            description=request.description,
            tag=tag,
            heart_cnt=0,
            is_public=False,
            is_shared=False,
        )
        await self._boards.save(board)
        await self._db.commit()
        logger.info(f"Board {board.id} created for user {user.id}")
        return CreateBoardResponse(board_id=board.id, uuid=board.uuid)

    async def get_board(self, email: str, board_id: int) -> BoardResponse:
        user = await self._get_user(email)
        board = await self._get_board(user, board_id)
        return BoardResponse.of(board)

    async def get_board_count(self, email: str) -> int:
        user = await self._get_user(email)
        return await self._boards.count(BoardFilter(user.id))

    async def get_board_contents(
        self, email: str, board_uuid: uuid.UUID
    ) -> BoardContentsResponse:
        user = await self._get_user(email)
        board = await self._get_board_by_uuid(user, board_uuid)
        return BoardContentsResponse(contents=board.contents)

    async def get_board_list(
        self, email: str, page_request: PageRequest
    ) -> Slice[BoardResponse]:
        user = await self._get_user(email)
        boards = await self._boards.find_slice(BoardFilter(user.id), page_request)
        return boards.map(BoardResponse.of)

    async def search_boards(
        self, email: str, keyword: str, page_request: PageRequest
    ) -> Slice[BoardResponse]:
        user = await self._get_user(email)
        boards = await self._boards.find_slice(
            BoardFilter(user.id, keyword=keyword), page_request
        )
        return boards.map(BoardResponse.of)

    async def get_board_is_shared(self, email: str, board_uuid: uuid.UUID) -> bool:
        user = await self._get_user(email)
        is_shared = await self._boards.find_is_shared(user.id, board_uuid)
        if is_shared is None:
            raise NotFoundException(ErrorCode.NOT_EXISTS_BOARD)
        return is_shared

    async def get_board_is_public(self, email: str, board_uuid: uuid.UUID) -> bool:
        user = await self._get_user(email)
        is_public = await self._boards.find_is_public(user.id, board_uuid)
        if is_public is None:
            raise NotFoundException(ErrorCode.NOT_EXISTS_BOARD)
        return is_public

    async def update_board(
        self, email: str, board_id: int, request: UpdateBoardRequest
    ) -> None:
        user = await self._get_user(email)
        board = await self._get_board(user, board_id)
        tag = Tag.from_code(request.tag)

        if board.has_same_values(tag, request.title, request.description):
            return

        board.update(tag, request.title, request.description)
        await self._db.commit()

    async def update_board_contents(
        self, email: str, board_uuid: uuid.UUID, request: UpdateBoardContentsRequest
    ) -> None:
        user = await self._get_user(email)
        board = await self._get_board_by_uuid(user, board_uuid)

        if board.has_same_contents(request.contents):
            return

        board.update_contents(request.contents)
        await self._db.commit()

    async def fix_board(self, email: str, board_id: int) -> None:
        user = await self._get_user(email)
        board = await self._get_board(user, board_id)

        board.toggle_fixed(datetime.now())
        await self._db.commit()
        logger.info(f"Board {board_id} {'fixed' if board.is_fixed else 'unfixed'}")

    async def delete_board(self, email: str, board_id: int) -> None:
        user = await self._get_user(email)
        # Already-deleted boards are filtered out, so a second delete is NotFound.
        board = await self._get_board(user, board_id)

        board.delete(datetime.now())
        await self._db.commit()
        logger.info(f"Board {board_id} deleted")


def get_board_service(db: AsyncSession = Depends(get_db)) -> BoardService:
    """FastAPI dependency factory for BoardService."""
    return BoardService(db)
