from uuid import UUID

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_current_email
from app.repositories.pagination import MAX_PAGE_SIZE, PageRequest
from app.schemas.board import (
    BoardContentsResponse,
    BoardCountResponse,
    BoardFlagResponse,
    BoardResponse,
    CreateBoardRequest,
    CreateBoardResponse,
    UpdateBoardContentsRequest,
    UpdateBoardRequest,
)
from app.schemas.common import ApiResponse, SliceResponse
from app.services.board_service import BoardService, get_board_service


router = APIRouter(prefix="/v1/boards", tags=["boards"])


def page_request(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1, le=MAX_PAGE_SIZE),
) -> PageRequest:
    return PageRequest(page=page, size=size)


@router.post("", response_model=ApiResponse[CreateBoardResponse])
async def create_board(
    request: CreateBoardRequest,
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    created = await service.create_board(email, request)
    return ApiResponse.success(created)


@router.get("/list", response_model=ApiResponse[SliceResponse[BoardResponse]])
async def list_boards(
    pageable: PageRequest = Depends(page_request),
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    """List the caller's boards, pinned ones first."""
    boards = await service.get_board_list(email, pageable)
    return ApiResponse.success(SliceResponse[BoardResponse].of(boards))


@router.get("/search", response_model=ApiResponse[SliceResponse[BoardResponse]])
async def search_boards(
    keyword: str = Query(..., min_length=1),
    pageable: PageRequest = Depends(page_request),
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    """Search the caller's boards by title."""
    boards = await service.search_boards(email, keyword, pageable)
    return ApiResponse.success(SliceResponse[BoardResponse].of(boards))


@router.get("/count", response_model=ApiResponse[BoardCountResponse])
async def count_boards(
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    count = await service.get_board_count(email)
    return ApiResponse.success(BoardCountResponse(count=count))


@router.get("/contents/{board_uuid}", response_model=ApiResponse[BoardContentsResponse])
async def get_board_contents(
    board_uuid: UUID,
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    contents = await service.get_board_contents(email, board_uuid)
    return ApiResponse.success(contents)


@router.patch("/contents/{board_uuid}", response_model=ApiResponse[None])
async def update_board_contents(
    board_uuid: UUID,
    request: UpdateBoardContentsRequest,
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    await service.update_board_contents(email, board_uuid, request)
    return ApiResponse.success()


@router.get("/shared/{board_uuid}", response_model=ApiResponse[BoardFlagResponse])
async def get_board_is_shared(
    board_uuid: UUID,
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    is_shared = await service.get_board_is_shared(email, board_uuid)
    return ApiResponse.success(BoardFlagResponse(value=is_shared))


@router.get("/public/{board_uuid}", response_model=ApiResponse[BoardFlagResponse])
async def get_board_is_public(
    board_uuid: UUID,
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    is_public = await service.get_board_is_public(email, board_uuid)
    return ApiResponse.success(BoardFlagResponse(value=is_public))


@router.patch("/fixed/{board_id}", response_model=ApiResponse[None])
async def fix_board(
    board_id: int,
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    """Pin the board, or unpin it when it is already pinned."""
    await service.fix_board(email, board_id)
    return ApiResponse.success()


@router.get("/{board_id}", response_model=ApiResponse[BoardResponse])
async def get_board(
    board_id: int,
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    board = await service.get_board(email, board_id)
    return ApiResponse.success(board)


@router.patch("/{board_id}", response_model=ApiResponse[None])
async def update_board(
    board_id: int,
    request: UpdateBoardRequest,
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    await service.update_board(email, board_id, request)
    return ApiResponse.success()


@router.delete("/{board_id}", response_model=ApiResponse[None])
async def delete_board(
    board_id: int,
    email: str = Depends(get_current_email),
    service: BoardService = Depends(get_board_service),
):
    """Soft-delete a board. Deleting it again answers 404."""
    await service.delete_board(email, board_id)
    return ApiResponse.success()
