from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class CreateBoardRequest(BaseModel):
    tag: str
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)


class UpdateBoardRequest(BaseModel):
    tag: str
    title: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=1000)


class UpdateBoardContentsRequest(BaseModel):
    contents: Optional[str] = None


class BoardResponse(BaseModel):
    board_id: int
    uuid: UUID
    title: str
    description: Optional[str] = None
    tag: str
    heart_cnt: int
    is_public: bool
    is_shared: bool
    is_fixed: bool
    fixed_date: Optional[datetime] = None
    modified_date: datetime

    @classmethod
    def of(cls, board) -> "BoardResponse":
        return cls(
            board_id=board.id,
            uuid=board.uuid,
            title=board.title,
            description=board.description,
            tag=board.tag.value,
            heart_cnt=board.heart_cnt,
            is_public=board.is_public,
            is_shared=board.is_shared,
            is_fixed=board.is_fixed,
            fixed_date=board.fixed_date,
            modified_date=board.modified_date,
        )


class CreateBoardResponse(BaseModel):
    board_id: int
    uuid: UUID


class BoardContentsResponse(BaseModel):
    contents: Optional[str] = None


class BoardCountResponse(BaseModel):
    count: int


class BoardFlagResponse(BaseModel):
    value: bool
