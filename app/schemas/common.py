from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel

from app.repositories.pagination import Slice

T = TypeVar("T")


class ErrorDetail(BaseModel):
    code: str
    message: str


class ApiResponse(BaseModel, Generic[T]):
    """Envelope every endpoint answers with."""

    result_type: Literal["SUCCESS", "ERROR"] = "SUCCESS"
    data: Optional[T] = None
    error: Optional[ErrorDetail] = None

    @classmethod
    def success(cls, data: Optional[T] = None) -> "ApiResponse[T]":
        return cls(result_type="SUCCESS", data=data)


class SliceResponse(BaseModel, Generic[T]):
    content: List[T]
    page: int
    size: int
    number_of_elements: int
    first: bool
    last: bool
    has_next: bool

    @classmethod
    def of(cls, page_slice: Slice) -> "SliceResponse[T]":
        return cls(
            content=page_slice.content,
            page=page_slice.page_request.page,
            size=page_slice.page_request.size,
            number_of_elements=page_slice.number_of_elements,
            first=page_slice.is_first,
            last=page_slice.is_last,
            has_next=page_slice.has_next,
        )
