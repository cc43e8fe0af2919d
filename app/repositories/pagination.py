from dataclasses import dataclass
from typing import Callable, Generic, List, Sequence, TypeVar

from app.core.exceptions import ErrorCode, InvalidException

T = TypeVar("T")
R = TypeVar("R")

MAX_PAGE_SIZE = 100


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index plus page size."""

    page: int = 0
    size: int = 10

    def __post_init__(self):
        if self.page < 0:
            raise InvalidException(ErrorCode.INVALID, "page must not be negative")
        if not 1 <= self.size <= MAX_PAGE_SIZE:
            raise InvalidException(
                ErrorCode.INVALID, f"size must be between 1 and {MAX_PAGE_SIZE}"
            )

    @property
    def offset(self) -> int:
        return self.page * self.size

    @property
    def fetch_limit(self) -> int:
        # One extra row tells us whether another page exists.
        return self.size + 1


@dataclass
class Slice(Generic[T]):
    """A page of results that knows whether more follow, but not the total."""

    content: List[T]
    page_request: PageRequest
    has_next: bool = False

    @property
    def number_of_elements(self) -> int:
        return len(self.content)

    @property
    def is_first(self) -> bool:
        return self.page_request.page == 0

    @property
    def is_last(self) -> bool:
        return not self.has_next

    def map(self, converter: Callable[[T], R]) -> "Slice[R]":
        return Slice(
            content=[converter(item) for item in self.content],
            page_request=self.page_request,
            has_next=self.has_next,
        )


def to_slice(rows: Sequence[T], page_request: PageRequest) -> Slice[T]:
    """Build a slice from rows fetched with ``page_request.fetch_limit``."""
    content = list(rows)
    has_next = len(content) > page_request.size
    if has_next:
        del content[page_request.size:]
    return Slice(content=content, page_request=page_request, has_next=has_next)
