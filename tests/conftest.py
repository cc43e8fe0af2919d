from __future__ import annotations

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import uuid
from datetime import datetime

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.models import Board, Provider, Role, Scrap, ScrapType, Tag, User
from app.db.session import get_db
from app.core.security import TokenService, get_token_service

EXISTENT_EMAIL = "1234@naver.com"
OTHER_EMAIL = "5678@gmail.com"

BOARD1_UUID = uuid.UUID("30373832-6566-3438-2d61-3433392d3131")
BOARD2_UUID = uuid.UUID("30373832-6566-3438-2d61-3433392d3132")
BOARD3_UUID = uuid.UUID("30373832-6566-3438-2d61-3433392d3133")
BOARD6_UUID = uuid.UUID("30373832-6566-3438-2d61-3433392d3136")

BOARD1_MODIFIED = datetime(2023, 1, 1, 11, 11, 1)
BOARD2_MODIFIED = datetime(2023, 1, 2, 11, 11, 1)


def _board(board_id: int, user_id: int, board_uuid: uuid.UUID, **fields) -> Board:
    fields.setdefault("tag", Tag.ENTERTAINMENT_ART)
    fields.setdefault("description", "test")
    fields.setdefault("created_date", datetime(2023, 1, 1, 0, 0, 0))
    fields.setdefault("is_public", False)
    fields.setdefault("is_shared", False)
    return Board(
        id=board_id,
        user_id=user_id,
        uuid=board_uuid,
        heart_cnt=0,
        **fields,
    )


def seed_rows() -> list:
    """One owner with five boards (the fifth soft-deleted) plus a second user."""
    created = datetime(2023, 1, 1, 0, 0, 0)
    return [
        User(
            id=1,
            name="dadamda",
            email=EXISTENT_EMAIL,
            provider=Provider.KAKAO,
            role=Role.USER,
            created_date=created,
            modified_date=created,
        ),
        User(
            id=2,
            name="someone else",
            email=OTHER_EMAIL,
            provider=Provider.GOOGLE,
            role=Role.USER,
            created_date=created,
            modified_date=created,
        ),
        # not pinned, oldest modification, contents never set
        _board(1, 1, BOARD1_UUID, title="board1", modified_date=BOARD1_MODIFIED),
        # pinned second-most recently
        _board(
            2,
            1,
            BOARD2_UUID,
            title="board2",
            contents="test contents",
            is_shared=True,
            fixed_date=datetime(2023, 1, 2, 0, 0, 0),
            modified_date=BOARD2_MODIFIED,
        ),
        # not pinned, newest modification
        _board(
            3,
            1,
            BOARD3_UUID,
            title="Board3",
            tag=Tag.LIFE_SHOPPING,
            is_public=True,
            modified_date=datetime(2023, 1, 3, 11, 11, 1),
        ),
        # pinned most recently but modified long ago
        _board(
            4,
            1,
            uuid.uuid4(),
            title="board4",
            fixed_date=datetime(2023, 1, 4, 0, 0, 0),
            modified_date=datetime(2022, 12, 1, 11, 11, 1),
        ),
        _board(
            5,
            1,
            uuid.uuid4(),
            title="board5",
            modified_date=datetime(2023, 1, 5, 11, 11, 1),
            deleted_date=datetime(2023, 1, 6, 0, 0, 0),
        ),
        _board(
            6,
            2,
            BOARD6_UUID,
            title="board of another user",
            modified_date=datetime(2023, 1, 7, 11, 11, 1),
        ),
        Scrap(
            id=1,
            user_id=1,
            dtype=ScrapType.PRODUCT,
            page_url="https://shop.example.com/items/1",
            title="Desk lamp",
            description="warm white",
            site_name="Example Shop",
            thumbnail_url="https://shop.example.com/items/1.jpg",
            price="29,000",
            created_date=datetime(2023, 1, 1, 0, 0, 0),
            modified_date=created,
        ),
        Scrap(
            id=2,
            user_id=1,
            dtype=ScrapType.PRODUCT,
            page_url="https://shop.example.com/items/2",
            title="Bookshelf",
            price="120,000",
            created_date=datetime(2023, 1, 2, 0, 0, 0),
            modified_date=created,
        ),
        Scrap(
            id=3,
            user_id=1,
            dtype=ScrapType.ARTICLE,
            page_url="https://news.example.com/a",
            title="An article",
            created_date=datetime(2023, 1, 3, 0, 0, 0),
            modified_date=created,
        ),
        Scrap(
            id=4,
            user_id=1,
            dtype=ScrapType.PRODUCT,
            page_url="https://shop.example.com/items/4",
            title="Deleted product",
            created_date=datetime(2023, 1, 4, 0, 0, 0),
            modified_date=created,
            deleted_date=datetime(2023, 1, 5, 0, 0, 0),
        ),
        Scrap(
            id=5,
            user_id=2,
            dtype=ScrapType.PRODUCT,
            page_url="https://shop.example.com/items/5",
            title="Someone else's product",
            created_date=datetime(2023, 1, 5, 0, 0, 0),
            modified_date=created,
        ),
    ]


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as db:
        db.add_all(seed_rows())
        await db.commit()
    return factory


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret_key="test-secret", valid_seconds=3600)


@pytest.fixture
def auth_headers(token_service: TokenService) -> dict[str, str]:
    return {"X-AUTH-TOKEN": token_service.generate_token(EXISTENT_EMAIL, "USER")}


@pytest_asyncio.fixture
async def client(session_factory, token_service):
    from app.main import app

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_token_service] = lambda: token_service
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


async def load_board(session_factory, board_id: int) -> Board:
    """Read a board back through a fresh session."""
    async with session_factory() as session:
        board = await session.get(Board, board_id)
        assert board is not None
        return board
