from fastapi import APIRouter, Depends, Request
from fastapi.openapi.utils import get_openapi
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.repositories.board_repository import BoardRepository
from app.repositories.scrap_repository import ScrapRepository
from app.repositories.user_repository import UserRepository
from app.schemas.system import SystemStats

router = APIRouter(prefix="/api/system", tags=["system"])


@router.get("/stats", response_model=SystemStats)
async def get_stats(db: AsyncSession = Depends(get_db)):
    """Return counts of active users, boards and scraps."""
    return SystemStats(
        users=await UserRepository(db).count_active(),
        boards=await BoardRepository(db).count_active(),
        scraps=await ScrapRepository(db).count_active(),
    )


@router.get("/docs.json", include_in_schema=False)
async def get_openapi_json(request: Request):
    """Return the full OpenAPI schema in JSON format."""
    app = request.app
    return get_openapi(
        title="Dadamda API",
        version="1.0.0",
        description="Full OpenAPI specification for the Dadamda backend.",
        routes=app.routes,
    )
