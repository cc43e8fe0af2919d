from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ErrorCode, NotFoundException
from app.db.models.scrap import ScrapType
from app.db.session import get_db
from app.repositories.pagination import PageRequest, Slice
from app.repositories.scrap_repository import ScrapRepository
from app.repositories.user_repository import UserRepository
from app.schemas.scrap import GetProductResponse


class ScrapService:
    def __init__(self, db: AsyncSession) -> None:
        self._scraps = ScrapRepository(db)
        self._users = UserRepository(db)

    async def get_products(
        self, email: str, page_request: PageRequest
    ) -> Slice[GetProductResponse]:
        """Product scraps of the user, newest first."""
        user = await self._users.find_by_email(email)
        if user is None:
            raise NotFoundException(ErrorCode.NOT_EXISTS_MEMBER)

        products = await self._scraps.find_slice_by_type(
            user.id, ScrapType.PRODUCT, page_request
        )
        return products.map(GetProductResponse.of)


def get_scrap_service(db: AsyncSession = Depends(get_db)) -> ScrapService:
    return ScrapService(db)
