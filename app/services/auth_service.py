import logging
from typing import AsyncIterator

import httpx
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.oauth2 import OAuth2Client, OAuthAttributes, get_provider
from app.db.models.user import Role, User
from app.db.session import get_db
from app.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Turns a provider callback into a local, active User."""

    def __init__(self, db: AsyncSession, oauth2_client: OAuth2Client) -> None:
        self._db = db
        self._users = UserRepository(db)
        self._oauth2 = oauth2_client

    async def login(self, provider_name: str, code: str) -> OAuthAttributes:
        provider = get_provider(provider_name)
        attributes = await self._oauth2.fetch_attributes(provider, code)
        await self.save_or_update(attributes)
        return attributes

    async def save_or_update(self, attributes: OAuthAttributes) -> User:
        user = await self._users.find_by_email(attributes.email)
        if user is None:
            user = User(
                name=attributes.name,
                email=attributes.email,
                profile_url=attributes.picture,
                provider=attributes.provider,
                role=Role.USER,
            )
            await self._users.save(user)
            logger.info(f"Registered new {attributes.provider.value} user {user.id}")
        else:
            user.update(attributes.name, attributes.picture)
        await self._db.commit()
        return user


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(timeout=10) as client:
        yield client


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    http: httpx.AsyncClient = Depends(get_http_client),
) -> AuthService:
    return AuthService(db, OAuth2Client(http))
