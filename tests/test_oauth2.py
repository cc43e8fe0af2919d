from __future__ import annotations

import json

import httpx
import pytest

from app.core.exceptions import (
    ErrorCode,
    InternalServerException,
    InvalidException,
)
from app.core.oauth2 import (
    OAuth2Client,
    OAuth2SuccessHandler,
    OAuthAttributes,
    PROVIDERS,
    get_provider,
)
from app.db.models import Provider
from app.repositories.user_repository import UserRepository
from app.services.auth_service import AuthService
from tests.conftest import EXISTENT_EMAIL

GOOGLE_USER = {
    "sub": "1029384756",
    "email": "new.user@gmail.com",
    "name": "New User",
    "picture": "https://lh3.googleusercontent.com/a/photo.jpg",
}

KAKAO_USER = {
    "id": 2837465,
    "kakao_account": {
        "email": EXISTENT_EMAIL,
        "profile": {
            "nickname": "renamed",
            "profile_image_url": "https://k.kakaocdn.net/img.jpg",
        },
    },
}


def provider_transport(user_info: dict, token_status: int = 200) -> httpx.MockTransport:
    """Fake token + user-info endpoints for every configured provider."""
    token_urls = {p.token_url for p in PROVIDERS.values()}
    user_info_urls = {p.user_info_url for p in PROVIDERS.values()}

    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        if url in token_urls:
            assert b"code=auth-code" in request.content
            return httpx.Response(token_status, json={"access_token": "provider-token"})
        if url in user_info_urls:
            assert request.headers["Authorization"] == "Bearer provider-token"
            return httpx.Response(200, content=json.dumps(user_info))
        return httpx.Response(404)

    return httpx.MockTransport(handler)


class TestOAuthAttributes:
    def test_google(self):
        attributes = OAuthAttributes.of(Provider.GOOGLE, GOOGLE_USER)

        assert attributes.email == "new.user@gmail.com"
        assert attributes.name == "New User"
        assert attributes.picture == GOOGLE_USER["picture"]

    def test_kakao(self):
        attributes = OAuthAttributes.of(Provider.KAKAO, KAKAO_USER)

        assert attributes.email == EXISTENT_EMAIL
        assert attributes.name == "renamed"
        assert attributes.provider == Provider.KAKAO

    def test_missing_email_is_invalid(self):
        with pytest.raises(InvalidException) as exc_info:
            OAuthAttributes.of(Provider.KAKAO, {"id": 1, "kakao_account": {}})
        assert exc_info.value.error_code == ErrorCode.INVALID_OAUTH2_ATTRIBUTES

    def test_unknown_provider_is_invalid(self):
        with pytest.raises(InvalidException):
            get_provider("naver")


class TestAuthService:
    async def test_first_login_registers_user(self, db):
        async with httpx.AsyncClient(transport=provider_transport(GOOGLE_USER)) as http:
            service = AuthService(db, OAuth2Client(http))
            attributes = await service.login("google", "auth-code")

        user = await UserRepository(db).find_by_email("new.user@gmail.com")
        assert attributes.email == "new.user@gmail.com"
        assert user is not None
        assert user.name == "New User"
        assert user.provider == Provider.GOOGLE

    async def test_existing_user_profile_is_refreshed(self, db):
        async with httpx.AsyncClient(transport=provider_transport(KAKAO_USER)) as http:
            await AuthService(db, OAuth2Client(http)).login("kakao", "auth-code")

        user = await UserRepository(db).find_by_email(EXISTENT_EMAIL)
        assert user.id == 1
        assert user.name == "renamed"
        assert user.profile_url == "https://k.kakaocdn.net/img.jpg"

    async def test_provider_failure_is_internal_error(self, db):
        transport = provider_transport(GOOGLE_USER, token_status=500)
        async with httpx.AsyncClient(transport=transport) as http:
            with pytest.raises(InternalServerException):
                await AuthService(db, OAuth2Client(http)).login("google", "auth-code")


class TestOAuth2SuccessHandler:
    def test_redirects_with_token(self, token_service):
        handler = OAuth2SuccessHandler(token_service, "https://dadamda.me/login?token=")
        attributes = OAuthAttributes.of(Provider.GOOGLE, GOOGLE_USER)

        response = handler.on_authentication_success(attributes)

        location = response.headers["location"]
        assert response.status_code == 302
        assert location.startswith("https://dadamda.me/login?token=")
        token = location[len("https://dadamda.me/login?token="):]
        assert token_service.get_uid(token) == "new.user@gmail.com"
