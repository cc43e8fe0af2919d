import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx
from fastapi.responses import RedirectResponse

from app.core.exceptions import (
    ErrorCode,
    InternalServerException,
    InvalidException,
)
from app.core.security import TokenService
from app.db.models.user import Provider, Role

logger = logging.getLogger(__name__)

LOGIN_REDIRECT_URL = os.getenv("LOGIN_REDIRECT_URL", "http://localhost:3000/login?token=")
OAUTH2_REDIRECT_BASE_URL = os.getenv("OAUTH2_REDIRECT_BASE_URL", "http://localhost:8000")


@dataclass(frozen=True)
class OAuth2ProviderConfig:
    name: Provider
    client_id: str
    client_secret: str
    authorize_url: str
    token_url: str
    user_info_url: str
    scope: str

    @property
    def redirect_uri(self) -> str:
        return f"{OAUTH2_REDIRECT_BASE_URL}/login/oauth2/code/{self.name.value}"

    def authorization_url(self, state: str) -> str:
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": self.scope,
            "state": state,
        }
        return f"{self.authorize_url}?{urlencode(params)}"


PROVIDERS: Dict[Provider, OAuth2ProviderConfig] = {
    Provider.GOOGLE: OAuth2ProviderConfig(
        name=Provider.GOOGLE,
        client_id=os.getenv("GOOGLE_CLIENT_ID", ""),
        client_secret=os.getenv("GOOGLE_CLIENT_SECRET", ""),
        authorize_url="https://accounts.google.com/o/oauth2/v2/auth",
        token_url="https://oauth2.googleapis.com/token",
        user_info_url="https://openidconnect.googleapis.com/v1/userinfo",
        scope="openid email profile",
    ),
    Provider.KAKAO: OAuth2ProviderConfig(
        name=Provider.KAKAO,
        client_id=os.getenv("KAKAO_CLIENT_ID", ""),
        client_secret=os.getenv("KAKAO_CLIENT_SECRET", ""),
        authorize_url="https://kauth.kakao.com/oauth/authorize",
        token_url="https://kauth.kakao.com/oauth/token",
        user_info_url="https://kapi.kakao.com/v2/user/me",
        scope="profile_nickname profile_image account_email",
    ),
}


def get_provider(name: str) -> OAuth2ProviderConfig:
    try:
        return PROVIDERS[Provider(name)]
    except ValueError:
        raise InvalidException(ErrorCode.INVALID_PROVIDER)


@dataclass(frozen=True)
class OAuthAttributes:
    """Provider user info normalized to the fields a User needs."""

    provider: Provider
    name: str
    email: str
    picture: Optional[str] = None

    @classmethod
    def of(cls, provider: Provider, attributes: Dict[str, Any]) -> "OAuthAttributes":
        if provider == Provider.KAKAO:
            return cls._of_kakao(attributes)
        return cls._of_google(attributes)

    @classmethod
    def _of_google(cls, attributes: Dict[str, Any]) -> "OAuthAttributes":
        email = attributes.get("email")
        if not email:
            raise InvalidException(ErrorCode.INVALID_OAUTH2_ATTRIBUTES)
        return cls(
            provider=Provider.GOOGLE,
            name=attributes.get("name") or email,
            email=email,
            picture=attributes.get("picture"),
        )

    @classmethod
    def _of_kakao(cls, attributes: Dict[str, Any]) -> "OAuthAttributes":
        account = attributes.get("kakao_account") or {}
        profile = account.get("profile") or {}
        email = account.get("email")
        if not email:
            raise InvalidException(ErrorCode.INVALID_OAUTH2_ATTRIBUTES)
        return cls(
            provider=Provider.KAKAO,
            name=profile.get("nickname") or email,
            email=email,
            picture=profile.get("profile_image_url"),
        )


class OAuth2Client:
    """Authorization-code exchange and user-info lookup against a provider."""

    def __init__(self, http: httpx.AsyncClient) -> None:
        self._http = http

    async def fetch_attributes(
        self, provider: OAuth2ProviderConfig, code: str
    ) -> OAuthAttributes:
        try:
            token_res = await self._http.post(
                provider.token_url,
                data={
                    "grant_type": "authorization_code",
                    "client_id": provider.client_id,
                    "client_secret": provider.client_secret,
                    "redirect_uri": provider.redirect_uri,
                    "code": code,
                },
                headers={"Accept": "application/json"},
            )
            token_res.raise_for_status()
            access_token = token_res.json()["access_token"]

            user_res = await self._http.get(
                provider.user_info_url,
                headers={"Authorization": f"Bearer {access_token}"},
            )
            user_res.raise_for_status()
        except (httpx.HTTPError, KeyError, ValueError) as e:
            logger.error(f"OAuth2 exchange with {provider.name.value} failed: {e}")
            raise InternalServerException(ErrorCode.OAUTH2_PROVIDER_ERROR)

        return OAuthAttributes.of(provider.name, user_res.json())


class OAuth2SuccessHandler:
    """Issues an access token for the signed-in user and sends them back to the frontend."""

    def __init__(
        self,
        token_service: TokenService,
        login_redirect_url: str = LOGIN_REDIRECT_URL,
    ) -> None:
        self._token_service = token_service
        self._login_redirect_url = login_redirect_url

    def on_authentication_success(self, attributes: OAuthAttributes) -> RedirectResponse:
        token = self._token_service.generate_token(attributes.email, Role.USER.name)
        return RedirectResponse(self._login_redirect_url + token, status_code=302)
