import logging
import secrets

from fastapi import APIRouter, Cookie, Depends
from fastapi.responses import RedirectResponse

from app.core.exceptions import ErrorCode, InvalidException
from app.core.oauth2 import OAuth2SuccessHandler, get_provider
from app.core.security import TokenService, get_token_service
from app.services.auth_service import AuthService, get_auth_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

STATE_COOKIE = "oauth2_state"


def get_success_handler(
    tokens: TokenService = Depends(get_token_service),
) -> OAuth2SuccessHandler:
    return OAuth2SuccessHandler(tokens)


@router.get("/oauth2/authorization/{provider}")
async def authorize(provider: str):
    """Send the browser to the provider's consent screen."""
    config = get_provider(provider)
    state = secrets.token_urlsafe(24)
    response = RedirectResponse(config.authorization_url(state), status_code=302)
    response.set_cookie(STATE_COOKIE, state, max_age=600, httponly=True, samesite="lax")
    return response


@router.get("/login/oauth2/code/{provider}")
async def oauth2_callback(
    provider: str,
    code: str,
    state: str,
    oauth2_state: str | None = Cookie(None),
    service: AuthService = Depends(get_auth_service),
    success_handler: OAuth2SuccessHandler = Depends(get_success_handler),
):
    if not oauth2_state or not secrets.compare_digest(oauth2_state, state):
        raise InvalidException(ErrorCode.INVALID_OAUTH2_STATE)

    attributes = await service.login(provider, code)
    logger.info(f"OAuth2 login succeeded via {provider}")

    response = success_handler.on_authentication_success(attributes)
    response.delete_cookie(STATE_COOKIE)
    return response
