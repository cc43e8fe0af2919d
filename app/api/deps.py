from typing import Optional

from fastapi import Depends, Header

from app.core.exceptions import ErrorCode, UnauthorizedException
from app.core.security import TokenService, get_token_service

AUTH_HEADER = "X-AUTH-TOKEN"


async def get_current_email(
    x_auth_token: Optional[str] = Header(None, alias=AUTH_HEADER),
    tokens: TokenService = Depends(get_token_service),
) -> str:
    """Email of the caller, taken from the access token header."""
    if not x_auth_token:
        raise UnauthorizedException(ErrorCode.UNAUTHORIZED)
    return tokens.get_uid(x_auth_token)
