import logging
import os
from datetime import datetime, timedelta, timezone

import jwt

from app.core.exceptions import ErrorCode, UnauthorizedException

logger = logging.getLogger(__name__)

JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "change-me")
JWT_ALGORITHM = "HS256"
TOKEN_VALID_SECONDS = int(os.getenv("TOKEN_VALID_SECONDS", str(60 * 60 * 24 * 14)))


class TokenService:
    """Issues and verifies the access tokens handed out after OAuth2 login."""

    def __init__(
        self,
        secret_key: str = JWT_SECRET_KEY,
        valid_seconds: int = TOKEN_VALID_SECONDS,
    ) -> None:
        self._secret_key = secret_key
        self._valid_seconds = valid_seconds

    def generate_token(self, email: str, role: str) -> str:
        now = datetime.now(timezone.utc)
        claims = {
            "sub": email,
            "role": role,
            "iat": now,
            "exp": now + timedelta(seconds=self._valid_seconds),
        }
        return jwt.encode(claims, self._secret_key, algorithm=JWT_ALGORITHM)

    def decode(self, token: str) -> dict:
        try:
            return jwt.decode(token, self._secret_key, algorithms=[JWT_ALGORITHM])
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired token")
            raise UnauthorizedException(ErrorCode.INVALID_TOKEN)
        except jwt.InvalidTokenError:
            logger.info("Rejected malformed token")
            raise UnauthorizedException(ErrorCode.INVALID_TOKEN)

    def verify_token(self, token: str) -> bool:
        try:
            self.decode(token)
        except UnauthorizedException:
            return False
        return True

    def get_uid(self, token: str) -> str:
        """Email the token was issued for."""
        subject = self.decode(token).get("sub")
        if not subject:
            raise UnauthorizedException(ErrorCode.INVALID_TOKEN)
        return subject


token_service = TokenService()


def get_token_service() -> TokenService:
    return token_service
