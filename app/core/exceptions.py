import enum
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorCode(enum.Enum):
    # 400
    INVALID = ("I000", "Invalid request")
    INVALID_TAG = ("I001", "Unknown board tag")
    INVALID_PROVIDER = ("I002", "Unsupported OAuth2 provider")
    INVALID_OAUTH2_STATE = ("I003", "OAuth2 state mismatch")
    INVALID_OAUTH2_ATTRIBUTES = ("I004", "OAuth2 provider returned no email")

    # 401
    UNAUTHORIZED = ("U000", "Authentication required")
    INVALID_TOKEN = ("U001", "Invalid or expired token")

    # 404
    NOT_EXISTS_MEMBER = ("N001", "User does not exist")
    NOT_EXISTS_BOARD = ("N002", "Board does not exist")

    # 500
    INTERNAL_SERVER = ("E000", "Internal server error")
    OAUTH2_PROVIDER_ERROR = ("E001", "OAuth2 provider request failed")

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message


class DadamdaException(Exception):
    status_code = 500

    def __init__(self, error_code: ErrorCode, message: str | None = None):
        self.error_code = error_code
        self.message = message or error_code.message
        super().__init__(self.message)


class InvalidException(DadamdaException):
    status_code = 400


class UnauthorizedException(DadamdaException):
    status_code = 401


class NotFoundException(DadamdaException):
    status_code = 404


class InternalServerException(DadamdaException):
    status_code = 500


def error_body(error_code: ErrorCode, message: str | None = None) -> dict:
    return {
        "result_type": "ERROR",
        "data": None,
        "error": {"code": error_code.code, "message": message or error_code.message},
    }


async def handle_dadamda_exception(request: Request, exc: DadamdaException):
    if exc.status_code >= 500:
        logger.error(f"{exc.error_code.name} on {request.url.path}: {exc.message}")
        # Internal details never leave the server.
        return JSONResponse(
            status_code=exc.status_code, content=error_body(exc.error_code)
        )
    return JSONResponse(
        status_code=exc.status_code, content=error_body(exc.error_code, exc.message)
    )


async def handle_validation_error(request: Request, exc: RequestValidationError):
    message = "\n".join(str(err.get("msg")) for err in exc.errors())
    return JSONResponse(status_code=400, content=error_body(ErrorCode.INVALID, message))


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=500, content=error_body(ErrorCode.INTERNAL_SERVER))


def register_exception_handlers(app: FastAPI) -> None:
    """Translate the error taxonomy into HTTP responses in one place."""
    app.add_exception_handler(DadamdaException, handle_dadamda_exception)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)
