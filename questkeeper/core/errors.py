"""Domain errors and the JSON error envelope they map to."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class QuestkeeperError(Exception):
    """Base error; `message` is the only text a client ever sees."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Unauthorized(QuestkeeperError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"


class InvalidCredential(QuestkeeperError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid username or password"


class TokenExpired(InvalidCredential):
    message = "Token expired"


class DuplicateUsername(InvalidCredential):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Unable to create account"


class NotFound(QuestkeeperError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not Found"


class InternalFailure(QuestkeeperError):
    pass


def error_body(message: str, status_code: int) -> dict:
    return {"error": {"message": message, "status": status_code}}


def _json_error(message: str, status_code: int, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(error_body(message, status_code), status_code=status_code, headers=headers)


async def questkeeper_error_handler(request: Request, exc: QuestkeeperError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return _json_error(exc.message, exc.status_code, headers)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else "Error"
    return _json_error(message, exc.status_code, getattr(exc, "headers", None))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    body = error_body("Invalid request", status.HTTP_422_UNPROCESSABLE_ENTITY)
    body["error"]["fields"] = [".".join(str(p) for p in e["loc"]) for e in exc.errors()]
    return JSONResponse(body, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    # full detail stays in the server log
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _json_error(InternalFailure.message, status.HTTP_500_INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(QuestkeeperError, questkeeper_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
