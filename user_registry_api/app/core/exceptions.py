"""
Domain exceptions and their HTTP rendering.

The store signals a missing record with ``UserNotFoundError``; the API
handlers turn it into an ``HTTPException`` with status 404.  Error
responses of this service carry a ``message`` field instead of
FastAPI's default ``detail``, so the handlers registered here rewrite
``HTTPException`` and request validation errors accordingly.
"""

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


USER_NOT_FOUND_MESSAGE = "This user could not be found."
SERVER_ERROR_MESSAGE = "A server error occurred."


class UserNotFoundError(LookupError):
    """Raised when no user with the requested id exists."""

    def __init__(self, user_id: str) -> None:
        super().__init__(user_id)
        self.user_id = user_id

    def __str__(self) -> str:
        return f"User {self.user_id!r} not found"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"message": "Request body could not be parsed", "errors": jsonable_encoder(exc.errors())},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the ``{message}`` error renderers to ``app``."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
