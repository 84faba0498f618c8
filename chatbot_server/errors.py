from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from chatbot_server.schema import ErrorResponse


CHAT_PATH = "/api/chat"


class ChatError(Exception):
    """Base class for errors that are reported to the client.

    Every subclass maps to a fixed status code and a fixed public message,
    which is rendered as ``{"error": message}``.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "An unexpected error occurred."

    def to_response(self) -> JSONResponse:
        body = ErrorResponse(error=self.message)
        return JSONResponse(status_code=self.status_code, content=body.model_dump())


class MessageRequiredError(ChatError):
    """The request did not carry a usable ``message`` string."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Message content is required."


class UnexpectedError(ChatError):
    """Something went wrong while processing the request."""


async def chat_error_handler(request: Request, exc: ChatError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.opt(exception=exc.__cause__ or exc).error(
            f"Server error while handling {request.url.path}"
        )
    return exc.to_response()


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # malformed JSON, missing body and bad field types all end up here
    reasons = "; ".join(err.get("msg", "") for err in exc.errors())
    logger.warning(f"Validation error on {request.url.path}: {reasons}")
    return MessageRequiredError().to_response()


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> Response:
    # a body that can't even be decoded is raised as a plain 400, not a validation error
    if exc.status_code == status.HTTP_400_BAD_REQUEST and request.url.path == CHAT_PATH:
        logger.warning(f"Unreadable body on {request.url.path}: {exc.detail}")
        return MessageRequiredError().to_response()
    return await http_exception_handler(request, exc)


async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f"Unexpected error while handling {request.url.path}")
    return UnexpectedError().to_response()


async def catch_unexpected_errors(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Turn anything the exception handlers let through into a 500 response.

    This runs as a middleware inside the CORS layer, so the 500 still carries
    the CORS headers.
    """
    try:
        return await call_next(request)
    except Exception as e:
        return await unexpected_error_handler(request, e)
