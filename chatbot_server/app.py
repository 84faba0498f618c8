from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.types import Scope

from chatbot_server.config import settings
from chatbot_server.errors import (
    ChatError,
    catch_unexpected_errors,
    chat_error_handler,
    http_error_handler,
    validation_error_handler,
)
from chatbot_server.routers import chat


STATIC_DIR = Path(__file__).parent / "static"


class PageFiles(StaticFiles):
    """Static files that fall back to ``index.html`` for unknown paths outside ``/api``."""

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as e:
            if e.status_code != 404 or path == "api" or path.startswith("api/"):
                raise
            return await super().get_response("index.html", scope)


@asynccontextmanager
async def lifetime(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("SimpleChatBot is up")
    yield
    logger.info("SimpleChatBot is shutting down")


app = FastAPI(title="SimpleChatBot", lifespan=lifetime)

# added before CORSMiddleware so that it sits inside it
app.middleware("http")(catch_unexpected_errors)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(ChatError, chat_error_handler)  # type: ignore[arg-type]

app.include_router(chat.router)

# the page is mounted last, a mount at / would otherwise shadow the api routes
if settings.SERVE_STATIC:
    app.mount("/", PageFiles(directory=STATIC_DIR, html=True), name="static")
