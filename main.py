"""
OpenAI Chat Relay - FastAPI application relaying chat prompts to the OpenAI Chat Completions API.
Optionally records every completed exchange in an Airtable table.
"""
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from config import Config
from errors import ChatValidationError, CompletionError
from routes import chat
from services.chat_service import ChatService
from services.completion import CompletionClient
from services.interaction_logger import InteractionLogger
from utils.http_client import HTTPClientManager
from utils.logger import app_logger, resolve_level, set_level


def register_exception_handlers(app: FastAPI) -> None:
    """Map relay errors to {"error": ...} JSON responses."""

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle body validation errors with a user-friendly message"""
        errors = exc.errors()
        app_logger.error(f"Validation error for {request.url}: {errors}")

        message = "Invalid request body"
        if errors:
            first_error = errors[0]
            loc = [str(part) for part in first_error.get('loc', []) if part != 'body']
            field = ".".join(loc) if loc else 'body'
            message = f"{field}: {first_error.get('msg', 'Validation error')}"

        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": message},
        )

    @app.exception_handler(ChatValidationError)
    async def chat_validation_handler(request: Request, exc: ChatValidationError):
        app_logger.warning(f"Rejected chat request: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(CompletionError)
    async def completion_error_handler(request: Request, exc: CompletionError):
        config = request.app.state.config
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": ChatService.format_error_message(exc, config)},
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        app_logger.error(f"Unhandled error on {request.url.path}: {exc!r}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )


def create_app(config: Config | None = None, http_clients: HTTPClientManager | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        config: Application configuration; loaded from the environment if omitted
        http_clients: Shared HTTP clients; created from config if omitted

    Raises:
        ConfigurationError: mandatory credentials are missing
    """
    config = config or Config.from_env()
    set_level(app_logger, resolve_level(config.LOG_LEVEL))
    config.validate()

    http_clients = http_clients or HTTPClientManager(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup and shutdown events."""
        yield
        await http_clients.close_all()

    app = FastAPI(title=config.APP_TITLE, lifespan=lifespan)

    app.state.config = config
    app.state.http_clients = http_clients
    app.state.completion_client = CompletionClient(config, http_clients)
    app.state.interaction_logger = (
        InteractionLogger(config, http_clients) if config.INTERACTION_LOGGING_ENABLED else None
    )

    register_exception_handlers(app)

    @app.get("/health")
    async def health():
        """Health check."""
        return {"status": "ok", "model": config.OPENAI_MODEL}

    app.include_router(chat.router, tags=["chat"])

    if os.path.isdir(config.STATIC_DIR):
        app.mount("/", StaticFiles(directory=config.STATIC_DIR, html=True), name="static")
        app_logger.info(f"Serving static files from {config.STATIC_DIR}")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=app.state.config.HOST, port=app.state.config.PORT)
