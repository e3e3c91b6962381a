"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S")

# Apply the same format to Uvicorn's loggers so they also show timestamps.
for _uvicorn_logger in ("uvicorn", "uvicorn.error", "uvicorn.access"):
    _log = logging.getLogger(_uvicorn_logger)
    _log.handlers.clear()
    _handler = logging.StreamHandler()
    _handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S"))
    _log.addHandler(_handler)
    _log.propagate = False

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from study_helper.config import settings
from study_helper.schemas.ai import ErrorResponse
from study_helper.services.gemini import GeminiService
from study_helper.services.store import NoteStore, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg', 'invalid value')}" if location else str(first.get("msg"))


def create_app(store: NoteStore | None = None, gateway: GeminiService | None = None) -> FastAPI:
    """Build the application around an explicitly owned note store and Gemini gateway."""
    note_store = store or NoteStore(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        # InitializationError propagates so the server refuses to start.
        note_store.initialize()
        logger.info("Study Helper API ready")
        try:
            yield
        finally:
            note_store.close()

    app = FastAPI(title="Study Helper", lifespan=lifespan)
    app.state.store = note_store
    app.state.gateway = gateway or GeminiService()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ValidationError)
    async def _validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(400, str(exc))

    @app.exception_handler(NotFoundError)
    async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
        return _error(404, str(exc))

    @app.exception_handler(RequestValidationError)
    async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error(400, _validation_message(exc))

    @app.exception_handler(StarletteHTTPException)
    async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def _global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("unhandled error on %s %s", request.method, request.url.path)
        return _error(500, "Internal server error")

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "OK", "message": "Study Helper API is running"}

    # Import and register routers here to avoid circular imports.
    from study_helper.api import ai, files, notes, research

    app.include_router(ai.router, prefix="/api/ai", tags=["ai"])
    app.include_router(notes.router, prefix="/api/notes", tags=["notes"])
    app.include_router(files.router, prefix="/api/files", tags=["files"])
    app.include_router(research.router, prefix="/api/research", tags=["research"])

    # Serve the browser UI if it has been placed next to the backend.
    if settings.frontend_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(settings.frontend_dir), html=True), name="frontend")

    return app


app = create_app()


def run() -> None:
    """Start the server on the configured host and port."""
    uvicorn.run(app, host=settings.host, port=settings.port)
