"""Design Tracker - FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from design_tracker.api.controllers import members_controller, tasks_controller
from design_tracker.application.services import configure_logging
from design_tracker.application.settings import Settings
from design_tracker.infrastructure import MongoConnection

log = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, connection: MongoConnection | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Application settings; read from the environment when omitted,
            which fails immediately if ``MONGODB_URI`` is not set.
        connection: Document store handle; built from settings when omitted.

    Returns:
        Configured FastAPI application serving the API under ``/api``
    """
    settings = settings or Settings()
    configure_logging(log_level=settings.log_level)

    if connection is None:
        connection = MongoConnection(
            uri=settings.mongodb_uri,
            database_name=settings.database_name,
            mode=settings.connection_mode,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """The store client is opened lazily by the first request and closed here."""
        log.info(f"🎨 {settings.app_name} starting up (connection mode: {connection.mode.value})...")
        yield
        connection.close()
        log.info(f"🎨 {settings.app_name} shutting down...")

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Track design deliverables: tasks with status, tag, type, assignees, delivery dates and linked documents.",
        version=settings.app_version,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.mongo = connection

    if settings.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(tasks_controller.router, prefix="/api/tasks", tags=["Tasks"])
    app.include_router(members_controller.router, prefix="/api/members", tags=["Members"])

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Malformed request bodies are validation errors (400), not 422."""
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": jsonable_encoder(exc.errors())})

    @app.exception_handler(PyMongoError)
    async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
        """Store failures raised while acquiring a connection, before any handler runs."""
        log.error(f"Document store unavailable for {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": "Document store unavailable"})

    @app.get("/health", tags=["Health"])
    async def health():
        """Health check endpoint: round-trips to the document store."""
        try:
            await connection.ping()
        except PyMongoError as e:
            log.warning(f"Health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "service": "design-tracker"},
            )
        return {"status": "healthy", "service": "design-tracker"}

    log.info("✅ Application created successfully!")
    return app


def run() -> None:
    """Console entry point: serve the application with uvicorn."""
    import uvicorn

    settings = Settings()
    uvicorn.run(
        "design_tracker.main:create_app",
        factory=True,
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
