"""Main FastAPI application entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from infrastructure.database.engines import create_engine, create_sessionmaker
from infrastructure.logging import configure_logging
from infrastructure.middleware import (
    request_context_middleware,
    security_headers_middleware,
    unhandled_exception_handler,
)
from infrastructure.observability import (
    DefaultConnectionProbe,
    DefaultStartupProbe,
    StartupProbe,
)
from infrastructure.settings import Settings, get_database_settings, get_settings
from infrastructure.version import __version__
from users.presentation import router as users_router


@asynccontextmanager
async def users_api_lifespan(app: FastAPI):
    """Application lifespan context.

    Builds the database engine and session factory unless one was handed
    to ``create_app`` and disposes of the engine on shutdown.
    """
    settings: Settings = app.state.settings
    probe: StartupProbe = app.state.startup_probe
    probe.application_starting(settings.app_name, __version__)

    connection_probe = DefaultConnectionProbe()
    engine = None
    if app.state.sessionmaker is None:
        db_settings = get_database_settings()
        engine = create_engine(db_settings)
        connection_probe.engine_created(
            db_settings.connection_string, db_settings.pool_size
        )
        app.state.sessionmaker = create_sessionmaker(engine)

    yield

    if engine is not None:
        await engine.dispose()
        connection_probe.engine_disposed()
        app.state.sessionmaker = None
    probe.application_stopped(settings.app_name)


def create_app(
    settings: Settings | None = None,
    sessionmaker: async_sessionmaker[AsyncSession] | None = None,
    startup_probe: StartupProbe | None = None,
) -> FastAPI:
    """Build the API application.

    Args:
        settings: Application settings (defaults to the cached environment settings)
        sessionmaker: Pre-built session factory; when given, the lifespan
            does not create an engine of its own
        startup_probe: Probe for lifecycle and unhandled-error events

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="CRUD API for user records",
        version=__version__,
        lifespan=users_api_lifespan,
    )
    app.state.settings = settings
    app.state.sessionmaker = sessionmaker
    app.state.startup_probe = startup_probe or DefaultStartupProbe()

    cors = settings.cors
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors.allow_origins,
        allow_credentials=cors.allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_context_middleware)
    app.middleware("http")(security_headers_middleware)

    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(users_router)

    @app.get("/", include_in_schema=False)
    def root() -> None:
        """The API has no browsable root resource."""
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")

    @app.get("/health")
    def health() -> dict:
        """Basic health check endpoint."""
        return {"status": "ok"}

    return app


configure_logging(debug=get_settings().debug)

app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
