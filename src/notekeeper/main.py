# Main application entry point
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import auth_router, health_router, notes_router, register_exception_handlers
from .config import Settings, get_settings
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import Database

logger = get_logger("main")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around ``settings`` (process settings by default)."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Own the persistence gateway for the lifetime of the process."""
        setup_logging(settings)
        logger.info(
            "Starting Notekeeper application",
            extra={"version": settings.app_version, "environment": settings.environment, "debug": settings.debug},
        )
        if settings.uses_dev_secret:
            logger.warning("Using the built-in development JWT secret; set SECRET_KEY")

        database = Database(settings.database_url, echo=settings.database_echo)
        try:
            await database.initialize()
        except Exception:
            logger.exception("Failed to create database tables")
            await database.close()
            raise
        app.state.database = database

        yield

        # server has stopped taking requests by the time we get here
        logger.info("Shutting down Notekeeper application")
        await database.close()

    app = FastAPI(
        title=settings.app_name,
        description="Personal notes API: signup, login and per-user note CRUD and search",
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.dependency_overrides[get_settings] = lambda: settings

    # Add logging middleware
    app.add_middleware(LoggingMiddleware)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    register_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(auth_router, prefix="/api")
    app.include_router(notes_router, prefix="/api")

    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "notekeeper.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_config=None,
    )


if __name__ == "__main__":
    run()
