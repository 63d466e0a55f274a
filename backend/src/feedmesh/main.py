# Main application entry point
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import (
    health_router,
    notifications_router,
    notifications_ws_router,
    posts_router,
    users_router,
)
from .api.errors import register_exception_handlers
from .config import get_settings
from .core.channels import close_notification_channel, get_notification_channel
from .core.logging import LoggingMiddleware, get_logger, setup_logging
from .database import create_tables

# Setup logging first
setup_logging()
logger = get_logger("main")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info(
        "Starting FeedMesh application",
        extra={"version": __version__, "environment": settings.environment, "debug": settings.debug},
    )

    channel = get_notification_channel()
    if await channel.ping():
        logger.info(f"Notification channel ready ({type(channel).__name__})")
    else:
        logger.warning("Notification channel unreachable. Live delivery is degraded...")

    # Tests running against SQLite in-memory create their own schema
    if os.getenv("FEEDMESH_SKIP_LIFESPAN_DB") == "1":
        logger.info("Skipping DB table creation due to FEEDMESH_SKIP_LIFESPAN_DB=1")
    else:
        try:
            await create_tables()
            logger.info("Database tables created/verified")
        except Exception as e:
            logger.error("Failed to create database tables", exc_info=e)
            raise

    yield

    logger.info("Shutting down FeedMesh application")
    await close_notification_channel()


app = FastAPI(
    title=settings.app_name,
    description="Social feed API with live notifications",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(LoggingMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(users_router, prefix="/api")
app.include_router(posts_router, prefix="/api")
app.include_router(notifications_router, prefix="/api")
app.include_router(health_router, prefix="/api")
app.include_router(notifications_ws_router)


@app.get("/")
async def root():
    return {"message": "FeedMesh API", "version": __version__}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("feedmesh.main:app", host=settings.host, port=settings.port, reload=settings.debug)
