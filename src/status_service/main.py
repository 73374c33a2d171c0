"""Main FastAPI application for Status Service."""

import logging
import random
from contextlib import asynccontextmanager
from fastapi import FastAPI

from .config.settings import get_settings, Settings
from .core.log_emitter import LogEmitter
from .core.vocabulary import VOCABULARY
from .api.routes import status

# Configure logging
logging.basicConfig(
    level=getattr(logging, get_settings().log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_log_emitter(settings: Settings) -> LogEmitter:
    """Create the log emitter from settings."""
    rng = random.Random(settings.emitter_seed) if settings.emitter_seed is not None else None
    return LogEmitter(
        VOCABULARY,
        startup_delay=settings.emitter_startup_delay,
        interval=settings.emitter_interval,
        rng=rng,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    settings = get_settings()
    logger.info(f"Starting {settings.service_name} v1.0.0")

    app.state.log_emitter = None
    if settings.emitter_enabled:
        app.state.log_emitter = build_log_emitter(settings)
        await app.state.log_emitter.start()
    else:
        logger.info("Log emitter disabled")

    logger.info(f"{settings.service_name} is ready")

    yield

    # Cleanup
    logger.info("Shutting down...")
    if app.state.log_emitter is not None:
        await app.state.log_emitter.stop()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Status Service",
    description="Health-check endpoint with a periodic log emitter",
    version="1.0.0",
    lifespan=lifespan
)

# Include routers
app.include_router(status.router)


def run():
    """Run the service with uvicorn."""
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "status_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload
    )


if __name__ == "__main__":
    run()
