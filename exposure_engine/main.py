"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from anthropic import AsyncAnthropic
from fastapi import FastAPI
from fastapi.responses import JSONResponse

from exposure_engine.api import router as api_router
from exposure_engine.core.config import get_settings
from exposure_engine.core.logging import get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own one Anthropic client for the life of the process."""
    settings = get_settings()
    app.state.anthropic_client = None
    if settings.ANTHROPIC_API_KEY:
        app.state.anthropic_client = AsyncAnthropic(api_key=settings.ANTHROPIC_API_KEY)
    else:
        logger.info("ANTHROPIC_API_KEY not set; /v1/analyze disabled")

    yield

    if app.state.anthropic_client is not None:
        await app.state.anthropic_client.close()
        app.state.anthropic_client = None


app = FastAPI(
    title="ExposureEngine",
    description="Deterministic college soccer fit scoring with narrative analysis",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(content={"status": "ok"}, status_code=200)


# Include v1 API router
app.include_router(api_router, prefix="/v1", tags=["v1"])
