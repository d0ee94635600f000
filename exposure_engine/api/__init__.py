"""API router for v1 endpoints."""

from fastapi import APIRouter

from exposure_engine.api import analyze

router = APIRouter()

# Scoring and narrative analysis routes
router.include_router(analyze.router, tags=["analyze"])
