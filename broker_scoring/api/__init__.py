"""API router for v1 endpoints."""

from fastapi import APIRouter

from broker_scoring.api import scoring

router = APIRouter()

router.include_router(scoring.router, tags=["scoring"])
