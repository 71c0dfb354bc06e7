"""FastAPI application entry point. Exposes the matching engine over HTTP.

Usage:
    python -m unlockvet.main

The catalog is loaded once at startup. Routes hold no decision logic.
"""
# ruff: noqa: B008  Query() in function defaults is standard FastAPI

from __future__ import annotations

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request

from unlockvet.catalog import get_benefit, load_catalog, related_benefits
from unlockvet.config import settings
from unlockvet.eligibility import group_benefits_by_category, match_benefits
from unlockvet.location import get_benefits_for_location
from unlockvet.schemas.benefits import Benefit, BenefitDetail
from unlockvet.schemas.matching import BenefitMatch, VeteranProfile

# ── Logging setup ────────────────────────────────────────────────────

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
    stream=sys.stdout,
)
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
)

logger = structlog.get_logger(__name__)

# ── FastAPI lifespan ─────────────────────────────────────────────────


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the benefit catalog on startup."""
    app.state.catalog = load_catalog(settings.catalog.states)
    logger.info(
        "catalog_loaded",
        environment=settings.environment,
        benefits=len(app.state.catalog),
    )
    yield
    logger.info("shutdown_complete")


# ── FastAPI app ──────────────────────────────────────────────────────

app = FastAPI(
    title="unlock.vet API",
    description="Matches veteran profiles against federal, state and local benefits",
    version="0.1.0",
    lifespan=lifespan,
)


def _catalog(request: Request) -> list[Benefit]:
    return request.app.state.catalog


@app.get("/health")
async def health_check(request: Request) -> dict[str, object]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "environment": settings.environment,
        "catalog_size": len(_catalog(request)),
    }


@app.get("/benefits", response_model=list[Benefit])
async def list_benefits(
    request: Request,
    zip_code: str = Query(..., alias="zip", min_length=1),
) -> list[Benefit]:
    """Benefits available at a zip code, in catalog order."""
    return get_benefits_for_location(zip_code, _catalog(request))


@app.get("/benefits/{benefit_id}", response_model=BenefitDetail)
async def get_benefit_detail(request: Request, benefit_id: str) -> BenefitDetail:
    """One catalog benefit plus the related benefits present in the catalog."""
    catalog = _catalog(request)
    benefit = get_benefit(benefit_id, catalog)
    if benefit is None:
        raise HTTPException(status_code=404, detail=f"Unknown benefit: {benefit_id}")
    return BenefitDetail(benefit=benefit, related=tuple(related_benefits(benefit, catalog)))


@app.post("/matches", response_model=list[BenefitMatch])
async def create_matches(request: Request, profile: VeteranProfile) -> list[BenefitMatch]:
    """Rank benefits for a veteran profile."""
    matches = match_benefits(profile, _catalog(request))
    logger.info("matches_computed", zip_code=profile.zip_code, count=len(matches))
    return matches


@app.post("/matches/grouped", response_model=dict[str, list[BenefitMatch]])
async def create_grouped_matches(request: Request, profile: VeteranProfile) -> dict[str, list[BenefitMatch]]:
    """Rank benefits for a veteran profile and group them by category."""
    return group_benefits_by_category(match_benefits(profile, _catalog(request)))


# ── Entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    uvicorn.run(
        "unlockvet.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
