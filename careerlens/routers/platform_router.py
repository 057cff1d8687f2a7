"""Platform router - health probe and the two proxy routes.

``/api/refresh-career-updates`` relays a trigger to the scheduled cloud
function. ``/api/test/web-scraper`` runs the course ingestion routine and
reports a summary.
"""

from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from careerlens.models.response_models import (
    HealthResponse,
    RelayFailure,
    ScrapeFailure,
    ScrapeSummary,
)
from careerlens.services.app_context import AppContext, get_app_context

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["platform"])

REFRESH_FAILED = "Failed to trigger refresh."
REFRESH_ERROR = "An error occurred while trying to refresh."


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Simple liveness probe."""
    return HealthResponse()


@router.get("/refresh-career-updates")
async def refresh_career_updates(ctx: AppContext = Depends(get_app_context)) -> JSONResponse:
    """Trigger the career-updates cloud function and relay its JSON reply."""
    url = ctx.settings.career_updates_function_url
    try:
        response = await ctx.http_client.post(
            url, headers={"Content-Type": "application/json"}
        )
        if not response.is_success:
            logger.error(
                "Error calling cloud function (status=%d): %s",
                response.status_code,
                response.text[:500],
            )
            return _envelope(RelayFailure(message=REFRESH_FAILED), response.status_code)
        payload = response.json()
    except (httpx.HTTPError, ValueError) as exc:
        logger.error("Error in refresh route: %s", exc)
        return _envelope(RelayFailure(message=REFRESH_ERROR), 500)

    return JSONResponse(content=payload, status_code=response.status_code)


@router.get("/test/web-scraper")
async def run_web_scraper(ctx: AppContext = Depends(get_app_context)) -> JSONResponse:
    """Run NPTEL ingestion once and report the count and a sample record."""
    try:
        courses = await ctx.ingest_courses()
    except Exception as exc:
        logger.exception("Course ingestion failed")
        return _envelope(ScrapeFailure(error=str(exc)), 500)

    summary = ScrapeSummary(
        count=len(courses),
        sample=courses[0] if courses else None,
        message=f"Successfully scraped {len(courses)} courses from NPTEL",
    )
    return _envelope(summary, 200)


def _envelope(body: RelayFailure | ScrapeFailure | ScrapeSummary, status_code: int) -> JSONResponse:
    return JSONResponse(
        content=body.model_dump(mode="json", by_alias=True),
        status_code=status_code,
    )
