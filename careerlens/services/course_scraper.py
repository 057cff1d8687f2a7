"""NPTEL course ingestion from the public SWAYAM JSON API.

Retries transient failures (timeouts, network errors, HTTP 429) with
exponential backoff; anything else propagates to the caller.
"""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Any, Optional

import httpx
from pydantic import ValidationError
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from careerlens.models.course_models import CourseLevel, ScrapedCourse

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0 Safari/537.36"
)


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, (httpx.TimeoutException, httpx.NetworkError)):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code == 429


@retry(
    stop=stop_after_attempt(MAX_ATTEMPTS),
    wait=wait_exponential(multiplier=2, min=2, max=10),
    retry=retry_if_exception(_is_transient),
    reraise=True,
)
async def _fetch_json(client: httpx.AsyncClient, url: str) -> Any:
    response = await client.get(
        url,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        follow_redirects=True,
    )
    if response.status_code == 429:
        logger.warning("[NPTEL] Rate limited by %s", url)
    response.raise_for_status()
    return response.json()


async def scrape_nptel_courses(client: httpx.AsyncClient, url: str) -> list[ScrapedCourse]:
    """Fetch and normalise NPTEL courses.

    Returns an empty list when the API answers without a ``results`` array.
    """
    logger.info("[NPTEL] Starting scrape...")
    data = await _fetch_json(client, url)

    results = data.get("results") if isinstance(data, dict) else None
    if not isinstance(results, list):
        logger.info("[NPTEL] No courses found")
        return []

    courses = []
    for raw in results:
        if not isinstance(raw, dict):
            continue
        try:
            courses.append(_to_course(raw))
        except ValidationError as exc:
            logger.warning("[NPTEL] Skipping malformed course %s: %s", raw.get("id"), exc)
    logger.info("[NPTEL] Scraped %d courses", len(courses))
    return courses


def _to_course(raw: dict[str, Any]) -> ScrapedCourse:
    course_id = raw.get("id") or int(time.time() * 1000)
    tags = _split_tags(raw.get("tags")) or _split_tags(raw.get("keywords"))

    return ScrapedCourse(
        id=f"nptel_{course_id}",
        title=raw.get("title") or "Untitled Course",
        description=raw.get("description") or raw.get("excerpt") or "",
        url=raw.get("url") or f"https://swayam.gov.in/nd1_noc23_{raw.get('id')}",
        platform="NPTEL",
        instructor=raw.get("instructor") or raw.get("coordinator"),
        duration=raw.get("duration") or f"{raw.get('weeks') or 12} weeks",
        level=map_level(raw.get("level")),
        skill_tags=tags,
        is_free=True,
        rating=raw.get("rating"),
        enrollment_count=raw.get("enrolled"),
        thumbnail=raw.get("thumbnail") or raw.get("image"),
        start_date=_parse_date(raw.get("start_date")),
        end_date=_parse_date(raw.get("end_date")),
        language=raw.get("language") or "English",
        category=raw.get("category") or "Engineering",
    )


def _split_tags(value: Any) -> list[str]:
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    if isinstance(value, list):
        return [str(tag).strip() for tag in value if tag is not None and str(tag).strip()]
    return []


def map_level(level: Optional[str]) -> Optional[CourseLevel]:
    """Map free-form catalog level labels onto the three course levels."""
    if not level:
        return None
    lower = str(level).lower()
    if "begin" in lower or "intro" in lower:
        return CourseLevel.BEGINNER
    if "adv" in lower or "expert" in lower:
        return CourseLevel.ADVANCED
    if "inter" in lower or "medium" in lower:
        return CourseLevel.INTERMEDIATE
    return None


def _parse_date(value: Any) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        logger.debug("[NPTEL] Unparseable date: %s", value)
        return None
