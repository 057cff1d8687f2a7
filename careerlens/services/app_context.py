"""Process-wide context handed to every route through FastAPI dependencies."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Optional

import httpx
from fastapi import Request

from careerlens.config import Settings
from careerlens.models.course_models import ScrapedCourse
from careerlens.services.course_scraper import scrape_nptel_courses
from careerlens.services.firebase_context import FirebaseContext

logger = logging.getLogger(__name__)

CourseIngestion = Callable[[], Awaitable[list[ScrapedCourse]]]


@dataclass
class AppContext:
    """Shared, read-only-after-startup state for one process."""

    settings: Settings
    http_client: httpx.AsyncClient
    firebase: FirebaseContext
    ingest_courses: Optional[CourseIngestion] = field(default=None)

    def __post_init__(self) -> None:
        if self.ingest_courses is None:
            self.ingest_courses = self._scrape_nptel

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        return cls(
            settings=settings,
            http_client=httpx.AsyncClient(timeout=settings.http_timeout),
            firebase=FirebaseContext(settings),
        )

    async def _scrape_nptel(self) -> list[ScrapedCourse]:
        return await scrape_nptel_courses(self.http_client, self.settings.nptel_courses_url)

    async def aclose(self) -> None:
        await self.http_client.aclose()
        logger.info("HTTP client closed")


def get_app_context(request: Request) -> AppContext:
    """FastAPI dependency returning the context built by ``create_app``."""
    return request.app.state.context
