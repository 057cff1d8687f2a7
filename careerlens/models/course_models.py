"""Course records produced by the catalog ingestion routine."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional

from pydantic import Field, ValidationInfo, field_validator

from careerlens.models.contracts import ContractModel


class CourseLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class ScrapedCourse(ContractModel):
    """A single course pulled from a public catalog."""

    id: str
    title: str
    description: str = ""
    url: str
    platform: str = "NPTEL"
    instructor: Optional[str] = None
    duration: Optional[str] = None
    level: Optional[CourseLevel] = None
    skill_tags: list[str] = Field(default_factory=list)
    is_free: bool = True
    rating: Optional[float] = None
    enrollment_count: Optional[int] = None
    thumbnail: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    language: str = "English"
    category: str = "Engineering"
    added_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("rating", "enrollment_count", mode="before")
    @classmethod
    def _lenient_number(cls, value: Any, info: ValidationInfo) -> Any:
        """Catalog numbers arrive as "12,000" or "N/A"; unreadable ones become None."""
        if isinstance(value, bool) or value is None:
            return None
        try:
            number = float(str(value).replace(",", "").strip())
            if info.field_name == "enrollment_count":
                return int(number)
        except (ValueError, OverflowError):
            return None
        return number if math.isfinite(number) else None
