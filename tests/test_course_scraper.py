"""NPTEL ingestion: record mapping and failure propagation."""

from __future__ import annotations

import httpx
import pytest
from tenacity import wait_none

from careerlens.models.course_models import CourseLevel
from careerlens.services.course_scraper import (
    MAX_ATTEMPTS,
    _fetch_json,
    map_level,
    scrape_nptel_courses,
)

URL = "https://swayam.test/api/v1/courses?category=NPTEL"


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_maps_catalog_records_with_defaults():
    def handler(request: httpx.Request) -> httpx.Response:
        assert "Mozilla" in request.headers["user-agent"]
        return httpx.Response(200, json={
            "results": [
                {
                    "id": 101,
                    "title": "Machine Learning",
                    "excerpt": "Intro to ML",
                    "coordinator": "Prof. Rao",
                    "weeks": 8,
                    "level": "Intermediate",
                    "keywords": "ml, python ,statistics",
                    "enrolled": 5400,
                    "image": "https://img.test/ml.png",
                    "start_date": "2024-01-22",
                },
                {"id": 102},
            ]
        })

    async with _client(handler) as client:
        courses = await scrape_nptel_courses(client, URL)

    assert [c.id for c in courses] == ["nptel_101", "nptel_102"]
    ml, bare = courses
    assert ml.description == "Intro to ML"
    assert ml.instructor == "Prof. Rao"
    assert ml.duration == "8 weeks"
    assert ml.level is CourseLevel.INTERMEDIATE
    assert ml.skill_tags == ["ml", "python", "statistics"]
    assert ml.enrollment_count == 5400
    assert ml.thumbnail == "https://img.test/ml.png"
    assert ml.start_date is not None and ml.start_date.year == 2024
    assert ml.is_free is True

    assert bare.title == "Untitled Course"
    assert bare.url == "https://swayam.gov.in/nd1_noc23_102"
    assert bare.duration == "12 weeks"
    assert bare.language == "English"
    assert bare.category == "Engineering"


@pytest.mark.asyncio
async def test_missing_results_yields_empty_list():
    async with _client(lambda request: httpx.Response(200, json={"detail": "none"})) as client:
        assert await scrape_nptel_courses(client, URL) == []


@pytest.fixture
def no_backoff(monkeypatch):
    monkeypatch.setattr(_fetch_json.retry, "wait", wait_none())


@pytest.mark.asyncio
async def test_rate_limit_is_retried(no_backoff):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if len(calls) == 1:
            return httpx.Response(429)
        return httpx.Response(200, json={"results": [{"id": 5}]})

    async with _client(handler) as client:
        courses = await scrape_nptel_courses(client, URL)

    assert len(calls) == 2
    assert [c.id for c in courses] == ["nptel_5"]


@pytest.mark.asyncio
async def test_network_error_reraised_after_max_attempts(no_backoff):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(httpx.ConnectError):
            await scrape_nptel_courses(client, URL)

    assert len(calls) == MAX_ATTEMPTS


@pytest.mark.asyncio
async def test_not_found_is_not_retried(no_backoff):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(404)

    async with _client(handler) as client:
        with pytest.raises(httpx.HTTPStatusError):
            await scrape_nptel_courses(client, URL)

    assert len(calls) == 1


@pytest.mark.asyncio
async def test_unreadable_numbers_do_not_fail_the_batch():
    payload = {
        "results": [
            {"id": 1, "rating": "4.5", "enrolled": "12,000"},
            {"id": 2, "rating": "N/A", "enrolled": "lots"},
            {"id": 3, "title": {"en": "Not a string"}},
            {"id": 4},
        ]
    }
    async with _client(lambda request: httpx.Response(200, json=payload)) as client:
        courses = await scrape_nptel_courses(client, URL)

    assert [c.id for c in courses] == ["nptel_1", "nptel_2", "nptel_4"]
    assert courses[0].rating == 4.5
    assert courses[0].enrollment_count == 12000
    assert courses[1].rating is None
    assert courses[1].enrollment_count is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "record, expected",
    [
        ({"tags": "ml,python"}, ["ml", "python"]),
        ({"tags": ["ml", " python "]}, ["ml", "python"]),
        ({"tags": [], "keywords": "cloud, aws"}, ["cloud", "aws"]),
        ({"tags": 7}, []),
    ],
)
async def test_skill_tags_from_string_or_list(record, expected):
    payload = {"results": [{"id": 1, **record}]}
    async with _client(lambda request: httpx.Response(200, json=payload)) as client:
        (course,) = await scrape_nptel_courses(client, URL)
    assert course.skill_tags == expected

@pytest.mark.parametrize(
    "label, expected",
    [
        ("Beginner", CourseLevel.BEGINNER),
        ("Introductory", CourseLevel.BEGINNER),
        ("Advanced", CourseLevel.ADVANCED),
        ("Medium", CourseLevel.INTERMEDIATE),
        ("UG/PG", None),
        (None, None),
    ],
)
def test_map_level(label, expected):
    assert map_level(label) is expected
