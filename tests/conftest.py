"""Shared pytest fixtures for the CareerLens test suite."""

from __future__ import annotations

import json
import os
from typing import Any, Callable, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

# Ensure test environment variables are set BEFORE importing app modules
os.environ.setdefault("GEMINI_API_KEY", "test-key-not-real")
os.environ.setdefault("GEMINI_MODEL", "gemini-2.5-flash-lite")
os.environ.setdefault("FIREBASE_PROJECT_ID", "")
os.environ.setdefault("FIREBASE_CLIENT_EMAIL", "")
os.environ.setdefault("FIREBASE_PRIVATE_KEY", "")
os.environ.setdefault("LOG_LEVEL", "DEBUG")

from careerlens.config import Settings  # noqa: E402

REFRESH_URL = "https://functions.test/refreshCareerUpdates"


def make_pdf(text: str = "") -> bytes:
    """Build a minimal single-page PDF that draws ``text`` in Helvetica."""
    stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode("latin-1") if text else b""
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] /Contents 4 0 R "
        b"/Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"
    xref_at = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_at,
    )
    return bytes(out)


def llm_reply(payload: Any) -> str:
    """Helper to build a mock LLM JSON reply string."""
    return json.dumps(payload)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        gemini_api_key="test-key-not-real",
        career_updates_function_url=REFRESH_URL,
        nptel_courses_url="https://swayam.test/api/v1/courses?category=NPTEL",
        firebase_project_id="",
        firebase_client_email="",
        firebase_private_key="",
    )


@pytest.fixture
def make_client(settings: Settings) -> Callable[..., TestClient]:
    """Factory for a TestClient whose outbound HTTP and ingestion are faked."""
    from careerlens.main import create_app
    from careerlens.services.app_context import AppContext
    from careerlens.services.firebase_context import FirebaseContext

    def _factory(
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None,
        ingest: Optional[Callable[[], Any]] = None,
        app_settings: Optional[Settings] = None,
    ) -> TestClient:
        app_settings = app_settings or settings
        handler = handler or (lambda request: httpx.Response(404))
        context = AppContext(
            settings=app_settings,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
            firebase=FirebaseContext(app_settings),
            ingest_courses=ingest,
        )
        return TestClient(create_app(context))

    return _factory
