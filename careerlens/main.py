"""FastAPI application entry point for the CareerLens API."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from careerlens.config import get_settings, setup_logging
from careerlens.errors import CareerLensError, ConfigurationError, failure_envelope, status_for
from careerlens.routers.ai_router import router as ai_router
from careerlens.routers.document_router import router as document_router
from careerlens.routers.platform_router import router as platform_router
from careerlens.services.app_context import AppContext

# Initialise logging early
setup_logging()
logger = logging.getLogger(__name__)


def create_app(context: Optional[AppContext] = None) -> FastAPI:
    """Application factory.

    ``context`` defaults to one built from the environment; tests pass their
    own to swap the HTTP transport or the ingestion routine.
    """
    settings = get_settings()
    context = context or AppContext.from_settings(settings)

    application = FastAPI(
        title="CareerLens API",
        description=(
            "Career guidance backend: AI interviewer, interview questions, "
            "learning helper, career recommendations, skill-gap analysis and "
            "roadmaps, plus resume parsing and catalog/cloud-function proxies."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.state.context = context

    # CORS: allow all origins during development
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(platform_router)
    application.include_router(document_router)
    application.include_router(ai_router)

    @application.exception_handler(CareerLensError)
    async def _handle_service_error(request: Request, exc: CareerLensError) -> JSONResponse:
        status_code = status_for(exc)
        if isinstance(exc, ConfigurationError):
            logger.error("Configuration error on %s: %s", request.url.path, exc.message)
        else:
            logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
        return JSONResponse(status_code=status_code, content=failure_envelope(exc))

    @application.exception_handler(RequestValidationError)
    async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Rejected request to %s: %d field error(s)", request.url.path, len(exc.errors()))
        return JSONResponse(
            status_code=422,
            content={
                "success": False,
                "error": "Request does not match the expected contract",
                "details": [
                    {
                        "field": ".".join(str(part) for part in err["loc"]),
                        "message": err["msg"],
                        "kind": err["type"],
                    }
                    for err in exc.errors()
                ],
            },
        )

    @application.on_event("startup")
    async def _startup() -> None:
        logger.info(
            "CareerLens starting: model=%s ai_key_configured=%s",
            settings.gemini_model,
            bool(settings.gemini_api_key),
        )
        if context.firebase.admin() is None:
            logger.error("Firebase admin handle unavailable; admin Firestore routes will fail")

    @application.on_event("shutdown")
    async def _shutdown() -> None:
        await context.aclose()

    return application


app = create_app()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "careerlens.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=True,
    )
