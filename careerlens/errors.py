"""Error taxonomy shared by agents, services and routers.

Every failure raised inside the service derives from ``CareerLensError`` so
routers can turn it into the JSON failure envelope with a single handler.
"""

from __future__ import annotations

from typing import Any, Optional


class CareerLensError(Exception):
    """Base class for all handled service errors."""

    def __init__(self, message: str, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


class ContractValidationError(CareerLensError):
    """Input failed schema-shape checks before any external call."""


class ConfigurationError(CareerLensError):
    """A required credential or setting is missing or unusable."""


class UpstreamError(CareerLensError):
    """An external service failed or returned something unusable."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(message, details)
        self.status_code = status_code


class ExtractionError(CareerLensError):
    """A document buffer could not be parsed."""


class MissingFileError(CareerLensError):
    """A multipart submission did not carry the expected file field."""


_STATUS_BY_KIND: dict[type[CareerLensError], int] = {
    ContractValidationError: 422,
    ConfigurationError: 500,
    UpstreamError: 502,
    ExtractionError: 400,
    MissingFileError: 400,
}


def status_for(exc: CareerLensError) -> int:
    """Map an error kind to the HTTP status a route should answer with."""
    if isinstance(exc, UpstreamError) and exc.status_code:
        return exc.status_code
    for kind, status in _STATUS_BY_KIND.items():
        if isinstance(exc, kind):
            return status
    return 500


def failure_envelope(exc: CareerLensError) -> dict[str, Any]:
    """Render an error as the uniform ``{success: false, ...}`` body."""
    body: dict[str, Any] = {"success": False, "error": exc.message}
    if exc.details is not None:
        body["details"] = exc.details
    return body
