"""Process-scoped Firebase handles.

``FirebaseContext`` is built once by the application factory and shared with
every handler. It creates each handle on first use and hands back the same
instance afterwards:

* ``client()`` - web-project app with Firestore and a callable-functions
  resolver, using application-default credentials.
* ``admin()``  - service-account app for server-side Firestore access.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

import firebase_admin
from firebase_admin import credentials, firestore
from google.auth.exceptions import GoogleAuthError

from careerlens.config import Settings
from careerlens.errors import ConfigurationError

logger = logging.getLogger(__name__)

CLIENT_APP_NAME = "careerlens-client"
ADMIN_APP_NAME = "careerlens-admin"
TOKEN_URI = "https://oauth2.googleapis.com/token"


@dataclass(frozen=True)
class FunctionsClient:
    """Resolves HTTPS endpoints of deployed cloud functions."""

    project_id: str
    region: str = "us-central1"

    def url_for(self, name: str) -> str:
        return f"https://{self.region}-{self.project_id}.cloudfunctions.net/{name}"


@dataclass(frozen=True)
class ClientHandle:
    app: Any
    db: Any
    functions: FunctionsClient


@dataclass(frozen=True)
class AdminHandle:
    app: Any
    db: Any


class FirebaseContext:
    """Lazily created, shared Firebase handles for one process."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._client: Optional[ClientHandle] = None
        self._admin: Optional[AdminHandle] = None

    # ── Client handle ─────────────────────────────────────────────────────

    def client(self) -> ClientHandle:
        """Return the web-project handle, creating it on first call."""
        if self._client is not None:
            return self._client

        settings = self._settings
        app = _get_or_init_app(
            CLIENT_APP_NAME,
            credential=None,
            options=_drop_empty({
                "projectId": settings.firebase_web_project_id,
                "storageBucket": settings.firebase_web_storage_bucket,
            }),
        )
        try:
            db = firestore.client(app)
        except (ValueError, GoogleAuthError) as exc:
            logger.error("Firebase client initialization failed: %s", exc)
            raise ConfigurationError("Firebase client credentials are not available") from exc

        self._client = ClientHandle(
            app=app,
            db=db,
            functions=FunctionsClient(
                project_id=settings.firebase_web_project_id,
                region=settings.firebase_functions_region,
            ),
        )
        logger.info("Firebase client handle ready for project %s", settings.firebase_web_project_id)
        return self._client

    # ── Admin handle ──────────────────────────────────────────────────────

    def admin(self) -> Optional[AdminHandle]:
        """Return the service-account handle, or None if it cannot be built.

        A missing credential or a certificate the SDK rejects is logged as a
        configuration error and never raised from here.
        """
        if self._admin is not None:
            return self._admin

        settings = self._settings
        missing = [
            name
            for name, value in (
                ("FIREBASE_PROJECT_ID", settings.firebase_project_id),
                ("FIREBASE_CLIENT_EMAIL", settings.firebase_client_email),
                ("FIREBASE_PRIVATE_KEY", settings.firebase_private_key),
            )
            if not value
        ]
        if missing:
            logger.error(
                "Firebase Admin initialization failed: missing environment variables %s",
                ", ".join(missing),
            )
            return None

        service_account = {
            "type": "service_account",
            "project_id": settings.firebase_project_id,
            "client_email": settings.firebase_client_email,
            # Keys stored in env files carry literal "\n" sequences.
            "private_key": settings.firebase_private_key.replace("\\n", "\n"),
            "token_uri": TOKEN_URI,
        }
        try:
            app = _get_or_init_app(
                ADMIN_APP_NAME,
                credential=credentials.Certificate(service_account),
                options={"projectId": settings.firebase_project_id},
            )
            self._admin = AdminHandle(app=app, db=firestore.client(app))
        except (ValueError, OSError) as exc:
            logger.error("Firebase Admin initialization error from service account: %s", exc)
            return None

        logger.info("Firebase Admin SDK initialized successfully.")
        return self._admin

    def require_admin_db(self) -> Any:
        """Return the admin Firestore client or raise ``ConfigurationError``."""
        handle = self.admin()
        if handle is None:
            raise ConfigurationError("Firebase Admin SDK is not initialized")
        return handle.db


def _get_or_init_app(name: str, credential: Any, options: dict[str, Any]) -> Any:
    try:
        return firebase_admin.get_app(name)
    except ValueError:
        return firebase_admin.initialize_app(credential, options, name=name)


def _drop_empty(options: dict[str, str]) -> dict[str, str]:
    return {key: value for key, value in options.items() if value}
