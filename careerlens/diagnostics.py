"""List the Gemini models available to the configured API key.

Usage:
    careerlens-list-models
    python scripts/list_models.py
"""

from __future__ import annotations

import sys
from typing import Optional

import httpx

from careerlens.config import get_settings


def list_models(api_key: str, url: str, client: Optional[httpx.Client] = None) -> int:
    """Query the models endpoint once and print what it returns.

    Returns the process exit code.
    """
    own_client = client is None
    client = client or httpx.Client(timeout=15)
    try:
        resp = client.get(url, params={"key": api_key})
        data = resp.json()
    except (httpx.HTTPError, ValueError) as exc:
        print(f"Error listing models: {exc}", file=sys.stderr)
        return 1
    finally:
        if own_client:
            client.close()

    models = data.get("models") if isinstance(data, dict) else None
    if models:
        print("All Models:")
        for model in models:
            print("-", model.get("name"))
    else:
        print("No models found or error structure:", data)
    return 0


def main() -> int:
    settings = get_settings()
    if not settings.gemini_api_key:
        print("No API Key found", file=sys.stderr)
        return 1
    return list_models(settings.gemini_api_key, settings.gemini_models_url)


if __name__ == "__main__":
    sys.exit(main())
