"""Shared plumbing for agents that return a validated JSON contract.

Every agent talks to Gemini through its OpenAI-compatible endpoint using
LangChain's ``ChatOpenAI`` in JSON mode, parses the reply robustly and
validates it against the feature's output model.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Optional, TypeVar

from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, ValidationError

from careerlens.config import Settings, get_settings
from careerlens.errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

OutputT = TypeVar("OutputT", bound=BaseModel)

_FENCED_JSON = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)


class StructuredAgent:
    """Stateless LLM caller bound to one system prompt."""

    temperature: float = 0.4

    def __init__(
        self,
        system_prompt: str,
        settings: Optional[Settings] = None,
        temperature: Optional[float] = None,
    ) -> None:
        settings = settings or get_settings()
        if not settings.gemini_api_key:
            raise ConfigurationError("GEMINI_API_KEY is not configured")
        self._system_prompt = system_prompt
        self._llm = ChatOpenAI(
            model=settings.gemini_model,
            api_key=settings.gemini_api_key,
            base_url=settings.gemini_base_url,
            temperature=self.temperature if temperature is None else temperature,
            model_kwargs={"response_format": {"type": "json_object"}},
        )

    async def ask(self, user_content: str, output_model: type[OutputT]) -> OutputT:
        """Send one prompt and return the reply validated as ``output_model``."""
        messages = [
            SystemMessage(content=self._system_prompt),
            HumanMessage(content=user_content),
        ]
        name = type(self).__name__
        try:
            raw = await self._llm.ainvoke(messages)
        except Exception as exc:
            logger.exception("%s: AI provider call failed", name)
            raise UpstreamError("AI provider request failed", details=str(exc)) from exc

        data = self._parse_output(raw.content)
        try:
            return output_model.model_validate(data)
        except ValidationError as exc:
            logger.error("%s: reply does not match %s: %s", name, output_model.__name__, exc)
            raise UpstreamError(
                "AI provider returned an unexpected response shape",
                details=exc.errors(include_url=False, include_context=False),
            ) from exc

    @staticmethod
    def _parse_output(content: Any) -> dict[str, Any]:
        """Parse LLM JSON output robustly."""
        if not isinstance(content, str):
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part)
                for part in content
            )
        try:
            data = json.loads(content)
        except json.JSONDecodeError:
            match = _FENCED_JSON.search(content)
            if not match:
                logger.error("Failed to parse AI output: %s", content[:200])
                raise UpstreamError("AI provider returned malformed JSON")
            try:
                data = json.loads(match.group(1))
            except json.JSONDecodeError as exc:
                raise UpstreamError("AI provider returned malformed JSON") from exc
        if not isinstance(data, dict):
            raise UpstreamError("AI provider returned malformed JSON")
        return data
