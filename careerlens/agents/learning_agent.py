"""Learning Helper Agent - turns a study PDF into quick revision points.

The PDF arrives as a base64 data URI. Its text is extracted locally with
pypdf and only the text is sent to the model.
"""

from __future__ import annotations

import logging
from typing import Optional

from careerlens.agents.base import StructuredAgent
from careerlens.config import Settings
from careerlens.errors import ExtractionError
from careerlens.models.learning_models import LearningMaterialRequest, LearningMaterialSummary
from careerlens.prompts.learning_prompt import QUICK_POINTS_SYSTEM_PROMPT, build_quick_points_request
from careerlens.services.document_extraction import decode_data_uri, extract_text_from_bytes

logger = logging.getLogger(__name__)


class LearningHelperAgent(StructuredAgent):

    temperature = 0.2

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__(QUICK_POINTS_SYSTEM_PROMPT, settings)

    async def summarize(self, req: LearningMaterialRequest) -> LearningMaterialSummary:
        mime, payload = decode_data_uri(req.pdf_data_uri)
        if mime != "application/pdf":
            raise ExtractionError(f"Unsupported document type: {mime}")

        text = extract_text_from_bytes(payload)
        if not text.strip():
            raise ExtractionError(
                "No text content found in PDF",
                details="The PDF may contain only images (scanned document).",
            )
        logger.info("Summarising %d characters of study material", len(text))
        return await self.ask(build_quick_points_request(text), LearningMaterialSummary)
