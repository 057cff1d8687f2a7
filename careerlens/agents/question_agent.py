"""Interview Question Agent - easy/medium/hard questions with model answers."""

from __future__ import annotations

import logging
from typing import Optional

from careerlens.agents.base import StructuredAgent
from careerlens.config import Settings
from careerlens.models.interview_models import (
    InterviewQuestionSetRequest,
    InterviewQuestionSetResponse,
)
from careerlens.prompts.question_prompt import QUESTION_SYSTEM_PROMPT, build_question_request

logger = logging.getLogger(__name__)


class InterviewQuestionAgent(StructuredAgent):

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__(QUESTION_SYSTEM_PROMPT, settings)

    async def generate(self, req: InterviewQuestionSetRequest) -> InterviewQuestionSetResponse:
        result = await self.ask(build_question_request(req.career_role), InterviewQuestionSetResponse)
        logger.info(
            "Generated %d interview questions for %s",
            len(result.interview_questions),
            req.career_role,
        )
        return result
