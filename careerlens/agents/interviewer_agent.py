"""Interviewer Agent - opens an interview and keeps the conversation going."""

from __future__ import annotations

import logging
from typing import Optional

from careerlens.agents.base import StructuredAgent
from careerlens.config import Settings
from careerlens.models.interview_models import (
    InterviewSessionOpening,
    InterviewSessionRequest,
    InterviewTurn,
    InterviewTurnRequest,
)
from careerlens.prompts.interviewer_prompt import (
    FOLLOW_UP_SYSTEM_PROMPT,
    MAY_END_AFTER,
    OPENING_SYSTEM_PROMPT,
    build_follow_up_request,
    build_opening_request,
    count_interviewer_turns,
)

logger = logging.getLogger(__name__)


class InterviewerAgent:
    """Generates the opening question and follow-ups for a mock interview."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._opener = StructuredAgent(OPENING_SYSTEM_PROMPT, settings, temperature=0.7)
        # Higher temperature keeps follow-ups varied.
        self._follower = StructuredAgent(FOLLOW_UP_SYSTEM_PROMPT, settings, temperature=0.8)

    async def open_session(self, req: InterviewSessionRequest) -> InterviewSessionOpening:
        logger.info(
            "Opening %s interview with %s avatar", req.interview_type.value, req.avatar_type.value
        )
        return await self._opener.ask(build_opening_request(req), InterviewSessionOpening)

    async def follow_up(self, req: InterviewTurnRequest) -> InterviewTurn:
        """Return the next interviewer turn.

        The interview may only end once the interviewer has asked
        ``MAY_END_AFTER`` questions; earlier end flags are ignored.
        """
        turn = await self._follower.ask(build_follow_up_request(req), InterviewTurn)
        asked = count_interviewer_turns(req)
        if turn.is_end_of_interview and asked < MAY_END_AFTER:
            logger.info("Ignoring early end-of-interview flag after %d questions", asked)
            turn = turn.model_copy(update={"is_end_of_interview": False})
        return turn
