"""Contracts for the AI interviewer and interview-question features."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import Field

from careerlens.models.contracts import ContractModel, RequestContract


class InterviewType(str, Enum):
    """Kind of interview the AI interviewer conducts."""

    TECHNICAL = "technical"
    HR = "hr"
    MIXED = "mixed"


class AvatarType(str, Enum):
    """Persona shown for the AI interviewer."""

    HR = "HR"
    MENTOR = "Mentor"
    ROBOT = "Robot"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class Speaker(str, Enum):
    USER = "user"
    AI = "ai"


# ── Session opening ──────────────────────────────────────────────────────────


class InterviewSessionRequest(RequestContract):
    """Input for generating the interviewer's opening question."""

    interview_type: InterviewType = Field(
        ...,
        description="The type of interview to be conducted.",
        examples=["technical"],
    )
    job_description: Optional[str] = Field(
        default=None,
        description="The description of the role the user is interviewing for.",
    )
    avatar_type: AvatarType = Field(
        ...,
        description="The selected avatar type.",
        examples=["Mentor"],
    )


class InterviewSessionOpening(ContractModel):
    """The welcoming greeting and first question from the AI interviewer."""

    first_question: str = Field(..., min_length=1)


# ── Conversational follow-up ─────────────────────────────────────────────────


class TranscriptItem(RequestContract):
    speaker: Speaker
    text: str
    timestamp: str = ""


class InterviewTurnRequest(RequestContract):
    """Input for the interviewer's next question, given the conversation so far."""

    job_description: Optional[str] = Field(
        default=None,
        description="The description of the role the user is interviewing for.",
    )
    avatar_type: AvatarType = Field(..., description="The selected avatar type.")
    transcript: list[TranscriptItem] = Field(
        default_factory=list,
        description="The history of the conversation so far.",
    )
    user_profile: Optional[dict[str, Any]] = Field(
        default=None,
        description="The profile of the user being interviewed.",
    )


class InterviewTurn(ContractModel):
    """The interviewer's next statement and whether the interview is over."""

    follow_up: str = Field(..., min_length=1)
    is_end_of_interview: bool = False


# ── Question sets ────────────────────────────────────────────────────────────


class InterviewQuestionSetRequest(RequestContract):
    career_role: str = Field(
        ...,
        min_length=1,
        description="The career role to generate interview questions for.",
        examples=["Data Engineer"],
    )


class InterviewQuestion(ContractModel):
    question: str = Field(..., description="The interview question.")
    difficulty: Difficulty = Field(..., description="The difficulty level of the question.")
    model_answer: str = Field(..., description="A model answer for the question.")


class InterviewQuestionSetResponse(ContractModel):
    """Questions in the order the generator produced them."""

    interview_questions: list[InterviewQuestion] = Field(
        ...,
        description="A list of interview questions with model answers.",
    )
