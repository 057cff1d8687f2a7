"""AI router - /api/ai endpoints for every AI-assisted feature.

Bodies are validated against the request contracts before any model call.
Failures surface through the application's error handlers as
``{success: false, error}``.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from careerlens.agents.career_advisor_agent import CareerAdvisorAgent
from careerlens.agents.interviewer_agent import InterviewerAgent
from careerlens.agents.learning_agent import LearningHelperAgent
from careerlens.agents.question_agent import InterviewQuestionAgent
from careerlens.models.career_models import (
    CareerRecommendationsRequest,
    CareerRecommendationsResponse,
    RoadmapRequest,
    RoadmapResponse,
    SkillGapAnalysisRequest,
    SkillGapAnalysisResponse,
)
from careerlens.models.interview_models import (
    InterviewQuestionSetRequest,
    InterviewQuestionSetResponse,
    InterviewSessionOpening,
    InterviewSessionRequest,
    InterviewTurn,
    InterviewTurnRequest,
)
from careerlens.models.learning_models import LearningMaterialRequest, LearningMaterialSummary
from careerlens.services.app_context import AppContext, get_app_context

router = APIRouter(prefix="/api/ai", tags=["ai"])


# ── Agent dependencies ───────────────────────────────────────────────────────


def get_interviewer_agent(ctx: AppContext = Depends(get_app_context)) -> InterviewerAgent:
    return InterviewerAgent(ctx.settings)


def get_question_agent(ctx: AppContext = Depends(get_app_context)) -> InterviewQuestionAgent:
    return InterviewQuestionAgent(ctx.settings)


def get_learning_agent(ctx: AppContext = Depends(get_app_context)) -> LearningHelperAgent:
    return LearningHelperAgent(ctx.settings)


def get_career_advisor(ctx: AppContext = Depends(get_app_context)) -> CareerAdvisorAgent:
    return CareerAdvisorAgent(ctx.settings)


# ── Interviewer ──────────────────────────────────────────────────────────────


@router.post("/interviewer/start", response_model=InterviewSessionOpening)
async def start_interview(
    req: InterviewSessionRequest,
    agent: InterviewerAgent = Depends(get_interviewer_agent),
) -> InterviewSessionOpening:
    return await agent.open_session(req)


@router.post("/interviewer/follow-up", response_model=InterviewTurn)
async def interview_follow_up(
    req: InterviewTurnRequest,
    agent: InterviewerAgent = Depends(get_interviewer_agent),
) -> InterviewTurn:
    return await agent.follow_up(req)


@router.post("/interview-questions", response_model=InterviewQuestionSetResponse)
async def generate_interview_questions(
    req: InterviewQuestionSetRequest,
    agent: InterviewQuestionAgent = Depends(get_question_agent),
) -> InterviewQuestionSetResponse:
    return await agent.generate(req)


# ── Learning & planning ──────────────────────────────────────────────────────


@router.post("/learning-helper", response_model=LearningMaterialSummary)
async def learning_helper(
    req: LearningMaterialRequest,
    agent: LearningHelperAgent = Depends(get_learning_agent),
) -> LearningMaterialSummary:
    return await agent.summarize(req)


@router.post("/career-recommendations", response_model=CareerRecommendationsResponse)
async def career_recommendations(
    req: CareerRecommendationsRequest,
    advisor: CareerAdvisorAgent = Depends(get_career_advisor),
) -> CareerRecommendationsResponse:
    return await advisor.recommend(req)


@router.post("/skill-gap", response_model=SkillGapAnalysisResponse)
async def skill_gap(
    req: SkillGapAnalysisRequest,
    advisor: CareerAdvisorAgent = Depends(get_career_advisor),
) -> SkillGapAnalysisResponse:
    return await advisor.analyze_skill_gap(req)


@router.post("/roadmap", response_model=RoadmapResponse)
async def roadmap(
    req: RoadmapRequest,
    advisor: CareerAdvisorAgent = Depends(get_career_advisor),
) -> RoadmapResponse:
    return await advisor.create_roadmap(req)
