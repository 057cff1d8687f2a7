"""Career Advisor Agent - recommendations, skill gaps and learning roadmaps."""

from __future__ import annotations

from typing import Optional

from careerlens.agents.base import StructuredAgent
from careerlens.config import Settings
from careerlens.models.career_models import (
    CareerRecommendationsRequest,
    CareerRecommendationsResponse,
    RoadmapRequest,
    RoadmapResponse,
    SkillGapAnalysisRequest,
    SkillGapAnalysisResponse,
)
from careerlens.prompts.career_prompt import (
    RECOMMENDATIONS_SYSTEM_PROMPT,
    ROADMAP_SYSTEM_PROMPT,
    SKILL_GAP_SYSTEM_PROMPT,
    build_recommendations_request,
    build_roadmap_request,
    build_skill_gap_request,
)


class CareerAdvisorAgent:
    """Groups the three profile-driven planning flows."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._recommender = StructuredAgent(RECOMMENDATIONS_SYSTEM_PROMPT, settings)
        self._gap_analyst = StructuredAgent(SKILL_GAP_SYSTEM_PROMPT, settings, temperature=0.1)
        self._planner = StructuredAgent(ROADMAP_SYSTEM_PROMPT, settings)

    async def recommend(self, req: CareerRecommendationsRequest) -> CareerRecommendationsResponse:
        return await self._recommender.ask(
            build_recommendations_request(req.profile), CareerRecommendationsResponse
        )

    async def analyze_skill_gap(self, req: SkillGapAnalysisRequest) -> SkillGapAnalysisResponse:
        return await self._gap_analyst.ask(
            build_skill_gap_request(req.user_skills, req.target_role_requirements),
            SkillGapAnalysisResponse,
        )

    async def create_roadmap(self, req: RoadmapRequest) -> RoadmapResponse:
        return await self._planner.ask(
            build_roadmap_request(req.career_recommendation, req.user_skills, req.missing_skills),
            RoadmapResponse,
        )
