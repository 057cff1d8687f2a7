"""Contracts for career recommendations, skill-gap analysis and roadmaps."""

from __future__ import annotations

from enum import Enum

from pydantic import Field, HttpUrl

from careerlens.models.contracts import ContractModel, RequestContract


# ── Career recommendations ───────────────────────────────────────────────────


class CareerRecommendationsRequest(RequestContract):
    profile: str = Field(
        ...,
        min_length=1,
        description=(
            "A detailed description of the user profile, including education, "
            "experience, skills, and interests."
        ),
    )


class CareerRecommendation(ContractModel):
    career: str = Field(..., description="The title of the career path.")
    reason: str = Field(..., description="Why this career is a good fit for the user.")
    missing_skills: str = Field(
        ..., description="A comma-separated list of skills the user needs to acquire."
    )
    learning_plan: str = Field(..., description="A 3-month learning roadmap.")
    resources: str = Field(..., description="A list of suggested free and paid resources.")


class CareerRecommendationsResponse(ContractModel):
    career_recommendations: list[CareerRecommendation] = Field(
        ..., description="A list of top 3 career recommendations."
    )


# ── Skill gap ────────────────────────────────────────────────────────────────


class SkillGapAnalysisRequest(RequestContract):
    user_skills: list[str] = Field(..., description="A list of skills possessed by the user.")
    target_role_requirements: list[str] = Field(
        ..., description="A list of skills required for the target role."
    )


class SkillGapAnalysisResponse(ContractModel):
    overlapping_skills: list[str] = Field(
        ...,
        description="Skills that the user possesses which are also required for the target role.",
    )
    missing_skills: list[str] = Field(
        ...,
        description="Skills that are required for the target role but not possessed by the user.",
    )
    suggested_learning_order: list[str] = Field(
        ...,
        description="A suggested order for learning the missing skills.",
    )


# ── Personalized roadmap ─────────────────────────────────────────────────────


class ResourceType(str, Enum):
    FREE = "free"
    PAID = "paid"


class RoadmapRequest(RequestContract):
    career_recommendation: str = Field(
        ..., min_length=1, description="The career recommendation to base the learning plan on."
    )
    user_skills: list[str] = Field(
        default_factory=list, description="The skills the user already possesses."
    )
    missing_skills: list[str] = Field(
        default_factory=list, description="The skills the user needs to learn."
    )


class RoadmapResource(ContractModel):
    name: str
    url: HttpUrl
    type: ResourceType


class RoadmapWeek(ContractModel):
    week: int = Field(..., ge=1, description="The week number in the 3-month plan.")
    topic: str = Field(..., description="The learning topic for the week.")
    resources: list[RoadmapResource] = Field(default_factory=list)


class RoadmapResponse(ContractModel):
    learning_plan: list[RoadmapWeek] = Field(
        ..., description="A 3-month weekly learning plan with resources."
    )
