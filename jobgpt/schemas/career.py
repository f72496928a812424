from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CareerPathRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_role: str = Field(alias="currentRole", max_length=200)
    target_role: str = Field(alias="targetRole", max_length=200)
    timeline_months: int = Field(alias="timelineMonths", gt=0, le=600)


class Milestone(BaseModel):
    title: str
    description: str
    timeframe: str | None = None


class CareerPlan(BaseModel):
    model_config = ConfigDict(extra="allow")

    overview: str
    skills: list[str]
    milestones: list[Milestone]
    resources: str
    challenges: list[str]
    success_tips: list[str] = Field(alias="successTips")
