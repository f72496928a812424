from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ResumeAnalysisRequest(BaseModel):
    content: str = Field(default="", max_length=120000)


class ResumeAnalysis(BaseModel):
    """Shape the résumé analysis must have once fallbacks are applied."""

    model_config = ConfigDict(extra="allow")

    summary: str
    skills: list[str]
    suggestions: list[str]
    experience_years: float = Field(alias="experienceYears")
    key_strengths: list[str] = Field(alias="keyStrengths")
