from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class JobStatus(str, Enum):
    INTERESTED = "interested"
    APPLIED = "applied"
    DISMISSED = "dismissed"


class ResumeSaveRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=120000)
    analysis: dict[str, Any] | None = None
    skills: list[str] | None = None


class ResumeRecord(BaseModel):
    id: int
    user_id: str
    title: str
    content: str
    ai_analysis: dict[str, Any] | None = None
    skills_extracted: list[Any] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class CareerPathSaveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_role: str = Field(alias="currentRole", min_length=1, max_length=200)
    target_role: str = Field(alias="targetRole", min_length=1, max_length=200)
    timeline_months: int = Field(alias="timelineMonths", gt=0, le=600)
    plan: dict[str, Any]


class CareerPathRecord(BaseModel):
    id: int
    user_id: str
    current_role: str
    target_role: str
    timeline_months: int
    required_skills: list[Any] = Field(default_factory=list)
    milestones: list[Any] = Field(default_factory=list)
    learning_resources: Any = None
    ai_recommendations: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime


class JobMatchSaveRequest(BaseModel):
    """Accepts a job listing exactly as returned by the search endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1, max_length=300)
    company: str | None = Field(default=None, max_length=300)
    description: str | None = None
    # Coerced best-effort by RecordStore.save_job_match.
    match_score: Any = Field(default=None, alias="matchScore")
    match_reasons: Any = Field(default=None, alias="matchReasons")
    salary: str | None = None
    location: str | None = None
    url: str | None = None


class JobMatchRecord(BaseModel):
    id: int
    user_id: str
    job_title: str
    company: str | None = None
    job_description: str | None = None
    match_score: float | None = None
    match_reasons: list[Any] = Field(default_factory=list)
    salary_range: str | None = None
    location: str | None = None
    job_url: str | None = None
    status: JobStatus
    created_at: datetime
    updated_at: datetime


class JobStatusUpdate(BaseModel):
    status: JobStatus


class ProfileUpdate(BaseModel):
    full_name: str | None = Field(default=None, max_length=200)
    phone: str | None = Field(default=None, max_length=50)
    location: str | None = Field(default=None, max_length=200)
    linkedin_url: str | None = Field(default=None, max_length=500)
    github_url: str | None = Field(default=None, max_length=500)
    portfolio_url: str | None = Field(default=None, max_length=500)


class ProfileRecord(ProfileUpdate):
    user_id: str
    updated_at: datetime
