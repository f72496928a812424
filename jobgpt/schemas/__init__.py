from .career import CareerPathRequest, CareerPlan, Milestone
from .jobs import JobSearchRequest, JobSearchResult
from .records import (
    CareerPathRecord,
    CareerPathSaveRequest,
    JobMatchRecord,
    JobMatchSaveRequest,
    JobStatus,
    JobStatusUpdate,
    ProfileRecord,
    ProfileUpdate,
    ResumeRecord,
    ResumeSaveRequest,
)
from .resume import ResumeAnalysis, ResumeAnalysisRequest

__all__ = [
    "CareerPathRecord",
    "CareerPathRequest",
    "CareerPathSaveRequest",
    "CareerPlan",
    "JobMatchRecord",
    "JobMatchSaveRequest",
    "JobSearchRequest",
    "JobSearchResult",
    "JobStatus",
    "JobStatusUpdate",
    "Milestone",
    "ProfileRecord",
    "ProfileUpdate",
    "ResumeAnalysis",
    "ResumeAnalysisRequest",
    "ResumeRecord",
    "ResumeSaveRequest",
]
