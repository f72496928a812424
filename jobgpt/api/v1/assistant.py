import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from jobgpt.ai.factory import get_text_client
from jobgpt.ai.types import TextGenerator
from jobgpt.schemas.career import CareerPathRequest
from jobgpt.schemas.jobs import JobSearchRequest
from jobgpt.schemas.resume import ResumeAnalysisRequest
from jobgpt.services.career_service import generate_career_path
from jobgpt.services.job_search_service import search_jobs
from jobgpt.services.resume_service import BlankResumeError, analyze_resume

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/analyze-resume")
async def analyze_resume_endpoint(
    payload: ResumeAnalysisRequest,
    client: TextGenerator = Depends(get_text_client),
):
    try:
        return await analyze_resume(client, payload.content)
    except BlankResumeError as exc:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


@router.post("/generate-career-path")
async def generate_career_path_endpoint(
    payload: CareerPathRequest,
    client: TextGenerator = Depends(get_text_client),
):
    return await generate_career_path(
        client,
        current_role=payload.current_role,
        target_role=payload.target_role,
        timeline_months=payload.timeline_months,
    )


@router.post("/search-jobs")
async def search_jobs_endpoint(
    payload: JobSearchRequest,
    client: TextGenerator = Depends(get_text_client),
):
    logger.info("job_search_requested user=%s query_len=%s", payload.user_id or "-", len(payload.query))
    return await search_jobs(client, payload.query)
