from fastapi import APIRouter, Depends, HTTPException, status

from jobgpt.core.security import require_owner_id
from jobgpt.schemas.records import (
    CareerPathRecord,
    CareerPathSaveRequest,
    JobMatchRecord,
    JobMatchSaveRequest,
    JobStatusUpdate,
    ProfileRecord,
    ProfileUpdate,
    ResumeRecord,
    ResumeSaveRequest,
)
from jobgpt.storage.store import InvalidStatusTransition, RecordNotFound, RecordStore, get_store

router = APIRouter()


@router.get("/resumes", response_model=list[ResumeRecord])
def list_resumes(owner_id: str = Depends(require_owner_id), store: RecordStore = Depends(get_store)):
    return store.list_resumes(owner_id)


@router.post("/resumes", response_model=ResumeRecord, status_code=status.HTTP_201_CREATED)
def save_resume(
    payload: ResumeSaveRequest,
    owner_id: str = Depends(require_owner_id),
    store: RecordStore = Depends(get_store),
):
    if not payload.title.strip() or not payload.content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please provide both title and content.",
        )
    return store.save_resume(
        owner_id,
        title=payload.title.strip(),
        content=payload.content,
        analysis=payload.analysis,
        skills=payload.skills,
    )


@router.get("/career-paths", response_model=list[CareerPathRecord])
def list_career_paths(owner_id: str = Depends(require_owner_id), store: RecordStore = Depends(get_store)):
    return store.list_career_paths(owner_id)


@router.post("/career-paths", response_model=CareerPathRecord, status_code=status.HTTP_201_CREATED)
def save_career_path(
    payload: CareerPathSaveRequest,
    owner_id: str = Depends(require_owner_id),
    store: RecordStore = Depends(get_store),
):
    return store.save_career_path(
        owner_id,
        current_role=payload.current_role,
        target_role=payload.target_role,
        timeline_months=payload.timeline_months,
        plan=payload.plan,
    )


@router.get("/job-matches", response_model=list[JobMatchRecord])
def list_job_matches(owner_id: str = Depends(require_owner_id), store: RecordStore = Depends(get_store)):
    return store.list_job_matches(owner_id)


@router.post("/job-matches", response_model=JobMatchRecord, status_code=status.HTTP_201_CREATED)
def save_job_match(
    payload: JobMatchSaveRequest,
    owner_id: str = Depends(require_owner_id),
    store: RecordStore = Depends(get_store),
):
    return store.save_job_match(
        owner_id,
        title=payload.title,
        company=payload.company,
        description=payload.description,
        match_score=payload.match_score,
        match_reasons=payload.match_reasons,
        salary=payload.salary,
        location=payload.location,
        url=payload.url,
    )


@router.patch("/job-matches/{job_id}/status", response_model=JobMatchRecord)
def update_job_status(
    job_id: int,
    payload: JobStatusUpdate,
    owner_id: str = Depends(require_owner_id),
    store: RecordStore = Depends(get_store),
):
    try:
        return store.update_job_status(owner_id, job_id, payload.status)
    except RecordNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except InvalidStatusTransition as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc


@router.get("/profile", response_model=ProfileRecord)
def get_profile(owner_id: str = Depends(require_owner_id), store: RecordStore = Depends(get_store)):
    try:
        return store.get_profile(owner_id)
    except RecordNotFound as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@router.put("/profile", response_model=ProfileRecord)
def update_profile(
    payload: ProfileUpdate,
    owner_id: str = Depends(require_owner_id),
    store: RecordStore = Depends(get_store),
):
    return store.upsert_profile(owner_id, payload.model_dump())
