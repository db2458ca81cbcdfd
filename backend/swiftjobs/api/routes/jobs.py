import logging
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from swiftjobs.api.dependencies.database import get_db
from swiftjobs.api.dependencies.llm import get_analyzer
from swiftjobs.schemas.job import (
    JobPostRequest,
    JobPostResponse,
    JobResponse,
    JobListResponse,
)
from swiftjobs.services.analysis import LLMError, ProfileAnalyzer
from swiftjobs.services.employer_service import post_job, get_job, list_jobs, close_job
from swiftjobs.services.exceptions import NotFoundError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/job/post", response_model=JobPostResponse)
async def create_job(
    request: JobPostRequest,
    db: Session = Depends(get_db),
    analyzer: ProfileAnalyzer = Depends(get_analyzer)
):
    """
    Post a job. The LLM extracts required skills, culture and experience
    level from the description, and that analysis is stored with the job.
    """
    try:
        job = await post_job(db, analyzer, request)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LLMError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error(f"Error posting job: {str(e)}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail="Failed to post job")

    return JobPostResponse(job_id=job.id, analysis=job.job_analysis)


@router.get("/jobs", response_model=JobListResponse)
def get_jobs(db: Session = Depends(get_db)):
    """
    List open jobs, newest first.
    """
    return JobListResponse(jobs=list_jobs(db))


@router.get("/job/{job_id}", response_model=JobResponse)
def get_job_detail(job_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_job(db, job_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/job/{job_id}/close", response_model=JobResponse)
def close(job_id: UUID, db: Session = Depends(get_db)):
    """
    Close a job so it no longer appears in listings or seeker matches.
    """
    try:
        return close_job(db, job_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
