import logging
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from swiftjobs.api.dependencies.database import get_db
from swiftjobs.schemas.employer import (
    EmployerRegisterRequest,
    EmployerRegisterResponse,
    EmployerResponse,
)
from swiftjobs.schemas.job import JobListResponse
from swiftjobs.services.employer_service import (
    register_employer,
    get_employer,
    list_jobs_for_employer,
)
from swiftjobs.services.exceptions import ConflictError, NotFoundError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/register", response_model=EmployerRegisterResponse)
def register(request: EmployerRegisterRequest, db: Session = Depends(get_db)):
    """
    Register an employer account with its company profile.
    """
    try:
        employer = register_employer(db, request)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Error registering employer: {str(e)}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail="Failed to register employer")

    return EmployerRegisterResponse(employer_id=employer.id)


@router.get("/{employer_id}", response_model=EmployerResponse)
def get_profile(employer_id: UUID, db: Session = Depends(get_db)):
    try:
        return get_employer(db, employer_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{employer_id}/jobs", response_model=JobListResponse)
def get_jobs(employer_id: UUID, db: Session = Depends(get_db)):
    """
    List every job posted by an employer, newest first, including closed ones.
    """
    try:
        jobs = list_jobs_for_employer(db, employer_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return JobListResponse(jobs=jobs)
