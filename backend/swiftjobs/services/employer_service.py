import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from swiftjobs.core.security import hash_password
from swiftjobs.db.models.employer import Employer
from swiftjobs.db.models.job import Job
from swiftjobs.schemas.employer import EmployerRegisterRequest
from swiftjobs.schemas.job import JobPostRequest
from swiftjobs.services.analysis import ProfileAnalyzer
from swiftjobs.services.exceptions import ConflictError, NotFoundError
from swiftjobs.services.job_seeker_service import normalize_email

logger = logging.getLogger(__name__)


def register_employer(db: Session, request: EmployerRegisterRequest) -> Employer:
    """Create an employer account with a hashed password."""
    email = normalize_email(request.email)

    existing = db.query(Employer).filter(Employer.email == email).first()
    if existing:
        raise ConflictError("An employer with this email is already registered")

    employer = Employer(
        company_name=request.company_name.strip(),
        email=email,
        password_hash=hash_password(request.password),
        description=request.description,
        website=request.website,
        industry=request.industry,
        company_size=request.company_size
    )

    db.add(employer)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("An employer with this email is already registered")
    db.refresh(employer)

    logger.info(
        "employer_registered",
        extra={"employer_id": str(employer.id), "company_name": employer.company_name}
    )

    return employer


def get_employer(db: Session, employer_id: UUID) -> Employer:
    employer = db.query(Employer).filter(Employer.id == employer_id).first()
    if not employer:
        raise NotFoundError("Employer not found")
    return employer


def _resolve_employer_id(db: Session, request: JobPostRequest, email: str) -> Optional[UUID]:
    if request.employer_id is not None:
        return get_employer(db, request.employer_id).id

    employer = db.query(Employer).filter(Employer.email == email).first()
    return employer.id if employer else None


async def post_job(
    db: Session,
    analyzer: ProfileAnalyzer,
    request: JobPostRequest
) -> Job:
    """
    Analyze a job posting's requirements, then store it.

    The posting is linked to the employer given by ``employer_id`` or, failing
    that, to the employer registered under the posting's email, if any.

    Raises:
        NotFoundError: If an explicit employer_id does not exist
        LLMError: If the completion API call fails
    """
    email = normalize_email(request.email)
    employer_id = _resolve_employer_id(db, request, email)

    analysis = await analyzer.analyze_job(
        company=request.company,
        job_title=request.job_title,
        description=request.description,
        preferences=request.preferences
    )

    job = Job(
        employer_id=employer_id,
        company=request.company.strip(),
        email=email,
        job_title=request.job_title.strip(),
        description=request.description,
        preferences=request.preferences,
        job_analysis=analysis.model_dump(),
        is_active=True
    )

    db.add(job)
    db.commit()
    db.refresh(job)

    logger.info(
        "job_posted",
        extra={
            "job_id": str(job.id),
            "employer_id": str(employer_id) if employer_id else None,
            "required_skills_count": len(analysis.required_skills)
        }
    )

    return job


def get_job(db: Session, job_id: UUID) -> Job:
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFoundError("Job not found")
    return job


def list_jobs(db: Session) -> List[Job]:
    """Active jobs, newest first."""
    return (
        db.query(Job)
        .filter(Job.is_active == True)
        .order_by(Job.created_at.desc())
        .all()
    )


def list_jobs_for_employer(db: Session, employer_id: UUID) -> List[Job]:
    get_employer(db, employer_id)
    return (
        db.query(Job)
        .filter(Job.employer_id == employer_id)
        .order_by(Job.created_at.desc())
        .all()
    )


def close_job(db: Session, job_id: UUID) -> Job:
    """Stop a job from appearing in listings and seeker matches."""
    job = get_job(db, job_id)
    job.is_active = False
    db.commit()
    db.refresh(job)

    logger.info("job_closed", extra={"job_id": str(job.id)})

    return job
