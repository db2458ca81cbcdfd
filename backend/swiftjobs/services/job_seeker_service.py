import logging
from typing import List, Optional
from uuid import UUID
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from swiftjobs.core.security import hash_password
from swiftjobs.db.models.job_seeker import JobSeeker
from swiftjobs.schemas.job_seeker import JobSeekerRegisterRequest
from swiftjobs.services.analysis import ProfileAnalyzer
from swiftjobs.services.exceptions import ConflictError, NotFoundError

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def register_job_seeker(
    db: Session,
    analyzer: ProfileAnalyzer,
    request: JobSeekerRegisterRequest,
    resume_filename: Optional[str] = None,
    resume_file_path: Optional[str] = None
) -> JobSeeker:
    """
    Analyze a job seeker's resume and answers, then store the profile.

    Raises:
        ConflictError: If the email is already registered
        LLMError: If the completion API call fails
    """
    email = normalize_email(request.email)

    existing = db.query(JobSeeker).filter(JobSeeker.email == email).first()
    if existing:
        raise ConflictError("A job seeker with this email is already registered")

    analysis = await analyzer.analyze_job_seeker(request.resume, request.answers)

    seeker = JobSeeker(
        name=request.name.strip(),
        email=email,
        password_hash=hash_password(request.password) if request.password else None,
        resume=request.resume,
        resume_filename=resume_filename,
        resume_file_path=resume_file_path,
        behavioral_answers=list(request.answers),
        profile_analysis=analysis.model_dump()
    )

    db.add(seeker)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError("A job seeker with this email is already registered")
    db.refresh(seeker)

    logger.info(
        "job_seeker_registered",
        extra={
            "job_seeker_id": str(seeker.id),
            "technical_skills_count": len(analysis.technical_skills),
            "experience_level": analysis.experience_level
        }
    )

    return seeker


def get_job_seeker(db: Session, job_seeker_id: UUID) -> JobSeeker:
    seeker = db.query(JobSeeker).filter(JobSeeker.id == job_seeker_id).first()
    if not seeker:
        raise NotFoundError("Job seeker not found")
    return seeker


def list_job_seekers(db: Session) -> List[JobSeeker]:
    return db.query(JobSeeker).order_by(JobSeeker.created_at.asc()).all()
