import logging
import os
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException, UploadFile, File, Form
from pydantic import ValidationError
from sqlalchemy.orm import Session

from swiftjobs.api.dependencies.database import get_db
from swiftjobs.api.dependencies.llm import get_analyzer
from swiftjobs.core.config import settings
from swiftjobs.schemas.job_seeker import (
    JobSeekerRegisterRequest,
    JobSeekerRegisterResponse,
    JobSeekerResponse,
)
from swiftjobs.services.analysis import LLMError, ProfileAnalyzer
from swiftjobs.services.exceptions import ConflictError, NotFoundError
from swiftjobs.services.job_seeker_service import register_job_seeker, get_job_seeker
from swiftjobs.services.resume_parser import extract_text_from_resume, store_resume_file

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/register", response_model=JobSeekerRegisterResponse)
async def register(
    request: JobSeekerRegisterRequest,
    db: Session = Depends(get_db),
    analyzer: ProfileAnalyzer = Depends(get_analyzer)
):
    """
    Register a job seeker from a pasted resume and behavioral answers.

    The resume and answers are analyzed by the LLM; the resulting skill and
    trait profile is stored with the seeker and returned.
    """
    try:
        seeker = await register_job_seeker(db, analyzer, request)
    except ConflictError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except LLMError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error(f"Error registering job seeker: {str(e)}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail="Failed to register job seeker")

    return JobSeekerRegisterResponse(
        user_id=seeker.id,
        analysis=seeker.profile_analysis
    )


@router.post("/register/upload", response_model=JobSeekerRegisterResponse)
async def register_with_resume_file(
    name: str = Form(...),
    email: str = Form(...),
    answers: List[str] = Form(default=[]),
    password: Optional[str] = Form(None),
    file: UploadFile = File(...),
    db: Session = Depends(get_db),
    analyzer: ProfileAnalyzer = Depends(get_analyzer)
):
    """
    Register a job seeker from an uploaded resume file (PDF or DOCX).

    The file is stored on disk, its text extracted and then analyzed exactly
    like a pasted resume. The stored file is removed if registration fails.
    """
    if file.content_type not in settings.ALLOWED_RESUME_MIME_TYPES:
        raise HTTPException(
            status_code=400,
            detail="Invalid file type. Allowed types: PDF, DOCX"
        )

    file_content = await file.read()
    file_size = len(file_content)

    max_size_bytes = settings.MAX_UPLOAD_SIZE_MB * 1024 * 1024
    if file_size > max_size_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Maximum size: {settings.MAX_UPLOAD_SIZE_MB}MB"
        )

    if file_size == 0:
        raise HTTPException(status_code=400, detail="Empty file")

    file_path = None

    try:
        file_path = store_resume_file(file_content, file.filename, settings.RESUME_UPLOAD_DIR)

        try:
            resume_text = extract_text_from_resume(str(file_path), file.content_type)
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))

        try:
            request = JobSeekerRegisterRequest(
                name=name,
                email=email,
                resume=resume_text,
                answers=answers,
                password=password
            )
        except ValidationError as e:
            raise HTTPException(status_code=422, detail=str(e))

        logger.info(
            "Resume uploaded for registration",
            extra={
                "uploaded_filename": file.filename,
                "file_size": file_size,
                "mime_type": file.content_type,
                "text_length": len(resume_text)
            }
        )

        seeker = await register_job_seeker(
            db,
            analyzer,
            request,
            resume_filename=file.filename,
            resume_file_path=str(file_path)
        )

    except Exception as e:
        _remove_file(file_path)

        if isinstance(e, HTTPException):
            raise
        if isinstance(e, ConflictError):
            raise HTTPException(status_code=409, detail=str(e))
        if isinstance(e, LLMError):
            raise HTTPException(status_code=502, detail=str(e))

        logger.error(f"Failed to register job seeker from upload: {str(e)}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail="Failed to register job seeker")

    return JobSeekerRegisterResponse(
        user_id=seeker.id,
        analysis=seeker.profile_analysis
    )


@router.get("/{user_id}", response_model=JobSeekerResponse)
def get_profile(user_id: UUID, db: Session = Depends(get_db)):
    """
    Get a job seeker's stored profile and analysis.
    """
    try:
        return get_job_seeker(db, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _remove_file(file_path) -> None:
    if file_path is not None and os.path.exists(file_path):
        try:
            os.remove(file_path)
        except OSError as cleanup_error:
            logger.error(f"Failed to clean up file: {str(cleanup_error)}")
