from datetime import datetime
from typing import Optional, List, Dict, Any
from uuid import UUID
from pydantic import Field

from swiftjobs.schemas.base import CamelModel
from swiftjobs.schemas.analysis import SeekerAnalysis


class JobSeekerRegisterRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    resume: str = Field(..., min_length=1)
    answers: List[str] = Field(default_factory=list)
    password: Optional[str] = Field(None, min_length=6, max_length=128)


class JobSeekerRegisterResponse(CamelModel):
    success: bool = True
    user_id: UUID
    analysis: SeekerAnalysis


class JobSeekerResponse(CamelModel):
    id: UUID
    name: str
    email: str
    resume: str
    resume_filename: Optional[str] = None
    behavioral_answers: List[str] = []
    profile_analysis: Dict[str, Any] = {}
    created_at: datetime
