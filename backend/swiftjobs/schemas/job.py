from datetime import datetime
from typing import Optional, List, Dict, Any
from uuid import UUID
from pydantic import Field

from swiftjobs.schemas.base import CamelModel
from swiftjobs.schemas.analysis import JobAnalysis


class JobPostRequest(CamelModel):
    company: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    job_title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    preferences: Optional[str] = Field(None, max_length=10000)
    employer_id: Optional[UUID] = None


class JobPostResponse(CamelModel):
    success: bool = True
    job_id: UUID
    analysis: JobAnalysis


class JobResponse(CamelModel):
    id: UUID
    employer_id: Optional[UUID] = None
    company: str
    email: str
    job_title: str
    description: str
    preferences: Optional[str] = None
    job_analysis: Dict[str, Any] = {}
    is_active: bool
    created_at: datetime


class JobListResponse(CamelModel):
    jobs: List[JobResponse]
