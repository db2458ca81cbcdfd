from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import Field

from swiftjobs.schemas.base import CamelModel


class EmployerRegisterRequest(CamelModel):
    company_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=6, max_length=128)
    description: Optional[str] = Field(None, max_length=10000)
    website: Optional[str] = Field(None, max_length=2048)
    industry: Optional[str] = Field(None, max_length=255)
    company_size: Optional[str] = Field(None, max_length=50)


class EmployerRegisterResponse(CamelModel):
    success: bool = True
    employer_id: UUID


class EmployerResponse(CamelModel):
    id: UUID
    company_name: str
    email: str
    description: Optional[str] = None
    website: Optional[str] = None
    industry: Optional[str] = None
    company_size: Optional[str] = None
    created_at: datetime
