from typing import Literal
from uuid import UUID
from pydantic import Field

from swiftjobs.schemas.base import CamelModel

Role = Literal["job_seeker", "employer"]


class LoginRequest(CamelModel):
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)
    role: Role


class LoginResponse(CamelModel):
    success: bool = True
    user_id: UUID
    role: Role
