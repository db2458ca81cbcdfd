from typing import List
from pydantic import BaseModel, Field, conint


class SeekerAnalysis(BaseModel):
    technical_skills: List[str] = Field(default_factory=list)
    soft_skills: List[str] = Field(default_factory=list)
    work_style: str = "Not specified"
    preferences: str = "Not specified"
    experience_level: str = "mid"
    key_strengths: List[str] = Field(default_factory=list)


class JobAnalysis(BaseModel):
    required_skills: List[str] = Field(default_factory=list)
    preferred_skills: List[str] = Field(default_factory=list)
    work_style: str = "Not specified"
    culture_fit: str = "Not specified"
    experience_level: str = "mid"
    key_requirements: List[str] = Field(default_factory=list)


class MatchScore(BaseModel):
    score: conint(ge=0, le=100)
    breakdown: str
