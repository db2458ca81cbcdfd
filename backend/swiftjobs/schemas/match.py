from typing import List
from uuid import UUID
from pydantic import conint

from swiftjobs.schemas.base import CamelModel


class SeekerMatch(CamelModel):
    match_id: UUID
    job_id: UUID
    job_title: str
    company: str
    score: conint(ge=0, le=100)
    breakdown: str


class CandidateMatch(CamelModel):
    match_id: UUID
    candidate_id: UUID
    candidate_name: str
    candidate_email: str
    score: conint(ge=0, le=100)
    breakdown: str


class MatchListResponse(CamelModel):
    matches: List[SeekerMatch]


class CandidateListResponse(CamelModel):
    candidates: List[CandidateMatch]
