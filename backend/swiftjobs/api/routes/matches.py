import logging
from uuid import UUID
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from swiftjobs.api.dependencies.database import get_db
from swiftjobs.api.dependencies.llm import get_analyzer
from swiftjobs.schemas.match import MatchListResponse, CandidateListResponse
from swiftjobs.services.analysis import LLMError, ProfileAnalyzer
from swiftjobs.services.exceptions import NotFoundError
from swiftjobs.services.matching_service import find_matches_for_seeker, find_candidates_for_job

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/matches/{user_id}", response_model=MatchListResponse)
async def get_matches(
    user_id: UUID,
    db: Session = Depends(get_db),
    analyzer: ProfileAnalyzer = Depends(get_analyzer)
):
    """
    Rank open jobs for a job seeker.

    Every job is scored by the LLM in parallel and persisted as a match.
    Only matches at or above the configured threshold are returned, best first.
    """
    try:
        matches = await find_matches_for_seeker(db, analyzer, user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LLMError as e:
        db.rollback()
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error(f"Error fetching matches: {str(e)}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail="Failed to fetch matches")

    return MatchListResponse(matches=matches)


@router.get("/candidates/{job_id}", response_model=CandidateListResponse)
async def get_candidates(
    job_id: UUID,
    db: Session = Depends(get_db),
    analyzer: ProfileAnalyzer = Depends(get_analyzer)
):
    """
    Rank every registered job seeker for a job, best first.
    """
    try:
        candidates = await find_candidates_for_job(db, analyzer, job_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except LLMError as e:
        db.rollback()
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error(f"Error fetching candidates: {str(e)}", exc_info=True)
        db.rollback()
        raise HTTPException(status_code=500, detail="Failed to fetch candidates")

    return CandidateListResponse(candidates=candidates)
