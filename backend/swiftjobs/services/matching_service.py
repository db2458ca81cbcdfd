import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Sequence, TypeVar
from uuid import UUID, uuid4
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from swiftjobs.core.config import settings
from swiftjobs.db.models.job import Job
from swiftjobs.db.models.job_seeker import JobSeeker
from swiftjobs.db.models.match import Match
from swiftjobs.schemas.analysis import MatchScore
from swiftjobs.schemas.match import SeekerMatch, CandidateMatch
from swiftjobs.services.analysis import ProfileAnalyzer
from swiftjobs.services.employer_service import get_job
from swiftjobs.services.job_seeker_service import get_job_seeker

logger = logging.getLogger(__name__)

T = TypeVar("T")

DIALECT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


def upsert_match(
    db: Session,
    job_seeker_id: UUID,
    job_id: UUID,
    score: int,
    breakdown: str
) -> UUID:
    """
    Insert or refresh the match row for a (seeker, job) pair.

    Conflicts on the pair update score and breakdown in place, so a pair
    keeps one row and one id across rescoring. Does not commit.
    """
    dialect = db.get_bind().dialect.name
    insert = DIALECT_INSERTS.get(dialect)
    if insert is None:
        raise RuntimeError(f"Match upsert not supported for dialect: {dialect}")

    stmt = insert(Match).values(
        id=uuid4(),
        job_seeker_id=job_seeker_id,
        job_id=job_id,
        score=score,
        breakdown=breakdown
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=[Match.job_seeker_id, Match.job_id],
        set_={
            "score": stmt.excluded.score,
            "breakdown": stmt.excluded.breakdown,
            "updated_at": func.now()
        }
    ).returning(Match.id)

    return db.execute(stmt).scalar_one()


async def _score_all(
    items: Sequence[T],
    scorer: Callable[[T], Awaitable[MatchScore]],
    max_concurrency: int
) -> List[MatchScore]:
    """
    Run one LLM scoring call per item in parallel, results in input order.

    The first failure cancels every call still queued or in flight and is
    re-raised.
    """
    semaphore = asyncio.Semaphore(max(1, max_concurrency))

    async def bounded(item: T) -> MatchScore:
        async with semaphore:
            return await scorer(item)

    tasks = [asyncio.ensure_future(bounded(item)) for item in items]
    if not tasks:
        return []

    try:
        await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    finally:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.wait(pending)

    for task in tasks:
        if not task.cancelled() and task.exception() is not None:
            raise task.exception()

    return [task.result() for task in tasks]


def _rank(results: List[T]) -> List[T]:
    # sorted() is stable: equal scores keep database order
    return sorted(results, key=lambda r: r.score, reverse=True)


async def find_matches_for_seeker(
    db: Session,
    analyzer: ProfileAnalyzer,
    job_seeker_id: UUID,
    threshold: Optional[int] = None,
    max_concurrency: Optional[int] = None
) -> List[SeekerMatch]:
    """
    Score every active job for a seeker and return the strong matches.

    Every scored pair is persisted; only pairs scoring at or above the
    threshold are returned, best first.

    Raises:
        NotFoundError: If the seeker does not exist
        LLMError: If any completion API call fails
    """
    threshold = settings.MATCH_SCORE_THRESHOLD if threshold is None else threshold
    max_concurrency = max_concurrency or settings.MAX_CONCURRENT_LLM_CALLS

    seeker = get_job_seeker(db, job_seeker_id)
    jobs = (
        db.query(Job)
        .filter(Job.is_active == True)
        .order_by(Job.created_at.asc())
        .all()
    )

    profile_analysis = dict(seeker.profile_analysis or {})
    targets = [
        (job.id, job.company, job.job_title, dict(job.job_analysis or {}))
        for job in jobs
    ]

    logger.info(
        "Scoring jobs for job seeker",
        extra={"job_seeker_id": str(job_seeker_id), "job_count": len(targets)}
    )

    scores = await _score_all(
        targets,
        lambda t: analyzer.score_job_for_seeker(profile_analysis, t[1], t[2], t[3]),
        max_concurrency
    )

    results = []
    for (job_id, company, job_title, _), match_score in zip(targets, scores):
        match_id = upsert_match(db, seeker.id, job_id, match_score.score, match_score.breakdown)
        results.append(SeekerMatch(
            match_id=match_id,
            job_id=job_id,
            job_title=job_title,
            company=company,
            score=match_score.score,
            breakdown=match_score.breakdown
        ))
    db.commit()

    matches = _rank([r for r in results if r.score >= threshold])

    logger.info(
        "Matches computed for job seeker",
        extra={
            "job_seeker_id": str(job_seeker_id),
            "scored": len(results),
            "returned": len(matches),
            "threshold": threshold
        }
    )

    return matches


async def find_candidates_for_job(
    db: Session,
    analyzer: ProfileAnalyzer,
    job_id: UUID,
    max_concurrency: Optional[int] = None
) -> List[CandidateMatch]:
    """
    Score every registered job seeker for a job, best first.

    Unlike seeker-side matching there is no score threshold.

    Raises:
        NotFoundError: If the job does not exist
        LLMError: If any completion API call fails
    """
    max_concurrency = max_concurrency or settings.MAX_CONCURRENT_LLM_CALLS

    job = get_job(db, job_id)
    seekers = db.query(JobSeeker).order_by(JobSeeker.created_at.asc()).all()

    company = job.company
    job_title = job.job_title
    job_analysis = dict(job.job_analysis or {})
    targets = [
        (seeker.id, seeker.name, seeker.email, dict(seeker.profile_analysis or {}))
        for seeker in seekers
    ]

    logger.info(
        "Scoring candidates for job",
        extra={"job_id": str(job_id), "candidate_count": len(targets)}
    )

    scores = await _score_all(
        targets,
        lambda t: analyzer.score_candidate_for_job(company, job_title, job_analysis, t[1], t[3]),
        max_concurrency
    )

    results = []
    for (seeker_id, name, email, _), match_score in zip(targets, scores):
        match_id = upsert_match(db, seeker_id, job.id, match_score.score, match_score.breakdown)
        results.append(CandidateMatch(
            match_id=match_id,
            candidate_id=seeker_id,
            candidate_name=name,
            candidate_email=email,
            score=match_score.score,
            breakdown=match_score.breakdown
        ))
    db.commit()

    return _rank(results)
