import logging
from typing import Any, Dict, List, Optional, Type, TypeVar
from pydantic import BaseModel, ValidationError

from swiftjobs.schemas.analysis import SeekerAnalysis, JobAnalysis, MatchScore
from swiftjobs.services.analysis.llm_client import LLMClient
from swiftjobs.services.analysis.parsing import extract_json_object, coerce_score
from swiftjobs.services.analysis import prompts

logger = logging.getLogger(__name__)

SEEKER_FALLBACK_BREAKDOWN = "Potential match based on profile"
CANDIDATE_FALLBACK_BREAKDOWN = "Potential candidate based on requirements"

AnalysisModel = TypeVar("AnalysisModel", bound=BaseModel)


class ProfileAnalyzer:
    """
    Turns profiles and postings into LLM prompts and LLM replies into
    structured results.

    Transport failures from the client propagate as LLMError. Replies that
    cannot be parsed never fail: they fall back to fixed defaults.
    """

    def __init__(self, llm_client: LLMClient, default_score: int = 70):
        self.llm_client = llm_client
        self.default_score = default_score

    async def analyze_job_seeker(self, resume: str, answers: List[str]) -> SeekerAnalysis:
        prompt = prompts.build_seeker_analysis_prompt(resume, answers)
        reply = await self.llm_client.complete(prompt)
        return self._parse_analysis(reply, SeekerAnalysis)

    async def analyze_job(
        self,
        company: str,
        job_title: str,
        description: str,
        preferences: Optional[str]
    ) -> JobAnalysis:
        prompt = prompts.build_job_analysis_prompt(company, job_title, description, preferences)
        reply = await self.llm_client.complete(prompt)
        return self._parse_analysis(reply, JobAnalysis)

    async def score_job_for_seeker(
        self,
        profile_analysis: Dict[str, Any],
        company: str,
        job_title: str,
        job_analysis: Dict[str, Any]
    ) -> MatchScore:
        """Score how well a job suits a seeker."""
        prompt = prompts.build_job_match_prompt(profile_analysis, company, job_title, job_analysis)
        reply = await self.llm_client.complete(prompt)
        return self._parse_match(reply, SEEKER_FALLBACK_BREAKDOWN)

    async def score_candidate_for_job(
        self,
        company: str,
        job_title: str,
        job_analysis: Dict[str, Any],
        candidate_name: str,
        profile_analysis: Dict[str, Any]
    ) -> MatchScore:
        """Score how well a candidate suits a job."""
        prompt = prompts.build_candidate_match_prompt(
            company, job_title, job_analysis, candidate_name, profile_analysis
        )
        reply = await self.llm_client.complete(prompt)
        return self._parse_match(reply, CANDIDATE_FALLBACK_BREAKDOWN)

    def _parse_analysis(self, reply: str, model: Type[AnalysisModel]) -> AnalysisModel:
        parsed = extract_json_object(reply)
        if parsed is None:
            return model()

        try:
            return model.model_validate(parsed)
        except ValidationError as e:
            logger.warning(
                f"LLM analysis did not match {model.__name__}, using defaults",
                extra={"error_count": e.error_count()}
            )
            return model()

    def _parse_match(self, reply: str, fallback_breakdown: str) -> MatchScore:
        parsed = extract_json_object(reply) or {}

        breakdown = parsed.get("breakdown")
        if not isinstance(breakdown, str) or not breakdown.strip():
            breakdown = fallback_breakdown

        return MatchScore(
            score=coerce_score(parsed.get("score"), self.default_score),
            breakdown=breakdown,
        )
