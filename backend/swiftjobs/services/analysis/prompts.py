from typing import Any, Dict, List, Optional

NOT_SPECIFIED = "Not specified"

SEEKER_ANALYSIS_PROMPT = """Analyze this job seeker profile:

Resume: {resume}

Behavioral Answers:
{answers}

Provide a JSON response with:
{{
  "technical_skills": ["skill1", "skill2", ...],
  "soft_skills": ["skill1", "skill2", ...],
  "work_style": "description",
  "preferences": "description",
  "experience_level": "junior/mid/senior",
  "key_strengths": ["strength1", "strength2", ...]
}}"""

JOB_ANALYSIS_PROMPT = """Analyze this job posting:

Company: {company}
Job Title: {job_title}
Description: {description}
Preferences: {preferences}

Provide a JSON response with:
{{
  "required_skills": ["skill1", "skill2", ...],
  "preferred_skills": ["skill1", "skill2", ...],
  "work_style": "description",
  "culture_fit": "description",
  "experience_level": "junior/mid/senior",
  "key_requirements": ["req1", "req2", ...]
}}"""

JOB_MATCH_PROMPT = """Score this job match (0-100%):

Job Seeker Profile:
Technical Skills: {technical_skills}
Soft Skills: {soft_skills}
Work Style: {seeker_work_style}
Experience: {seeker_experience}

Job Requirements:
Company: {company}
Title: {job_title}
Required Skills: {required_skills}
Work Style: {job_work_style}
Experience Needed: {job_experience}

Provide a JSON response:
{{
  "score": 85,
  "breakdown": "Detailed explanation of the match, highlighting strengths and areas of alignment"
}}"""

CANDIDATE_MATCH_PROMPT = """Score this candidate match (0-100%):

Job Requirements:
Company: {company}
Title: {job_title}
Required Skills: {required_skills}
Preferred Skills: {preferred_skills}
Work Style: {job_work_style}
Experience Needed: {job_experience}

Candidate Profile:
Name: {candidate_name}
Technical Skills: {technical_skills}
Soft Skills: {soft_skills}
Work Style: {seeker_work_style}
Experience: {seeker_experience}

Provide a JSON response:
{{
  "score": 85,
  "breakdown": "e.g., '85% - Strong React skills, collaborative mindset, prefers hybrid work. Good culture fit with agile experience.'"
}}"""


def _join(values: Any) -> str:
    if isinstance(values, list):
        joined = ", ".join(str(v) for v in values if v not in (None, ""))
        return joined or NOT_SPECIFIED
    return NOT_SPECIFIED


def _text(value: Any) -> str:
    if value is None or value == "":
        return NOT_SPECIFIED
    return str(value)


def _analysis(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def build_seeker_analysis_prompt(resume: str, answers: List[str]) -> str:
    numbered = "\n".join(f"Q{idx}: {answer}" for idx, answer in enumerate(answers, start=1))
    return SEEKER_ANALYSIS_PROMPT.format(resume=resume, answers=numbered)


def build_job_analysis_prompt(
    company: str,
    job_title: str,
    description: str,
    preferences: Optional[str]
) -> str:
    return JOB_ANALYSIS_PROMPT.format(
        company=company,
        job_title=job_title,
        description=description,
        preferences=_text(preferences),
    )


def build_job_match_prompt(
    profile_analysis: Dict[str, Any],
    company: str,
    job_title: str,
    job_analysis: Dict[str, Any]
) -> str:
    """Prompt used when ranking jobs for a seeker."""
    seeker = _analysis(profile_analysis)
    job = _analysis(job_analysis)
    return JOB_MATCH_PROMPT.format(
        technical_skills=_join(seeker.get("technical_skills")),
        soft_skills=_join(seeker.get("soft_skills")),
        seeker_work_style=_text(seeker.get("work_style")),
        seeker_experience=_text(seeker.get("experience_level")),
        company=company,
        job_title=job_title,
        required_skills=_join(job.get("required_skills")),
        job_work_style=_text(job.get("work_style")),
        job_experience=_text(job.get("experience_level")),
    )


def build_candidate_match_prompt(
    company: str,
    job_title: str,
    job_analysis: Dict[str, Any],
    candidate_name: str,
    profile_analysis: Dict[str, Any]
) -> str:
    """Prompt used when ranking candidates for a job."""
    seeker = _analysis(profile_analysis)
    job = _analysis(job_analysis)
    return CANDIDATE_MATCH_PROMPT.format(
        company=company,
        job_title=job_title,
        required_skills=_join(job.get("required_skills")),
        preferred_skills=_join(job.get("preferred_skills")),
        job_work_style=_text(job.get("work_style")),
        job_experience=_text(job.get("experience_level")),
        candidate_name=candidate_name,
        technical_skills=_join(seeker.get("technical_skills")),
        soft_skills=_join(seeker.get("soft_skills")),
        seeker_work_style=_text(seeker.get("work_style")),
        seeker_experience=_text(seeker.get("experience_level")),
    )
