import asyncio

import pytest

from swiftjobs.schemas.analysis import SeekerAnalysis, JobAnalysis
from swiftjobs.services.analysis import LLMError


def test_analyze_job_seeker_parses_reply_and_numbers_answers(analyzer, fake_llm):
    fake_llm.replies = ['''Sure!
```json
{
  "technical_skills": ["Python", "PostgreSQL"],
  "soft_skills": ["Mentoring"],
  "work_style": "Async, remote-first",
  "preferences": "Small teams",
  "experience_level": "senior",
  "key_strengths": ["System design"]
}
```''']

    result = asyncio.run(analyzer.analyze_job_seeker(
        "Ten years of backend work.",
        ["I like ownership", "I prefer written communication"]
    ))

    assert result.technical_skills == ["Python", "PostgreSQL"]
    assert result.experience_level == "senior"

    prompt = fake_llm.prompts[0]
    assert "Resume: Ten years of backend work." in prompt
    assert "Q1: I like ownership\nQ2: I prefer written communication" in prompt


def test_analyze_job_seeker_defaults_when_reply_has_no_json(analyzer, fake_llm):
    fake_llm.replies = ["Sorry, I can't help with that."]

    result = asyncio.run(analyzer.analyze_job_seeker("resume", []))

    assert result == SeekerAnalysis()
    assert result.work_style == "Not specified"
    assert result.experience_level == "mid"


def test_analyze_job_fills_missing_keys_with_defaults(analyzer, fake_llm):
    fake_llm.replies = ['{"required_skills": ["Go"], "experience_level": "junior"}']

    result = asyncio.run(analyzer.analyze_job("Acme", "Engineer", "Build things", None))

    assert result.required_skills == ["Go"]
    assert result.experience_level == "junior"
    assert result.preferred_skills == []
    assert result.culture_fit == "Not specified"
    assert "Preferences: Not specified" in fake_llm.prompts[0]


def test_analyze_job_defaults_when_payload_has_wrong_shape(analyzer, fake_llm):
    fake_llm.replies = ['{"required_skills": "Go, Rust", "work_style": ["remote"]}']

    result = asyncio.run(analyzer.analyze_job("Acme", "Engineer", "Build things", "Remote"))

    assert result == JobAnalysis()


def test_score_job_for_seeker_reads_score_and_breakdown(analyzer, fake_llm):
    fake_llm.replies = ['{"score": "88%", "breakdown": "Great Python overlap"}']

    result = asyncio.run(analyzer.score_job_for_seeker(
        {"technical_skills": ["Python"], "soft_skills": [], "work_style": None},
        "Acme",
        "Backend Engineer",
        {"required_skills": ["Python", "AWS"], "experience_level": "senior"}
    ))

    assert result.score == 88
    assert result.breakdown == "Great Python overlap"

    prompt = fake_llm.prompts[0]
    assert "Technical Skills: Python" in prompt
    assert "Soft Skills: Not specified" in prompt
    assert "Work Style: Not specified" in prompt
    assert "Required Skills: Python, AWS" in prompt
    assert "Experience Needed: senior" in prompt


def test_score_job_for_seeker_falls_back_on_unparseable_reply(analyzer, fake_llm):
    fake_llm.replies = ["This looks like a decent fit."]

    result = asyncio.run(analyzer.score_job_for_seeker({}, "Acme", "Engineer", {}))

    assert result.score == 70
    assert result.breakdown == "Potential match based on profile"


def test_score_candidate_for_job_falls_back_per_field(analyzer, fake_llm):
    fake_llm.replies = ['{"score": 64}']

    result = asyncio.run(analyzer.score_candidate_for_job(
        "Acme", "Engineer", {"preferred_skills": ["Kafka"]}, "Ada", {}
    ))

    assert result.score == 64
    assert result.breakdown == "Potential candidate based on requirements"
    assert "Name: Ada" in fake_llm.prompts[0]
    assert "Preferred Skills: Kafka" in fake_llm.prompts[0]


def test_transport_errors_propagate(analyzer, fake_llm):
    def failing(prompt):
        raise LLMError("AI analysis failed")

    fake_llm.responder = failing

    with pytest.raises(LLMError):
        asyncio.run(analyzer.analyze_job_seeker("resume", []))


def test_score_job_for_seeker_clamps_huge_integer_score(analyzer, fake_llm):
    fake_llm.replies = ['{"score": ' + "9" * 400 + ', "breakdown": "Off the charts"}']

    result = asyncio.run(analyzer.score_job_for_seeker({}, "Acme", "Engineer", {}))

    assert result.score == 100
    assert result.breakdown == "Off the charts"
