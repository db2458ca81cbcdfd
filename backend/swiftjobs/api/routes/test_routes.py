import json
from io import BytesIO
from uuid import uuid4

import pytest
from docx import Document

from swiftjobs.core.config import settings
from swiftjobs.db.models import JobSeeker
from swiftjobs.services.analysis import LLMError

DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def scripted_llm(prompt):
    if prompt.startswith("Analyze this job seeker profile"):
        return '```json\n{"technical_skills": ["Python", "FastAPI"], "soft_skills": ["Teamwork"], ' \
               '"work_style": "Hybrid", "preferences": "Startups", "experience_level": "senior", ' \
               '"key_strengths": ["APIs"]}\n```'
    if prompt.startswith("Analyze this job posting"):
        return '{"required_skills": ["Python"], "preferred_skills": ["AWS"], "work_style": "Hybrid", ' \
               '"culture_fit": "Ownership", "experience_level": "senior", "key_requirements": ["APIs"]}'
    if prompt.startswith("Score this job match"):
        return json.dumps({"score": 88, "breakdown": "Strong Python and API overlap"})
    if prompt.startswith("Score this candidate match"):
        return "I would rate this candidate fairly well."
    raise AssertionError(f"unexpected prompt: {prompt[:40]}")


@pytest.fixture
def scripted(fake_llm):
    fake_llm.responder = scripted_llm
    return fake_llm


def _register_seeker(client, email="ada@example.com", **extra):
    body = {
        "name": "Ada Lovelace",
        "email": email,
        "resume": "Senior Python engineer building APIs",
        "answers": ["I like ownership", "I prefer hybrid work"],
    }
    body.update(extra)
    return client.post("/api/jobseeker/register", json=body)


def _post_job(client, **extra):
    body = {
        "company": "Acme",
        "email": "hr@acme.test",
        "jobTitle": "Backend Engineer",
        "description": "Build Python APIs",
        "preferences": "Hybrid, collaborative",
    }
    body.update(extra)
    return client.post("/api/job/post", json=body)


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert "timestamp" in response.json()


def test_readiness_checks_database(client):
    assert client.get("/api/health/ready").json() == {"status": "ok"}


def test_register_job_seeker_returns_camel_case_payload(client, scripted):
    response = _register_seeker(client, password="secret-pass")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["analysis"]["technical_skills"] == ["Python", "FastAPI"]

    profile = client.get(f"/api/jobseeker/{body['userId']}").json()
    assert profile["email"] == "ada@example.com"
    assert profile["behavioralAnswers"] == ["I like ownership", "I prefer hybrid work"]
    assert profile["profileAnalysis"]["experience_level"] == "senior"
    assert "passwordHash" not in profile and "password_hash" not in profile


def test_register_job_seeker_duplicate_email_is_conflict(client, scripted):
    _register_seeker(client)

    response = _register_seeker(client, email="ADA@example.com")

    assert response.status_code == 409
    assert response.json()["success"] is False
    assert response.json()["error"]["code"] == 409


def test_register_job_seeker_validation_error_envelope(client, scripted):
    response = client.post("/api/jobseeker/register", json={"name": "No resume"})

    assert response.status_code == 422
    body = response.json()
    assert body["success"] is False
    assert body["error"]["message"] == "Request validation failed"
    assert body["error"]["details"]


def test_llm_outage_is_bad_gateway(client, fake_llm):
    def failing(prompt):
        raise LLMError("AI analysis failed")

    fake_llm.responder = failing

    response = _register_seeker(client)

    assert response.status_code == 502
    assert response.json()["error"]["message"] == "AI analysis failed"


def test_post_job_and_fetch_it(client, scripted):
    response = _post_job(client)

    assert response.status_code == 200
    body = response.json()
    assert body["analysis"]["preferred_skills"] == ["AWS"]

    job = client.get(f"/api/job/{body['jobId']}").json()
    assert job["jobTitle"] == "Backend Engineer"
    assert job["isActive"] is True

    listing = client.get("/api/jobs").json()
    assert [j["id"] for j in listing["jobs"]] == [body["jobId"]]


def test_employer_registration_login_and_job_listing(client, scripted):
    response = client.post("/api/employer/register", json={
        "companyName": "Acme",
        "email": "hr@acme.test",
        "password": "hunter22",
        "industry": "Software",
    })
    assert response.status_code == 200
    employer_id = response.json()["employerId"]

    job_id = _post_job(client).json()["jobId"]

    jobs = client.get(f"/api/employer/{employer_id}/jobs").json()["jobs"]
    assert [j["id"] for j in jobs] == [job_id]
    assert jobs[0]["employerId"] == employer_id

    login = client.post("/api/auth/login", json={
        "email": "hr@acme.test", "password": "hunter22", "role": "employer",
    })
    assert login.status_code == 200
    assert login.json() == {"success": True, "userId": employer_id, "role": "employer"}

    bad = client.post("/api/auth/login", json={
        "email": "hr@acme.test", "password": "nope", "role": "employer",
    })
    assert bad.status_code == 401


def test_matches_candidates_and_messages_flow(client, scripted):
    user_id = _register_seeker(client).json()["userId"]
    job_id = _post_job(client).json()["jobId"]

    matches = client.get(f"/api/matches/{user_id}").json()["matches"]
    assert len(matches) == 1
    assert matches[0]["jobId"] == job_id
    assert matches[0]["company"] == "Acme"
    assert matches[0]["score"] == 88
    assert matches[0]["breakdown"] == "Strong Python and API overlap"

    candidates = client.get(f"/api/candidates/{job_id}").json()["candidates"]
    assert len(candidates) == 1
    assert candidates[0]["candidateId"] == user_id
    assert candidates[0]["candidateName"] == "Ada Lovelace"
    assert candidates[0]["score"] == 70
    assert candidates[0]["breakdown"] == "Potential candidate based on requirements"
    assert candidates[0]["matchId"] == matches[0]["matchId"]

    # Seeker-side matching rescores the pair, replacing the stored 70
    assert client.get(f"/api/matches/{user_id}").json()["matches"][0]["score"] == 88

    match_id = matches[0]["matchId"]
    sent = client.post("/api/message/send", json={
        "matchId": match_id, "message": "Hi Ada, are you free Tuesday?", "sender": "employer",
    })
    assert sent.status_code == 200
    assert sent.json()["success"] is True

    conversation = client.get(f"/api/message/{match_id}").json()["messages"]
    assert [m["id"] for m in conversation] == [sent.json()["messageId"]]
    assert conversation[0]["sender"] == "employer"


def test_unknown_ids_are_not_found(client, scripted):
    missing = uuid4()

    for path in (
        f"/api/jobseeker/{missing}",
        f"/api/employer/{missing}",
        f"/api/job/{missing}",
        f"/api/matches/{missing}",
        f"/api/candidates/{missing}",
        f"/api/message/{missing}",
    ):
        response = client.get(path)
        assert response.status_code == 404, path
        assert response.json()["success"] is False

    sent = client.post("/api/message/send", json={
        "matchId": str(missing), "message": "hello", "sender": "employer",
    })
    assert sent.status_code == 404


def test_malformed_ids_are_validation_errors(client):
    assert client.get("/api/matches/not-a-uuid").status_code == 422


def _docx_bytes(text):
    buffer = BytesIO()
    document = Document()
    document.add_paragraph(text)
    document.save(buffer)
    return buffer.getvalue()


def test_register_with_uploaded_docx_resume(client, scripted, db, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "RESUME_UPLOAD_DIR", str(tmp_path))

    response = client.post(
        "/api/jobseeker/register/upload",
        data={"name": "Grace Hopper", "email": "grace@example.com", "answers": ["Curious", "Direct"]},
        files={"file": ("grace.docx", _docx_bytes("COBOL pioneer and compiler author"), DOCX_MIME)},
    )

    assert response.status_code == 200
    seeker = db.query(JobSeeker).filter(JobSeeker.email == "grace@example.com").one()
    assert seeker.resume == "COBOL pioneer and compiler author"
    assert seeker.resume_filename == "grace.docx"
    assert seeker.behavioral_answers == ["Curious", "Direct"]
    assert len(list(tmp_path.iterdir())) == 1
    assert "Q2: Direct" in scripted.prompts[0]


def test_upload_rejects_unsupported_type(client, scripted, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "RESUME_UPLOAD_DIR", str(tmp_path))

    response = client.post(
        "/api/jobseeker/register/upload",
        data={"name": "Grace", "email": "grace@example.com"},
        files={"file": ("resume.txt", b"plain text", "text/plain")},
    )

    assert response.status_code == 400
    assert list(tmp_path.iterdir()) == []


def test_upload_removes_file_when_registration_fails(client, scripted, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "RESUME_UPLOAD_DIR", str(tmp_path))
    _register_seeker(client, email="grace@example.com")

    response = client.post(
        "/api/jobseeker/register/upload",
        data={"name": "Grace", "email": "grace@example.com"},
        files={"file": ("grace.docx", _docx_bytes("Compiler author"), DOCX_MIME)},
    )

    assert response.status_code == 409
    assert list(tmp_path.iterdir()) == []


@pytest.mark.parametrize("filename,content,mime_type", [
    ("resume.pdf", b"not really a pdf", "application/pdf"),
    ("resume.docx", b"not really a docx", DOCX_MIME),
])
def test_upload_rejects_unreadable_file(client, scripted, tmp_path, monkeypatch, filename, content, mime_type):
    monkeypatch.setattr(settings, "RESUME_UPLOAD_DIR", str(tmp_path))

    response = client.post(
        "/api/jobseeker/register/upload",
        data={"name": "Grace", "email": "grace@example.com"},
        files={"file": (filename, content, mime_type)},
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Could not read resume file"
    assert list(tmp_path.iterdir()) == []
    assert scripted.prompts == []


def test_upload_rejects_legacy_word_documents(client, scripted, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "RESUME_UPLOAD_DIR", str(tmp_path))

    response = client.post(
        "/api/jobseeker/register/upload",
        data={"name": "Grace", "email": "grace@example.com"},
        files={"file": ("resume.doc", b"\xd0\xcf\x11\xe0 legacy word", "application/msword")},
    )

    assert response.status_code == 400
    assert list(tmp_path.iterdir()) == []
