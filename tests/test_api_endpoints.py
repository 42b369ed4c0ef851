import pytest
from fastapi.testclient import TestClient

from assessment.main import app


@pytest.fixture
def client(fake_supabase):
    with TestClient(app) as c:
        yield c


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["version"] == "1.0.0"
    assert body["app"] == "IGTA-Tech Skills Assessment"


def test_list_challenges_is_ordered(client):
    resp = client.get("/api/challenges")
    assert resp.status_code == 200
    assert [c["challenge_number"] for c in resp.json()] == [1, 2, 3]


def test_list_challenges_failure_is_502(client, fake_supabase):
    fake_supabase.fail("challenges", "select")
    resp = client.get("/api/challenges")
    assert resp.status_code == 502


def test_register_candidate_is_idempotent_by_email(client, fake_supabase):
    first = client.post("/api/candidates", json={"email": "ada@example.com", "name": "Ada"})
    second = client.post("/api/candidates", json={"email": "ada@example.com", "name": "Ada L."})
    assert first.status_code == 200
    assert second.status_code == 200
    assert first.json()["id"] == second.json()["id"]
    assert len(fake_supabase.tables["candidates"]) == 1


def test_register_candidate_rejects_blank_fields(client, fake_supabase):
    resp = client.post("/api/candidates", json={"email": "  ", "name": "Ada"})
    assert resp.status_code == 422
    assert fake_supabase.count("candidates", "insert") == 0


def test_register_candidate_failure_is_502(client, fake_supabase):
    fake_supabase.fail("candidates", "insert")
    resp = client.post("/api/candidates", json={"email": "ada@example.com", "name": "Ada"})
    assert resp.status_code == 502


def test_lookup_candidate(client, fake_supabase):
    fake_supabase.tables["candidates"].append({"id": "cand-1", "email": "ada@example.com", "name": "Ada"})
    found = client.get("/api/candidates/lookup", params={"email": "ada@example.com"})
    missing = client.get("/api/candidates/lookup", params={"email": "nobody@example.com"})
    assert found.status_code == 200
    assert found.json() == {"id": "cand-1", "email": "ada@example.com", "name": "Ada"}
    assert missing.status_code == 404


def test_create_submission_and_list(client, fake_supabase):
    resp = client.post(
        "/api/submissions",
        json={"candidate_id": "cand-1", "challenge_id": "ch-1", "answer": "uses auth.uid()", "code_snippet": ""},
    )
    assert resp.status_code == 201
    assert resp.json() == {"challenge_id": "ch-1", "submitted": True, "duplicate": False}
    assert fake_supabase.tables["submissions"][0]["code_snippet"] is None

    listed = client.get("/api/candidates/cand-1/submissions")
    assert listed.status_code == 200
    assert listed.json() == {"submissions": {"ch-1": True}, "completed": 1}


def test_duplicate_submission_reports_already_submitted(client, fake_supabase):
    payload = {"candidate_id": "cand-1", "challenge_id": "ch-2", "answer": "first"}
    client.post("/api/submissions", json=payload)
    resp = client.post("/api/submissions", json={**payload, "answer": "second"})
    assert resp.status_code == 201
    assert resp.json()["duplicate"] is True
    assert len(fake_supabase.tables["submissions"]) == 1


def test_blank_answer_is_422_without_call(client, fake_supabase):
    resp = client.post("/api/submissions", json={"candidate_id": "cand-1", "challenge_id": "ch-1", "answer": "   "})
    assert resp.status_code == 422
    assert fake_supabase.count("submissions", "insert") == 0


def test_submission_failure_is_502(client, fake_supabase):
    fake_supabase.fail("submissions", "insert")
    resp = client.post("/api/submissions", json={"candidate_id": "cand-1", "challenge_id": "ch-1", "answer": "x"})
    assert resp.status_code == 502


def test_list_submissions_failure_is_502(client, fake_supabase):
    fake_supabase.fail("submissions", "select")
    resp = client.get("/api/candidates/cand-1/submissions")
    assert resp.status_code == 502


def test_list_submissions_ignores_ids_outside_catalog(client, fake_supabase):
    fake_supabase.tables["submissions"].extend(
        [
            {"id": "s1", "candidate_id": "cand-1", "challenge_id": "ghost", "answer": "x"},
            {"id": "s2", "candidate_id": "cand-1", "challenge_id": "ch-3", "answer": "y"},
        ]
    )
    resp = client.get("/api/candidates/cand-1/submissions")
    assert resp.status_code == 200
    assert resp.json() == {"submissions": {"ch-3": True}, "completed": 1}
