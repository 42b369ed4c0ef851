import pytest
from postgrest.exceptions import APIError

from assessment.common.errors import DataServiceError, is_unique_violation
from assessment.features.candidates.service import candidate_service

pytestmark = pytest.mark.anyio("asyncio")


async def test_register_creates_candidate(fake_supabase):
    outcome = await candidate_service.register("ada@example.com", "Ada Lovelace")
    assert outcome.existing is False
    assert outcome.candidate.email == "ada@example.com"
    assert len(fake_supabase.tables["candidates"]) == 1


async def test_register_twice_returns_same_candidate(fake_supabase):
    first = await candidate_service.register("ada@example.com", "Ada Lovelace")
    second = await candidate_service.register("ada@example.com", "Ada L.")
    assert second.existing is True
    assert second.candidate.id == first.candidate.id
    assert len(fake_supabase.tables["candidates"]) == 1


async def test_register_other_failure_raises(fake_supabase):
    fake_supabase.fail("candidates", "insert")
    with pytest.raises(DataServiceError):
        await candidate_service.register("ada@example.com", "Ada Lovelace")
    assert fake_supabase.count("candidates", "select") == 0


async def test_find_by_email_exact_match(fake_supabase):
    await candidate_service.register("ada@example.com", "Ada Lovelace")
    assert (await candidate_service.find_by_email("ada@example.com")).name == "Ada Lovelace"
    assert await candidate_service.find_by_email("ADA@example.com") is None


def test_unique_violation_detection():
    assert is_unique_violation(APIError({"message": "boom", "code": "23505"}))
    assert is_unique_violation(Exception('duplicate key value violates unique constraint "candidates_email_key"'))
    assert not is_unique_violation(APIError({"message": "permission denied", "code": "42501"}))
    assert not is_unique_violation(RuntimeError("timeout"))
