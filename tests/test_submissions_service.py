import pytest

from assessment.common.errors import DataServiceError
from assessment.features.submissions.service import build_completion_map, submissions_service

pytestmark = pytest.mark.anyio("asyncio")


async def test_submit_records_row_with_null_snippet(fake_supabase):
    receipt = await submissions_service.submit("cand-1", "ch-1", "uses auth.uid() in policy", "")
    assert receipt.challenge_id == "ch-1"
    assert receipt.duplicate is False
    row = fake_supabase.tables["submissions"][0]
    assert row["answer"] == "uses auth.uid() in policy"
    assert row["code_snippet"] is None


async def test_duplicate_submission_is_reported_not_raised(fake_supabase):
    await submissions_service.submit("cand-1", "ch-1", "first")
    receipt = await submissions_service.submit("cand-1", "ch-1", "second")
    assert receipt.duplicate is True
    assert len(fake_supabase.tables["submissions"]) == 1


async def test_blank_answer_makes_no_call(fake_supabase):
    with pytest.raises(ValueError, match="answer_required"):
        await submissions_service.submit("cand-1", "ch-1", "  ")
    assert fake_supabase.count("submissions", "insert") == 0


async def test_service_failure_raises(fake_supabase):
    fake_supabase.fail("submissions", "insert")
    with pytest.raises(DataServiceError):
        await submissions_service.submit("cand-1", "ch-1", "answer")


async def test_completion_map_only_for_candidate(fake_supabase):
    await submissions_service.submit("cand-1", "ch-1", "a")
    await submissions_service.submit("cand-1", "ch-2", "b")
    await submissions_service.submit("cand-2", "ch-3", "c")
    assert await submissions_service.load_completion_map("cand-1") == {"ch-1": True, "ch-2": True}


def test_build_completion_map_dedupes():
    assert build_completion_map(["a", "a", "b"]) == {"a": True, "b": True}
