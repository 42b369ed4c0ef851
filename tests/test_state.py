from assessment.features.assessment import state as st
from assessment.features.candidates.schemas import CandidateSchema
from assessment.features.challenges.schemas import ChallengeSchema

from tests.fakesupabase import sample_challenges


def _catalog():
    return [ChallengeSchema.model_validate(row) for row in sample_challenges()]


def _ada():
    return CandidateSchema(id="cand-1", email="ada@example.com", name="Ada Lovelace")


def _registered():
    s = st.with_catalog(st.AssessmentState(), _catalog())
    return st.with_candidate(s, _ada())


def test_catalog_is_ordered_by_challenge_number():
    s = st.with_catalog(st.AssessmentState(), _catalog())
    numbers = [c.challenge_number for c in s.challenges]
    assert numbers == sorted(numbers)
    assert s.loading is False


def test_initial_state_is_loading():
    assert st.AssessmentState().loading is True


def test_register_requires_name_and_email():
    s = st.AssessmentState()
    assert not st.can_register(s)
    assert not st.can_register(st.edit_registration(s, name="Ada"))
    assert not st.can_register(st.edit_registration(s, email="ada@example.com"))
    assert not st.can_register(st.edit_registration(s, name="   ", email="ada@example.com"))
    ready = st.edit_registration(s, name="Ada", email="ada@example.com")
    assert st.can_register(ready)
    assert not st.can_register(st.begin_registration(ready))


def test_submitted_challenge_cannot_be_selected():
    s = st.with_submissions(_registered(), {"ch-1": True})
    assert st.select_challenge(s, "ch-1").selected_challenge is None
    assert st.select_challenge(s, "ch-2").selected_challenge.id == "ch-2"


def test_selection_requires_candidate_and_known_id():
    s = st.with_catalog(st.AssessmentState(), _catalog())
    assert st.select_challenge(s, "ch-1").selected_challenge is None
    assert st.select_challenge(_registered(), "nope").selected_challenge is None


def test_close_discards_draft():
    s = st.select_challenge(_registered(), "ch-2")
    s = st.edit_code_snippet(st.edit_answer(s, "draft"), "select 1;")
    closed = st.close_challenge(s)
    assert closed.selected_challenge is None
    assert closed.answer == ""
    assert closed.code_snippet == ""


def test_can_submit_needs_answer_and_selection():
    s = st.select_challenge(_registered(), "ch-1")
    assert not st.can_submit(s)
    assert not st.can_submit(st.edit_answer(s, "   "))
    ready = st.edit_answer(s, "uses auth.uid() in policy")
    assert st.can_submit(ready)
    assert not st.can_submit(st.begin_submission(ready))
    assert not st.can_submit(st.edit_answer(_registered(), "no selection"))


def test_mark_submitted_updates_map_and_closes_modal():
    s = st.edit_answer(st.select_challenge(_registered(), "ch-1"), "answer")
    done = st.mark_submitted(s, "ch-1")
    assert st.is_submitted(done, "ch-1")
    assert done.selected_challenge is None
    assert done.answer == ""
    assert st.completed_count(done) == 1


def test_completion_map_stays_within_catalog():
    s = st.with_submissions(_registered(), {"ch-1": True, "ghost": True})
    assert set(s.submissions) == {"ch-1"}
    assert st.completed_count(s) <= len(s.challenges)
    assert st.mark_submitted(s, "ghost").submissions == {"ch-1": True}


def test_submissions_arriving_before_catalog_are_trimmed_later():
    early = st.with_submissions(st.AssessmentState(), {"ch-2": True, "ghost": True})
    assert set(early.submissions) == {"ch-2", "ghost"}
    loaded = st.with_catalog(early, _catalog())
    assert loaded.submissions == {"ch-2": True}
    assert st.completed_count(loaded) == 1


def test_catalog_failure_clears_loading():
    s = st.with_catalog_failure(st.AssessmentState())
    assert s.loading is False
    assert s.catalog_failed is True
    assert s.challenges == ()
