"""Assessment page state and its pure update functions.

Every user action maps to a function ``(state, ...) -> state``; the page
controller owns the single current value and swaps it after each step.
Nothing here performs I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Mapping, Optional, Tuple

from assessment.features.candidates.schemas import CandidateSchema
from assessment.features.challenges.schemas import ChallengeSchema


@dataclass(frozen=True)
class AssessmentState:
    challenges: Tuple[ChallengeSchema, ...] = ()
    candidate: Optional[CandidateSchema] = None
    name: str = ""
    email: str = ""
    loading: bool = True
    registering: bool = False
    selected_challenge: Optional[ChallengeSchema] = None
    answer: str = ""
    code_snippet: str = ""
    submitting: bool = False
    submissions: Mapping[str, bool] = field(default_factory=dict)
    catalog_failed: bool = False
    error: Optional[str] = None


def _catalog_ids(state: AssessmentState) -> set[str]:
    return {c.id for c in state.challenges}


def _restrict(submissions: Mapping[str, bool], ids: set[str]) -> Dict[str, bool]:
    return {cid: True for cid, done in submissions.items() if done and cid in ids}


# ---- bootstrap ---------------------------------------------------------------

def with_catalog(state: AssessmentState, challenges: Iterable[ChallengeSchema]) -> AssessmentState:
    ordered = tuple(sorted(challenges, key=lambda c: c.challenge_number))
    ids = {c.id for c in ordered}
    return replace(
        state,
        challenges=ordered,
        loading=False,
        catalog_failed=False,
        submissions=_restrict(state.submissions, ids),
    )


def with_catalog_failure(state: AssessmentState) -> AssessmentState:
    return replace(state, challenges=(), loading=False, catalog_failed=True, submissions={})


def with_candidate(state: AssessmentState, candidate: CandidateSchema) -> AssessmentState:
    return replace(state, candidate=candidate, error=None)


def with_submissions(state: AssessmentState, submissions: Mapping[str, bool]) -> AssessmentState:
    # Until the catalog arrives the map is kept whole; with_catalog trims it.
    if state.loading:
        merged = {cid: True for cid, done in submissions.items() if done}
    else:
        merged = _restrict(submissions, _catalog_ids(state))
    return replace(state, submissions=merged)


# ---- registration ------------------------------------------------------------

def edit_registration(
    state: AssessmentState, *, name: Optional[str] = None, email: Optional[str] = None
) -> AssessmentState:
    return replace(
        state,
        name=state.name if name is None else name,
        email=state.email if email is None else email,
    )


def begin_registration(state: AssessmentState) -> AssessmentState:
    return replace(state, registering=True, error=None)


def end_registration(state: AssessmentState) -> AssessmentState:
    return replace(state, registering=False)


def can_register(state: AssessmentState) -> bool:
    return bool(state.name.strip()) and bool(state.email.strip()) and not state.registering


# ---- challenge modal ---------------------------------------------------------

def is_submitted(state: AssessmentState, challenge_id: str) -> bool:
    return bool(state.submissions.get(str(challenge_id)))


def select_challenge(state: AssessmentState, challenge_id: str) -> AssessmentState:
    if state.candidate is None or is_submitted(state, challenge_id):
        return state
    for challenge in state.challenges:
        if challenge.id == str(challenge_id):
            return replace(state, selected_challenge=challenge, error=None)
    return state


def close_challenge(state: AssessmentState) -> AssessmentState:
    return replace(state, selected_challenge=None, answer="", code_snippet="", error=None)


def edit_answer(state: AssessmentState, answer: str) -> AssessmentState:
    return replace(state, answer=answer)


def edit_code_snippet(state: AssessmentState, code_snippet: str) -> AssessmentState:
    return replace(state, code_snippet=code_snippet)


# ---- submission --------------------------------------------------------------

def can_submit(state: AssessmentState) -> bool:
    return (
        state.candidate is not None
        and state.selected_challenge is not None
        and bool(state.answer.strip())
        and not state.submitting
    )


def begin_submission(state: AssessmentState) -> AssessmentState:
    return replace(state, submitting=True, error=None)


def end_submission(state: AssessmentState) -> AssessmentState:
    return replace(state, submitting=False)


def mark_submitted(state: AssessmentState, challenge_id: str) -> AssessmentState:
    """Optimistically record a submission locally and close the modal."""
    cid = str(challenge_id)
    submissions = dict(state.submissions)
    if cid in _catalog_ids(state):
        submissions[cid] = True
    return replace(
        close_challenge(state),
        submissions=submissions,
    )


def with_error(state: AssessmentState, message: str) -> AssessmentState:
    return replace(state, error=message)


def completed_count(state: AssessmentState) -> int:
    return sum(1 for c in state.challenges if state.submissions.get(c.id))


__all__ = [
    "AssessmentState",
    "begin_registration",
    "begin_submission",
    "can_register",
    "can_submit",
    "close_challenge",
    "completed_count",
    "edit_answer",
    "edit_code_snippet",
    "edit_registration",
    "end_registration",
    "end_submission",
    "is_submitted",
    "mark_submitted",
    "select_challenge",
    "with_candidate",
    "with_catalog",
    "with_catalog_failure",
    "with_error",
    "with_submissions",
]
