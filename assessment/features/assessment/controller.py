"""Page controller: owns the assessment state and drives the data service calls."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from assessment.common.errors import DataServiceError
from assessment.core.config import get_settings
from assessment.features.candidates.service import CandidateService, candidate_service
from assessment.features.challenges.service import ChallengeCatalogService, challenge_catalog_service
from assessment.features.submissions.service import SubmissionsService, submissions_service

from . import state as st
from .session_store import SessionStore

logger = logging.getLogger("assessment.controller")

REGISTRATION_FAILED = "Registration failed. Please try again."
SUBMISSION_FAILED = "Your answer could not be submitted. Please try again."


class AssessmentPage:
    """One page instance per request.

    State transitions go through the pure functions in ``state``; this class
    only sequences the network calls around them. There is no cancellation:
    a call that resolves after the user moved on still applies its update.
    """

    def __init__(
        self,
        session: SessionStore,
        *,
        catalog: ChallengeCatalogService = challenge_catalog_service,
        candidates: CandidateService = candidate_service,
        submissions: SubmissionsService = submissions_service,
        session_key: Optional[str] = None,
    ) -> None:
        self.session = session
        self.catalog = catalog
        self.candidates = candidates
        self.submissions = submissions
        self.session_key = session_key or get_settings().session_cookie_name
        self.state = st.AssessmentState()

    # ---- bootstrap -----------------------------------------------------------

    async def bootstrap(self) -> st.AssessmentState:
        """Load the catalog and recall the session concurrently."""
        await asyncio.gather(self._load_catalog(), self._recall_session())
        return self.state

    async def _load_catalog(self) -> None:
        try:
            challenges = await self.catalog.load_catalog()
        except Exception as exc:  # noqa: BLE001
            logger.error("assessment.catalog_failed error=%s", exc)
            self.state = st.with_catalog_failure(self.state)
            return
        self.state = st.with_catalog(self.state, challenges)

    async def _recall_session(self) -> None:
        email = self.session.get(self.session_key)
        if not email:
            return
        try:
            candidate = await self.candidates.find_by_email(email)
        except Exception as exc:  # noqa: BLE001
            logger.warning("assessment.recall_failed email=%s error=%s", email, exc)
            return
        if candidate is None:
            logger.info("assessment.recall_miss email=%s", email)
            return
        self.state = st.with_candidate(self.state, candidate)
        await self._load_submissions(candidate.id)

    async def _load_submissions(self, candidate_id: str) -> None:
        try:
            completion = await self.submissions.load_completion_map(candidate_id)
        except Exception as exc:  # noqa: BLE001
            logger.warning("assessment.submissions_failed candidate_id=%s error=%s", candidate_id, exc)
            return
        self.state = st.with_submissions(self.state, completion)

    # ---- registration --------------------------------------------------------

    async def register(self, name: str, email: str) -> bool:
        self.state = st.edit_registration(self.state, name=name, email=email)
        if not st.can_register(self.state):
            return False
        self.state = st.begin_registration(self.state)
        try:
            outcome = await self.candidates.register(email, name)
        except DataServiceError as exc:
            logger.warning("assessment.register_failed email=%s error=%s", email, exc)
            self.state = st.end_registration(st.with_error(self.state, REGISTRATION_FAILED))
            return False
        self.state = st.with_candidate(self.state, outcome.candidate)
        self.session.set(self.session_key, email)
        if outcome.existing:
            await self._load_submissions(outcome.candidate.id)
        self.state = st.end_registration(self.state)
        return True

    # ---- modal ---------------------------------------------------------------

    def open_challenge(self, challenge_id: str) -> bool:
        self.state = st.select_challenge(self.state, challenge_id)
        selected = self.state.selected_challenge
        return selected is not None and selected.id == str(challenge_id)

    def close_challenge(self) -> None:
        self.state = st.close_challenge(self.state)

    # ---- submission ----------------------------------------------------------

    async def submit(self, answer: str, code_snippet: str = "") -> bool:
        self.state = st.edit_code_snippet(st.edit_answer(self.state, answer), code_snippet)
        if not st.can_submit(self.state):
            return False
        candidate = self.state.candidate
        challenge = self.state.selected_challenge
        if candidate is None or challenge is None:
            return False
        self.state = st.begin_submission(self.state)
        try:
            receipt = await self.submissions.submit(
                candidate.id,
                challenge.id,
                self.state.answer,
                self.state.code_snippet or None,
            )
        except DataServiceError as exc:
            logger.warning(
                "assessment.submit_failed candidate_id=%s challenge_id=%s error=%s",
                candidate.id,
                challenge.id,
                exc,
            )
            self.state = st.end_submission(st.with_error(self.state, SUBMISSION_FAILED))
            return False
        self.state = st.end_submission(st.mark_submitted(self.state, receipt.challenge_id))
        return True


__all__ = ["AssessmentPage", "REGISTRATION_FAILED", "SUBMISSION_FAILED"]
