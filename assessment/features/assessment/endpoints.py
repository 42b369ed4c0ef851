"""Server-rendered assessment page."""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from .controller import AssessmentPage
from .session_store import CookieSessionStore, get_session_store
from .views import render_page

logger = logging.getLogger("assessment")

router = APIRouter(tags=["assessment"])


def _html(page: AssessmentPage, store: CookieSessionStore, status_code: int = status.HTTP_200_OK) -> Response:
    resp = HTMLResponse(render_page(page.state), status_code=status_code)
    store.apply(resp)
    return resp


def _back_home(store: CookieSessionStore) -> Response:
    resp = RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    store.apply(resp)
    return resp


@router.get("/", response_class=HTMLResponse)
async def assessment_page(
    challenge: Optional[str] = Query(None, description="Challenge to open in the modal"),
    store: CookieSessionStore = Depends(get_session_store),
) -> Response:
    page = AssessmentPage(store)
    await page.bootstrap()
    if challenge:
        page.open_challenge(challenge)
    return _html(page, store)


@router.post("/register", response_class=HTMLResponse)
async def register(
    name: str = Form(""),
    email: str = Form(""),
    store: CookieSessionStore = Depends(get_session_store),
) -> Response:
    page = AssessmentPage(store)
    await page.bootstrap()
    if await page.register(name, email):
        return _back_home(store)
    code = status.HTTP_502_BAD_GATEWAY if page.state.error else status.HTTP_422_UNPROCESSABLE_ENTITY
    return _html(page, store, code)


@router.post("/challenges/{challenge_id}/submit", response_class=HTMLResponse)
async def submit_answer(
    challenge_id: str,
    answer: str = Form(""),
    code_snippet: str = Form(""),
    store: CookieSessionStore = Depends(get_session_store),
) -> Response:
    page = AssessmentPage(store)
    await page.bootstrap()
    if not page.open_challenge(challenge_id):
        # Unknown, already submitted, or no active candidate.
        logger.info("assessment.submit_ignored challenge_id=%s", challenge_id)
        return _back_home(store)
    if await page.submit(answer, code_snippet):
        return _back_home(store)
    code = status.HTTP_502_BAD_GATEWAY if page.state.error else status.HTTP_422_UNPROCESSABLE_ENTITY
    return _html(page, store, code)
