"""FastAPI entry point for the skills assessment page."""

from __future__ import annotations

import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from assessment.common.schemas import ErrorResponse, HealthCheckResponse
from assessment.core.config import get_settings
from assessment.features.assessment.endpoints import router as assessment_router
from assessment.features.candidates.endpoints import router as candidates_router
from assessment.features.challenges.endpoints import router as challenges_router
from assessment.features.submissions.endpoints import router as submissions_router

__version__ = "1.0.0"

_settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if _settings.debug else logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=_settings.app_name, version=__version__)


# ------------------------
# CORS Setup
# ------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.allow_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    incoming = request.headers.get("X-Request-Id") or request.headers.get("X-Request-ID")
    req_id = incoming or str(uuid.uuid4())
    request.state.request_id = req_id
    request_logger = logging.getLogger("request")
    request_logger.info("request.start id=%s method=%s path=%s", req_id, request.method, request.url.path)
    response = await call_next(request)
    response.headers["X-Request-Id"] = req_id
    request_logger.info("request.end id=%s path=%s status=%s", req_id, request.url.path, response.status_code)
    return response


# ------------------------
# Routers
# ------------------------
app.include_router(assessment_router)
app.include_router(challenges_router)
app.include_router(candidates_router)
app.include_router(submissions_router)


@app.get("/health", response_model=HealthCheckResponse)
async def health() -> HealthCheckResponse:
    return HealthCheckResponse(app=_settings.app_name, version=__version__)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error("unhandled error path=%s: %s", request.url.path, exc, exc_info=True)
    body = ErrorResponse(
        error_code="INTERNAL_ERROR",
        message="Internal server error",
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(status_code=500, content=body.model_dump(mode="json"))
