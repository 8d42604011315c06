import asyncio
import logging

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile, status
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import InputValidationError, ParseError
from app.core.rate_limit import rate_limit
from app.parsing.parse import extract_text
from app.schemas.match import AnalyzeTextRequest, MatchReport
from app.services.match_service import analyze

logger = logging.getLogger(__name__)

router = APIRouter()

ANALYSIS_FAILED_MESSAGE = "Failed to analyze resume"


async def _read_upload(file: UploadFile) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(1024 * 64)
        if not chunk:
            break
        total += len(chunk)
        if total > settings.max_upload_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


def _analysis_failed(exc: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": ANALYSIS_FAILED_MESSAGE, "details": str(exc)},
    )


async def _run_analysis(resume_text: str, job_description: str) -> MatchReport | JSONResponse:
    # analyze() blocks on the summarizer call; keep it off the event loop.
    try:
        return await asyncio.to_thread(analyze, resume_text, job_description)
    except InputValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("analysis_failed")
        return _analysis_failed(exc)


@router.post("/analyze", response_model=MatchReport)
@rate_limit()
async def analyze_upload(
    request: Request,
    resume: UploadFile | None = File(default=None),
    job_description: str | None = Form(default=None, alias="jobDescription"),
):
    _ = request
    if resume is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No resume file uploaded")
    if not job_description or not job_description.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Job description is required")

    content = await _read_upload(resume)
    try:
        resume_text = await asyncio.to_thread(extract_text, content, resume.content_type)
    except ParseError as exc:
        logger.info("resume_parse_failed source_type=%s filename=%s: %s", exc.source_type, resume.filename, exc)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        logger.exception("resume_parse_crashed filename=%s", resume.filename)
        return _analysis_failed(exc)

    return await _run_analysis(resume_text, job_description)


@router.post("/analyze/text", response_model=MatchReport)
@rate_limit()
async def analyze_text(request: Request, payload: AnalyzeTextRequest):
    _ = request
    return await _run_analysis(payload.resume_text, payload.job_description)
