from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from resume_analyzer.core.config import settings
from resume_analyzer.core.rate_limit import rate_limit
from resume_analyzer.parsing.models import UnsupportedDocumentError
from resume_analyzer.parsing.parse import extract_text
from resume_analyzer.schemas.analysis import AnalysisResponse, AnalyzeRequest, RoleListResponse
from resume_analyzer.services.analysis_service import AnalysisOrchestrator, get_analysis_orchestrator

router = APIRouter()

UPLOAD_CHUNK_BYTES = 64 * 1024


async def _read_upload(file: UploadFile, max_bytes: int) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(UPLOAD_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise HTTPException(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                detail=f"File too large. Maximum allowed size is {max_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.get("/analysis/roles", response_model=RoleListResponse)
async def list_roles(orchestrator: AnalysisOrchestrator = Depends(get_analysis_orchestrator)):
    registry = orchestrator.registry
    return RoleListResponse(roles=registry.roles(), default_role=registry.default_profile.label)


@router.post("/analysis/analyze", response_model=AnalysisResponse)
@rate_limit()
async def analyze_text(
    request: Request,
    payload: AnalyzeRequest,
    orchestrator: AnalysisOrchestrator = Depends(get_analysis_orchestrator),
):
    _ = request
    return await run_in_threadpool(
        orchestrator.analyze,
        payload.resume_text,
        payload.target_role,
        payload.job_description,
        enrich=payload.enrich,
    )


@router.post("/analysis/analyze-file", response_model=AnalysisResponse)
@rate_limit(settings.upload_rate_limit)
async def analyze_file(
    request: Request,
    file: UploadFile = File(...),
    target_role: str = Form("Software Developer"),
    job_description: str | None = Form(None),
    enrich: bool = Form(True),
    orchestrator: AnalysisOrchestrator = Depends(get_analysis_orchestrator),
):
    _ = request
    content = await _read_upload(file, settings.max_upload_bytes)
    try:
        text = await run_in_threadpool(extract_text, content, file.content_type, file.filename or "")
    except UnsupportedDocumentError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return await run_in_threadpool(
        orchestrator.analyze,
        text,
        target_role,
        job_description,
        enrich=enrich,
    )
