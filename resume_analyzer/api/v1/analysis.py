from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile, status

from resume_analyzer.core.analysis_store import AnalysisStoreError, get_analysis, get_latest_analysis
from resume_analyzer.core.config import settings
from resume_analyzer.core.rate_limit import rate_limit
from resume_analyzer.parsing.models import ExtractionError
from resume_analyzer.parsing.parse import SUPPORTED_EXTENSIONS
from resume_analyzer.schemas.analysis import AnalysisResponse, AnalyzeTextRequest, StoredAnalysisResponse
from resume_analyzer.services.analysis_service import run_file_analysis, run_text_analysis

router = APIRouter()

_READ_CHUNK_BYTES = 1024 * 64


def _stored_or_404(record: dict | None, detail: str) -> StoredAnalysisResponse:
    if not record:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
    return StoredAnalysisResponse(
        analysis_id=record["analysis_id"],
        source=record["source"],
        created_at=record["created_at"],
        analysis=record["analysis"],
    )


async def _read_upload(file: UploadFile) -> bytes:
    max_bytes = settings.max_upload_bytes
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"File too large. Maximum allowed size is {max_bytes // (1024 * 1024)} MB.",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/analysis", response_model=AnalysisResponse)
@rate_limit()
async def analyze_resume_text(request: Request, payload: AnalyzeTextRequest):
    _ = request
    return run_text_analysis(payload)


@router.post("/analysis/upload", response_model=AnalysisResponse)
@rate_limit()
async def analyze_resume_upload(
    request: Request,
    file: UploadFile = File(...),
    save: bool = Form(default=True),
):
    _ = request
    filename = file.filename or "uploaded-file"
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if ext not in SUPPORTED_EXTENSIONS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type '.{ext}'. Allowed: {', '.join(sorted(SUPPORTED_EXTENSIONS))}.",
        )

    content = await _read_upload(file)
    try:
        return run_file_analysis(filename, content, save=save)
    except ExtractionError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/analysis/latest", response_model=StoredAnalysisResponse)
async def latest_analysis():
    try:
        record = get_latest_analysis()
    except AnalysisStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return _stored_or_404(record, "No analysis has been saved yet.")


@router.get("/analysis/{analysis_id}", response_model=StoredAnalysisResponse)
async def stored_analysis(analysis_id: str):
    try:
        record = get_analysis(analysis_id)
    except AnalysisStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc)) from exc
    return _stored_or_404(record, "Analysis not found.")
