from fastapi import APIRouter, File, HTTPException, Request, UploadFile, status

from resume_ats.core.config import settings
from resume_ats.core.rate_limit import rate_limit
from resume_ats.schemas.analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    ExtractTextResponse,
    TemplatesResponse,
)
from resume_ats.services.analysis_service import (
    AnalysisInputError,
    extract_text_from_upload,
    list_templates,
    run_analysis,
)

router = APIRouter()


def _raise_input_http_error(exc: AnalysisInputError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("/analyze", response_model=AnalyzeResponse)
@rate_limit()
async def analyze(request: Request, payload: AnalyzeRequest):
    _ = request
    try:
        return run_analysis(payload)
    except AnalysisInputError as exc:
        _raise_input_http_error(exc)


@router.post("/resume/extract-text", response_model=ExtractTextResponse)
@rate_limit()
async def resume_extract_text(request: Request, file: UploadFile = File(...)):
    _ = request
    filename = file.filename or "uploaded-file"

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

    try:
        return extract_text_from_upload(filename=filename, content=b"".join(chunks))
    except AnalysisInputError as exc:
        _raise_input_http_error(exc)


@router.get("/templates", response_model=TemplatesResponse)
async def templates():
    return list_templates()
