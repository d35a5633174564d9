import logging

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import QuickAnalyzeRequest
from models.responses import AnalysisResult
from services import resume_analyzer, text_extractor
from services.resume_analyzer import EmptyInputError
from services.text_extractor import ExtractionError, UnsupportedFormatError

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)

API_VERSION = "1.0.0"


def _run_analysis(resume_text: str, job_description: str | None) -> AnalysisResult:
    try:
        return resume_analyzer.analyze(resume_text, job_description)
    except EmptyInputError:
        raise HTTPException(status_code=400, detail="Resume text is empty")


@router.get("/health")
async def health():
    return {"status": "ok", "version": API_VERSION}


@router.post("/analyze", response_model=AnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str | None = Form(None),
):
    # Validate file type
    try:
        extractor = text_extractor.get_extractor(
            resume_file.filename, resume_file.content_type
        )
    except UnsupportedFormatError:
        raise HTTPException(status_code=400, detail="Please upload a PDF or DOCX file")

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    if job_description and len(job_description) > settings.max_job_description_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_chars} chars)",
        )

    try:
        resume_text = text_extractor.extract_text(
            content, resume_file.filename, resume_file.content_type
        )
    except ExtractionError:
        raise HTTPException(
            status_code=400, detail=f"Could not parse {extractor.name.upper()} file"
        )

    if not resume_text.strip():
        raise HTTPException(
            status_code=400, detail="No text could be extracted from the file"
        )

    logger.info("Analyzing uploaded %s resume (%d chars)", extractor.name, len(resume_text))
    return _run_analysis(resume_text, job_description)


@router.post("/analyze/quick", response_model=AnalysisResult)
@limiter.limit(settings.rate_limit)
async def analyze_quick(request: Request, body: QuickAnalyzeRequest):
    return _run_analysis(body.resume_text, body.job_description)
