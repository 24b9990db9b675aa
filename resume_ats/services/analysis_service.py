from __future__ import annotations

from datetime import datetime, timezone
import logging
import time

from resume_ats.core.config import settings
from resume_ats.engine import (
    DEFAULT_VOCABULARY,
    AnalysisResult,
    ScoringRules,
    Vocabulary,
    analyze_resume,
    build_feedback,
    get_default_scoring_rules,
    ordered_strong_verbs,
)
from resume_ats.preview import DEFAULT_TEMPLATE, TEMPLATES, build_preview
from resume_ats.schemas.analysis import (
    AnalyzeRequest,
    AnalyzeResponse,
    ExtractTextResponse,
    ScoreBreakdownOut,
    TemplatesResponse,
)

logger = logging.getLogger(__name__)

ALLOWED_UPLOAD_EXTENSIONS = {"txt"}
UNSUPPORTED_DOCUMENT_EXTENSIONS = {"pdf", "doc", "docx", "rtf"}


class AnalysisInputError(ValueError):
    def __init__(self, message: str, *, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


def _ensure_text_size(label: str, text: str) -> None:
    if len(text) > settings.max_text_chars:
        raise AnalysisInputError(
            f"{label} is too long. Maximum allowed size is {settings.max_text_chars} characters.",
            status_code=413,
        )


def _sections_in_table_order(result: AnalysisResult, vocabulary: Vocabulary) -> list[str]:
    return [section_id for section_id in vocabulary.section_ids() if section_id in result.found_sections]


def run_analysis(
    payload: AnalyzeRequest,
    *,
    rules: ScoringRules | None = None,
    vocabulary: Vocabulary | None = None,
) -> AnalyzeResponse:
    rules = rules or get_default_scoring_rules()
    vocabulary = vocabulary or DEFAULT_VOCABULARY

    _ensure_text_size("Resume text", payload.resume_text)
    _ensure_text_size("Job description text", payload.job_description_text)

    started = time.perf_counter()
    result = analyze_resume(
        payload.resume_text,
        payload.job_description_text,
        rules=rules,
        vocabulary=vocabulary,
    )
    if result is None:
        raise AnalysisInputError("Resume text is empty. Paste or upload a resume to analyze.")

    feedback = build_feedback(result, rules=rules, vocabulary=vocabulary)
    preview = None
    if payload.include_preview:
        preview = build_preview(payload.resume_text, payload.template, vocabulary=vocabulary)
    elapsed_ms = (time.perf_counter() - started) * 1000

    logger.info(
        "resume_analysis_completed score=%s jd_keywords=%s weak_phrases=%s elapsed_ms=%.2f",
        result.score,
        result.unique_job_description_keyword_count,
        result.weak_phrase_count,
        elapsed_ms,
    )

    return AnalyzeResponse(
        score=result.score,
        score_band=feedback.score_band,
        breakdown=ScoreBreakdownOut(**result.breakdown.model_dump()),
        found_sections=_sections_in_table_order(result, vocabulary),
        missing_core_sections=list(result.missing_core_sections),
        matched_keywords=sorted(result.matched_keywords),
        missing_keywords=sorted(result.missing_keywords),
        unique_job_description_keyword_count=result.unique_job_description_keyword_count,
        keyword_band=feedback.keyword_band,
        match_percent=feedback.match_percent,
        weak_phrase_count=result.weak_phrase_count,
        strong_verbs_used=ordered_strong_verbs(result, vocabulary),
        feedback=feedback.items,
        preview=preview,
        generated_at=datetime.now(timezone.utc),
    )


def extract_text_from_upload(filename: str, content: bytes) -> ExtractTextResponse:
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if ext in UNSUPPORTED_DOCUMENT_EXTENSIONS:
        raise AnalysisInputError(
            f"'.{ext}' files are not parsed. Save the resume as a .txt file or paste its text instead."
        )
    if ext not in ALLOWED_UPLOAD_EXTENSIONS:
        raise AnalysisInputError(
            f"Unsupported file type '.{ext}'. Allowed: {', '.join(sorted(ALLOWED_UPLOAD_EXTENSIONS))}."
        )
    if len(content) > settings.max_upload_bytes:
        raise AnalysisInputError(
            f"File too large. Maximum allowed size is {settings.max_upload_bytes // (1024 * 1024)} MB.",
            status_code=413,
        )

    text = content.decode("utf-8-sig", errors="replace")
    if not text.strip():
        raise AnalysisInputError("Uploaded file is empty.")

    logger.info("resume_text_extracted filename=%s characters=%s", filename, len(text))
    return ExtractTextResponse(filename=filename, text=text, characters=len(text))


def list_templates() -> TemplatesResponse:
    return TemplatesResponse(default=DEFAULT_TEMPLATE, templates=list(TEMPLATES.values()))
