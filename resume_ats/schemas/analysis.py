from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from resume_ats.engine.feedback import FeedbackItem, KeywordBand, ScoreBand
from resume_ats.preview import ResumePreview, ResumeTemplate
from resume_ats.preview.templates import TemplateKey


class AnalyzeRequest(BaseModel):
    resume_text: str = ""
    job_description_text: str = ""
    template: TemplateKey = "modern"
    include_preview: bool = True


class ScoreBreakdownOut(BaseModel):
    structure: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)
    formatting: int = Field(ge=0, le=100)


class AnalyzeResponse(BaseModel):
    score: int = Field(ge=0, le=100)
    score_band: ScoreBand
    breakdown: ScoreBreakdownOut
    found_sections: list[str]
    missing_core_sections: list[str]
    matched_keywords: list[str]
    missing_keywords: list[str]
    unique_job_description_keyword_count: int = Field(ge=0)
    keyword_band: KeywordBand
    match_percent: int | None = Field(default=None, ge=0, le=100)
    weak_phrase_count: int = Field(ge=0)
    strong_verbs_used: list[str]
    feedback: list[FeedbackItem]
    preview: ResumePreview | None = None
    generated_at: datetime


class ExtractTextResponse(BaseModel):
    filename: str
    text: str
    characters: int = Field(ge=0)


class TemplatesResponse(BaseModel):
    default: str
    templates: list[ResumeTemplate]
