from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field

from .keywords import extract_keywords, match_keywords
from .rules import ScoringRules, get_default_scoring_rules
from .sections import detect_sections, missing_core_sections
from .verbs import count_weak_phrases, detect_strong_verbs
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary


class ScoreBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    structure: int = Field(ge=0)
    keywords: int = Field(ge=0)
    formatting: int = Field(ge=0)


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    found_sections: frozenset[str] = frozenset()
    missing_core_sections: tuple[str, ...] = ()
    matched_keywords: frozenset[str] = frozenset()
    missing_keywords: frozenset[str] = frozenset()
    unique_job_description_keyword_count: int = Field(default=0, ge=0)
    weak_phrase_count: int = Field(default=0, ge=0)
    strong_verbs_used: frozenset[str] = frozenset()
    score: int = Field(ge=0, le=100)
    breakdown: ScoreBreakdown
    keyword_match_percent: int | None = Field(default=None, ge=0, le=100)

    @property
    def job_description_keywords(self) -> frozenset[str]:
        return self.matched_keywords | self.missing_keywords


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _ratio_points(numerator: int, denominator: int, weight: int) -> int:
    if denominator <= 0:
        return 0
    points = round_half_up((numerator / denominator) * weight)
    return max(0, min(weight, points))


def score_resume(
    resume_text: str,
    job_description_text: str = "",
    *,
    rules: ScoringRules | None = None,
    vocabulary: Vocabulary | None = None,
) -> AnalysisResult:
    """Score a resume against an optional job description.

    Pure function of its inputs and the static tables. Blank resume text is
    scored like any other text; use `analyze_resume` to reject it instead.
    """
    rules = rules or get_default_scoring_rules()
    vocabulary = vocabulary or DEFAULT_VOCABULARY
    weights = rules.weights
    resume_text = resume_text or ""
    job_description_text = job_description_text or ""

    found = detect_sections(
        resume_text,
        vocabulary=vocabulary,
        contact_header_lines=rules.contact_header_lines,
    )
    missing_core = missing_core_sections(found, rules.core_sections)
    core_found = len(rules.core_sections) - len(missing_core)
    structure_score = _ratio_points(core_found, len(rules.core_sections), weights.structure)

    jd_keywords = extract_keywords(job_description_text, vocabulary=vocabulary)
    matched, missing = match_keywords(jd_keywords, resume_text, whole_word=rules.whole_word_keywords)
    if jd_keywords:
        keyword_score = _ratio_points(len(matched), len(jd_keywords), weights.keywords)
        match_percent: int | None = _ratio_points(len(matched), len(jd_keywords), 100)
    else:
        keyword_score = weights.keywords if rules.empty_jd_full_credit else 0
        match_percent = None

    weak_count = count_weak_phrases(resume_text, vocabulary=vocabulary)
    penalty = rules.weak_phrase_penalty.penalty_for(weak_count)
    formatting_score = max(0, weights.formatting - penalty)

    total = max(0, min(weights.total, structure_score + keyword_score + formatting_score))

    return AnalysisResult(
        found_sections=found,
        missing_core_sections=missing_core,
        matched_keywords=matched,
        missing_keywords=missing,
        unique_job_description_keyword_count=len(jd_keywords),
        weak_phrase_count=weak_count,
        strong_verbs_used=detect_strong_verbs(resume_text, vocabulary=vocabulary),
        score=total,
        breakdown=ScoreBreakdown(
            structure=structure_score,
            keywords=keyword_score,
            formatting=formatting_score,
        ),
        keyword_match_percent=match_percent,
    )


def analyze_resume(
    resume_text: str,
    job_description_text: str = "",
    *,
    rules: ScoringRules | None = None,
    vocabulary: Vocabulary | None = None,
) -> AnalysisResult | None:
    """Score the resume, or return None when there is nothing to analyze."""
    if not resume_text or not resume_text.strip():
        return None
    return score_resume(resume_text, job_description_text, rules=rules, vocabulary=vocabulary)
