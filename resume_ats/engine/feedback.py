from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from .composer import AnalysisResult
from .rules import ScoringRules, get_default_scoring_rules
from .vocabulary import DEFAULT_VOCABULARY, Vocabulary

FeedbackCategory = Literal["structure", "keywords", "vocabulary", "score"]
FeedbackStatus = Literal["pass", "warn", "fail", "info"]
KeywordBand = Literal["none", "low", "moderate", "strong"]
ScoreBand = Literal["bad", "warn", "ok"]


class FeedbackItem(BaseModel):
    category: FeedbackCategory
    status: FeedbackStatus
    message: str


class AnalysisFeedback(BaseModel):
    items: list[FeedbackItem] = Field(default_factory=list)
    keyword_band: KeywordBand = "none"
    match_percent: int | None = Field(default=None, ge=0, le=100)
    score_band: ScoreBand = "bad"

    def messages(self) -> list[str]:
        return [item.message for item in self.items]


def keyword_band(match_percent: int | None, rules: ScoringRules) -> KeywordBand:
    if match_percent is None:
        return "none"
    if match_percent < rules.keyword_low_below:
        return "low"
    if match_percent < rules.keyword_strong_from:
        return "moderate"
    return "strong"


def score_band(score: int, rules: ScoringRules) -> ScoreBand:
    if score >= rules.score_ok_from:
        return "ok"
    if score >= rules.score_warn_from:
        return "warn"
    return "bad"


def ordered_strong_verbs(result: AnalysisResult, vocabulary: Vocabulary) -> list[str]:
    return [verb for verb in vocabulary.strong_verbs if verb in result.strong_verbs_used]


def _structure_item(result: AnalysisResult) -> FeedbackItem:
    if result.missing_core_sections:
        missing = ", ".join(section.upper() for section in result.missing_core_sections)
        return FeedbackItem(
            category="structure",
            status="warn",
            message=f"Structure deficiency: missing core sections: {missing}. (Impact: High)",
        )
    return FeedbackItem(
        category="structure",
        status="pass",
        message="Structure complete: all standard core sections found.",
    )


def _keyword_item(result: AnalysisResult, band: KeywordBand, rules: ScoringRules) -> FeedbackItem:
    pct = result.keyword_match_percent
    if band == "none":
        return FeedbackItem(
            category="keywords",
            status="info",
            message="No job description provided. Paste one to calculate keyword alignment and boost your score.",
        )
    if band == "low":
        examples = sorted(result.missing_keywords)[: rules.max_missing_keywords]
        message = f"Low keyword match ({pct}%): major tailoring needed."
        if examples:
            message += f" Missing critical terms like: {', '.join(examples)}."
        return FeedbackItem(category="keywords", status="fail", message=message)
    if band == "moderate":
        return FeedbackItem(
            category="keywords",
            status="warn",
            message=f"Moderate match ({pct}%): add missing terms for a stronger ATS score. You're close!",
        )
    return FeedbackItem(
        category="keywords",
        status="pass",
        message=f"Strong match ({pct}%): excellent keyword alignment.",
    )


def _vocabulary_item(result: AnalysisResult, rules: ScoringRules, vocabulary: Vocabulary) -> FeedbackItem:
    used = ordered_strong_verbs(result, vocabulary)[: rules.max_strong_verbs]
    if result.weak_phrase_count > 0:
        message = (
            f"Vocabulary: used weak phrasing {result.weak_phrase_count} times. "
            "Replace passive terms like 'responsible for' with stronger action verbs"
        )
        if used:
            message += f" like the ones you already use: {', '.join(used)}."
        else:
            suggestions = list(vocabulary.strong_verbs[: rules.max_strong_verbs])
            message += f" such as {', '.join(suggestions)}." if suggestions else "."
        return FeedbackItem(category="vocabulary", status="warn", message=message)
    if used:
        return FeedbackItem(
            category="vocabulary",
            status="pass",
            message=f"Vocabulary: strong action verbs detected ({', '.join(used)}).",
        )
    return FeedbackItem(
        category="vocabulary",
        status="pass",
        message="Vocabulary: no weak phrasing detected.",
    )


def build_feedback(
    result: AnalysisResult,
    *,
    rules: ScoringRules | None = None,
    vocabulary: Vocabulary | None = None,
) -> AnalysisFeedback:
    rules = rules or get_default_scoring_rules()
    vocabulary = vocabulary or DEFAULT_VOCABULARY
    band = keyword_band(result.keyword_match_percent, rules)

    items = [
        _structure_item(result),
        _keyword_item(result, band, rules),
        _vocabulary_item(result, rules, vocabulary),
        FeedbackItem(
            category="score",
            status="pass" if result.score >= rules.target_score else "info",
            message=f"Final ATS score: {result.score}%. Target {rules.target_score}%+ for top performance.",
        ),
    ]
    return AnalysisFeedback(
        items=items,
        keyword_band=band,
        match_percent=result.keyword_match_percent,
        score_band=score_band(result.score, rules),
    )
