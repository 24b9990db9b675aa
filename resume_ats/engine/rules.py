from __future__ import annotations

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from resume_ats.core.config.scoring import get_scoring_value


class ScoreWeights(BaseModel):
    model_config = ConfigDict(frozen=True)

    structure: int = Field(default=40, ge=0)
    keywords: int = Field(default=30, ge=0)
    formatting: int = Field(default=30, ge=0)

    @property
    def total(self) -> int:
        return self.structure + self.keywords + self.formatting

    @model_validator(mode="after")
    def _validate_total(self) -> "ScoreWeights":
        if self.total != 100:
            raise ValueError(f"score weights must sum to 100, got {self.total}")
        return self


class WeakPhrasePenalty(BaseModel):
    model_config = ConfigDict(frozen=True)

    occurrences_per_step: int = Field(default=5, ge=1)
    points_per_step: int = Field(default=5, ge=0)
    max_penalty: int = Field(default=15, ge=0)

    def penalty_for(self, occurrences: int) -> int:
        steps = max(0, occurrences) // self.occurrences_per_step
        return min(steps * self.points_per_step, self.max_penalty)


class ScoringRules(BaseModel):
    """Numeric policy for the ATS score. Vocabulary lives in `Vocabulary`."""

    model_config = ConfigDict(frozen=True)

    weights: ScoreWeights = Field(default_factory=ScoreWeights)
    core_sections: tuple[str, ...] = ("contact", "summary", "experience", "skills", "education")
    contact_header_lines: int = Field(default=5, ge=0)
    empty_jd_full_credit: bool = False
    whole_word_keywords: bool = False
    weak_phrase_penalty: WeakPhrasePenalty = Field(default_factory=WeakPhrasePenalty)
    keyword_low_below: int = Field(default=40, ge=0, le=100)
    keyword_strong_from: int = Field(default=70, ge=0, le=100)
    score_warn_from: int = Field(default=40, ge=0, le=100)
    score_ok_from: int = Field(default=70, ge=0, le=100)
    max_missing_keywords: int = Field(default=3, ge=0)
    max_strong_verbs: int = Field(default=3, ge=0)
    target_score: int = Field(default=80, ge=0, le=100)

    @field_validator("core_sections")
    @classmethod
    def _validate_core_sections(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized = tuple(item.strip().lower() for item in value if item and item.strip())
        if not normalized:
            raise ValueError("core_sections must name at least one section")
        if len(set(normalized)) != len(normalized):
            raise ValueError("core_sections must not repeat a section")
        return normalized

    @model_validator(mode="after")
    def _validate_bands(self) -> "ScoringRules":
        if self.weak_phrase_penalty.max_penalty > self.weights.formatting:
            raise ValueError("weak phrase max_penalty cannot exceed the formatting weight")
        if self.keyword_low_below >= self.keyword_strong_from:
            raise ValueError("keyword_low_below must be lower than keyword_strong_from")
        if self.score_warn_from >= self.score_ok_from:
            raise ValueError("score_warn_from must be lower than score_ok_from")
        return self


def _rules_payload() -> dict[str, Any]:
    payload: dict[str, Any] = {}
    weights = get_scoring_value("ats.weights")
    if isinstance(weights, dict):
        payload["weights"] = weights
    core_sections = get_scoring_value("ats.core_sections")
    if isinstance(core_sections, list):
        payload["core_sections"] = tuple(str(item) for item in core_sections)
    penalty = get_scoring_value("ats.weak_phrases")
    if isinstance(penalty, dict):
        payload["weak_phrase_penalty"] = penalty

    scalar_paths = {
        "contact_header_lines": "ats.contact.header_lines",
        "empty_jd_full_credit": "ats.keywords.empty_jd_full_credit",
        "whole_word_keywords": "ats.keywords.whole_word",
        "keyword_low_below": "ats.bands.keyword_low_below",
        "keyword_strong_from": "ats.bands.keyword_strong_from",
        "score_warn_from": "ats.bands.score_warn_from",
        "score_ok_from": "ats.bands.score_ok_from",
        "max_missing_keywords": "ats.feedback.max_missing_keywords",
        "max_strong_verbs": "ats.feedback.max_strong_verbs",
        "target_score": "ats.feedback.target_score",
    }
    for field_name, path in scalar_paths.items():
        value = get_scoring_value(path)
        if value is not None:
            payload[field_name] = value
    return payload


@lru_cache(maxsize=1)
def get_default_scoring_rules() -> ScoringRules:
    try:
        return ScoringRules(**_rules_payload())
    except ValidationError as exc:
        raise RuntimeError(f"Invalid ATS scoring rules in scoring config: {exc}") from exc
