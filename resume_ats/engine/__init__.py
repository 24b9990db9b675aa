from .composer import AnalysisResult, ScoreBreakdown, analyze_resume, round_half_up, score_resume
from .feedback import (
    AnalysisFeedback,
    FeedbackItem,
    build_feedback,
    keyword_band,
    ordered_strong_verbs,
    score_band,
)
from .keywords import extract_keywords, match_keywords
from .rules import ScoreWeights, ScoringRules, WeakPhrasePenalty, get_default_scoring_rules
from .sections import detect_sections, missing_core_sections
from .verbs import count_weak_phrases, detect_strong_verbs
from .vocabulary import (
    DEFAULT_VOCABULARY,
    SECTION_TABLE,
    STOPWORDS,
    STRONG_VERBS,
    WEAK_PHRASES,
    Vocabulary,
)

__all__ = [
    "AnalysisResult",
    "ScoreBreakdown",
    "analyze_resume",
    "round_half_up",
    "score_resume",
    "AnalysisFeedback",
    "FeedbackItem",
    "build_feedback",
    "keyword_band",
    "ordered_strong_verbs",
    "score_band",
    "extract_keywords",
    "match_keywords",
    "ScoreWeights",
    "ScoringRules",
    "WeakPhrasePenalty",
    "get_default_scoring_rules",
    "detect_sections",
    "missing_core_sections",
    "count_weak_phrases",
    "detect_strong_verbs",
    "DEFAULT_VOCABULARY",
    "SECTION_TABLE",
    "STOPWORDS",
    "STRONG_VERBS",
    "WEAK_PHRASES",
    "Vocabulary",
]
