from .catalogs import DEFAULT_CATALOGS, AnalysisCatalogs
from .education import extract_education
from .engine import analyze_text
from .experience import MAX_EXPERIENCE_ENTRIES, extract_experience
from .feedback import Feedback, build_feedback
from .scoring import DEFAULT_SCORING, ScoreBreakdown, ScoringConfig, score_text
from .skill_matcher import match_skills

__all__ = [
    "AnalysisCatalogs",
    "DEFAULT_CATALOGS",
    "analyze_text",
    "match_skills",
    "extract_education",
    "extract_experience",
    "MAX_EXPERIENCE_ENTRIES",
    "ScoringConfig",
    "DEFAULT_SCORING",
    "ScoreBreakdown",
    "score_text",
    "Feedback",
    "build_feedback",
]
