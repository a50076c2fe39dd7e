from __future__ import annotations

from resume_analyzer.schemas.analysis import AnalysisResult

from .catalogs import DEFAULT_CATALOGS, AnalysisCatalogs
from .education import extract_education
from .experience import MAX_EXPERIENCE_ENTRIES, extract_experience
from .feedback import build_feedback
from .scoring import DEFAULT_SCORING, ScoringConfig, score_text
from .skill_matcher import match_skills


def analyze_text(
    text: str,
    *,
    catalogs: AnalysisCatalogs = DEFAULT_CATALOGS,
    config: ScoringConfig = DEFAULT_SCORING,
) -> AnalysisResult:
    """Turn raw resume text into a scored, structured assessment.

    Pure and total over strings: no I/O, no shared state, and no input
    raises. An empty string yields a valid zero-signal result.
    """
    skills = match_skills(text, catalogs.skills)
    education = extract_education(text, catalogs.degree_keywords)
    experience = extract_experience(
        text,
        catalogs.role_keywords,
        limit=max(0, min(config.max_experience_entries, MAX_EXPERIENCE_ENTRIES)),
    )

    breakdown = score_text(
        text,
        matched_skill_count=len(skills),
        catalog_size=len(catalogs.skills),
        section_headings=catalogs.section_headings,
        config=config,
    )
    feedback = build_feedback(
        skills=skills,
        education=education,
        breakdown=breakdown,
        config=config,
    )

    return AnalysisResult(
        score=breakdown.score,
        ats_compatibility=breakdown.ats_compatibility,
        skills=skills,
        experience=experience,
        education=education,
        recommendations=feedback.recommendations,
        strengths=feedback.strengths,
        improvements=feedback.improvements,
    )
