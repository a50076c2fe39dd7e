from __future__ import annotations

from dataclasses import dataclass

from resume_analyzer.schemas.analysis import EducationEntry

from .scoring import DEFAULT_SCORING, ScoreBreakdown, ScoringConfig

ADD_KEYWORDS_RECOMMENDATION = "Consider adding more relevant technical skills and keywords from the job description."
ADD_CONTACT_RECOMMENDATION = "Include clear contact information (email, phone, LinkedIn)."
ADD_HEADINGS_RECOMMENDATION = "Use clear section headings like Experience, Education, and Skills for better ATS parsing."
EXPAND_CONTENT_RECOMMENDATION = "Expand content with measurable accomplishments and metrics."

EDUCATION_STRENGTH = "Education section detected."

ROLE_KEYWORDS_IMPROVEMENT = "Add more role-specific keywords and technologies."
HEADINGS_IMPROVEMENT = "Add explicit section headings to improve ATS compatibility."


@dataclass(frozen=True, slots=True)
class Feedback:
    recommendations: tuple[str, ...]
    strengths: tuple[str, ...]
    improvements: tuple[str, ...]


def _recommendations(breakdown: ScoreBreakdown, config: ScoringConfig) -> list[str]:
    output: list[str] = []
    if breakdown.matched_skill_count < config.min_recommended_skills:
        output.append(ADD_KEYWORDS_RECOMMENDATION)
    if not breakdown.has_contact:
        output.append(ADD_CONTACT_RECOMMENDATION)
    if not breakdown.has_sections:
        output.append(ADD_HEADINGS_RECOMMENDATION)
    if breakdown.word_count < config.min_word_count:
        output.append(EXPAND_CONTENT_RECOMMENDATION)
    return output


def _strengths(
    skills: tuple[str, ...],
    education: tuple[EducationEntry, ...],
    config: ScoringConfig,
) -> list[str]:
    output: list[str] = []
    if skills:
        preview = ", ".join(skills[: config.strength_skill_preview])
        output.append(f"Has {len(skills)} identified skill(s): {preview}")
    if education:
        output.append(EDUCATION_STRENGTH)
    return output


def _improvements(breakdown: ScoreBreakdown, config: ScoringConfig) -> list[str]:
    output: list[str] = []
    if breakdown.matched_skill_count < config.min_keyword_skills:
        output.append(ROLE_KEYWORDS_IMPROVEMENT)
    if not breakdown.has_sections:
        output.append(HEADINGS_IMPROVEMENT)
    return output


def build_feedback(
    *,
    skills: tuple[str, ...],
    education: tuple[EducationEntry, ...],
    breakdown: ScoreBreakdown,
    config: ScoringConfig = DEFAULT_SCORING,
) -> Feedback:
    return Feedback(
        recommendations=tuple(_recommendations(breakdown, config)),
        strengths=tuple(_strengths(skills, education, config)),
        improvements=tuple(_improvements(breakdown, config)),
    )
