from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import lru_cache

from .catalogs import SECTION_HEADINGS
from .text_utils import count_words

_CONTACT_RE = re.compile(r"(@|\bwww\.|linkedin\.com|phone|tel:|\+?\d{7,})", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class ScoringConfig:
    ideal_word_count: int = 800
    ats_skills_weight: float = 0.6
    ats_contact_bonus: float = 10
    ats_sections_bonus: float = 10
    ats_length_weight: float = 0.1
    base_score: float = 40
    per_skill_points: float = 6
    sections_bonus: float = 5
    contact_bonus: float = 5
    min_recommended_skills: int = 5
    min_keyword_skills: int = 3
    min_word_count: int = 300
    strength_skill_preview: int = 6
    max_experience_entries: int = 8


DEFAULT_SCORING = ScoringConfig()


@dataclass(frozen=True, slots=True)
class ScoreBreakdown:
    word_count: int
    matched_skill_count: int
    length_score: int
    skills_score: int
    has_contact: bool
    has_sections: bool
    ats_compatibility: int
    score: int


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for the non-negative
    values produced by the scoring formulas."""
    return int(math.floor(value + 0.5))


def _clamp_score(value: float) -> int:
    return max(0, min(100, round_half_up(value)))


@lru_cache(maxsize=8)
def _section_pattern(headings: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(re.escape(heading) for heading in headings)
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


def has_contact_info(text: str) -> bool:
    return bool(_CONTACT_RE.search(text))


def has_section_headings(text: str, headings: tuple[str, ...] = SECTION_HEADINGS) -> bool:
    if not headings:
        return False
    return bool(_section_pattern(headings).search(text))


def score_text(
    text: str,
    *,
    matched_skill_count: int,
    catalog_size: int,
    section_headings: tuple[str, ...] = SECTION_HEADINGS,
    config: ScoringConfig = DEFAULT_SCORING,
) -> ScoreBreakdown:
    word_count = count_words(text)
    has_contact = has_contact_info(text)
    has_sections = has_section_headings(text, section_headings)

    length_score = _clamp_score(word_count / max(1, config.ideal_word_count) * 100)
    skills_score = _clamp_score(matched_skill_count / max(1, catalog_size) * 100)

    ats_compatibility = _clamp_score(
        skills_score * config.ats_skills_weight
        + (config.ats_contact_bonus if has_contact else 0)
        + (config.ats_sections_bonus if has_sections else 0)
        + length_score * config.ats_length_weight
    )
    score = _clamp_score(
        config.base_score
        + matched_skill_count * config.per_skill_points
        + (config.sections_bonus if has_sections else 0)
        + (config.contact_bonus if has_contact else 0)
    )

    return ScoreBreakdown(
        word_count=word_count,
        matched_skill_count=matched_skill_count,
        length_score=length_score,
        skills_score=skills_score,
        has_contact=has_contact,
        has_sections=has_sections,
        ats_compatibility=ats_compatibility,
        score=score,
    )
