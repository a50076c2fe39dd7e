from __future__ import annotations

from importlib import resources
from typing import Any

import yaml

from resume_analyzer.analysis.scoring import DEFAULT_SCORING, ScoringConfig

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_SCORING_CONFIG_PATH = resources.files("resume_analyzer.core.config").joinpath("scoring.yaml")


def get_scoring_config() -> dict[str, Any]:
    """Load the packaged scoring.yaml and cache it."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    if not _SCORING_CONFIG_PATH.is_file():
        raise RuntimeError(
            f"Scoring config not found at '{_SCORING_CONFIG_PATH}'. "
            "Expected package data: resume_analyzer/core/config/scoring.yaml"
        )

    try:
        raw = _SCORING_CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(
            f"Failed to read scoring config '{_SCORING_CONFIG_PATH}': {exc}"
        ) from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(
            f"Invalid YAML in scoring config '{_SCORING_CONFIG_PATH}': {exc}"
        ) from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(
            f"Invalid scoring config '{_SCORING_CONFIG_PATH}': expected a top-level mapping."
        )

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'ats.skills_weight'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def load_scoring_config() -> ScoringConfig:
    """Build the engine's ScoringConfig from scoring.yaml.

    Keys missing from the YAML keep the built-in defaults.
    """
    base = DEFAULT_SCORING
    return ScoringConfig(
        ideal_word_count=int(get_scoring_value("length.ideal_word_count", base.ideal_word_count)),
        ats_skills_weight=float(get_scoring_value("ats.skills_weight", base.ats_skills_weight)),
        ats_contact_bonus=float(get_scoring_value("ats.contact_bonus", base.ats_contact_bonus)),
        ats_sections_bonus=float(get_scoring_value("ats.sections_bonus", base.ats_sections_bonus)),
        ats_length_weight=float(get_scoring_value("ats.length_weight", base.ats_length_weight)),
        base_score=float(get_scoring_value("overall.base", base.base_score)),
        per_skill_points=float(get_scoring_value("overall.per_skill", base.per_skill_points)),
        sections_bonus=float(get_scoring_value("overall.sections_bonus", base.sections_bonus)),
        contact_bonus=float(get_scoring_value("overall.contact_bonus", base.contact_bonus)),
        min_recommended_skills=int(get_scoring_value("feedback.min_recommended_skills", base.min_recommended_skills)),
        min_keyword_skills=int(get_scoring_value("feedback.min_keyword_skills", base.min_keyword_skills)),
        min_word_count=int(get_scoring_value("feedback.min_word_count", base.min_word_count)),
        strength_skill_preview=int(get_scoring_value("feedback.strength_skill_preview", base.strength_skill_preview)),
        max_experience_entries=max(
            0, int(get_scoring_value("experience.max_entries", base.max_experience_entries))
        ),
    )
