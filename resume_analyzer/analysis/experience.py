from __future__ import annotations

import re

from resume_analyzer.schemas.analysis import ExperienceEntry

from .catalogs import ROLE_KEYWORDS
from .text_utils import YEAR_RE, split_lines, whole_word_patterns

MAX_EXPERIENCE_ENTRIES = 8

_AT_SPLIT_RE = re.compile(r" at | @ ", re.IGNORECASE)
_DASH_SEPARATOR = " - "
# Lazy and best-effort: on lines with several years it may span unrelated ones.
_DURATION_RANGE_RE = re.compile(r"\b(?:19|20)\d{2}.*?(?:to|-).*?(?:19|20)\d{2}\b", re.IGNORECASE)


def _has_role(line: str, role_keywords: tuple[str, ...]) -> bool:
    return any(pattern.search(line) for pattern in whole_word_patterns(role_keywords))


def _split_line(line: str, has_year: bool) -> ExperienceEntry:
    at_parts = _AT_SPLIT_RE.split(line)
    if len(at_parts) >= 2:
        return ExperienceEntry(
            title=at_parts[0].strip(),
            company=" at ".join(at_parts[1:]).strip(),
            duration="",
        )

    dash_parts = line.split(_DASH_SEPARATOR)
    if len(dash_parts) >= 2:
        return ExperienceEntry(
            title=dash_parts[0].strip(),
            company="",
            duration=_DASH_SEPARATOR.join(dash_parts[1:]).strip(),
        )

    duration = ""
    if has_year:
        range_match = _DURATION_RANGE_RE.search(line)
        duration = range_match.group(0) if range_match else ""
    return ExperienceEntry(title=line.strip(), company="", duration=duration)


def extract_experience(
    text: str,
    role_keywords: tuple[str, ...] = ROLE_KEYWORDS,
    limit: int = MAX_EXPERIENCE_ENTRIES,
) -> tuple[ExperienceEntry, ...]:
    """Collect experience-like lines in order, then keep the first `limit`."""
    entries: list[ExperienceEntry] = []
    for line in split_lines(text):
        has_year = bool(YEAR_RE.search(line))
        if not (has_year or _has_role(line, role_keywords)):
            continue
        entries.append(_split_line(line, has_year))
    return tuple(entries[:max(0, limit)])
