from __future__ import annotations

from .catalogs import SKILL_CATALOG
from .text_utils import whole_word_patterns


def match_skills(text: str, catalog: tuple[str, ...] = SKILL_CATALOG) -> tuple[str, ...]:
    """Return catalog entries found in text, in catalog order, each at most once."""
    matched: list[str] = []
    seen: set[str] = set()
    for token, pattern in zip(catalog, whole_word_patterns(catalog)):
        if token in seen:
            continue
        if pattern.search(text):
            seen.add(token)
            matched.append(token)
    return tuple(matched)
