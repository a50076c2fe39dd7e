from __future__ import annotations

import re
from functools import lru_cache

_LINE_SPLIT_RE = re.compile(r"\r?\n")
YEAR_RE = re.compile(r"\b(?:19|20)\d{2}\b")


def split_lines(text: str) -> list[str]:
    return _LINE_SPLIT_RE.split(text)


def count_words(text: str) -> int:
    return len(text.split())


@lru_cache(maxsize=32)
def whole_word_patterns(tokens: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    """Compile one case-insensitive whole-token pattern per catalog entry.

    Lookarounds replace \\b so tokens that start or end with punctuation
    ("c++", "c#") still match when followed by a space.
    """
    return tuple(
        re.compile(rf"(?<!\w){re.escape(token)}(?!\w)", re.IGNORECASE)
        for token in tokens
    )
