from __future__ import annotations

from resume_analyzer.schemas.analysis import EducationEntry

from .catalogs import DEGREE_KEYWORDS
from .text_utils import YEAR_RE, split_lines


def _is_education_line(line: str, degree_keywords: tuple[str, ...]) -> bool:
    lowered = line.lower()
    return any(keyword in lowered for keyword in degree_keywords)


def extract_education(
    text: str,
    degree_keywords: tuple[str, ...] = DEGREE_KEYWORDS,
) -> tuple[EducationEntry, ...]:
    entries: list[EducationEntry] = []
    for line in split_lines(text):
        if not _is_education_line(line, degree_keywords):
            continue
        year_match = YEAR_RE.search(line)
        entries.append(
            EducationEntry(
                degree=line.strip(),
                # Institution is never split out of the degree line.
                institution="",
                year=year_match.group(0) if year_match else "",
            )
        )
    return tuple(entries)
