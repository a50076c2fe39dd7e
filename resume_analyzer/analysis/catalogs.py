from __future__ import annotations

from dataclasses import dataclass

SKILL_CATALOG: tuple[str, ...] = (
    "javascript",
    "typescript",
    "react",
    "node",
    "python",
    "java",
    "c++",
    "c#",
    "sql",
    "aws",
    "docker",
    "kubernetes",
    "git",
    "graphql",
    "rest",
    "html",
    "css",
    "next.js",
    "next",
    "tailwind",
    "tailwindcss",
    "figma",
    "leadership",
    "management",
    "communication",
)

# Matched as substrings of the lowercased line, so "ms" also hits "systems".
DEGREE_KEYWORDS: tuple[str, ...] = (
    "bachelor",
    "master",
    "b.sc",
    "b.s",
    "bs",
    "ms",
    "mba",
    "phd",
    "doctor",
)

ROLE_KEYWORDS: tuple[str, ...] = (
    "engineer",
    "developer",
    "manager",
    "designer",
    "analyst",
    "consultant",
    "intern",
    "lead",
    "director",
)

SECTION_HEADINGS: tuple[str, ...] = (
    "experience",
    "education",
    "skills",
    "projects",
    "summary",
    "certifications",
)


@dataclass(frozen=True, slots=True)
class AnalysisCatalogs:
    skills: tuple[str, ...] = SKILL_CATALOG
    degree_keywords: tuple[str, ...] = DEGREE_KEYWORDS
    role_keywords: tuple[str, ...] = ROLE_KEYWORDS
    section_headings: tuple[str, ...] = SECTION_HEADINGS


DEFAULT_CATALOGS = AnalysisCatalogs()
