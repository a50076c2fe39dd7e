from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EducationEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    degree: str
    institution: str = ""
    year: str = ""


class ExperienceEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    company: str = ""
    duration: str = ""


class AnalysisResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    score: int = Field(ge=0, le=100)
    ats_compatibility: int = Field(alias="atsCompatibility", ge=0, le=100)
    skills: tuple[str, ...] = ()
    experience: tuple[ExperienceEntry, ...] = Field(default=(), max_length=8)
    education: tuple[EducationEntry, ...] = ()
    recommendations: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()


class AnalyzeTextRequest(BaseModel):
    text: str = Field(default="", max_length=200000)
    save: bool = True


class AnalysisResponse(BaseModel):
    analysis_id: str | None = None
    source: str
    filename: str | None = None
    source_type: str | None = None
    characters: int = Field(ge=0)
    analysis: AnalysisResult


class StoredAnalysisResponse(BaseModel):
    analysis_id: str
    source: str
    created_at: datetime
    analysis: AnalysisResult
