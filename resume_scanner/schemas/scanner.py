from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ScannerModel(BaseModel):
    """Base for scanner payloads: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ScanRequest(ScannerModel):
    asset_id: str = Field(min_length=1, max_length=200)
    job_description: str = Field(default="", max_length=50000)


class AssetRequest(ScannerModel):
    asset_id: str = Field(min_length=1, max_length=200)


class SeoKeywordsRequest(ScannerModel):
    text: str = Field(default="", max_length=50000)


class SeoKeywordsResponse(ScannerModel):
    keywords: list[str] = Field(default_factory=list)


class MatchResult(ScannerModel):
    asset_id: str
    match_score_pct: int = Field(ge=0, le=100)
    present_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    total_job_keywords: int = Field(ge=0)


class AtsCheckResult(ScannerModel):
    name: str
    passed: bool
    weight: int = Field(ge=0, le=100)


class AtsReport(ScannerModel):
    asset_id: str
    ats_score: int = Field(ge=0, le=100)
    checks: list[AtsCheckResult] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)


class CritiqueReport(ScannerModel):
    asset_id: str
    overall_score: int = Field(ge=0, le=100)
    readability: int = Field(ge=0, le=100)
    ats: int = Field(ge=0, le=100)
    seo: int = Field(ge=0, le=100)
    suggestions: list[str] = Field(default_factory=list)
