from .scanner import (
    AssetRequest,
    AtsCheckResult,
    AtsReport,
    CritiqueReport,
    MatchResult,
    ScanRequest,
    SeoKeywordsRequest,
    SeoKeywordsResponse,
)

__all__ = [
    "AssetRequest",
    "AtsCheckResult",
    "AtsReport",
    "CritiqueReport",
    "MatchResult",
    "ScanRequest",
    "SeoKeywordsRequest",
    "SeoKeywordsResponse",
]
