from __future__ import annotations

from typing import Any

from resume_scanner.core.config.scoring import get_scoring_value
from resume_scanner.schemas.scanner import CritiqueReport

from .content import round_half_up, serialized_length

_FILLED_SECTION_MIN_CHARS = 20


def _capped(base: int, length: int, divisor: int) -> int:
    return min(100, round_half_up(base + length / divisor))


def score_critique(asset_id: str, content: Any) -> CritiqueReport:
    """Length-derived readability/ATS/SEO sub-scores and their rounded mean.

    These are heuristics over the serialized size only; no text analysis
    happens here.
    """
    length = serialized_length(content)
    readability = _capped(50, length, 500)
    ats = _capped(60, length, 800)
    seo = _capped(55, length, 600)
    overall = round_half_up((readability + ats + seo) / 3)

    threshold = int(get_scoring_value("critique.low_score_threshold", 70))
    rules = (
        (overall, "Add more detailed content to each section"),
        (readability, "Use shorter sentences and clearer language"),
        (ats, "Ensure section headings match standard ATS expectations"),
        (seo, "Add targeted keywords in your summary and skills sections"),
    )
    return CritiqueReport(
        asset_id=asset_id,
        overall_score=overall,
        readability=readability,
        ats=ats,
        seo=seo,
        suggestions=[message for score, message in rules if score < threshold],
    )


def section_health_score(content: Any) -> int:
    """Share of ``content["sections"]`` entries that carry real content, 0-100."""
    sections = content.get("sections") if isinstance(content, dict) else None
    if not isinstance(sections, list) or not sections:
        return 0

    filled = 0
    for section in sections:
        if not isinstance(section, dict):
            continue
        body = section.get("content")
        if body and serialized_length(body) > _FILLED_SECTION_MIN_CHARS:
            filled += 1
    return min(round_half_up(filled / max(len(sections), 1) * 100), 100)
