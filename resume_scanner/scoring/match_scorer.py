from __future__ import annotations

from typing import Any

from resume_scanner.core.config.scoring import get_scoring_value
from resume_scanner.schemas.scanner import MatchResult

from .content import round_half_up, serialize_content
from .keyphrases import extract_key_phrases
from .tokenizer import tokenize


def _match_suggestions(score: int, missing: list[str]) -> list[str]:
    low_threshold = int(get_scoring_value("matching.low_match_threshold", 50))
    strong_threshold = int(get_scoring_value("matching.strong_match_threshold", 80))
    hint_count = int(get_scoring_value("matching.missing_hint_count", 5))

    # Rules are independent; more than one can fire.
    rules = (
        (score < low_threshold, lambda: "Add more relevant keywords from the job description"),
        (
            len(missing) > hint_count,
            lambda: f"Include these missing keywords: {', '.join(missing[:hint_count])}",
        ),
        (score >= strong_threshold, lambda: "Great match! Consider tailoring your summary for the specific role."),
    )
    return [message() for fired, message in rules if fired]


def score_match(asset_id: str, content: Any, job_text: str) -> MatchResult:
    content_tokens = set(tokenize(serialize_content(content).lower()))
    keywords = [word for word, _ in extract_key_phrases(job_text)]

    present = [word for word in keywords if word in content_tokens]
    missing = [word for word in keywords if word not in content_tokens]
    score = round_half_up(len(present) / max(len(keywords), 1) * 100)

    limit = int(get_scoring_value("matching.response_keyword_limit", 15))
    return MatchResult(
        asset_id=asset_id,
        match_score_pct=score,
        present_keywords=present[:limit],
        missing_keywords=missing[:limit],
        suggestions=_match_suggestions(score, missing),
        total_job_keywords=len(keywords),
    )
