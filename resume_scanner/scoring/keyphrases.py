from __future__ import annotations

import re
from collections import Counter

from resume_scanner.core.config.scoring import get_scoring_value

from .tokenizer import tokenize

_SEO_NOISE_RE = re.compile(r"[^a-z0-9\s+#-]")
_SEO_STOPWORDS = {
    "the",
    "and",
    "for",
    "with",
    "from",
    "that",
    "this",
    "your",
    "have",
    "has",
    "are",
    "was",
    "will",
    "been",
    "into",
    "our",
    "you",
    "about",
    "portfolio",
    "resume",
    "cover",
    "letter",
    "section",
    "professional",
    "experience",
    "skills",
    "contact",
}

KeywordRanking = list[tuple[str, int]]


def _rank(words: list[str], *, min_frequency: int, limit: int) -> KeywordRanking:
    # Counter keeps first-occurrence order and sorted() is stable, so ties stay in that order.
    counts = Counter(words)
    ranked = sorted(
        ((word, count) for word, count in counts.items() if count >= min_frequency),
        key=lambda item: item[1],
        reverse=True,
    )
    return ranked[: max(0, limit)]


def extract_key_phrases(job_text: str) -> KeywordRanking:
    """Rank repeated job-description tokens by frequency, most frequent first."""
    return _rank(
        tokenize(job_text),
        min_frequency=int(get_scoring_value("matching.min_keyword_frequency", 2)),
        limit=int(get_scoring_value("matching.max_keywords", 30)),
    )


def extract_seo_keywords(text: str) -> list[str]:
    cleaned = _SEO_NOISE_RE.sub(" ", (text or "").lower())
    words = [word for word in cleaned.split() if len(word) > 2 and word not in _SEO_STOPWORDS]
    ranked = _rank(words, min_frequency=1, limit=int(get_scoring_value("seo.max_keywords", 16)))
    return [word for word, _ in ranked]
