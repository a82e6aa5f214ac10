from __future__ import annotations

import re

_NOISE_RE = re.compile(r"[^a-z0-9\s+#]")
_MIN_TOKEN_LENGTH = 3


def tokenize(text: str) -> list[str]:
    """Lowercase word tokens longer than two characters.

    Anything outside ``[a-z0-9+#]`` and whitespace becomes a space, so
    "C++" and "C#" survive while punctuation splits words.
    """
    if not text:
        return []
    cleaned = _NOISE_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) >= _MIN_TOKEN_LENGTH]
