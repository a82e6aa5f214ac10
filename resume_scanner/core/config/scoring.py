from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_DEFAULT_SCORING_CONFIG_PATH = Path(__file__).resolve().parents[3] / "config" / "scoring.yaml"

# Every tunable the engine reads must be a non-negative integer.
_INTEGER_KEYS = (
    "matching.min_keyword_frequency",
    "matching.max_keywords",
    "matching.response_keyword_limit",
    "matching.low_match_threshold",
    "matching.strong_match_threshold",
    "matching.missing_hint_count",
    "critique.low_score_threshold",
    "seo.max_keywords",
    "seo.response_keyword_limit",
)


def scoring_config_path() -> Path:
    override = os.getenv("SCORING_CONFIG_PATH")
    return Path(override) if override else _DEFAULT_SCORING_CONFIG_PATH


def _lookup(config: dict[str, Any], path: str) -> Any:
    current: Any = config
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def _validate(config: dict[str, Any], path: Path) -> None:
    for key in _INTEGER_KEYS:
        value = _lookup(config, key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise RuntimeError(
                f"Invalid scoring config '{path}': '{key}' must be a non-negative integer, got {value!r}."
            )


def get_scoring_config() -> dict[str, Any]:
    """Load scoring config from config/scoring.yaml (or SCORING_CONFIG_PATH) and cache it."""
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    path = scoring_config_path()
    if not path.exists():
        raise RuntimeError(
            f"Scoring config not found at '{path}'. "
            "Expected file: config/scoring.yaml"
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")

    _validate(parsed, path)
    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def clear_scoring_config_cache() -> None:
    global _SCORING_CONFIG_CACHE
    _SCORING_CONFIG_CACHE = None


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'matching.max_keywords'."""
    if not path:
        return default

    value = _lookup(get_scoring_config(), path)
    return default if value is None else value
