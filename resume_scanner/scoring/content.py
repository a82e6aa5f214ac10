from __future__ import annotations

import json
import math
from typing import Any

# Beyond this magnitude browsers print floats in exponent form.
_EXPONENT_FORM_MIN = 1e21


def _js_number_form(value: Any) -> Any:
    """Map floats onto the shape a browser's JSON writer emits: 4.0 -> 4, NaN/inf -> null."""
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value.is_integer() and abs(value) < _EXPONENT_FORM_MIN:
            return int(value)
        return value
    if isinstance(value, dict):
        return {key: _js_number_form(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_js_number_form(item) for item in value]
    return value


def serialize_content(content: Any) -> str:
    """Render asset content the way it is measured everywhere: compact JSON, key order kept."""
    return json.dumps(_js_number_form(content), ensure_ascii=False, separators=(",", ":"))


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(text.encode("utf-16-le")) // 2


def serialized_length(content: Any) -> int:
    return utf16_length(serialize_content(content))


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
