from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable

from resume_scanner.schemas.scanner import AtsCheckResult, AtsReport

from .content import serialize_content

_ACTION_VERB_RE = re.compile(r"\b(led|built|managed|created|improved|developed|designed)\b")


def _contains_any(*markers: str) -> Callable[[str], bool]:
    return lambda text: any(marker in text for marker in markers)


@dataclass(frozen=True)
class AtsCheck:
    name: str
    weight: int
    passes: Callable[[str], bool]


# Evaluated in order against the lowercased serialized content; weights sum to 100.
ATS_CHECKS: tuple[AtsCheck, ...] = (
    AtsCheck("Has contact info", 15, _contains_any("email", "phone")),
    AtsCheck("Has summary/objective", 15, _contains_any("summary", "objective")),
    AtsCheck("Has work experience", 20, _contains_any("experience", "work")),
    AtsCheck("Has education section", 15, _contains_any("education", "degree")),
    AtsCheck("Has skills section", 15, _contains_any("skill")),
    AtsCheck("Uses action verbs", 10, lambda text: bool(_ACTION_VERB_RE.search(text))),
    AtsCheck("No images in content (ATS-safe)", 10, lambda text: "image" not in text),
)


def evaluate_checklist(asset_id: str, content: Any) -> AtsReport:
    text = serialize_content(content).lower()
    checks = [AtsCheckResult(name=check.name, passed=check.passes(text), weight=check.weight) for check in ATS_CHECKS]
    return AtsReport(
        asset_id=asset_id,
        ats_score=sum(check.weight for check in checks if check.passed),
        checks=checks,
        improvements=[f"Fix: {check.name}" for check in checks if not check.passed],
    )
