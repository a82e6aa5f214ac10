from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_scanner.scoring import evaluate_checklist, score_critique, score_match  # noqa: E402


def _load_content(path: Path) -> Any:
    raw = path.read_text(encoding="utf-8")
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        # Plain-text resumes are scored as a single string.
        return raw


def build_report(content: Any, job_text: str | None, asset_id: str) -> dict[str, Any]:
    report: dict[str, Any] = {
        "ats": evaluate_checklist(asset_id, content).model_dump(by_alias=True),
        "critique": score_critique(asset_id, content).model_dump(by_alias=True),
    }
    if job_text is not None:
        report["match"] = score_match(asset_id, content, job_text).model_dump(by_alias=True)
    return report


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score an asset file offline against a job description.")
    parser.add_argument("asset", help="Path to the asset content (JSON or plain text)")
    parser.add_argument("--job", help="Path to a job description text file")
    parser.add_argument("--asset-id", default="local", help="Asset id to echo in the report")
    parser.add_argument("--out", help="Write the JSON report here instead of stdout")
    args = parser.parse_args(argv)

    content = _load_content(Path(args.asset))
    job_text = Path(args.job).read_text(encoding="utf-8") if args.job else None
    rendered = json.dumps(build_report(content, job_text, args.asset_id), ensure_ascii=False, indent=2)

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(rendered + "\n", encoding="utf-8")
    else:
        print(rendered)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
