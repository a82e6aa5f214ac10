from __future__ import annotations

import logging

from resume_scanner.assets import AssetStore, AssetStoreError, StoredAsset, get_default_asset_store
from resume_scanner.schemas.scanner import AtsReport, CritiqueReport, MatchResult
from resume_scanner.scoring import evaluate_checklist, score_critique, score_match

logger = logging.getLogger(__name__)


class AssetNotFoundError(RuntimeError):
    def __init__(self, message: str = "Asset not found", *, status_code: int = 404):
        super().__init__(message)
        self.status_code = status_code


def _load_owned_asset(store: AssetStore, owner_id: str, asset_id: str) -> StoredAsset:
    asset = store.find_owned_asset(owner_id, asset_id)
    if asset is None:
        logger.info("scanner_asset_not_found owner_id=%s asset_id=%s", owner_id, asset_id)
        raise AssetNotFoundError()
    return asset


def scan_match(
    owner_id: str,
    asset_id: str,
    job_text: str,
    *,
    store: AssetStore | None = None,
) -> MatchResult:
    asset = _load_owned_asset(store or get_default_asset_store(), owner_id, asset_id)
    result = score_match(asset.asset_id, asset.content, job_text or "")
    logger.info(
        "scanner_scan asset_id=%s score=%s keywords=%s",
        asset_id,
        result.match_score_pct,
        result.total_job_keywords,
    )
    return result


def duplicate_scan(
    owner_id: str,
    asset_id: str,
    job_text: str,
    *,
    store: AssetStore | None = None,
) -> MatchResult:
    """Same computation as ``scan_match``; copying the asset happens elsewhere."""
    return scan_match(owner_id, asset_id, job_text, store=store)


def evaluate_ats(owner_id: str, asset_id: str, *, store: AssetStore | None = None) -> AtsReport:
    asset = _load_owned_asset(store or get_default_asset_store(), owner_id, asset_id)
    report = evaluate_checklist(asset.asset_id, asset.content)
    logger.info("scanner_ats asset_id=%s score=%s", asset_id, report.ats_score)
    return report


def critique_asset(owner_id: str, asset_id: str, *, store: AssetStore | None = None) -> CritiqueReport:
    store = store or get_default_asset_store()
    asset = _load_owned_asset(store, owner_id, asset_id)
    report = score_critique(asset.asset_id, asset.content)
    try:
        store.update_health_score(asset.asset_id, report.overall_score)
    except AssetStoreError:
        logger.warning("scanner_critique_persist_failed asset_id=%s", asset_id)
        raise
    logger.info("scanner_critique asset_id=%s overall=%s", asset_id, report.overall_score)
    return report
