from fastapi import APIRouter, Depends, HTTPException, Request

from resume_scanner.assets import AssetStoreError
from resume_scanner.core.config import settings
from resume_scanner.core.config.scoring import get_scoring_value
from resume_scanner.core.rate_limit import rate_limit
from resume_scanner.core.security import require_owner
from resume_scanner.schemas.scanner import (
    AssetRequest,
    AtsReport,
    CritiqueReport,
    MatchResult,
    ScanRequest,
    SeoKeywordsRequest,
    SeoKeywordsResponse,
)
from resume_scanner.scoring import extract_seo_keywords
from resume_scanner.services.scanner_service import (
    AssetNotFoundError,
    critique_asset,
    duplicate_scan,
    evaluate_ats,
    scan_match,
)

router = APIRouter()


def _raise_scanner_http_error(exc: AssetNotFoundError | AssetStoreError) -> None:
    raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc


@router.post("/scanner/scan", response_model=MatchResult)
@rate_limit()
async def scanner_scan(request: Request, payload: ScanRequest, owner_id: str = Depends(require_owner)):
    _ = request
    try:
        return scan_match(owner_id, payload.asset_id, payload.job_description)
    except (AssetNotFoundError, AssetStoreError) as exc:
        _raise_scanner_http_error(exc)


@router.post("/scanner/duplicate", response_model=MatchResult)
@rate_limit()
async def scanner_duplicate(request: Request, payload: ScanRequest, owner_id: str = Depends(require_owner)):
    _ = request
    try:
        return duplicate_scan(owner_id, payload.asset_id, payload.job_description)
    except (AssetNotFoundError, AssetStoreError) as exc:
        _raise_scanner_http_error(exc)


@router.post("/scanner/ats", response_model=AtsReport)
@rate_limit()
async def scanner_ats(request: Request, payload: AssetRequest, owner_id: str = Depends(require_owner)):
    _ = request
    try:
        return evaluate_ats(owner_id, payload.asset_id)
    except (AssetNotFoundError, AssetStoreError) as exc:
        _raise_scanner_http_error(exc)


@router.post("/scanner/critique", response_model=CritiqueReport)
@rate_limit(settings.critique_rate_limit)
async def scanner_critique(request: Request, payload: AssetRequest, owner_id: str = Depends(require_owner)):
    _ = request
    try:
        return critique_asset(owner_id, payload.asset_id)
    except (AssetNotFoundError, AssetStoreError) as exc:
        _raise_scanner_http_error(exc)


@router.post("/scanner/seo-keywords", response_model=SeoKeywordsResponse)
@rate_limit()
async def scanner_seo_keywords(request: Request, payload: SeoKeywordsRequest, _: str = Depends(require_owner)):
    limit = int(get_scoring_value("seo.response_keyword_limit", 12))
    return SeoKeywordsResponse(keywords=extract_seo_keywords(payload.text)[:limit])
