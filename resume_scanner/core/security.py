from __future__ import annotations

from fastapi import Header, HTTPException, status

from resume_scanner.core.config import settings


def check_api_key(x_api_key: str | None) -> None:
    if not settings.api_key:
        return
    if x_api_key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please provide a valid API key.",
        )


def require_owner(
    x_owner_id: str | None = Header(default=None, alias="X-Owner-Id"),
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
) -> str:
    """Resolve the calling owner; every scanner route is scoped to it."""
    check_api_key(x_api_key)
    owner_id = (x_owner_id or "").strip()
    if not owner_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Owner-Id header.",
        )
    return owner_id
