from __future__ import annotations

from typing import Any, Protocol

from pydantic import BaseModel, Field


class StoredAsset(BaseModel):
    asset_id: str
    owner_id: str
    title: str = ""
    content: Any = Field(default_factory=dict)
    health_score: int = Field(default=0, ge=0, le=100)


class AssetStoreError(RuntimeError):
    def __init__(self, message: str, *, status_code: int = 503):
        super().__init__(message)
        self.status_code = status_code


class AssetStore(Protocol):
    def find_owned_asset(self, owner_id: str, asset_id: str) -> StoredAsset | None:
        """Return the asset only when it exists and belongs to ``owner_id``."""

    def update_health_score(self, asset_id: str, score: int) -> None:
        """Persist ``score`` as the asset's health score; raise AssetStoreError on failure."""
