from __future__ import annotations

import threading
from typing import Any

from resume_scanner.scoring.critique import section_health_score

from .provider import AssetStoreError, StoredAsset


class InMemoryAssetStore:
    def __init__(self) -> None:
        self._assets: dict[str, StoredAsset] = {}
        self._lock = threading.Lock()

    def save_asset(self, owner_id: str, asset_id: str, content: Any, title: str = "") -> StoredAsset:
        asset = StoredAsset(
            asset_id=asset_id,
            owner_id=owner_id,
            title=title,
            content=content,
            health_score=section_health_score(content),
        )
        with self._lock:
            self._assets[asset_id] = asset
        return asset.model_copy(deep=True)

    def find_owned_asset(self, owner_id: str, asset_id: str) -> StoredAsset | None:
        with self._lock:
            asset = self._assets.get(asset_id)
            if asset is None or asset.owner_id != owner_id:
                return None
            return asset.model_copy(deep=True)

    def update_health_score(self, asset_id: str, score: int) -> None:
        with self._lock:
            asset = self._assets.get(asset_id)
            if asset is None:
                raise AssetStoreError(f"Asset '{asset_id}' disappeared before its health score was saved.")
            self._assets[asset_id] = asset.model_copy(update={"health_score": score})

    def clear(self) -> None:
        with self._lock:
            self._assets.clear()
