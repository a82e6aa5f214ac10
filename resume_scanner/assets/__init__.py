from functools import lru_cache

from resume_scanner.core.config import settings

from .memory_store import InMemoryAssetStore
from .provider import AssetStore, AssetStoreError, StoredAsset
from .sqlite_store import SqliteAssetStore


@lru_cache(maxsize=1)
def get_default_asset_store() -> AssetStore:
    if settings.asset_store_backend == "memory":
        return InMemoryAssetStore()
    return SqliteAssetStore(settings.asset_db_path)


__all__ = [
    "AssetStore",
    "AssetStoreError",
    "StoredAsset",
    "InMemoryAssetStore",
    "SqliteAssetStore",
    "get_default_asset_store",
]
