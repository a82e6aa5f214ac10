from __future__ import annotations

import json
import logging
import os
import sqlite3
import threading
from datetime import datetime, timezone
from typing import Any

from resume_scanner.scoring.critique import section_health_score

from .provider import AssetStoreError, StoredAsset

logger = logging.getLogger(__name__)


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SqliteAssetStore:
    """Assets keyed by id, one shared connection, WAL journal."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._conn: sqlite3.Connection | None = None
        self._lock = threading.Lock()

    def _get_connection(self) -> sqlite3.Connection:
        with self._lock:
            if self._conn is not None:
                return self._conn

            directory = os.path.dirname(self._db_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            conn = sqlite3.connect(
                self._db_path,
                check_same_thread=False,
                timeout=5,
                isolation_level=None,
            )
            conn.execute("PRAGMA journal_mode=WAL;")
            conn.execute("PRAGMA synchronous=NORMAL;")
            conn.execute("PRAGMA busy_timeout=5000;")
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS assets (
                    asset_id TEXT PRIMARY KEY,
                    owner_id TEXT NOT NULL,
                    title TEXT NOT NULL,
                    content_json TEXT NOT NULL,
                    health_score INTEGER NOT NULL DEFAULT 0,
                    updated_at TEXT NOT NULL
                );
                """
            )
            conn.execute(
                """
                CREATE INDEX IF NOT EXISTS idx_assets_owner
                ON assets (owner_id, asset_id);
                """
            )
            self._conn = conn
            return conn

    def save_asset(self, owner_id: str, asset_id: str, content: Any, title: str = "") -> StoredAsset:
        conn = self._get_connection()
        health_score = section_health_score(content)
        with self._lock:
            conn.execute(
                """
                INSERT INTO assets (asset_id, owner_id, title, content_json, health_score, updated_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(asset_id) DO UPDATE SET
                    owner_id = excluded.owner_id,
                    title = excluded.title,
                    content_json = excluded.content_json,
                    health_score = excluded.health_score,
                    updated_at = excluded.updated_at
                """,
                (
                    asset_id,
                    owner_id,
                    title,
                    json.dumps(content, ensure_ascii=False),
                    health_score,
                    _utc_now(),
                ),
            )
        return StoredAsset(
            asset_id=asset_id,
            owner_id=owner_id,
            title=title,
            content=content,
            health_score=health_score,
        )

    def find_owned_asset(self, owner_id: str, asset_id: str) -> StoredAsset | None:
        conn = self._get_connection()
        try:
            with self._lock:
                cur = conn.execute(
                    """
                    SELECT asset_id, owner_id, title, content_json, health_score
                    FROM assets
                    WHERE asset_id = ? AND owner_id = ?
                    """,
                    (asset_id, owner_id),
                )
                row = cur.fetchone()
        except sqlite3.Error as exc:
            logger.exception("asset_read_failed asset_id=%s", asset_id)
            raise AssetStoreError(f"Failed to load asset '{asset_id}'.") from exc

        if not row:
            return None

        return StoredAsset(
            asset_id=row[0],
            owner_id=row[1],
            title=row[2],
            content=json.loads(row[3]) if row[3] else {},
            health_score=int(row[4] or 0),
        )

    def update_health_score(self, asset_id: str, score: int) -> None:
        conn = self._get_connection()
        try:
            with self._lock:
                cur = conn.execute(
                    "UPDATE assets SET health_score = ?, updated_at = ? WHERE asset_id = ?",
                    (score, _utc_now(), asset_id),
                )
        except sqlite3.Error as exc:
            logger.exception("asset_health_score_write_failed asset_id=%s", asset_id)
            raise AssetStoreError(f"Failed to save health score for asset '{asset_id}'.") from exc
        if cur.rowcount == 0:
            raise AssetStoreError(f"Asset '{asset_id}' disappeared before its health score was saved.")

    def clear(self) -> None:
        conn = self._get_connection()
        with self._lock:
            conn.execute("DELETE FROM assets")

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
