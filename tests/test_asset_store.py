import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_scanner.assets import AssetStoreError, InMemoryAssetStore, SqliteAssetStore  # noqa: E402

SECTIONED_CONTENT = {
    "sections": [
        {"type": "summary", "content": "Backend engineer focused on payments"},
        {"type": "skills", "content": []},
    ]
}


class _AssetStoreContract:
    def make_store(self):
        raise NotImplementedError

    def setUp(self):
        self.store = self.make_store()

    def test_save_applies_section_health(self):
        saved = self.store.save_asset("owner-1", "asset-1", SECTIONED_CONTENT, title="Resume")
        self.assertEqual(saved.health_score, 50)
        found = self.store.find_owned_asset("owner-1", "asset-1")
        self.assertIsNotNone(found)
        self.assertEqual(found.content, SECTIONED_CONTENT)
        self.assertEqual(found.title, "Resume")
        self.assertEqual(found.health_score, 50)

    def test_other_owner_cannot_see_asset(self):
        self.store.save_asset("owner-1", "asset-1", {"summary": "x"})
        self.assertIsNone(self.store.find_owned_asset("owner-2", "asset-1"))
        self.assertIsNone(self.store.find_owned_asset("owner-1", "missing"))

    def test_update_health_score_is_visible_on_next_fetch(self):
        self.store.save_asset("owner-1", "asset-1", {"summary": "x"})
        self.store.update_health_score("asset-1", 81)
        self.assertEqual(self.store.find_owned_asset("owner-1", "asset-1").health_score, 81)

    def test_update_unknown_asset_raises(self):
        with self.assertRaises(AssetStoreError):
            self.store.update_health_score("missing", 50)

    def test_clear_removes_assets(self):
        self.store.save_asset("owner-1", "asset-1", {})
        self.store.clear()
        self.assertIsNone(self.store.find_owned_asset("owner-1", "asset-1"))


class InMemoryAssetStoreTests(_AssetStoreContract, unittest.TestCase):
    def make_store(self):
        return InMemoryAssetStore()

    def test_returned_assets_are_copies(self):
        self.store.save_asset("owner-1", "asset-1", {"skills": ["python"]})
        found = self.store.find_owned_asset("owner-1", "asset-1")
        found.content["skills"].append("go")
        self.assertEqual(self.store.find_owned_asset("owner-1", "asset-1").content, {"skills": ["python"]})


class SqliteAssetStoreTests(_AssetStoreContract, unittest.TestCase):
    def make_store(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        store = SqliteAssetStore(str(Path(self._tmpdir.name) / "nested" / "assets.db"))
        self.addCleanup(store.close)
        return store

    def test_save_is_an_upsert(self):
        self.store.save_asset("owner-1", "asset-1", {"summary": "old"})
        self.store.save_asset("owner-1", "asset-1", {"summary": "new"}, title="v2")
        found = self.store.find_owned_asset("owner-1", "asset-1")
        self.assertEqual(found.content, {"summary": "new"})
        self.assertEqual(found.title, "v2")

    def test_read_failure_raises_store_error(self):
        self.store.save_asset("owner-1", "asset-1", {"summary": "x"})
        self.store._get_connection().close()
        with self.assertRaises(AssetStoreError):
            self.store.find_owned_asset("owner-1", "asset-1")

    def test_reconnects_after_close(self):
        self.store.save_asset("owner-1", "asset-1", {"summary": "x"})
        self.store.close()
        self.assertIsNotNone(self.store.find_owned_asset("owner-1", "asset-1"))


if __name__ == "__main__":
    unittest.main()
