import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_scanner.core.config.scoring import (  # noqa: E402
    clear_scoring_config_cache,
    get_scoring_config,
    get_scoring_value,
)


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("matching.max_keywords"), 30)
        self.assertEqual(get_scoring_value("matching.min_keyword_frequency"), 2)
        self.assertEqual(get_scoring_value("critique.low_score_threshold"), 70)

    def test_missing_path_returns_default(self):
        self.assertEqual(get_scoring_value("matching.nope", 7), 7)
        self.assertEqual(get_scoring_value("matching.max_keywords.deeper", "x"), "x")
        self.assertIsNone(get_scoring_value(""))


class ScoringConfigOverrideTests(unittest.TestCase):
    def setUp(self):
        self._tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmpdir.cleanup)
        # Each test loads its own file; drop it again so later tests see the repo config.
        clear_scoring_config_cache()
        self.addCleanup(clear_scoring_config_cache)

    def _write(self, text: str) -> str:
        path = Path(self._tmpdir.name) / "scoring.yaml"
        path.write_text(text, encoding="utf-8")
        return str(path)

    def test_override_path_is_used(self):
        path = self._write("matching:\n  max_keywords: 5\n")
        with patch.dict(os.environ, {"SCORING_CONFIG_PATH": path}):
            self.assertEqual(get_scoring_value("matching.max_keywords"), 5)
            self.assertEqual(get_scoring_value("matching.min_keyword_frequency", 2), 2)

    def test_missing_file_raises(self):
        missing = str(Path(self._tmpdir.name) / "absent.yaml")
        with patch.dict(os.environ, {"SCORING_CONFIG_PATH": missing}):
            with self.assertRaises(RuntimeError):
                get_scoring_config()

    def test_invalid_yaml_raises(self):
        path = self._write("matching: [unclosed\n")
        with patch.dict(os.environ, {"SCORING_CONFIG_PATH": path}):
            with self.assertRaises(RuntimeError):
                get_scoring_config()

    def test_non_integer_tunable_raises(self):
        path = self._write("matching:\n  max_keywords: many\n")
        with patch.dict(os.environ, {"SCORING_CONFIG_PATH": path}):
            with self.assertRaises(RuntimeError):
                get_scoring_config()


if __name__ == "__main__":
    unittest.main()
