import os
import tempfile

# Settings are frozen on first import of the package, so point the default
# store at a throwaway location before any test module is collected.
_TEST_DATA_DIR = tempfile.mkdtemp(prefix="resume-scanner-tests-")
os.environ["ASSET_STORE_BACKEND"] = "memory"
os.environ["ASSET_DB_PATH"] = os.path.join(_TEST_DATA_DIR, "assets.db")
