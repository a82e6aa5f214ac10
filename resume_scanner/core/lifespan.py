from contextlib import asynccontextmanager
import logging

from resume_scanner.assets import get_default_asset_store
from resume_scanner.core.config import settings
from resume_scanner.core.config.scoring import get_scoring_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    # Fail at startup rather than on the first scan if the config is broken.
    get_scoring_config()
    store = get_default_asset_store()
    logger.info("asset_store_ready backend=%s", settings.asset_store_backend)
    yield
    close = getattr(store, "close", None)
    if callable(close):
        close()
