from contextlib import asynccontextmanager
import logging

from talentmatch.core.config.scoring import get_scoring_config
from talentmatch.core.weights_store import get_weight_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    config = get_scoring_config()
    logger.info(
        "startup_scoring_ready dimensions=%s presets=%s",
        len(config.dimension_weights),
        len(config.triangle.presets),
    )
    store = get_weight_store()
    yield
    close = getattr(store, "close", None)
    if close is not None:
        close()
