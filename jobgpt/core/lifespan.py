from contextlib import asynccontextmanager
import logging

from jobgpt.storage.store import get_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    store = get_store()
    store.init_schema()
    logger.info("startup_complete title=%s", app.title)
    yield
    store.close()
