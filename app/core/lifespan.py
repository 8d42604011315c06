from contextlib import asynccontextmanager
import logging

from app.core.matching_config import get_matching_config
from app.taxonomy import get_default_term_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    get_matching_config()
    catalog = get_default_term_catalog()
    logger.info("term_catalog_loaded multi_word_terms=%s", len(catalog.multi_word_technical_terms()))
    yield
