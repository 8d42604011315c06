from functools import lru_cache

from app.core.config import settings

from .local_catalog import LocalTermCatalog
from .provider import TermCatalog


@lru_cache(maxsize=1)
def get_default_term_catalog() -> TermCatalog:
    return LocalTermCatalog(settings.term_catalog_path)


__all__ = ["TermCatalog", "LocalTermCatalog", "get_default_term_catalog"]
