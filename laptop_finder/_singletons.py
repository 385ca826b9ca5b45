# laptop_finder/_singletons.py
from functools import lru_cache

from .catalog_build import load_catalog
from .config import CATALOG_SEED_PATH
from .storage import CatalogStore


@lru_cache(maxsize=1)
def get_store() -> CatalogStore:
    return CatalogStore(load_catalog(CATALOG_SEED_PATH))
