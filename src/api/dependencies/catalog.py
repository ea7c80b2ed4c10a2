import os                              # Import os to read environment variables
import threading
from fastapi import Depends
from dotenv import load_dotenv, find_dotenv # Import functions to load variables from a .env file
from src.schemas.emoji import EmojiCatalog
from src.services.catalog_service import load_catalog
from src.services.search_service import EmojiSearchEngine
from src.utils.errors import CatalogError, server_error
from src.utils.logger import logger
catalog = None
catalog_lock = threading.Lock()  # guards the first load; sync dependencies run in a threadpool
# Load the catalog once and hand the same read-only instance to every request
def get_catalog() -> EmojiCatalog:
    global catalog
    if catalog is not None:
        return catalog

    with catalog_lock:
        if catalog is None:
            load_dotenv(find_dotenv())                      # Load environment variables from .env file
            catalog_path = os.environ.get("EMOJI_CATALOG_PATH")  # Optional JSON catalog, bundled data otherwise
            try:
                catalog = load_catalog(catalog_path)
            except CatalogError as e:
                logger.error(f"Emoji catalog unavailable: {e}")
                server_error("Emoji catalog unavailable")
    return catalog

def get_search_engine(catalog: EmojiCatalog = Depends(get_catalog)) -> EmojiSearchEngine:
    return EmojiSearchEngine(catalog)

# Function to drop the cached catalog so the next request reloads it
def reset_catalog():
    global catalog
    with catalog_lock:
        if catalog is not None:
            logger.info("Emoji catalog cache cleared")
            catalog = None
