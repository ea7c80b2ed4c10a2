import json
from typing import Optional
from pydantic import ValidationError
from src.schemas.emoji import EmojiCatalog
from src.utils.constants import EMOJI_CATALOG
from src.utils.errors import CatalogError
from src.utils.logger import logger


# Bundled catalog without a path, otherwise a JSON list of {glyph, label, tags}; raises CatalogError
def load_catalog(path: Optional[str] = None) -> EmojiCatalog:
    if not path:
        catalog = EmojiCatalog.from_dicts(EMOJI_CATALOG)
        logger.info(f"Loaded bundled emoji catalog with {len(catalog)} records")
        return catalog

    logger.info(f"Loading emoji catalog from {path}")
    try:
        with open(path, encoding="utf-8") as f:
            items = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read emoji catalog {path}: {e}")
        raise CatalogError(f"Could not read emoji catalog {path}: {e}") from e

    if not isinstance(items, list):
        logger.error(f"Emoji catalog {path} is not a JSON list")
        raise CatalogError(f"Emoji catalog {path} must contain a JSON list of records")

    try:
        catalog = EmojiCatalog.from_dicts(items)
    except (TypeError, ValidationError) as e:
        logger.error(f"Invalid record in emoji catalog {path}: {e}")
        raise CatalogError(f"Invalid record in emoji catalog {path}: {e}") from e

    logger.info(f"Loaded {len(catalog)} emoji records from {path}")
    return catalog
