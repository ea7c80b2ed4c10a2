from fastapi import APIRouter, Depends, Query, Path, Body  # Import FastAPI router, dependency injection, body and query/path parameters
from typing import List, Optional                       # For typing hints (list of terms, list of responses)
from src.api.dependencies.catalog import get_catalog, get_search_engine
from src.models.emoji import SearchRequest, EmojiResponse  # Pydantic models for request and response validation
from src.schemas.emoji import EmojiCatalog, SearchParams
from src.services.search_service import EmojiSearchEngine
from src.utils.errors import not_found
from src.utils.logger import logger
# Create a router for all emoji-related endpoints
router = APIRouter(tags=["Emojis"])


def run_search(engine: EmojiSearchEngine, params: SearchParams) -> List[EmojiResponse]:
    logger.info(f"Searching emojis | include={params.include} | exclude={params.exclude} | distinct={params.distinct}")
    results = [EmojiResponse.from_record(record) for record in engine.search(params)]
    logger.success(f"Search returned {len(results)} record(s)")
    return results

# Endpoint: Search with include/exclude terms sent as a JSON body
@router.post("/search", response_model=List[EmojiResponse])
async def search_emojis(
    request: Optional[SearchRequest] = Body(None),  # No body at all behaves like an empty request
    engine: EmojiSearchEngine = Depends(get_search_engine)
):
    return run_search(engine, (request or SearchRequest()).to_params())

# Endpoint: Same search driven by repeated query parameters (?include=a&include=b&exclude=c)
@router.get("/search", response_model=List[EmojiResponse])
async def search_emojis_by_query(
    include: List[str] = Query([]),
    exclude: List[str] = Query([]),
    distinct: bool = Query(False),
    engine: EmojiSearchEngine = Depends(get_search_engine)
):
    return run_search(engine, SearchParams(include=include, exclude=exclude, distinct=distinct))

# Endpoint: Get the whole catalog in catalog order
@router.get("", response_model=List[EmojiResponse])
async def list_emojis(catalog: EmojiCatalog = Depends(get_catalog)):
    logger.info(f"Listing {len(catalog)} emoji record(s)")
    return [EmojiResponse.from_record(record) for record in catalog]

# Endpoint: Get one emoji by its label
@router.get("/{label}", response_model=EmojiResponse)
async def get_emoji_by_label(
    label: str = Path(..., description="Label of the emoji, e.g. 'cat face'"),
    catalog: EmojiCatalog = Depends(get_catalog)
):
    logger.info(f"Emoji lookup | label={label}")
    record = catalog.find(label)
    if not record:
        not_found(f"No emoji found with label: {label}")
    logger.success(f"Emoji retrieved | label={record.label}")
    return EmojiResponse.from_record(record)
