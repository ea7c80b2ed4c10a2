# Import BaseModel from Pydantic for request/response validation
from pydantic import BaseModel
from typing import List, Optional
from src.schemas.emoji import EmojiRecord, SearchParams


# Body of a search request; missing (or null) lists mean "no terms"
class SearchRequest(BaseModel):
    include: Optional[List[str]] = None
    exclude: Optional[List[str]] = None
    distinct: bool = False

    def to_params(self) -> SearchParams:
        return SearchParams(include=self.include or [], exclude=self.exclude or [], distinct=self.distinct)


# A single emoji as returned by the API
class EmojiResponse(BaseModel):
    glyph: str
    label: str
    tags: List[str]

    @classmethod
    def from_record(cls, record: EmojiRecord) -> "EmojiResponse":
        return cls(glyph=record.glyph, label=record.label, tags=sorted(record.tags))
