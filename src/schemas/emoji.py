from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import FrozenSet, Iterable, Iterator, List, Optional


class EmojiRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    glyph: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    tags: FrozenSet[str] = frozenset()

    @field_validator("label")
    @classmethod
    def lowercase_label(cls, value: str) -> str:
        return value.lower()

    @field_validator("tags")
    @classmethod
    def lowercase_tags(cls, value: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(tag.lower() for tag in value)


# Filter parameters for a single search call; built per request and thrown away
class SearchParams(BaseModel):
    include: List[str] = []
    exclude: List[str] = []
    distinct: bool = False  # emit each record at most once instead of once per matching include term


# Ordered records copied into a tuple, never changed after construction
class EmojiCatalog:
    def __init__(self, records: Iterable[EmojiRecord]):
        self._records = tuple(records)

    @classmethod
    def from_dicts(cls, items: Iterable[dict]) -> "EmojiCatalog":
        return cls(EmojiRecord(**item) for item in items)

    @property
    def records(self):
        return self._records

    def find(self, label: str) -> Optional[EmojiRecord]:
        wanted = label.lower()
        for record in self._records:
            if record.label == wanted:
                return record
        return None

    def __iter__(self) -> Iterator[EmojiRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
