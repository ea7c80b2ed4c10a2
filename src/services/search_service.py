from typing import List
from src.schemas.emoji import EmojiCatalog, EmojiRecord, SearchParams


# Label contains the term or a tag equals it, ignoring case; blank terms never match
def matches(record: EmojiRecord, term: str) -> bool:
    term = term.lower()
    if not term.strip():
        return False
    return term in record.label.lower() or term in record.tags


# Include/exclude filter over a catalog it only reads
class EmojiSearchEngine:
    def __init__(self, catalog: EmojiCatalog):
        self.catalog = catalog

    def search(self, params: SearchParams) -> List[EmojiRecord]:
        results = []
        for record in self.catalog:
            # Exclusion always wins, include terms are not even looked at
            if any(matches(record, term) for term in params.exclude):
                continue
            for term in params.include:
                if matches(record, term):
                    # Without distinct, a record is added once per matching include term
                    results.append(record)
                    if params.distinct:
                        break
        return results
