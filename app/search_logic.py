from __future__ import annotations

from dataclasses import dataclass

from app.index_store import IndexStore
from app.schemas import SearchResponse


@dataclass(frozen=True)
class SearchOutcome:
    response: SearchResponse
    result_count: int


def _normalize(keyword: str) -> str:
    return keyword.strip().lower()


def build_search_outcome(store: IndexStore, kw1: str, kw2: str, trace_id: str) -> SearchOutcome:
    kw1 = _normalize(kw1)
    kw2 = _normalize(kw2)
    documents = store.search(kw1, kw2)
    response = SearchResponse(kw1=kw1, kw2=kw2, documents=documents, trace_id=trace_id)
    return SearchOutcome(response=response, result_count=len(documents))
