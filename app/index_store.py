from __future__ import annotations

import threading

from app.config import DOCS_FILE, NOISE_WORDS_FILE
from engine import KeywordIndex, Occurrence, make_index


class IndexStore:
    """Process-wide keyword index. Merges and reads share one lock, so a query never
    sees a document that is only partly merged."""

    def __init__(self, index: KeywordIndex | None = None) -> None:
        self._index = index if index is not None else KeywordIndex()
        self._lock = threading.Lock()

    @classmethod
    def from_env(cls, docs_file: str | None = None, noise_words_file: str | None = None) -> "IndexStore":
        docs_file = docs_file or DOCS_FILE
        noise_words_file = noise_words_file or NOISE_WORDS_FILE
        if docs_file and noise_words_file:
            return cls(make_index(docs_file, noise_words_file))
        return cls()

    @property
    def index(self) -> KeywordIndex:
        return self._index

    def add_document(self, document: str, text: str) -> dict[str, Occurrence]:
        with self._lock:
            return self._index.add_document(document, text)

    def search(self, kw1: str, kw2: str) -> list[str]:
        with self._lock:
            return self._index.top5_search(kw1, kw2)

    def occurrences(self, keyword: str) -> list[Occurrence] | None:
        with self._lock:
            if keyword.lower() not in self._index:
                return None
            return self._index.occurrences(keyword)
