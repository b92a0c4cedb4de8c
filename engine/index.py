"""In-memory keyword index with two-keyword top-5 search.

Each keyword maps to the documents it appears in, kept in descending order of
frequency. Documents must be merged one at a time: the order in which they are
merged decides how equal frequencies are ranked.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Final

from .base import DuplicateDocumentError, Occurrence
from .keywords import count_keywords
from .occurrences import insert_last_occurrence

logger = logging.getLogger("engine")

TOP_K: Final[int] = 5


class WalkState(str, Enum):
    both_active = "both_active"
    only_first_active = "only_first_active"
    only_second_active = "only_second_active"
    done = "done"

    @classmethod
    def of(cls, first_left: bool, second_left: bool) -> "WalkState":
        if first_left and second_left:
            return cls.both_active
        if first_left:
            return cls.only_first_active
        if second_left:
            return cls.only_second_active
        return cls.done


class KeywordIndex:
    def __init__(self, noise_words: Iterable[str] = ()) -> None:
        self._index: dict[str, list[Occurrence]] = {}
        self._noise_words = frozenset(word.lower() for word in noise_words)
        self._documents: list[str] = []
        self._document_ids: set[str] = set()

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._index

    def __len__(self) -> int:
        return len(self._index)

    @property
    def noise_words(self) -> frozenset[str]:
        return self._noise_words

    @property
    def documents(self) -> list[str]:
        return list(self._documents)

    def keywords(self) -> list[str]:
        return sorted(self._index)

    def occurrences(self, keyword: str) -> list[Occurrence]:
        return list(self._index.get(keyword.lower(), []))

    def load_keywords(self, document: str, text: str) -> dict[str, Occurrence]:
        return count_keywords(text, document, self._noise_words)

    def merge_keywords(self, kws: Mapping[str, Occurrence]) -> None:
        """Merge one document's keyword occurrences into the index."""
        for keyword, occurrence in kws.items():
            occs = self._index.get(keyword)
            if occs is None:
                self._index[keyword] = [occurrence]
                continue
            occs.append(occurrence)
            insert_last_occurrence(occs)

    def merge_document(self, document: str, kws: Mapping[str, Occurrence]) -> None:
        if document in self._document_ids:
            raise DuplicateDocumentError(document)
        for keyword, occurrence in kws.items():
            if occurrence.document != document:
                raise ValueError(
                    f"occurrence of {keyword!r} belongs to {occurrence.document!r}, not {document!r}"
                )
        self.merge_keywords(kws)
        self._documents.append(document)
        self._document_ids.add(document)
        logger.debug(
            json.dumps(
                {"event": "document_merged", "document": document, "keywords": len(kws)},
                ensure_ascii=False,
            )
        )

    def add_document(self, document: str, text: str) -> dict[str, Occurrence]:
        kws = self.load_keywords(document, text)
        self.merge_document(document, kws)
        return kws

    def top5_search(self, kw1: str, kw2: str) -> list[str]:
        """Documents containing ``kw1`` or ``kw2``, highest frequency first, at most five.

        Both occurrence lists are walked together. On equal frequencies the document
        from ``kw1`` is taken and both lists move on, so the ``kw2`` document at that
        position is passed over. A document already in the result is never added twice,
        but it still consumes its step in the walk.
        """
        first = self._index.get(kw1.lower(), [])
        second = self._index.get(kw2.lower(), [])
        results: list[str] = []
        i = j = 0

        while len(results) < TOP_K:
            state = WalkState.of(i < len(first), j < len(second))
            if state is WalkState.done:
                break
            if state is WalkState.only_first_active:
                candidate = first[i].document
                i += 1
            elif state is WalkState.only_second_active:
                candidate = second[j].document
                j += 1
            elif first[i].frequency > second[j].frequency:
                candidate = first[i].document
                i += 1
            elif first[i].frequency < second[j].frequency:
                candidate = second[j].document
                j += 1
            else:
                candidate = first[i].document
                i += 1
                j += 1
            if candidate not in results:
                results.append(candidate)

        return results
