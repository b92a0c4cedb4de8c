from __future__ import annotations

import json
import logging
from pathlib import Path

from .base import Occurrence
from .index import KeywordIndex
from .keywords import count_keywords

logger = logging.getLogger("engine")


def load_noise_words(path: str | Path) -> frozenset[str]:
    text = Path(path).read_text(encoding="utf-8")
    return frozenset(word.lower() for word in text.split())


def load_document_list(path: str | Path) -> list[str]:
    return Path(path).read_text(encoding="utf-8").split()


def load_keywords_from_document(
    path: str | Path,
    noise_words: frozenset[str] = frozenset(),
    document: str | None = None,
) -> dict[str, Occurrence]:
    p = Path(path)
    text = p.read_text(encoding="utf-8", errors="replace")
    return count_keywords(text, document or p.name, noise_words)


def make_index(docs_file: str | Path, noise_words_file: str | Path) -> KeywordIndex:
    """Build an index from a noise-word file and a file listing document files.

    Document names are resolved against the directory of ``docs_file`` and are
    ingested in the order they are listed.
    """
    index = KeywordIndex(load_noise_words(noise_words_file))
    base_dir = Path(docs_file).parent
    for name in load_document_list(docs_file):
        kws = load_keywords_from_document(base_dir / name, index.noise_words, document=name)
        index.merge_document(name, kws)

    logger.info(
        json.dumps(
            {
                "event": "index_built",
                "docs_file": str(docs_file),
                "documents": len(index.documents),
                "keywords": len(index),
            },
            ensure_ascii=False,
        )
    )
    return index
