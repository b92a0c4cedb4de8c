from __future__ import annotations

import os
from typing import Final

_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def resolve_log_level(value: str | None) -> str:
    if not value:
        return "INFO"
    normalized = value.strip().upper()
    if normalized in _LOG_LEVELS:
        return normalized
    return "INFO"


DOCS_FILE: Final[str | None] = os.getenv("LSE_DOCS_FILE") or None
NOISE_WORDS_FILE: Final[str | None] = os.getenv("LSE_NOISE_WORDS_FILE") or None
LOG_LEVEL: Final[str] = resolve_log_level(os.getenv("LSE_LOG_LEVEL"))
