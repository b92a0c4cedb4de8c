from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from typing import Final

from .base import Occurrence

PUNCTUATION: Final[str] = ".,?:;!"

# letters only, optionally followed by any run of trailing punctuation
_KEYWORD_RE: Final[re.Pattern[str]] = re.compile(r"[a-z]+[.,?:;!]*")


def get_keyword(word: str, noise_words: Iterable[str] = ()) -> str | None:
    """Return ``word`` as a lowercase keyword, or ``None`` if it is not one.

    Trailing punctuation (``. , ? : ; !``) is stripped, however many characters of it
    there are. Whatever remains must be alphabetic and must not be a noise word.
    """
    lowered = word.lower()
    if not _KEYWORD_RE.fullmatch(lowered):
        return None
    keyword = lowered.rstrip(PUNCTUATION)
    if keyword in noise_words:
        return None
    return keyword


def count_keywords(text: str, document: str, noise_words: Iterable[str] = ()) -> dict[str, Occurrence]:
    noise = noise_words if isinstance(noise_words, (set, frozenset)) else frozenset(noise_words)
    counts: Counter[str] = Counter()
    for word in text.split():
        keyword = get_keyword(word, noise)
        if keyword is not None:
            counts[keyword] += 1
    return {keyword: Occurrence(document=document, frequency=n) for keyword, n in counts.items()}
