from .base import DuplicateDocumentError, Occurrence
from .index import TOP_K, KeywordIndex
from .keywords import count_keywords, get_keyword
from .loader import load_document_list, load_keywords_from_document, load_noise_words, make_index
from .occurrences import insert_last_occurrence

__all__ = [
    "DuplicateDocumentError",
    "KeywordIndex",
    "Occurrence",
    "TOP_K",
    "count_keywords",
    "get_keyword",
    "insert_last_occurrence",
    "load_document_list",
    "load_keywords_from_document",
    "load_noise_words",
    "make_index",
]
