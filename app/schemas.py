from __future__ import annotations

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    kw1: str = Field(..., description="First keyword; wins ties.")
    kw2: str = Field(..., description="Second keyword.")


class SearchResponse(BaseModel):
    kw1: str
    kw2: str
    documents: list[str] = Field(..., description="Up to five documents, most relevant first.")
    trace_id: str = Field(..., description="Trace identifier for observability.")


class DocumentRequest(BaseModel):
    document: str = Field(..., min_length=1, description="Document identifier.")
    text: str = Field(..., description="Raw document text.")


class DocumentResponse(BaseModel):
    document: str
    keywords: int = Field(..., description="Distinct keywords found in the document.")


class OccurrenceOut(BaseModel):
    document: str
    frequency: int


class KeywordResponse(BaseModel):
    keyword: str
    occurrences: list[OccurrenceOut]
