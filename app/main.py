from __future__ import annotations

import json
import logging
import time
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Request, Response

from app.config import LOG_LEVEL
from app.index_store import IndexStore
from app.schemas import (
    DocumentRequest,
    DocumentResponse,
    KeywordResponse,
    OccurrenceOut,
    SearchRequest,
    SearchResponse,
)
from app.search_logic import build_search_outcome
from engine import DuplicateDocumentError

logger = logging.getLogger("app")
if not logger.handlers:
    logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Little Search Engine")
store = IndexStore.from_env()


@app.middleware("http")
async def trace_middleware(request: Request, call_next) -> Response:
    trace_id = request.headers.get("X-Trace-Id") or str(uuid4())
    request.state.trace_id = trace_id
    start = time.perf_counter()
    response = await call_next(request)
    response.headers["X-Trace-Id"] = trace_id
    latency_ms = (time.perf_counter() - start) * 1000
    log_payload = {
        "trace_id": trace_id,
        "path": request.url.path,
        "latency_ms": round(latency_ms, 2),
        "result_count": getattr(request.state, "result_count", None),
        "status": response.status_code,
    }
    logger.info(json.dumps(log_payload, ensure_ascii=False))
    return response


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/documents", response_model=DocumentResponse)
def add_document(payload: DocumentRequest) -> DocumentResponse:
    try:
        kws = store.add_document(payload.document, payload.text)
    except DuplicateDocumentError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return DocumentResponse(document=payload.document, keywords=len(kws))


@app.post("/search", response_model=SearchResponse)
def search(payload: SearchRequest, request: Request) -> SearchResponse:
    outcome = build_search_outcome(store, payload.kw1, payload.kw2, request.state.trace_id)
    request.state.result_count = outcome.result_count
    return outcome.response


@app.get("/keywords/{keyword}", response_model=KeywordResponse)
def keyword_occurrences(keyword: str) -> KeywordResponse:
    keyword = keyword.lower()
    found = store.occurrences(keyword)
    if found is None:
        raise HTTPException(status_code=404, detail=f"unknown keyword: {keyword}")
    occurrences = [OccurrenceOut(document=occ.document, frequency=occ.frequency) for occ in found]
    return KeywordResponse(keyword=keyword, occurrences=occurrences)
