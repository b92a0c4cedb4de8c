import httpx
import pytest

from app import main
from app.index_store import IndexStore

transport = httpx.ASGITransport(app=main.app)


@pytest.fixture(autouse=True)
def fresh_store(monkeypatch) -> IndexStore:
    store = IndexStore()
    monkeypatch.setattr(main, "store", store)
    return store


@pytest.mark.anyio
async def test_health() -> None:
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_add_documents_and_search() -> None:
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        first = await client.post("/documents", json={"document": "a", "text": "red red blue"})
        await client.post("/documents", json={"document": "b", "text": "red"})
        await client.post("/documents", json={"document": "c", "text": "blue blue blue"})
        response = await client.post(
            "/search",
            json={"kw1": "Red", "kw2": "blue"},
            headers={"X-Trace-Id": "trace-123"},
        )
    assert first.status_code == 200
    assert first.json() == {"document": "a", "keywords": 2}
    assert response.status_code == 200
    assert response.headers["X-Trace-Id"] == "trace-123"
    payload = response.json()
    assert payload["kw1"] == "red"
    assert payload["documents"] == ["c", "a", "b"]
    assert payload["trace_id"] == "trace-123"


@pytest.mark.anyio
async def test_search_unknown_keywords_is_empty() -> None:
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/search", json={"kw1": "nothing", "kw2": "here"})
    assert response.status_code == 200
    assert response.json()["documents"] == []
    assert response.headers["X-Trace-Id"]


@pytest.mark.anyio
async def test_duplicate_document_conflicts() -> None:
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        await client.post("/documents", json={"document": "a", "text": "red"})
        response = await client.post("/documents", json={"document": "a", "text": "blue"})
    assert response.status_code == 409


@pytest.mark.anyio
async def test_keyword_occurrences(fresh_store: IndexStore) -> None:
    fresh_store.add_document("a", "tree")
    fresh_store.add_document("b", "tree tree")
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        found = await client.get("/keywords/TREE")
        missing = await client.get("/keywords/rock")
    assert found.status_code == 200
    assert found.json() == {
        "keyword": "tree",
        "occurrences": [
            {"document": "b", "frequency": 2},
            {"document": "a", "frequency": 1},
        ],
    }
    assert missing.status_code == 404
