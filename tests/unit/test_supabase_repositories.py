import asyncio
from types import SimpleNamespace
from typing import Any

import pytest
from postgrest.exceptions import APIError

from thandi.domain.curriculum.types import GateType, Urgency
from thandi.domain.exceptions import KnowledgeStoreError
from thandi.infrastructure.supabase.repositories.supabase_gate_repository import (
    SupabaseGateRepository,
    parse_gate_row,
)
from thandi.infrastructure.supabase.repositories.supabase_knowledge_repository import (
    SupabaseKnowledgeRepository,
    to_vector_literal,
)


class _FakeQuery:
    def __init__(self, client: "_FakeClient", name: str):
        self._client = client
        self._client.calls.append(("table", name))

    def select(self, columns: str) -> "_FakeQuery":
        self._client.calls.append(("select", columns))
        return self

    def eq(self, column: str, value: Any) -> "_FakeQuery":
        self._client.calls.append(("eq", column, value))
        return self

    def limit(self, count: int) -> "_FakeQuery":
        self._client.calls.append(("limit", count))
        return self

    async def execute(self) -> SimpleNamespace:
        if self._client.error:
            raise self._client.error
        return SimpleNamespace(data=self._client.rows)


class _FakeRpc:
    def __init__(self, client: "_FakeClient"):
        self._client = client

    async def execute(self) -> SimpleNamespace:
        if self._client.error:
            raise self._client.error
        return SimpleNamespace(data=self._client.rows)


class _FakeClient:
    def __init__(self, rows: list[dict[str, Any]] | None = None, error: Exception | None = None):
        self.rows = rows
        self.error = error
        self.calls: list[tuple[Any, ...]] = []

    def table(self, name: str) -> _FakeQuery:
        return _FakeQuery(self, name)

    def rpc(self, name: str, params: dict[str, Any]) -> _FakeRpc:
        self.calls.append(("rpc", name, params))
        return _FakeRpc(self)


def test_parse_gate_row_accepts_chunk_text_or_content() -> None:
    by_chunk_text = parse_gate_row({"chunk_text": "A", "metadata": {"gate_type": "deadline"}})
    by_content = parse_gate_row({"content": "B", "metadata": {"urgency": "HIGH"}})
    assert by_chunk_text is not None and by_chunk_text.metadata.gate_type == GateType.DEADLINE
    assert by_content is not None and by_content.metadata.urgency == Urgency.HIGH


def test_parse_gate_row_skips_rows_without_text() -> None:
    assert parse_gate_row({"chunk_text": "   ", "metadata": {}}) is None
    assert parse_gate_row("not-a-row") is None  # type: ignore[arg-type]


def test_parse_gate_row_tolerates_non_dict_metadata() -> None:
    chunk = parse_gate_row({"chunk_text": "A", "metadata": "garbage"})
    assert chunk is not None
    assert chunk.metadata.gate_type is None


def test_fetch_gate_chunks_filters_by_category_and_drops_bad_rows() -> None:
    client = _FakeClient(
        rows=[
            {"chunk_text": "Gate one", "metadata": {"gate_type": "irreversible", "grade_level": "10"}},
            {"chunk_text": "", "metadata": {}},
        ]
    )
    repo = SupabaseGateRepository(client=client, table="knowledge_chunks", category="curriculum_gates", limit=5)

    chunks = asyncio.run(repo.fetch_gate_chunks())

    assert [c.text for c in chunks] == ["Gate one"]
    assert ("table", "knowledge_chunks") in client.calls
    assert ("eq", "category", "curriculum_gates") in client.calls
    assert ("limit", 5) in client.calls


def test_fetch_gate_chunks_returns_empty_list_for_no_data() -> None:
    repo = SupabaseGateRepository(client=_FakeClient(rows=None))
    assert asyncio.run(repo.fetch_gate_chunks()) == []


def test_fetch_gate_chunks_degrades_on_error_response() -> None:
    client = _FakeClient(error=APIError({"code": "42P01", "message": "relation does not exist"}))
    repo = SupabaseGateRepository(client=client)
    assert asyncio.run(repo.fetch_gate_chunks()) == []


def test_fetch_gate_chunks_wraps_transport_errors() -> None:
    repo = SupabaseGateRepository(client=_FakeClient(error=RuntimeError("connection reset")))
    with pytest.raises(KnowledgeStoreError) as exc_info:
        asyncio.run(repo.fetch_gate_chunks())
    assert "connection reset" in exc_info.value.message
    assert isinstance(exc_info.value.cause, RuntimeError)


def test_to_vector_literal_formats_pgvector_text() -> None:
    assert to_vector_literal([0.1, 2, -0.5]) == "[0.1,2.0,-0.5]"


def test_search_knowledge_chunks_calls_rpc_with_vector_literal() -> None:
    client = _FakeClient(rows=[{"chunk_text": "hit", "similarity": 0.9}])
    repo = SupabaseKnowledgeRepository(client=client, rpc_name="search_knowledge_chunks")

    rows = asyncio.run(repo.search_knowledge_chunks([0.5, 0.25], match_threshold=0.3, match_count=3))

    assert rows == [{"chunk_text": "hit", "similarity": 0.9}]
    _, name, params = client.calls[0]
    assert name == "search_knowledge_chunks"
    assert params == {
        "query_embedding": "[0.5,0.25]",
        "match_threshold": 0.3,
        "match_count": 3,
        "filter_module_ids": None,
    }


def test_search_knowledge_chunks_wraps_rpc_errors() -> None:
    repo = SupabaseKnowledgeRepository(client=_FakeClient(error=RuntimeError("PGRST202")))
    with pytest.raises(KnowledgeStoreError) as exc_info:
        asyncio.run(repo.search_knowledge_chunks([0.1], match_threshold=0.3, match_count=1))
    assert exc_info.value.operation == "search_knowledge_chunks"


def test_search_knowledge_chunks_forwards_module_filter() -> None:
    client = _FakeClient(rows=[])
    repo = SupabaseKnowledgeRepository(client=client, rpc_name="search_knowledge_chunks")

    asyncio.run(
        repo.search_knowledge_chunks(
            [0.5], match_threshold=0.3, match_count=3, filter_module_ids=["mod-careers"]
        )
    )

    _, _, params = client.calls[0]
    assert params["filter_module_ids"] == ["mod-careers"]
