from typing import Any, Dict, List, Optional

import structlog
from postgrest.exceptions import APIError
from pydantic import ValidationError
from supabase import AsyncClient

from thandi.core.settings import settings
from thandi.domain.curriculum.types import KnowledgeChunk
from thandi.domain.exceptions import KnowledgeStoreError
from thandi.infrastructure.supabase.client import get_async_supabase_client

logger = structlog.get_logger(__name__)


def parse_gate_row(row: Dict[str, Any]) -> Optional[KnowledgeChunk]:
    """
    Maps a `knowledge_chunks` row to a gate chunk. Rows without text or with
    unusable metadata are skipped.
    """
    if not isinstance(row, dict):
        return None
    text = str(row.get("chunk_text") or row.get("content") or "").strip()
    if not text:
        return None
    metadata_raw = row.get("metadata")
    metadata = metadata_raw if isinstance(metadata_raw, dict) else {}
    try:
        return KnowledgeChunk(text=text, metadata=metadata)
    except ValidationError:
        return None


class SupabaseGateRepository:
    """
    Supabase implementation of the gate repository.
    Reads the curriculum gate records from the knowledge store; never writes.
    Error responses degrade to an empty list; transport failures raise
    KnowledgeStoreError.
    """

    def __init__(
        self,
        client: Optional[AsyncClient] = None,
        table: Optional[str] = None,
        category: Optional[str] = None,
        limit: Optional[int] = None,
    ):
        self._client = client
        self.table = table or settings.GATE_TABLE
        self.category = category or settings.GATE_CATEGORY
        self.limit = int(limit or settings.GATE_FETCH_LIMIT)

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            self._client = await get_async_supabase_client()
        return self._client

    async def fetch_gate_chunks(self) -> List[KnowledgeChunk]:
        client = await self._get_client()
        try:
            res = (
                await client.table(self.table)
                .select("*")
                .eq("category", self.category)
                .limit(self.limit)
                .execute()
            )
        except APIError as e:
            logger.warning(
                "supabase_query_error_response",
                table=self.table,
                category=self.category,
                code=e.code,
                error=e.message,
            )
            return []
        except Exception as e:
            logger.error(
                "supabase_query_failed",
                table=self.table,
                category=self.category,
                error=str(e),
            )
            raise KnowledgeStoreError(
                f"Failed to load curriculum gates: {e}",
                operation=f"{self.table}.select",
                cause=e,
            ) from e

        rows = res.data or []
        chunks = [chunk for chunk in (parse_gate_row(row) for row in rows) if chunk is not None]
        if len(chunks) != len(rows):
            logger.warning(
                "curriculum_gate_rows_skipped",
                fetched=len(rows),
                kept=len(chunks),
            )
        return chunks
