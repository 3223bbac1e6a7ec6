from typing import Any, Dict, List, Optional

import structlog
from supabase import AsyncClient

from thandi.core.settings import settings
from thandi.domain.exceptions import KnowledgeStoreError
from thandi.infrastructure.supabase.client import get_async_supabase_client

logger = structlog.get_logger(__name__)


def to_vector_literal(embedding: List[float]) -> str:
    """pgvector text literal, e.g. `[0.1,0.2]`."""
    return "[" + ",".join(str(float(v)) for v in embedding) + "]"


class SupabaseKnowledgeRepository:
    """
    Embedding similarity search over knowledge chunks via the
    `search_knowledge_chunks` RPC.
    """

    def __init__(self, client: Optional[AsyncClient] = None, rpc_name: Optional[str] = None):
        self._client = client
        self.rpc_name = rpc_name or settings.KNOWLEDGE_SEARCH_RPC

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            self._client = await get_async_supabase_client()
        return self._client

    async def search_knowledge_chunks(
        self,
        embedding: List[float],
        match_threshold: float,
        match_count: int,
        filter_module_ids: Optional[List[str]] = None,
    ) -> List[Dict[str, Any]]:
        client = await self._get_client()
        rpc_params = {
            "query_embedding": to_vector_literal(embedding),
            "match_threshold": match_threshold,
            "match_count": match_count,
            "filter_module_ids": filter_module_ids,
        }

        try:
            res = await client.rpc(self.rpc_name, rpc_params).execute()
            return res.data or []
        except Exception as e:
            logger.error("supabase_rpc_failed", rpc=self.rpc_name, error=str(e))
            raise KnowledgeStoreError(
                f"Knowledge search failed: {e}", operation=self.rpc_name, cause=e
            ) from e
