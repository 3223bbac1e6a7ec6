from typing import List, Optional

import structlog

from thandi.core.settings import settings
from thandi.domain.curriculum.ports import IEmbeddingProvider, IKnowledgeSearchRepository
from thandi.domain.knowledge.types import KnowledgeMatch

logger = structlog.get_logger(__name__)


class KnowledgeSearchService:
    """
    Embeds a query and runs similarity search over the knowledge chunks.
    """

    def __init__(
        self,
        embedding_provider: IEmbeddingProvider,
        repository: IKnowledgeSearchRepository,
    ):
        self.embedding_provider = embedding_provider
        self.repository = repository

    async def search(
        self,
        query: str,
        match_threshold: Optional[float] = None,
        match_count: Optional[int] = None,
        module_ids: Optional[List[str]] = None,
    ) -> List[KnowledgeMatch]:
        """
        `module_ids` scopes the search to those knowledge modules; None searches all.
        """
        text = (query or "").strip()
        if not text:
            return []

        threshold = (
            settings.KNOWLEDGE_MATCH_THRESHOLD if match_threshold is None else match_threshold
        )
        count = settings.KNOWLEDGE_MATCH_COUNT if match_count is None else match_count

        vectors = await self.embedding_provider.embed([text])
        if not vectors:
            logger.warning("knowledge_search_empty_embedding", **self.embedding_provider.profile())
            return []

        rows = await self.repository.search_knowledge_chunks(
            embedding=vectors[0],
            match_threshold=threshold,
            match_count=count,
            filter_module_ids=module_ids or None,
        )
        matches = [m for m in (KnowledgeMatch.from_row(row) for row in rows) if m is not None]
        matches.sort(key=lambda m: m.similarity, reverse=True)
        logger.info(
            "knowledge_search_completed",
            returned=len(rows),
            kept=len(matches),
            top_similarity=matches[0].similarity if matches else None,
        )
        return matches
