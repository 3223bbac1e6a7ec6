from typing import Iterable, List, Optional

from thandi.domain.curriculum.gate_catalog import CURRICULUM_GATE_CHUNKS
from thandi.domain.curriculum.types import KnowledgeChunk


class InMemoryGateRepository:
    """
    Serves a fixed list of gate chunks, by default the authored catalogue.
    Used when no knowledge store is configured and in tests.
    """

    def __init__(self, chunks: Optional[Iterable[KnowledgeChunk]] = None):
        self._chunks = tuple(CURRICULUM_GATE_CHUNKS if chunks is None else chunks)

    async def fetch_gate_chunks(self) -> List[KnowledgeChunk]:
        return list(self._chunks)
