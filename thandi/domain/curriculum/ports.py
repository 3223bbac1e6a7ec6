from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Protocol

from thandi.domain.curriculum.types import KnowledgeChunk


class IGateRepository(Protocol):
    async def fetch_gate_chunks(self) -> List[KnowledgeChunk]:
        ...


class IKnowledgeSearchRepository(Protocol):
    async def search_knowledge_chunks(
        self,
        embedding: List[float],
        match_threshold: float,
        match_count: int,
        filter_module_ids: Optional[List[str]] = None,
    ) -> List[Dict[str, Any]]:
        ...


class IEmbeddingProvider(ABC):
    """
    Interface for query embedding providers.
    """

    @abstractmethod
    async def embed(self, texts: List[str]) -> List[List[float]]:
        """
        Generates one embedding per input text, in input order.
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        pass

    @property
    @abstractmethod
    def model_name(self) -> str:
        pass

    def profile(self) -> Dict[str, Any]:
        return {"provider": str(self.provider_name), "model": str(self.model_name)}
