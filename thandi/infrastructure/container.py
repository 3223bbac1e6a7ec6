"""
Service Container - Thandi Infrastructure Layer

Centralizes service instantiation and dependency injection.
Without Supabase credentials the gate branch runs on the built-in catalogue and
knowledge search is disabled.
"""

from typing import Optional

import structlog

from thandi.core.settings import Settings, settings as default_settings
from thandi.domain.curriculum.ports import IEmbeddingProvider, IGateRepository
from thandi.infrastructure.repositories.in_memory_gate_repository import InMemoryGateRepository
from thandi.infrastructure.services.openai_embedding_provider import OpenAIEmbeddingProvider
from thandi.infrastructure.supabase.repositories.supabase_gate_repository import (
    SupabaseGateRepository,
)
from thandi.infrastructure.supabase.repositories.supabase_knowledge_repository import (
    SupabaseKnowledgeRepository,
)
from thandi.services.curriculum.gate_service import CurriculumGateService
from thandi.services.curriculum.guidance_pipeline import CurriculumGuidancePipeline
from thandi.services.knowledge.knowledge_search_service import KnowledgeSearchService

logger = structlog.get_logger(__name__)


class ServiceContainer:
    """
    IoC Container for guidance services.
    """

    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings
        # Lazy initialization of services
        self._gate_repository: Optional[IGateRepository] = None
        self._embedding_provider: Optional[IEmbeddingProvider] = None
        self._gate_service: Optional[CurriculumGateService] = None
        self._knowledge_search: Optional[KnowledgeSearchService] = None
        self._pipeline: Optional[CurriculumGuidancePipeline] = None

    @property
    def has_knowledge_store(self) -> bool:
        return bool(self.config.SUPABASE_URL and self.config.SUPABASE_SERVICE_KEY)

    @property
    def gate_repository(self) -> IGateRepository:
        if self._gate_repository is None:
            if self.has_knowledge_store:
                self._gate_repository = SupabaseGateRepository(
                    table=self.config.GATE_TABLE,
                    category=self.config.GATE_CATEGORY,
                    limit=self.config.GATE_FETCH_LIMIT,
                )
            else:
                logger.warning("knowledge_store_not_configured", fallback="gate_catalog")
                self._gate_repository = InMemoryGateRepository()
        return self._gate_repository

    @property
    def embedding_provider(self) -> Optional[IEmbeddingProvider]:
        if self._embedding_provider is None and self.config.OPENAI_API_KEY:
            self._embedding_provider = OpenAIEmbeddingProvider(
                api_key=self.config.OPENAI_API_KEY,
                model_name=self.config.EMBEDDING_MODEL,
            )
        return self._embedding_provider

    @property
    def gate_service(self) -> CurriculumGateService:
        if self._gate_service is None:
            self._gate_service = CurriculumGateService(repository=self.gate_repository)
        return self._gate_service

    @property
    def knowledge_search(self) -> Optional[KnowledgeSearchService]:
        if self._knowledge_search is None:
            provider = self.embedding_provider
            if (
                self.config.KNOWLEDGE_SEARCH_ENABLED
                and self.has_knowledge_store
                and provider is not None
            ):
                self._knowledge_search = KnowledgeSearchService(
                    embedding_provider=provider,
                    repository=SupabaseKnowledgeRepository(
                        rpc_name=self.config.KNOWLEDGE_SEARCH_RPC
                    ),
                )
        return self._knowledge_search

    @property
    def guidance_pipeline(self) -> CurriculumGuidancePipeline:
        if self._pipeline is None:
            self._pipeline = CurriculumGuidancePipeline(
                gate_service=self.gate_service,
                knowledge_search=self.knowledge_search,
            )
        return self._pipeline
