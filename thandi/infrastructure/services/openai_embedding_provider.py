from typing import Any, List, Optional

import structlog
from openai import AsyncOpenAI, OpenAIError

from thandi.core.settings import settings
from thandi.domain.curriculum.ports import IEmbeddingProvider
from thandi.domain.exceptions import EmbeddingProviderError

logger = structlog.get_logger(__name__)


class OpenAIEmbeddingProvider(IEmbeddingProvider):
    """
    Query embeddings through the OpenAI embeddings API.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model_name: Optional[str] = None,
        client: Optional[Any] = None,
    ):
        resolved_key = api_key or settings.OPENAI_API_KEY
        if client is None and not resolved_key:
            raise ValueError("OpenAIEmbeddingProvider requires a non-empty API key.")
        self._client = client or AsyncOpenAI(api_key=resolved_key)
        self._model_name = model_name or settings.EMBEDDING_MODEL
        key_suffix = str(resolved_key or "")[-4:] if resolved_key else "none"
        logger.info(
            "openai_embedding_provider_initialized",
            model=self._model_name,
            key_suffix=key_suffix,
        )

    @property
    def provider_name(self) -> str:
        return "openai"

    @property
    def model_name(self) -> str:
        return str(self._model_name)

    async def embed(self, texts: List[str]) -> List[List[float]]:
        inputs = [str(t or "") for t in texts]
        if not inputs:
            return []
        try:
            response = await self._client.embeddings.create(model=self._model_name, input=inputs)
        except OpenAIError as e:
            logger.error("openai_embed_failed", model=self._model_name, error=str(e))
            raise EmbeddingProviderError(str(e), provider=self.provider_name) from e

        items = sorted(response.data, key=lambda item: item.index)
        return [[float(v) for v in item.embedding] for item in items]
