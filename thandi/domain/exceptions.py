from typing import Optional


class ThandiError(Exception):
    """
    Base error for the curriculum guidance core.
    """


class KnowledgeStoreError(ThandiError):
    """
    Raised when the knowledge store cannot serve a read (query or RPC).
    """
    def __init__(
        self,
        message: str,
        operation: str,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.cause = cause


class EmbeddingProviderError(ThandiError):
    """
    Raised when the embedding provider fails to vectorise a query.
    """
    def __init__(self, message: str, provider: str):
        super().__init__(message)
        self.message = message
        self.provider = provider
