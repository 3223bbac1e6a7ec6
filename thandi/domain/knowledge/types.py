from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class KnowledgeMatch(BaseModel):
    """
    One similarity-search hit from the knowledge store.
    """
    id: Optional[str] = None
    text: str
    similarity: float = 0.0
    source_entity_type: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_row(cls, row: Dict[str, Any]) -> Optional["KnowledgeMatch"]:
        if not isinstance(row, dict):
            return None
        text = str(row.get("chunk_text") or row.get("content") or "").strip()
        if not text:
            return None
        metadata_raw = row.get("metadata")
        try:
            similarity = float(row.get("similarity") or 0.0)
        except (TypeError, ValueError):
            similarity = 0.0
        row_id = row.get("chunk_id")
        if row_id is None:
            row_id = row.get("id")
        entity_type = row.get("source_entity_type")
        return cls(
            id=str(row_id) if row_id is not None else None,
            text=text,
            similarity=similarity,
            source_entity_type=str(entity_type) if entity_type is not None else None,
            metadata=metadata_raw if isinstance(metadata_raw, dict) else {},
        )
