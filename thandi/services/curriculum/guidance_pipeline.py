"""
Curriculum guidance pipeline.

Runs the gate branch and the misconception branch for one request and merges
them into a single context consumed by prompt construction and the results UI.
A failing knowledge store degrades to "no gate" / "no matches"; misconception
detection has no I/O and always runs.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import structlog

from thandi.domain.curriculum.types import Gate, StudentProfile
from thandi.domain.exceptions import EmbeddingProviderError, KnowledgeStoreError
from thandi.domain.knowledge.types import KnowledgeMatch
from thandi.domain.misconceptions.career_interests import CareerInterestClassifier
from thandi.domain.misconceptions.detection import detect_misconceptions
from thandi.domain.misconceptions.formatting import (
    format_misconceptions_for_display,
    format_misconceptions_for_llm,
)
from thandi.domain.misconceptions.types import DisplaySummary, MisconceptionFlag
from thandi.services.curriculum.gate_service import CurriculumGateService
from thandi.services.knowledge.knowledge_search_service import KnowledgeSearchService

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CurriculumContext:
    gate: Optional[Gate]
    show_gate: bool
    flags: List[MisconceptionFlag] = field(default_factory=list)
    knowledge: List[KnowledgeMatch] = field(default_factory=list)

    @property
    def visible_gate(self) -> Optional[Gate]:
        return self.gate if self.show_gate else None

    @property
    def misconceptions_for_llm(self) -> str:
        return format_misconceptions_for_llm(self.flags)

    @property
    def misconceptions_for_display(self) -> Optional[DisplaySummary]:
        return format_misconceptions_for_display(self.flags)

    def to_prompt_block(self) -> str:
        parts: List[str] = []
        if self.visible_gate is not None:
            parts.append(f"### Curriculum Guidance\n{self.visible_gate.text}\n")
        if self.knowledge:
            lines = ["### Related Knowledge"]
            lines.extend(f"- {match.text}" for match in self.knowledge)
            parts.append("\n".join(lines) + "\n")
        block = "\n".join(parts)
        return block + self.misconceptions_for_llm


class CurriculumGuidancePipeline:
    def __init__(
        self,
        gate_service: CurriculumGateService,
        knowledge_search: Optional[KnowledgeSearchService] = None,
        classifier: Optional[CareerInterestClassifier] = None,
    ):
        self.gate_service = gate_service
        self.knowledge_search = knowledge_search
        self.classifier = classifier

    async def _resolve_gate(self, query: str, profile: StudentProfile) -> Optional[Gate]:
        try:
            return await self.gate_service.get_relevant_gate(
                profile.grade, profile.subjects, query
            )
        except KnowledgeStoreError as e:
            logger.warning("curriculum_gate_degraded", operation=e.operation, error=e.message)
            return None

    async def _search_knowledge(
        self, query: str, module_ids: Optional[List[str]] = None
    ) -> List[KnowledgeMatch]:
        if self.knowledge_search is None:
            return []
        try:
            return await self.knowledge_search.search(query, module_ids=module_ids)
        except (KnowledgeStoreError, EmbeddingProviderError) as e:
            logger.warning("knowledge_search_degraded", error=e.message)
            return []

    async def build_context(
        self,
        query: str,
        profile: StudentProfile,
        module_ids: Optional[List[str]] = None,
    ) -> CurriculumContext:
        flags = detect_misconceptions(query, profile, classifier=self.classifier)
        gate = await self._resolve_gate(query, profile)
        show_gate = self.gate_service.should_show_gate(gate, profile)
        knowledge = await self._search_knowledge(query, module_ids)

        logger.info(
            "curriculum_context_built",
            gate_selected=gate is not None,
            gate_shown=show_gate,
            flags=len(flags),
            knowledge_matches=len(knowledge),
        )
        return CurriculumContext(gate=gate, show_gate=show_gate, flags=flags, knowledge=knowledge)
