import time
from typing import List, Optional

import structlog

from thandi.domain.curriculum.gate_scoring import score_candidates
from thandi.domain.curriculum.gate_selection import select_gate
from thandi.domain.curriculum.gate_visibility import should_show_gate
from thandi.domain.curriculum.ports import IGateRepository
from thandi.domain.curriculum.types import Gate, StudentProfile

logger = structlog.get_logger(__name__)


class CurriculumGateService:
    """
    Picks the curriculum gate most relevant to a student query.
    The repository is injected per instance; the service itself holds no state.
    """

    def __init__(self, repository: IGateRepository):
        self.repository = repository

    async def get_relevant_gate(
        self, grade: int, subjects: List[str], query: str
    ) -> Optional[Gate]:
        start = time.perf_counter()
        candidates = await self.repository.fetch_gate_chunks()
        if not candidates:
            logger.info("curriculum_gate_no_candidates", grade=grade)
            return None

        scored = score_candidates(grade, subjects, query, candidates)
        gate = select_gate(scored)
        logger.info(
            "curriculum_gate_selected" if gate else "curriculum_gate_no_match",
            grade=grade,
            candidates=len(candidates),
            gate_type=gate.metadata.gate_type.value if gate and gate.metadata.gate_type else None,
            similarity=gate.similarity if gate else None,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return gate

    @staticmethod
    def should_show_gate(gate: Optional[Gate], profile: StudentProfile) -> bool:
        return should_show_gate(gate, profile)
