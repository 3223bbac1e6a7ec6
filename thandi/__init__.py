from thandi.domain.curriculum.gate_scoring import score_candidates
from thandi.domain.curriculum.gate_selection import select_gate
from thandi.domain.curriculum.gate_visibility import should_show_gate
from thandi.domain.curriculum.types import Gate, GateMetadata, KnowledgeChunk, StudentProfile
from thandi.domain.misconceptions.detection import detect_misconceptions
from thandi.domain.misconceptions.formatting import (
    format_misconceptions_for_display,
    format_misconceptions_for_llm,
)
from thandi.domain.misconceptions.types import MisconceptionFlag

__all__ = [
    "Gate",
    "GateMetadata",
    "KnowledgeChunk",
    "StudentProfile",
    "MisconceptionFlag",
    "score_candidates",
    "select_gate",
    "should_show_gate",
    "detect_misconceptions",
    "format_misconceptions_for_llm",
    "format_misconceptions_for_display",
]
