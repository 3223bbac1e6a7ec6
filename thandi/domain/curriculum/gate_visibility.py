from __future__ import annotations

from typing import Optional

from thandi.domain.curriculum.subjects import MATH_LIT_GATE_SUBJECT, has_math_lit, has_pure_math
from thandi.domain.curriculum.types import Gate, GateType, StudentProfile, Urgency


HIGH_URGENCY_MAX_GRADE = 11


def is_math_lit_gate(gate: Gate) -> bool:
    return (
        gate.metadata.gate_type == GateType.IRREVERSIBLE
        and gate.metadata.concerns_subject(MATH_LIT_GATE_SUBJECT)
    )


def _urgency_allows(urgency: Optional[Urgency], grade: int) -> bool:
    if urgency == Urgency.CRITICAL:
        return True
    if urgency == Urgency.HIGH and grade <= HIGH_URGENCY_MAX_GRADE:
        return True
    if urgency == Urgency.MEDIUM:
        return True
    return False


def should_show_gate(gate: Optional[Gate], profile: StudentProfile) -> bool:
    """
    Decide whether a selected gate is surfaced to the student.

    The Math Literacy carve-out runs before the urgency rules: a critical
    Math Lit warning is still hidden from students who do not take Math Lit.
    """
    if gate is None:
        return False

    if is_math_lit_gate(gate):
        subjects = profile.subjects
        math_lit = has_math_lit(subjects)
        pure_math = has_pure_math(subjects)
        if pure_math and not math_lit:
            return False
        if not math_lit:
            return False

    return _urgency_allows(gate.metadata.urgency, profile.grade)
