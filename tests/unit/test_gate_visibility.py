import pytest

from thandi.domain.curriculum.gate_visibility import is_math_lit_gate, should_show_gate
from thandi.domain.curriculum.types import Gate, GateMetadata, StudentProfile


def _gate(gate_type: str, urgency: str, subjects: list[str]) -> Gate:
    return Gate(
        text="gate",
        metadata=GateMetadata(gate_type=gate_type, urgency=urgency, subjects=subjects),
        similarity=1.0,
    )


MATH_LIT_SUBJECTS = ["Mathematical Literacy", "Mathematics"]


def test_missing_gate_is_never_shown() -> None:
    assert should_show_gate(None, StudentProfile(grade=10)) is False


def test_math_lit_gate_detection() -> None:
    assert is_math_lit_gate(_gate("irreversible", "critical", MATH_LIT_SUBJECTS)) is True
    assert is_math_lit_gate(_gate("subject_chain", "critical", MATH_LIT_SUBJECTS)) is False
    assert is_math_lit_gate(_gate("irreversible", "critical", ["Physical Sciences"])) is False


@pytest.mark.parametrize("urgency", ["critical", "high", "medium", "low"])
@pytest.mark.parametrize(
    "subjects",
    [[], ["Life Sciences"], ["Mathematics", "Physical Sciences"], ["English"]],
)
def test_math_lit_gate_suppressed_without_math_lit(urgency: str, subjects: list[str]) -> None:
    gate = _gate("irreversible", urgency, MATH_LIT_SUBJECTS)
    for grade in (10, 11, 12):
        profile = StudentProfile(grade=grade, currentSubjects=subjects)
        assert should_show_gate(gate, profile) is False


def test_math_lit_gate_shown_to_math_lit_student() -> None:
    gate = _gate("irreversible", "critical", MATH_LIT_SUBJECTS)
    profile = StudentProfile(grade=10, currentSubjects=["Mathematical Literacy", "Life Sciences"])
    assert should_show_gate(gate, profile) is True


def test_math_lit_detected_from_enjoyed_subjects() -> None:
    gate = _gate("irreversible", "critical", MATH_LIT_SUBJECTS)
    profile = StudentProfile(grade=11, enjoyedSubjects=["Math Lit"])
    assert should_show_gate(gate, profile) is True


def test_math_lit_student_still_subject_to_urgency_rules() -> None:
    gate = _gate("irreversible", "low", MATH_LIT_SUBJECTS)
    profile = StudentProfile(grade=10, currentSubjects=["Mathematical Literacy"])
    assert should_show_gate(gate, profile) is False


@pytest.mark.parametrize("grade", [10, 11, 12])
def test_critical_non_math_lit_gate_always_shown(grade: int) -> None:
    gate = _gate("deadline", "critical", ["all"])
    assert should_show_gate(gate, StudentProfile(grade=grade)) is True


def test_high_urgency_cut_off_after_grade_eleven() -> None:
    gate = _gate("subject_chain", "high", ["Physical Sciences", "Life Sciences"])
    assert should_show_gate(gate, StudentProfile(grade=11)) is True
    assert should_show_gate(gate, StudentProfile(grade=12)) is False


def test_medium_shown_low_hidden() -> None:
    assert should_show_gate(_gate("aps_shortfall", "medium", ["APS"]), StudentProfile(grade=12)) is True
    assert should_show_gate(_gate("curriculum_type", "low", ["IEB"]), StudentProfile(grade=10)) is False


def test_unknown_urgency_is_hidden() -> None:
    assert should_show_gate(_gate("deadline", "urgent!!", ["all"]), StudentProfile(grade=10)) is False
