from thandi.domain.curriculum.types import StudentProfile
from thandi.domain.misconceptions.detection import (
    ENGINEERING_MATH_STRUGGLE,
    FIRST_GENERATION_SUPPORT,
    MEDICINE_NEEDS_PURE_MATH,
    detect_misconceptions,
)
from thandi.domain.misconceptions.formatting import (
    LLM_BLOCK_HEADER,
    format_misconceptions_for_display,
    format_misconceptions_for_llm,
)
from thandi.domain.misconceptions.types import FlagType, MisconceptionFlag, Severity


def test_llm_block_is_empty_without_flags() -> None:
    assert format_misconceptions_for_llm([]) == ""


def test_llm_block_numbers_flags_with_suggestion_and_verifiable_lines() -> None:
    block = format_misconceptions_for_llm([MEDICINE_NEEDS_PURE_MATH, FIRST_GENERATION_SUPPORT])
    assert block.startswith(f"\n\n{LLM_BLOCK_HEADER}\n")
    assert f"\n1. {MEDICINE_NEEDS_PURE_MATH.message}\n" in block
    assert f"   → {MEDICINE_NEEDS_PURE_MATH.suggestion}\n" in block
    assert f"   → {MEDICINE_NEEDS_PURE_MATH.verifiable}\n" in block
    assert f"\n2. {FIRST_GENERATION_SUPPORT.message}\n" in block
    assert block.endswith("Be direct and clear about subject requirements.\n")


def test_llm_block_skips_missing_optional_lines() -> None:
    flag = MisconceptionFlag(type=FlagType.SUPPORT_NEEDED, severity=Severity.INFO, message="Just a note")
    block = format_misconceptions_for_llm([flag])
    assert "→" not in block


def test_display_summary_is_none_without_flags() -> None:
    assert format_misconceptions_for_display([]) is None


def test_display_summary_groups_by_severity() -> None:
    profile = StudentProfile(
        enjoyedSubjects=["Mathematical Literacy"],
        strugglingSubjects=["Mathematics"],
        familyBackground="no",
    )
    flags = detect_misconceptions("I want to become an engineer", profile)
    display = format_misconceptions_for_display(flags)
    assert display is not None
    assert display.has_critical is True
    assert display.has_warnings is True
    assert len(display.critical) == 1
    assert len(display.high) == 1
    assert display.medium == [ENGINEERING_MATH_STRUGGLE]
    assert display.info == [FIRST_GENERATION_SUPPORT]
    assert display.summary == "1 critical issues, 2 warnings detected"


def test_display_summary_info_only_has_no_warnings() -> None:
    display = format_misconceptions_for_display([FIRST_GENERATION_SUPPORT])
    assert display is not None
    assert display.has_critical is False
    assert display.has_warnings is False
    assert display.summary == "0 critical issues, 0 warnings detected"
