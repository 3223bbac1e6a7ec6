from __future__ import annotations

from typing import Iterable


MATH_LIT_VARIANTS = (
    "mathematical literacy",
    "math lit",
    "maths lit",
    "mathslit",
)

MATH_LIT_GATE_SUBJECT = "Mathematical Literacy"


def _lowered(subjects: Iterable[str]) -> list[str]:
    return [str(s or "").strip().lower() for s in subjects]


def has_math_lit(subjects: Iterable[str]) -> bool:
    return any(
        any(variant in subject for variant in MATH_LIT_VARIANTS)
        for subject in _lowered(subjects)
    )


def has_pure_math(subjects: Iterable[str]) -> bool:
    return any(
        "mathematics" in subject and "literacy" not in subject
        for subject in _lowered(subjects)
    )


def has_physical_science(subjects: Iterable[str]) -> bool:
    return any("physical science" in subject for subject in _lowered(subjects))


def mentions_any(subjects: Iterable[str], fragment: str) -> bool:
    needle = fragment.lower()
    return any(needle in subject for subject in _lowered(subjects))
