"""
Misconception Detection

Flags dangerous career/subject mismatches that need to be surfaced before the
LLM writes its answer. Runs independently of the curriculum gate pipeline and
performs no I/O.
"""
from __future__ import annotations

from typing import Optional

from thandi.domain.curriculum.subjects import (
    has_math_lit,
    has_physical_science,
    has_pure_math,
    mentions_any,
)
from thandi.domain.curriculum.types import StudentProfile
from thandi.domain.misconceptions.career_interests import (
    CareerInterestClassifier,
    RegexCareerInterestClassifier,
)
from thandi.domain.misconceptions.types import FlagType, MisconceptionFlag, Severity


FIRST_GENERATION_MARKER = "no"

MEDICINE_NEEDS_PURE_MATH = MisconceptionFlag(
    type=FlagType.SUBJECT_MISMATCH,
    severity=Severity.CRITICAL,
    career="Medical Doctor",
    message=(
        "⚠️ IMPORTANT: Medical school (MBChB) requires Pure Mathematics, not "
        "Mathematical Literacy. You currently have Math Lit."
    ),
    suggestion=(
        "Consider healthcare alternatives that accept Math Lit: Nursing, Radiography, "
        "Emergency Medical Care, or Pharmacy Assistant."
    ),
    verifiable='Parents can verify: Google "Can I study medicine with Math Lit in South Africa?"',
)

ENGINEERING_NEEDS_PURE_MATH = MisconceptionFlag(
    type=FlagType.SUBJECT_MISMATCH,
    severity=Severity.CRITICAL,
    career="Engineering",
    message="⚠️ IMPORTANT: Engineering degrees require Pure Mathematics, not Mathematical Literacy.",
    suggestion="Consider technical alternatives: IT Support, Technician roles, or TVET engineering diplomas.",
    verifiable="Teachers can verify: Check university engineering admission requirements.",
)

ENGINEERING_NEEDS_PHYSICAL_SCIENCES = MisconceptionFlag(
    type=FlagType.SUBJECT_MISSING,
    severity=Severity.HIGH,
    career="Engineering",
    message="⚠️ Engineering requires Physical Sciences. You don't have this subject listed.",
    suggestion=(
        "If you do take Physical Sciences, make sure to include it. "
        "If not, consider IT or software development instead."
    ),
    verifiable="LO can verify: Engineering admission requirements need Physical Sciences.",
)

ENGINEERING_MATH_STRUGGLE = MisconceptionFlag(
    type=FlagType.ACADEMIC_CONCERN,
    severity=Severity.MEDIUM,
    career="Engineering",
    message="⚠️ You mentioned struggling with Mathematics, which is critical for engineering.",
    suggestion=(
        "Focus on improving math marks first. Consider tutoring or study groups. "
        "Target 70%+ by Grade 12."
    ),
    verifiable="Teachers can verify: Your current math performance and improvement plan.",
)

MEDICAL_SCIENCE_STRUGGLE = MisconceptionFlag(
    type=FlagType.ACADEMIC_CONCERN,
    severity=Severity.MEDIUM,
    career="Medical",
    message="⚠️ You mentioned struggling with sciences, which are critical for medical school.",
    suggestion=(
        "Medical school needs 70%+ in Life Sciences and Physical Sciences. "
        "Focus on improvement strategies."
    ),
    verifiable="Teachers can verify: Your current science performance and support available.",
)

FIRST_GENERATION_SUPPORT = MisconceptionFlag(
    type=FlagType.SUPPORT_NEEDED,
    severity=Severity.INFO,
    message="As a first-generation university student, you'll need extra guidance.",
    suggestion=(
        "Talk to your LO teacher about: NSFAS applications, university visits, "
        "and mentorship programs."
    ),
    verifiable="Principal can verify: First-gen student support programs available at your school.",
)


def detect_misconceptions(
    query: str,
    profile: StudentProfile,
    classifier: Optional[CareerInterestClassifier] = None,
) -> list[MisconceptionFlag]:
    interests = (classifier or RegexCareerInterestClassifier()).classify(query or "")

    subjects = profile.enjoyed_subjects
    struggling = profile.struggling_subjects
    math_lit = has_math_lit(subjects)
    pure_math = has_pure_math(subjects)

    flags: list[MisconceptionFlag] = []

    if interests.medical and math_lit and not pure_math:
        flags.append(MEDICINE_NEEDS_PURE_MATH)

    if interests.engineering:
        if math_lit and not pure_math:
            flags.append(ENGINEERING_NEEDS_PURE_MATH)
        if not has_physical_science(subjects):
            flags.append(ENGINEERING_NEEDS_PHYSICAL_SCIENCES)

    if struggling:
        if interests.engineering and mentions_any(struggling, "math"):
            flags.append(ENGINEERING_MATH_STRUGGLE)
        if interests.medical and mentions_any(struggling, "science"):
            flags.append(MEDICAL_SCIENCE_STRUGGLE)

    if profile.family_background == FIRST_GENERATION_MARKER:
        flags.append(FIRST_GENERATION_SUPPORT)

    return flags
