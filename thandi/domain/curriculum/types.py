"""
Curriculum domain types.
Gate records are authored once and read-only at query time; everything else
lives for a single request.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GateType(str, Enum):
    # Subject choice that cannot be undone (e.g. Math Lit -> no Engineering)
    IRREVERSIBLE = "irreversible"
    APS_SHORTFALL = "aps_shortfall"
    CURRICULUM_TYPE = "curriculum_type"
    DEADLINE = "deadline"
    SUBJECT_CHAIN = "subject_chain"

    @classmethod
    def parse(cls, value: Any) -> Optional["GateType"]:
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


class Urgency(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def parse(cls, value: Any) -> Optional["Urgency"]:
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


def _as_string_tuple(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in value.split(",") if part.strip())
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(item.strip() for item in value if isinstance(item, str) and item.strip())
    return ()


class GateMetadata(BaseModel):
    """
    Structured tags of a gate record. Unknown enum values are kept as None so
    the record never matches a scoring rule.
    """
    gate_type: Optional[GateType] = None
    grade_level: tuple[str, ...] = ()
    subjects: tuple[str, ...] = ()
    urgency: Optional[Urgency] = None
    career_impact: Optional[str] = None

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("gate_type", mode="before")
    @classmethod
    def _coerce_gate_type(cls, value: Any) -> Optional[GateType]:
        if value is None or isinstance(value, GateType):
            return value
        return GateType.parse(value)

    @field_validator("urgency", mode="before")
    @classmethod
    def _coerce_urgency(cls, value: Any) -> Optional[Urgency]:
        if value is None or isinstance(value, Urgency):
            return value
        return Urgency.parse(value)

    @field_validator("grade_level", "subjects", mode="before")
    @classmethod
    def _coerce_string_sets(cls, value: Any) -> tuple[str, ...]:
        return _as_string_tuple(value)

    @field_validator("career_impact", mode="before")
    @classmethod
    def _coerce_career_impact(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    def applies_to_grade(self, grade: Any) -> bool:
        return str(grade) in self.grade_level

    def concerns_subject(self, subject: str) -> bool:
        wanted = subject.strip().lower()
        return any(item.lower() == wanted for item in self.subjects)


class KnowledgeChunk(BaseModel):
    """
    One pre-authored curriculum gate document.
    """
    text: str
    metadata: GateMetadata = Field(default_factory=GateMetadata)

    model_config = ConfigDict(frozen=True)


class Gate(BaseModel):
    text: str
    metadata: GateMetadata
    similarity: float

    model_config = ConfigDict(frozen=True)


class StudentProfile(BaseModel):
    """
    Read-only view of the student supplied by the calling layer.
    Accepts the camelCase keys sent by the web client.
    """
    grade: int = 10
    curriculum: Optional[str] = None
    current_subjects: list[str] = Field(default_factory=list, alias="currentSubjects")
    enjoyed_subjects: list[str] = Field(default_factory=list, alias="enjoyedSubjects")
    struggling_subjects: list[str] = Field(default_factory=list, alias="strugglingSubjects")
    family_background: Optional[str] = Field(None, alias="familyBackground")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("grade", mode="before")
    @classmethod
    def _default_missing_grade(cls, value: Any) -> Any:
        return 10 if value in (None, "") else value

    @field_validator(
        "current_subjects", "enjoyed_subjects", "struggling_subjects", mode="before"
    )
    @classmethod
    def _coerce_subject_lists(cls, value: Any) -> list[str]:
        return list(_as_string_tuple(value))

    @property
    def subjects(self) -> list[str]:
        """Union of current and enjoyed subjects, first occurrence kept."""
        seen: set[str] = set()
        merged: list[str] = []
        for subject in [*self.current_subjects, *self.enjoyed_subjects]:
            key = subject.lower()
            if key in seen:
                continue
            seen.add(key)
            merged.append(subject)
        return merged


@dataclass(frozen=True)
class ScoredCandidate:
    chunk: KnowledgeChunk
    score: int
