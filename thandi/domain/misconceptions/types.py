from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class FlagType(str, Enum):
    SUBJECT_MISMATCH = "subject_mismatch"
    SUBJECT_MISSING = "subject_missing"
    ACADEMIC_CONCERN = "academic_concern"
    SUPPORT_NEEDED = "support_needed"


class Severity(str, Enum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    INFO = "info"


class MisconceptionFlag(BaseModel):
    """
    A detected mismatch between a stated career interest and the subject profile.
    """
    type: FlagType
    severity: Severity
    message: str
    career: Optional[str] = None
    suggestion: Optional[str] = None
    verifiable: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class DisplaySummary(BaseModel):
    has_critical: bool
    has_warnings: bool
    critical: list[MisconceptionFlag]
    high: list[MisconceptionFlag]
    medium: list[MisconceptionFlag]
    info: list[MisconceptionFlag]
    summary: str
