"""
Career-interest extraction from free text.

Intent is mapped to a small fixed taxonomy with explicit whole-word rules.
Callers depend on `CareerInterestClassifier`, so a model-backed classifier can
replace the regex one without touching the detector.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping, Protocol


CAREER_PATTERNS: Mapping[str, re.Pattern[str]] = {
    "medical": re.compile(r"\b(doctor|medical|medicine|mbchb|physician)\b"),
    "engineering": re.compile(r"\b(engineer|engineering)\b"),
    "healthcare": re.compile(r"\b(nurse|nursing|healthcare|health|radiograph|pharmacy)\b"),
    "stem": re.compile(r"\b(science|technology|math|data|software|computer)\b"),
    "business": re.compile(r"\b(business|accounting|finance|economics)\b"),
    "creative": re.compile(r"\b(design|art|creative|media|content)\b"),
}


@dataclass(frozen=True)
class CareerInterests:
    medical: bool = False
    engineering: bool = False
    healthcare: bool = False
    stem: bool = False
    business: bool = False
    creative: bool = False

    def any(self) -> bool:
        return any(
            (self.medical, self.engineering, self.healthcare, self.stem, self.business, self.creative)
        )


class CareerInterestClassifier(Protocol):
    def classify(self, query: str) -> CareerInterests: ...


class RegexCareerInterestClassifier:
    def __init__(self, patterns: Mapping[str, re.Pattern[str]] = CAREER_PATTERNS):
        self._patterns = dict(patterns)

    def classify(self, query: str) -> CareerInterests:
        text = (query or "").lower()
        return CareerInterests(
            **{tag: bool(pattern.search(text)) for tag, pattern in self._patterns.items()}
        )


def extract_career_interests(query: str) -> CareerInterests:
    return RegexCareerInterestClassifier().classify(query)
