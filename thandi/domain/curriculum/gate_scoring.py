"""
Rule-based relevance scoring of curriculum gate records.

The base score comes from an ordered rule list: the first rule whose gate type
matches the candidate and whose predicate holds contributes RULE_MATCH_SCORE,
later rules are not consulted. The grade bonus is added on top, whether or not
a rule fired. Scores are never summed across rules.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Sequence

from thandi.domain.curriculum.subjects import has_math_lit, has_physical_science
from thandi.domain.curriculum.types import GateType, KnowledgeChunk, ScoredCandidate


RULE_MATCH_SCORE = 100
GRADE_MATCH_BONUS = 10

ENGINEERING_HINTS = ("engineer", "stem")
APS_CAREER_HINTS = ("medicine", "engineering")
CURRICULUM_HINTS = ("ieb", "independent")
SUBJECT_CHANGE_HINTS = ("change", "drop", "switch")
LOCKED_IN_GRADES = (11, 12)


def _normalize_grade(grade: object) -> object:
    if isinstance(grade, int):
        return grade
    text = str(grade if grade is not None else "").strip()
    return int(text) if text.isdigit() else grade


@dataclass(frozen=True)
class ScoringContext:
    grade: object
    subjects: tuple[str, ...]
    query: str

    @classmethod
    def build(cls, grade: object, subjects: Iterable[str], query: str) -> "ScoringContext":
        # A lone subject name is one subject, not a sequence of letters.
        if isinstance(subjects, str):
            subjects = (subjects,)
        return cls(
            grade=_normalize_grade(grade),
            subjects=tuple(str(s or "").lower() for s in subjects or ()),
            query=str(query or "").lower(),
        )

    def query_mentions(self, hints: Sequence[str]) -> bool:
        return any(h in self.query for h in hints)


@dataclass(frozen=True)
class GateRule:
    name: str
    gate_type: GateType
    predicate: Callable[[ScoringContext], bool]

    def matches(self, context: ScoringContext, chunk: KnowledgeChunk) -> bool:
        return chunk.metadata.gate_type == self.gate_type and self.predicate(context)


def _math_lit_blocks_engineering(ctx: ScoringContext) -> bool:
    return has_math_lit(ctx.subjects) and ctx.query_mentions(ENGINEERING_HINTS)


def _aps_for_competitive_career(ctx: ScoringContext) -> bool:
    return "aps" in ctx.query and ctx.query_mentions(APS_CAREER_HINTS)


def _curriculum_comparison(ctx: ScoringContext) -> bool:
    return ctx.query_mentions(CURRICULUM_HINTS)


def _late_subject_change(ctx: ScoringContext) -> bool:
    return ctx.grade in LOCKED_IN_GRADES and ctx.query_mentions(SUBJECT_CHANGE_HINTS)


def _medicine_without_physics(ctx: ScoringContext) -> bool:
    return "medicine" in ctx.query and not has_physical_science(ctx.subjects)


GATE_RULES: tuple[GateRule, ...] = (
    GateRule("math_lit_engineering", GateType.IRREVERSIBLE, _math_lit_blocks_engineering),
    GateRule("aps_shortfall", GateType.APS_SHORTFALL, _aps_for_competitive_career),
    GateRule("curriculum_type", GateType.CURRICULUM_TYPE, _curriculum_comparison),
    GateRule("subject_change_deadline", GateType.DEADLINE, _late_subject_change),
    GateRule("medicine_subject_chain", GateType.SUBJECT_CHAIN, _medicine_without_physics),
)


def base_score(
    context: ScoringContext,
    chunk: KnowledgeChunk,
    rules: Sequence[GateRule] = GATE_RULES,
) -> int:
    for rule in rules:
        if rule.matches(context, chunk):
            return RULE_MATCH_SCORE
    return 0


def score_candidate(
    context: ScoringContext,
    chunk: KnowledgeChunk,
    rules: Sequence[GateRule] = GATE_RULES,
) -> int:
    # Unrecognised gate types never take part in scoring, bonus included.
    if chunk.metadata.gate_type is None:
        return 0
    score = base_score(context, chunk, rules)
    if chunk.metadata.applies_to_grade(context.grade):
        score += GRADE_MATCH_BONUS
    return score


def score_candidates(
    grade: object,
    subjects: Iterable[str],
    query: str,
    candidates: Iterable[KnowledgeChunk],
    rules: Sequence[GateRule] = GATE_RULES,
) -> list[ScoredCandidate]:
    context = ScoringContext.build(grade, subjects, query)
    return [
        ScoredCandidate(chunk=chunk, score=score_candidate(context, chunk, rules))
        for chunk in candidates
    ]
