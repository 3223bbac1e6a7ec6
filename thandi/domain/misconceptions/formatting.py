from __future__ import annotations

from typing import Optional, Sequence

from thandi.domain.misconceptions.types import DisplaySummary, MisconceptionFlag, Severity


LLM_BLOCK_HEADER = "⚠️ CRITICAL MISCONCEPTIONS DETECTED:"
LLM_BLOCK_INSTRUCTION = (
    "You MUST address these misconceptions in your response. "
    "Be direct and clear about subject requirements."
)


def format_misconceptions_for_llm(flags: Sequence[MisconceptionFlag]) -> str:
    """Render flags as a numbered block for the LLM prompt context."""
    if not flags:
        return ""

    lines = ["", "", LLM_BLOCK_HEADER]
    for idx, flag in enumerate(flags, start=1):
        lines.append("")
        lines.append(f"{idx}. {flag.message}")
        if flag.suggestion:
            lines.append(f"   → {flag.suggestion}")
        if flag.verifiable:
            lines.append(f"   → {flag.verifiable}")
    lines.append("")
    lines.append(LLM_BLOCK_INSTRUCTION)
    return "\n".join(lines) + "\n"


def format_misconceptions_for_display(
    flags: Sequence[MisconceptionFlag],
) -> Optional[DisplaySummary]:
    """Group flags by severity for the results page."""
    if not flags:
        return None

    def _by(severity: Severity) -> list[MisconceptionFlag]:
        return [f for f in flags if f.severity == severity]

    critical = _by(Severity.CRITICAL)
    high = _by(Severity.HIGH)
    medium = _by(Severity.MEDIUM)
    info = _by(Severity.INFO)

    return DisplaySummary(
        has_critical=bool(critical),
        has_warnings=bool(high or medium),
        critical=critical,
        high=high,
        medium=medium,
        info=info,
        summary=f"{len(critical)} critical issues, {len(high) + len(medium)} warnings detected",
    )
