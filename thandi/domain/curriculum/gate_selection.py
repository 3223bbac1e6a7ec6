from __future__ import annotations

from typing import Iterable, Optional

from thandi.domain.curriculum.types import Gate, ScoredCandidate


SIMILARITY_SCALE = 100


def select_gate(scored: Iterable[ScoredCandidate]) -> Optional[Gate]:
    """
    Reduce scored candidates to the single best gate.

    Ties keep the first candidate in input order, so the result depends on the
    order in which the store returned its rows. A best score of zero means
    nothing matched and no gate is returned.
    """
    best: Optional[ScoredCandidate] = None
    for candidate in scored:
        if best is None or candidate.score > best.score:
            best = candidate

    if best is None or best.score <= 0:
        return None

    return Gate(
        text=best.chunk.text,
        metadata=best.chunk.metadata,
        similarity=best.score / SIMILARITY_SCALE,
    )
