"""Re-ordering of the candidate pool by query similarity."""

from __future__ import annotations

from typing import Sequence

from utils import get_logger

from .scorer import score

logger = get_logger(__name__)


def rerank(candidates: Sequence[str], query: str) -> list[str]:
    """Return every candidate sorted by ascending score against ``query``.

    The sort is stable, so equally scored candidates keep their original
    relative order and an empty query returns the original order. Nothing is
    ever dropped from the result.
    """
    return sorted(candidates, key=lambda candidate: score(query, candidate))


class RankingEngine:
    """Owns the fixed candidate pool and the view ordered for the last query."""

    def __init__(self, candidates: Sequence[str]) -> None:
        self.candidates: tuple[str, ...] = tuple(candidates)
        self.query = ""
        self.view: list[str] = list(self.candidates)

    def update(self, query: str) -> list[str]:
        """Recompute the ordered view from the full pool for ``query``."""
        self.query = query
        self.view = rerank(self.candidates, query)
        top = self.view[0] if self.view else None
        logger.debug(f"Reranked {len(self.view)} candidates for query {query!r}, top={top!r}")
        return self.view

    def __len__(self) -> int:
        return len(self.candidates)
