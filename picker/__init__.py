"""Fuzzy-ranking picker core: scoring, ranking, cursor and session control."""

from .controller import (
    EventKind,
    InputEvent,
    InteractionController,
    SessionResult,
    SessionState,
    SessionView,
    run_session,
)
from .ranking import RankingEngine, rerank
from .scorer import SCALE, edit_distance, score
from .selection import SelectionState

__all__ = [
    # Scoring
    "SCALE",
    "edit_distance",
    "score",
    # Ranking
    "RankingEngine",
    "rerank",
    # Cursor
    "SelectionState",
    # Session
    "EventKind",
    "InputEvent",
    "InteractionController",
    "SessionResult",
    "SessionState",
    "SessionView",
    "run_session",
]
