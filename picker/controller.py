"""Interaction state machine driving a picker session.

The controller is UI-agnostic: it consumes decoded ``InputEvent`` values and
exposes a read-only ``SessionView`` snapshot for whatever renders it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from utils import get_logger

from .ranking import RankingEngine
from .selection import SelectionState

logger = get_logger(__name__)


class EventKind(Enum):
    """Kinds of abstract input events understood by the controller."""

    CHAR = "char"
    DELETE = "delete"
    UP = "up"
    DOWN = "down"
    CONFIRM = "confirm"
    CANCEL = "cancel"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class InputEvent:
    kind: EventKind
    char: str = ""

    @classmethod
    def typed(cls, char: str) -> "InputEvent":
        return cls(EventKind.CHAR, char)


class SessionState(Enum):
    ACTIVE = "active"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True, slots=True)
class SessionView:
    """Snapshot handed to the render sink on every iteration."""

    query: str
    candidates: tuple[str, ...]
    cursor: int


@dataclass(frozen=True, slots=True)
class SessionResult:
    """Outcome of a finished session."""

    confirmed: bool
    candidate: Optional[str] = None
    index: Optional[int] = None


class InteractionController:
    """Owns query, ranking and cursor for one picker session."""

    def __init__(self, candidates: Sequence[str], initial_query: str = "") -> None:
        """Start a session over ``candidates``.

        Args:
            candidates: Non-empty candidate pool, in original order.
            initial_query: Optional pre-seeded query; ranks the pool once.

        Raises:
            ValueError: If ``candidates`` is empty.
        """
        if not candidates:
            raise ValueError("Cannot start a picker session without candidates")

        self.ranking = RankingEngine(candidates)
        self.selection = SelectionState(len(self.ranking))
        self.state = SessionState.ACTIVE
        self._query: list[str] = list(initial_query)
        self._refresh()

    @property
    def query(self) -> str:
        return "".join(self._query)

    @property
    def view(self) -> list[str]:
        return self.ranking.view

    @property
    def cursor(self) -> int:
        return self.selection.cursor

    @property
    def active(self) -> bool:
        return self.state is SessionState.ACTIVE

    def snapshot(self) -> SessionView:
        return SessionView(query=self.query, candidates=tuple(self.view), cursor=self.cursor)

    def handle(self, event: InputEvent) -> bool:
        """Apply one input event.

        Returns:
            True while the session is still active.
        """
        if not self.active:
            logger.debug(f"Ignoring {event.kind.value} after session ended ({self.state.value})")
            return False

        kind = event.kind
        if kind is EventKind.CHAR and event.char:
            self._query.append(event.char)
            self._refresh()
        elif kind is EventKind.DELETE:
            if self._query:
                self._query.pop()
            # Rerank even when the query was already empty.
            self._refresh()
        elif kind is EventKind.DOWN:
            self.selection.move_down()
        elif kind is EventKind.UP:
            self.selection.move_up()
        elif kind is EventKind.CONFIRM:
            self.state = SessionState.CONFIRMED
            logger.debug(f"Session confirmed at index {self.cursor}: {self.view[self.cursor]!r}")
        elif kind is EventKind.CANCEL:
            self.state = SessionState.CANCELLED
            logger.debug("Session cancelled")
        else:
            logger.debug(f"Ignoring event {kind.value}")

        return self.active

    def result(self) -> SessionResult:
        """Return the session outcome.

        Raises:
            RuntimeError: If the session has not terminated yet.
        """
        if self.state is SessionState.ACTIVE:
            raise RuntimeError("Session is still active")
        if self.state is SessionState.CANCELLED:
            return SessionResult(confirmed=False)
        return SessionResult(confirmed=True, candidate=self.view[self.cursor], index=self.cursor)

    def _refresh(self) -> None:
        self.ranking.update(self.query)
        self.selection.reset_to_top()


def run_session(
    controller: InteractionController,
    render: Callable[[SessionView], None],
    next_event: Callable[[], InputEvent],
) -> SessionResult:
    """Run the render / read / apply loop until the controller terminates.

    Exceptions raised by ``render`` or ``next_event`` end the session and
    propagate to the caller.
    """
    while controller.active:
        render(controller.snapshot())
        controller.handle(next_event())
    return controller.result()
