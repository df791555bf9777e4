"""Cursor over the ordered view."""

from __future__ import annotations


class SelectionState:
    """Cursor position in a view of fixed, non-zero size.

    Movement wraps around at both ends. A view of size 0 has no valid cursor
    position, so constructing one is rejected; callers must not start a
    session without candidates.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"SelectionState requires a non-empty view (size={size})")
        self.size = size
        self.cursor = 0

    def move_down(self) -> int:
        self.cursor = (self.cursor + 1) % self.size
        return self.cursor

    def move_up(self) -> int:
        self.cursor = (self.cursor - 1 + self.size) % self.size
        return self.cursor

    def reset_to_top(self) -> None:
        self.cursor = 0
