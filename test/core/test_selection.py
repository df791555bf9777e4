import pytest

from picker.selection import SelectionState


def test_cursor_starts_at_top() -> None:
    assert SelectionState(3).cursor == 0


def test_move_down_wraps_to_top() -> None:
    state = SelectionState(3)
    assert [state.move_down() for _ in range(3)] == [1, 2, 0]


def test_move_up_wraps_to_bottom() -> None:
    state = SelectionState(3)
    assert [state.move_up() for _ in range(3)] == [2, 1, 0]


@pytest.mark.parametrize("size", [1, 2, 7])
def test_full_cycle_returns_to_start(size: int) -> None:
    state = SelectionState(size)
    for _ in range(size):
        state.move_down()
    assert state.cursor == 0
    for _ in range(size):
        state.move_up()
    assert state.cursor == 0


def test_single_item_view_stays_put() -> None:
    state = SelectionState(1)
    assert state.move_down() == 0
    assert state.move_up() == 0


def test_reset_to_top() -> None:
    state = SelectionState(5)
    state.move_up()
    state.reset_to_top()
    assert state.cursor == 0


def test_empty_view_is_rejected() -> None:
    with pytest.raises(ValueError):
        SelectionState(0)
