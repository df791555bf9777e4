from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.keys import Keys
from prompt_toolkit.output import DummyOutput

from picker import EventKind, InputEvent, SessionView
from utils.tui.picker_ui import (
    paste_events,
    pick_candidate,
    render_picker,
    translate_key,
    visible_window,
)

BRANCHES = ["main", "develop", "feature/login"]


def _text(fragments: list[tuple[str, str]]) -> str:
    return "".join(text for _, text in fragments)


def test_translate_key_maps_navigation_keys() -> None:
    assert translate_key(Keys.Up, "\x1b[A").kind is EventKind.UP
    assert translate_key(Keys.ControlP, "\x10").kind is EventKind.UP
    assert translate_key(Keys.Down, "\x1b[B").kind is EventKind.DOWN
    assert translate_key(Keys.ControlN, "\x0e").kind is EventKind.DOWN
    assert translate_key(Keys.Enter, "\r").kind is EventKind.CONFIRM
    assert translate_key(Keys.Escape, "\x1b").kind is EventKind.CANCEL
    assert translate_key(Keys.ControlC, "\x03").kind is EventKind.CANCEL
    assert translate_key(Keys.Backspace, "\x7f").kind is EventKind.DELETE


def test_translate_key_types_printable_characters() -> None:
    assert translate_key("d", "d") == InputEvent.typed("d")
    assert translate_key("/", "/") == InputEvent.typed("/")
    assert translate_key(" ", " ") == InputEvent.typed(" ")


def test_translate_key_ignores_other_keys() -> None:
    assert translate_key(Keys.Tab, "\t").kind is EventKind.OTHER
    assert translate_key(Keys.Left, "\x1b[D").kind is EventKind.OTHER
    assert translate_key(Keys.ControlA, "\x01").kind is EventKind.OTHER


def test_paste_events_types_each_printable_character() -> None:
    assert paste_events("dev\r\n") == [InputEvent.typed(c) for c in "dev"]
    assert paste_events("") == []


def test_visible_window_shows_everything_when_it_fits() -> None:
    assert visible_window(cursor=2, total=3, max_rows=20) == (0, 3)


def test_visible_window_keeps_cursor_in_view() -> None:
    for cursor in range(50):
        start, end = visible_window(cursor, total=50, max_rows=10)
        assert end - start == 10
        assert start <= cursor < end
    assert visible_window(0, 50, 10) == (0, 10)
    assert visible_window(49, 50, 10) == (40, 50)


def test_render_picker_marks_selected_row() -> None:
    view = SessionView(query="dev", candidates=("develop", "main"), cursor=1)
    fragments = render_picker(view, title="GITGRE", current="trunk")
    text = _text(fragments)

    assert "GITGRE" in text
    assert "trunk" in text
    assert "> dev" in text
    assert ("class:selected", "› main\n") in fragments
    assert ("class:item", "  develop\n") in fragments


def test_render_picker_reports_hidden_rows() -> None:
    candidates = tuple(f"branch-{i}" for i in range(30))
    text = _text(render_picker(SessionView("", candidates, 15), title="T", max_rows=10))

    assert "↑ 10 more" in text
    assert "↓ 10 more" in text
    assert "branch-15" in text
    assert "branch-0\n" not in text


async def _pick_with_keys(keys: str, **kwargs):
    with create_pipe_input() as pipe_input:
        pipe_input.send_text(keys)
        with create_app_session(input=pipe_input, output=DummyOutput()):
            return await pick_candidate(BRANCHES, title="GITGRE", **kwargs)


async def test_pick_candidate_confirms_best_match() -> None:
    result = await _pick_with_keys("dev\r")
    assert result.confirmed is True
    assert result.candidate == "develop"
    assert result.index == 0


async def test_pick_candidate_moves_cursor_before_confirming() -> None:
    result = await _pick_with_keys("\x0e\x0e\r")
    assert result.candidate == "feature/login"
    assert result.index == 2


async def test_pick_candidate_uses_initial_query() -> None:
    result = await _pick_with_keys("\r", initial_query="feat")
    assert result.candidate == "feature/login"


async def test_pick_candidate_cancel() -> None:
    result = await _pick_with_keys("ma\x03")
    assert result.confirmed is False
    assert result.candidate is None


async def test_pick_candidate_ranks_pasted_text() -> None:
    result = await _pick_with_keys("\x1b[200~dev\x1b[201~\r")
    assert result.confirmed is True
    assert result.candidate == "develop"
