"""Keyboard-only fuzzy picker built on prompt_toolkit.

Keys are decoded into picker ``InputEvent`` values and fed to an
``InteractionController``; the list is redrawn from the controller's
snapshot after every key.
"""

from __future__ import annotations

from typing import Sequence

from prompt_toolkit.application import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style

from config import Config
from picker import EventKind, InputEvent, InteractionController, SessionResult, SessionView
from utils.tui.theme import Theme

_KEY_EVENTS: dict[str, EventKind] = {
    Keys.Up: EventKind.UP,
    Keys.ControlP: EventKind.UP,
    Keys.Down: EventKind.DOWN,
    Keys.ControlN: EventKind.DOWN,
    Keys.Enter: EventKind.CONFIRM,
    Keys.Escape: EventKind.CANCEL,
    Keys.ControlC: EventKind.CANCEL,
    Keys.Backspace: EventKind.DELETE,
}


def translate_key(key: str, data: str) -> InputEvent:
    """Decode one prompt_toolkit key press into a picker event."""
    kind = _KEY_EVENTS.get(key)
    if kind is not None:
        return InputEvent(kind)
    if len(data) == 1 and data.isprintable():
        return InputEvent.typed(data)
    return InputEvent(EventKind.OTHER)


def paste_events(data: str) -> list[InputEvent]:
    """Split a bracketed paste into one typed event per printable character."""
    return [InputEvent.typed(ch) for ch in data if ch.isprintable()]


def visible_window(cursor: int, total: int, max_rows: int) -> tuple[int, int]:
    """Return the ``[start, end)`` slice of rows to draw, keeping the cursor visible."""
    if total <= max_rows:
        return 0, total
    start = min(max(cursor - max_rows // 2, 0), total - max_rows)
    return start, start + max_rows


def render_picker(
    view: SessionView,
    title: str,
    current: str | None = None,
    max_rows: int = 20,
) -> list[tuple[str, str]]:
    lines: list[tuple[str, str]] = []
    lines.append(("class:title", f"{title}\n"))
    if current:
        lines.append(("class:muted", "on "))
        lines.append(("class:current", f"{current}\n"))

    lines.append(("class:muted", "> "))
    lines.append(("class:query", view.query))
    lines.append(("class:caret", " "))
    lines.append(("", "\n\n"))

    total = len(view.candidates)
    start, end = visible_window(view.cursor, total, max_rows)
    if start > 0:
        lines.append(("class:muted", f"  ↑ {start} more\n"))
    for idx in range(start, end):
        is_selected = idx == view.cursor
        prefix = "› " if is_selected else "  "
        style = "class:selected" if is_selected else "class:item"
        lines.append((style, f"{prefix}{view.candidates[idx]}\n"))
    if end < total:
        lines.append(("class:muted", f"  ↓ {total - end} more\n"))

    lines.append(("", "\n"))
    lines.append(("class:hint", "move "))
    lines.append(("class:hint.key", "↑/↓"))
    lines.append(("class:hint", "  select "))
    lines.append(("class:hint.key", "Enter"))
    lines.append(("class:hint", "  cancel "))
    lines.append(("class:hint.key", "Esc"))
    lines.append(("", "\n"))
    return lines


async def pick_candidate(
    candidates: Sequence[str],
    title: str,
    current: str | None = None,
    initial_query: str = "",
) -> SessionResult:
    """Run the picker over ``candidates`` until the user confirms or cancels.

    Args:
        candidates: Non-empty candidate pool in original order.
        title: Heading shown above the query line.
        current: Optional label for the checked-out item.
        initial_query: Query to start from.

    Raises:
        ValueError: If ``candidates`` is empty.
    """
    controller = InteractionController(candidates, initial_query=initial_query)
    max_rows = Config.PICKER_MAX_ROWS

    def _dispatch(event) -> None:
        key = event.key_sequence[0].key
        if not controller.handle(translate_key(key, event.data)):
            event.app.exit(result=controller.result())

    # Named keys are bound explicitly: prompt_toolkit's default bindings
    # already claim them and would win over a bare <any> binding.
    kb = KeyBindings()
    for key in (*_KEY_EVENTS, Keys.Any):
        kb.add(key)(_dispatch)

    @kb.add(Keys.BracketedPaste)
    def _paste(event) -> None:
        for input_event in paste_events(event.data):
            controller.handle(input_event)

    def _render() -> list[tuple[str, str]]:
        return render_picker(controller.snapshot(), title, current, max_rows)

    control = FormattedTextControl(_render, focusable=True)
    window = Window(content=control, dont_extend_height=True, always_hide_cursor=True)
    layout = Layout(HSplit([window]))

    app: Application[SessionResult] = Application(
        layout=layout,
        key_bindings=kb,
        style=Style.from_dict(Theme.get_prompt_toolkit_style()),
        full_screen=False,
        mouse_support=False,
        erase_when_done=True,
    )
    return await app.run_async()
