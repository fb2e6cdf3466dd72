from __future__ import annotations

from typing import List, Sequence

from buffer_toggle.adapters.textual import (
    TextualToggleController,
    TextualUIHooks,
    WindowView,
)

from .helpers import make_editor, make_mode


def make_controller(*names: str):
    editor, buffers = make_editor(*names)
    mode = make_mode(editor)
    frames: List[Sequence[WindowView]] = []
    statuses: List[str] = []
    logs: List[str] = []
    hooks = TextualUIHooks(
        update_windows=frames.append,
        update_status=statuses.append,
        log=logs.append,
    )
    controller = TextualToggleController(editor, mode, hooks)
    return controller, editor, buffers, frames, statuses, logs


def test_controller_renders_on_start() -> None:
    controller, editor, _, frames, _, _ = make_controller("a.txt")

    assert len(frames) == 1
    (view,) = frames[0]
    assert view.selected is True
    assert view.window == editor.selected_window()


def test_toggle_key_switches_back_and_reports_previous() -> None:
    controller, editor, buffers, frames, statuses, logs = make_controller(
        "a.txt", "b.txt"
    )
    editor.show_buffer(buffers["a.txt"])
    editor.show_buffer(buffers["b.txt"])

    assert controller.handle_textual_key("ctrl+t") == "toggle"

    assert statuses[-1] == "previous: a.txt"
    (view,) = frames[-1]
    assert view.buffer_name == "a.txt"
    assert view.previous == "b.txt"
    assert any(line.startswith("key -> ctrl+t") for line in logs)


def test_unbound_key_is_ignored() -> None:
    controller, _, _, frames, statuses, _ = make_controller()

    assert controller.handle_textual_key("x") is None
    assert len(frames) == 1
    assert statuses == []


def test_split_and_close_windows() -> None:
    controller, editor, _, frames, statuses, _ = make_controller("a.txt")

    controller.handle_textual_key("ctrl+s")
    assert len(frames[-1]) == 2

    controller.handle_textual_key("ctrl+w")
    assert len(frames[-1]) == 1

    controller.handle_textual_key("ctrl+w")
    assert statuses[-1] == "Attempt to delete the sole window"


def test_next_buffer_cycles_and_mode_key_turns_history_off() -> None:
    controller, editor, buffers, frames, statuses, _ = make_controller(
        "a.txt", "b.txt"
    )

    controller.handle_textual_key("ctrl+n")
    assert frames[-1][0].buffer_name == "a.txt"
    assert frames[-1][0].previous == "*scratch*"

    controller.handle_textual_key("ctrl+e")
    assert statuses[-1] == "buffer-toggle-mode off"
    assert frames[-1][0].previous is None


def test_rendering_does_not_pin_history_to_render_time_position() -> None:
    controller, editor, buffers, frames, _, _ = make_controller("a.txt")
    window = editor.selected_window()
    assert len(controller.mode.store) == 0

    editor.scroll_to(12)
    editor.goto(300)
    editor.show_buffer(buffers["a.txt"])
    controller.handle_textual_key("ctrl+t")

    assert frames[-1][0].buffer_name == "*scratch*"
    assert (editor.window_start(window), editor.window_point(window)) == (12, 300)
