from __future__ import annotations

from buffer_toggle.host.events import DELETE_WINDOW, SHOW_BUFFER
from buffer_toggle.mode import BufferToggleMode
from buffer_toggle.runtime.settings import ToggleSettings

from .helpers import make_editor


def make_disabled_mode():
    editor, buffers = make_editor("a.txt", "b.txt")
    return editor, buffers, BufferToggleMode(editor, settings=ToggleSettings())


def test_enable_installs_both_hooks_once() -> None:
    editor, _, mode = make_disabled_mode()

    assert mode.enable() is True
    assert mode.enable() is False

    assert len(editor.hooks.callbacks(SHOW_BUFFER)) == 1
    assert len(editor.hooks.callbacks(DELETE_WINDOW)) == 1
    assert mode.enabled is True


def test_disable_twice_is_harmless() -> None:
    editor, _, mode = make_disabled_mode()
    mode.enable()

    assert mode.disable() is True
    assert mode.disable() is False

    assert editor.hooks.callbacks(SHOW_BUFFER) == ()
    assert editor.hooks.callbacks(DELETE_WINDOW) == ()
    assert mode.enabled is False


def test_disable_before_enable_is_a_noop() -> None:
    editor, _, mode = make_disabled_mode()

    assert mode.disable() is False
    assert list(editor.hooks) == []


def test_disabled_mode_does_not_record_history() -> None:
    editor, buffers, mode = make_disabled_mode()

    editor.show_buffer(buffers["a.txt"])
    editor.show_buffer(buffers["b.txt"])

    assert len(mode.store) == 0


def test_reenable_discards_previous_history() -> None:
    editor, buffers, mode = make_disabled_mode()
    mode.enable()
    editor.show_buffer(buffers["a.txt"])
    editor.show_buffer(buffers["b.txt"])
    assert len(mode.store) == 1

    mode.disable()
    mode.enable()

    assert len(mode.store) == 0
    assert mode.switch_to_previous_buffer() is False


def test_toggle_flips_and_forces_state() -> None:
    _, _, mode = make_disabled_mode()

    assert mode.toggle() is True
    assert mode.toggle() is False
    assert mode.toggle(True) is True
    assert mode.toggle(True) is True
    assert mode.toggle(False) is False
    assert mode.toggle(0) is False


def test_two_modes_on_one_host_keep_separate_stores() -> None:
    editor, buffers = make_editor("a.txt", "b.txt")
    first = BufferToggleMode(editor, settings=ToggleSettings())
    second = BufferToggleMode(editor, settings=ToggleSettings())
    first.enable()
    second.enable()
    editor.show_buffer(buffers["a.txt"])

    second.disable()
    editor.show_buffer(buffers["b.txt"])

    assert len(editor.hooks.callbacks(SHOW_BUFFER)) == 1
    _, entry = first.store.get_or_create_entry()
    assert entry.buffer_id == buffers["a.txt"]
