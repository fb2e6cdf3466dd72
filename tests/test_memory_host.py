from __future__ import annotations

import pytest

from buffer_toggle.host.memory import (
    SCRATCH_NAME,
    HostError,
    MemoryScreens,
    UnknownBufferError,
    UnknownWindowError,
)
from buffer_toggle.host.screens import NullScreenProvider, resolve_screen_provider

from .helpers import make_editor, shown


def test_new_editor_shows_scratch() -> None:
    editor, _ = make_editor()

    assert editor.windows() == (editor.selected_window(),)
    assert shown(editor) == SCRATCH_NAME


def test_find_file_reuses_live_buffer() -> None:
    editor, buffers = make_editor("a.txt")

    assert editor.find_file("a.txt") == buffers["a.txt"]
    assert shown(editor) == "a.txt"


def test_other_buffer_prefers_buffers_not_on_screen() -> None:
    editor, buffers = make_editor("a.txt", "b.txt")
    first = editor.selected_window()
    second = editor.split_window()
    editor.show_buffer(buffers["a.txt"], first)
    editor.show_buffer(buffers["b.txt"], second)

    assert editor.other_buffer(buffers["a.txt"]) not in (
        buffers["a.txt"],
        buffers["b.txt"],
    )


def test_kill_buffer_replaces_it_in_windows() -> None:
    editor, buffers = make_editor("a.txt")
    editor.show_buffer(buffers["a.txt"])

    editor.kill_buffer(buffers["a.txt"])

    assert not editor.buffer_live(buffers["a.txt"])
    assert shown(editor) == SCRATCH_NAME
    assert buffers["a.txt"] not in editor.buffers()


def test_killing_the_last_buffer_creates_scratch() -> None:
    editor, _ = make_editor()
    scratch = editor.window_buffer(editor.selected_window())

    editor.kill_buffer(scratch)

    assert editor.window_buffer(editor.selected_window()) != scratch
    assert shown(editor) == SCRATCH_NAME


def test_showing_a_killed_buffer_is_an_error() -> None:
    editor, buffers = make_editor("a.txt")
    editor.kill_buffer(buffers["a.txt"])

    with pytest.raises(UnknownBufferError):
        editor.show_buffer(buffers["a.txt"])


def test_unknown_window_is_reported_with_handle() -> None:
    editor, _ = make_editor()

    with pytest.raises(UnknownWindowError) as excinfo:
        editor.window_buffer(99)

    assert excinfo.value.handle == 99
    assert editor.window_live(99) is False


def test_sole_window_cannot_be_deleted() -> None:
    editor, _ = make_editor()

    with pytest.raises(HostError):
        editor.delete_window()


def test_deleting_selected_window_selects_another() -> None:
    editor, _ = make_editor()
    first = editor.selected_window()
    second = editor.split_window()
    editor.select_window(second)

    editor.delete_window()

    assert editor.selected_window() == first


def test_screens_lifecycle() -> None:
    screens = MemoryScreens()
    created = screens.create()

    assert screens.current_screen() == created
    screens.goto(0)
    screens.kill(created)
    assert tuple(screens.screen_ids()) == (0,)
    with pytest.raises(HostError):
        screens.kill()
    with pytest.raises(HostError):
        screens.goto(created)


def test_resolve_screen_provider_probes_host() -> None:
    screens = MemoryScreens()
    with_screens, _ = make_editor(screens=screens)
    without, _ = make_editor()

    assert resolve_screen_provider(with_screens) is screens
    fallback = resolve_screen_provider(without, default_screen="solo")
    assert isinstance(fallback, NullScreenProvider)
    assert fallback.current_screen() == "solo"
    assert fallback.has_screen("anything") is True
