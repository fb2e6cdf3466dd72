from __future__ import annotations

from typing import Optional, Tuple

from buffer_toggle.host.memory import MemoryEditor, MemoryScreens
from buffer_toggle.mode import BufferToggleMode
from buffer_toggle.runtime.settings import ToggleSettings


def make_editor(
    *names: str, screens: Optional[MemoryScreens] = None
) -> Tuple[MemoryEditor, dict[str, int]]:
    editor = MemoryEditor(screens=screens)
    buffers = {name: editor.open_buffer(name, f"contents of {name}\n") for name in names}
    return editor, buffers


def make_mode(
    editor: MemoryEditor, *, settings: Optional[ToggleSettings] = None
) -> BufferToggleMode:
    mode = BufferToggleMode(editor, settings=settings or ToggleSettings())
    mode.enable()
    return mode


def shown(editor: MemoryEditor, window: Optional[int] = None) -> str:
    target = editor.selected_window() if window is None else window
    return editor.buffer_name(editor.window_buffer(target))
