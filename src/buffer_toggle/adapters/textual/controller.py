"""UI-agnostic controller that drives a ``MemoryEditor`` from key events."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

from buffer_toggle.actions import previous_buffer
from buffer_toggle.host.memory import HostError, MemoryEditor
from buffer_toggle.mode import BufferToggleMode


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class WindowView:
    """Render-ready description of one window."""

    window: int
    buffer_name: str
    text: str
    start: int
    point: int
    selected: bool
    previous: Optional[str] = None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the controller to update Textual widgets."""

    update_windows: Callable[[Sequence[WindowView]], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


KEY_ACTIONS: Dict[str, str] = {
    "ctrl+t": "toggle",
    "ctrl+n": "next_buffer",
    "ctrl+s": "split",
    "ctrl+w": "close_window",
    "tab": "other_window",
    "ctrl+e": "toggle_mode",
}


class TextualToggleController:
    """Maps keys to editor operations and pushes window views to the UI."""

    def __init__(
        self, editor: MemoryEditor, mode: BufferToggleMode, hooks: TextualUIHooks
    ) -> None:
        self.editor = editor
        self.mode = mode
        self.hooks = hooks
        self._refresh()

    def handle_textual_key(self, key: str) -> Optional[str]:
        """Run the action bound to ``key``; returns its name, or ``None``."""

        action = KEY_ACTIONS.get(key)
        if action is None:
            return None
        self.hooks.log(f"key -> {key} action={action}")
        try:
            status = getattr(self, f"_action_{action}")()
        except HostError as exc:
            status = str(exc)
        self.hooks.update_status(status)
        self._refresh()
        return action

    def _action_toggle(self) -> str:
        used_history = self.mode.switch_to_previous_buffer()
        label = "previous" if used_history else "other"
        return f"{label}: {self._selected_name()}"

    def _action_next_buffer(self) -> str:
        buffers = self.editor.buffers()
        current = self.editor.window_buffer(self.editor.selected_window())
        index = buffers.index(current) if current in buffers else -1
        self.editor.show_buffer(buffers[(index + 1) % len(buffers)])
        return f"buffer: {self._selected_name()}"

    def _action_split(self) -> str:
        window = self.editor.split_window()
        self.editor.select_window(window)
        return f"window {window}"

    def _action_close_window(self) -> str:
        window = self.editor.selected_window()
        self.editor.delete_window(window)
        return f"closed window {window}"

    def _action_other_window(self) -> str:
        windows = self.editor.windows()
        index = windows.index(self.editor.selected_window())
        self.editor.select_window(windows[(index + 1) % len(windows)])
        return f"window {self.editor.selected_window()}"

    def _action_toggle_mode(self) -> str:
        state = "on" if self.mode.toggle() else "off"
        return f"{self.mode.name} {state}"

    def _selected_name(self) -> str:
        return self.editor.buffer_name(
            self.editor.window_buffer(self.editor.selected_window())
        )

    def _refresh(self) -> None:
        self.hooks.update_windows(self.views())

    def views(self) -> List[WindowView]:
        editor = self.editor
        selected = editor.selected_window()
        views: List[WindowView] = []
        for window in editor.windows():
            buffer = editor.buffer(editor.window_buffer(window))
            previous = None
            if self.mode.enabled:
                prior = previous_buffer(self.mode.store, window)
                previous = editor.buffer_name(prior) if prior is not None else None
            views.append(
                WindowView(
                    window=window,
                    buffer_name=buffer.name,
                    text=buffer.text,
                    start=editor.window_start(window),
                    point=editor.window_point(window),
                    selected=window == selected,
                    previous=previous,
                )
            )
        return views


__all__ = ["KEY_ACTIONS", "TextualToggleController", "TextualUIHooks", "WindowView"]
