"""Protocols describing the host editor services the mode consumes."""

from __future__ import annotations

from typing import Hashable, Iterable, Optional, Protocol

from .events import HookDispatcher

WindowId = Hashable
BufferId = Hashable
ScreenId = Hashable


class ScreenProvider(Protocol):
    """Optional workspace/screen extension (elscreen-style)."""

    def current_screen(self) -> ScreenId:
        """Return the identifier of the screen currently shown."""
        ...

    def screen_ids(self) -> Iterable[ScreenId]:
        """Return identifiers of all screens that still exist."""
        ...


class EditorHost(Protocol):
    """Window/buffer object model of the host editor."""

    hooks: HookDispatcher
    screens: Optional[ScreenProvider]

    def selected_window(self) -> WindowId: ...

    def window_buffer(self, window: WindowId) -> BufferId: ...

    def window_start(self, window: WindowId) -> int: ...

    def window_point(self, window: WindowId) -> int: ...

    def window_live(self, window: WindowId) -> bool: ...

    def buffer_live(self, buffer: BufferId) -> bool: ...

    def set_window_buffer_start_and_point(
        self, window: WindowId, buffer: BufferId, start: int, point: int
    ) -> None:
        """Show ``buffer`` in ``window`` at ``start``/``point`` in one redisplay."""
        ...

    def switch_to_other_buffer(self, window: WindowId) -> None:
        """Show the most recently used buffer other than the current one."""
        ...


__all__ = ["BufferId", "EditorHost", "ScreenId", "ScreenProvider", "WindowId"]
