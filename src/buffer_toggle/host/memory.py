"""In-memory reference host implementing the ``EditorHost`` protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from buffer_toggle.runtime import telemetry

from .events import DELETE_WINDOW, SHOW_BUFFER, HookDispatcher
from .protocols import BufferId, ScreenId, WindowId

SCRATCH_NAME = "*scratch*"


class HostError(RuntimeError):
    """Raised when the host is asked to act on something it does not know."""

    def __init__(self, message: str, *, handle: object | None = None) -> None:
        super().__init__(message)
        self.handle = handle


class UnknownWindowError(HostError):
    pass


class UnknownBufferError(HostError):
    pass


@dataclass(slots=True)
class MemoryBuffer:
    id: int
    name: str
    text: str = ""
    live: bool = True


@dataclass(slots=True)
class WindowState:
    buffer: int
    start: int = 0
    point: int = 0


class MemoryScreens:
    """Numbered screens, each a separate window-history context."""

    def __init__(self) -> None:
        self._screens: List[int] = [0]
        self._current = 0
        self._counter = 0

    def current_screen(self) -> ScreenId:
        return self._current

    def screen_ids(self) -> Iterable[ScreenId]:
        return tuple(self._screens)

    def create(self) -> int:
        self._counter += 1
        self._screens.append(self._counter)
        self._current = self._counter
        return self._counter

    def goto(self, screen: int) -> None:
        if screen not in self._screens:
            raise HostError(f"No screen {screen}", handle=screen)
        self._current = screen

    def kill(self, screen: Optional[int] = None) -> None:
        target = self._current if screen is None else screen
        if target not in self._screens:
            raise HostError(f"No screen {target}", handle=target)
        if len(self._screens) == 1:
            raise HostError("Cannot kill the only screen", handle=target)
        self._screens.remove(target)
        if self._current == target:
            self._current = self._screens[0]


class MemoryEditor:
    """Small editor model: buffers, windows, an MRU list, and before-hooks.

    Every change of the buffer shown in a window goes through ``_display``,
    which runs the ``SHOW_BUFFER`` hooks with ``(window, buffer)`` before
    anything is mutated. ``delete_window`` runs ``DELETE_WINDOW`` hooks with
    ``(window,)`` while the window is still live.
    """

    def __init__(
        self,
        *,
        screens: Optional[MemoryScreens] = None,
        logger_name: str | None = None,
    ) -> None:
        self.hooks = HookDispatcher(logger_name=logger_name)
        self.screens = screens
        self.redisplay_count = 0
        self._logger_name = logger_name
        self._buffers: Dict[int, MemoryBuffer] = {}
        self._windows: Dict[int, WindowState] = {}
        self._mru: List[int] = []
        self._buffer_counter = 0
        self._window_counter = 0

        scratch = self.open_buffer(SCRATCH_NAME)
        self._selected = self._new_window(scratch)
        self._touch(scratch)

    # Buffers -------------------------------------------------------------

    def open_buffer(self, name: str, text: str = "") -> int:
        self._buffer_counter += 1
        buffer = MemoryBuffer(id=self._buffer_counter, name=name, text=text)
        self._buffers[buffer.id] = buffer
        self._mru.append(buffer.id)
        return buffer.id

    def find_file(self, name: str, text: str = "", *, window: WindowId = None) -> int:
        """Open ``name`` (or reuse a live buffer with that name) and show it."""

        existing = self.get_buffer_by_name(name)
        buffer = existing if existing is not None else self.open_buffer(name, text)
        self.show_buffer(buffer, window)
        return buffer

    def get_buffer_by_name(self, name: str) -> Optional[int]:
        for buffer in self._buffers.values():
            if buffer.live and buffer.name == name:
                return buffer.id
        return None

    def buffers(self) -> Tuple[int, ...]:
        return tuple(b.id for b in self._buffers.values() if b.live)

    def buffer(self, buffer: BufferId) -> MemoryBuffer:
        try:
            return self._buffers[buffer]  # type: ignore[index]
        except KeyError as exc:
            raise UnknownBufferError(f"Unknown buffer {buffer!r}", handle=buffer) from exc

    def buffer_name(self, buffer: BufferId) -> str:
        return self.buffer(buffer).name

    def buffer_live(self, buffer: BufferId) -> bool:
        record = self._buffers.get(buffer)  # type: ignore[call-overload]
        return bool(record and record.live)

    def kill_buffer(self, buffer: BufferId) -> None:
        record = self.buffer(buffer)
        if not record.live:
            return
        record.live = False
        self._mru = [b for b in self._mru if b != record.id]
        if not self.buffers():
            self.open_buffer(SCRATCH_NAME)
        for window, state in list(self._windows.items()):
            if state.buffer == record.id:
                self._display(window, self.other_buffer(record.id), 0, 0)
        telemetry.record_event(
            "host.kill_buffer",
            level="debug",
            data={"buffer": record.name},
            logger_name=self._logger_name,
        )

    def other_buffer(self, buffer: Optional[BufferId] = None) -> int:
        """Most recently used live buffer other than ``buffer``.

        Buffers not visible in any window are preferred. Returns ``buffer``
        itself only when nothing else is live.
        """

        visible = {state.buffer for state in self._windows.values()}
        candidates = [
            b for b in self._mru if b != buffer and self._buffers[b].live
        ]
        for candidate in candidates:
            if candidate not in visible:
                return candidate
        if candidates:
            return candidates[0]
        if buffer is not None and self.buffer_live(buffer):
            return buffer  # type: ignore[return-value]
        return self.open_buffer(SCRATCH_NAME)

    # Windows -------------------------------------------------------------

    def windows(self) -> Tuple[int, ...]:
        return tuple(self._windows)

    def selected_window(self) -> WindowId:
        return self._selected

    def select_window(self, window: WindowId) -> None:
        self._state(window)
        self._selected = window  # type: ignore[assignment]
        self._touch(self._windows[self._selected].buffer)

    def window_live(self, window: WindowId) -> bool:
        return window in self._windows

    def window_buffer(self, window: WindowId) -> BufferId:
        return self._state(window).buffer

    def window_start(self, window: WindowId) -> int:
        return self._state(window).start

    def window_point(self, window: WindowId) -> int:
        return self._state(window).point

    def split_window(self, window: WindowId = None) -> int:
        source = self._state(self._resolve(window))
        new_window = self._new_window(source.buffer)
        self._windows[new_window].start = source.start
        self._windows[new_window].point = source.point
        return new_window

    def delete_window(self, window: WindowId = None) -> None:
        target = self._resolve(window)
        self._state(target)
        if len(self._windows) == 1:
            raise HostError("Attempt to delete the sole window", handle=target)
        self.hooks.run_before(DELETE_WINDOW, target)
        del self._windows[target]  # type: ignore[arg-type]
        if self._selected == target:
            self._selected = next(iter(self._windows))

    def scroll_to(self, start: int, window: WindowId = None) -> None:
        self._state(self._resolve(window)).start = start

    def goto(self, point: int, window: WindowId = None) -> None:
        self._state(self._resolve(window)).point = point

    # Display -------------------------------------------------------------

    def show_buffer(
        self,
        buffer: BufferId,
        window: WindowId = None,
        *,
        start: int = 0,
        point: int = 0,
    ) -> None:
        self._display(self._resolve(window), buffer, start, point)

    def set_window_buffer_start_and_point(
        self, window: WindowId, buffer: BufferId, start: int, point: int
    ) -> None:
        self._display(window, buffer, start, point)

    def switch_to_other_buffer(self, window: WindowId = None) -> None:
        target = self._resolve(window)
        self._display(target, self.other_buffer(self.window_buffer(target)), 0, 0)

    def _display(
        self, window: WindowId, buffer: BufferId, start: int, point: int
    ) -> None:
        state = self._state(window)
        record = self.buffer(buffer)
        if not record.live:
            raise UnknownBufferError(f"Buffer {record.name!r} is killed", handle=buffer)
        if state.buffer != record.id:
            self.hooks.run_before(SHOW_BUFFER, window, record.id)
            state.buffer = record.id
        state.start = start
        state.point = point
        self.redisplay_count += 1
        self._touch(record.id)

    # Internals -----------------------------------------------------------

    def _new_window(self, buffer: int) -> int:
        self._window_counter += 1
        self._windows[self._window_counter] = WindowState(buffer=buffer)
        return self._window_counter

    def _resolve(self, window: WindowId) -> WindowId:
        return self._selected if window is None else window

    def _state(self, window: WindowId) -> WindowState:
        try:
            return self._windows[window]  # type: ignore[index]
        except KeyError as exc:
            raise UnknownWindowError(f"Unknown window {window!r}", handle=window) from exc

    def _touch(self, buffer: int) -> None:
        if buffer in self._mru:
            self._mru.remove(buffer)
        self._mru.insert(0, buffer)


__all__ = [
    "HostError",
    "MemoryBuffer",
    "MemoryEditor",
    "MemoryScreens",
    "SCRATCH_NAME",
    "UnknownBufferError",
    "UnknownWindowError",
    "WindowState",
]
