"""Per-window record of the previously displayed buffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from buffer_toggle.host.protocols import (
    BufferId,
    EditorHost,
    ScreenId,
    ScreenProvider,
    WindowId,
)
from buffer_toggle.host.screens import has_screen, resolve_screen_provider
from buffer_toggle.runtime import telemetry
from buffer_toggle.runtime.settings import ToggleSettings


@dataclass(frozen=True, slots=True)
class HistoryKey:
    screen_id: ScreenId
    window_id: WindowId


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Buffer handle plus the window's scroll offset and cursor at that time.

    ``buffer_id`` is never dereferenced without ``host.buffer_live`` first.
    """

    buffer_id: BufferId
    scroll_offset: int
    cursor_position: int


class HistoryStore:
    """Maps ``(screen, window)`` to the one buffer shown there before the current one.

    Entries are created lazily, seeded with the window's current buffer, and
    refreshed by ``update_entry`` right before the host replaces that buffer,
    so the stored buffer always lags one switch behind what is on screen.
    """

    def __init__(
        self,
        host: EditorHost,
        *,
        settings: Optional[ToggleSettings] = None,
        screens: Optional[ScreenProvider] = None,
        logger_name: str | None = None,
    ) -> None:
        self.host = host
        self.settings = settings or ToggleSettings()
        self._screens = screens
        self._entries: Dict[HistoryKey, HistoryEntry] = {}
        self._logger_name = logger_name

    @property
    def screens(self) -> ScreenProvider:
        # Probed on every access: the host may load its screen extension late.
        if self._screens is not None:
            return self._screens
        return resolve_screen_provider(
            self.host, default_screen=self.settings.default_screen
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def keys(self) -> Iterator[HistoryKey]:
        return iter(tuple(self._entries))

    def get(self, key: HistoryKey) -> Optional[HistoryEntry]:
        return self._entries.get(key)

    def snapshot(self) -> Dict[HistoryKey, HistoryEntry]:
        return dict(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def key_for(self, window: WindowId = None) -> HistoryKey:
        target = self.host.selected_window() if window is None else window
        return HistoryKey(screen_id=self.screens.current_screen(), window_id=target)

    def capture(self, window: WindowId) -> HistoryEntry:
        """Describe what ``window`` shows right now."""

        return HistoryEntry(
            buffer_id=self.host.window_buffer(window),
            scroll_offset=self.host.window_start(window),
            cursor_position=self.host.window_point(window),
        )

    def get_or_create_entry(
        self, window: WindowId = None
    ) -> Tuple[HistoryKey, HistoryEntry]:
        key = self.key_for(window)
        entry = self._entries.get(key)
        if entry is None:
            entry = self.capture(key.window_id)
            self._entries[key] = entry
        return key, entry

    def update_entry(self, window: WindowId) -> HistoryEntry:
        """Record the buffer ``window`` is about to stop showing."""

        with telemetry.span(
            "history::update",
            logger_name=self._logger_name,
            component="history",
            metadata={"window": window},
        ) as handle:
            key, entry = self.get_or_create_entry(window)
            current = self.host.window_buffer(key.window_id)
            if not self.host.buffer_live(current) or current == entry.buffer_id:
                handle.add_metadata("changed", False)
                return entry
            entry = self.capture(key.window_id)
            self._entries[key] = entry
            handle.add_metadata("changed", True)
        telemetry.record_event(
            "history.update",
            level="debug",
            data={"screen": key.screen_id, "window": key.window_id, "buffer": current},
            logger_name=self._logger_name,
        )
        return entry

    def cleanup(self, window: WindowId) -> List[HistoryKey]:
        """Drop entries whose window or screen no longer exists.

        ``window`` is the window about to be deleted. Its own entries are
        removed too unless ``settings.deferred_prune`` is set, in which case
        they are left for a later pass that sees the handle invalid.
        """

        screens = self.screens
        removed: List[HistoryKey] = []
        with telemetry.span(
            "history::cleanup",
            logger_name=self._logger_name,
            component="history",
            metadata={"window": window, "entries": len(self._entries)},
        ) as handle:
            for key in list(self._entries):
                if key.window_id == window:
                    stale = not self.settings.deferred_prune
                else:
                    stale = not has_screen(
                        screens, key.screen_id
                    ) or not self.host.window_live(key.window_id)
                if stale:
                    del self._entries[key]
                    removed.append(key)
            handle.add_metadata("removed", len(removed))
        if removed:
            telemetry.record_event(
                "history.prune",
                level="debug",
                data={"removed": [str(k.window_id) for k in removed]},
                logger_name=self._logger_name,
            )
        return removed


__all__ = ["HistoryEntry", "HistoryKey", "HistoryStore"]
