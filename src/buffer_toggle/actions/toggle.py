"""The "switch to previous buffer in this window" command."""

from __future__ import annotations

from typing import Optional

from buffer_toggle.history.store import HistoryStore
from buffer_toggle.host.protocols import BufferId, WindowId
from buffer_toggle.runtime import telemetry


def previous_buffer(store: HistoryStore, window: WindowId = None) -> Optional[BufferId]:
    """Return the buffer a toggle would show, or ``None``; never creates an entry."""

    key = store.key_for(window)
    entry = store.get(key)
    if entry is None:
        return None
    host = store.host
    if not host.buffer_live(entry.buffer_id):
        return None
    if entry.buffer_id == host.window_buffer(key.window_id):
        return None
    return entry.buffer_id


def switch_to_previous_buffer(store: HistoryStore, window: WindowId = None) -> bool:
    """Show the window's previous buffer at its remembered scroll and cursor.

    Returns ``True`` when history was used. Without usable history the host's
    "other buffer" is shown instead (if ``settings.fallback`` allows) and
    ``False`` is returned. The store is not written here: the host's
    show-buffer hook records the buffer being left.
    """

    host = store.host
    target = host.selected_window() if window is None else window
    with telemetry.span(
        "toggle::switch",
        component="toggle",
        metadata={"window": target},
    ) as handle:
        key, entry = store.get_or_create_entry(target)
        if previous_buffer(store, target) is not None:
            host.set_window_buffer_start_and_point(
                target, entry.buffer_id, entry.scroll_offset, entry.cursor_position
            )
            handle.add_metadata("outcome", "history")
            telemetry.record_event(
                "toggle.switch",
                level="debug",
                data={"screen": key.screen_id, "window": target, "buffer": entry.buffer_id},
            )
            return True

        handle.add_metadata("outcome", "fallback")
        if store.settings.fallback:
            host.switch_to_other_buffer(target)
        telemetry.record_event(
            "toggle.fallback",
            level="debug",
            data={"window": target, "applied": store.settings.fallback},
        )
        return False


__all__ = ["previous_buffer", "switch_to_previous_buffer"]
