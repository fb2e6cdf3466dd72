"""Callbacks that keep the history store current from host operations."""

from __future__ import annotations

from functools import partial
from typing import Dict

from buffer_toggle.host.events import DELETE_WINDOW, SHOW_BUFFER, BeforeHook
from buffer_toggle.host.protocols import WindowId

from .store import HistoryStore


def before_show_buffer(store: HistoryStore, window: WindowId, *_args: object) -> None:
    """Runs before ``window`` is given a new buffer."""

    store.update_entry(window)


def before_delete_window(
    store: HistoryStore, window: WindowId = None, *_args: object
) -> None:
    """Runs before ``window`` is deleted, while its handle is still valid."""

    store.cleanup(store.host.selected_window() if window is None else window)


def make_hooks(store: HistoryStore) -> Dict[str, BeforeHook]:
    """Bind both callbacks to ``store``, keyed by the host operation they guard.

    The returned callables keep their identity so they can be removed later.
    """

    return {
        SHOW_BUFFER: partial(before_show_buffer, store),
        DELETE_WINDOW: partial(before_delete_window, store),
    }


__all__ = ["before_delete_window", "before_show_buffer", "make_hooks"]
