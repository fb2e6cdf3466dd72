"""Window history bookkeeping."""

from .hooks import before_delete_window, before_show_buffer, make_hooks
from .store import HistoryEntry, HistoryKey, HistoryStore

__all__ = [
    "HistoryEntry",
    "HistoryKey",
    "HistoryStore",
    "before_delete_window",
    "before_show_buffer",
    "make_hooks",
]
