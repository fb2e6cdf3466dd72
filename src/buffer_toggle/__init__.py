"""Per-window toggle between the two most recently shown buffers."""

from .actions import previous_buffer, switch_to_previous_buffer
from .history import HistoryEntry, HistoryKey, HistoryStore
from .mode import BufferToggleMode
from .runtime import ToggleSettings

__all__ = [
    "BufferToggleMode",
    "HistoryEntry",
    "HistoryKey",
    "HistoryStore",
    "ToggleSettings",
    "previous_buffer",
    "switch_to_previous_buffer",
]

__version__ = "0.1.0"
