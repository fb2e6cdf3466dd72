"""Host editor abstraction: protocols, hook dispatch, and a reference host."""

from .events import DELETE_WINDOW, SHOW_BUFFER, HookDispatcher
from .memory import (
    HostError,
    MemoryEditor,
    MemoryScreens,
    UnknownBufferError,
    UnknownWindowError,
)
from .protocols import BufferId, EditorHost, ScreenId, ScreenProvider, WindowId
from .screens import NullScreenProvider, resolve_screen_provider

__all__ = [
    "BufferId",
    "DELETE_WINDOW",
    "EditorHost",
    "HookDispatcher",
    "HostError",
    "MemoryEditor",
    "MemoryScreens",
    "NullScreenProvider",
    "SHOW_BUFFER",
    "ScreenId",
    "ScreenProvider",
    "UnknownBufferError",
    "UnknownWindowError",
    "WindowId",
    "resolve_screen_provider",
]
