"""Screen provider resolution with a single-screen fallback."""

from __future__ import annotations

from typing import Any, Iterable

from buffer_toggle.runtime.settings import DEFAULT_SCREEN

from .protocols import ScreenId, ScreenProvider


class NullScreenProvider:
    """Stands in for a missing screen extension: one screen, always valid."""

    def __init__(self, screen_id: ScreenId = DEFAULT_SCREEN) -> None:
        self.screen_id = screen_id

    def current_screen(self) -> ScreenId:
        return self.screen_id

    def screen_ids(self) -> Iterable[ScreenId]:
        return (self.screen_id,)

    def has_screen(self, screen: ScreenId) -> bool:
        del screen
        return True


def has_screen(provider: ScreenProvider, screen: ScreenId) -> bool:
    checker = getattr(provider, "has_screen", None)
    if checker is not None:
        return bool(checker(screen))
    return screen in set(provider.screen_ids())


def resolve_screen_provider(
    host: Any, *, default_screen: ScreenId = DEFAULT_SCREEN
) -> ScreenProvider:
    """Return the host's screen extension, or a null provider when absent."""

    provider = getattr(host, "screens", None)
    if provider is None:
        return NullScreenProvider(default_screen)
    if not callable(getattr(provider, "current_screen", None)) or not callable(
        getattr(provider, "screen_ids", None)
    ):
        return NullScreenProvider(default_screen)
    return provider


__all__ = ["NullScreenProvider", "has_screen", "resolve_screen_provider"]
