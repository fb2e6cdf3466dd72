"""Textual adapter: key-driven controller plus a demo app."""

from .controller import KEY_ACTIONS, TextualToggleController, TextualUIHooks, WindowView

__all__ = ["KEY_ACTIONS", "TextualToggleController", "TextualUIHooks", "WindowView"]
