"""Global on/off switch that installs and removes the history hooks."""

from __future__ import annotations

from typing import Dict, Optional

from buffer_toggle.actions.toggle import switch_to_previous_buffer
from buffer_toggle.history.hooks import make_hooks
from buffer_toggle.history.store import HistoryStore
from buffer_toggle.host.events import BeforeHook
from buffer_toggle.host.protocols import EditorHost, ScreenProvider, WindowId
from buffer_toggle.runtime import telemetry
from buffer_toggle.runtime.settings import ToggleSettings


class BufferToggleMode:
    """Owns the history store and the hooks that feed it.

    Installed state is tracked here rather than inferred from the host's
    dispatcher, so enabling or disabling twice never double-registers or
    raises.
    """

    name = "buffer-toggle-mode"

    def __init__(
        self,
        host: EditorHost,
        *,
        settings: Optional[ToggleSettings] = None,
        screens: Optional[ScreenProvider] = None,
        logger_name: str | None = None,
    ) -> None:
        self.host = host
        self.settings = settings or ToggleSettings.from_env()
        self.store = HistoryStore(
            host, settings=self.settings, screens=screens, logger_name=logger_name
        )
        self._hooks: Dict[str, BeforeHook] = make_hooks(self.store)
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> bool:
        if self._enabled:
            return False
        self.store.clear()
        for operation, callback in self._hooks.items():
            self.host.hooks.add_before(operation, callback)
        self._enabled = True
        telemetry.record_event("mode.enable", data={"mode": self.name})
        return True

    def disable(self) -> bool:
        if not self._enabled:
            return False
        for operation, callback in self._hooks.items():
            self.host.hooks.remove_before(operation, callback)
        self._enabled = False
        telemetry.record_event("mode.disable", data={"mode": self.name})
        return True

    def toggle(self, flag: Optional[bool] = None) -> bool:
        """Flip the mode, or force it on/off when ``flag`` is given."""

        wanted = not self._enabled if flag is None else bool(flag)
        if wanted:
            self.enable()
        else:
            self.disable()
        return self._enabled

    def switch_to_previous_buffer(self, window: WindowId = None) -> bool:
        if not self._enabled:
            # History is not being recorded; only the host default applies.
            if self.settings.fallback:
                self.host.switch_to_other_buffer(
                    self.host.selected_window() if window is None else window
                )
            return False
        return switch_to_previous_buffer(self.store, window)


__all__ = ["BufferToggleMode"]
