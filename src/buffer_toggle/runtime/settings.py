"""Environment-driven configuration for the toggle mode."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .telemetry import ENV_PREFIX, parse_flag

DEFAULT_SCREEN = "default"


@dataclass(frozen=True, slots=True)
class ToggleSettings:
    """Knobs for history bookkeeping and the toggle command.

    ``deferred_prune`` leaves the entry of the window being deleted in place
    until a later cleanup pass finds its handle invalid. ``fallback`` controls
    whether the command switches to the host's "other buffer" when no usable
    history exists. ``default_screen`` keys history when no screen extension
    is loaded.
    """

    deferred_prune: bool = False
    fallback: bool = True
    default_screen: str = DEFAULT_SCREEN

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ToggleSettings":
        if environ is None:
            environ = os.environ

        def get(name: str) -> Optional[str]:
            return environ.get(f"{ENV_PREFIX}{name}")

        return cls(
            deferred_prune=parse_flag(
                "DEFERRED_PRUNE", get("DEFERRED_PRUNE"), False
            ),
            fallback=parse_flag("FALLBACK", get("FALLBACK"), True),
            default_screen=get("DEFAULT_SCREEN") or DEFAULT_SCREEN,
        )


__all__ = ["DEFAULT_SCREEN", "ToggleSettings"]
