"""Runtime services: telemetry and environment-driven settings."""

from . import telemetry
from .settings import DEFAULT_SCREEN, ToggleSettings

__all__ = ["telemetry", "DEFAULT_SCREEN", "ToggleSettings"]
