"""User-facing commands."""

from .toggle import previous_buffer, switch_to_previous_buffer

__all__ = ["previous_buffer", "switch_to_previous_buffer"]
