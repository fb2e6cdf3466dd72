"""Pre-operation hook dispatch for host editor operations."""

from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Tuple

from buffer_toggle.runtime import telemetry

# Host operation names hooks can be attached to.
SHOW_BUFFER = "set-window-buffer"
DELETE_WINDOW = "delete-window"

BeforeHook = Callable[..., None]


class HookDispatcher:
    """Runs registered callbacks immediately before a named host operation.

    Callbacks run in registration order and complete before the host mutates
    any state. While an operation's hooks are running, nested dispatch of the
    same operation is suppressed.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._before: Dict[str, List[BeforeHook]] = {}
        self._running: set[str] = set()
        self._logger_name = logger_name

    def add_before(self, operation: str, callback: BeforeHook) -> None:
        if not callable(callback):
            raise TypeError("hook callback must be callable")
        self._before.setdefault(operation, []).append(callback)

    def remove_before(self, operation: str, callback: BeforeHook) -> bool:
        callbacks = self._before.get(operation)
        if not callbacks or callback not in callbacks:
            return False
        callbacks.remove(callback)
        if not callbacks:
            del self._before[operation]
        return True

    def callbacks(self, operation: str) -> Tuple[BeforeHook, ...]:
        return tuple(self._before.get(operation, ()))

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._before))

    def run_before(self, operation: str, *args: object) -> None:
        callbacks = self.callbacks(operation)
        if not callbacks or operation in self._running:
            return
        self._running.add(operation)
        try:
            with telemetry.span(
                f"hooks::{operation}",
                logger_name=self._logger_name,
                metadata={"callbacks": len(callbacks)},
            ):
                for callback in callbacks:
                    callback(*args)
        finally:
            self._running.discard(operation)


__all__ = ["BeforeHook", "DELETE_WINDOW", "HookDispatcher", "SHOW_BUFFER"]
