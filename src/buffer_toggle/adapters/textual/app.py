"""Executable Textual app demonstrating the buffer toggle mode."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use buffer_toggle.adapters.textual.app"
    ) from exc

from buffer_toggle.host.memory import MemoryEditor
from buffer_toggle.mode import BufferToggleMode
from buffer_toggle.runtime import telemetry

from .controller import TextualToggleController, TextualUIHooks, WindowView


def create_default_editor(paths: Sequence[Path] = ()) -> MemoryEditor:
    """Build an editor with one buffer per readable path."""

    editor = MemoryEditor(logger_name="buffer_toggle.demo")
    for path in paths:
        editor.open_buffer(path.name, path.read_text(encoding="utf-8", errors="replace"))
    if not paths:
        for name in ("a.txt", "b.txt", "c.txt"):
            editor.open_buffer(name, f"This is {name}.\n")
    return editor


class BufferToggleApp(App[None]):
    """Side-by-side windows over an in-memory editor."""

    CSS = """
	#windows {
		height: 1fr;
	}

	.window {
		width: 1fr;
		border: round $panel;
		padding: 0 1;
		overflow: auto;
	}

	.window.selected {
		border: round $accent;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, editor: MemoryEditor) -> None:
        super().__init__()
        self.editor = editor
        self.mode = BufferToggleMode(editor)
        self.controller: TextualToggleController | None = None
        self._windows: Horizontal | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        self._windows = Horizontal(id="windows")
        yield self._windows
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        self.mode.enable()
        hooks = TextualUIHooks(
            update_windows=self._update_windows,
            update_status=self._update_status,
        )
        self.controller = TextualToggleController(self.editor, self.mode, hooks)
        self._update_status(
            "ctrl+t toggle | ctrl+n next | ctrl+s split | ctrl+w close | tab focus"
        )

    def on_key(self, event: events.Key) -> None:
        if self.controller and self.controller.handle_textual_key(event.key):
            event.stop()

    def _update_windows(self, views: Sequence[WindowView]) -> None:
        if self._windows is None or not self._windows.is_attached:
            return
        self._windows.remove_children()
        panes = []
        for view in views:
            pane = Static(view.text, classes="window")
            pane.border_title = f"{view.window}: {view.buffer_name}"
            if view.previous:
                pane.border_subtitle = f"prev {view.previous}"
            if view.selected:
                pane.add_class("selected")
            panes.append(pane)
        self._windows.mount(*panes)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the buffer toggle Textual demo.")
    parser.add_argument("files", nargs="*", type=Path, help="Files to open as buffers")
    parser.add_argument(
        "--log-preset",
        default="quiet",
        choices=("development", "quiet", "file"),
        help="telelog preset (default: quiet, so logs do not draw over the UI)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    app = BufferToggleApp(create_default_editor(args.files))
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
