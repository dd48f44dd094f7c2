"""Main Playbook TUI application."""

import logging
from pathlib import Path
from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, Static

from playbook.editor import EditorSession
from playbook.events import EditorEvent
from playbook.exchange import export_play
from playbook.ui.constants import DEFAULT_EXPORT_PATH, MODES
from playbook.ui.widgets import FieldCanvas

logger = logging.getLogger(__name__)


class PlaybookApp(App):
    """Textual application hosting one editor session."""

    TITLE = "Playbook"
    SUB_TITLE = "American Football Play Designer"

    CSS = """
    #status {
        height: 1;
        background: $panel;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True, priority=True),
        Binding("m", "mode('move')", "Move", show=True),
        Binding("d", "mode('design')", "Design", show=True),
        Binding("e", "export", "Export", show=True),
    ]

    def __init__(
        self,
        session: Optional[EditorSession] = None,
        export_path: str = DEFAULT_EXPORT_PATH,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self.session = session or EditorSession().build()
        self.export_path = Path(export_path)

    def compose(self) -> ComposeResult:
        yield Header()
        yield FieldCanvas(self.session, id="field")
        yield Static(id="status")
        yield Footer()

    def on_mount(self) -> None:
        """Set up the app on mount."""
        self.session.event_bus.subscribe_all(self._on_editor_event)
        self._update_status()

    def on_unmount(self) -> None:
        self.session.event_bus.unsubscribe_all(self._on_editor_event)

    def _on_editor_event(self, event: EditorEvent) -> None:
        self._update_status()

    def _update_status(self) -> None:
        mode = self.session.mode.value
        last = self.session.edit_log.last_entry
        text = f"[b]{MODES[mode]}[/b]"
        if last is not None:
            text += f"  |  {last.description}"
        self.query_one("#status", Static).update(text)

    def on_field_canvas_edited(self, message: FieldCanvas.Edited) -> None:
        self._update_status()

    def action_mode(self, mode: str) -> None:
        """Switch interaction mode."""
        self.session.change_mode(mode)

    def action_export(self) -> None:
        """Write the current play to JSON."""
        play = export_play(self.session)
        self.export_path.write_text(play.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Play exported to %s", self.export_path)
        self.notify(f"Play saved to {self.export_path}", title="Export", timeout=3)


def run_app(session: Optional[EditorSession] = None, export_path: str = DEFAULT_EXPORT_PATH) -> None:
    """Run the Playbook TUI application."""
    app = PlaybookApp(session=session, export_path=export_path)
    app.run()
