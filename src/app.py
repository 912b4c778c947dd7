"""Main TUI application for statusline-config."""

import logging
import os
from pathlib import Path

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.widgets import Static

from constants import APP_NAME
from controller import NavigationCoordinator
from ui import (
    DEFAULT_THEME,
    Theme,
    render_header,
    render_help,
    render_preview,
    render_screen,
    render_status,
)
from ui.ids import css
import ui.ids as ids

# Set up logging to XDG state directory
def _get_log_path() -> Path:
    """Get the log file path using XDG Base Directory spec."""
    xdg_state = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state) / APP_NAME
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"{APP_NAME}.log"

logging.basicConfig(
    filename=str(_get_log_path()),
    level=logging.DEBUG,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

APP_CSS = (Path(__file__).parent / "ui" / "styles.css").read_text()


class StatuslineConfigApp(App):
    """TUI for editing the statusline configuration."""

    TITLE = "Statusline Config"
    ENABLE_COMMAND_PALETTE = False
    CSS = APP_CSS

    # Global keys bypass the screen controllers, even while editing
    BINDINGS = [
        Binding("ctrl+c", "global_key('ctrl+c')", "Quit", show=False, priority=True),
        Binding("ctrl+s", "global_key('ctrl+s')", "Save", show=False, priority=True),
        Binding("ctrl+r", "global_key('ctrl+r')", "Revert", show=False, priority=True),
    ]

    def __init__(self, coordinator: NavigationCoordinator, theme: Theme = DEFAULT_THEME) -> None:
        super().__init__()
        self.coordinator = coordinator
        self.palette = theme

    def compose(self) -> ComposeResult:
        yield Vertical(
            Static("", id=ids.HEADER),
            Static("", id=ids.STATUS_BAR),
            Static("", id=ids.CONTENT_BOX),
            Static("", id=ids.PREVIEW),
            Static("", id=ids.HELP_BAR),
            id=ids.MAIN_CONTAINER,
        )

    def on_mount(self) -> None:
        log.info(f"Editing {self.coordinator.store.path}")
        self._refresh_view()

    # =========================================================================
    # Input
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        """Forward every key to the coordinator, then redraw."""
        event.stop()
        self._dispatch(event.key, event.character)

    def action_global_key(self, key: str) -> None:
        self._dispatch(key, None)

    def _dispatch(self, key: str, character: str | None) -> None:
        self.coordinator.handle_key(key, character)
        if self.coordinator.should_quit:
            self.exit()
            return
        self._refresh_view()

    def on_resize(self, event: events.Resize) -> None:
        self._refresh_view()

    # =========================================================================
    # Output
    # =========================================================================

    def _refresh_view(self) -> None:
        """Re-render every region from coordinator state."""
        coordinator = self.coordinator
        try:
            self.query_one(css(ids.HEADER), Static).update(
                render_header(self.size.width, self.palette)
            )
            self.query_one(css(ids.STATUS_BAR), Static).update(
                render_status(coordinator, self.palette)
            )
            content = self.query_one(css(ids.CONTENT_BOX), Static)
            content.update(render_screen(coordinator, self.palette))
            content.set_class(coordinator.confirming_quit, "confirm")
            preview = self.query_one(css(ids.PREVIEW), Static)
            preview.update(render_preview(coordinator.config, self.palette))
            preview.set_class(coordinator.confirming_quit, "hidden")
            self.query_one(css(ids.HELP_BAR), Static).update(
                render_help(coordinator, self.palette)
            )
        except NoMatches:
            pass
