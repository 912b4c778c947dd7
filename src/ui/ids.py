"""Widget ID constants for the TUI.

Using constants prevents typos and makes refactoring easier.
"""


def css(widget_id: str) -> str:
    """Return a CSS selector for a widget ID.

    Usage:
        from ui.ids import css, STATUS_BAR
        self.query_one(css(STATUS_BAR), Static)
    """
    return f"#{widget_id}"

# Container IDs
MAIN_CONTAINER = "main-container"
CONTENT_BOX = "content-box"

# Static widget IDs
HEADER = "header"
STATUS_BAR = "status-bar"
PREVIEW = "preview"
HELP_BAR = "help-bar"
