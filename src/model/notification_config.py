"""Notification channel settings."""

from constants import PERCENT_MAX, PERCENT_MIN, VOLUME_MAX, VOLUME_MIN
from model.ui_field import ConfigBase, UIField


def _context_threshold(default: int) -> UIField:
    return UIField(
        int, default,
        "Context Threshold", "Context usage that triggers the alert",
        minimum=PERCENT_MIN, maximum=PERCENT_MAX, unit="%",
    )


def _session_threshold(default: int) -> UIField:
    return UIField(
        int, default,
        "Session Threshold", "Session usage that triggers the alert",
        minimum=PERCENT_MIN, maximum=PERCENT_MAX, unit="%",
    )


class NotificationConfig(ConfigBase):
    """A basic alert channel (terminal bell, blinking text)."""

    enabled = UIField(
        bool, False,
        "Enabled", "Use this channel",
    )
    on_context_panic = UIField(
        bool, False,
        "Trigger on Context Panic", "Alert when context usage crosses the threshold",
    )
    context_threshold = _context_threshold(0)
    on_session_limit = UIField(
        bool, False,
        "Trigger on Session Limit", "Alert when session usage crosses the threshold",
    )
    session_threshold = _session_threshold(0)


class DesktopNotification(NotificationConfig):
    """System notification popups with optional sound."""

    title = UIField(
        str, "",
        "Notification Title", "Text of the popup",
    )
    sound = UIField(
        bool, False,
        "Sound Enabled", "Play a sound with the popup",
    )
    sound_path = UIField(
        str, "",
        "Sound File", "Sound played with the popup",
        choices="sounds",
    )
    sound_volume = UIField(
        float, 1.0,
        "Sound Volume", "Volume multiplier for the sound",
        minimum=VOLUME_MIN, maximum=VOLUME_MAX, unit="x",
        choices="volumes",
    )


class TerminalTitleConfig(ConfigBase):
    """Terminal title bar updates."""

    enabled = UIField(
        bool, False,
        "Enabled", "Update the terminal title",
    )
    show_model = UIField(
        bool, True,
        "Show Model", "Put the model name in the title",
    )
    show_context = UIField(
        bool, False,
        "Show Context", "Put context usage in the title",
    )
    show_branch = UIField(
        bool, False,
        "Show Branch", "Put the git branch in the title",
    )
    alert_on_panic = UIField(
        bool, True,
        "Alert on Panic", "Prefix the title when context usage is high",
    )
    context_threshold = _context_threshold(30)
    panic_prefix = UIField(
        str, "",
        "Panic Prefix", "Text prepended to the title on alert",
    )


class TmuxNotification(NotificationConfig):
    """tmux status and message alerts."""

    display_message = UIField(
        bool, False,
        "Display Message", "Show a tmux display-message on alert",
    )
    set_window_style = UIField(
        bool, False,
        "Set Window Style", "Restyle the tmux window on alert",
    )
    alert_style = UIField(
        str, "",
        "Alert Style", "tmux style string used on alert",
    )


class Notifications(ConfigBase):
    """All notification channels."""

    terminal_bell = UIField(
        NotificationConfig, None,
        "Terminal Bell", "Ring terminal bell on alerts",
        default_factory=lambda: NotificationConfig(
            enabled=True, context_threshold=30,
        ),
    )
    desktop = UIField(
        DesktopNotification, None,
        "Desktop Notifications", "Show system notification popups",
        default_factory=lambda: DesktopNotification(
            enabled=True, on_context_panic=True, context_threshold=70,
            title="Context over 70% use /clear or /compact",
            sound=True, sound_volume=1.0,
        ),
    )
    blinking_text = UIField(
        NotificationConfig, None,
        "Blinking Text", "Blink statusline text on alerts",
        default_factory=NotificationConfig,
    )
    terminal_title = UIField(
        TerminalTitleConfig, None,
        "Terminal Title", "Update terminal title bar",
        default_factory=TerminalTitleConfig,
    )
    tmux = UIField(
        TmuxNotification, None,
        "Tmux Alerts", "Send tmux notifications",
        default_factory=TmuxNotification,
    )
