"""Tests for the Display Options screen controller."""

from controller import DisplayController


class TestDisplayRows:

    def test_rows(self, config):
        controller = DisplayController(config)
        assert [b.key for b in controller.items] == [
            "display.separator",
            "thresholds.directory_max_length",
            "thresholds.directory_truncate_to",
            "thresholds.token_k_format",
            "waiting_indicator.icon",
            "waiting_indicator.text",
            "waiting_indicator.blink",
            "colors.directory",
            "colors.git_clean",
            "colors.git_dirty",
            "colors.model",
            "colors.text",
        ]


class TestDisplayEditing:

    def test_edit_separator_keeps_spaces(self, config, press, type_text):
        controller = DisplayController(config)
        press(controller, "enter", "ctrl+u")
        type_text(controller, " | ")
        press(controller, "enter")
        assert config.display.separator == " | "

    def test_number_clamped(self, config, press, type_text):
        controller = DisplayController(config)
        press(controller, "down", "enter", "ctrl+u")
        type_text(controller, "500")
        press(controller, "enter")
        assert config.thresholds.directory_max_length == 200

    def test_invalid_number_stays_editing(self, config, press, type_text):
        """Bad text keeps the session open with an error and no change."""
        controller = DisplayController(config)
        press(controller, "down", "enter", "ctrl+u")
        type_text(controller, "abc")
        result = press(controller, "enter")
        assert not result.changed
        assert result.message
        assert controller.state == "editing"
        assert controller.session.error
        assert config.thresholds.directory_max_length == 15

    def test_fix_after_error(self, config, press, type_text):
        controller = DisplayController(config)
        press(controller, "down", "enter", "ctrl+u")
        type_text(controller, "x")
        press(controller, "enter", "backspace")
        type_text(controller, "20")
        result = press(controller, "enter")
        assert result.changed
        assert config.thresholds.directory_max_length == 20

    def test_toggle_blink(self, config, press):
        controller = DisplayController(config)
        controller.selected = 6
        press(controller, "space")
        assert config.waiting_indicator.blink is False


class TestColorPicker:

    def test_pick_color(self, config, press):
        controller = DisplayController(config)
        controller.selected = 7
        press(controller, "enter")
        assert controller.state == "choosing"
        assert controller.picker.current.value == "bright_blue"
        press(controller, "down")
        result = press(controller, "enter")
        assert result.changed
        assert config.colors.directory == "bright_magenta"
        assert controller.state == "browsing"

    def test_escape_cancels(self, config, press):
        controller = DisplayController(config)
        controller.selected = 7
        result = press(controller, "enter", "down", "escape")
        assert not result.changed
        assert config.colors.directory == "bright_blue"

    def test_navigation_moves_picker_not_rows(self, config, press):
        controller = DisplayController(config)
        controller.selected = 7
        press(controller, "enter", "up", "up")
        assert controller.selected == 7
        assert controller.picker.current.value == "bright_green"

    def test_display_value_uses_color_name(self, config):
        controller = DisplayController(config)
        assert controller.display_value(controller.items[7]) == "bright_blue"
