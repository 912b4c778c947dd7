"""Shared constants for statusline-config."""

APP_NAME = "statusline-config"
APP_VERSION = "1.0.0"
CONFIG_SCHEMA_VERSION = "1.0"

CONFIG_FILE_NAME = ".statusline.config"
SCRIPT_FILE_NAME = "statusline.sh"

# Percentage thresholds
PERCENT_MIN = 0
PERCENT_MAX = 100

# Mascot productive/deletion triggers count changed lines, not percent
LINE_COUNT_MAX = 100_000

# Animation frame interval in milliseconds
SPEED_MIN_MS = 1
SPEED_MAX_MS = 10_000

DIRECTORY_LENGTH_MIN = 1
DIRECTORY_LENGTH_MAX = 200

TOKEN_K_FORMAT_MIN = 1
TOKEN_K_FORMAT_MAX = 1_000_000

VOLUME_MIN = 0.1
VOLUME_MAX = 10.0

# Placeholder for newly appended emoji frames / moon icons
NEW_FRAME_EMOJI = "🆕"
