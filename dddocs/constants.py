"""Shared constants for dddocs paths and environment variables."""

DDDOCS_HOME_EXT = ".dddocs"  # user-level state directory suffix

DDDOCS_HOME_ENV = "DDDOCS_HOME"
DDDOCS_CONFIG_ENV = "DDDOCS_CONFIG"

DEFAULT_CONFIG_NAME = "dddocs.json"
LOG_FILE_NAME = "dddocs.log"
