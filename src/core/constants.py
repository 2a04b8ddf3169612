"""Application constants and paths for Browser Selector."""

import os
from pathlib import Path

# Application metadata
APP_NAME = "BrowserSelector"
APP_VERSION = "1.0.0"
APP_ID = "browser-selector"

# Base paths (XDG)
_HOME = Path.home()
_XDG_CONFIG_HOME = Path(os.environ.get("XDG_CONFIG_HOME") or _HOME / ".config")
_XDG_STATE_HOME = Path(os.environ.get("XDG_STATE_HOME") or _HOME / ".local" / "state")
_XDG_DATA_HOME = Path(os.environ.get("XDG_DATA_HOME") or _HOME / ".local" / "share")

CONFIG_DIR = _XDG_CONFIG_HOME / APP_ID
LOGS_DIR = _XDG_STATE_HOME / APP_ID / "logs"

# File paths
CONFIG_FILE = CONFIG_DIR / "config.json"
DEBUG_LOG_FILE = LOGS_DIR / "debug.log"
HISTORY_LOG_FILE = LOGS_DIR / "history.log"

# Logging settings
DEBUG_LOG_MAX_BYTES = 1024 * 1024  # 1 MB
DEBUG_LOG_BACKUP_COUNT = 3

# Desktop integration
DESKTOP_ENTRY_EXTENSION = ".desktop"
DESKTOP_ENTRY_GROUP = "Desktop Entry"
USER_APPLICATIONS_DIR = _XDG_DATA_HOME / "applications"
SELECTOR_DESKTOP_FILE = f"{APP_ID}{DESKTOP_ENTRY_EXTENSION}"

# Platform helpers, in launch preference order
GTK_LAUNCH = "gtk-launch"
GIO = "gio"
NOTIFY_SEND = "notify-send"
XDG_SETTINGS = "xdg-settings"
XDG_MIME = "xdg-mime"

# Marker appended to any value shortened for display
TRUNCATION_MARKER = "..."

# Default tracking parameter prefixes
DEFAULT_TRACKING_PARAMS = [
    "fbclid",
    "utm_source",
    "utm_medium",
    "utm_campaign",
    "utm_term",
    "utm_content",
    "gclid",
    "msclkid",
    "dclid",
    "zanpid",
    "igshid",
]

# Default display limits
DEFAULT_DISPLAY = {
    "max_domain_length": 50,
    "max_url_length": 80,
    "max_param_value_length": 50,
    "max_normal_params": 10,
    "max_blacklisted_params": 5,
}
