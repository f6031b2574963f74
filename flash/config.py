"""
config.py - Path resolution and app constants
Flash v0.1
"""

import os

from flash.errors import ConfigError

# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def get_storage_root() -> str:
    """
    Return the directory that holds every deck.
    - FLASH_HOME set : that directory
    - otherwise      : ~/.flash
    """
    override = os.environ.get("FLASH_HOME")
    if override:
        return os.path.abspath(os.path.expanduser(override))
    return os.path.join(os.path.expanduser("~"), ".flash")


def ensure_storage_root(path: str) -> str:
    """Create the storage root when missing; raise ConfigError if unusable."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Cannot create storage directory {path}: {e}") from e
    if not os.access(path, os.W_OK):
        raise ConfigError(f"Storage directory is not writable: {path}")
    return path


STORAGE_ROOT = get_storage_root()
LOG_PATH = os.path.join(STORAGE_ROOT, "flash.log")

# ---------------------------------------------------------------------------
# App constants
# ---------------------------------------------------------------------------

APP_TITLE = "Flash"
APP_VERSION = "0.1.0"
POLL_TIMEOUT_MS = 200  # key poll bound; only paces redraws

CARD_SUFFIX = ".json"

HEADER_TABS = ("Local", "Remote", "Exit")
ADD_DECK_LABEL = "Add new deck..."
ADD_CARD_LABEL = "Add new card..."
EDIT_MENU_ITEMS = ("Rename deck", "Edit cards")

# ---------------------------------------------------------------------------
# Colour pairs (curses)
# ---------------------------------------------------------------------------

PAIR_HIGHLIGHT = 1  # selected tab / list item
PAIR_TITLE = 2
PAIR_ERROR = 3
PAIR_MUTED = 4
