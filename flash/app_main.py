"""
app_main.py - Flash main application
Flash v0.1
"""

import curses
import logging
import sys

from flash.config import LOG_PATH, POLL_TIMEOUT_MS, STORAGE_ROOT, ensure_storage_root
from flash.errors import ConfigError
from flash.ui import keys, views
from flash.ui.actions import Navigator

logger = logging.getLogger(__name__)


# ==========================================================================
# Terminal loop
# ==========================================================================


def poll_key(stdscr):
    """Wait up to POLL_TIMEOUT_MS for one key; None when nothing arrived."""
    try:
        code = stdscr.get_wch()
    except curses.error:
        return None
    if code == curses.KEY_RESIZE:
        return None
    return keys.translate(code)


def run(stdscr, navigator: Navigator) -> None:
    curses.curs_set(0)
    curses.set_escdelay(25)
    stdscr.keypad(True)
    stdscr.timeout(POLL_TIMEOUT_MS)
    views.init_colors()

    views.draw(stdscr, navigator.state)
    while navigator.running:
        key = poll_key(stdscr)
        navigator.handle_key(key)
        views.draw(stdscr, navigator.state)
    logger.info("Session ended")


# ==========================================================================
# Entry point
# ==========================================================================


def main() -> None:
    try:
        root = ensure_storage_root(STORAGE_ROOT)
    except ConfigError as e:
        print(f"flash: {e}", file=sys.stderr)
        sys.exit(1)

    # stderr belongs to curses while the session runs
    logging.basicConfig(
        filename=LOG_PATH,
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info(f"Storage root: {root}")

    try:
        navigator = Navigator(root)
        curses.wrapper(run, navigator)
    except Exception:
        logger.exception("Unhandled exception in terminal session")
        print(f"flash: unexpected error, see {LOG_PATH}", file=sys.stderr)
        sys.exit(1)
