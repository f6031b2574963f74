"""
views.py - Screen rendering
Single responsibility: draw one frame from a read-only AppState.
"""
import curses
import textwrap

from flash.config import (
    APP_TITLE,
    EDIT_MENU_ITEMS,
    HEADER_TABS,
    PAIR_ERROR,
    PAIR_HIGHLIGHT,
    PAIR_MUTED,
    PAIR_TITLE,
)
from flash.ui import helpers
from flash.ui_state import AppState, EditMode, Mode, Screen

HEADER_HEIGHT = 3
FOOTER_HEIGHT = 2


def init_colors() -> None:
    """Register colour pairs; monochrome terminals fall back to attributes."""
    if not curses.has_colors():
        return
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK
    curses.init_pair(PAIR_HIGHLIGHT, curses.COLOR_GREEN, background)
    curses.init_pair(PAIR_TITLE, curses.COLOR_CYAN, background)
    curses.init_pair(PAIR_ERROR, curses.COLOR_RED, background)
    curses.init_pair(PAIR_MUTED, curses.COLOR_WHITE, background)


def _attr(pair: int, fallback: int = curses.A_NORMAL) -> int:
    if curses.has_colors():
        return curses.color_pair(pair)
    return fallback


def _put(win, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
    height, width = win.getmaxyx()
    if y < 0 or y >= height or x >= width - 1:
        return
    try:
        win.addnstr(y, x, text, width - x - 1, attr)
    except curses.error:
        pass  # terminal shrank mid-frame


# ---------------------------------------------------------------------------
# Frame parts
# ---------------------------------------------------------------------------


def draw_header(win, state: AppState) -> None:
    _, width = win.getmaxyx()
    title = f" {APP_TITLE} "
    win.hline(0, 0, curses.ACS_HLINE, width)
    _put(win, 0, max(0, (width - len(title)) // 2), title, curses.A_BOLD)
    x = 2
    for i, tab in enumerate(HEADER_TABS):
        # only the Local tab exists; Remote and Exit are placeholders
        attr = _attr(PAIR_HIGHLIGHT, curses.A_REVERSE) | curses.A_BOLD if i == 0 else curses.A_NORMAL
        _put(win, 1, x, tab, attr)
        x += len(tab) + 3
    win.hline(2, 0, curses.ACS_HLINE, width)


def draw_list(win, top: int, height: int, items: list[str], selected: int, title: str = "") -> None:
    if title:
        _put(win, top, 2, title, _attr(PAIR_TITLE, curses.A_BOLD) | curses.A_BOLD)
        top += 1
        height -= 1
    if height <= 0:
        return
    scroll = max(0, selected - height + 1)
    for i, item in enumerate(items[scroll: scroll + height]):
        index = scroll + i
        marker = ">> " if index == selected else "   "
        attr = curses.A_REVERSE if index == selected else curses.A_NORMAL
        _put(win, top + i, 2, f"{marker}{item}", attr)


def draw_prompt(win, y: int, label: str, state: AppState) -> None:
    _put(win, y, 2, label, curses.A_BOLD)
    _put(win, y + 1, 4, state.text_buffer + "_")


def draw_study(win, top: int, height: int, state: AppState) -> None:
    deck = state.deck
    _, width = win.getmaxyx()
    card_title, text = helpers.section_text(deck)
    _put(win, top, 2, deck.title if deck is not None else "", _attr(PAIR_TITLE, curses.A_BOLD) | curses.A_BOLD)
    _put(win, top + 1, 2, card_title, curses.A_UNDERLINE)
    _put(win, top + 1, max(2, width - 12), helpers.section_position(deck), _attr(PAIR_MUTED))
    lines = textwrap.wrap(text, max(10, width - 8)) or [""]
    for i, line in enumerate(lines[: max(0, height - 4)]):
        _put(win, top + 3 + i, 4, line)
    _put(win, top + height - 1, 2, helpers.progress_text(deck), _attr(PAIR_MUTED))


def draw_editor(win, top: int, height: int, state: AppState) -> None:
    deck = state.deck
    if state.mode == Mode.EDITOR_EDIT_CONTENT:
        draw_study(win, top, height - 3, state)
        draw_prompt(win, top + height - 2, "Section text:", state)
        return
    items = helpers.editor_menu_items(state)
    title = deck.title if deck is not None else ""
    if state.edit_mode == EditMode.ADD_ITEM:
        draw_list(win, top, height - 3, items, state.edit_menu_cursor.index, title)
        label = "Rename card:" if state.rename_target else "New card name:"
        draw_prompt(win, top + height - 2, label, state)
        return
    draw_list(win, top, height, items, state.edit_menu_cursor.index, title)


def draw_local_menu(win, top: int, height: int, state: AppState) -> None:
    items = helpers.local_menu_items(state)
    if state.mode == Mode.LOCAL_EDIT_MENU:
        draw_list(win, top, height - 4, items, state.local_menu_cursor.index, "Decks")
        draw_list(win, top + height - 3, 3, list(EDIT_MENU_ITEMS), state.edit_menu_selection.index, state.selected_deck_name() or "")
        return
    if state.mode == Mode.LOCAL_ADD_ITEM:
        draw_list(win, top, height - 3, items, state.local_menu_cursor.index, "Decks")
        label = "Rename deck:" if state.rename_target else "New deck name:"
        draw_prompt(win, top + height - 2, label, state)
        return
    draw_list(win, top, height, items, state.local_menu_cursor.index, "Decks")


def draw_footer(win, state: AppState) -> None:
    height, width = win.getmaxyx()
    failure = helpers.failure_text(state)
    if failure:
        _put(win, height - 2, 2, failure, _attr(PAIR_ERROR, curses.A_BOLD) | curses.A_BOLD)
    _put(win, height - 1, 0, helpers.KEY_HINTS[state.mode], _attr(PAIR_MUTED, curses.A_DIM))


_BODIES = {
    Screen.LOCAL_MENU: draw_local_menu,
    Screen.DECK_VIEWER: draw_study,
    Screen.DECK_EDITOR: draw_editor,
}


def draw(win, state: AppState) -> None:
    """Render one full frame."""
    win.erase()
    height, _ = win.getmaxyx()
    if height <= HEADER_HEIGHT + FOOTER_HEIGHT:
        _put(win, 0, 0, "Terminal too small")
        win.refresh()
        return
    draw_header(win, state)
    body_height = height - HEADER_HEIGHT - FOOTER_HEIGHT
    if body_height > 0:
        _BODIES[state.screen](win, HEADER_HEIGHT, body_height, state)
    draw_footer(win, state)
    win.refresh()
