"""
helpers.py - UI helper functions
Single responsibility: small text builders shared by the views.
"""
from flash.config import ADD_CARD_LABEL, ADD_DECK_LABEL
from flash.domain.models import Deck
from flash.ui_state import AppState, Mode

KEY_HINTS = {
    Mode.LOCAL_MENU: "up/down: select | Enter: open | e: edit | d: delete | q: quit",
    Mode.LOCAL_EDIT_MENU: "up/down: select | Enter: choose | Esc: back",
    Mode.LOCAL_ADD_ITEM: "Enter: save | Esc: cancel",
    Mode.DECK_VIEWER: "left/right: previous/next | Esc: back | q: quit",
    Mode.DECK_EDITOR: "up/down: select | e: edit | r: rename | d: delete | Esc: save & back | q: save & quit",
    Mode.EDITOR_ADD_ITEM: "Enter: save | Esc: cancel",
    Mode.EDITOR_EDIT_CONTENT: "left/right: section | Ctrl-A: new section | Ctrl-D: delete section | Enter: done | Esc: discard",
}


def progress_text(deck: Deck | None) -> str:
    """1-based "Progress: 2/5"; "Progress: 0/0" for an empty deck."""
    if deck is None or len(deck) == 0:
        return "Progress: 0/0"
    return f"Progress: {deck.current_card + 1}/{len(deck)}"


def section_text(deck: Deck | None) -> tuple[str, str]:
    """(card title, section text) for the active card; blanks when empty."""
    card = deck.current() if deck is not None else None
    if card is None:
        return "", ""
    return card.title, card.current_text()


def section_position(deck: Deck | None) -> str:
    card = deck.current() if deck is not None else None
    if card is None or not card.sections:
        return ""
    return f"{card.current_section + 1}/{card.section_count()}"


def local_menu_items(state: AppState) -> list[str]:
    return state.deck_names + [ADD_DECK_LABEL]


def editor_menu_items(state: AppState) -> list[str]:
    names = state.deck.card_names() if state.deck is not None else []
    return names + [ADD_CARD_LABEL]


def failure_text(state: AppState) -> str:
    if not state.edit_failed:
        return ""
    if state.mode in (Mode.LOCAL_ADD_ITEM, Mode.EDITOR_ADD_ITEM):
        return "That name is already taken or cannot be used."
    return "The last change could not be saved."
