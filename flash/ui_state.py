"""
ui_state.py - UI state container
"""
from enum import Enum

from flash.domain.models import Deck
from flash.utils.cursor import BoundedCursor


class Screen(Enum):
    LOCAL_MENU = "LocalMenu"
    DECK_VIEWER = "DeckViewer"
    DECK_EDITOR = "DeckEditor"


class EditMode(Enum):
    NONE = "None"
    EDIT_MENU = "EditMenu"
    ADD_ITEM = "AddItem"
    EDIT_CONTENT = "EditContent"


class Mode(Enum):
    """Every valid (screen, edit mode) pair, and nothing else."""

    LOCAL_MENU = (Screen.LOCAL_MENU, EditMode.NONE)
    LOCAL_EDIT_MENU = (Screen.LOCAL_MENU, EditMode.EDIT_MENU)
    LOCAL_ADD_ITEM = (Screen.LOCAL_MENU, EditMode.ADD_ITEM)
    DECK_VIEWER = (Screen.DECK_VIEWER, EditMode.NONE)
    DECK_EDITOR = (Screen.DECK_EDITOR, EditMode.NONE)
    EDITOR_ADD_ITEM = (Screen.DECK_EDITOR, EditMode.ADD_ITEM)
    EDITOR_EDIT_CONTENT = (Screen.DECK_EDITOR, EditMode.EDIT_CONTENT)

    @property
    def screen(self) -> Screen:
        return self.value[0]

    @property
    def edit_mode(self) -> EditMode:
        return self.value[1]


class AppState:
    def __init__(self, deck_names: list[str] | None = None):
        self.mode: Mode = Mode.LOCAL_MENU
        self.deck_names: list[str] = list(deck_names or [])  # cached, sorted at startup
        self.deck: Deck | None = None
        # last index of each menu is its synthetic "Add new ..." entry
        self.local_menu_cursor = BoundedCursor(len(self.deck_names))
        self.edit_menu_cursor = BoundedCursor(0)
        self.edit_menu_selection = BoundedCursor(1)  # rename deck / edit cards
        self.text_buffer: str = ""
        self.edit_failed: bool = False
        self.rename_target: str | None = None  # None while creating
        self.running: bool = True

    @property
    def screen(self) -> Screen:
        return self.mode.screen

    @property
    def edit_mode(self) -> EditMode:
        return self.mode.edit_mode

    def selected_deck_name(self) -> str | None:
        """Deck under the local menu cursor; None on the synthetic entry."""
        index = self.local_menu_cursor.index
        if index >= len(self.deck_names):
            return None
        return self.deck_names[index]

    def selected_card_index(self) -> int | None:
        """Card under the editor cursor; None on the synthetic entry."""
        index = self.edit_menu_cursor.index
        if self.deck is None or index >= len(self.deck):
            return None
        return index
