"""
actions.py - Keyboard-driven navigation and editing
Single responsibility: apply one key event to the AppState, moving between
modes and mutating decks and cards through the deck service.
"""
import logging

from flash.errors import StorageError
from flash.services import deck_service
from flash.ui.keys import Key, KeyEvent, is_printable
from flash.ui_state import AppState, Mode, Screen

logger = logging.getLogger(__name__)


class Navigator:
    """
    The session controller. Every Mode has exactly one handler; a handler
    ignores keys it does not know.
    """

    def __init__(self, root: str, state: AppState | None = None):
        self.root = root
        if state is None:
            state = AppState(deck_service.list_decks(root))
        self.state = state
        self._handlers = {
            Mode.LOCAL_MENU: self._on_local_menu,
            Mode.LOCAL_EDIT_MENU: self._on_local_edit_menu,
            Mode.LOCAL_ADD_ITEM: self._on_add_item,
            Mode.DECK_VIEWER: self._on_deck_viewer,
            Mode.DECK_EDITOR: self._on_deck_editor,
            Mode.EDITOR_ADD_ITEM: self._on_add_item,
            Mode.EDITOR_EDIT_CONTENT: self._on_edit_content,
        }

    @property
    def running(self) -> bool:
        return self.state.running

    def handle_key(self, key: KeyEvent | None) -> None:
        if key is None:
            return
        self.state.edit_failed = False
        self._handlers[self.state.mode](key)

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    def _enter(self, mode: Mode) -> None:
        self.state.mode = mode
        if mode in (Mode.LOCAL_MENU, Mode.DECK_EDITOR, Mode.LOCAL_EDIT_MENU):
            self.state.text_buffer = ""
            self.state.rename_target = None

    def _fail(self, e: StorageError) -> None:
        logger.warning(f"{self.state.mode.name}: {e}")
        self.state.edit_failed = True

    def _open_deck(self, name: str, mode: Mode) -> None:
        """Load a deck and switch to mode. Stays put if the load fails."""
        try:
            deck = deck_service.open_deck(self.root, name)
        except StorageError as e:
            logger.warning(f"Cannot open deck {name}: {e}")
            return
        self.state.deck = deck
        self.state.edit_menu_cursor.set_maximum(len(deck))
        self.state.edit_menu_cursor.set(0)
        self._enter(mode)

    def _save_deck(self) -> bool:
        try:
            deck_service.save_deck(self.root, self.state.deck)
        except StorageError as e:
            self._fail(e)
            return False
        return True

    def _begin_name_entry(self, mode: Mode, current_name: str | None) -> None:
        self.state.rename_target = current_name
        self.state.text_buffer = current_name or ""
        self.state.mode = mode

    # ------------------------------------------------------------------
    # LocalMenu
    # ------------------------------------------------------------------

    def _on_local_menu(self, key: KeyEvent) -> None:
        state = self.state
        cursor = state.local_menu_cursor
        name = state.selected_deck_name()
        if key == Key.UP:
            cursor.retreat()
        elif key == Key.DOWN:
            cursor.advance()
        elif key == Key.ENTER:
            if name is None:
                self._begin_name_entry(Mode.LOCAL_ADD_ITEM, None)
            else:
                self._open_deck(name, Mode.DECK_VIEWER)
        elif key == "e" and name is not None:
            state.edit_menu_selection.set(0)
            self._enter(Mode.LOCAL_EDIT_MENU)
        elif key == "d" and name is not None:
            try:
                deck_service.delete_deck(self.root, name)
            except StorageError as e:
                self._fail(e)
                return
            state.deck_names.remove(name)
            cursor.set_maximum(len(state.deck_names))
        elif key == "q":
            state.running = False

    def _on_local_edit_menu(self, key: KeyEvent) -> None:
        state = self.state
        selection = state.edit_menu_selection
        name = state.selected_deck_name()
        if key == Key.UP:
            selection.retreat()
        elif key == Key.DOWN:
            selection.advance()
        elif key == Key.ESC:
            self._enter(Mode.LOCAL_MENU)
        elif key == Key.ENTER and name is not None:
            if selection.index == 0:
                self._begin_name_entry(Mode.LOCAL_ADD_ITEM, name)
            else:
                self._open_deck(name, Mode.DECK_EDITOR)

    # ------------------------------------------------------------------
    # Name entry (LocalMenu and DeckEditor)
    # ------------------------------------------------------------------

    def _on_add_item(self, key: KeyEvent) -> None:
        state = self.state
        base = Mode.LOCAL_MENU if state.screen == Screen.LOCAL_MENU else Mode.DECK_EDITOR
        if is_printable(key):
            state.text_buffer += key
        elif key == Key.BACKSPACE:
            state.text_buffer = state.text_buffer[:-1]
        elif key == Key.ESC:
            self._enter(base)
        elif key == Key.ENTER:
            name = state.text_buffer
            if not name:
                self._enter(base)
                return
            try:
                if base == Mode.LOCAL_MENU:
                    self._commit_deck_name(name)
                else:
                    self._commit_card_name(name)
            except StorageError as e:
                self._fail(e)
                return
            self._enter(base)

    def _commit_deck_name(self, name: str) -> None:
        state = self.state
        old = state.rename_target
        if old is None:
            deck_service.create_deck(self.root, name)
            state.deck_names.append(name)
        else:
            deck_service.rename_deck(self.root, old, name)
            state.deck_names[state.deck_names.index(old)] = name
        state.local_menu_cursor.set_maximum(len(state.deck_names))

    def _commit_card_name(self, name: str) -> None:
        state = self.state
        old = state.rename_target
        if old is None:
            deck = deck_service.add_card(self.root, state.deck, name)
        else:
            deck = deck_service.rename_card(self.root, state.deck, old, name)
        state.deck = deck
        state.edit_menu_cursor.set_maximum(len(deck))
        names = deck.card_names()
        if name in names:
            state.edit_menu_cursor.set(names.index(name))

    # ------------------------------------------------------------------
    # DeckViewer
    # ------------------------------------------------------------------

    def _on_deck_viewer(self, key: KeyEvent) -> None:
        state = self.state
        if key == Key.RIGHT:
            state.deck.advance(True)
        elif key == Key.LEFT:
            state.deck.retreat(True)
        elif key == Key.ESC:
            state.deck = None
            self._enter(Mode.LOCAL_MENU)
        elif key == "q":
            state.running = False

    # ------------------------------------------------------------------
    # DeckEditor
    # ------------------------------------------------------------------

    def _on_deck_editor(self, key: KeyEvent) -> None:
        state = self.state
        cursor = state.edit_menu_cursor
        index = state.selected_card_index()
        if key == Key.UP:
            cursor.retreat()
        elif key == Key.DOWN:
            cursor.advance()
        elif key == Key.ENTER and index is None:
            self._begin_name_entry(Mode.EDITOR_ADD_ITEM, None)
        elif key in ("e", Key.ENTER) and index is not None:
            state.deck.select(index)
            card = state.deck.current()
            if not card.sections:
                card.sections.append("")
            state.text_buffer = card.current_text()
            state.mode = Mode.EDITOR_EDIT_CONTENT
        elif key == "r" and index is not None:
            self._begin_name_entry(Mode.EDITOR_ADD_ITEM, state.deck.cards[index].title)
        elif key == "d" and index is not None:
            try:
                deck_service.delete_card(self.root, state.deck, index)
            except StorageError as e:
                self._fail(e)
                return
            cursor.set_maximum(len(state.deck))
        elif key == "q":
            # never quit with unsaved edits
            if self._save_deck():
                state.running = False
        elif key == Key.ESC:
            if self._save_deck():
                state.deck = None
                self._enter(Mode.LOCAL_EDIT_MENU)

    def _on_edit_content(self, key: KeyEvent) -> None:
        state = self.state
        deck = state.deck
        card = deck.current()
        if is_printable(key):
            state.text_buffer += key
        elif key == Key.BACKSPACE:
            state.text_buffer = state.text_buffer[:-1]
        elif key == Key.CTRL_A:
            card.commit(state.text_buffer)
            card.insert_after("")
            state.text_buffer = ""
        elif key == Key.CTRL_D:
            card.delete_current()
            state.text_buffer = card.current_text()
        elif key in (Key.RIGHT, Key.LEFT):
            card.commit(state.text_buffer)
            if key == Key.RIGHT:
                deck.advance(False)
            else:
                deck.retreat(False)
            state.text_buffer = deck.current().current_text()
        elif key == Key.ENTER:
            card.commit(state.text_buffer)
            self._enter(Mode.DECK_EDITOR)
        elif key == Key.ESC:
            self._enter(Mode.DECK_EDITOR)
