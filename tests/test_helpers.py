"""
Tests for the text builders used by the views.
"""

from flash.config import ADD_DECK_LABEL
from flash.domain.models import Card, Deck
from flash.ui import helpers
from flash.ui_state import AppState, Mode


class TestProgress:
    def test_empty_deck(self):
        assert helpers.progress_text(Deck("Empty")) == "Progress: 0/0"
        assert helpers.progress_text(None) == "Progress: 0/0"

    def test_one_based(self):
        deck = Deck("D", [Card("a", ["1"]), Card("b", ["2"])])
        deck.advance(True)
        assert helpers.progress_text(deck) == "Progress: 2/2"

    def test_section_position(self):
        deck = Deck("D", [Card("a", ["1", "2"]), Card("b", [])])
        assert helpers.section_position(deck) == "1/2"
        deck.select(1)
        assert helpers.section_position(deck) == ""


class TestMenus:
    def test_local_menu_has_synthetic_entry(self):
        state = AppState(["a", "b"])
        assert helpers.local_menu_items(state) == ["a", "b", ADD_DECK_LABEL]

    def test_every_mode_has_hints(self):
        assert set(helpers.KEY_HINTS) == set(Mode)

    def test_failure_text(self):
        state = AppState()
        assert helpers.failure_text(state) == ""
        state.edit_failed = True
        state.mode = Mode.LOCAL_ADD_ITEM
        assert "name" in helpers.failure_text(state)
