"""
Shared fixtures: a temporary storage root and a helper that writes decks
into it.
"""

import pytest

from flash.domain.models import Card, Deck
from flash.storage.decks import save_to_directory
from flash.ui.actions import Navigator


@pytest.fixture
def storage_root(tmp_path):
    root = tmp_path / "decks"
    root.mkdir()
    return str(root)


@pytest.fixture
def make_deck(storage_root):
    """make_deck("Title", [("Card", ["s1", "s2"]), ...]) -> Deck on disk."""

    def _make(title, cards=()):
        deck = Deck(title, [Card(name, list(sections)) for name, sections in cards])
        save_to_directory(deck, storage_root)
        return deck

    return _make


@pytest.fixture
def scenario_deck(make_deck):
    return make_deck("Study", [("Intro", ["Q1", "A1"]), ("Basics", ["Q2"])])


@pytest.fixture
def navigator_factory(storage_root):
    def _factory():
        return Navigator(storage_root)

    return _factory
