"""
Tests for deck_service - library operations under the storage root.
"""

import json
import os

import pytest

from flash.errors import NameConflictError, StorageError
from flash.services import deck_service


class TestDecks:
    def test_list_is_sorted(self, storage_root, make_deck):
        for name in ("Spanish", "Biology", "Math"):
            make_deck(name)
        assert deck_service.list_decks(storage_root) == ["Biology", "Math", "Spanish"]

    def test_create(self, storage_root):
        deck_service.create_deck(storage_root, "Spanish")
        assert os.path.isdir(os.path.join(storage_root, "Spanish"))

    def test_create_existing(self, storage_root, make_deck):
        make_deck("Spanish")
        with pytest.raises(NameConflictError):
            deck_service.create_deck(storage_root, "Spanish")

    @pytest.mark.parametrize("name", ["a/b", "..", "."])
    def test_create_invalid_name(self, storage_root, name):
        with pytest.raises(StorageError):
            deck_service.create_deck(storage_root, name)

    def test_rename(self, storage_root, make_deck):
        make_deck("Old", [("Card", ["x"])])
        deck_service.rename_deck(storage_root, "Old", "New")
        assert deck_service.list_decks(storage_root) == ["New"]
        assert deck_service.open_deck(storage_root, "New").card_names() == ["Card"]

    def test_rename_onto_existing(self, storage_root, make_deck):
        make_deck("A")
        make_deck("B")
        with pytest.raises(NameConflictError):
            deck_service.rename_deck(storage_root, "A", "B")
        assert deck_service.list_decks(storage_root) == ["A", "B"]

    def test_rename_to_same_name_is_noop(self, storage_root, make_deck):
        make_deck("A")
        deck_service.rename_deck(storage_root, "A", "A")
        assert deck_service.list_decks(storage_root) == ["A"]

    def test_delete_is_recursive(self, storage_root, make_deck):
        make_deck("Gone", [("c1", ["a"]), ("c2", ["b"])])
        deck_service.delete_deck(storage_root, "Gone")
        assert deck_service.list_decks(storage_root) == []

    def test_delete_missing(self, storage_root):
        with pytest.raises(StorageError):
            deck_service.delete_deck(storage_root, "Nope")


class TestCards:
    def test_add_card_persists_and_reloads(self, storage_root, make_deck):
        deck = make_deck("D", [("First", ["1"])])
        reloaded = deck_service.add_card(storage_root, deck, "Second")
        assert reloaded.card_names() == ["First", "Second"]
        assert os.path.exists(os.path.join(storage_root, "D", "Second.json"))

    def test_add_duplicate_card(self, storage_root, make_deck):
        deck = make_deck("D", [("First", ["1"])])
        with pytest.raises(NameConflictError):
            deck_service.add_card(storage_root, deck, "First")
        assert deck.card_names() == ["First"]

    def test_add_card_with_clashing_file_name(self, storage_root, make_deck):
        """Distinct titles that sanitise to the same file get separate files."""
        deck = make_deck("D", [("a/b", ["1"])])
        reloaded = deck_service.add_card(storage_root, deck, "a?b")
        assert reloaded.card_names() == ["a/b", "a?b"]
        assert sorted(os.listdir(os.path.join(storage_root, "D"))) == ["a_b-2.json", "a_b.json"]

    def test_add_card_with_non_ascii_title(self, storage_root, make_deck):
        deck = make_deck("D", [("日本", ["Japan"])])
        reloaded = deck_service.add_card(storage_root, deck, "中国")
        assert reloaded.card_names() == ["日本", "中国"]
        assert sorted(os.listdir(os.path.join(storage_root, "D"))) == sorted(["日本.json", "中国.json"])

    def test_add_card_keeps_unreadable_file(self, storage_root, make_deck):
        """A skipped card file is never overwritten by a new card."""
        deck = make_deck("D")
        bad = os.path.join(storage_root, "D", "Intro.json")
        with open(bad, "w", encoding="utf-8") as f:
            f.write("{not json")
        deck = deck_service.open_deck(storage_root, "D")
        reloaded = deck_service.add_card(storage_root, deck, "Intro")
        assert reloaded.card_names() == ["Intro"]
        with open(bad, encoding="utf-8") as f:
            assert f.read() == "{not json"
        assert reloaded.cards[0].file_name == "Intro-2.json"

    def test_rename_card_moves_file(self, storage_root, make_deck):
        deck = make_deck("D", [("One", ["1"]), ("Two", ["2"])])
        reloaded = deck_service.rename_card(storage_root, deck, "One", "Uno")
        assert reloaded.card_names() == ["Uno", "Two"]
        files = sorted(os.listdir(os.path.join(storage_root, "D")))
        assert files == ["Two.json", "Uno.json"]

    def test_rename_card_conflict(self, storage_root, make_deck):
        deck = make_deck("D", [("One", []), ("Two", [])])
        with pytest.raises(NameConflictError):
            deck_service.rename_card(storage_root, deck, "One", "Two")
        assert deck.card_names() == ["One", "Two"]

    def test_delete_card(self, storage_root, make_deck):
        deck = make_deck("D", [("One", []), ("Two", [])])
        removed = deck_service.delete_card(storage_root, deck, 0)
        assert removed.title == "One"
        assert deck.card_names() == ["Two"]
        assert os.listdir(os.path.join(storage_root, "D")) == ["Two.json"]


class TestHandWrittenFiles:
    """Card files whose name does not follow the card title."""

    def _hand_deck(self, storage_root):
        deck_dir = os.path.join(storage_root, "Hand")
        os.mkdir(deck_dir)
        with open(os.path.join(deck_dir, "card1.json"), "w", encoding="utf-8") as f:
            json.dump({"title": "Bar", "sections": ["b"]}, f)
        return deck_dir

    def test_save_rewrites_the_same_file(self, storage_root):
        deck_dir = self._hand_deck(storage_root)
        deck = deck_service.open_deck(storage_root, "Hand")
        assert deck.cards[0].file_name == "card1.json"
        deck.cards[0].sections.append("more")
        deck_service.save_deck(storage_root, deck)
        assert os.listdir(deck_dir) == ["card1.json"]
        reloaded = deck_service.open_deck(storage_root, "Hand")
        assert reloaded.card_names() == ["Bar"]
        assert reloaded.cards[0].sections == ["b", "more"]

    def test_delete_removes_the_loaded_file(self, storage_root):
        deck_dir = self._hand_deck(storage_root)
        deck = deck_service.open_deck(storage_root, "Hand")
        deck_service.delete_card(storage_root, deck, 0)
        assert os.listdir(deck_dir) == []
        assert deck_service.open_deck(storage_root, "Hand").card_names() == []

    def test_rename_replaces_the_loaded_file(self, storage_root):
        deck_dir = self._hand_deck(storage_root)
        deck = deck_service.open_deck(storage_root, "Hand")
        reloaded = deck_service.rename_card(storage_root, deck, "Bar", "Baz")
        assert reloaded.card_names() == ["Baz"]
        assert os.listdir(deck_dir) == ["Baz.json"]
