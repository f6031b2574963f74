"""
deck_service.py - Deck library logic
Single responsibility: create, rename, delete and open decks and cards
under the storage root.
"""
import logging
import os
import shutil

from flash.domain.models import Card, Deck
from flash.errors import NameConflictError, StorageError
from flash.storage import decks as deck_repo
from flash.storage.cards import card_file_name, delete_card_file
from flash.storage.scanner import list_subdirectories

logger = logging.getLogger(__name__)


def _check_deck_name(name: str) -> None:
    if not name or name in (".", "..") or "/" in name or os.sep in name:
        raise StorageError(f"Invalid deck name: {name!r}")


def list_decks(root: str) -> list[str]:
    """Deck names under root, alphabetically sorted."""
    return sorted(list_subdirectories(root))


def create_deck(root: str, name: str) -> None:
    _check_deck_name(name)
    path = deck_repo.deck_directory(root, name)
    try:
        os.mkdir(path)
    except FileExistsError as e:
        raise NameConflictError(f"Deck already exists: {name}") from e
    except OSError as e:
        raise StorageError(f"Cannot create deck {name}: {e}") from e
    logger.info(f"Deck created: {name}")


def rename_deck(root: str, old_name: str, new_name: str) -> None:
    _check_deck_name(new_name)
    if new_name == old_name:
        return
    src = deck_repo.deck_directory(root, old_name)
    dst = deck_repo.deck_directory(root, new_name)
    # os.rename silently replaces an empty target directory on POSIX
    if os.path.lexists(dst):
        raise NameConflictError(f"Deck already exists: {new_name}")
    try:
        os.rename(src, dst)
    except OSError as e:
        raise StorageError(f"Cannot rename deck {old_name}: {e}") from e
    logger.info(f"Deck renamed: {old_name} -> {new_name}")


def delete_deck(root: str, name: str) -> None:
    path = deck_repo.deck_directory(root, name)
    try:
        shutil.rmtree(path)
    except OSError as e:
        raise StorageError(f"Cannot delete deck {name}: {e}") from e
    logger.info(f"Deck deleted: {name}")


def open_deck(root: str, name: str) -> Deck:
    return deck_repo.load_from_directory(deck_repo.deck_directory(root, name))


def save_deck(root: str, deck: Deck) -> None:
    deck_repo.save_to_directory(deck, root)


def _card_name_taken(deck: Deck, title: str, ignore: str | None = None) -> bool:
    return any(c.title == title and c.title != ignore for c in deck.cards)


def add_card(root: str, deck: Deck, title: str) -> Deck:
    """Append an empty card, persist the deck and return it reloaded."""
    if _card_name_taken(deck, title):
        raise NameConflictError(f"Card already exists: {title}")
    index = deck.add_card(Card(title))
    try:
        save_deck(root, deck)
    except StorageError:
        deck.remove_card(index)
        raise
    logger.info(f"Card added: {title}")
    return open_deck(root, deck.title)


def rename_card(root: str, deck: Deck, old_title: str, new_title: str) -> Deck:
    """Retitle a card; its file follows the new title unless that name is taken."""
    if new_title == old_title:
        return deck
    if _card_name_taken(deck, new_title, ignore=old_title):
        raise NameConflictError(f"Card already exists: {new_title}")
    card = next((c for c in deck.cards if c.title == old_title), None)
    if card is None:
        raise StorageError(f"No such card: {old_title}")
    old_file = card.file_name
    card.title = new_title
    if old_file != card_file_name(new_title):
        card.file_name = None
    try:
        save_deck(root, deck)
    except StorageError:
        card.title = old_title
        card.file_name = old_file
        raise
    if old_file is not None and old_file != card.file_name:
        delete_card_file(os.path.join(deck_repo.deck_directory(root, deck.title), old_file))
    logger.info(f"Card renamed: {old_title} -> {new_title}")
    return open_deck(root, deck.title)


def delete_card(root: str, deck: Deck, index: int) -> Card:
    """Remove the card file first, then drop the card from the deck."""
    card = deck.cards[index]
    if card.file_name is not None:
        delete_card_file(os.path.join(deck_repo.deck_directory(root, deck.title), card.file_name))
    logger.info(f"Card deleted: {card.title}")
    return deck.remove_card(index)
