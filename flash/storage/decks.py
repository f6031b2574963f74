"""
decks.py - Deck directory I/O
Single responsibility: load and save a deck as a directory of card files.
"""
import logging
import os

from flash.config import CARD_SUFFIX
from flash.domain.models import Deck
from flash.errors import FormatError, StorageError
from flash.storage.cards import free_file_name, load_card, save_card

logger = logging.getLogger(__name__)


def load_from_directory(path: str) -> Deck:
    """
    Load every card file in path into a Deck titled after the directory.
    Card files that fail to parse are skipped and left on disk.
    """
    try:
        names = sorted(
            e.name
            for e in os.scandir(path)
            if e.is_file() and e.name.endswith(CARD_SUFFIX)
        )
    except OSError as e:
        raise StorageError(f"Cannot read deck directory {path}: {e}") from e

    loaded = []
    for order, name in enumerate(names):
        try:
            card, position = load_card(os.path.join(path, name))
        except FormatError as e:
            logger.warning(f"Skipping card file: {e}")
            continue
        card.file_name = name
        # cards without a stored position follow the positioned ones
        key = (0, position, order) if position is not None else (1, 0, order)
        loaded.append((key, card))
    loaded.sort(key=lambda item: item[0])

    title = os.path.basename(os.path.normpath(path))
    logger.info(f"Deck loaded: {title} ({len(loaded)} cards)")
    return Deck(title, [card for _, card in loaded])


def deck_directory(parent_path: str, title: str) -> str:
    return os.path.join(parent_path, title)


def save_to_directory(deck: Deck, parent_path: str) -> str:
    """Write every card of deck into parent_path/<deck title>/."""
    target = deck_directory(parent_path, deck.title)
    try:
        os.makedirs(target, exist_ok=True)
    except OSError as e:
        raise StorageError(f"Cannot create deck directory {target}: {e}") from e
    taken = {c.file_name for c in deck.cards if c.file_name}
    for position, card in enumerate(deck.cards):
        if card.file_name is None:
            card.file_name = free_file_name(target, card.title, taken)
            taken.add(card.file_name)
        save_card(card, os.path.join(target, card.file_name), position)
    logger.info(f"Deck saved: {deck.title} ({len(deck)} cards)")
    return target
