"""
cards.py - Card file I/O
Single responsibility: read and write one card per JSON file.

File format:
    {
      "title": "Intro",
      "sections": ["Q1", "A1"],
      "current_section": 0,
      "position": 0
    }

current_section is always written as 0; the study position is not saved.
position keeps the display order of the deck across reloads.
"""
import json
import logging
import os
import re

from flash.config import CARD_SUFFIX
from flash.domain.models import Card
from flash.errors import FormatError, StorageError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^\w -]")


def card_file_name(title: str) -> str:
    """Derive a file name from a card title ("a/b?" -> "a_b_.json")."""
    stem = _UNSAFE_CHARS.sub("_", title).strip() or "_"
    return stem + CARD_SUFFIX


def free_file_name(deck_dir: str, title: str, taken: set[str]) -> str:
    """
    File name for a new card: derived from the title, with "-2", "-3", ...
    appended while the name is in taken or already exists in deck_dir.
    """
    base = card_file_name(title)
    stem = base[: -len(CARD_SUFFIX)]
    name = base
    n = 2
    while name in taken or os.path.lexists(os.path.join(deck_dir, name)):
        name = f"{stem}-{n}{CARD_SUFFIX}"
        n += 1
    return name


def parse_card(data) -> tuple[Card, int | None]:
    """Build a Card from decoded JSON. Returns (card, position)."""
    if not isinstance(data, dict):
        raise FormatError("Card file must hold a JSON object")
    title = data.get("title")
    sections = data.get("sections")
    if not isinstance(title, str):
        raise FormatError("Card title must be a string")
    if not isinstance(sections, list) or not all(isinstance(s, str) for s in sections):
        raise FormatError("Card sections must be a list of strings")
    current = data.get("current_section", 0)
    if not isinstance(current, int) or isinstance(current, bool):
        current = 0
    position = data.get("position")
    if not isinstance(position, int) or isinstance(position, bool):
        position = None
    return Card(title, list(sections), current), position


def load_card(path: str) -> tuple[Card, int | None]:
    """Read a card file. Raises FormatError if missing, unreadable or invalid."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FormatError(f"Cannot read card {path}: {e}") from e
    return parse_card(data)


def save_card(card: Card, path: str, position: int = 0) -> None:
    """Write a card file, replacing whatever was there."""
    data = {
        "title": card.title,
        "sections": list(card.sections),
        "current_section": 0,
        "position": position,
    }
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
    except OSError as e:
        raise StorageError(f"Cannot write card {path}: {e}") from e
    logger.debug(f"Card saved: {path}")


def delete_card_file(path: str) -> None:
    """Remove a card file. A file that is already gone is not an error."""
    try:
        os.remove(path)
        logger.debug(f"Card file deleted: {path}")
    except FileNotFoundError:
        logger.debug(f"Card file does not exist: {path}")
    except OSError as e:
        raise StorageError(f"Cannot delete card {path}: {e}") from e
