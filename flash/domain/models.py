"""
models.py - Domain models
Single responsibility: cards and decks with their study cursors.
"""
from dataclasses import InitVar, dataclass, field
from typing import Optional

from flash.utils.cursor import BoundedCursor


@dataclass
class Card:
    title: str
    sections: list[str] = field(default_factory=list)
    start_section: InitVar[int] = 0
    _cursor: BoundedCursor = field(init=False, repr=False, compare=False)
    # file the card was loaded from or last saved to; None until saved
    file_name: Optional[str] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self, start_section: int):
        self._cursor = BoundedCursor(self.section_count() - 1, start_section)

    @property
    def current_section(self) -> int:
        # sections is a plain list and may be edited in place
        return self._cursor.set_maximum(self.section_count() - 1)

    def section_count(self) -> int:
        return len(self.sections)

    def advance_section(self) -> bool:
        """Step to the next section. False when already on the last one."""
        self._cursor.set_maximum(self.section_count() - 1)
        return self._cursor.advance()

    def retreat_section(self) -> bool:
        self._cursor.set_maximum(self.section_count() - 1)
        return self._cursor.retreat()

    def select_section(self, index: int) -> int:
        self._cursor.set_maximum(self.section_count() - 1)
        return self._cursor.set(index)

    def current_text(self) -> str:
        """Text of the current section; empty for a card without sections."""
        if not self.sections:
            return ""
        return self.sections[self.current_section]

    def commit(self, text: str) -> None:
        """Write text into the current section, or add it as the first one."""
        if not self.sections:
            self.sections.append(text)
            self._cursor.set_maximum(0)
            return
        self.sections[self.current_section] = text

    def insert_after(self, text: str = "") -> int:
        """Insert a section after the current one and move onto it."""
        index = self.current_section + 1 if self.sections else 0
        self.sections.insert(index, text)
        return self.select_section(index)

    def delete_current(self) -> None:
        """Drop the current section; the cursor steps back one when it can."""
        if not self.sections:
            return
        index = self.current_section
        del self.sections[index]
        self._cursor.set_maximum(self.section_count() - 1)
        self._cursor.set(index - 1)


@dataclass
class Deck:
    title: str
    cards: list[Card] = field(default_factory=list)
    _cursor: BoundedCursor = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self._cursor = BoundedCursor(len(self.cards) - 1)

    @property
    def current_card(self) -> int:
        return self._cursor.set_maximum(len(self.cards) - 1)

    def __len__(self) -> int:
        return len(self.cards)

    def card_names(self) -> list[str]:
        return [c.title for c in self.cards]

    def current(self) -> Optional[Card]:
        """The active card, or None for an empty deck."""
        if not self.cards:
            return None
        return self.cards[self.current_card]

    def select(self, index: int) -> int:
        self._cursor.set_maximum(len(self.cards) - 1)
        return self._cursor.set(index)

    def advance(self, wrap_into_next_card: bool) -> None:
        """
        Study navigation forward. The current card moves one section; once it
        is exhausted and wrap_into_next_card is set, the next card becomes
        current with its own section cursor untouched. Stops at the last card.
        """
        card = self.current()
        if card is None:
            return
        if card.advance_section() or not wrap_into_next_card:
            return
        self._cursor.set_maximum(len(self.cards) - 1)
        self._cursor.advance()

    def retreat(self, wrap_into_next_card: bool) -> None:
        card = self.current()
        if card is None:
            return
        if card.retreat_section() or not wrap_into_next_card:
            return
        self._cursor.set_maximum(len(self.cards) - 1)
        self._cursor.retreat()

    def has_card(self, title: str) -> bool:
        return any(c.title == title for c in self.cards)

    def add_card(self, card: Card) -> int:
        """Append a card and return its index."""
        self.cards.append(card)
        self._cursor.set_maximum(len(self.cards) - 1)
        return len(self.cards) - 1

    def remove_card(self, index: int) -> Card:
        card = self.cards.pop(index)
        self._cursor.set_maximum(len(self.cards) - 1)
        return card
