"""
cursor.py - Clamped list index
Single responsibility: one index that never leaves [0, maximum].
"""


class BoundedCursor:
    """An index clamped to ``[0, maximum]``.

    ``maximum`` is the last valid index, so a cursor over ``n`` items uses
    ``max(0, n - 1)`` and a menu with a trailing synthetic entry uses ``n``.
    """

    def __init__(self, maximum: int = 0, index: int = 0):
        self.maximum = max(0, maximum)
        self.index = 0
        self.set(index)

    def set(self, index: int) -> int:
        self.index = min(max(0, index), self.maximum)
        return self.index

    def set_maximum(self, maximum: int) -> int:
        """Change the upper bound, pulling the index back inside it."""
        self.maximum = max(0, maximum)
        return self.set(self.index)

    def advance(self) -> bool:
        """Move forward one step; False when already at the end."""
        if self.index >= self.maximum:
            return False
        self.index += 1
        return True

    def retreat(self) -> bool:
        """Move back one step; False when already at 0."""
        if self.index <= 0:
            return False
        self.index -= 1
        return True

    def at_end(self) -> bool:
        return self.index == self.maximum

    def __int__(self) -> int:
        return self.index

    def __repr__(self) -> str:
        return f"BoundedCursor(maximum={self.maximum}, index={self.index})"
