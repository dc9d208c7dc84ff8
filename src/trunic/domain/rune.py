"""Rune cells and phoneme tag classes.

A rune cell is everything drawn in one character slot: at most one
consonant and one vowel, plus the reversing circle when the vowel was
written first. An empty cell is a blank slot of normal width.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto


class TagClass(Enum):
    """Phonetic class of a phoneme tag."""

    CONSONANT = auto()
    VOWEL = auto()
    SYMBOL = auto()
    SPACE = auto()
    CIRCLE = auto()


@dataclass(frozen=True, slots=True)
class RuneCell:
    """An ordered group of phoneme tags drawn in one slot.

    Tag order is meaningful: a vowel-first cell keeps the vowel first and
    carries the circle tag last.

    Attributes:
        tags: Phoneme tags overlaid in this cell (0 to 3 of them)
    """

    tags: tuple[str, ...] = ()

    def is_empty(self) -> bool:
        """Check if the cell is a blank placeholder."""
        return not self.tags

    def __len__(self) -> int:
        return len(self.tags)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tags)

    def __str__(self) -> str:
        return "[" + " ".join(self.tags) + "]"


EMPTY_CELL = RuneCell()
