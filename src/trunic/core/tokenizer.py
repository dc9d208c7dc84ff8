"""Phoneme tokenizer.

Turns IPA text into rune cells in two stages:

1. Segmentation: greedy longest-prefix matching against the tag vocabulary.
   Characters that start no tag are dropped one code point at a time.
2. Pairing: a one-tag lookahead groups a consonant with a following vowel,
   or a vowel with a following consonant plus the reversing circle.

All functions are pure and deterministic.
"""

from collections.abc import Iterator

from trunic.core.phonemes import (
    CIRCLE,
    PREFIXES,
    SPACE,
    is_consonant,
    is_letter,
    is_vowel,
)
from trunic.domain import EMPTY_CELL, RuneCell


def _match_at(text: str, pos: int) -> str | None:
    if text.startswith(SPACE, pos):
        return SPACE

    for prefix in PREFIXES:
        if text.startswith(prefix, pos):
            return prefix

    return None


def cut_valid_prefix(text: str) -> tuple[str, str] | None:
    """Split the longest valid tag off the front of text.

    Args:
        text: Remaining input

    Returns:
        Tuple of (tag, rest), or None if no tag starts the text
    """
    prefix = _match_at(text, 0)
    if prefix is None:
        return None
    return prefix, text[len(prefix):]


def valid_prefixes(text: str) -> Iterator[str]:
    """Yield the valid tags of text in order, skipping anything else.

    Args:
        text: Raw input text

    Yields:
        Matched phoneme tags
    """
    pos = 0
    while pos < len(text):
        prefix = _match_at(text, pos)
        if prefix is None:
            pos += 1
            continue

        yield prefix
        pos += len(prefix)


def normalize(text: str) -> str:
    """Return text with all unsupported characters removed.

    Normalization is idempotent: normalizing twice gives the same result.
    """
    return "".join(valid_prefixes(text))


def _single(tag: str) -> RuneCell:
    if tag == SPACE:
        return EMPTY_CELL
    return RuneCell((tag,))


def _pair(first: str, second: str) -> RuneCell | None:
    if is_vowel(first) and is_consonant(second):
        return RuneCell((first, second, CIRCLE))
    if is_consonant(first) and is_vowel(second):
        return RuneCell((first, second))
    return None


def tokenize(text: str) -> Iterator[RuneCell]:
    """Group the tags of text into rune cells.

    A letter is held back until the next tag arrives. A consonant followed
    by a vowel shares one cell; a vowel followed by a consonant shares one
    cell with the reversing circle appended. Two letters of the same class
    never share a cell. Symbols always get a cell of their own, and a space
    becomes an empty cell.

    Args:
        text: Raw input text; unsupported characters are skipped

    Yields:
        Rune cells in reading order
    """
    pending: str | None = None

    for tag in valid_prefixes(text):
        if pending is None:
            if is_letter(tag):
                pending = tag
            else:
                yield _single(tag)
            continue

        if not is_letter(tag):
            yield _single(pending)
            yield _single(tag)
            pending = None
            continue

        cell = _pair(pending, tag)
        if cell is not None:
            yield cell
            pending = None
        else:
            yield _single(pending)
            pending = tag

    if pending is not None:
        yield _single(pending)


def split_words(text: str) -> list[str]:
    """Normalize text and split it into words on whitespace runs."""
    return normalize(text).split()
