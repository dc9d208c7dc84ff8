"""Phoneme tag vocabulary of the Trunic script.

Every consonant and vowel is a 14-bit mask over the shared segment lattice
(see :mod:`trunic.core.lattice`). Masks are written in lattice order, grouped
as::

    upper-outer  midline  lower-outer  upper-inner  stem  lower-inner
        ttl           m       lbb          lvr        s       lvr

Vowels only use the outer edges, consonants only the inner spokes; every
letter draws the midline.
"""

from collections.abc import Mapping
from types import MappingProxyType

from trunic.domain.rune import TagClass

SPACE = " "
CIRCLE = "*"

CONSONANT_MASKS: Mapping[str, int] = MappingProxyType(
    {
        "b": 0b000_1_000_010_1_100,
        "tʃ": 0b000_1_000_010_1_001,
        "d": 0b000_1_000_101_1_100,
        "f": 0b000_1_000_110_1_011,
        "ɡ": 0b000_1_000_011_1_100,
        "h": 0b000_1_000_010_1_011,
        "dʒ": 0b000_1_000_010_1_110,
        "k": 0b000_1_000_011_1_010,
        "l": 0b000_1_000_010_1_010,
        "ɫ": 0b000_1_000_010_1_010,
        "m": 0b000_1_000_000_0_110,
        "n": 0b000_1_000_000_0_111,
        "ŋ": 0b000_1_000_111_1_011,
        "p": 0b000_1_000_001_1_010,
        "ɹ": 0b000_1_000_110_1_010,
        "s": 0b000_1_000_011_1_110,
        "ʃ": 0b000_1_000_110_1_111,
        "t": 0b000_1_000_101_1_010,
        "θ": 0b000_1_000_101_1_111,
        "ð": 0b000_1_000_111_1_101,
        "v": 0b000_1_000_001_1_111,
        "w": 0b000_1_000_100_1_100,
        "j": 0b000_1_000_001_1_101,
        "z": 0b000_1_000_101_1_011,
        "ʒ": 0b000_1_000_111_1_111,
    }
)

# Drawn identically to the key.
CONSONANT_ALIASES: Mapping[str, str] = MappingProxyType({"ɫ": "l"})

VOWEL_MASKS: Mapping[str, int] = MappingProxyType(
    {
        "æ": 0b111_1_100_000_0_000,
        "ɑɹ": 0b011_1_111_000_0_000,
        "ɑ": 0b110_1_110_000_0_000,
        "ɔ": 0b001_1_111_000_0_000,
        "eɪ": 0b100_1_000_000_0_000,
        "ɛ": 0b111_1_110_000_0_000,
        "i": 0b111_1_011_000_0_000,
        "ɪɹ": 0b011_1_011_000_0_000,
        "ə": 0b110_1_000_000_0_000,
        "ɛɹ": 0b101_1_111_000_0_000,
        "ɪ": 0b000_1_011_000_0_000,
        "aɪ": 0b010_1_000_000_0_000,
        "ɝ": 0b101_1_110_000_0_000,
        "oʊ": 0b111_1_111_000_0_000,
        "ɔɪ": 0b001_1_000_000_0_000,
        "u": 0b110_1_111_000_0_000,
        "ʊ": 0b000_1_110_000_0_000,
        "aʊ": 0b000_1_100_000_0_000,
        "ɔɹ": 0b001_1_110_000_0_000,
        "ʊɹ": 0b010_1_111_000_0_000,
    }
)

SYMBOLS: frozenset[str] = frozenset({".", ",", "!", "?", "-"})

# Longest first so that "tʃ" wins over "t" and "ɑɹ" over "ɑ".
PREFIXES: tuple[str, ...] = tuple(
    sorted(
        [*CONSONANT_MASKS, *VOWEL_MASKS, *sorted(SYMBOLS), SPACE],
        key=len,
        reverse=True,
    )
)

# Row-major placement of tags in a legacy sprite sheet.
SHEET_ORDER: tuple[str, ...] = (
    *CONSONANT_MASKS,
    *VOWEL_MASKS,
    ".",
    ",",
    "!",
    "?",
    "-",
    CIRCLE,
)


def is_consonant(tag: str) -> bool:
    """Return True if tag is a consonant."""
    return tag in CONSONANT_MASKS


def is_vowel(tag: str) -> bool:
    """Return True if tag is a vowel."""
    return tag in VOWEL_MASKS


def is_letter(tag: str) -> bool:
    """Return True if tag is a consonant or a vowel."""
    return is_consonant(tag) or is_vowel(tag)


def is_symbol(tag: str) -> bool:
    """Return True if tag is punctuation or the reversing circle."""
    return tag in SYMBOLS or tag == CIRCLE


def tag_class(tag: str) -> TagClass | None:
    """Classify a tag.

    Args:
        tag: Phoneme tag to classify

    Returns:
        The tag's class, or None if the tag is outside the vocabulary
    """
    if is_consonant(tag):
        return TagClass.CONSONANT
    if is_vowel(tag):
        return TagClass.VOWEL
    if tag in SYMBOLS:
        return TagClass.SYMBOL
    if tag == SPACE:
        return TagClass.SPACE
    if tag == CIRCLE:
        return TagClass.CIRCLE
    return None
