"""Trunic - Render IPA text in the Trunic constructed script.

Trunic is a CLI tool and library that segments phonetic (IPA) text into rune
cells and strokes them onto PNG images. Each rune is assembled from a shared
lattice of line segments: consonants use the inner spokes, vowels the outer
edges, and a small circle marks a vowel written before its consonant.

Example:
    $ echo "hɛloʊ wɝld" | trunic render -o hello.png

This will create hello.png with one line of runes.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
