"""
Unicode utility functions for Puzzlecraft word handling.

This module provides Unicode-aware text processing functions used when
word lists are loaded and when puzzle letters are written to a grid.
"""

import unicodedata
from typing import Optional


def is_alphabetic_unicode(text: str) -> bool:
    """
    Check if text contains only Unicode letters (any script).

    This is a Unicode-aware replacement for str.isalpha() that also accepts
    combining marks, so decomposed accented letters (Portuguese, Spanish)
    are treated as letters.

    Args:
        text: Text to check

    Returns:
        True if text contains only Unicode letters and combining marks, False otherwise
    """
    if not text:
        return False

    for char in text:
        category = unicodedata.category(char)
        # L* letters, Mc/Mn combining marks
        if not (category.startswith("L") or category in ("Mc", "Mn")):
            return False

    return True


def clean_unicode_text(text: Optional[str]) -> Optional[str]:
    """
    Clean and normalize Unicode text.

    Args:
        text: Input text to clean

    Returns:
        NFC-normalized, stripped text or None if input is invalid
    """
    if not text or not isinstance(text, str):
        return None

    cleaned = unicodedata.normalize("NFC", text.strip())

    return cleaned if cleaned else None


def normalize_word(text: Optional[str]) -> Optional[str]:
    """
    Normalize a word-list answer so it can be written into a grid.

    Spaces and hyphens are removed ("ICE CREAM" -> "ICECREAM").

    Returns:
        The normalized word, or None when it is empty or not purely alphabetic
    """
    cleaned = clean_unicode_text(text)
    if cleaned is None:
        return None

    compact = "".join(ch for ch in cleaned if not ch.isspace() and ch != "-")
    if not is_alphabetic_unicode(compact):
        return None

    # Upper-casing must keep one grid cell per letter ("ß" -> "SS" does not)
    if len(grid_letters(compact)) != len(compact):
        return None

    return compact


def grid_letters(word: str) -> str:
    """Upper-case form of a word as it appears in a puzzle grid."""
    return unicodedata.normalize("NFC", word).upper()
