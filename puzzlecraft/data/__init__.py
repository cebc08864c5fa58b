"""
Word supply package for Puzzlecraft.

Provides the word sources (local text files, HuggingFace datasets) and the
cached WordSupply the crossword and word-search engines draw from.
"""

from .word_supply import WordSupply, WordSource, TextFileWordSource, parse_word_file
from .hf_word_source import HFWordSource

__all__ = [
    "WordSupply",
    "WordSource",
    "TextFileWordSource",
    "HFWordSource",
    "parse_word_file",
]
