"""
Puzzle Generation Module

This module implements the three puzzle-construction engines and the
orchestrator that drives them.

Architecture:
- generation_config: GenerationConfig request record and theme/language catalogues
- crossword_engine: Scored-intersection crossword layout with clue numbering
- word_search_engine: Random-placement word search with noise fill
- sudoku_engine: Backtracking Sudoku fill with difficulty-based carving
- puzzle_entry: PuzzleEntry dataclass for JSON export
- puzzle_builder: Main orchestrator for single and batch generation
- puzzle_visualisation: Terminal rendering of puzzles and answer keys

Key Features:
- Reproducible output from an injected, seedable random source
- Failures reported as GenerationResult values instead of exceptions
- Crossword and word search grids from 10x10 to 21x21
"""

from .generation_config import (
    AVAILABLE_LANGUAGES,
    AVAILABLE_THEMES,
    GameType,
    GenerationConfig,
)
from .crossword_engine import CrosswordEngine, CrosswordLayout
from .word_search_engine import WordSearchEngine
from .sudoku_engine import SudokuEngine, is_valid_sudoku, is_complete_sudoku
from .puzzle_entry import PuzzleEntry
from .puzzle_builder import PuzzleBuilder


__all__ = [
    "AVAILABLE_LANGUAGES",
    "AVAILABLE_THEMES",
    "GameType",
    "GenerationConfig",
    "CrosswordEngine",
    "CrosswordLayout",
    "WordSearchEngine",
    "SudokuEngine",
    "is_valid_sudoku",
    "is_complete_sudoku",
    "PuzzleEntry",
    "PuzzleBuilder",
]
