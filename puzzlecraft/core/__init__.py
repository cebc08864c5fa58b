"""
Core base interfaces for the Puzzlecraft engines.

This package contains the puzzle data model, the engine contract,
the direction formulas and the generation error hierarchy.

Classes:
    BasePuzzle: Abstract base class for all puzzle types
    BaseEngine: Abstract base class for all engines
    GenerationResult: Tagged success/failure result of an engine
    CrosswordPuzzle, WordSearchPuzzle, SudokuPuzzle: Puzzle structures
"""

from .directions import Direction, SearchDirection, crossword_positions, word_positions
from .base_puzzle import (
    BasePuzzle,
    WordEntry,
    ClueEntry,
    PlacedWord,
    CrosswordPuzzle,
    WordSearchEntry,
    WordSearchPuzzle,
    SudokuDifficulty,
    SudokuCell,
    SudokuPuzzle,
)
from .base_engine import BaseEngine, GenerationResult
from .exceptions import (
    GenerationError,
    InsufficientWordsError,
    PlacementShortfallError,
    InsufficientPlacementError,
    SolutionGenerationFailedError,
    GenerationFailedError,
)

__all__ = [
    'Direction',
    'SearchDirection',
    'crossword_positions',
    'word_positions',
    'BasePuzzle',
    'WordEntry',
    'ClueEntry',
    'PlacedWord',
    'CrosswordPuzzle',
    'WordSearchEntry',
    'WordSearchPuzzle',
    'SudokuDifficulty',
    'SudokuCell',
    'SudokuPuzzle',
    'BaseEngine',
    'GenerationResult',
    'GenerationError',
    'InsufficientWordsError',
    'PlacementShortfallError',
    'InsufficientPlacementError',
    'SolutionGenerationFailedError',
    'GenerationFailedError',
]
