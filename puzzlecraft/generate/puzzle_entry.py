"""
PuzzleEntry format for JSON export.

This module defines the record written for each generated puzzle: the
puzzle's own serialization plus the request that produced it and some
generation metadata.
"""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Dict, List, Any
import json
import logging

from ..core.base_puzzle import (
    BasePuzzle,
    CrosswordPuzzle,
    SudokuPuzzle,
    WordSearchPuzzle,
)
from .generation_config import GenerationConfig

logger = logging.getLogger(__name__)


@dataclass
class PuzzleEntry:
    """
    Exported puzzle record.

    Attributes:
        id: Unique puzzle identifier (e.g., "crossword_15x15_001")
        game_type: "crossword", "wordsearch" or "sudoku"
        grid_size: Side of the square grid
        difficulty: Requested difficulty (1-5)
        language: Language id of the word list
        themes: Theme ids the words were drawn from (empty for Sudoku)
        word_count: Number of words placed (0 for Sudoku)
        fill_ratio: Share of cells covered by words (givens for Sudoku)
        puzzle: The puzzle's own to_dict() output
        generation_metadata: Additional generation information
    """

    id: str
    game_type: str
    grid_size: int
    difficulty: int
    language: str
    themes: List[str]
    word_count: int
    fill_ratio: float
    puzzle: Dict[str, Any]
    generation_metadata: Dict[str, Any]

    def __post_init__(self):
        """Validate puzzle entry after initialization."""
        if not self.id:
            raise ValueError("Puzzle ID cannot be empty")

        if not self.puzzle:
            raise ValueError("Puzzle data is required")

        if not (0.0 <= self.fill_ratio <= 1.0):
            raise ValueError("Fill ratio must be between 0.0 and 1.0")

    @classmethod
    def from_puzzle(
        cls,
        puzzle_id: str,
        puzzle: BasePuzzle,
        config: GenerationConfig,
        generation_info: Dict[str, Any] = None,
    ) -> "PuzzleEntry":
        """
        Create PuzzleEntry from a generated puzzle.

        Args:
            puzzle_id: Identifier assigned by the builder
            puzzle: CrosswordPuzzle, WordSearchPuzzle or SudokuPuzzle
            config: Request that produced the puzzle
            generation_info: Additional generation metadata

        Returns:
            PuzzleEntry instance
        """
        rows, cols = puzzle.get_size()
        total_cells = rows * cols

        if isinstance(puzzle, SudokuPuzzle):
            word_count = 0
            filled_cells = puzzle.get_given_count()
        elif isinstance(puzzle, (CrosswordPuzzle, WordSearchPuzzle)):
            word_count = len(puzzle.placed_words)
            # Word-search grids are always full, so count answer cells instead
            if isinstance(puzzle, WordSearchPuzzle):
                filled_cells = len(puzzle.get_answer_cells())
            else:
                filled_cells = sum(1 for row in puzzle.grid for cell in row if cell)
        else:
            raise TypeError(f"Unsupported puzzle type: {type(puzzle).__name__}")

        metadata = {
            "generation_timestamp": datetime.now().isoformat(),
        }
        metadata.update(generation_info or {})

        return cls(
            id=puzzle_id,
            game_type=config.game_type.value,
            grid_size=config.effective_grid_size,
            difficulty=config.difficulty,
            language=config.language,
            themes=list(config.themes) if config.game_type.uses_words else [],
            word_count=word_count,
            fill_ratio=filled_cells / total_cells if total_cells > 0 else 0.0,
            puzzle=puzzle.to_dict(),
            generation_metadata=metadata,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
