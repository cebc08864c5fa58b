"""
Sudoku Engine

Fills a blank 9x9 grid by randomized backtracking, then hides a
difficulty-dependent number of cells. Carving does not re-check that the
puzzle keeps a unique solution, so high removal counts may admit several.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..core.base_engine import BaseEngine, GenerationResult
from ..core.base_puzzle import SudokuCell, SudokuDifficulty, SudokuPuzzle
from ..core.exceptions import (
    GenerationError,
    GenerationFailedError,
    SolutionGenerationFailedError,
)
from .generation_config import GenerationConfig

logger = logging.getLogger(__name__)

SIZE = 9
BOX = 3
DIGITS = list(range(1, SIZE + 1))

DIFFICULTY_TIERS: Dict[int, SudokuDifficulty] = {
    1: SudokuDifficulty.EASY,
    2: SudokuDifficulty.EASY,
    3: SudokuDifficulty.MEDIUM,
    4: SudokuDifficulty.HARD,
    5: SudokuDifficulty.EXPERT,
}

# Inclusive ranges of cells removed out of 81
REMOVAL_RANGES: Dict[SudokuDifficulty, Tuple[int, int]] = {
    SudokuDifficulty.EASY: (35, 44),
    SudokuDifficulty.MEDIUM: (45, 54),
    SudokuDifficulty.HARD: (55, 64),
    SudokuDifficulty.EXPERT: (65, 69),
}

GridLike = Sequence[Sequence[Union[SudokuCell, int]]]


def _as_array(grid: GridLike) -> np.ndarray:
    return np.array(
        [[cell.value if isinstance(cell, SudokuCell) else int(cell) for cell in row] for row in grid],
        dtype=int,
    )


def _has_duplicates(values: np.ndarray) -> bool:
    filled = values[values != 0]
    return len(np.unique(filled)) != len(filled)


def is_valid_sudoku(grid: GridLike) -> bool:
    """
    Check that no row, column or 3x3 box repeats a non-zero value.

    Args:
        grid: 9x9 grid of SudokuCell or plain integers (0 = empty)
    """
    values = _as_array(grid)
    if values.shape != (SIZE, SIZE):
        return False

    for i in range(SIZE):
        if _has_duplicates(values[i, :]) or _has_duplicates(values[:, i]):
            return False

    for box_row in range(0, SIZE, BOX):
        for box_col in range(0, SIZE, BOX):
            if _has_duplicates(values[box_row:box_row + BOX, box_col:box_col + BOX].ravel()):
                return False

    return True


def is_complete_sudoku(grid: GridLike) -> bool:
    """True when every cell holds 1-9 and the grid is valid."""
    values = _as_array(grid)
    if values.shape != (SIZE, SIZE) or np.any(values == 0):
        return False
    return is_valid_sudoku(values.tolist())


def difficulty_tier(difficulty: int) -> SudokuDifficulty:
    """Map a 1-5 difficulty to its named tier (medium when out of range)."""
    return DIFFICULTY_TIERS.get(difficulty, SudokuDifficulty.MEDIUM)


class SudokuEngine(BaseEngine):
    """Backtracking Sudoku generator."""

    def __init__(self, rng: Optional[random.Random] = None):
        super().__init__(rng)
        self.grid: List[List[int]] = [[0] * SIZE for _ in range(SIZE)]

    def generate(self, config: GenerationConfig) -> GenerationResult:
        """
        Generate a Sudoku puzzle.

        Args:
            config: Generation request; only the difficulty is used

        Returns:
            GenerationResult holding a SudokuPuzzle, or the failure reason
        """
        try:
            puzzle = self.build_puzzle(config.difficulty)
            return GenerationResult.ok(puzzle)

        except GenerationError as e:
            logger.error(f"Sudoku generation failed: {e}")
            return GenerationResult.failure(e)
        except Exception as e:
            logger.error(f"Unexpected Sudoku generation error: {e}", exc_info=True)
            return GenerationResult.failure(
                GenerationFailedError(f"Sudoku generation failed: {e}")
            )

    def build_puzzle(self, difficulty: int) -> SudokuPuzzle:
        """
        Fill a solution and carve the puzzle out of it.

        Raises:
            SolutionGenerationFailedError: The fill phase could not complete the grid
        """
        self.grid = [[0] * SIZE for _ in range(SIZE)]
        if not self._fill_cell(0) or not is_complete_sudoku(self.grid):
            raise SolutionGenerationFailedError("Failed to generate a valid Sudoku grid")

        solved_grid = [row[:] for row in self.grid]

        tier = difficulty_tier(difficulty)
        low, high = REMOVAL_RANGES[tier]
        cells_to_remove = self.rng.randint(low, high)

        puzzle_grid = self._create_puzzle(solved_grid, cells_to_remove)

        logger.info(
            f"Generated {tier.value} Sudoku with {SIZE * SIZE - cells_to_remove} givens"
        )
        return SudokuPuzzle(grid=puzzle_grid, difficulty=tier, solved_grid=solved_grid)

    def _fill_cell(self, index: int) -> bool:
        """Fill cells index..80 in row-major order; True once all 81 are set."""
        if index == SIZE * SIZE:
            return True

        row, col = divmod(index, SIZE)
        candidates = DIGITS[:]
        self.rng.shuffle(candidates)

        for digit in candidates:
            if self._is_valid_move(row, col, digit):
                self.grid[row][col] = digit
                if self._fill_cell(index + 1):
                    return True
                # Backtrack
                self.grid[row][col] = 0

        return False

    def _is_valid_move(self, row: int, col: int, digit: int) -> bool:
        if digit in self.grid[row]:
            return False

        if any(self.grid[r][col] == digit for r in range(SIZE)):
            return False

        box_row, box_col = row - row % BOX, col - col % BOX
        for r in range(box_row, box_row + BOX):
            if digit in self.grid[r][box_col:box_col + BOX]:
                return False

        return True

    def _create_puzzle(
        self, solved_grid: List[List[int]], cells_to_remove: int
    ) -> List[List[SudokuCell]]:
        """Hide the first `cells_to_remove` cells of a shuffled position list."""
        puzzle_grid = [
            [SudokuCell(value=value, is_given=True) for value in row] for row in solved_grid
        ]

        positions = [(row, col) for row in range(SIZE) for col in range(SIZE)]
        self.rng.shuffle(positions)

        for row, col in positions[:cells_to_remove]:
            puzzle_grid[row][col] = SudokuCell(value=0, is_given=False)

        return puzzle_grid
