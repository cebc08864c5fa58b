"""
Test suite for the Sudoku engine.
Tests the backtracking fill, difficulty carving and the validity helpers.
"""

import random
from unittest.mock import patch

import pytest

from puzzlecraft.core.base_puzzle import SudokuCell, SudokuDifficulty
from puzzlecraft.generate.generation_config import GenerationConfig
from puzzlecraft.generate.sudoku_engine import (
    SudokuEngine,
    difficulty_tier,
    is_complete_sudoku,
    is_valid_sudoku,
)

SOLVED = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def sudoku_config(difficulty):
    return GenerationConfig(game_type="sudoku", difficulty=difficulty, themes=[])


class TestValidityHelpers:
    """Test is_valid_sudoku and is_complete_sudoku."""

    def test_solved_grid_is_complete(self):
        assert is_valid_sudoku(SOLVED)
        assert is_complete_sudoku(SOLVED)

    def test_partial_grid_valid_but_incomplete(self):
        grid = [row[:] for row in SOLVED]
        grid[0][0] = 0

        assert is_valid_sudoku(grid)
        assert not is_complete_sudoku(grid)

    def test_row_duplicate_detected(self):
        grid = [[0] * 9 for _ in range(9)]
        grid[4][0] = grid[4][8] = 7
        assert not is_valid_sudoku(grid)

    def test_column_duplicate_detected(self):
        grid = [[0] * 9 for _ in range(9)]
        grid[0][2] = grid[8][2] = 3
        assert not is_valid_sudoku(grid)

    def test_box_duplicate_detected(self):
        grid = [[0] * 9 for _ in range(9)]
        grid[3][3] = grid[5][5] = 9
        assert not is_valid_sudoku(grid)

    def test_accepts_cell_grids(self):
        cells = [[SudokuCell(value=value, is_given=True) for value in row] for row in SOLVED]
        assert is_complete_sudoku(cells)

    def test_wrong_shape_is_invalid(self):
        assert not is_valid_sudoku([[1, 2, 3]])


class TestDifficultyTiers:
    """Test the 1-5 difficulty mapping."""

    @pytest.mark.parametrize(
        "difficulty, tier",
        [
            (1, SudokuDifficulty.EASY),
            (2, SudokuDifficulty.EASY),
            (3, SudokuDifficulty.MEDIUM),
            (4, SudokuDifficulty.HARD),
            (5, SudokuDifficulty.EXPERT),
            (0, SudokuDifficulty.MEDIUM),
            (9, SudokuDifficulty.MEDIUM),
        ],
    )
    def test_tier_mapping(self, difficulty, tier):
        assert difficulty_tier(difficulty) == tier


class TestSudokuGenerate:
    """Test full Sudoku generation."""

    @pytest.mark.parametrize(
        "difficulty, low, high",
        [(1, 37, 46), (3, 27, 36), (4, 17, 26), (5, 12, 16)],
    )
    def test_given_count_in_tier_range(self, difficulty, low, high):
        for seed in range(5):
            result = SudokuEngine(rng=random.Random(seed)).generate(sudoku_config(difficulty))

            assert result.success
            assert low <= result.puzzle.get_given_count() <= high

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_solution_valid_and_givens_consistent(self, seed):
        result = SudokuEngine(rng=random.Random(seed)).generate(sudoku_config(3))
        puzzle = result.puzzle

        assert is_complete_sudoku(puzzle.solved_grid)
        assert is_valid_sudoku(puzzle.grid)
        for row, solved_row in zip(puzzle.grid, puzzle.solved_grid):
            for cell, solved_value in zip(row, solved_row):
                if cell.is_given:
                    assert cell.value == solved_value
                else:
                    assert cell.value == 0

    def test_expert_tier_recorded(self):
        result = SudokuEngine(rng=random.Random(1)).generate(sudoku_config(5))
        assert result.puzzle.difficulty == SudokuDifficulty.EXPERT

    def test_deterministic_with_seed(self):
        first = SudokuEngine(rng=random.Random(99)).generate(sudoku_config(4))
        second = SudokuEngine(rng=random.Random(99)).generate(sudoku_config(4))

        assert first.puzzle.to_dict() == second.puzzle.to_dict()

    def test_different_seeds_differ(self):
        first = SudokuEngine(rng=random.Random(1)).generate(sudoku_config(2))
        second = SudokuEngine(rng=random.Random(2)).generate(sudoku_config(2))

        assert first.puzzle.solved_grid != second.puzzle.solved_grid

    def test_engine_instance_can_be_reused(self):
        engine = SudokuEngine(rng=random.Random(3))

        first = engine.generate(sudoku_config(2))
        second = engine.generate(sudoku_config(2))

        assert first.success and second.success
        assert is_complete_sudoku(second.puzzle.solved_grid)
        assert first.puzzle.solved_grid != second.puzzle.solved_grid

    def test_fill_failure_result(self):
        engine = SudokuEngine(rng=random.Random(0))

        with patch.object(engine, "_fill_cell", return_value=False):
            result = engine.generate(sudoku_config(2))

        assert not result.success
        assert result.error_code == "solution_generation_failed"

    def test_unexpected_error_is_wrapped(self):
        engine = SudokuEngine(rng=random.Random(0))

        with patch.object(engine, "_create_puzzle", side_effect=RuntimeError("boom")):
            result = engine.generate(sudoku_config(2))

        assert not result.success
        assert result.error_code == "generation_failed"
