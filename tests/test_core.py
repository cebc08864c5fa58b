"""
Test suite for puzzlecraft.core.
Tests direction formulas, the puzzle data model, generation results and errors.
"""

import json

import pytest

from puzzlecraft.core.base_engine import GenerationResult
from puzzlecraft.core.base_puzzle import (
    ClueEntry,
    CrosswordPuzzle,
    PlacedWord,
    SudokuCell,
    SudokuDifficulty,
    SudokuPuzzle,
    WordSearchEntry,
    WordSearchPuzzle,
)
from puzzlecraft.core.directions import (
    Direction,
    SearchDirection,
    crossword_positions,
    word_positions,
)
from puzzlecraft.core.exceptions import (
    GenerationError,
    GenerationFailedError,
    InsufficientPlacementError,
    InsufficientWordsError,
    PlacementShortfallError,
    SolutionGenerationFailedError,
)
from puzzlecraft.utils.grid_utils import empty_grid, read_path


class TestDirectionFormulas:
    """Test the direction formulas renderers replay."""

    @pytest.mark.parametrize(
        "direction, expected",
        [
            (SearchDirection.HORIZONTAL, [(2, 3), (2, 4), (2, 5)]),
            (SearchDirection.VERTICAL, [(2, 3), (3, 3), (4, 3)]),
            (SearchDirection.DIAGONAL, [(2, 3), (3, 4), (4, 5)]),
            (SearchDirection.REVERSE_HORIZONTAL, [(2, 5), (2, 4), (2, 3)]),
            (SearchDirection.REVERSE_VERTICAL, [(4, 3), (3, 3), (2, 3)]),
            (SearchDirection.REVERSE_DIAGONAL, [(4, 5), (3, 4), (2, 3)]),
        ],
    )
    def test_word_positions(self, direction, expected):
        """Each search direction walks its documented path from the anchor."""
        assert word_positions(2, 3, direction, 3) == expected

    def test_reverse_direction_reads_backwards(self):
        """A reversed word written along its path reads forwards in the formula order."""
        grid = empty_grid(5)
        positions = word_positions(0, 0, SearchDirection.REVERSE_HORIZONTAL, 3)
        for (r, c), letter in zip(positions, "CAT"):
            grid[r][c] = letter

        assert grid[0][:3] == ["T", "A", "C"]
        assert read_path(grid, positions) == "CAT"

    def test_crossword_positions(self):
        assert crossword_positions(1, 1, Direction.HORIZONTAL, 3) == [(1, 1), (1, 2), (1, 3)]
        assert crossword_positions(1, 1, Direction.VERTICAL, 2) == [(1, 1), (2, 1)]

    def test_direction_properties(self):
        assert Direction.HORIZONTAL.perpendicular == Direction.VERTICAL
        assert Direction.VERTICAL.perpendicular == Direction.HORIZONTAL

        assert not SearchDirection.HORIZONTAL.moves_down
        assert SearchDirection.HORIZONTAL.moves_across
        assert SearchDirection.REVERSE_VERTICAL.moves_down
        assert not SearchDirection.REVERSE_VERTICAL.moves_across
        assert SearchDirection.DIAGONAL.moves_down and SearchDirection.DIAGONAL.moves_across

    def test_unknown_direction_rejected(self):
        with pytest.raises(ValueError):
            word_positions(0, 0, "sideways", 3)

    def test_search_direction_values(self):
        """Serialized direction names are stable."""
        assert {d.value for d in SearchDirection} == {
            "horizontal",
            "vertical",
            "diagonal",
            "reverse-horizontal",
            "reverse-vertical",
            "reverse-diagonal",
        }


class TestCrosswordPuzzle:
    """Test CrosswordPuzzle derived data."""

    def _make_puzzle(self):
        grid = empty_grid(5)
        for c, letter in enumerate("CAT"):
            grid[0][c] = letter
        for r, letter in enumerate("CUP"):
            grid[r][0] = letter

        placed = [
            PlacedWord("cat", "Pet that purrs", 0, 0, Direction.HORIZONTAL, 1, 3),
            PlacedWord("cup", "Tea holder", 0, 0, Direction.VERTICAL, 2, 3),
        ]
        clues = {"across": [ClueEntry(1, "Pet that purrs")], "down": [ClueEntry(2, "Tea holder")]}
        return CrosswordPuzzle(grid=grid, placed_words=placed, clues=clues)

    def test_number_map_uses_smallest_number(self):
        """Two words starting in one cell show the smaller number."""
        puzzle = self._make_puzzle()
        assert puzzle.get_number_map() == {(0, 0): 1}

    def test_solution_words(self):
        puzzle = self._make_puzzle()
        assert puzzle.get_solution_words() == {"1across": "CAT", "2down": "CUP"}

    def test_placed_word_replays(self):
        puzzle = self._make_puzzle()
        for word in puzzle.placed_words:
            assert read_path(puzzle.grid, word.get_positions()) == word.answer

    def test_to_dict_is_json_serializable(self):
        puzzle = self._make_puzzle()
        data = json.loads(json.dumps(puzzle.to_dict()))

        assert data["placed_words"][0]["direction"] == "horizontal"
        assert data["clues"]["down"] == [{"number": 2, "clue": "Tea holder"}]
        assert puzzle.get_size() == (5, 5)


class TestWordSearchPuzzle:
    """Test WordSearchPuzzle derived data."""

    def test_answer_cells(self):
        entries = [
            WordSearchEntry("DOG", 0, 0, SearchDirection.HORIZONTAL),
            WordSearchEntry("DAY", 0, 0, SearchDirection.VERTICAL),
        ]
        puzzle = WordSearchPuzzle(grid=[["X"] * 4 for _ in range(4)], placed_words=entries, word_list=["DOG", "DAY"])

        assert puzzle.get_answer_cells() == {(0, 0), (0, 1), (0, 2), (1, 0), (2, 0)}
        assert puzzle.to_dict()["placed_words"][1]["direction"] == "vertical"


class TestSudokuPuzzle:
    """Test SudokuPuzzle validation and helpers."""

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            SudokuPuzzle(
                grid=[[SudokuCell()] * 8 for _ in range(9)],
                difficulty=SudokuDifficulty.EASY,
                solved_grid=[[1] * 9 for _ in range(9)],
            )

    def test_given_count_and_values(self):
        grid = [[SudokuCell() for _ in range(9)] for _ in range(9)]
        grid[0][0] = SudokuCell(value=5, is_given=True)
        puzzle = SudokuPuzzle(grid=grid, difficulty=SudokuDifficulty.HARD, solved_grid=[[5] * 9 for _ in range(9)])

        assert puzzle.get_given_count() == 1
        assert puzzle.get_values()[0][:2] == [5, 0]
        assert puzzle.to_dict()["difficulty"] == "hard"
        assert puzzle.to_dict()["grid"][0][0] == {"value": 5, "is_given": True}


class TestGenerationResult:
    """Test the tagged generation result."""

    def test_failure_carries_code(self):
        result = GenerationResult.failure(InsufficientWordsError("Only 4 words"))

        assert not result.success
        assert result.puzzle is None
        assert result.error == "Only 4 words"
        assert result.error_code == "insufficient_words"

    def test_ok_serializes_puzzle(self):
        puzzle = WordSearchPuzzle(grid=[["A"]], placed_words=[], word_list=[])
        result = GenerationResult.ok(puzzle)

        assert result.success
        assert result.to_dict()["puzzle"]["grid"] == [["A"]]
        assert result.to_dict()["error_code"] is None

    def test_error_codes_are_distinct(self):
        errors = [
            InsufficientWordsError,
            PlacementShortfallError,
            InsufficientPlacementError,
            SolutionGenerationFailedError,
            GenerationFailedError,
        ]
        assert all(issubclass(error, GenerationError) for error in errors)
        assert len({error.code for error in errors}) == len(errors)
