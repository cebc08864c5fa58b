"""
Puzzle data model shared by the engines and the rendering/export layer.

Each puzzle structure is produced once by its engine and then read by
renderers, which replay the direction formulas in core.directions to
recompute derived data such as clue numbers or answer-key highlights.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Any, NamedTuple, Set, Tuple

from .directions import (
    Direction,
    SearchDirection,
    Position,
    crossword_positions,
    word_positions,
)
from ..utils.unicode_utils import grid_letters


class BasePuzzle(ABC):
    """
    Base class for all puzzle types.

    Provides the minimal interface needed by renderers and exporters.
    """

    @abstractmethod
    def get_size(self) -> Tuple[int, int]:
        """Return puzzle dimensions."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert puzzle to dictionary for serialization."""
        pass


class WordEntry(NamedTuple):
    """A word with its clue, as returned by the word supply."""

    word: str
    clue: str
    difficulty: int = 1


class ClueEntry(NamedTuple):
    """A numbered clue in an across or down list."""

    number: int
    clue: str


@dataclass
class PlacedWord:
    """
    A word placed in a crossword grid.

    Attributes:
        word: Word as supplied (original casing)
        clue: Clue text
        start_row: Row of the first letter (0-based)
        start_col: Column of the first letter (0-based)
        direction: HORIZONTAL (across) or VERTICAL (down)
        number: Clue number, assigned in placement order starting at 1
        length: Number of grid cells the word covers
    """

    word: str
    clue: str
    start_row: int
    start_col: int
    direction: Direction
    number: int
    length: int

    @property
    def answer(self) -> str:
        """Upper-case letters as written in the grid."""
        return grid_letters(self.word)

    def get_positions(self) -> List[Position]:
        """Get all grid positions occupied by this word."""
        return crossword_positions(
            self.start_row, self.start_col, self.direction, self.length
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "clue": self.clue,
            "start_row": self.start_row,
            "start_col": self.start_col,
            "direction": self.direction.value,
            "number": self.number,
            "length": self.length,
        }


@dataclass
class CrosswordPuzzle(BasePuzzle):
    """
    Crossword layout with its clue lists.

    Attributes:
        grid: Square grid of upper-case letters, "" for blank cells
        placed_words: Placed words in placement order
        clues: {"across": [...], "down": [...]}, each sorted by number
    """

    grid: List[List[str]]
    placed_words: List[PlacedWord]
    clues: Dict[str, List[ClueEntry]] = field(
        default_factory=lambda: {"across": [], "down": []}
    )

    def get_size(self) -> Tuple[int, int]:
        return (len(self.grid), len(self.grid[0]) if self.grid else 0)

    def get_number_map(self) -> Dict[Position, int]:
        """
        Map each word-start cell to the number printed in it.

        When several words start in the same cell the smallest number wins.
        """
        number_map: Dict[Position, int] = {}
        for word in self.placed_words:
            key = (word.start_row, word.start_col)
            if key not in number_map or number_map[key] > word.number:
                number_map[key] = word.number
        return number_map

    def get_solution_words(self) -> Dict[str, str]:
        """Map clue ids such as "3across" to their answers."""
        labels = {Direction.HORIZONTAL: "across", Direction.VERTICAL: "down"}
        return {
            f"{word.number}{labels[word.direction]}": word.answer
            for word in self.placed_words
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": [row[:] for row in self.grid],
            "placed_words": [word.to_dict() for word in self.placed_words],
            "clues": {
                direction: [entry._asdict() for entry in entries]
                for direction, entries in self.clues.items()
            },
        }


@dataclass
class WordSearchEntry:
    """A word hidden in a word-search grid."""

    word: str
    start_row: int
    start_col: int
    direction: SearchDirection

    def get_positions(self) -> List[Position]:
        return word_positions(
            self.start_row, self.start_col, self.direction, len(self.word)
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "word": self.word,
            "start_row": self.start_row,
            "start_col": self.start_col,
            "direction": self.direction.value,
        }


@dataclass
class WordSearchPuzzle(BasePuzzle):
    """Fully filled word-search grid with the hidden words."""

    grid: List[List[str]]
    placed_words: List[WordSearchEntry]
    word_list: List[str]

    def get_size(self) -> Tuple[int, int]:
        return (len(self.grid), len(self.grid[0]) if self.grid else 0)

    def get_answer_cells(self) -> Set[Position]:
        """Cells an answer key highlights."""
        cells: Set[Position] = set()
        for entry in self.placed_words:
            cells.update(entry.get_positions())
        return cells

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": [row[:] for row in self.grid],
            "placed_words": [entry.to_dict() for entry in self.placed_words],
            "word_list": list(self.word_list),
        }


class SudokuDifficulty(Enum):
    """Named Sudoku difficulty tiers."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXPERT = "expert"


@dataclass
class SudokuCell:
    """A Sudoku cell; value 0 means empty."""

    value: int = 0
    is_given: bool = False


@dataclass
class SudokuPuzzle(BasePuzzle):
    """
    Sudoku puzzle together with its solution.

    Given cells hold their solved value; every other cell holds 0.
    """

    grid: List[List[SudokuCell]]
    difficulty: SudokuDifficulty
    solved_grid: List[List[int]]

    def __post_init__(self):
        if len(self.grid) != 9 or any(len(row) != 9 for row in self.grid):
            raise ValueError("Sudoku grid must be 9x9")
        if len(self.solved_grid) != 9 or any(len(row) != 9 for row in self.solved_grid):
            raise ValueError("Sudoku solution must be 9x9")

    def get_size(self) -> Tuple[int, int]:
        return (9, 9)

    def get_given_count(self) -> int:
        return sum(1 for row in self.grid for cell in row if cell.is_given)

    def get_values(self) -> List[List[int]]:
        """Puzzle values as plain integers (0 for empty cells)."""
        return [[cell.value for cell in row] for row in self.grid]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": [
                [{"value": cell.value, "is_given": cell.is_given} for cell in row]
                for row in self.grid
            ],
            "difficulty": self.difficulty.value,
            "solved_grid": [row[:] for row in self.solved_grid],
        }
