"""
Word directions and the direction formulas for crossword and word-search words.

The formulas are the public contract renderers replay to locate a word's
cells, so engines and renderers must both go through them.
"""

from enum import Enum
from typing import List, Tuple

Position = Tuple[int, int]


class Direction(Enum):
    """Crossword word directions."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"

    @property
    def perpendicular(self) -> "Direction":
        if self is Direction.HORIZONTAL:
            return Direction.VERTICAL
        return Direction.HORIZONTAL


class SearchDirection(Enum):
    """Word-search word directions."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"
    REVERSE_HORIZONTAL = "reverse-horizontal"
    REVERSE_VERTICAL = "reverse-vertical"
    REVERSE_DIAGONAL = "reverse-diagonal"

    @property
    def moves_down(self) -> bool:
        return self not in (
            SearchDirection.HORIZONTAL,
            SearchDirection.REVERSE_HORIZONTAL,
        )

    @property
    def moves_across(self) -> bool:
        return self not in (SearchDirection.VERTICAL, SearchDirection.REVERSE_VERTICAL)


def crossword_positions(
    row: int, col: int, direction: Direction, length: int
) -> List[Position]:
    """Cells covered by a crossword word, in letter order."""
    if direction == Direction.HORIZONTAL:
        return [(row, col + i) for i in range(length)]
    return [(row + i, col) for i in range(length)]


def word_positions(
    row: int, col: int, direction: SearchDirection, length: int
) -> List[Position]:
    """
    Cells covered by a word-search word, in letter order.

    Reverse directions keep (row, col) as the top/left anchor and walk the
    letters back towards it, so the anchor holds the last letter.
    """
    positions = []
    for i in range(length):
        back = length - 1 - i
        if direction == SearchDirection.HORIZONTAL:
            positions.append((row, col + i))
        elif direction == SearchDirection.VERTICAL:
            positions.append((row + i, col))
        elif direction == SearchDirection.DIAGONAL:
            positions.append((row + i, col + i))
        elif direction == SearchDirection.REVERSE_HORIZONTAL:
            positions.append((row, col + back))
        elif direction == SearchDirection.REVERSE_VERTICAL:
            positions.append((row + back, col))
        elif direction == SearchDirection.REVERSE_DIAGONAL:
            positions.append((row + back, col + back))
        else:
            raise ValueError(f"Unknown direction: {direction}")
    return positions
