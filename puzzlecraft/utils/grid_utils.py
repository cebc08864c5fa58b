"""Shared grid helpers for the word-game engines."""

from typing import List, Tuple

Position = Tuple[int, int]

EMPTY = ""


def empty_grid(size: int) -> List[List[str]]:
    """Square grid of blank cells."""
    return [[EMPTY for _ in range(size)] for _ in range(size)]


def in_bounds(position: Position, size: int) -> bool:
    row, col = position
    return 0 <= row < size and 0 <= col < size


def read_path(grid: List[List[str]], positions: List[Position]) -> str:
    """Concatenate the grid letters found along a path."""
    return "".join(grid[r][c] for r, c in positions)


def manhattan(a: Position, b: Position) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])
