"""
Simple terminal visualisation for generated puzzles.

The render_* functions return the text; the display_* functions print it.
"""

from typing import List

from ..core.base_puzzle import (
    BasePuzzle,
    CrosswordPuzzle,
    SudokuPuzzle,
    WordSearchPuzzle,
)

BLOCK = "███"


def render_crossword(puzzle: CrosswordPuzzle, show_answers: bool = False) -> str:
    """Crossword grid with clue numbers (or letters) followed by the clue lists."""
    number_map = puzzle.get_number_map()
    lines: List[str] = []

    for r, row in enumerate(puzzle.grid):
        formatted_row = []
        for c, cell in enumerate(row):
            if not cell:
                formatted_row.append(BLOCK)
            elif show_answers:
                formatted_row.append(f" {cell} ")
            elif (r, c) in number_map:
                formatted_row.append(f"{number_map[(r, c)]:<3}")
            else:
                formatted_row.append(" _ ")
        lines.append("".join(formatted_row))

    answers = puzzle.get_solution_words()
    for direction in ("across", "down"):
        entries = puzzle.clues.get(direction, [])
        if not entries:
            continue
        lines.append("")
        lines.append(f"{direction.upper()}:")
        for entry in entries:
            line = f"  {entry.number}: {entry.clue}"
            if show_answers:
                line += f" ({answers[f'{entry.number}{direction}']})"
            lines.append(line)

    return "\n".join(lines)


def render_word_search(puzzle: WordSearchPuzzle, show_answers: bool = False) -> str:
    """Letter grid and word list; the answer key blanks cells off every path."""
    answer_cells = puzzle.get_answer_cells() if show_answers else None
    lines: List[str] = []

    for r, row in enumerate(puzzle.grid):
        formatted_row = []
        for c, cell in enumerate(row):
            if answer_cells is not None and (r, c) not in answer_cells:
                formatted_row.append(" . ")
            else:
                formatted_row.append(f" {cell} ")
        lines.append("".join(formatted_row))

    lines.append("")
    lines.append("WORDS:")
    lines.extend(f"  {word}" for word in puzzle.word_list)

    return "\n".join(lines)


def render_sudoku(puzzle: SudokuPuzzle, show_answers: bool = False) -> str:
    """9x9 grid with box separators; empty cells shown as '.'."""
    values = puzzle.solved_grid if show_answers else puzzle.get_values()
    lines: List[str] = []

    for r, row in enumerate(values):
        if r and r % 3 == 0:
            lines.append("------+-------+------")
        groups = [
            " ".join(str(value) if value else "." for value in row[c:c + 3])
            for c in range(0, 9, 3)
        ]
        lines.append(" | ".join(groups))

    lines.append("")
    lines.append(
        f"Difficulty: {puzzle.difficulty.value} | Givens: {puzzle.get_given_count()}"
    )
    return "\n".join(lines)


def display_crossword(puzzle: CrosswordPuzzle, show_answers: bool = False):
    """Display a crossword in terminal."""
    print(render_crossword(puzzle, show_answers))


def display_word_search(puzzle: WordSearchPuzzle, show_answers: bool = False):
    """Display a word search in terminal."""
    print(render_word_search(puzzle, show_answers))


def display_sudoku(puzzle: SudokuPuzzle, show_answers: bool = False):
    """Display a Sudoku in terminal."""
    print(render_sudoku(puzzle, show_answers))


def display_puzzle(puzzle: BasePuzzle, title: str = "", show_answers: bool = False):
    """Display any generated puzzle under a title banner."""
    if title:
        print(f"\n{'=' * 60}")
        print(title)
        print(f"{'=' * 60}")

    if isinstance(puzzle, CrosswordPuzzle):
        display_crossword(puzzle, show_answers)
    elif isinstance(puzzle, WordSearchPuzzle):
        display_word_search(puzzle, show_answers)
    elif isinstance(puzzle, SudokuPuzzle):
        display_sudoku(puzzle, show_answers)
    else:
        raise TypeError(f"Unsupported puzzle type: {type(puzzle).__name__}")
