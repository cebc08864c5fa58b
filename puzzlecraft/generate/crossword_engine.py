"""
Crossword Engine with Scored Intersection Placement

This module builds an intersecting crossword from a themed word pool. The
longest word is anchored across the centre of the grid; every following word
is tried at each letter it shares with an already placed word, ranked by a
placement score (centre proximity, clustering penalty, direction balance).
Words that share no usable letter are skipped, never relocated.
"""

import logging
import math
import random
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..core.base_engine import BaseEngine, GenerationResult
from ..core.base_puzzle import ClueEntry, CrosswordPuzzle, PlacedWord, WordEntry
from ..core.directions import Direction, Position, crossword_positions
from ..core.exceptions import (
    GenerationError,
    GenerationFailedError,
    InsufficientWordsError,
    PlacementShortfallError,
)
from ..data.word_supply import WordSupply
from ..utils.config_loader import get_config
from ..utils.grid_utils import EMPTY, empty_grid, in_bounds, manhattan
from ..utils.unicode_utils import grid_letters, is_alphabetic_unicode
from .generation_config import GenerationConfig

logger = logging.getLogger(__name__)

# Placement score weights
BASE_SCORE = 100
CENTER_DISTANCE_PENALTY = 2
CLUSTER_RADIUS = 2
CLUSTER_PENALTY = 15
BALANCE_BONUS = 10

MIN_PARALLEL_DISTANCE = 2


@dataclass
class PlacementCandidate:
    """A possible position for a word, with its placement score."""

    row: int
    col: int
    direction: Direction
    score: int


class CrosswordLayout:
    """In-progress crossword: grid letters plus the words placed so far."""

    def __init__(self, size: int):
        self.size = size
        self.grid = empty_grid(size)
        self.placed_words: List[PlacedWord] = []
        self.next_number = 1

    def is_placed(self, word: str) -> bool:
        key = word.casefold()
        return any(placed.word.casefold() == key for placed in self.placed_words)

    def direction_count(self, direction: Direction) -> int:
        return sum(1 for placed in self.placed_words if placed.direction == direction)

    def is_part_of_word(self, row: int, col: int, direction: Direction) -> bool:
        """True if (row, col) lies on a placed word running in `direction`."""
        for placed in self.placed_words:
            if placed.direction != direction:
                continue
            if direction == Direction.HORIZONTAL:
                if placed.start_row == row and placed.start_col <= col < placed.start_col + placed.length:
                    return True
            elif placed.start_col == col and placed.start_row <= row < placed.start_row + placed.length:
                return True
        return False

    def end_caps(self) -> set:
        """Cells directly before the head and after the tail of every placed word."""
        caps = set()
        for placed in self.placed_words:
            if placed.direction == Direction.HORIZONTAL:
                cells = [
                    (placed.start_row, placed.start_col - 1),
                    (placed.start_row, placed.start_col + placed.length),
                ]
            else:
                cells = [
                    (placed.start_row - 1, placed.start_col),
                    (placed.start_row + placed.length, placed.start_col),
                ]
            caps.update(cell for cell in cells if in_bounds(cell, self.size))
        return caps

    def place(self, entry: WordEntry, row: int, col: int, direction: Direction) -> PlacedWord:
        """Write a word into the grid and number it."""
        letters = grid_letters(entry.word)
        for (r, c), letter in zip(crossword_positions(row, col, direction, len(letters)), letters):
            self.grid[r][c] = letter

        placed = PlacedWord(
            word=entry.word,
            clue=entry.clue,
            start_row=row,
            start_col=col,
            direction=direction,
            number=self.next_number,
            length=len(letters),
        )
        self.next_number += 1
        self.placed_words.append(placed)
        return placed

    def build_clues(self) -> Dict[str, List[ClueEntry]]:
        across = [
            ClueEntry(word.number, word.clue)
            for word in self.placed_words
            if word.direction == Direction.HORIZONTAL
        ]
        down = [
            ClueEntry(word.number, word.clue)
            for word in self.placed_words
            if word.direction == Direction.VERTICAL
        ]
        return {"across": sorted(across), "down": sorted(down)}

    def to_puzzle(self) -> CrosswordPuzzle:
        return CrosswordPuzzle(
            grid=[row[:] for row in self.grid],
            placed_words=list(self.placed_words),
            clues=self.build_clues(),
        )


class CrosswordEngine(BaseEngine):
    """
    Greedy crossword builder.

    One instance serves one request; the in-progress CrosswordLayout is
    passed explicitly between the placement steps.
    """

    def __init__(self, word_supply: WordSupply, rng: Optional[random.Random] = None):
        """
        Initialize crossword engine.

        Args:
            word_supply: Source of candidate words
            rng: Random source for the top-candidate tie-break
        """
        super().__init__(rng)
        self.word_supply = word_supply
        self.generation_config = get_config().get_generation_config()

    async def generate(self, config: GenerationConfig) -> GenerationResult:
        """
        Generate a crossword.

        Args:
            config: Generation request

        Returns:
            GenerationResult holding a CrosswordPuzzle, or the failure reason
        """
        try:
            candidates = await self.word_supply.get_words_for_generation(
                config.themes,
                config.difficulty,
                config.word_count * self.generation_config["crossword_candidate_multiplier"],
                config.language,
            )
            puzzle = self.build_puzzle(config, candidates)
            return GenerationResult.ok(puzzle)

        except GenerationError as e:
            logger.warning(f"Crossword generation failed: {e}")
            return GenerationResult.failure(e)
        except Exception as e:
            logger.error(f"Unexpected crossword generation error: {e}", exc_info=True)
            return GenerationResult.failure(GenerationFailedError(f"Generation failed: {e}"))

    def build_puzzle(
        self, config: GenerationConfig, candidates: List[WordEntry]
    ) -> CrosswordPuzzle:
        """
        Lay out a crossword from an already fetched word pool.

        Raises:
            InsufficientWordsError: Fewer usable candidates than the minimum
            PlacementShortfallError: Too few words could be placed
        """
        usable = [
            entry._replace(word=grid_letters(entry.word))
            for entry in candidates
            if is_alphabetic_unicode(entry.word)
        ]
        min_candidates = self.generation_config["min_candidate_words"]
        if len(usable) < min_candidates:
            raise InsufficientWordsError(
                f"Not enough words available. Found {len(usable)}, need at least {min_candidates}"
            )

        size = config.grid_size
        by_length = sorted(usable, key=lambda entry: len(entry.word), reverse=True)
        fitting = [entry for entry in by_length if len(entry.word) <= size]
        selection = self._select_best_words(fitting, config.word_count)

        logger.info(
            f"Building {size}x{size} crossword: {len(selection)} selected of {len(usable)} candidates"
        )

        layout = CrosswordLayout(size)
        if selection:
            self._place_first_word(layout, selection[0])

        max_attempts = min(
            len(selection) * 10, self.generation_config["crossword_max_attempts"]
        )
        word_index = 1
        attempts = 0

        while (
            len(layout.placed_words) < config.word_count
            and word_index < len(selection)
            and attempts < max_attempts
        ):
            entry = selection[word_index]
            word_index += 1

            if layout.is_placed(entry.word):
                continue

            if self._place_word(layout, entry):
                logger.debug(f"Placed {entry.word} ({len(layout.placed_words)} words)")
            else:
                logger.debug(f"No valid intersection for {entry.word}, skipping")
            attempts += 1

        placed_count = len(layout.placed_words)
        minimum = max(2, min(config.word_count * 0.6, 5))
        if placed_count < minimum:
            raise PlacementShortfallError(
                f"Could only place {placed_count} words. Try different settings."
            )

        logger.info(f"Generated crossword with {placed_count} words in {attempts} attempts")
        return layout.to_puzzle()

    def _select_best_words(self, words: List[WordEntry], word_count: int) -> List[WordEntry]:
        """Mix long, medium and short words from a length-sorted pool."""
        max_words = min(len(words), word_count * 2)

        long_words = [w for w in words if len(w.word) >= 6][: math.ceil(max_words * 0.3)]
        medium_words = [w for w in words if 4 <= len(w.word) <= 7][: math.ceil(max_words * 0.5)]
        short_words = [w for w in words if 3 <= len(w.word) <= 5][: math.ceil(max_words * 0.3)]

        seen = set()
        unique = []
        for entry in long_words + medium_words + short_words:
            key = entry.word.casefold()
            if key not in seen:
                seen.add(key)
                unique.append(entry)

        return unique[:max_words]

    def _place_first_word(self, layout: CrosswordLayout, entry: WordEntry):
        """Place first word across the centre of the grid."""
        row = layout.size // 2
        col = (layout.size - len(entry.word)) // 2
        layout.place(entry, row, col, Direction.HORIZONTAL)

    def _place_word(self, layout: CrosswordLayout, entry: WordEntry) -> bool:
        """Try the best-scoring intersections, the top few in random order."""
        word = grid_letters(entry.word)
        candidates = self._find_possible_intersections(layout, word)

        top_count = self.generation_config["crossword_top_candidates"]
        top_candidates = candidates[:top_count]
        self.rng.shuffle(top_candidates)

        for candidate in top_candidates + candidates[top_count:]:
            if self._can_place_word(layout, word, candidate.row, candidate.col, candidate.direction):
                layout.place(entry, candidate.row, candidate.col, candidate.direction)
                return True

        return False

    def _find_possible_intersections(
        self, layout: CrosswordLayout, word: str
    ) -> List[PlacementCandidate]:
        """Every perpendicular position sharing a letter with a placed word, best first."""
        candidates = []

        for placed in layout.placed_words:
            placed_letters = placed.answer
            new_direction = placed.direction.perpendicular

            for i, char in enumerate(word):
                for j, placed_char in enumerate(placed_letters):
                    if char != placed_char:
                        continue

                    if new_direction == Direction.VERTICAL:
                        new_row = placed.start_row - i
                        new_col = placed.start_col + j
                    else:
                        new_row = placed.start_row + j
                        new_col = placed.start_col - i

                    score = self._calculate_placement_score(
                        layout, new_row, new_col, new_direction, len(word)
                    )
                    candidates.append(PlacementCandidate(new_row, new_col, new_direction, score))

        return sorted(candidates, key=lambda candidate: candidate.score, reverse=True)

    def _calculate_placement_score(
        self,
        layout: CrosswordLayout,
        row: int,
        col: int,
        direction: Direction,
        length: int,
    ) -> int:
        """Higher is better: near the centre, away from other words, balancing directions."""
        center = (layout.size // 2, layout.size // 2)
        score = BASE_SCORE - manhattan((row, col), center) * CENTER_DISTANCE_PENALTY

        footprint = crossword_positions(row, col, direction, length)
        nearby_words = 0
        for placed in layout.placed_words:
            min_distance = min(
                manhattan(placed_cell, cell)
                for placed_cell in placed.get_positions()
                for cell in footprint
            )
            if min_distance <= CLUSTER_RADIUS:
                nearby_words += 1

        score -= nearby_words * CLUSTER_PENALTY

        if layout.direction_count(direction.perpendicular) > layout.direction_count(direction):
            score += BALANCE_BONUS

        return score

    def _can_place_word(
        self,
        layout: CrosswordLayout,
        word: str,
        row: int,
        col: int,
        direction: Direction,
    ) -> bool:
        """Check bounds, letter conflicts and spacing for a placement."""
        positions = crossword_positions(row, col, direction, len(word))

        if not all(in_bounds(position, layout.size) for position in positions):
            return False

        for (r, c), letter in zip(positions, word):
            existing = layout.grid[r][c]
            if existing != EMPTY and existing != letter:
                return False

        return self._check_spacing(layout, word, positions, direction)

    def _check_spacing(
        self,
        layout: CrosswordLayout,
        word: str,
        positions: List[Position],
        direction: Direction,
    ) -> bool:
        """No words touching end to end, no crowded parallels, no ungrounded crosses."""
        (first_row, first_col), (last_row, last_col) = positions[0], positions[-1]
        if direction == Direction.HORIZONTAL:
            before, after = (first_row, first_col - 1), (last_row, last_col + 1)
        else:
            before, after = (first_row - 1, first_col), (last_row + 1, last_col)

        for cell in (before, after):
            if in_bounds(cell, layout.size) and layout.grid[cell[0]][cell[1]] != EMPTY:
                return False

        # The new word must not extend an existing word at its head or tail
        if layout.end_caps().intersection(positions):
            return False

        if not self._check_parallel_word_spacing(layout, positions, direction):
            return False

        return self._check_adjacent_cells(layout, word, positions, direction)

    def _check_parallel_word_spacing(
        self, layout: CrosswordLayout, positions: List[Position], direction: Direction
    ) -> bool:
        """Reject same-direction words on an adjacent line when their spans overlap."""
        row, col = positions[0]
        length = len(positions)

        for placed in layout.placed_words:
            if placed.direction != direction:
                continue

            if direction == Direction.HORIZONTAL:
                line_distance = abs(row - placed.start_row)
                start, placed_start = col, placed.start_col
            else:
                line_distance = abs(col - placed.start_col)
                start, placed_start = row, placed.start_row

            if line_distance >= MIN_PARALLEL_DISTANCE:
                continue

            end = start + length - 1
            placed_end = placed_start + placed.length - 1
            if not (end < placed_start or start > placed_end):
                return False

        return True

    def _check_adjacent_cells(
        self,
        layout: CrosswordLayout,
        word: str,
        positions: List[Position],
        direction: Direction,
    ) -> bool:
        """Block a new letter squeezed between two letters of no perpendicular word."""
        grid = layout.grid
        last = layout.size - 1

        for (r, c), letter in zip(positions, word):
            if grid[r][c] == letter:
                continue

            if direction == Direction.HORIZONTAL:
                has_before = r > 0 and grid[r - 1][c] != EMPTY
                has_after = r < last and grid[r + 1][c] != EMPTY
                neighbours = ((r - 1, c), (r + 1, c))
            else:
                has_before = c > 0 and grid[r][c - 1] != EMPTY
                has_after = c < last and grid[r][c + 1] != EMPTY
                neighbours = ((r, c - 1), (r, c + 1))

            if has_before and has_after and grid[r][c] == EMPTY:
                grounded = any(
                    layout.is_part_of_word(nr, nc, direction.perpendicular)
                    for nr, nc in neighbours
                )
                if not grounded:
                    return False

        return True
