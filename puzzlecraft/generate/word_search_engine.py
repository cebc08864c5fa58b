"""
Word Search Engine

Hides the longest candidate words in a square grid along six directions
(diagonals drawn twice as often) at random anchors, letting words overlap on
identical letters, then fills every remaining cell with a random letter.
"""

import logging
import random
import string
from typing import List, Optional

from ..core.base_engine import BaseEngine, GenerationResult
from ..core.base_puzzle import WordEntry, WordSearchEntry, WordSearchPuzzle
from ..core.directions import Position, SearchDirection, word_positions
from ..core.exceptions import (
    GenerationError,
    GenerationFailedError,
    InsufficientPlacementError,
    InsufficientWordsError,
)
from ..data.word_supply import WordSupply
from ..utils.config_loader import get_config
from ..utils.grid_utils import EMPTY, empty_grid, in_bounds
from ..utils.unicode_utils import grid_letters, is_alphabetic_unicode
from .generation_config import GenerationConfig

logger = logging.getLogger(__name__)

# Diagonals appear twice for double weight
DIRECTION_POOL = [
    SearchDirection.HORIZONTAL,
    SearchDirection.VERTICAL,
    SearchDirection.DIAGONAL,
    SearchDirection.DIAGONAL,
    SearchDirection.REVERSE_HORIZONTAL,
    SearchDirection.REVERSE_VERTICAL,
    SearchDirection.REVERSE_DIAGONAL,
    SearchDirection.REVERSE_DIAGONAL,
]

FILL_LETTERS = string.ascii_uppercase


class WordSearchEngine(BaseEngine):
    """Random-placement word-search builder."""

    def __init__(self, word_supply: WordSupply, rng: Optional[random.Random] = None):
        super().__init__(rng)
        self.word_supply = word_supply
        self.generation_config = get_config().get_generation_config()

    async def generate(self, config: GenerationConfig) -> GenerationResult:
        """
        Generate a word search.

        Args:
            config: Generation request

        Returns:
            GenerationResult holding a WordSearchPuzzle, or the failure reason
        """
        try:
            candidates = await self.word_supply.get_words_for_generation(
                config.themes,
                config.difficulty,
                config.word_count * self.generation_config["wordsearch_candidate_multiplier"],
                config.language,
            )
            puzzle = self.build_puzzle(config, candidates)
            return GenerationResult.ok(puzzle)

        except GenerationError as e:
            logger.warning(f"Word search generation failed: {e}")
            return GenerationResult.failure(e)
        except Exception as e:
            logger.error(f"Unexpected word search generation error: {e}", exc_info=True)
            return GenerationResult.failure(GenerationFailedError(f"Generation failed: {e}"))

    def build_puzzle(
        self, config: GenerationConfig, candidates: List[WordEntry]
    ) -> WordSearchPuzzle:
        """
        Hide words from an already fetched pool and fill the grid.

        Raises:
            InsufficientWordsError: Fewer usable candidates than the minimum
            InsufficientPlacementError: Too few words could be hidden
        """
        usable = [entry for entry in candidates if is_alphabetic_unicode(entry.word)]
        min_candidates = self.generation_config["min_candidate_words"]
        if len(usable) < min_candidates:
            raise InsufficientWordsError(
                f"Not enough words available. Found {len(usable)}, need at least {min_candidates}"
            )

        size = config.grid_size
        by_length = sorted(usable, key=lambda entry: len(entry.word), reverse=True)
        words_to_use = by_length[: config.word_count]

        grid = empty_grid(size)
        placed_words: List[WordSearchEntry] = []
        max_attempts = self.generation_config["wordsearch_max_attempts"]

        for entry in words_to_use:
            word = grid_letters(entry.word)
            placement = self._find_placement(grid, word, max_attempts)
            if placement is None:
                logger.debug(f"Could not hide {word} after {max_attempts} attempts")
                continue

            row, col, direction = placement
            for (r, c), letter in zip(word_positions(row, col, direction, len(word)), word):
                grid[r][c] = letter
            placed_words.append(WordSearchEntry(word, row, col, direction))

        self._fill_empty_cells(grid)

        min_placed = self.generation_config["wordsearch_min_placed"]
        if len(placed_words) < min_placed:
            raise InsufficientPlacementError(
                f"Could only place {len(placed_words)} words. Minimum required: {min_placed}"
            )

        logger.info(f"Generated {size}x{size} word search with {len(placed_words)} words")
        return WordSearchPuzzle(
            grid=grid,
            placed_words=placed_words,
            word_list=[entry.word for entry in placed_words],
        )

    def _find_placement(self, grid: List[List[str]], word: str, max_attempts: int):
        """Random direction and anchor until the word fits, or None."""
        for _ in range(max_attempts):
            direction = self.rng.choice(DIRECTION_POOL)
            anchor = self._random_anchor(len(grid), len(word), direction)
            if anchor is None:
                continue

            positions = word_positions(anchor[0], anchor[1], direction, len(word))
            if self._can_place_word(grid, word, positions):
                return anchor[0], anchor[1], direction

        return None

    def _random_anchor(
        self, size: int, length: int, direction: SearchDirection
    ) -> Optional[Position]:
        """Anchor such that the whole path stays inside the grid."""
        max_row = size - length + 1 if direction.moves_down else size
        max_col = size - length + 1 if direction.moves_across else size

        if max_row <= 0 or max_col <= 0:
            return None

        return self.rng.randrange(max_row), self.rng.randrange(max_col)

    def _can_place_word(
        self, grid: List[List[str]], word: str, positions: List[Position]
    ) -> bool:
        size = len(grid)
        for (r, c), letter in zip(positions, word):
            if not in_bounds((r, c), size):
                return False
            if grid[r][c] != EMPTY and grid[r][c] != letter:
                return False
        return True

    def _fill_empty_cells(self, grid: List[List[str]]):
        for row in grid:
            for col, cell in enumerate(row):
                if cell == EMPTY:
                    row[col] = self.rng.choice(FILL_LETTERS)
