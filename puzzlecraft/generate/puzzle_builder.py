"""
Puzzle Builder - Main Orchestrator for Puzzle Generation

This module coordinates generation requests: it validates the configuration,
constructs a fresh engine per request, dispatches on the game type, keeps
batch statistics and optionally saves puzzles as JSON files.
"""

import logging
import random
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.base_engine import BaseEngine, GenerationResult
from ..core.base_puzzle import BasePuzzle
from ..core.exceptions import GenerationFailedError
from ..data.word_supply import WordSupply
from .crossword_engine import CrosswordEngine
from .generation_config import GameType, GenerationConfig
from .puzzle_entry import PuzzleEntry
from .sudoku_engine import SudokuEngine
from .word_search_engine import WordSearchEngine

logger = logging.getLogger(__name__)


class PuzzleBuilder:
    """
    Main orchestrator for the puzzle generation pipeline.

    Handles the complete workflow:
    1. Validate the generation request
    2. Build a fresh engine for the game type with its own random source
    3. Run the engine and record statistics
    4. Save the result as JSON (optional)
    """

    def __init__(self, word_supply: Optional[WordSupply] = None, seed: Optional[int] = None):
        """
        Initialize puzzle builder.

        Args:
            word_supply: Shared word supply for the word games (default: bundled text files)
            seed: Seed for reproducible output; each engine gets a seed drawn from it
        """
        self._rng = random.Random(seed)
        self.word_supply = (
            word_supply
            if word_supply is not None
            else WordSupply(rng=random.Random(self._rng.getrandbits(64)))
        )

        self.generation_stats = {
            "total_attempts": 0,
            "successful_generations": 0,
            "failed_generations": 0,
            "avg_word_count": 0.0,
            "game_type_distribution": defaultdict(int),
            "failure_reasons": defaultdict(int),
        }
        self._word_game_successes = 0
        self._sequence = defaultdict(int)

        # Puzzle objects of the most recent batch, keyed by puzzle id
        self.batch_puzzles: Dict[str, BasePuzzle] = {}

        logger.info(f"Initialized PuzzleBuilder (seed={seed})")

    def _create_engine(self, game_type: GameType) -> BaseEngine:
        """Fresh engine with a random source derived from the builder's."""
        rng = random.Random(self._rng.getrandbits(64))

        if game_type is GameType.CROSSWORD:
            return CrosswordEngine(self.word_supply, rng=rng)
        if game_type is GameType.WORDSEARCH:
            return WordSearchEngine(self.word_supply, rng=rng)
        if game_type is GameType.SUDOKU:
            return SudokuEngine(rng=rng)

        raise ValueError(f"Unsupported game type: {game_type}")

    async def generate(
        self, config: Union[GenerationConfig, Dict[str, Any]]
    ) -> GenerationResult:
        """
        Generate one puzzle.

        Args:
            config: GenerationConfig, or a dict of its fields

        Returns:
            GenerationResult from the engine

        Raises:
            ValueError: If the configuration is invalid
        """
        if isinstance(config, dict):
            config = GenerationConfig(**config)

        engine = self._create_engine(config.game_type)
        self.generation_stats["total_attempts"] += 1

        try:
            if config.game_type.uses_words:
                result = await engine.generate(config)
            else:
                result = engine.generate(config)
        except Exception as e:
            logger.error(f"Engine raised unexpectedly: {e}")
            result = GenerationResult.failure(GenerationFailedError(str(e)))

        self._update_generation_stats(config, result)
        return result

    async def generate_batch(
        self,
        config: Union[GenerationConfig, Dict[str, Any]],
        count: int,
        output_dir: Optional[str] = None,
    ) -> List[PuzzleEntry]:
        """
        Generate a batch of puzzles for the same request.

        Args:
            config: Generation request shared by the batch
            count: Number of puzzles to generate
            output_dir: Directory to save puzzle JSON files (None to skip)

        Returns:
            List of PuzzleEntry instances for the successful generations
        """
        if isinstance(config, dict):
            config = GenerationConfig(**config)

        size = config.effective_grid_size
        logger.info(f"Generating {count} {config.game_type.value} puzzles ({size}x{size})")

        generated_puzzles = []
        self.batch_puzzles = {}

        for i in range(count):
            puzzle_id = self._generate_puzzle_id(config)
            logger.info(f"Generating puzzle {i + 1}/{count}: {puzzle_id}")

            result = await self.generate(config)

            if not result.success:
                logger.warning(f"Failed to generate puzzle {i + 1}: {result.error}")
                continue

            entry = PuzzleEntry.from_puzzle(
                puzzle_id=puzzle_id,
                puzzle=result.puzzle,
                config=config,
                generation_info={"sequence": i + 1},
            )
            generated_puzzles.append(entry)
            self.batch_puzzles[entry.id] = result.puzzle

            if output_dir:
                self._save_puzzle_to_file(entry, output_dir)

        logger.info(
            f"Batch generation complete: {len(generated_puzzles)}/{count} puzzles generated"
        )
        return generated_puzzles

    def _generate_puzzle_id(self, config: GenerationConfig) -> str:
        """Generate unique puzzle identifier."""
        size = config.effective_grid_size
        key = (config.game_type.value, size)
        self._sequence[key] += 1
        return f"{config.game_type.value}_{size}x{size}_{self._sequence[key]:03d}"

    def _update_generation_stats(self, config: GenerationConfig, result: GenerationResult):
        """Update running generation statistics."""
        if not result.success:
            self.generation_stats["failed_generations"] += 1
            self.generation_stats["failure_reasons"][result.error_code] += 1
            return

        self.generation_stats["successful_generations"] += 1
        self.generation_stats["game_type_distribution"][config.game_type.value] += 1

        if not config.game_type.uses_words:
            return

        # Running average over word games only
        self._word_game_successes += 1
        word_count = len(result.puzzle.placed_words)
        total = self._word_game_successes
        self.generation_stats["avg_word_count"] = (
            self.generation_stats["avg_word_count"] * (total - 1) + word_count
        ) / total

    def _save_puzzle_to_file(self, entry: PuzzleEntry, output_dir: str):
        """Save puzzle entry to JSON file."""
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        filepath = output_path / f"{entry.id}.json"

        try:
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(entry.to_json())

            logger.debug(f"Saved puzzle to {filepath}")
        except OSError as e:
            logger.error(f"Failed to save puzzle to {filepath}: {e}")

    def get_generation_statistics(self) -> Dict[str, Any]:
        """Get comprehensive generation statistics."""
        total_attempts = self.generation_stats["total_attempts"]
        success_rate = (
            self.generation_stats["successful_generations"] / total_attempts
            if total_attempts > 0
            else 0.0
        )

        return {
            "total_attempts": total_attempts,
            "successful_generations": self.generation_stats["successful_generations"],
            "failed_generations": self.generation_stats["failed_generations"],
            "success_rate": f"{success_rate:.1%}",
            "average_word_count": f"{self.generation_stats['avg_word_count']:.1f}",
            "game_type_distribution": dict(self.generation_stats["game_type_distribution"]),
            "failure_reasons": dict(self.generation_stats["failure_reasons"]),
        }

    def clear_caches(self):
        """Clear all caches to free memory."""
        self.word_supply.clear_cache()
        logger.info("Cleared PuzzleBuilder caches")
