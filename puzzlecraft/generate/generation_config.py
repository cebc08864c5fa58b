"""
Generation request configuration and the theme/language catalogues.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

AVAILABLE_LANGUAGES = {
    "en": "English",
    "pt": "Português",
    "es": "Español",
}

AVAILABLE_THEMES = {
    "general-knowledge": "Common knowledge and facts",
    "science-nature": "Scientific concepts and natural world",
    "history-geography": "Historical events and world geography",
    "literature": "Books, authors, and literary terms",
    "mathematics": "Numbers, calculations, and geometric concepts",
    "sports": "Athletic activities and competitions",
    "animals": "Wildlife and domestic animals",
    "technology": "Computers, internet, and modern devices",
    "arts-culture": "Visual arts, music, and cultural topics",
    "health": "Human body, medicine, and wellness",
    "food-cooking": "Culinary terms, ingredients, and cooking methods",
    "entertainment": "Movies, TV shows, music, and celebrities",
    "travel-places": "Countries, cities, landmarks, and travel terms",
    "business-work": "Professional terms, careers, and workplace concepts",
    "family-home": "Household items, family relationships, and daily life",
    "transportation": "Vehicles, travel methods, and transportation systems",
}

MIN_GRID_SIZE, MAX_GRID_SIZE = 10, 21
MIN_WORD_COUNT, MAX_WORD_COUNT = 8, 30
MIN_DIFFICULTY, MAX_DIFFICULTY = 1, 5
SUDOKU_SIZE = 9


class GameType(Enum):
    """Puzzle families the builder can generate."""

    CROSSWORD = "crossword"
    WORDSEARCH = "wordsearch"
    SUDOKU = "sudoku"

    @property
    def uses_words(self) -> bool:
        return self is not GameType.SUDOKU


@dataclass
class GenerationConfig:
    """
    Declarative description of one generation request.

    Attributes:
        game_type: Which engine to run
        grid_size: Side of the square grid, 10-21 (Sudoku is always 9)
        word_count: Target number of words, 8-30 (ignored for Sudoku)
        themes: Theme ids to draw words from (required for word games)
        difficulty: 1-5
        language: Language id such as "en"
    """

    game_type: GameType = GameType.CROSSWORD
    grid_size: int = 15
    word_count: int = 15
    themes: List[str] = field(default_factory=lambda: ["general-knowledge"])
    difficulty: int = 2
    language: str = "en"

    def __post_init__(self):
        """Validate the request after initialization."""
        if not isinstance(self.game_type, GameType):
            try:
                self.game_type = GameType(self.game_type)
            except ValueError:
                raise ValueError(f"Unknown game type: {self.game_type}") from None

        if not (MIN_DIFFICULTY <= self.difficulty <= MAX_DIFFICULTY):
            raise ValueError(
                f"Difficulty must be between {MIN_DIFFICULTY} and {MAX_DIFFICULTY}, got {self.difficulty}"
            )

        self.themes = list(dict.fromkeys(self.themes or []))

        if not self.game_type.uses_words:
            return

        if not (MIN_GRID_SIZE <= self.grid_size <= MAX_GRID_SIZE):
            raise ValueError(
                f"Grid size {self.grid_size} not supported. Must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}."
            )

        if not (MIN_WORD_COUNT <= self.word_count <= MAX_WORD_COUNT):
            raise ValueError(
                f"Word count must be between {MIN_WORD_COUNT} and {MAX_WORD_COUNT}, got {self.word_count}"
            )

        if not self.themes:
            raise ValueError(f"At least one theme is required for {self.game_type.value}")

    @property
    def effective_grid_size(self) -> int:
        """Grid side actually generated."""
        return SUDOKU_SIZE if self.game_type is GameType.SUDOKU else self.grid_size

    def to_dict(self) -> Dict[str, Any]:
        return {
            "game_type": self.game_type.value,
            "grid_size": self.grid_size,
            "word_count": self.word_count,
            "themes": list(self.themes),
            "difficulty": self.difficulty,
            "language": self.language,
        }
