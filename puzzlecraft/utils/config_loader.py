"""
Configuration Management System for Puzzlecraft.

This module provides centralized configuration management for the puzzle generation
engines. It loads parameters from puzzle_config.txt with type-safe parsing,
hierarchical fallbacks, and default values for every engine constant.

Key Features:
- Type-safe parameter parsing (string, int, float, bool)
- Hierarchical configuration: CLI args → Config file → Defaults
- Grouped views for the engines, the word supply and the CLI

Architecture:
- ConfigLoader: Main configuration management class
- Process-wide config accessor via get_config()
- Automatic project root detection
"""

import logging
from pathlib import Path
from typing import Dict, Any, Union

logger = logging.getLogger(__name__)

__all__ = ["ConfigLoader", "get_config", "reload_config"]


class ConfigLoader:
    """
    Loads and manages configuration parameters for puzzle generation.

    Provides type-safe access to configuration values with defaults.
    """

    def __init__(self, config_file: str = "puzzle_config.txt"):
        """
        Initialize configuration loader.

        Args:
            config_file: Path to configuration file relative to project root
        """
        self.config_file = config_file
        self.config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self):
        """Load configuration from file."""
        current_path = Path(__file__).parent
        config_path = None

        # Search up the directory tree
        for _ in range(5):
            potential_path = current_path / self.config_file
            if potential_path.exists():
                config_path = potential_path
                break
            current_path = current_path.parent

        if config_path is None:
            logger.warning(f"Config file {self.config_file} not found, using defaults")
            self._load_defaults()
            return

        logger.info(f"Loading configuration from {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                for line_num, line in enumerate(f, 1):
                    line = line.strip()

                    if not line or line.startswith("#"):
                        continue

                    if "=" not in line:
                        logger.warning(f"Invalid config line {line_num}: {line}")
                        continue

                    key, value = line.split("=", 1)
                    self.config[key.strip()] = self._parse_value(value.strip())

            logger.info(f"Loaded {len(self.config)} configuration parameters")

        except OSError as e:
            logger.error(f"Failed to load config: {e}")
            self._load_defaults()

    def _parse_value(self, value: str) -> Union[str, int, float, bool]:
        """Parse string value to appropriate Python type."""
        if value.lower() in ("true", "false"):
            return value.lower() == "true"

        if value and value.replace(".", "").replace("-", "").isdigit():
            if "." in value:
                return float(value)
            else:
                return int(value)

        return value

    def _load_defaults(self):
        """Load default configuration values."""
        self.config = {
            # Word supply
            "WORD_DATA_DIR": "",
            "WORD_DIFFICULTY_MAX": 3,
            "DEFAULT_LANGUAGE": "en",
            "HF_WORDS_REPO": "",
            "DEFAULT_HF_TOKEN": "",
            # Engines
            "MIN_CANDIDATE_WORDS": 5,
            "CROSSWORD_CANDIDATE_MULTIPLIER": 3,
            "CROSSWORD_MAX_ATTEMPTS": 200,
            "CROSSWORD_TOP_CANDIDATES": 5,
            "WORDSEARCH_CANDIDATE_MULTIPLIER": 2,
            "WORDSEARCH_MAX_ATTEMPTS": 100,
            "WORDSEARCH_MIN_PLACED": 5,
        }

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration parameter name
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self.config.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        """Get integer configuration value."""
        value = self.get(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid integer value for {key}: {value}")
            return default

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Get float configuration value."""
        value = self.get(key, default)
        try:
            return float(value)
        except (ValueError, TypeError):
            logger.warning(f"Invalid float value for {key}: {value}")
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """Get boolean configuration value."""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes", "on")
        return default

    def get_string(self, key: str, default: str = "") -> str:
        """Get string configuration value."""
        value = self.get(key, default)
        return str(value) if value is not None else default

    def get_list_of_strings(self, key: str, default: str = "") -> list:
        """Get list of strings from comma-separated string configuration value."""
        value = self.get_string(key, default)
        return [item.strip() for item in value.split(",") if item.strip()]

    def get_generation_config(self) -> Dict[str, Any]:
        """Get puzzle engine configuration parameters."""
        return {
            "min_candidate_words": self.get_int("MIN_CANDIDATE_WORDS", 5),
            "crossword_candidate_multiplier": self.get_int(
                "CROSSWORD_CANDIDATE_MULTIPLIER", 3
            ),
            "crossword_max_attempts": self.get_int("CROSSWORD_MAX_ATTEMPTS", 200),
            "crossword_top_candidates": self.get_int("CROSSWORD_TOP_CANDIDATES", 5),
            "wordsearch_candidate_multiplier": self.get_int(
                "WORDSEARCH_CANDIDATE_MULTIPLIER", 2
            ),
            "wordsearch_max_attempts": self.get_int("WORDSEARCH_MAX_ATTEMPTS", 100),
            "wordsearch_min_placed": self.get_int("WORDSEARCH_MIN_PLACED", 5),
        }

    def get_word_supply_config(self) -> Dict[str, Any]:
        """Get word supply configuration parameters."""
        return {
            "data_dir": self.get_string("WORD_DATA_DIR", ""),
            "difficulty_max": self.get_int("WORD_DIFFICULTY_MAX", 3),
            "hf_repo": self.get_string("HF_WORDS_REPO", ""),
            "hf_token": self.get_string("DEFAULT_HF_TOKEN", ""),
        }

    def get_cli_defaults(self) -> Dict[str, Any]:
        """Get CLI default values."""
        return {
            "game_type": self.get_string("DEFAULT_GAME_TYPE", "crossword"),
            "grid_size": self.get_int("DEFAULT_GRID_SIZE", 15),
            "word_count": self.get_int("DEFAULT_WORD_COUNT", 15),
            "difficulty": self.get_int("DEFAULT_DIFFICULTY", 2),
            "themes": self.get_list_of_strings(
                "DEFAULT_THEMES", "general-knowledge"
            ),
            "language": self.get_string("DEFAULT_LANGUAGE", "en"),
            "count": self.get_int("DEFAULT_PUZZLE_COUNT", 1),
            "hf_token": self.get_string("DEFAULT_HF_TOKEN", ""),
        }


# Process-wide configuration instance
_config = None


def get_config() -> ConfigLoader:
    """Get process-wide configuration instance."""
    global _config
    if _config is None:
        _config = ConfigLoader()
    return _config


def reload_config():
    """Reload configuration from file."""
    global _config
    _config = ConfigLoader()
    return _config
