"""
Test suite for configuration: the puzzle_config.txt loader and GenerationConfig.
"""

import pytest

from puzzlecraft.generate.generation_config import (
    AVAILABLE_LANGUAGES,
    AVAILABLE_THEMES,
    GameType,
    GenerationConfig,
)
from puzzlecraft.utils.config_loader import ConfigLoader, get_config, reload_config


class TestConfigLoader:
    """Test KEY=value parsing and typed getters."""

    @pytest.fixture
    def config_file(self, tmp_path):
        path = tmp_path / "test_config.txt"
        path.write_text(
            "# comment\n"
            "CROSSWORD_MAX_ATTEMPTS=50\n"
            "WORD_DIFFICULTY_MAX=4\n"
            "SCORE_WEIGHT=0.75\n"
            "VERBOSE=true\n"
            "DEFAULT_THEMES=animals, sports\n"
            "DEFAULT_LANGUAGE=pt\n"
            "not a setting\n",
            encoding="utf-8",
        )
        return path

    def test_parses_typed_values(self, config_file):
        config = ConfigLoader(str(config_file))

        assert config.get("CROSSWORD_MAX_ATTEMPTS") == 50
        assert config.get_float("SCORE_WEIGHT") == 0.75
        assert config.get_bool("VERBOSE") is True
        assert config.get_list_of_strings("DEFAULT_THEMES") == ["animals", "sports"]

    def test_grouped_views_use_file_and_defaults(self, config_file):
        config = ConfigLoader(str(config_file))

        generation = config.get_generation_config()
        assert generation["crossword_max_attempts"] == 50
        assert generation["wordsearch_max_attempts"] == 100
        assert config.get_word_supply_config()["difficulty_max"] == 4
        assert config.get_cli_defaults()["themes"] == ["animals", "sports"]
        assert config.get_cli_defaults()["language"] == "pt"
        assert set(config.get_word_supply_config()) == {
            "data_dir", "difficulty_max", "hf_repo", "hf_token",
        }

    def test_missing_file_uses_defaults(self):
        config = ConfigLoader("no_such_config_file.txt")

        assert config.get_int("MIN_CANDIDATE_WORDS") == 5
        assert config.get_generation_config() == {
            "min_candidate_words": 5,
            "crossword_candidate_multiplier": 3,
            "crossword_max_attempts": 200,
            "crossword_top_candidates": 5,
            "wordsearch_candidate_multiplier": 2,
            "wordsearch_max_attempts": 100,
            "wordsearch_min_placed": 5,
        }

    def test_invalid_int_falls_back(self, config_file):
        config = ConfigLoader(str(config_file))
        assert config.get_int("DEFAULT_THEMES", 7) == 7

    def test_process_config_accessor(self):
        first = get_config()
        assert get_config() is first
        assert reload_config() is not first


class TestGenerationConfig:
    """Test request validation."""

    def test_defaults(self):
        config = GenerationConfig()

        assert config.game_type == GameType.CROSSWORD
        assert config.grid_size == 15
        assert config.themes == ["general-knowledge"]
        assert config.effective_grid_size == 15

    def test_string_game_type_coerced(self):
        assert GenerationConfig(game_type="wordsearch").game_type == GameType.WORDSEARCH

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"game_type": "kakuro"},
            {"grid_size": 9},
            {"grid_size": 22},
            {"word_count": 7},
            {"word_count": 31},
            {"difficulty": 0},
            {"difficulty": 6},
            {"themes": []},
        ],
    )
    def test_invalid_values_rejected(self, kwargs):
        with pytest.raises(ValueError):
            GenerationConfig(**kwargs)

    def test_sudoku_ignores_word_settings(self):
        config = GenerationConfig(game_type="sudoku", grid_size=40, word_count=0, themes=[])

        assert config.effective_grid_size == 9
        assert not config.game_type.uses_words

    def test_sudoku_still_checks_difficulty(self):
        with pytest.raises(ValueError):
            GenerationConfig(game_type="sudoku", difficulty=9)

    def test_duplicate_themes_removed(self):
        config = GenerationConfig(themes=["animals", "sports", "animals"])
        assert config.themes == ["animals", "sports"]
        assert config.to_dict()["themes"] == ["animals", "sports"]

    def test_catalogues(self):
        assert set(AVAILABLE_LANGUAGES) == {"en", "pt", "es"}
        assert "general-knowledge" in AVAILABLE_THEMES
        assert len(AVAILABLE_THEMES) == 16
