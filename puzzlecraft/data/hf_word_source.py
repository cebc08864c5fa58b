"""
HuggingFace Dataset Word Source

Loads themed word lists from a HuggingFace dataset repository instead of
local text files. Each language is a dataset configuration whose train
split carries the columns: word, clue, difficulty, theme.
"""

import logging
from typing import Dict, List, Any

from datasets import get_dataset_config_names, load_dataset

from ..core.base_puzzle import WordEntry
from ..utils.config_loader import get_config
from .word_supply import WordSource

logger = logging.getLogger(__name__)


class HFWordSource(WordSource):
    """
    Word source backed by a HuggingFace dataset.

    Whole language configurations are downloaded once and then filtered
    per theme; WordSupply adds its own per-theme cache on top.
    """

    def __init__(self, repo_id: str = None, hf_token: str = None):
        """
        Initialize the dataset word source.

        Args:
            repo_id: HuggingFace repository ID (default from config)
            hf_token: HuggingFace token for dataset access (default from config)

        Raises:
            ValueError: If no repository is given or configured
        """
        supply_config = get_config().get_word_supply_config()
        self.repo_id = repo_id or supply_config["hf_repo"]
        self.hf_token = hf_token or supply_config["hf_token"]

        if not self.repo_id:
            raise ValueError("HFWordSource requires a repo_id (or HF_WORDS_REPO in config)")

        self.loaded_datasets: Dict[str, List[Dict[str, Any]]] = {}

        logger.info(f"Initialized HFWordSource for repository: {self.repo_id}")

    def _load_language(self, language: str) -> List[Dict[str, Any]]:
        """Download (once) every row of one language configuration."""
        if language in self.loaded_datasets:
            return self.loaded_datasets[language]

        logger.info(f"Loading word dataset for {language} from {self.repo_id}")

        dataset_kwargs = {"split": "train"}
        if self.hf_token:
            dataset_kwargs["token"] = self.hf_token

        dataset = load_dataset(self.repo_id, language, **dataset_kwargs)
        rows = [dict(row) for row in dataset]

        self.loaded_datasets[language] = rows
        logger.info(f"Loaded {len(rows)} rows for {language}")
        return rows

    def load_theme(self, theme: str, language: str) -> List[WordEntry]:
        entries = []
        for row in self._load_language(language):
            if row.get("theme") != theme:
                continue

            word = str(row.get("word") or "").strip()
            clue = str(row.get("clue") or "").strip()
            if not (word and clue):
                continue

            try:
                difficulty = int(row.get("difficulty") or 1)
            except (ValueError, TypeError):
                difficulty = 1

            entries.append(WordEntry(word=word, clue=clue, difficulty=difficulty))

        if not entries:
            logger.warning(f"No entries for theme {theme} in {self.repo_id}/{language}")

        return entries

    def get_supported_languages(self) -> List[str]:
        """
        Get list of language configurations available in the repository.

        Returns:
            Sorted configuration names, or an empty list on failure
        """
        try:
            configs = get_dataset_config_names(
                self.repo_id, token=self.hf_token if self.hf_token else None
            )
            return sorted(
                config
                for config in configs
                if config not in ["data", "default", "train", "test", "validation"]
            )

        except Exception as e:
            logger.error(f"Failed to get supported languages: {e}")
            return []

    def clear_cache(self):
        """Clear downloaded datasets to free memory."""
        self.loaded_datasets.clear()
        logger.info("Cleared HFWordSource cache")
