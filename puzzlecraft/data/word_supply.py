"""
Word Supply for the Word-Game Engines

This module loads themed word lists, caches them per (language, theme) and
hands the crossword and word-search engines a de-duplicated, shuffled pool
of candidate words.

Word list files use one entry per line:

    WORD|clue text|difficulty

Blank lines and lines starting with '#' are ignored.
"""

import asyncio
import logging
import random
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from ..core.base_puzzle import WordEntry
from ..utils.config_loader import get_config
from ..utils.unicode_utils import clean_unicode_text, normalize_word

logger = logging.getLogger(__name__)

BUNDLED_WORDS_DIR = Path(__file__).parent / "words"


def parse_word_file(content: str) -> List[WordEntry]:
    """
    Parse the text of a word list file.

    Args:
        content: File content

    Returns:
        Entries in file order; malformed lines are skipped
    """
    words = []
    for line in content.splitlines():
        trimmed = line.strip()
        if not trimmed or trimmed.startswith("#"):
            continue

        parts = trimmed.split("|")
        if len(parts) < 3:
            continue

        try:
            difficulty = int(parts[2].strip()) or 1
        except ValueError:
            difficulty = 1

        words.append(
            WordEntry(word=parts[0].strip(), clue=parts[1].strip(), difficulty=difficulty)
        )

    return words


class WordSource(ABC):
    """Where theme word lists come from."""

    @abstractmethod
    def load_theme(self, theme: str, language: str) -> List[WordEntry]:
        """
        Load every entry of one theme in one language.

        Raises:
            Any exception when the theme cannot be loaded; WordSupply logs it
        """
        pass


class TextFileWordSource(WordSource):
    """
    Loads '<data_dir>/<language>/<theme>.txt' files.

    Missing language-specific files fall back to the fallback language.
    """

    def __init__(self, data_dir: Optional[str] = None, fallback_language: str = "en"):
        """
        Args:
            data_dir: Root of the word list tree (default from config, else bundled lists)
            fallback_language: Language used when a language-specific file is missing
        """
        configured_dir = get_config().get_word_supply_config()["data_dir"]
        self.data_dir = Path(data_dir or configured_dir or BUNDLED_WORDS_DIR)
        self.fallback_language = fallback_language

    def load_theme(self, theme: str, language: str) -> List[WordEntry]:
        path = self.data_dir / language / f"{theme}.txt"

        if not path.exists() and language != self.fallback_language:
            logger.warning(
                f"Language-specific file not found for {language}-{theme}, "
                f"falling back to {self.fallback_language}"
            )
            path = self.data_dir / self.fallback_language / f"{theme}.txt"

        if not path.exists():
            raise FileNotFoundError(
                f"Failed to load theme: {theme} for language: {language}"
            )

        return parse_word_file(path.read_text(encoding="utf-8"))


class WordSupply:
    """
    Cached, shuffling front end over a WordSource.

    One instance is meant to live for the whole process and be passed to
    every engine that needs words; clear_cache() invalidates it.
    """

    def __init__(
        self,
        source: Optional[WordSource] = None,
        rng: Optional[random.Random] = None,
        difficulty_max: Optional[int] = None,
    ):
        """
        Args:
            source: Word source (default: text files)
            rng: Random source used for shuffling
            difficulty_max: Highest entry difficulty kept (default from config)
        """
        supply_config = get_config().get_word_supply_config()
        self.source = source if source is not None else TextFileWordSource()
        self.rng = rng if rng is not None else random.Random()
        self.difficulty_max = (
            difficulty_max
            if difficulty_max is not None
            else supply_config["difficulty_max"]
        )
        self.word_cache: Dict[Tuple[str, str], List[WordEntry]] = {}

        logger.info(
            f"Initialized WordSupply with {type(self.source).__name__} "
            f"(difficulty 1-{self.difficulty_max})"
        )

    async def load_theme_words(self, theme: str, language: str = "en") -> List[WordEntry]:
        """
        Load one theme, using the cache when possible.

        Returns:
            Normalized entries, or an empty list when the theme cannot be loaded
        """
        cache_key = (language, theme)
        if cache_key in self.word_cache:
            return self.word_cache[cache_key]

        try:
            raw_entries = await asyncio.to_thread(self.source.load_theme, theme, language)
        except Exception as e:
            logger.error(f"Error loading theme {theme} for language {language}: {e}")
            return []

        entries = self._prepare_entries(raw_entries)
        self.word_cache[cache_key] = entries
        logger.debug(f"Cached {len(entries)} words for {language}-{theme}")
        return entries

    def _prepare_entries(self, raw_entries: Iterable[WordEntry]) -> List[WordEntry]:
        """Normalize words and drop entries that cannot go in a grid."""
        entries = []
        for entry in raw_entries:
            word = normalize_word(entry.word)
            clue = clean_unicode_text(entry.clue)
            if word is None or clue is None:
                logger.debug(f"Skipped unusable word entry: {entry.word!r}")
                continue
            entries.append(WordEntry(word=word, clue=clue, difficulty=entry.difficulty))
        return entries

    async def get_words_for_generation(
        self,
        themes: Iterable[str],
        difficulty: int,
        min_words: int,
        language: str = "en",
    ) -> List[WordEntry]:
        """
        Collect candidate words for one generation request.

        Entries outside the difficulty band 1..difficulty_max are dropped
        whatever the requested difficulty, to keep the pool large.

        Args:
            themes: Theme ids to merge
            difficulty: Requested puzzle difficulty (1-5)
            min_words: Number of words the caller would like at least
            language: Language id

        Returns:
            De-duplicated, shuffled entries (all of them, never fewer than
            available); an empty list on internal failure
        """
        themes = list(themes)
        try:
            all_words: List[WordEntry] = []
            for theme in themes:
                theme_words = await self.load_theme_words(theme, language)
                all_words.extend(
                    word for word in theme_words if 1 <= word.difficulty <= self.difficulty_max
                )

            seen = set()
            unique_words = []
            for word in all_words:
                key = word.word.casefold()
                if key not in seen:
                    seen.add(key)
                    unique_words.append(word)

            self.rng.shuffle(unique_words)

            if len(unique_words) < min_words:
                logger.warning(
                    f"Only {len(unique_words)} words available for {language} "
                    f"{themes} (wanted {min_words}, difficulty {difficulty})"
                )
            else:
                logger.info(f"Supplying {len(unique_words)} words for {language}")

            return unique_words

        except Exception as e:
            logger.error(f"Failed to collect words for generation: {e}")
            return []

    def clear_cache(self):
        """Drop every cached theme list."""
        self.word_cache.clear()
        logger.info("Cleared word supply cache")
