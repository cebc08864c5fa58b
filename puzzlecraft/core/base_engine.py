"""
Minimal base engine interface for all puzzle types.

This module provides the engine contract and the tagged result every
engine returns instead of raising across the generation boundary.
"""

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .base_puzzle import BasePuzzle
from .exceptions import GenerationError


@dataclass
class GenerationResult:
    """
    Outcome of a single generation request.

    Attributes:
        success: True when a puzzle was produced
        puzzle: The generated puzzle (None on failure)
        error: Human-readable failure reason (None on success)
        error_code: Stable failure code from the GenerationError subclass
    """

    success: bool
    puzzle: Optional[BasePuzzle] = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, puzzle: BasePuzzle) -> "GenerationResult":
        return cls(success=True, puzzle=puzzle)

    @classmethod
    def failure(cls, error: GenerationError) -> "GenerationResult":
        return cls(success=False, error=str(error), error_code=error.code)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "puzzle": self.puzzle.to_dict() if self.puzzle is not None else None,
            "error": self.error,
            "error_code": self.error_code,
        }


class BaseEngine(ABC):
    """
    Base class for all puzzle engines.

    An engine instance serves exactly one generation request; callers
    construct a fresh engine per puzzle.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source; inject a seeded random.Random for reproducible output
        """
        self.rng = rng if rng is not None else random.Random()

    @abstractmethod
    def generate(self, config):
        """
        Generate one puzzle for the given configuration.

        Args:
            config: GenerationConfig describing the request

        Returns:
            GenerationResult (word-game engines return it from a coroutine)
        """
        pass
