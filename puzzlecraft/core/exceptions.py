"""Exception hierarchy for puzzle generation failures.

Engines raise these internally and convert them into a failed
GenerationResult at the generate() boundary.
"""


class GenerationError(Exception):
    """Base exception for generator failures."""

    code = "generation_error"


class InsufficientWordsError(GenerationError):
    """Raised when the word supply returns too few usable candidates."""

    code = "insufficient_words"


class PlacementShortfallError(GenerationError):
    """Raised when a crossword places fewer words than the viable minimum."""

    code = "placement_shortfall"


class InsufficientPlacementError(GenerationError):
    """Raised when a word search hides fewer words than required."""

    code = "insufficient_placement"


class SolutionGenerationFailedError(GenerationError):
    """Raised when the Sudoku backtracking search cannot complete a grid."""

    code = "solution_generation_failed"


class GenerationFailedError(GenerationError):
    """Wraps any unexpected fault raised while generating."""

    code = "generation_failed"
