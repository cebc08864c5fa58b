"""
Puzzlecraft: Printable Puzzle Generation Engine

A modular generator for crossword, word-search and Sudoku puzzles built
from a declarative configuration (grid size, word count, themes,
difficulty, language).

Main Components:
- core: Puzzle data model, engine contract, direction formulas, errors
- data: Word sources (text files, HuggingFace datasets) and the cached WordSupply
- generate: The three engines, the PuzzleBuilder orchestrator and terminal display

Quick Start:
    import asyncio
    from puzzlecraft.generate import GenerationConfig, PuzzleBuilder

    builder = PuzzleBuilder(seed=42)
    config = GenerationConfig(game_type="crossword", themes=["animals"])
    result = asyncio.run(builder.generate(config))
"""
