#!/usr/bin/env python3
"""
Puzzlecraft Puzzle Generator

Command-line front end for generating crossword, word-search and Sudoku
puzzles from themed word lists.

Features:
- Crossword, word search and Sudoku generation from one configuration
- Word lists from local text files or a HuggingFace dataset
- Configuration-driven defaults with CLI override
- Reproducible batches with --seed
- JSON export and terminal display with optional answer keys

Usage Examples:
  # Use config defaults (minimal command)
  python run_puzzle_generator.py generate

  # Override specific parameters
  python run_puzzle_generator.py generate --game-type wordsearch --grid-size 12 --themes animals
  python run_puzzle_generator.py generate --game-type sudoku --difficulty 5 --count 3 --show --answers
  python run_puzzle_generator.py generate --themes animals science-nature --seed 7 --output-dir puzzles

  # Browse available themes and languages
  python run_puzzle_generator.py list-themes
  python run_puzzle_generator.py list-themes --source hf --hf-repo org/puzzle-words
"""

import argparse
import asyncio
import logging
import random
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

from puzzlecraft.data import HFWordSource, TextFileWordSource, WordSupply
from puzzlecraft.generate import (
    AVAILABLE_LANGUAGES,
    AVAILABLE_THEMES,
    GameType,
    GenerationConfig,
    PuzzleBuilder,
)
from puzzlecraft.generate.puzzle_visualisation import display_puzzle
from puzzlecraft.utils.config_loader import get_config


def get_config_defaults():
    """Get configuration defaults for CLI arguments."""
    config = get_config()
    return config.get_cli_defaults()


def setup_logging(verbose: bool = False, log_file: Optional[str] = None):
    """Setup logging configuration with optional file output."""
    level = logging.DEBUG if verbose else logging.INFO

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(detailed_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Always detailed in file
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

        logging.info("=== PUZZLECRAFT GENERATION TRACE ===")
        logging.info(f"Start time: {datetime.now().isoformat()}")
        logging.info(f"Log file: {log_file}")
        logging.info(f"Verbose mode: {verbose}")
        logging.info("=" * 60)

    return log_file


def build_word_supply(args, seed: Optional[int]) -> WordSupply:
    """Word supply for the selected source."""
    rng = random.Random(seed)

    if args.source == "hf":
        source = HFWordSource(repo_id=args.hf_repo, hf_token=args.hf_token)
    else:
        source = TextFileWordSource(data_dir=args.data_dir)

    return WordSupply(source=source, rng=rng)


async def run_generation(args) -> bool:
    """Generate puzzles for the parsed arguments."""
    print("🧩 PUZZLE GENERATION")
    print("=" * 60)

    try:
        config = GenerationConfig(
            game_type=args.game_type,
            grid_size=args.grid_size,
            word_count=args.word_count,
            themes=args.themes,
            difficulty=args.difficulty,
            language=args.language,
        )
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return False

    print("📋 Configuration:")
    print(f"   Game type: {config.game_type.value}")
    print(f"   Grid size: {config.effective_grid_size}x{config.effective_grid_size}")
    if config.game_type.uses_words:
        print(f"   Word count: {config.word_count}")
        print(f"   Themes: {', '.join(config.themes)}")
        print(f"   Language: {config.language}")
        print(f"   Word source: {args.source}")
    print(f"   Difficulty: {config.difficulty}")
    print(f"   Puzzles: {args.count}")
    if args.seed is not None:
        print(f"   Seed: {args.seed}")
    if args.output_dir:
        print(f"   Output directory: {args.output_dir}")

    # Word supply seed is drawn from the master seed so batches replay exactly
    master = random.Random(args.seed)
    word_supply = None
    if config.game_type.uses_words:
        word_supply = build_word_supply(args, master.getrandbits(64))
    builder = PuzzleBuilder(word_supply=word_supply, seed=master.getrandbits(64))

    print("\n🔄 Generating puzzles...")
    logging.info(f"GENERATION_START: {config.to_dict()}")

    entries = await builder.generate_batch(config, args.count, output_dir=args.output_dir)

    if args.show:
        for entry in entries:
            display_puzzle(
                builder.batch_puzzles[entry.id],
                title=f"PUZZLE: {entry.id}",
                show_answers=args.answers,
            )

    stats = builder.get_generation_statistics()
    print("\n📊 GENERATION STATISTICS")
    print("=" * 60)
    print(f"Total attempts: {stats['total_attempts']}")
    print(f"Successful generations: {stats['successful_generations']}")
    print(f"Failed generations: {stats['failed_generations']}")
    print(f"Success rate: {stats['success_rate']}")
    if config.game_type.uses_words:
        print(f"Average word count: {stats['average_word_count']}")

    if stats["failure_reasons"]:
        print("\nFailure reasons:")
        for reason, count in stats["failure_reasons"].items():
            print(f"  • {reason}: {count}")

    if args.output_dir and entries:
        print("\n📁 LOCAL OUTPUT")
        print("=" * 60)
        print(f"✅ Saved {len(entries)} puzzles to {args.output_dir}")

    builder.clear_caches()

    logging.info(f"GENERATION_COMPLETE: {len(entries)} puzzles generated")
    return len(entries) > 0


def run_list_themes(args) -> bool:
    """Print the theme catalogue and the languages of the selected word source."""
    print("📚 AVAILABLE THEMES")
    print("=" * 60)
    for theme_id, description in AVAILABLE_THEMES.items():
        print(f"  {theme_id:<22} {description}")

    if args.source == "hf":
        source = HFWordSource(repo_id=args.hf_repo, hf_token=args.hf_token)
        languages = source.get_supported_languages()

        print(f"\n🌐 LANGUAGES IN {source.repo_id}")
        print("=" * 60)
        if not languages:
            print("❌ No language configurations found")
            return False
        for language_id in languages:
            print(f"  {language_id:<22} {AVAILABLE_LANGUAGES.get(language_id, '')}".rstrip())
        return True

    print("\n🌐 AVAILABLE LANGUAGES")
    print("=" * 60)
    for language_id, name in AVAILABLE_LANGUAGES.items():
        print(f"  {language_id:<22} {name}")

    return True


def main():
    """Main CLI entry point."""
    config_defaults = get_config_defaults()

    parser = argparse.ArgumentParser(
        description="Puzzlecraft Puzzle Generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Use config defaults (minimal command)
  %(prog)s generate

  # Override specific parameters
  %(prog)s generate --game-type wordsearch --grid-size 12 --themes animals
  %(prog)s generate --game-type sudoku --difficulty 5 --show --answers
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    parser.add_argument("--log-file", help="Write a detailed trace to this file")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate puzzles")
    generate_parser.add_argument(
        "--game-type",
        default=config_defaults["game_type"],
        choices=[game_type.value for game_type in GameType],
        help=f"Puzzle type (default: {config_defaults['game_type']})",
    )
    generate_parser.add_argument(
        "--grid-size",
        type=int,
        default=config_defaults["grid_size"],
        help=f"Grid size, 10-21; ignored for Sudoku (default: {config_defaults['grid_size']})",
    )
    generate_parser.add_argument(
        "--word-count",
        type=int,
        default=config_defaults["word_count"],
        help=f"Target word count, 8-30 (default: {config_defaults['word_count']})",
    )
    generate_parser.add_argument(
        "--themes",
        nargs="+",
        default=config_defaults["themes"],
        help=f"Theme ids to draw words from (default: {' '.join(config_defaults['themes'])})",
    )
    generate_parser.add_argument(
        "--difficulty",
        type=int,
        default=config_defaults["difficulty"],
        help=f"Difficulty, 1-5 (default: {config_defaults['difficulty']})",
    )
    generate_parser.add_argument(
        "--language",
        default=config_defaults["language"],
        help=f"Language id (default: {config_defaults['language']})",
    )
    generate_parser.add_argument(
        "--count",
        type=int,
        default=config_defaults["count"],
        help=f"Number of puzzles to generate (default: {config_defaults['count']})",
    )
    generate_parser.add_argument(
        "--output-dir", help="Directory to save puzzle JSON files (optional)"
    )
    generate_parser.add_argument("--seed", type=int, help="Random seed")
    generate_parser.add_argument(
        "--source",
        choices=["files", "hf"],
        default="files",
        help="Word source: local text files or a HuggingFace dataset (default: files)",
    )
    generate_parser.add_argument(
        "--data-dir", help="Root of the word list tree (default: config or bundled lists)"
    )
    generate_parser.add_argument("--hf-repo", help="HuggingFace word dataset repository")
    generate_parser.add_argument(
        "--hf-token",
        default=config_defaults["hf_token"] or None,
        help="HuggingFace token (default from config)",
    )
    generate_parser.add_argument(
        "--show", action="store_true", help="Print generated puzzles to the terminal"
    )
    generate_parser.add_argument(
        "--answers", action="store_true", help="Show answer keys with --show"
    )

    # List themes command
    list_parser = subparsers.add_parser("list-themes", help="List available themes and languages")
    list_parser.add_argument(
        "--source",
        choices=["files", "hf"],
        default="files",
        help="Also list the languages of a HuggingFace dataset with 'hf' (default: files)",
    )
    list_parser.add_argument("--hf-repo", help="HuggingFace word dataset repository")
    list_parser.add_argument(
        "--hf-token",
        default=config_defaults["hf_token"] or None,
        help="HuggingFace token (default from config)",
    )

    args = parser.parse_args()

    setup_logging(args.verbose, args.log_file)

    logging.info(f"COMMAND: {' '.join(sys.argv)}")
    logging.info(f"ARGUMENTS: {vars(args)}")

    if not args.command:
        parser.print_help()
        return False

    try:
        if args.command == "generate":
            return asyncio.run(run_generation(args))
        elif args.command == "list-themes":
            return run_list_themes(args)
        else:
            print(f"❌ Unknown command: {args.command}")
            return False

    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user")
        return False
    except Exception as e:
        print(f"❌ Unexpected error: {e}")
        logging.error(f"Unexpected error: {e}", exc_info=True)
        return False


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
