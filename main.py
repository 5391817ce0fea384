"""
Sudoku Generator - Entry Point

Generates a puzzle, prints it with its solution, and optionally runs the
generation on the background worker thread.

Example:
    python main.py
    python main.py --difficulty hard --seed 42
    python main.py --carver fixed --background
"""

import sys
import random
import logging
import argparse
from typing import Optional

from PyQt5.QtCore import QCoreApplication

from src.generation_worker import GenerationWorker
from src.settings import load_settings, save_settings
from src.sudoku import Difficulty, PuzzleResult, generate, get_carver_names


logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Log to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("sudoku.log", mode='w', encoding='utf-8')  # File output
        ]
    )


def print_result(result: PuzzleResult) -> None:
    """Print puzzle, solution and carving statistics."""
    metrics = result.metrics
    print(f"Difficulty: {result.difficulty}  Carver: {metrics.strategy_name}")
    print(f"Clues: {result.clue_count} (target {metrics.target_clues})  "
          f"Attempts: {metrics.attempts}  Time: {metrics.computation_time_ms:.1f}ms")
    print()
    print(result.puzzle_grid().render())
    print()
    print(result.solution_grid().render())


def run_in_background(difficulty: str, carver: Optional[str], seed: Optional[int]) -> int:
    """
    Generate on a GenerationWorker and wait on the Qt event loop.

    Returns:
        Exit code
    """
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    worker = GenerationWorker(difficulty, carver_name=carver, seed=seed)
    exit_code = {"value": 0}

    def on_ready(result: PuzzleResult):
        print_result(result)

    def on_error(message: str):
        logger.error(f"Worker error: {message}")
        exit_code["value"] = 1

    worker.status_changed.connect(lambda status: logger.info(f"Worker: {status}"))
    worker.puzzle_ready.connect(on_ready)
    worker.error_occurred.connect(on_error)
    worker.finished.connect(app.quit)

    worker.start()
    app.exec_()
    worker.wait()
    return exit_code["value"]


def parse_args(settings: dict):
    """Parse command line arguments, defaulting to saved settings."""
    parser = argparse.ArgumentParser(
        description="Sudoku Generator - Generate and solve 9x9 Sudoku puzzles"
    )
    parser.add_argument(
        "--difficulty", "-D",
        choices=Difficulty.names(),
        default=settings.get("difficulty", "medium"),
        help="Puzzle difficulty (default: from config.json, else medium)"
    )
    parser.add_argument(
        "--carver", "-c",
        choices=get_carver_names(),
        default=settings.get("carver"),
        help="Carving policy (default: unique)"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=settings.get("seed"),
        help="Random seed for reproducible puzzles"
    )
    parser.add_argument(
        "--background", "-b",
        action="store_true",
        help="Generate on the background worker thread"
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Remember difficulty and carver in config.json"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        default=settings.get("debug_enabled", False),
        help="Enable debug logging"
    )
    return parser.parse_args()


def main():
    """Generate a puzzle and print it."""
    settings = load_settings()
    args = parse_args(settings)
    configure_logging(args.debug)

    if args.save:
        settings["difficulty"] = args.difficulty
        if args.carver:
            settings["carver"] = args.carver
        save_settings(settings)

    if args.background:
        sys.exit(run_in_background(args.difficulty, args.carver, args.seed))

    result = generate(args.difficulty, carver=args.carver, rng=random.Random(args.seed))
    print_result(result)
    sys.exit(0)


if __name__ == "__main__":
    main()
