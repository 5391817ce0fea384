"""
Generation Worker Module

Provides a background QThread worker that runs one puzzle generation off
the UI thread. Communicates results via Qt signals for thread-safe updates.
"""

import logging
import random
from typing import Optional

from PyQt5.QtCore import QThread, pyqtSignal

from src.sudoku import Difficulty, PuzzleResult, generate


# Configure module logger
logger = logging.getLogger(__name__)


class GenerationWorker(QThread):
    """
    Background worker thread for puzzle generation.

    Generation and carving are synchronous and may take a noticeable
    time for hard puzzles; the worker keeps that off the UI thread.
    There is no cancellation: a started generation runs to completion.

    Signals:
        status_changed(str): Emitted when worker status changes
        puzzle_ready(object): Emitted with the PuzzleResult
        error_occurred(str): Emitted when generation fails

    Example:
        worker = GenerationWorker("hard")
        worker.puzzle_ready.connect(ui.show_puzzle)
        worker.start()
    """

    status_changed = pyqtSignal(str)
    puzzle_ready = pyqtSignal(object)
    error_occurred = pyqtSignal(str)

    def __init__(self, difficulty: str = "medium", carver_name: Optional[str] = None,
                 seed: Optional[int] = None):
        """
        Initialize the generation worker.

        Args:
            difficulty: Difficulty name ("easy", "medium", "hard")
            carver_name: Carving policy, None for the default
            seed: Optional seed for reproducible puzzles

        Raises:
            ValueError: If difficulty is unknown
        """
        super().__init__()
        self.difficulty = Difficulty.parse(difficulty)
        self.carver_name = carver_name
        self.seed = seed
        self._busy = False
        self.result: Optional[PuzzleResult] = None

    def start(self, *args, **kwargs):
        """
        Start the generation thread.

        Marks the worker busy before the thread is scheduled, so is_busy()
        is True from this call until run() returns. A second start() while
        busy is ignored.
        """
        if self._busy:
            logger.warning("Generation already in progress")
            return

        self._busy = True
        super().start(*args, **kwargs)

    def run(self):
        """
        Generate one puzzle. Called when thread starts.

        Emits puzzle_ready on success or error_occurred on failure.
        """
        self._busy = True
        self.result = None
        logger.info(f"Generation started: {self.difficulty}")
        self.status_changed.emit(f"Generating {self.difficulty} puzzle...")

        try:
            rng = random.Random(self.seed)
            self.result = generate(self.difficulty, carver=self.carver_name, rng=rng)
        except Exception as e:
            logger.exception("Error during puzzle generation")
            self.status_changed.emit("Failed")
            self.error_occurred.emit(str(e))
        else:
            self.status_changed.emit(f"Ready ({self.result.clue_count} clues)")
            self.puzzle_ready.emit(self.result)
        finally:
            self._busy = False

    def is_busy(self) -> bool:
        """
        Check if a generation is in progress.

        Returns:
            True from start() (or a direct run() call) until run() returns
        """
        return self._busy
