"""
Test script for settings persistence and the background generation worker

Usage:
    python tests/test_worker.py
    pytest tests
"""

import json
import sys
import tempfile
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from PyQt5.QtCore import QCoreApplication

from src.generation_worker import GenerationWorker
from src.settings import DEFAULT_SETTINGS, load_settings, save_settings
from src.sudoku import Difficulty, PuzzleResult, is_solved_grid

app = QCoreApplication.instance() or QCoreApplication([])


def _header(title: str) -> None:
    print("\n" + "="*60)
    print(f"TEST: {title}")
    print("="*60)


def test_settings_roundtrip():
    """Test loading defaults, saving and reloading settings."""
    _header("Settings")

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"

        # Missing file gives defaults
        settings = load_settings(path)
        assert settings == DEFAULT_SETTINGS
        assert settings is not DEFAULT_SETTINGS

        settings["difficulty"] = "hard"
        save_settings(settings, path)
        assert json.loads(path.read_text(encoding="utf-8"))["difficulty"] == "hard"
        assert load_settings(path)["difficulty"] == "hard"

        # Partial file is merged over defaults
        path.write_text(json.dumps({"carver": "fixed"}), encoding="utf-8")
        merged = load_settings(path)
        print(f"  Merged: {merged}")
        assert merged["carver"] == "fixed"
        assert merged["difficulty"] == DEFAULT_SETTINGS["difficulty"]

        # Invalid JSON falls back to defaults
        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text("[1, 2]", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

        # Values the engine cannot use fall back to defaults
        path.write_text(json.dumps({"difficulty": "expert", "carver": "dlx", "seed": "abc"}),
                        encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text(json.dumps({"difficulty": "HARD", "carver": "fixed", "seed": 4}),
                        encoding="utf-8")
        usable = load_settings(path)
        assert usable["difficulty"] == "hard"
        assert usable["carver"] == "fixed"
        assert usable["seed"] == 4

    print("  [PASS] Settings tests")


def test_worker_run():
    """Test a synchronous worker run emits the generated puzzle."""
    _header("GenerationWorker (synchronous)")

    worker = GenerationWorker("easy", seed=17)
    statuses = []
    results = []
    errors = []
    busy_during_run = []
    worker.status_changed.connect(statuses.append)
    worker.status_changed.connect(lambda status: busy_during_run.append(worker.is_busy()))
    worker.puzzle_ready.connect(results.append)
    worker.error_occurred.connect(errors.append)

    assert not worker.is_busy()
    worker.run()
    assert not worker.is_busy()
    assert busy_during_run and all(busy_during_run)

    print(f"  Statuses: {statuses}")
    assert errors == []
    assert len(results) == 1
    result = results[0]
    assert isinstance(result, PuzzleResult)
    assert result is worker.result
    assert result.difficulty is Difficulty.EASY
    assert result.clue_count == 41
    assert is_solved_grid(result.solution)
    assert statuses[0].startswith("Generating")
    assert statuses[-1] == "Ready (41 clues)"

    # Same seed, same puzzle
    again = GenerationWorker("easy", seed=17)
    again.run()
    assert again.result.puzzle == result.puzzle

    print("  [PASS] Synchronous worker tests")


def test_worker_error():
    """Test failures are reported through error_occurred."""
    _header("GenerationWorker (error)")

    worker = GenerationWorker("medium", carver_name="nonexistent")
    errors = []
    results = []
    worker.error_occurred.connect(errors.append)
    worker.puzzle_ready.connect(results.append)

    worker.run()

    print(f"  Errors: {errors}")
    assert results == []
    assert len(errors) == 1
    assert "Unknown carver" in errors[0]
    assert worker.result is None
    assert not worker.is_busy()

    try:
        GenerationWorker("expert")
    except ValueError:
        pass
    else:
        raise AssertionError("Unknown difficulty accepted")

    print("  [PASS] Worker error tests")


def test_worker_thread():
    """Test generation on a real background thread."""
    _header("GenerationWorker (threaded)")

    worker = GenerationWorker("easy", carver_name="fixed", seed=3)
    worker.start()
    assert worker.wait(60000)
    assert not worker.is_busy()

    # start() while busy is ignored
    idle = GenerationWorker("easy", carver_name="fixed", seed=3)
    idle._busy = True
    idle.start()
    assert not idle.isRunning()
    assert idle.wait(1000)
    assert idle.result is None

    assert worker.result is not None
    assert worker.result.metrics.strategy_name == "fixed"
    assert worker.result.clue_count == 41

    print("  [PASS] Threaded worker tests")


TESTS = [
    ("Settings", test_settings_roundtrip),
    ("Worker Run", test_worker_run),
    ("Worker Error", test_worker_error),
    ("Worker Thread", test_worker_thread),
]


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# WORKER AND SETTINGS TESTS")
    print("#"*60)

    results = []
    for name, test in TESTS:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
