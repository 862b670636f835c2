"""
Global constants for the keypad chain puzzle.

Exports:
    PART_1_DEPTH (int): Directional keypads between the human and the numeric keypad in part 1.
    PART_2_DEPTH (int): Same for part 2.
    MAX_WORKERS (int): Worker threads used when summing complexities.
    LOG_LEVEL (str): Level name passed to setup_logging by the day scripts.
"""
import os

PART_1_DEPTH: int = 2
PART_2_DEPTH: int = 25


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return max(1, int(value))


MAX_WORKERS: int = _env_int("KEYPAD_CHAIN_WORKERS", min(4, os.cpu_count() or 1))
LOG_LEVEL: str = os.environ.get("KEYPAD_CHAIN_LOG_LEVEL", "WARNING").upper()
