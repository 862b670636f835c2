# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "keypad_chain" imports without installing
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def example_codes():
    return (ROOT / "2024" / "day_21_example.txt").read_text().split()
