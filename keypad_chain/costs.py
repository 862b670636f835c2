"""
Per-level cost tables for a chain of directional keypads.

Level 0 is the human: every button pair costs one press. The table at level k
gives, for every pair (a, b), the fewest physical presses needed to make the
robot k pads away move its arm from a to b and press b. Every press at level
k leaves the arm of level k - 1 resting on A, so level k only needs the table
for level k - 1 and never the full command string.
"""

import logging
from functools import lru_cache
from typing import Dict, Iterable, Iterator, Sequence, Tuple

import numpy as np

from .errors import InvalidButtonError
from .keypad import DIRPAD, Keypad
from .paths import ButtonPair, pair_sequences

logger = logging.getLogger(__name__)


class CostTable:
    """Read-only button pair -> press count table for one level."""

    def __init__(self, level: int, buttons: Sequence[str], values: np.ndarray):
        self.level = level
        self.buttons = tuple(buttons)
        self.index = {button: i for i, button in enumerate(self.buttons)}
        self.values = np.array(values, dtype=np.int64)
        self.values.setflags(write=False)

    def __getitem__(self, pair: ButtonPair) -> int:
        a, b = pair
        try:
            return int(self.values[self.index[a], self.index[b]])
        except KeyError as e:
            raise InvalidButtonError(e.args[0], "cost table") from None

    def pairs(self) -> Iterator[ButtonPair]:
        for a in self.buttons:
            for b in self.buttons:
                yield a, b

    def __repr__(self) -> str:
        return "CostTable(level=%d, max=%d)" % (self.level, int(self.values.max()))


def base_table(buttons: Sequence[str]) -> CostTable:
    return CostTable(0, buttons, np.ones(shape=(len(buttons), len(buttons)), dtype=np.int64))


def sequence_cost(sequence: str, table: CostTable) -> int:
    # The arm starts resting on A
    symbols = "A" + sequence
    try:
        indices = np.array([table.index[symbol] for symbol in symbols], dtype=np.intp)
    except KeyError as e:
        raise InvalidButtonError(e.args[0], "cost table") from None
    return int(table.values[indices[:-1], indices[1:]].sum(dtype=np.int64))


def pair_cost(candidates: Iterable[str], table: CostTable) -> int:
    return min(sequence_cost(candidate, table) for candidate in candidates)


def next_table(previous: CostTable, paths: Dict[ButtonPair, Tuple[str, ...]]) -> CostTable:
    size = len(previous.buttons)
    values = np.zeros(shape=(size, size), dtype=np.int64)
    for a, b in previous.pairs():
        values[previous.index[a], previous.index[b]] = pair_cost(paths[(a, b)], previous)
    return CostTable(previous.level + 1, previous.buttons, values)


def build_ladder(depth: int, keypad: Keypad = DIRPAD) -> Tuple[CostTable, ...]:
    """
    Build the cost tables for levels 0..depth.

    Args:
        depth: Number of directional keypads between the human and the
            keypad whose presses are being costed.
        keypad: Layout of every pad in the chain.

    Returns:
        A tuple whose item k is the table for level k.
    """
    if depth < 0:
        raise ValueError("depth must be non-negative, got %d" % depth)
    paths = pair_sequences(keypad)
    ladder = [base_table(keypad.buttons)]
    for _ in range(depth):
        ladder.append(next_table(ladder[-1], paths))
        logger.debug("Built %r", ladder[-1])
    logger.info("Cost ladder for %s ready up to level %d", keypad.name, depth)
    return tuple(ladder)


@lru_cache(maxsize=None)
def cost_ladder(depth: int) -> Tuple[CostTable, ...]:
    return build_ladder(depth, DIRPAD)


def cost(pair: ButtonPair, level: int) -> int:
    return cost_ladder(level)[level][pair]
