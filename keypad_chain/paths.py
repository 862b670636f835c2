"""
Shortest button-to-button moves on a keypad.

Only the two single-turn orderings are generated: every horizontal move then
every vertical move, and the reverse. Zig-zag paths are assumed never to be
cheaper; the tests compare against every shortest path on both layouts.
"""

from functools import lru_cache
from typing import Dict, List, Tuple

from .keypad import Keypad, Location, step

ButtonPair = Tuple[str, str]


def walk(keypad: Keypad, from_button: str, moves: str) -> List[Location]:
    position = keypad.location_of(from_button)
    visited = [position]
    for move in moves:
        if move == "A":
            continue
        position = step(position, move)
        visited.append(position)
    return visited


def visits_gap(keypad: Keypad, from_button: str, moves: str) -> bool:
    return keypad.gap() in walk(keypad, from_button, moves)


def sequences(keypad: Keypad, from_button: str, to_button: str) -> List[str]:
    """
    Minimal sequences that move from one button to another and press it.

    Returns one or two sequences, horizontal-first before vertical-first.
    """
    start = keypad.location_of(from_button)
    end = keypad.location_of(to_button)

    dx = end.x - start.x
    dy = end.y - start.y
    horizontal = (">" if dx > 0 else "<") * abs(dx)
    vertical = ("v" if dy > 0 else "^") * abs(dy)

    candidates = []
    for moves in (horizontal + vertical, vertical + horizontal):
        if moves in candidates or visits_gap(keypad, from_button, moves):
            continue
        candidates.append(moves)
    return [moves + "A" for moves in candidates]


@lru_cache(maxsize=None)
def pair_sequences(keypad: Keypad) -> Dict[ButtonPair, Tuple[str, ...]]:
    return {
        (a, b): tuple(sequences(keypad, a, b))
        for a in keypad.buttons
        for b in keypad.buttons
    }
