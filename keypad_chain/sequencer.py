"""
Turn codes into keypad sequences and score them.

    press_sequences("029A", NUMPAD) -> ["<A^A>^^AvvvA", "<A^A^^>AvvvA", ...]

code_cost never builds anything longer than the numeric keypad's own
sequence; the remaining levels are costed with the ladder from costs.
expand does the long-hand version, one directional pad at a time, and is
only practical for a few levels.
"""

import logging
from typing import Iterable, List

from .costs import cost_ladder, sequence_cost
from .errors import InvalidButtonError, MalformedCodeError
from .keypad import DIRPAD, NUMPAD, Keypad
from .paths import pair_sequences

logger = logging.getLogger(__name__)


def validate_code(code: str, keypad: Keypad = NUMPAD) -> str:
    code = code.strip()
    if not code:
        raise MalformedCodeError("Empty code")
    if not code.endswith("A"):
        raise MalformedCodeError("Code %r does not end with A" % code)
    for symbol in code:
        if symbol not in keypad:
            raise InvalidButtonError(symbol, keypad.name)
    return code


def press_sequences(target: str, keypad: Keypad) -> List[str]:
    """
    Every shortest sequence that types target on keypad, starting from A.

    Partial sequences are extended one button at a time and anything longer
    than the shortest partial is dropped straight away, so the full cartesian
    product of per-button candidates is never built.
    """
    paths = pair_sequences(keypad)
    partials = [""]
    current = "A"
    for button in target:
        if button not in keypad:
            raise InvalidButtonError(button, keypad.name)
        candidates = paths[(current, button)]
        current = button

        extended = []
        shortest = None
        for partial in partials:
            for candidate in candidates:
                sequence = partial + candidate
                if shortest is not None and len(sequence) > shortest:
                    continue
                if shortest is None or len(sequence) < shortest:
                    shortest = len(sequence)
                    extended = [s for s in extended if len(s) <= shortest]
                extended.append(sequence)
        partials = extended
    return partials


def code_sequences(code: str) -> List[str]:
    return press_sequences(validate_code(code), NUMPAD)


def expand(targets: Iterable[str], keypad: Keypad = DIRPAD) -> List[str]:
    """Shortest sequences, across all targets, that type one of them on keypad."""
    found = []
    for target in targets:
        found.extend(press_sequences(target, keypad))
    if not found:
        return []
    shortest = min(len(sequence) for sequence in found)
    # Different targets can expand to the same sequence
    return list(dict.fromkeys(sequence for sequence in found if len(sequence) == shortest))


def code_cost(code: str, depth: int) -> int:
    table = cost_ladder(depth)[depth]
    candidates = code_sequences(code)
    best = min(sequence_cost(sequence, table) for sequence in candidates)
    logger.debug("%s costs %d at depth %d (%d candidates)", code, best, depth, len(candidates))
    return best
