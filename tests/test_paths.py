import itertools

import numpy as np
import pytest

from keypad_chain.costs import build_ladder, next_table, pair_cost
from keypad_chain.errors import InvalidButtonError
from keypad_chain.keypad import DIRPAD, NUMPAD
from keypad_chain.paths import pair_sequences, sequences, visits_gap, walk


@pytest.mark.parametrize("keypad", [NUMPAD, DIRPAD])
def test_same_button_is_a_single_press(keypad):
    for button in keypad.buttons:
        assert sequences(keypad, button, button) == ["A"]


@pytest.mark.parametrize("keypad", [NUMPAD, DIRPAD])
def test_candidates_are_minimal_and_avoid_the_gap(keypad):
    for (a, b), candidates in pair_sequences(keypad).items():
        start = keypad.location_of(a)
        end = keypad.location_of(b)
        distance = abs(end.x - start.x) + abs(end.y - start.y)

        assert 1 <= len(candidates) <= 2
        assert len(set(candidates)) == len(candidates)
        for candidate in candidates:
            assert candidate.endswith("A")
            assert candidate.count("A") == 1
            assert len(candidate) == distance + 1
            visited = walk(keypad, a, candidate)
            assert keypad.gap() not in visited
            assert visited[-1] == end


def test_known_numpad_paths():
    assert sequences(NUMPAD, "A", "0") == ["<A"]
    assert sequences(NUMPAD, "2", "9") == [">^^A", "^^>A"]
    assert sequences(NUMPAD, "1", "A") == [">>vA"]
    assert sequences(NUMPAD, "0", "1") == ["^<A"]
    assert sequences(NUMPAD, "A", "1") == ["^<<A"]
    assert sequences(NUMPAD, "7", "0") == [">vvvA"]


def test_known_dirpad_paths():
    assert sequences(DIRPAD, "A", "<") == ["v<<A"]
    assert sequences(DIRPAD, "<", "A") == [">>^A"]
    assert sequences(DIRPAD, "<", "^") == [">^A"]
    assert sequences(DIRPAD, "^", "<") == ["v<A"]
    assert sequences(DIRPAD, "A", "v") == ["<vA", "v<A"]
    assert sequences(DIRPAD, "A", ">") == ["vA"]


def test_visits_gap():
    assert visits_gap(NUMPAD, "1", "v>>")
    assert not visits_gap(NUMPAD, "1", ">>v")
    assert visits_gap(DIRPAD, "A", "<<v")


def test_pair_sequences_covers_every_pair_once():
    assert len(pair_sequences(DIRPAD)) == 25
    assert len(pair_sequences(NUMPAD)) == 121
    assert pair_sequences(DIRPAD) is pair_sequences(DIRPAD)


def test_unknown_button():
    with pytest.raises(InvalidButtonError):
        sequences(NUMPAD, "A", "<")


def every_shortest_path(keypad, a, b):
    start = keypad.location_of(a)
    end = keypad.location_of(b)
    dx = end.x - start.x
    dy = end.y - start.y
    moves = (">" if dx > 0 else "<") * abs(dx) + ("v" if dy > 0 else "^") * abs(dy)
    return sorted(
        "".join(order) + "A"
        for order in set(itertools.permutations(moves))
        if not visits_gap(keypad, a, "".join(order))
    )


def test_zig_zag_paths_are_never_cheaper():
    every_path = {
        (a, b): tuple(every_shortest_path(DIRPAD, a, b))
        for a in DIRPAD.buttons
        for b in DIRPAD.buttons
    }
    ladder = build_ladder(10)
    table = ladder[0]
    for level in range(1, 11):
        table = next_table(table, every_path)
        assert np.array_equal(table.values, ladder[level].values)

    numpad_paths = pair_sequences(NUMPAD)
    for level_table in ladder:
        for a in NUMPAD.buttons:
            for b in NUMPAD.buttons:
                assert pair_cost(every_shortest_path(NUMPAD, a, b), level_table) == pair_cost(
                    numpad_paths[(a, b)], level_table
                )
