"""
Keypad layouts.

    789        ^A
    456       <v>
    123
     0A

Rows are read top to bottom, so y grows downwards. A space marks the gap,
the corner of the keypad with no button that a robot arm must never point at.
"""

from typing import Dict, Iterable, NamedTuple, Optional, Tuple

from .errors import InvalidButtonError, LayoutError


class Location(NamedTuple):
    x: int
    y: int


MOVES = {
    "<": (-1, 0),
    ">": (1, 0),
    "^": (0, -1),
    "v": (0, 1),
}


def step(location: Location, move: str) -> Location:
    dx, dy = MOVES[move]
    return Location(location.x + dx, location.y + dy)


class Keypad:
    """A fixed grid of buttons with exactly one gap cell."""

    def __init__(self, name: str, buttons: Dict[str, Location], gap: Location):
        if len(set(buttons.values())) != len(buttons):
            raise LayoutError("Two buttons share a location on %s" % name)
        if gap in buttons.values():
            raise LayoutError("Gap %r holds a button on %s" % (gap, name))
        self.name = name
        self._buttons = dict(buttons)
        self._locations = {location: button for button, location in buttons.items()}
        self._gap = gap

    @classmethod
    def from_rows(cls, name: str, rows: Iterable[str], gap: str = " ") -> "Keypad":
        buttons = {}
        gaps = []
        for y, row in enumerate(rows):
            for x, symbol in enumerate(row):
                location = Location(x, y)
                if symbol == gap:
                    gaps.append(location)
                elif symbol in buttons:
                    raise LayoutError("Button %r appears twice on %s" % (symbol, name))
                else:
                    buttons[symbol] = location
        if len(gaps) != 1:
            raise LayoutError("%s needs exactly one gap, found %d" % (name, len(gaps)))
        return cls(name, buttons, gaps[0])

    @property
    def buttons(self) -> Tuple[str, ...]:
        return tuple(self._buttons)

    def location_of(self, button: str) -> Location:
        try:
            return self._buttons[button]
        except KeyError:
            raise InvalidButtonError(button, self.name) from None

    def gap(self) -> Location:
        return self._gap

    def button_at(self, location: Location) -> Optional[str]:
        return self._locations.get(location)

    def __contains__(self, button) -> bool:
        return button in self._buttons

    def __repr__(self) -> str:
        return "Keypad(%r, buttons=%r)" % (self.name, "".join(self._buttons))


NUMPAD_ROWS = ("789", "456", "123", " 0A")
DIRPAD_ROWS = (" ^A", "<v>")

NUMPAD = Keypad.from_rows("numeric keypad", NUMPAD_ROWS)
DIRPAD = Keypad.from_rows("directional keypad", DIRPAD_ROWS)
