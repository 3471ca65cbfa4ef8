"""Text level parser.

Converts the rows of one puzzle block into a ``Level``. Supported symbols
(first match wins; anything else is dropped from the row):

    #        wall
    p  @     pusher on floor
    P  +     pusher on goal
    b  $     box on floor
    B  *     box on goal
    .        empty goal
    -  _     floor once a wall has been seen on the row, outside before it
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from .grid import InvalidLevelError, Level
from .tiles import Tile, TileKind, TileOccupant

WALL_SYMBOL = "#"
PADDING_SYMBOLS = ("-", "_")

# Symbol -> (kind, occupant) for every symbol whose meaning does not depend on position.
SYMBOLS: Dict[str, Tuple[TileKind, TileOccupant]] = {
    "#": (TileKind.FLOOR, TileOccupant.WALL),
    "p": (TileKind.FLOOR, TileOccupant.PUSHER),
    "@": (TileKind.FLOOR, TileOccupant.PUSHER),
    "P": (TileKind.GOAL, TileOccupant.PUSHER),
    "+": (TileKind.GOAL, TileOccupant.PUSHER),
    "b": (TileKind.FLOOR, TileOccupant.BOX),
    "$": (TileKind.FLOOR, TileOccupant.BOX),
    "B": (TileKind.GOAL, TileOccupant.BOX),
    "*": (TileKind.GOAL, TileOccupant.BOX),
    ".": (TileKind.GOAL, TileOccupant.NONE),
}


def is_puzzle_line(line: str) -> bool:
    """A line belongs to a puzzle block when it holds at least two walls."""
    return line.count(WALL_SYMBOL) >= 2


def parse_row(line: str) -> List[Tile]:
    """Classify each character of ``line`` into a tile."""
    row: List[Tile] = []
    inside = False
    for char in line:
        if char in SYMBOLS:
            kind, occupant = SYMBOLS[char]
            row.append(Tile(kind, occupant))
            if char == WALL_SYMBOL:
                inside = True
        elif char in PADDING_SYMBOLS:
            row.append(Tile(TileKind.FLOOR if inside else TileKind.OUTSIDE))
    return row


def parse_level(lines: Iterable[str], *, validate: bool = True) -> Level:
    """Parse one puzzle block into a Level.

    Args:
        lines: Rows of the puzzle, top to bottom (trailing newlines are fine)
        validate: Check structural invariants (exactly one pusher) and raise
            instead of trusting the input

    Raises:
        InvalidLevelError: If ``validate`` is set and the block is malformed
    """
    rows = [parse_row(line.rstrip("\r\n")) for line in lines]
    width = max((len(row) for row in rows), default=0)
    level = Level(rows, width)
    if validate:
        validate_level(level)
    return level


def validate_level(level: Level) -> None:
    """Raise InvalidLevelError if ``level`` breaks a structural invariant."""
    if not level.rows:
        raise InvalidLevelError("level has no rows")

    pushers = [
        (x, y)
        for y, row in enumerate(level.rows)
        for x, tile in enumerate(row)
        if tile.occupant is TileOccupant.PUSHER
    ]
    if not pushers:
        raise InvalidLevelError("level has no pusher")
    if len(pushers) > 1:
        raise InvalidLevelError(
            f"level has {len(pushers)} pushers at {pushers}, expected exactly one"
        )
