"""Tile and direction primitives for Sokoban levels.

A tile has two orthogonal attributes: its terrain ``kind`` (static) and its
``occupant`` (changes as the pusher moves, except for walls which never move).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

Position = Tuple[int, int]


class TileKind(Enum):
    """Static terrain classification."""

    OUTSIDE = "outside"  # padding outside the playable region
    FLOOR = "floor"
    GOAL = "goal"


class TileOccupant(Enum):
    """What currently sits on a tile."""

    NONE = "none"
    BOX = "box"
    PUSHER = "pusher"
    WALL = "wall"


class Direction(Enum):
    """Movement directions with their (dx, dy) offsets. ``y`` grows downward."""

    UP = (0, -1)
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> "Direction":
        """Resolve ``"up"``/``"Left"``/``"w"`` etc. to a Direction.

        Raises:
            ValueError: If the name is not a known direction or key alias
        """
        key = name.strip().lower()
        if key in _KEY_ALIASES:
            return _KEY_ALIASES[key]
        try:
            return cls[key.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}") from None


_KEY_ALIASES = {
    "w": Direction.UP,
    "d": Direction.RIGHT,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
}


@dataclass
class Tile:
    """One grid cell: terrain kind plus current occupant."""

    kind: TileKind
    occupant: TileOccupant = TileOccupant.NONE

    @property
    def is_empty(self) -> bool:
        return self.occupant is TileOccupant.NONE

    @property
    def is_open(self) -> bool:
        """Empty playable terrain a pusher or box may move onto."""
        return self.is_empty and self.kind is not TileKind.OUTSIDE
