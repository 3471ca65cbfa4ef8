"""Level grid and the push-simulation state machine.

``Level`` owns a ragged 2D grid of tiles (rows may differ in length) and
exposes read-only coordinate queries plus the single mutating operation,
``move_pusher``. Query methods re-scan the grid on every call; nothing is
cached, so the views can never drift from the tiles themselves.

Coordinates are ``(x, y)``: ``y`` is the row index counted from the top,
``x`` the column within that row.
"""

from __future__ import annotations

import copy
from typing import Callable, List, Optional

from .tiles import Direction, Position, Tile, TileKind, TileOccupant


class InvalidLevelError(ValueError):
    """Raised when a level block violates a structural invariant (e.g. no pusher)."""

    def __init__(self, message: str, *, level_index: Optional[int] = None):
        if level_index is not None:
            message = f"Level {level_index}: {message}"
        super().__init__(message)
        self.level_index = level_index


class Level:
    """A single Sokoban puzzle and its current state."""

    def __init__(self, rows: Optional[List[List[Tile]]] = None, width: Optional[int] = None):
        self.rows: List[List[Tile]] = rows if rows is not None else []
        # Width is the longest row seen, used for layout only (never for bounds).
        self.width = width if width is not None else max((len(row) for row in self.rows), default=0)

    @property
    def height(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"Level(width={self.width}, height={self.height}, boxes={self.box_count()})"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def walls(self) -> List[Position]:
        return self._filter(lambda tile: tile.occupant is TileOccupant.WALL)

    def floors(self) -> List[Position]:
        """All playable tiles: kind Floor or Goal (walls included, since they sit on Floor)."""
        return self._filter(lambda tile: tile.kind is not TileKind.OUTSIDE)

    def goals(self) -> List[Position]:
        return self._filter(lambda tile: tile.kind is TileKind.GOAL)

    def boxes(self) -> List[Position]:
        return self._filter(lambda tile: tile.occupant is TileOccupant.BOX)

    def pusher(self) -> Position:
        """Return the pusher position.

        Raises:
            InvalidLevelError: If the grid holds no pusher
        """
        for position in self._iter_matching(lambda tile: tile.occupant is TileOccupant.PUSHER):
            return position
        raise InvalidLevelError("level has no pusher")

    def box_count(self) -> int:
        return len(self.boxes())

    def tile(self, x: int, y: int) -> Optional[Tile]:
        """Return the tile at (x, y), or None when the coordinate is off-grid."""
        # Explicit bounds check: negative indices would otherwise wrap around.
        if y < 0 or y >= len(self.rows):
            return None
        row = self.rows[y]
        if x < 0 or x >= len(row):
            return None
        return row[x]

    def is_solved(self) -> bool:
        """True when the level has goals and every goal holds a box."""
        goals = set(self.goals())
        if not goals:
            return False
        return goals <= set(self.boxes())

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def move_pusher(self, direction: Direction) -> Optional[Position]:
        """Attempt to move the pusher one step in ``direction``.

        Moving onto an empty floor or goal succeeds. Moving into a box pushes
        it one further tile when that tile is an empty floor or goal. Walls,
        box-behind-box, outside padding and off-grid targets block the move.
        A blocked move leaves the grid untouched.

        Returns:
            The pusher's new position, or None if the move was blocked
        """
        pusher = self.pusher()
        pusher_destination = self.target(pusher, direction)
        destination_tile = self.tile(*pusher_destination)
        if destination_tile is None or destination_tile.kind is TileKind.OUTSIDE:
            return None

        if destination_tile.is_open:
            destination_tile.occupant = TileOccupant.PUSHER
            self._tile_at(pusher).occupant = TileOccupant.NONE
            return pusher_destination

        if destination_tile.occupant is TileOccupant.BOX:
            box_destination = self.target(pusher_destination, direction)
            box_tile = self.tile(*box_destination)
            if box_tile is None or not box_tile.is_open:
                return None
            box_tile.occupant = TileOccupant.BOX
            destination_tile.occupant = TileOccupant.PUSHER
            self._tile_at(pusher).occupant = TileOccupant.NONE
            return pusher_destination

        return None

    @staticmethod
    def target(position: Position, direction: Direction) -> Position:
        """Coordinate one step from ``position``; no bounds check."""
        x, y = position
        return x + direction.dx, y + direction.dy

    def copy(self) -> "Level":
        return Level(copy.deepcopy(self.rows), self.width)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _tile_at(self, position: Position) -> Tile:
        x, y = position
        return self.rows[y][x]

    def _iter_matching(self, predicate: Callable[[Tile], bool]):
        for y, row in enumerate(self.rows):
            for x, tile in enumerate(row):
                if predicate(tile):
                    yield x, y

    def _filter(self, predicate: Callable[[Tile], bool]) -> List[Position]:
        return list(self._iter_matching(predicate))
