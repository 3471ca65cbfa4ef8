"""Utilities for levels that sit outside the move rule itself."""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .grid import Level
from .tiles import Direction, Position, Tile, TileKind, TileOccupant

# (kind, occupant) -> symbol, using the canonical Sokoban character set.
_RENDER_SYMBOLS: Dict[Tuple[TileKind, TileOccupant], str] = {
    (TileKind.FLOOR, TileOccupant.WALL): "#",
    (TileKind.FLOOR, TileOccupant.PUSHER): "@",
    (TileKind.GOAL, TileOccupant.PUSHER): "+",
    (TileKind.FLOOR, TileOccupant.BOX): "$",
    (TileKind.GOAL, TileOccupant.BOX): "*",
    (TileKind.GOAL, TileOccupant.NONE): ".",
    (TileKind.FLOOR, TileOccupant.NONE): "-",
}


def render_tile(tile: Tile, *, outside: str = "-") -> str:
    if tile.kind is TileKind.OUTSIDE:
        return outside
    return _RENDER_SYMBOLS[(tile.kind, tile.occupant)]


def render_level(level: Level, *, outside: str = "-") -> List[str]:
    """Render ``level`` back to text rows.

    With the default ``outside`` symbol the output parses back into an
    equivalent level. Pass ``outside=" "`` for a friendlier display; spaces
    are dropped by the parser, so that form does not round-trip.
    """
    return ["".join(render_tile(tile, outside=outside) for tile in row) for row in level.rows]


def _neighbors(level: Level, position: Position) -> Iterable[Position]:
    """Adjacent open tiles the pusher could step into without pushing."""
    for direction in Direction:
        candidate = level.target(position, direction)
        tile = level.tile(*candidate)
        if tile is not None and tile.is_open:
            yield candidate


def reachable_positions(level: Level) -> Set[Position]:
    """Return every position the pusher can walk to without moving a box.

    Breadth-first flood fill from the pusher over empty floor and goal
    tiles. The pusher's own position is included.
    """
    start = level.pusher()
    visited = {start}
    queue: deque[Position] = deque([start])
    while queue:
        for nb in _neighbors(level, queue.popleft()):
            if nb in visited:
                continue
            visited.add(nb)
            queue.append(nb)
    return visited


def walk_path(level: Level, goal: Position) -> Optional[List[Direction]]:
    """Return the shortest list of directions that walks the pusher to ``goal``.

    Only empty floor and goal tiles are traversed, so following the path
    never pushes a box.
    Returns None if ``goal`` cannot be reached that way.
    """
    start = level.pusher()
    if start == goal:
        return []

    visited = {start}
    queue: deque[Tuple[Position, List[Direction]]] = deque([(start, [])])
    while queue:
        position, path = queue.popleft()
        for direction in Direction:
            nb = level.target(position, direction)
            tile = level.tile(*nb)
            if nb in visited or tile is None or not tile.is_open:
                continue
            visited.add(nb)
            new_path = path + [direction]
            if nb == goal:
                return new_path
            queue.append((nb, new_path))
    return None


def apply_moves(level: Level, directions: Iterable[Direction]) -> int:
    """Feed ``directions`` into ``level.move_pusher``; return how many moves succeeded."""
    moved = 0
    for direction in directions:
        if level.move_pusher(direction) is not None:
            moved += 1
    return moved
