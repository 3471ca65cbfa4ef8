"""Level representation, parsing and move simulation."""

from .tiles import Direction, Position, Tile, TileKind, TileOccupant
from .grid import InvalidLevelError, Level
from .parser import SYMBOLS, is_puzzle_line, parse_level, parse_row, validate_level
from .schemas import LevelState, TileState
from .helpers import (
    apply_moves,
    reachable_positions,
    render_level,
    render_tile,
    walk_path,
)

__all__ = [
    "Direction",
    "Position",
    "Tile",
    "TileKind",
    "TileOccupant",
    "InvalidLevelError",
    "Level",
    "SYMBOLS",
    "is_puzzle_line",
    "parse_level",
    "parse_row",
    "validate_level",
    "LevelState",
    "TileState",
    "apply_moves",
    "reachable_positions",
    "render_level",
    "render_tile",
    "walk_path",
]
