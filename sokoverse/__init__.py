"""
Sokoverse - Sokoban level engine.

Parses text level packs into tile grids and simulates box-pushing moves.
Rendering and input are left to the caller: feed directions into
``Level.move_pusher`` and read ``walls()``/``boxes()``/``pusher()`` back.
"""

__version__ = "0.1.0"

from .level import (
    Direction,
    Position,
    Tile,
    TileKind,
    TileOccupant,
    InvalidLevelError,
    Level,
    LevelState,
    TileState,
    is_puzzle_line,
    parse_level,
    parse_row,
    validate_level,
    apply_moves,
    reachable_positions,
    render_level,
    walk_path,
)
from .collection import (
    LevelCollection,
    list_level_packs,
    load_level_pack,
    split_blocks,
)

__all__ = [
    # Tiles
    "Direction",
    "Position",
    "Tile",
    "TileKind",
    "TileOccupant",
    # Levels
    "InvalidLevelError",
    "Level",
    "LevelState",
    "TileState",
    # Parsing
    "is_puzzle_line",
    "parse_level",
    "parse_row",
    "validate_level",
    "split_blocks",
    # Collections
    "LevelCollection",
    "list_level_packs",
    "load_level_pack",
    # Helpers
    "apply_moves",
    "reachable_positions",
    "render_level",
    "walk_path",
]
