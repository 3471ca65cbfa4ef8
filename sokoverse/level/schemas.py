"""Pydantic schemas for level snapshots.

These models mirror the ``Tile``/``Level`` containers in ``tiles.py`` and
``grid.py`` so a level in progress can be serialized to JSON and restored.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .grid import Level
from .tiles import Tile, TileKind, TileOccupant


class TileState(BaseModel):
    """Serializable form of a single tile."""

    kind: TileKind
    occupant: TileOccupant = TileOccupant.NONE


class LevelState(BaseModel):
    """Ragged grid of tiles, top row first."""

    width: int = Field(0, description="Longest row length, for layout only")
    rows: List[List[TileState]] = Field(
        default_factory=list,
        description="Rows of tiles; rows may differ in length",
    )

    @classmethod
    def from_level(cls, level: Level) -> "LevelState":
        return cls(
            width=level.width,
            rows=[
                [TileState(kind=tile.kind, occupant=tile.occupant) for tile in row]
                for row in level.rows
            ],
        )

    def to_level(self) -> Level:
        rows = [[Tile(tile.kind, tile.occupant) for tile in row] for row in self.rows]
        return Level(rows, self.width)
