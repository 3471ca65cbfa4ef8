"""
Level pack loading and level sequencing.

A level pack is a plain-text file of puzzle blocks separated by anything
that is not a puzzle row (blank lines, titles, comments):

```
; Level 1
#####
#@$.#
#####

Title: second one
######
#@ $.#
######
```

``LevelCollection`` parses every block once and then hands out fresh copies
of the parsed levels, so the caller owns whatever it mutates and a level can
be replayed from its starting position without re-reading the file.

Usage:
    levels = LevelCollection.from_file("examples/levels/starter.txt")
    level = levels.current()
    level.move_pusher(Direction.RIGHT)
    if level.is_solved():
        level = levels.next_level()
"""

from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .config import Config
from .level import InvalidLevelError, Level, is_puzzle_line, parse_level
from .logging_utils import log_error, log_info


def split_blocks(lines: Iterable[str]) -> List[List[str]]:
    """Group consecutive puzzle rows into blocks; every other line is a separator."""
    blocks: List[List[str]] = []
    block: List[str] = []
    for line in lines:
        if is_puzzle_line(line):
            block.append(line)
        elif block:
            blocks.append(block)
            block = []

    if block:
        blocks.append(block)
    return blocks


class LevelCollection:
    """Ordered, replayable sequence of levels with a play cursor.

    The collection keeps the parsed levels untouched. ``current()`` returns
    the level being played (a copy the caller may mutate); ``restart()``
    discards it in favor of a fresh copy. Indexing and iteration also return
    fresh copies.
    """

    def __init__(self, levels: Optional[List[Level]] = None):
        self._levels: List[Level] = list(levels or [])
        self.index = 0
        self._active: Optional[Level] = None

    @classmethod
    def from_source(cls, text: str, *, validate: Optional[bool] = None) -> "LevelCollection":
        """Parse every puzzle block in ``text``.

        Args:
            text: Contents of a level pack
            validate: Reject malformed blocks; defaults to Config.validate_levels()

        Raises:
            InvalidLevelError: If validation is on and a block is malformed.
                The 0-based block index is available as ``level_index``.
        """
        if validate is None:
            validate = Config.validate_levels()

        levels: List[Level] = []
        for index, block in enumerate(split_blocks(text.split("\n"))):
            try:
                levels.append(parse_level(block, validate=validate))
            except InvalidLevelError as exc:
                log_error(f"Level {index} rejected: {exc}")
                raise InvalidLevelError(str(exc), level_index=index) from exc
        return cls(levels)

    @classmethod
    def from_file(
        cls, path: Union[str, Path], *, validate: Optional[bool] = None
    ) -> "LevelCollection":
        """Load a level pack from disk.

        Raises:
            FileNotFoundError: If the file does not exist
            InvalidLevelError: If validation is on and a block is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Level pack not found at {path}")

        collection = cls.from_source(path.read_text(encoding="utf-8"), validate=validate)
        log_info(f"Loaded {len(collection)} level(s) from {path}")
        return collection

    # ------------------------------------------------------------------
    # Sequence access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._levels)

    def __getitem__(self, index: int) -> Level:
        return self._levels[index].copy()

    def __iter__(self) -> Iterator[Level]:
        for level in self._levels:
            yield level.copy()

    # ------------------------------------------------------------------
    # Play cursor
    # ------------------------------------------------------------------

    def current(self) -> Optional[Level]:
        """Return the level being played, or None for an empty collection."""
        if not self._levels:
            return None
        if self._active is None:
            self._active = self._levels[self.index].copy()
        return self._active

    def restart(self) -> Optional[Level]:
        """Reset the current level to its starting position."""
        self._active = None
        return self.current()

    def goto(self, index: int) -> Level:
        """Jump to level ``index`` (0-based) and return a fresh copy of it.

        Raises:
            IndexError: If ``index`` is outside the collection
        """
        if not 0 <= index < len(self._levels):
            raise IndexError(f"Level index {index} out of range (0..{len(self._levels) - 1})")
        self.index = index
        self._active = None
        return self.current()

    def next_level(self) -> Optional[Level]:
        """Advance to the next level; returns None once the pack is exhausted."""
        if self.index + 1 >= len(self._levels):
            return None
        return self.goto(self.index + 1)

    def previous_level(self) -> Optional[Level]:
        """Step back one level; returns None when already at the first level."""
        if self.index == 0 or not self._levels:
            return None
        return self.goto(self.index - 1)


def list_level_packs(levels_dir: Optional[Path] = None) -> List[str]:
    """List available level packs (``*.txt`` file stems) in ``levels_dir``."""
    levels_dir = Path(levels_dir) if levels_dir is not None else Config.LEVELS_DIR
    if not levels_dir.exists():
        return []

    return sorted(
        f.stem for f in levels_dir.glob("*.txt")
        if not f.name.startswith("_")
    )


def load_level_pack(
    name: str, levels_dir: Optional[Path] = None, *, validate: Optional[bool] = None
) -> LevelCollection:
    """Load a level pack by name from ``levels_dir`` (defaults to Config.LEVELS_DIR)."""
    levels_dir = Path(levels_dir) if levels_dir is not None else Config.LEVELS_DIR
    return LevelCollection.from_file(levels_dir / f"{name}.txt", validate=validate)
