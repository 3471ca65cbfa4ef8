"""Terminal Sokoban driven by typed commands.

Plays a level pack in the terminal by rendering each level as text and
reading one command per line:

    uv run python examples/play/run.py
    uv run python examples/play/run.py --pack classic --level 2

Commands: w/a/s/d (or up/left/down/right) move, r restarts the level,
n/p jump to the next/previous level, q quits. Several moves may be typed
on one line, e.g. ``ddsa``.

Non-interactive replay of a move string (useful for scripted checks):

    uv run python examples/play/run.py --moves ddss
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from sokoverse import Direction, Level, LevelCollection, load_level_pack, render_level
from sokoverse.config import Config
from sokoverse.logging_utils import (
    colored,
    Color,
    log_blocked,
    log_error,
    log_info,
    log_move,
    log_success,
)


def show(level: Level, number: int, total: int) -> None:
    print()
    print(colored(f"Level {number}/{total}", Color.CYAN, bold=True))
    for line in render_level(level, outside=" "):
        print(line)
    print(f"boxes on goals: {len(set(level.boxes()) & set(level.goals()))}/{len(level.goals())}")


def step(level: Level, direction: Direction) -> bool:
    """Apply one move and log what happened. Returns True if the pusher moved."""
    before = level.pusher()
    after = level.move_pusher(direction)
    if after is None:
        log_blocked(f"{direction.name.lower()} blocked at {before}")
        return False
    log_move(f"{direction.name.lower()}: {before} -> {after}")
    return True


def play_moves(collection: LevelCollection, moves: Iterable[str]) -> bool:
    """Replay single-letter moves on the current level; returns True if solved."""
    level = collection.current()
    for key in moves:
        try:
            step(level, Direction.from_name(key))
        except ValueError as exc:
            log_error(str(exc))
            return False
    show(level, collection.index + 1, len(collection))
    return level.is_solved()


def interactive(collection: LevelCollection) -> None:
    level = collection.current()
    show(level, collection.index + 1, len(collection))

    for raw in sys.stdin:
        command = raw.strip().lower()
        if not command:
            continue
        if command in ("q", "quit"):
            break
        if command in ("r", "restart"):
            level = collection.restart()
        elif command in ("n", "next"):
            level = collection.next_level() or level
        elif command in ("p", "prev", "previous"):
            level = collection.previous_level() or level
        else:
            keys = [command] if command in ("up", "down", "left", "right") else list(command)
            for key in keys:
                try:
                    step(level, Direction.from_name(key))
                except ValueError as exc:
                    log_error(str(exc))
                    break

        show(level, collection.index + 1, len(collection))
        if level.is_solved():
            log_success(f"Level {collection.index + 1} solved!")
            upcoming = collection.next_level()
            if upcoming is None:
                log_success("Pack complete.")
                break
            level = upcoming
            show(level, collection.index + 1, len(collection))


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play Sokoban in the terminal")
    parser.add_argument("--pack", help="Level pack name in the levels directory")
    parser.add_argument("--file", type=Path, help="Explicit level pack path")
    parser.add_argument("--level", type=int, default=1, help="1-based level to start at")
    parser.add_argument("--moves", help="Replay this move string (w/a/s/d) and exit")
    args = parser.parse_args(argv)

    Config.validate()

    if args.file is not None:
        collection = LevelCollection.from_file(args.file)
    elif args.pack:
        collection = load_level_pack(args.pack)
    else:
        collection = LevelCollection.from_file(Config.LEVELS_PATH)

    if not len(collection):
        log_error("Level pack contains no levels")
        return 1
    if not 1 <= args.level <= len(collection):
        log_error(f"Level {args.level} out of range (1..{len(collection)})")
        return 1
    collection.goto(args.level - 1)

    if args.moves is not None:
        solved = play_moves(collection, args.moves)
        log_info("solved" if solved else "not solved")
        return 0 if solved else 2

    interactive(collection)
    return 0


if __name__ == "__main__":
    sys.exit(main())
