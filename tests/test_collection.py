"""Tests for level pack loading and the level cursor."""

from pathlib import Path

import pytest

from sokoverse import (
    Direction,
    InvalidLevelError,
    LevelCollection,
    list_level_packs,
    load_level_pack,
    split_blocks,
)

LEVELS_DIR = Path(__file__).resolve().parent.parent / "examples" / "levels"

TWO_LEVELS = """\
#####
#@$.#
#####

; second level follows
######
#-@$.#
######
"""


def test_two_blocks_separated_by_blank_and_comment():
    collection = LevelCollection.from_source(TWO_LEVELS)
    assert len(collection) == 2

    first, second = list(collection)
    assert first.pusher() == (1, 1)
    assert second.pusher() == (2, 1)
    assert second.width == 6


def test_split_blocks_skips_separator_runs():
    lines = ["Title", "", "####", "#@.#", "####", "", "", "; note", "####", "#@.#", "####"]
    blocks = split_blocks(lines)
    assert blocks == [["####", "#@.#", "####"], ["####", "#@.#", "####"]]


def test_trailing_block_without_separator_is_kept():
    collection = LevelCollection.from_source("####\n#@.#\n####")
    assert len(collection) == 1


def test_source_without_puzzles_is_empty():
    collection = LevelCollection.from_source("just a title\n\n; and a comment\n")
    assert len(collection) == 0
    assert collection.current() is None
    assert collection.next_level() is None
    assert collection.previous_level() is None


def test_iteration_hands_out_fresh_copies():
    collection = LevelCollection.from_source(TWO_LEVELS)
    first = next(iter(collection))
    first.move_pusher(Direction.RIGHT)
    assert first.is_solved()

    replay = next(iter(collection))
    assert replay.pusher() == (1, 1)
    assert not replay.is_solved()
    assert collection[0].pusher() == (1, 1)


def test_cursor_restart_and_navigation():
    collection = LevelCollection.from_source(TWO_LEVELS)
    level = collection.current()
    assert collection.index == 0
    assert collection.current() is level

    level.move_pusher(Direction.RIGHT)
    assert collection.current().is_solved()

    restarted = collection.restart()
    assert restarted is not level
    assert restarted.pusher() == (1, 1)

    second = collection.next_level()
    assert collection.index == 1
    assert second.pusher() == (2, 1)

    # Forward-only end of the pack
    assert collection.next_level() is None
    assert collection.index == 1

    assert collection.previous_level().pusher() == (1, 1)
    assert collection.previous_level() is None
    assert collection.index == 0


def test_goto_out_of_range():
    collection = LevelCollection.from_source(TWO_LEVELS)
    assert collection.goto(1).pusher() == (2, 1)
    with pytest.raises(IndexError):
        collection.goto(2)
    with pytest.raises(IndexError):
        collection.goto(-1)


def test_invalid_block_reports_its_index():
    text = TWO_LEVELS + "\n#####\n#$-.#\n#####\n"
    with pytest.raises(InvalidLevelError) as excinfo:
        LevelCollection.from_source(text, validate=True)
    assert excinfo.value.level_index == 2
    assert "Level 2" in str(excinfo.value)


def test_invalid_block_allowed_without_validation():
    text = TWO_LEVELS + "\n#####\n#$-.#\n#####\n"
    collection = LevelCollection.from_source(text, validate=False)
    assert len(collection) == 3


def test_from_file_reads_pack(tmp_path):
    pack = tmp_path / "pack.txt"
    pack.write_text(TWO_LEVELS, encoding="utf-8")
    collection = LevelCollection.from_file(pack)
    assert len(collection) == 2


def test_from_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        LevelCollection.from_file(tmp_path / "missing.txt")


def test_list_and_load_level_packs(tmp_path):
    (tmp_path / "alpha.txt").write_text(TWO_LEVELS, encoding="utf-8")
    (tmp_path / "_draft.txt").write_text(TWO_LEVELS, encoding="utf-8")
    (tmp_path / "notes.md").write_text("# notes", encoding="utf-8")

    assert list_level_packs(tmp_path) == ["alpha"]
    assert list_level_packs(tmp_path / "nope") == []
    assert len(load_level_pack("alpha", tmp_path)) == 2


def test_bundled_level_packs_load():
    assert list_level_packs(LEVELS_DIR) == ["classic", "starter"]

    starter = load_level_pack("starter", LEVELS_DIR, validate=True)
    assert len(starter) == 4
    assert [level.box_count() for level in starter] == [1, 1, 2, 6]

    classic = load_level_pack("classic", LEVELS_DIR, validate=True)
    assert len(classic) == 2
    assert classic[0].pusher() == (1, 1)
    assert classic[1].pusher() == (2, 1)


def test_only_newlines_split_rows():
    collection = LevelCollection.from_source("##\x0c##\n#@.#\n####")
    assert len(collection) == 1
    assert [len(row) for row in collection[0].rows] == [4, 4, 4]


def test_carriage_returns_are_stripped():
    collection = LevelCollection.from_source("####\r\n#@.#\r\n####\r\n")
    assert [len(row) for row in collection[0].rows] == [4, 4, 4]
