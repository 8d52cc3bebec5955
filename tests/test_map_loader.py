from pathlib import Path

import pytest

from pathbot.domain.types import Position, TileStatus
from pathbot.utils.map_loader import (
    MapFormatError, parse_map, world_from_map, load_world, render_map,
)

MAPS_DIR = Path(__file__).parent.parent / "maps" / "public"


def test_parse_map_reads_statuses_and_robot():
    tiles, robot = parse_map(["CDW", "RCT", ""])

    assert robot == Position(1, 0)
    assert tiles == [
        [TileStatus.CLEAN, TileStatus.DIRTY, TileStatus.IMPASSABLE],
        [TileStatus.CLEAN, TileStatus.CLEAN, TileStatus.TARGET],
    ]


def test_robot_defaults_to_first_free_tile():
    world = world_from_map(["WT", "WD"])

    assert world.current_position() == Position(1, 1)


def test_trailing_whitespace_and_blank_lines_ignored():
    world = world_from_map(["", "RC  ", "", "CT\n"])

    assert world.shape == (2, 2)


@pytest.mark.parametrize("lines, message", [
    ([], "empty"),
    (["RCX", "CCT"], "Unknown tile"),
    (["RCC", "CT"], "Row 1"),
    (["RCC", "CCC"], "exactly one target"),
    (["RTT"], "exactly one target"),
    (["RRT"], "Second robot"),
])
def test_malformed_maps(lines, message):
    with pytest.raises(MapFormatError, match=message):
        world_from_map(lines)


def test_map_without_free_tile():
    with pytest.raises(MapFormatError):
        world_from_map(["WT"])


def test_render_map_marks_robot():
    world = world_from_map(["RCW", "DCT"])

    assert render_map(world) == "RCW\nDCT"


def test_load_public_maps():
    world = load_world(MAPS_DIR / "map01.txt")

    assert world.shape == (10, 10)
    assert world.current_position() == Position(0, 0)
    assert world.target_position() == Position(9, 9)

    enclosed = load_world(MAPS_DIR / "map02.txt")
    assert enclosed.target_position() == Position(2, 2)


def test_load_world_from_tmp_file(tmp_path):
    path = tmp_path / "tiny.txt"
    path.write_text("RWT\nCCC\n")

    world = load_world(path)

    assert world.tile_status(Position(0, 1)) is TileStatus.IMPASSABLE
