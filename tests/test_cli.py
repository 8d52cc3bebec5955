import argparse
from pathlib import Path

import pytest

from pathbot.__main__ import main, parse_size

ROOT = Path(__file__).parent.parent


def test_public_map_reaches_goal(capsys):
    code = main(["--map", str(ROOT / "maps" / "public" / "map01.txt"),
                 "--config", str(ROOT / "config" / "configSmall.txt")])

    out = capsys.readouterr().out
    assert code == 0
    assert "Grid: 10x10" in out
    assert "Final position: (9, 9)" in out


def test_enclosed_target_runs_out_of_steps(capsys):
    code = main(["--map", str(ROOT / "maps" / "public" / "map02.txt"), "--iterations", "7"])

    assert code == 1
    assert "Final position: (0, 0)" in capsys.readouterr().out


def test_random_world_option(capsys):
    code = main(["--random", "6x6", "--seed", "4", "--walls", "0"])

    assert code == 0
    assert "Grid: 6x6" in capsys.readouterr().out


def test_bad_map_exits_with_usage_error(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_text("RCC\nCCC\n")

    assert main(["--map", str(path)]) == 2
    assert "exactly one target" in capsys.readouterr().out


def test_bad_config_exits_with_usage_error(tmp_path, capsys):
    path = tmp_path / "config.txt"
    path.write_text("ITERATIONS=lots\n")

    assert main(["--map", str(ROOT / "maps" / "public" / "map02.txt"),
                 "--config", str(path)]) == 2


def test_parse_size():
    assert parse_size("3x4") == (3, 4)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_size("3by4")
