import json
import math

import pytest

from gridcast.world import SAMPLE_WALLS, WallMap, load_world


def test_wall_map_membership_and_dedup():
    walls = WallMap([(1, 2), (1, 2), (-3, 0)])
    assert len(walls) == 2
    assert walls.contains((1, 2))
    assert (-3, 0) in walls
    assert not walls.contains((0, 0))
    assert list(walls) == [(-3, 0), (1, 2)]


def test_wall_map_equality_ignores_order():
    assert WallMap([(0, 0), (1, 1)]) == WallMap([(1, 1), (0, 0)])


@pytest.mark.parametrize(
    "cells", [[(0.5, 1)], [(1, 2, 3)], [7], [(True, 0)], [("1", 2)]]
)
def test_wall_map_rejects_bad_cells(cells):
    with pytest.raises(ValueError):
        WallMap(cells)


def test_wall_map_bounds():
    assert WallMap().bounds() is None
    assert WallMap(SAMPLE_WALLS).bounds() == (-3, -4, 3, 2)


def test_default_world_loads_sample_loop():
    walls, pose = load_world()
    assert walls == WallMap(SAMPLE_WALLS)
    assert len(walls) == 24
    assert pose.position == (0.0, 0.0)
    assert pose.rotation == 0.0


def test_world_file_player_angle_in_degrees(tmp_path):
    path = tmp_path / "world.json"
    path.write_text(
        json.dumps(
            {"walls": [[2, 0]], "player": {"pos": [0.5, 0.5], "angle": 90}}
        )
    )
    walls, pose = load_world(str(path))
    assert walls.contains((2, 0))
    assert pose.position == (0.5, 0.5)
    assert math.isclose(pose.rotation, math.pi / 2, rel_tol=1e-9)


def test_world_file_without_player(tmp_path):
    path = tmp_path / "world.json"
    path.write_text(json.dumps({"walls": [[0, 1], [1, 1]]}))
    assert WallMap.from_json(str(path)) == WallMap([(0, 1), (1, 1)])
    _, pose = load_world(str(path))
    assert pose.position == (0.0, 0.0)


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        json.dumps({"walls": [[0.5, 1]]}),
        json.dumps({"walls": [], "player": {"pos": [1]}}),
    ],
)
def test_bad_world_file_raises_runtime_error(tmp_path, content):
    path = tmp_path / "world.json"
    path.write_text(content)
    with pytest.raises(RuntimeError):
        load_world(str(path))


def test_missing_world_file_raises_runtime_error(tmp_path):
    with pytest.raises(RuntimeError):
        load_world(str(tmp_path / "missing.json"))
