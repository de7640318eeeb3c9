import pytest

from gridnav.tile import Tile


def test_new_tile_is_passable():
    tile = Tile()
    assert tile.state == "p"
    assert tile.cells == ["_"] * 9


def test_impassable_fills_with_hash():
    tile = Tile()
    tile.update("i")
    assert tile.cells == ["#"] * 9
    assert tile.state == "i"


def test_goal_marks_centre():
    tile = Tile()
    tile.update("g")
    assert tile.cells[4] == "X"
    assert tile.cells.count("_") == 8


@pytest.mark.parametrize("state", ["o", "p", "s", "e"])
def test_other_states_reset_to_passable(state):
    tile = Tile()
    tile.update("i")
    tile.update(state)
    assert tile.cells == ["_"] * 9


def test_render_layout():
    tile = Tile()
    tile.update("g")
    lines = tile.render().splitlines()
    assert len(lines) == 3
    assert lines[1] == "_ X _"
    assert lines[0] == lines[2] == "_ _ _"


def test_display(capsys):
    tile = Tile()
    tile.update("i")
    tile.display()
    out = capsys.readouterr().out
    assert out == tile.render() + "\n\n"
    assert out.count("#") == 9