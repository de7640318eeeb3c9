import io

import pytest

from gridnav.game import Game
from gridnav.game_map import GameMap


def write_map(tmp_path, rows, cols, direction, grid, name="map.txt"):
    path = tmp_path / name
    path.write_text("\n".join([str(rows), str(cols), str(direction), *grid]) + "\n")
    return path


def assert_valid_path(game, path, src, dest_tile):
    assert path[0] == src
    assert path[-1] // 4 == dest_tile
    for u, v in zip(path, path[1:]):
        assert game.map.nav.has_edge(u, v)


def test_load_map_finds_points_of_interest(tmp_path):
    game = Game(write_map(tmp_path, 2, 3, 0, ["sep", "pig"]))
    assert game.map.rows == 2
    assert game.map.cols == 3
    assert game.map.player_start == 0
    assert game.map.goal == 5
    assert list(game.map.enemy_starts) == [4]
    assert game.map.tile(4) == "i"


def test_load_map_start_direction(tmp_path):
    game = Game(write_map(tmp_path, 1, 3, 2, ["psg"]))
    assert game.map.player_start // 4 == 1
    assert game.map.player_start % 4 == 2
    game.add_player()
    assert game.character.char_rep() == ">"


def test_missing_file_gives_default_map(tmp_path):
    game = Game(tmp_path / "absent.txt")
    default = GameMap()
    assert (game.map.rows, game.map.cols) == (default.rows, default.cols)
    assert game.map.player_start == -1
    assert game.map.goal == -1


def test_short_file_raises(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("3\n3\n")
    with pytest.raises(ValueError):
        Game(path)


def test_missing_goal_reported(tmp_path, capsys):
    Game(write_map(tmp_path, 1, 2, 0, ["sp"]))
    assert "[ERROR] Goal not found!" in capsys.readouterr().out


def test_unknown_algorithm_rejected():
    with pytest.raises(ValueError):
        Game(algorithm="astar")


def test_methods_need_a_map():
    with pytest.raises(RuntimeError):
        Game().render_compact()


def test_path_dijkstra_cheapest_route(tmp_path):
    game = Game(write_map(tmp_path, 1, 3, 0, ["spg"]))
    path = game.path_dijkstra(0, 2)
    assert path == [0, 2, 6, 10]
    assert_valid_path(game, path, 0, 2)


def test_path_bfs_reaches_goal(tmp_path):
    game = Game(write_map(tmp_path, 1, 3, 0, ["spg"]), algorithm="bfs")
    path = game.path_bfs(0, 2)
    assert_valid_path(game, path, 0, 2)


def test_path_without_goal_is_empty(tmp_path):
    game = Game(write_map(tmp_path, 1, 3, 0, ["spg"]))
    assert game.path_dijkstra(0, -1) == []
    assert game.path_bfs(0, -1) == []


def test_unreachable_goal_gives_empty_path(tmp_path):
    game = Game(write_map(tmp_path, 1, 3, 0, ["sig"]))
    assert game.path_dijkstra(0, 2) == []
    assert game.path_bfs(0, 2) == []


def test_add_enemy_uses_each_start_once(tmp_path):
    game = Game(write_map(tmp_path, 2, 2, 0, ["se", "eg"]))
    for _ in range(3):
        game.add_enemy()
    assert [enemy.pos for enemy in game.enemies] == [4, 8]
    assert all(not enemy.player for enemy in game.enemies)


def test_render_compact(tmp_path):
    game = Game(write_map(tmp_path, 1, 3, 0, ["sig"]))
    game.add_player()
    assert game.render_compact() == "^ # x \n"


def test_render_blocks(tmp_path):
    game = Game(write_map(tmp_path, 1, 3, 0, ["sig"]))
    game.add_player()
    text = game.render()
    assert text.count("#") == 9
    assert text.count("^") == 1
    assert text.count("x") == 1
    lines = text.split("\n")
    assert lines[1].split()[1] == "^"


def test_render_shows_enemies(tmp_path):
    game = Game(write_map(tmp_path, 1, 3, 0, ["seg"]))
    game.add_player()
    game.add_enemy()
    assert game.render_compact().split()[1] == "o"
    assert game.render().count("o") == 1


def test_play_reaches_goal(tmp_path):
    game = Game(write_map(tmp_path, 1, 3, 0, ["spg"]))
    out = io.StringIO()
    caught = game.play(input_fn=lambda: "", out=out)
    text = out.getvalue()
    assert caught is False
    assert game.character.pos // 4 == game.map.goal
    assert "Player agent turns right from north to east." in text
    assert "Player agent moves forward to the east." in text
    assert "Game over! Press enter to exit." in text


def test_play_handles_end_of_input(tmp_path):
    game = Game(write_map(tmp_path, 1, 3, 0, ["spg"]))

    def closed():
        raise EOFError

    assert game.play(input_fn=closed, out=io.StringIO()) is False
    assert game.character.pos // 4 == game.map.goal


def test_play_enemy_catches_player(tmp_path):
    game = Game(write_map(tmp_path, 1, 4, 0, ["sepg"]))
    out = io.StringIO()
    caught = game.play(input_fn=lambda: "", out=out)
    assert caught is True
    assert game.enemies[0].pos // 4 == game.character.pos // 4
    assert "Game over! Player agent was caught." in out.getvalue()


def test_play_without_start(tmp_path):
    game = Game(write_map(tmp_path, 1, 2, 0, ["pg"]))
    out = io.StringIO()
    assert game.play(input_fn=lambda: "", out=out) is False
    text = out.getvalue()
    assert "[ERROR] Failed to add player. No valid player start found." in text
    assert "[ERROR] Failed to build path to goal. No character found." in text
    assert game.character.pos == -1