import pytest

from gridnav.cli import list_maps, main


def fake_input(answers):
    pending = iter(answers)

    def read(prompt=""):
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture
def maps_dir(tmp_path):
    directory = tmp_path / "maps"
    directory.mkdir()
    (directory / "spg.txt").write_text("1\n3\n0\nspg\n")
    (directory / ".hidden").write_text("ignored")
    return directory


def test_list_maps_skips_hidden_and_sorts(tmp_path):
    for name in ["b.txt", "a.txt", ".secret"]:
        (tmp_path / name).write_text("")
    assert [entry.name for entry in list_maps(tmp_path)] == ["a.txt", "b.txt"]


def test_list_maps_missing_directory(tmp_path):
    with pytest.raises(OSError):
        list_maps(tmp_path / "nowhere")


def test_main_plays_chosen_map(maps_dir, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", fake_input(["0"]))
    assert main([str(maps_dir)]) == 0
    out = capsys.readouterr().out
    assert "Available maps:" in out
    assert "spg.txt" in out
    assert ".hidden" not in out
    assert "Game over! Press enter to exit." in out


def test_main_with_bfs(maps_dir, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", fake_input(["0"]))
    assert main([str(maps_dir), "--algorithm", "bfs"]) == 0
    assert "Successfully built path to goal." in capsys.readouterr().out


@pytest.mark.parametrize("answer", ["7", "x", "-1"])
def test_main_invalid_selection(maps_dir, monkeypatch, capsys, answer):
    monkeypatch.setattr("builtins.input", fake_input([answer]))
    assert main([str(maps_dir)]) == 1
    assert "Invalid map selection." in capsys.readouterr().out


def test_main_no_input(maps_dir, monkeypatch, capsys):
    monkeypatch.setattr("builtins.input", fake_input([]))
    assert main([str(maps_dir)]) == 1
    assert "Invalid map selection." in capsys.readouterr().out


def test_main_missing_directory(tmp_path, capsys):
    assert main([str(tmp_path / "nowhere")]) == 1
    assert "Cannot read maps directory" in capsys.readouterr().out