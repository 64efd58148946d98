import io

import pytest

from treasurehunt.cli import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_not_enough_arguments(capsys):
    assert main(["--add"]) == 255
    assert capsys.readouterr().out == "Not enough arguments!"


def test_add_list_view_remove(workdir, monkeypatch, capsys):
    monkeypatch.setattr(
        "sys.stdin", io.StringIO("yes\nt1\nalice\n3 4\nby the river\n9\nno\n")
    )
    assert main(["--add", "h1"]) == 0
    capsys.readouterr()

    assert main(["--list", "h1"]) == 0
    assert "ID: t1\nName: alice\n" in capsys.readouterr().out

    assert main(["--view", "h1", "t1"]) == 0
    assert "Clue: by the river\n" in capsys.readouterr().out

    assert main(["--remove_treasure", "h1", "t1"]) == 0
    assert (workdir / "h1" / "treasures.bin").stat().st_size == 0

    assert main(["--remove_hunt", "h1"]) == 0
    assert not (workdir / "h1").exists()


def test_list_missing_hunt_fails(workdir, capsys):
    assert main(["--list", "missing"]) == 255
    assert "missing" in capsys.readouterr().err


def test_unknown_command_is_ignored(workdir):
    assert main(["--frobnicate", "h1"]) == 0
    assert list(workdir.iterdir()) == []