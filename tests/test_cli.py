from pathlib import Path

import pytest

from dfs_maze.cli import EXIT_LOAD_FAILED, EXIT_SOLVED, EXIT_UNSOLVED, main


def write_maze(tmp_path, text, name="maze.txt"):
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_solved_maze(tmp_path, capsys):
    path = write_maze(tmp_path, "3 3\nS  \n # \n  E\n")
    assert main([path]) == EXIT_SOLVED
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "S**",
        " #*",
        "  E",
        "Solved: path of 3 cells, 0 cells rejected.",
    ]


def test_unsolvable_maze_still_printed(tmp_path, capsys):
    path = write_maze(tmp_path, "4 1\nS #E\n")
    assert main([path]) == EXIT_UNSOLVED
    out = capsys.readouterr().out
    assert out.splitlines() == ["S~#E", "No solution found."]


def test_no_solve_prints_input(tmp_path, capsys):
    path = write_maze(tmp_path, "3 3\nS  \n # \n  E\n")
    assert main([path, "--no-solve"]) == EXIT_SOLVED
    assert capsys.readouterr().out.splitlines() == ["S  ", " # ", "  E"]


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == EXIT_LOAD_FAILED
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("error: Cannot read maze file")


@pytest.mark.parametrize(
    "text",
    [
        "wide tall\nS E\n",
        "3 2\nS E\n",
        "3 1\n  E\n",
    ],
)
def test_bad_maze_reports_failure(tmp_path, capsys, text):
    path = write_maze(tmp_path, text)
    assert main([path]) == EXIT_LOAD_FAILED
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error:" in captured.err


def test_log_level_from_environment(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("DFS_MAZE_LOG_LEVEL", "debug")
    path = write_maze(tmp_path, "2 1\nSE\n")
    assert main([path]) == EXIT_SOLVED


def test_requires_maze_argument(capsys):
    with pytest.raises(SystemExit) as err:
        main([])
    assert err.value.code == 2


def test_bundled_example(capsys):
    path = Path(__file__).resolve().parent.parent / "mazes" / "example.txt"
    assert main([str(path)]) == EXIT_SOLVED
    assert capsys.readouterr().out.splitlines()[:5] == [
        "#####",
        "#S**#",
        "###*#",
        "#E**#",
        "#####",
    ]


def test_bad_log_level_in_environment(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("DFS_MAZE_LOG_LEVEL", "verbose")
    path = write_maze(tmp_path, "2 1\nSE\n")
    with pytest.raises(SystemExit) as err:
        main([path])
    assert err.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "DFS_MAZE_LOG_LEVEL must be one of" in captured.err
