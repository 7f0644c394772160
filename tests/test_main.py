# tests/test_main.py
import os

from main import main


def test_cli_writes_image(tmp_path, capsys):
    code = main(
        [
            "--width", "6",
            "--height", "4",
            "--algo", "sidewinder",
            "--seed", "3",
            "--output-dir", str(tmp_path),
            "--output", "cli_maze",
            "--console",
            "--stl",
            "--solution",
        ]
    )

    assert code == 0
    assert os.path.exists(tmp_path / "cli_maze.png")
    assert os.path.exists(tmp_path / "cli_maze.stl")
    assert os.path.exists(tmp_path / "cli_maze_solution.png")
    assert "+----+----+" in capsys.readouterr().out


def test_cli_reports_unsupported_algorithm(tmp_path, capsys):
    code = main(["--algo", "wilson", "--output-dir", str(tmp_path)])

    assert code == 2
    assert "not implemented" in capsys.readouterr().out
    assert not os.path.exists(tmp_path / "maze.png")


def test_cli_reports_bad_dimensions(tmp_path, capsys):
    code = main(["--width", "0", "--output-dir", str(tmp_path)])

    assert code == 2
    assert "ERROR" in capsys.readouterr().out


def test_cli_writes_links_plot(tmp_path):
    code = main(
        ["--width", "4", "--height", "3", "--seed", "1", "--output-dir", str(tmp_path), "--links"]
    )

    assert code == 0
    assert os.path.exists(tmp_path / "maze_links.png")
