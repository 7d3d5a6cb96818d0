import sys

from timetravel.cli import main
from timetravel.files import PATH_MAX


def test_no_directory(capsys):
    assert main([]) == 1
    assert "ERROR: no directory provided" in capsys.readouterr().err


def test_no_directory_from_sys_argv(monkeypatch, capsys):
    monkeypatch.setattr(sys, "argv", ["time-travel"])
    assert main() == 1
    assert "no directory provided" in capsys.readouterr().err


def test_directory_name_too_long(capsys):
    assert main(["x" * PATH_MAX]) == 2
    assert "ERROR: directory name is too long" in capsys.readouterr().err


def test_directory_not_found(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 3
    assert "ERROR: directory not found" in capsys.readouterr().err


def test_renames_files(tmp_path, capsys):
    (tmp_path / "IMG_20190803_123456.jpg").write_text("")
    (tmp_path / "readme.txt").write_text("")
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"Analyzing filenames in {tmp_path}\n\n")
    assert out.endswith("\n1 files renamed\n")
    assert len(list(tmp_path.iterdir())) == 2
    assert (tmp_path / "readme.txt").exists()


def test_empty_directory(tmp_path, capsys):
    assert main([str(tmp_path)]) == 0
    assert "0 files renamed" in capsys.readouterr().out