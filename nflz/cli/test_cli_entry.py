from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest

from nflz.cli.cli_entry import create_parser, main


def _make_files(directory: Path, names) -> None:
    for name in names:
        (directory / name).write_bytes(b"x")


@pytest.fixture(autouse=True)
def restore_root_logger():
    # main() installs its own handler on the root logger
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def photos(tmp_path: Path) -> Path:
    _make_files(tmp_path, ["paris (1).jpg", "paris (2).jpg", "paris (10).jpg", "readme.txt"])
    return tmp_path


def test_parser_defaults() -> None:
    args = create_parser().parse_args([])
    assert args.directory is None
    assert args.case_insensitive is None
    assert not args.dry_run
    assert not args.yes


@pytest.mark.parametrize(
    "flag,expected",
    [("--case-sensitive", False), ("--case-insensitive", True)],
)
def test_parser_case_flags(flag, expected) -> None:
    assert create_parser().parse_args([flag]).case_insensitive is expected


def test_rename_with_yes(photos: Path, capsys) -> None:
    assert main([str(photos), "--yes", "--case-sensitive"]) == 0

    assert (photos / "paris (01).jpg").exists()
    assert (photos / "paris (02).jpg").exists()
    assert (photos / "paris (10).jpg").exists()
    out = capsys.readouterr().out
    assert "paris (1).jpg" in out
    assert "readme.txt" in out
    assert "Renamed: 2" in out


def test_dry_run_renames_nothing(photos: Path, capsys) -> None:
    assert main([str(photos), "--dry-run"]) == 0

    assert (photos / "paris (1).jpg").exists()
    assert not (photos / "paris (01).jpg").exists()
    assert "[Preview mode]" in capsys.readouterr().out


def test_declined_prompt(photos: Path, monkeypatch, capsys) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt="": "n")

    assert main([str(photos)]) == 0

    assert (photos / "paris (1).jpg").exists()
    assert "no files were renamed" in capsys.readouterr().out


def test_closed_stdin_declines(photos: Path, monkeypatch, capsys) -> None:
    def closed_stdin(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_stdin)

    assert main([str(photos), "--case-sensitive"]) == 0

    assert (photos / "paris (1).jpg").exists()
    assert not (photos / "paris (01).jpg").exists()
    assert "no files were renamed" in capsys.readouterr().out


def test_accepted_prompt(photos: Path, monkeypatch) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt="": "y")

    assert main([str(photos), "--case-sensitive"]) == 0
    assert (photos / "paris (01).jpg").exists()


def test_current_directory_is_default(photos: Path, monkeypatch) -> None:
    monkeypatch.chdir(photos)
    assert main(["--yes", "--case-sensitive"]) == 0
    assert (photos / "paris (02).jpg").exists()


def test_missing_directory(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "missing")]) == 1
    assert "Error" in capsys.readouterr().out


def test_nothing_to_do(tmp_path: Path, capsys) -> None:
    _make_files(tmp_path, ["a (10).jpg", "a (11).jpg"])
    assert main([str(tmp_path)]) == 0
    assert "No files need renaming" in capsys.readouterr().out


def test_collision_exits_with_error(photos: Path, capsys) -> None:
    (photos / "paris (01).jpg").mkdir()

    assert main([str(photos), "--yes", "--case-sensitive"]) == 1

    assert (photos / "paris (1).jpg").exists()
    assert (photos / "paris (2).jpg").exists()
    assert "conflict" in capsys.readouterr().out


@pytest.mark.skipif(os.name != "posix", reason="undecodable names only exist on POSIX filesystems")
def test_undecodable_filenames_are_printed_escaped(tmp_path: Path, capsys) -> None:
    raw_dir = os.fsencode(tmp_path)
    for name in [b"caf\xe9 (1).jpg", b"caf\xe9 (10).jpg", b"caf\xe9.txt"]:
        try:
            with open(os.path.join(raw_dir, name), "wb") as f:
                f.write(b"x")
        except OSError:
            pytest.skip("filesystem rejects non-UTF-8 names")

    assert main([str(tmp_path), "--yes", "--case-sensitive"]) == 0

    assert os.path.exists(os.path.join(raw_dir, b"caf\xe9 (01).jpg"))
    out = capsys.readouterr().out
    assert "caf\\xe9 (1).jpg" in out
    assert "caf\\xe9 (01).jpg" in out
    assert "'caf\\xe9.txt' must include exactly one numbered group" in out
    assert "Renamed: 1" in out
