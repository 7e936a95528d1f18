from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PySide6.QtWidgets")

from nflz.core import DirectoryPlan, NflzOptions, analyze_directory  # noqa: E402
from nflz.gui import gui_workers  # noqa: E402
from nflz.gui.gui_workers import PlanWorker, RenameWorker  # noqa: E402

CASE_SENSITIVE = NflzOptions(case_insensitive_detect=False)


def _collect(worker):
    finished, errors = [], []
    worker.finished.connect(finished.append)
    worker.error.connect(errors.append)
    return finished, errors


def test_plan_worker_reports_plan(tmp_path: Path) -> None:
    for name in ["a (1).jpg", "a (10).jpg"]:
        (tmp_path / name).write_bytes(b"x")
    worker = PlanWorker(tmp_path, CASE_SENSITIVE)
    finished, errors = _collect(worker)

    worker.run()

    assert errors == []
    assert [r.new_name for r in finished[0].to_rename] == ["a (01).jpg"]


def test_plan_worker_reports_missing_directory(tmp_path: Path) -> None:
    worker = PlanWorker(tmp_path / "missing", CASE_SENSITIVE)
    finished, errors = _collect(worker)

    worker.run()

    assert finished == []
    assert "can't be read" in errors[0]


def test_plan_worker_reports_unexpected_errors(tmp_path: Path, monkeypatch) -> None:
    def broken(directory, options):
        raise UnicodeDecodeError("utf-8", b"\xe9", 0, 1, "invalid continuation byte")

    monkeypatch.setattr(gui_workers, "analyze_directory", broken)
    worker = PlanWorker(tmp_path, CASE_SENSITIVE)
    finished, errors = _collect(worker)

    worker.run()

    assert finished == []
    assert "invalid continuation byte" in errors[0]


def test_rename_worker_reports_unexpected_errors(tmp_path: Path, monkeypatch) -> None:
    def broken(plan, confirm, progress_callback=None, options=None):
        raise ValueError("Plan has no directory, can't execute it")

    monkeypatch.setattr(gui_workers, "execute_plan", broken)
    worker = RenameWorker(DirectoryPlan(), CASE_SENSITIVE)
    finished, errors = _collect(worker)

    worker.run()

    assert finished == []
    assert errors == ["Plan has no directory, can't execute it"]


def test_rename_worker_renames(tmp_path: Path) -> None:
    for name in ["a (1).jpg", "a (10).jpg"]:
        (tmp_path / name).write_bytes(b"x")
    plan = analyze_directory(tmp_path, CASE_SENSITIVE)
    worker = RenameWorker(plan, CASE_SENSITIVE)
    finished, errors = _collect(worker)

    worker.run()

    assert errors == []
    assert finished[0].success_count == 1
    assert (tmp_path / "a (01).jpg").exists()
