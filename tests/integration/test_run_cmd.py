"""Integration tests: fileguide run executes every lesson and exercise demo."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from fileguide.commands.run_cmd import run as run_cmd
from fileguide.lessons import LESSONS, Lesson


def _args(name: str, workdir: Path | None = None):
    return type("Args", (), {"name": name, "workdir": workdir})()


@pytest.mark.parametrize("name", list(LESSONS))
def test_every_lesson_runs(name: str, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    run_cmd(_args(name, tmp_path / "work"))
    out, _ = capsys.readouterr()
    assert out.startswith(f"== {name}:")


def test_workdir_keeps_files(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    run_cmd(_args("json", tmp_path))
    assert (tmp_path / "person.json").is_file()
    assert "Name: Alice" in capsys.readouterr().out


def test_csv_lesson_output(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    run_cmd(_args("csv-tsv", tmp_path))
    out = capsys.readouterr().out
    assert "Alice is 20" in out
    assert "mean score 87.5" in out


def test_temporary_workdir_is_removed(capsys: pytest.CaptureFixture) -> None:
    created: list[Path] = []

    def fake_demo(workdir: Path) -> None:
        created.append(workdir)
        (workdir / "scratch.txt").write_text("x", encoding="utf-8")

    lesson = Lesson("fake", "formats", "Fake lesson.", fake_demo)
    with patch("fileguide.commands.run_cmd.get_lesson", return_value=lesson):
        run_cmd(_args("fake"))
    assert len(created) == 1
    assert not created[0].exists()


def test_unknown_lesson_exits_1(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exc_info:
        run_cmd(_args("no-such-lesson"))
    assert exc_info.value.code == 1
    assert "no lesson named 'no-such-lesson'" in capsys.readouterr().err


def test_workdir_that_is_a_file_exits_1(tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
    f = tmp_path / "file.txt"
    f.write_text("x", encoding="utf-8")
    with pytest.raises(SystemExit) as exc_info:
        run_cmd(_args("text", f))
    assert exc_info.value.code == 1
    assert "is not a directory" in capsys.readouterr().err
