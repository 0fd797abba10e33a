"""Integration tests: fileguide list."""

from __future__ import annotations

import pytest

from fileguide.commands.list_cmd import run as list_run


def test_list_all(capsys: pytest.CaptureFixture) -> None:
    list_run(type("Args", (), {"topic": None})())
    out = capsys.readouterr().out
    for heading in ("formats:", "handling:", "exercises:"):
        assert heading in out
    assert "parquet" in out
    assert "exercise-7" in out


def test_list_one_topic(capsys: pytest.CaptureFixture) -> None:
    list_run(type("Args", (), {"topic": "handling"})())
    out = capsys.readouterr().out
    assert "context-managers" in out
    assert "formats:" not in out
    assert "exercise-1" not in out


def test_list_unknown_topic(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as exc_info:
        list_run(type("Args", (), {"topic": "cooking"})())
    assert exc_info.value.code == 1
    assert "unknown topic" in capsys.readouterr().err
