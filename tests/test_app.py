"""Tests for command-line parsing in the application entry point."""

from __future__ import annotations

import pytest

from gambit import app
from gambit.core.enums import Color


def test_parser_defaults() -> None:
    args = app.build_parser().parse_args([])
    assert args.fen is None
    assert args.black_first is False
    assert args.theme == "Classic"
    assert args.language == "English"
    assert args.log_level == "INFO"


def test_parser_rejects_unknown_theme() -> None:
    with pytest.raises(SystemExit):
        app.build_parser().parse_args(["--theme", "Neon"])


def test_main_rejects_bad_fen(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "gambit.ui.bootstrap.run_application",
        lambda *a, **kw: pytest.fail("should not start the UI"),
    )
    with pytest.raises(SystemExit) as exc:
        app.main(["--fen", "8/8/8"])
    assert exc.value.code == 2


def test_main_passes_options_to_application(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []

    def fake_run(argv: list[str], **kwargs: object) -> int:
        calls.append(kwargs)
        return 0

    monkeypatch.setattr("gambit.ui.bootstrap.run_application", fake_run)
    with pytest.raises(SystemExit) as exc:
        app.main(["--fen", "4k3/8/8/8/8/8/8/4K3", "--black-first", "--theme", "Slate"])

    assert exc.value.code == 0
    (kwargs,) = calls
    assert kwargs["placement"] == "4k3/8/8/8/8/8/8/4K3"
    assert kwargs["side_to_move"] == Color.BLACK
    assert kwargs["settings"].board_theme == "Slate"  # type: ignore[attr-defined]
