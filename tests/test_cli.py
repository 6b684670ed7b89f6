"""Tests for the text interface."""

import io

import pytest

from chessrules import cli
from chessrules.core.board import Board
from chessrules.game.engine import ChessEngine


def _run(*commands: str, use_ascii: bool = True) -> tuple[ChessEngine, str]:
    engine = ChessEngine()
    out = io.StringIO()
    cli.run(engine, list(commands), out, use_ascii=use_ascii)
    return engine, out.getvalue()


class TestRenderBoard:
    def test_ascii_start(self) -> None:
        text = cli.render_board(Board.initial().grid(), use_ascii=True)
        lines = text.splitlines()
        assert lines[1] == "8 | r  n  b  q  k  b  n  r |"
        assert lines[8] == "1 | R  N  B  Q  K  B  N  R |"
        assert lines[-1].split() == list("abcdefgh")

    def test_unicode_glyphs(self) -> None:
        text = cli.render_board(Board.initial().grid())
        assert "♔" in text
        assert "♟" in text


class TestRun:
    def test_move_then_quit(self) -> None:
        engine, text = _run("e2e4", "quit", "e7e5")
        assert "♙ e2 – e4" in text
        assert "black to move" in text
        assert text.rstrip().endswith("Goodbye.")
        assert len(engine.history()) == 1

    def test_illegal_and_garbage_input(self) -> None:
        engine, text = _run("e2e5", "castle now", "", "e2")
        assert text.count("Illegal move, try again.") == 1
        assert text.count("Please enter moves like e2e4") == 2
        assert engine.history() == []

    def test_undo(self) -> None:
        engine, text = _run("undo", "d2d4", "undo")
        assert "Nothing to undo." in text
        assert engine.history() == []

    def test_moves_for_square(self) -> None:
        _, text = _run("moves e2")
        assert "e2e3 e2e4" in text

    def test_moves_on_empty_square(self) -> None:
        _, text = _run("moves e4")
        assert "No legal moves." in text

    def test_checkmate_by_white(self) -> None:
        _, text = _run("e2e4", "f7f6", "d2d4", "g7g5", "d1h5")
        assert "♕ d1 – h5 #" in text
        assert "Checkmate! white wins." in text

    def test_fools_mate_resets(self) -> None:
        engine, text = _run("f2f3", "e7e5", "g2g4", "d8h4")
        assert "Checkmate! black wins." in text
        assert engine.history() == []
        assert "white to move" in text.splitlines()[-2]

    def test_help(self) -> None:
        _, text = _run("help")
        assert "moves [sq]" in text


class TestMain:
    def test_main_reads_stdin(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("e2e4\ne7e5\nexit\n"))
        assert cli.main(["--ascii"]) == 0
        out = capsys.readouterr().out
        assert "♟ e7 – e5" in out
        assert "white to move" in out

    def test_rejects_unknown_log_level(self) -> None:
        with pytest.raises(SystemExit):
            cli.main(["--log-level", "LOUD"])
