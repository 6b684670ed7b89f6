"""Text interface: a thin command loop over :class:`ChessEngine`."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from chessrules.core.piece import Piece
from chessrules.core.types import square_name
from chessrules.game.engine import ChessEngine

_LOGGER = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  e2e4, g7g8n   move in coordinate notation (optional promotion letter)
  moves [sq]    list legal moves (for one square, or all)
  undo          take back the last move
  reset         start a new game
  help          show this text
  quit, exit    leave"""


def render_board(grid: Sequence[Sequence[Piece | None]], use_ascii: bool = False) -> str:
    """Framed text board, rank 8 at the top."""
    lines = ["  +------------------------+"]
    for rank, row in enumerate(grid):
        cells = []
        for piece in row:
            if piece is None:
                cells.append(" . ")
            else:
                cells.append(f" {piece if use_ascii else piece.symbol} ")
        lines.append(f"{8 - rank} |{''.join(cells)}|")
    lines.append("  +------------------------+")
    lines.append("    a  b  c  d  e  f  g  h")
    return "\n".join(lines)


def run(
    engine: ChessEngine,
    commands: Iterable[str],
    out: TextIO,
    use_ascii: bool = False,
) -> None:
    """Play commands from *commands* against *engine*, writing to *out*."""

    def say(text: str) -> None:
        print(text, file=out)

    say("Enter moves in coordinate notation (e2e4). Type 'help' for commands.")
    say(render_board(engine.export_board(), use_ascii))
    for raw in commands:
        line = raw.strip().lower()
        if not line:
            continue
        if line in ("quit", "exit"):
            break

        if line == "help":
            say(HELP_TEXT)
            continue
        if line == "reset":
            engine.reset()
        elif line == "undo":
            if engine.undo() is None:
                say("Nothing to undo.")
        elif line.split()[0] == "moves":
            parts = line.split()
            square = parts[1] if len(parts) > 1 else None
            moves = engine.legal_moves(square)
            say(" ".join(str(m) for m in moves) if moves else "No legal moves.")
            continue
        elif len(line) in (4, 5):
            promotion = line[4] if len(line) == 5 else None
            record = engine.make_move(line[0:2], line[2:4], promotion)
            if record is None:
                say("Illegal move, try again.")
                continue
            say(record.notation)
            if record.checkmate:
                say(f"Checkmate! {record.color} wins.")
                engine.reset()
            elif record.draw:
                say(f"Draw by {record.draw_reason}.")
                engine.reset()
        else:
            say("Please enter moves like e2e4 or g7g8q for promotion.")
            continue

        say(render_board(engine.export_board(), use_ascii))
        turn = engine.current_turn()
        check = " (check)" if engine.is_in_check() else ""
        say(f"{turn} to move{check}")
    say("Goodbye.")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chessrules",
        description="Play chess in the terminal against another human.",
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="draw pieces as letters instead of Unicode glyphs",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Console entry point."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )
    engine = ChessEngine()
    engine.events.on_move.append(
        lambda record: _LOGGER.info(
            "%d. %s %s-%s",
            record.fullmove_number,
            record.color,
            square_name(record.from_sq),
            square_name(record.to_sq),
        )
    )
    run(engine, sys.stdin, sys.stdout, use_ascii=args.ascii)
    return 0


if __name__ == "__main__":
    sys.exit(main())
