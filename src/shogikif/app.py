"""Command-line entry point: print the position of a KIF record at a move."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from shogikif.core.enums import Side
from shogikif.core.notation.kif import parse_kif
from shogikif.core.notation.labels import format_move_label
from shogikif.replay.engine import ReplayEngine

_LOGGER = logging.getLogger(__name__)

_SIDE_LABELS = {Side.FIRST: "先手", Side.SECOND: "後手"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shogikif",
        description="Replay a KIF shogi record and print the resulting position.",
    )
    parser.add_argument("file", type=Path, help="KIF file to read")
    parser.add_argument(
        "--move",
        type=int,
        default=None,
        help="move number to show (default: end of the main line)",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="text encoding of FILE (e.g. cp932 for Shift_JIS records)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    return parser


def render(engine: ReplayEngine) -> str:
    """Text block describing the engine's current position."""
    lines: list[str] = []
    for key, value in engine.header.items():
        lines.append(f"{key}：{value}")
    if lines:
        lines.append("")

    lines.append(" → ".join(engine.line_path()))
    latest = engine.latest_move
    if latest is not None:
        lines.append(f"{latest.n}手目 {format_move_label(latest)}")
    lines.append("")

    for side in (Side.SECOND, Side.FIRST):
        text = " ".join(
            f"{kind.glyph}{count if count > 1 else ''}"
            for kind, count in engine.hands.counts(side)
        )
        lines.append(f"{_SIDE_LABELS[side]}の持駒：{text or 'なし'}")
        if side == Side.SECOND:
            lines.append(repr(engine.board))

    if engine.comment:
        lines.append("")
        lines.append(engine.comment)
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        text = args.file.read_text(encoding=args.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        _LOGGER.error("Cannot read %s: %s", args.file, exc)
        return 2

    engine = ReplayEngine()
    engine.load(parse_kif(text))
    if args.move is None:
        engine.step_last()
    elif not engine.jump_to_move_number(args.move):
        _LOGGER.error("Move %d not found in %s", args.move, args.file)
        return 1

    print(render(engine))
    return 0


if __name__ == "__main__":
    sys.exit(main())
