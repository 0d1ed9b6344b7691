"""Command line interface for serving crossword levels and verifying answers."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .core.exceptions import LevelDataError, LevelNotFoundError
from .data.level_store import LevelStoreConfig, resolve_store
from .engine.service import LevelService
from .io.serialization import (
    board_view_to_jsonable,
    level_summary_to_jsonable,
    verification_to_jsonable,
)
from .utils.logger import configure_logging, get_logger, parse_log_level
from .utils.pretty import pretty_print_board, print_verification


LOGGER = get_logger(__name__)

EXIT_OK = 0
EXIT_INCORRECT = 1
EXIT_LEVEL_ERROR = 2
EXIT_NOT_FOUND = 3

DATA_ERROR_MESSAGES = {
    "levels": "Error loading levels",
    "board": "Error generating board",
    "verify": "Error verifying answer",
    "check": "Error loading levels",
}


def parse_answers_file(path: Path) -> Dict[str, Any]:
    """Read a submission: a JSON object mapping ``"x,y"`` keys to letters."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object of cell answers")
    return data


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Serve crossword boards and verify player answers",
    )
    parser.add_argument(
        "--levels",
        type=Path,
        default=None,
        help="Path to levels.json (defaults to $CROSSBOARD_LEVELS or the bundled file)",
    )
    parser.add_argument(
        "--levels-url",
        type=str,
        default=None,
        help="Fetch levels.json over HTTP instead of reading a file",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=10.0,
        help="HTTP timeout in seconds when --levels-url is used",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("levels", help="List available levels")

    board = commands.add_parser("board", help="Print the board and clues of a level")
    board.add_argument("level_id", type=int)
    board.add_argument("--render", action="store_true", help="Draw the grid instead of printing JSON")
    board.add_argument("--reveal", action="store_true", help="Include solution letters (authoring only)")

    verify = commands.add_parser("verify", help="Verify a filled-cell submission")
    verify.add_argument("level_id", type=int)
    source = verify.add_mutually_exclusive_group(required=True)
    source.add_argument("--answers", type=Path, metavar="FILE", help="JSON file with {\"x,y\": letter}")
    source.add_argument("--answers-json", type=str, metavar="JSON", help="Inline JSON submission")
    verify.add_argument("--summary", action="store_true", help="Print a short summary instead of JSON")

    commands.add_parser("check", help="Build every level and report authoring errors")
    return parser


def main(argv: list[str] | None = None, stream=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    stream = stream or sys.stdout
    configure_logging(parse_log_level(args.log_level, default=logging.WARNING))

    config = LevelStoreConfig(path=args.levels, url=args.levels_url, timeout_seconds=args.timeout)
    service = LevelService(resolve_store(config))

    level_id: Optional[int] = getattr(args, "level_id", None)
    try:
        return _dispatch(parser, args, service, stream)
    except LevelNotFoundError:
        _emit({"message": "Level not found"}, stream)
        return EXIT_NOT_FOUND
    except LevelDataError as exc:
        if level_id is None:
            LOGGER.error("Level data error during %s: %s", args.command, exc)
        else:
            LOGGER.error("Level %s data error: %s", level_id, exc)
        _emit({"message": f"{DATA_ERROR_MESSAGES[args.command]}: {exc}"}, stream)
        return EXIT_LEVEL_ERROR


def _dispatch(parser: argparse.ArgumentParser, args, service: LevelService, stream) -> int:
    if args.command == "levels":
        _emit([level_summary_to_jsonable(s) for s in service.list_levels()], stream)
        return EXIT_OK

    if args.command == "board":
        view = service.get_board(args.level_id)
        solution = service.get_solution(args.level_id) if args.reveal else None
        if args.render:
            label = f"Level {view.level_id}: {view.theme} ({view.difficulty})"
            drawn = solution if solution is not None else view.board
            pretty_print_board(drawn, reveal=solution is not None, label=label, stream=stream)
            for word in view.words:
                print(f"  {word.direction.value} {word.id}. {word.clue}", file=stream)
        else:
            _emit(board_view_to_jsonable(view, solution=solution), stream)
        return EXIT_OK

    if args.command == "verify":
        try:
            if args.answers is not None:
                submission = parse_answers_file(args.answers)
            else:
                submission = json.loads(args.answers_json)
        except (OSError, ValueError) as exc:
            parser.error(f"invalid submission: {exc}")
        if not isinstance(submission, dict):
            parser.error("submission must be a JSON object of cell answers")
        result = service.verify_answers(args.level_id, submission)
        if args.summary:
            print_verification(result, stream=stream)
        else:
            _emit(verification_to_jsonable(result), stream)
        return EXIT_OK if result.correct else EXIT_INCORRECT

    report = service.check_levels()
    for message in report.messages:
        print(message, file=stream)
    if report.ok:
        print("All levels build cleanly", file=stream)
    return EXIT_OK if report.ok else EXIT_LEVEL_ERROR


def _emit(payload: Any, stream) -> None:
    print(json.dumps(payload, ensure_ascii=False, indent=2), file=stream)
