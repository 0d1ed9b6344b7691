"""Pretty-print helpers for derived boards."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional

from ..core.models import Coord

if TYPE_CHECKING:
    from ..core.models import Board, BoardLayout, Cell, CellLayout, VerificationResult


HIDDEN = "_"
VOID = "#"


def cell_symbol(cell: Optional[Cell | CellLayout], *, reveal: bool = False) -> str:
    if cell is None:
        return VOID
    if reveal:
        return cell.letters[0]
    return HIDDEN


def format_board(board: Board | BoardLayout, *, reveal: bool = False) -> str:
    """Draw the board. ``reveal`` needs a full :class:`Board`; layouts carry no letters."""
    bounds = board.bounds
    header_cells = [f"{x:>2}" for x in range(bounds.min_x, bounds.max_x + 1)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * board.width - 1))
    for y in range(bounds.min_y, bounds.max_y + 1):
        row_cells = [
            cell_symbol(board.cell(Coord(x, y)), reveal=reveal)
            for x in range(bounds.min_x, bounds.max_x + 1)
        ]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{y:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_board(board: Board | BoardLayout, *, reveal: bool = False, label: str | None = None, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_board(board, reveal=reveal), file=stream)


def print_verification(result: VerificationResult, *, stream=None) -> None:
    stream = stream or sys.stdout
    if result.message:
        print(result.message, file=stream)
        return
    wrong = [key for key, verdict in result.details.items() if not verdict.correct]
    print(f"Correct: {result.correct}", file=stream)
    print(f"  Cells:  {len(result.details) - len(wrong)}/{len(result.details)}", file=stream)
    if wrong:
        print(f"  Wrong:  {', '.join(wrong)}", file=stream)
