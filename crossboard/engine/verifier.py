"""Deterministic verification of a player's filled-cell submission."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

from ..core.constants import MISSING_CELLS_MESSAGE
from ..core.models import CellVerdict, Level, VerificationResult
from ..utils.logger import get_logger
from .board import build_board


LOGGER = get_logger(__name__)

Submission = Mapping[str, Optional[str]]


def verify(level: Level, submission: Submission) -> VerificationResult:
    """Check ``submission`` against the solution of a freshly built board.

    The board is always rebuilt from ``level``; geometry sent by a client is
    never consulted. An incomplete submission short-circuits with the list of
    missing cell keys and no per-cell details. Keys outside the board are
    ignored.
    """

    solution = build_board(level).solution()

    missing = find_missing_cells(solution, submission)
    if missing:
        LOGGER.debug("Level %s: %d cells missing", level.level_id, len(missing))
        return VerificationResult(
            correct=False,
            details={},
            message=MISSING_CELLS_MESSAGE.format(cells=", ".join(missing)),
            missing_cells=missing,
        )

    details: Dict[str, CellVerdict] = {}
    for key, expected in solution.items():
        entered = _normalize(submission.get(key))
        details[key] = CellVerdict(correct=entered == expected, expected=expected)

    correct = all(verdict.correct for verdict in details.values())
    LOGGER.debug(
        "Level %s: %d/%d cells correct",
        level.level_id,
        sum(1 for verdict in details.values() if verdict.correct),
        len(details),
    )
    return VerificationResult(correct=correct, details=details)


def find_missing_cells(solution: Mapping[str, str], submission: Submission) -> List[str]:
    """Return required keys that are absent or blank, in board order."""
    return [key for key in solution if not _normalize(submission.get(key))]


def _normalize(value: Optional[str]) -> str:
    if value is None:
        return ""
    return str(value).strip().lower()
