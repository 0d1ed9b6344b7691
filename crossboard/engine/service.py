"""Level-facing operations: list levels, serve boards, verify answers.

Each call reads the level from the store and rebuilds its board. Nothing is
cached, so a verification never relies on a board handed out earlier.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.exceptions import LevelDataError
from ..core.models import Board, BoardLayout, BoardView, LevelSummary, VerificationResult, WordClue
from ..data.level_store import LevelStore
from ..utils.logger import get_logger
from .board import build_board
from .verifier import Submission, verify


LOGGER = get_logger(__name__)


@dataclass
class CheckReport:
    ok: bool
    messages: List[str]


class LevelService:
    """Maps the board builder and verifier onto a level store."""

    def __init__(self, store: LevelStore) -> None:
        self.store = store

    def list_levels(self) -> List[LevelSummary]:
        return self.store.list_levels()

    def get_board(self, level_id: int) -> BoardView:
        level = self.store.get_level(level_id)
        board = build_board(level)
        LOGGER.info(
            "Serving level %s (%dx%d, %d cells)",
            level_id,
            board.width,
            board.height,
            len(board.cells),
        )
        return BoardView(
            level_id=level.level_id,
            theme=level.theme,
            difficulty=level.difficulty,
            board=BoardLayout.from_board(board),
            words=[WordClue.from_placement(word) for word in level.words],
        )

    def get_solution(self, level_id: int) -> Board:
        """Full board including letters, for level authors. Never served to players."""
        return build_board(self.store.get_level(level_id))

    def verify_answers(self, level_id: int, submission: Submission) -> VerificationResult:
        level = self.store.get_level(level_id)
        result = verify(level, submission)
        if result.missing_cells:
            LOGGER.info("Level %s: incomplete submission (%d missing)", level_id, len(result.missing_cells))
        else:
            LOGGER.info("Level %s verified: correct=%s", level_id, result.correct)
        return result

    def check_levels(self) -> CheckReport:
        """Build every level in the store and collect authoring errors."""

        messages: List[str] = []
        for summary in self.store.list_levels():
            try:
                build_board(self.store.get_level(summary.level_id))
            except LevelDataError as exc:
                LOGGER.error("Level %s failed to build: %s", summary.level_id, exc)
                messages.append(f"Level {summary.level_id}: {exc}")
        return CheckReport(ok=not messages, messages=messages)
