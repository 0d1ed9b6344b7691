"""JSON-ready payloads for level summaries, board views and verdicts.

Payloads use the camelCase field names the presentation layer expects
(``levelId``, ``startPos``, ``wordIds``...). Answers are never serialized;
cell letters are only included when a solution board is passed explicitly.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..core.models import Board, BoardLayout, BoardView, Coord, LevelSummary, VerificationResult, WordClue


def coord_to_jsonable(coord: Coord) -> Dict[str, int]:
    return {"x": coord.x, "y": coord.y}


def level_summary_to_jsonable(summary: LevelSummary) -> Dict[str, Any]:
    return {
        "levelId": summary.level_id,
        "theme": summary.theme,
        "difficulty": summary.difficulty,
    }


def layout_to_jsonable(layout: BoardLayout) -> Dict[str, Any]:
    cells = [
        {
            "x": cell.x,
            "y": cell.y,
            "wordIds": list(cell.word_ids),
            "isCross": cell.is_cross,
        }
        for cell in layout.cells.values()
    ]

    words = [
        dict(word_clue_to_jsonable(word.clue), cells=[coord_to_jsonable(coord) for coord in word.cells])
        for word in layout.words
    ]

    return {
        "cells": cells,
        "words": words,
        "bounds": {
            "minX": layout.bounds.min_x,
            "minY": layout.bounds.min_y,
            "maxX": layout.bounds.max_x,
            "maxY": layout.bounds.max_y,
        },
        "width": layout.width,
        "height": layout.height,
    }


def board_to_jsonable(board: Board, *, reveal: bool = False) -> Dict[str, Any]:
    payload = layout_to_jsonable(BoardLayout.from_board(board))
    if reveal:
        for cell_payload, cell in zip(payload["cells"], board.cells.values()):
            cell_payload["letters"] = list(cell.letters)
    return payload


def word_clue_to_jsonable(word: WordClue) -> Dict[str, Any]:
    return {
        "id": word.id,
        "direction": word.direction.value,
        "length": word.length,
        "clue": word.clue,
        "startPos": coord_to_jsonable(word.start_pos),
    }


def board_view_to_jsonable(view: BoardView, *, solution: Optional[Board] = None) -> Dict[str, Any]:
    """Serialize a served board. Passing ``solution`` adds cell letters for authors."""
    if solution is not None:
        board = board_to_jsonable(solution, reveal=True)
    else:
        board = layout_to_jsonable(view.board)
    return {
        "levelId": view.level_id,
        "theme": view.theme,
        "difficulty": view.difficulty,
        "board": board,
        "words": [word_clue_to_jsonable(word) for word in view.words],
    }


def verification_to_jsonable(result: VerificationResult) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "correct": result.correct,
        "details": {
            key: {"correct": verdict.correct, "expected": verdict.expected}
            for key, verdict in result.details.items()
        },
    }
    if result.message is not None:
        payload["message"] = result.message
        payload["missingCells"] = list(result.missing_cells)
    return payload
