"""Board construction from authored word placements."""

from __future__ import annotations

from typing import Dict, List

from ..core.exceptions import CrossLetterConflictError, EmptyBoardError, LengthMismatchError
from ..core.models import Board, Bounds, Cell, Coord, Level, PlacedWord, WordPlacement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def build_board(level: Level) -> Board:
    """Derive the board for ``level``.

    Words are laid down in authored order. Each cell accumulates the letter
    and id of every word crossing it; crossing words must agree on the letter
    (compared case-sensitively, as authored).

    Raises:
        LengthMismatchError: an answer's length differs from its declaration.
        CrossLetterConflictError: crossing words disagree at a cell.
        EmptyBoardError: the level has no words.
    """

    cells: Dict[Coord, Cell] = {}
    placed: List[PlacedWord] = []

    for word in level.words:
        letters = _split_answer(word)
        coords = word.cells
        for coord, letter in zip(coords, letters):
            cell = cells.get(coord)
            if cell is None:
                cell = Cell(x=coord.x, y=coord.y)
                cells[coord] = cell
            cell.letters.append(letter)
            cell.word_ids.append(word.id)
            if len(cell.letters) > 1:
                if any(other != cell.letters[0] for other in cell.letters):
                    raise CrossLetterConflictError(coord.x, coord.y, cell.letters)
                cell.is_cross = True
        placed.append(PlacedWord(placement=word, cells=tuple(coords)))

    bounds = compute_bounds(cells)
    LOGGER.debug(
        "Level %s: %d words, %d cells, bounds %s",
        level.level_id,
        len(placed),
        len(cells),
        bounds,
    )
    return Board(cells=cells, words=placed, bounds=bounds)


def compute_bounds(cells: Dict[Coord, Cell]) -> Bounds:
    if not cells:
        raise EmptyBoardError(
            "Unable to calculate board boundaries: level declares no word cells"
        )
    xs = [coord.x for coord in cells]
    ys = [coord.y for coord in cells]
    return Bounds(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))


def _split_answer(word: WordPlacement) -> List[str]:
    letters = list(word.answer)
    if len(letters) != word.length:
        raise LengthMismatchError(word.id, word.answer, len(letters), word.length)
    return letters
