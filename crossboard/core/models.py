"""Data models for levels, boards and verification verdicts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from .constants import CELL_KEY_SEPARATOR, Direction


WordId = Union[int, str]


@dataclass(frozen=True)
class Coord:
    """Integer grid coordinate with structural equality."""

    x: int
    y: int

    @property
    def key(self) -> str:
        """Wire key used by submissions, e.g. ``"3,0"``."""
        return f"{self.x}{CELL_KEY_SEPARATOR}{self.y}"

    def offset(self, index: int, direction: Direction) -> "Coord":
        dx, dy = direction.step
        return Coord(self.x + dx * index, self.y + dy * index)


@dataclass(frozen=True)
class WordPlacement:
    """An authored word: where it starts, which way it runs, and its answer."""

    id: WordId
    direction: Direction
    start_pos: Coord
    length: int
    answer: str
    clue: str = ""

    @property
    def cells(self) -> List[Coord]:
        return [self.start_pos.offset(i, self.direction) for i in range(self.length)]


@dataclass(frozen=True)
class Level:
    level_id: int
    theme: str
    difficulty: str
    words: Tuple[WordPlacement, ...] = ()

    def summary(self) -> "LevelSummary":
        return LevelSummary(level_id=self.level_id, theme=self.theme, difficulty=self.difficulty)


@dataclass(frozen=True)
class LevelSummary:
    level_id: int
    theme: str
    difficulty: str


@dataclass
class Cell:
    """A board cell and every word that passes through it."""

    x: int
    y: int
    letters: List[str] = field(default_factory=list)
    word_ids: List[WordId] = field(default_factory=list)
    is_cross: bool = False

    @property
    def coord(self) -> Coord:
        return Coord(self.x, self.y)

    @property
    def key(self) -> str:
        return self.coord.key


@dataclass(frozen=True)
class Bounds:
    """Inclusive rectangle covering every occupied cell."""

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    @property
    def width(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def height(self) -> int:
        return self.max_y - self.min_y + 1


@dataclass(frozen=True)
class PlacedWord:
    """A placement enriched with the coordinates it occupies."""

    placement: WordPlacement
    cells: Tuple[Coord, ...]

    @property
    def id(self) -> WordId:
        return self.placement.id


@dataclass
class Board:
    cells: Dict[Coord, Cell]
    words: List[PlacedWord]
    bounds: Bounds

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def cell(self, coord: Coord) -> Optional[Cell]:
        return self.cells.get(coord)

    def solution(self) -> Dict[str, str]:
        """Canonical lower-cased letter per cell key, in cell creation order."""
        return {cell.key: cell.letters[0].lower() for cell in self.cells.values()}


@dataclass(frozen=True)
class WordClue:
    """What the player sees of a word: geometry and clue, never the answer."""

    id: WordId
    direction: Direction
    length: int
    clue: str
    start_pos: Coord

    @classmethod
    def from_placement(cls, placement: WordPlacement) -> "WordClue":
        return cls(
            id=placement.id,
            direction=placement.direction,
            length=placement.length,
            clue=placement.clue,
            start_pos=placement.start_pos,
        )


@dataclass(frozen=True)
class CellLayout:
    """Occupancy of a cell without its letter."""

    x: int
    y: int
    word_ids: Tuple[WordId, ...]
    is_cross: bool

    @property
    def coord(self) -> Coord:
        return Coord(self.x, self.y)


@dataclass(frozen=True)
class WordLayout:
    clue: WordClue
    cells: Tuple[Coord, ...]

    @property
    def id(self) -> WordId:
        return self.clue.id


@dataclass
class BoardLayout:
    """The geometry of a board as served to players. Holds no letters."""

    cells: Dict[Coord, CellLayout]
    words: List[WordLayout]
    bounds: Bounds

    @property
    def width(self) -> int:
        return self.bounds.width

    @property
    def height(self) -> int:
        return self.bounds.height

    def cell(self, coord: Coord) -> Optional[CellLayout]:
        return self.cells.get(coord)

    @classmethod
    def from_board(cls, board: Board) -> "BoardLayout":
        cells = {
            coord: CellLayout(x=cell.x, y=cell.y, word_ids=tuple(cell.word_ids), is_cross=cell.is_cross)
            for coord, cell in board.cells.items()
        }
        words = [
            WordLayout(clue=WordClue.from_placement(word.placement), cells=word.cells)
            for word in board.words
        ]
        return cls(cells=cells, words=words, bounds=board.bounds)


@dataclass
class BoardView:
    level_id: int
    theme: str
    difficulty: str
    board: BoardLayout
    words: List[WordClue]


@dataclass(frozen=True)
class CellVerdict:
    correct: bool
    expected: str


@dataclass
class VerificationResult:
    correct: bool
    details: Dict[str, CellVerdict] = field(default_factory=dict)
    message: Optional[str] = None
    missing_cells: List[str] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return not self.missing_cells
