import unittest

from crossboard.core.constants import Direction
from crossboard.core.exceptions import (
    CrossLetterConflictError,
    EmptyBoardError,
    LengthMismatchError,
    LevelDataError,
)
from crossboard.core.models import Coord, Level, WordPlacement
from crossboard.engine.board import build_board


def word(word_id, direction, x, y, answer, length=None, clue=""):
    return WordPlacement(
        id=word_id,
        direction=direction,
        start_pos=Coord(x, y),
        length=len(answer) if length is None else length,
        answer=answer,
        clue=clue,
    )


def level(*words):
    return Level(level_id=1, theme="Test", difficulty="Easy", words=tuple(words))


class BoardGeometryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.level = level(
            word(1, Direction.ACROSS, 0, 0, "CAT"),
            word(2, Direction.DOWN, 0, 0, "CAR"),
        )

    def test_crossing_words_share_start_cell(self) -> None:
        board = build_board(self.level)
        origin = board.cell(Coord(0, 0))
        assert origin is not None
        self.assertEqual(origin.letters, ["C", "C"])
        self.assertEqual(origin.word_ids, [1, 2])
        self.assertTrue(origin.is_cross)

    def test_bounds_and_dimensions(self) -> None:
        board = build_board(self.level)
        self.assertEqual(
            (board.bounds.min_x, board.bounds.min_y, board.bounds.max_x, board.bounds.max_y),
            (0, 0, 2, 2),
        )
        self.assertEqual(board.width, 3)
        self.assertEqual(board.height, 3)
        self.assertEqual(len(board.cells), 5)

    def test_is_cross_matches_word_count(self) -> None:
        board = build_board(self.level)
        for cell in board.cells.values():
            self.assertEqual(cell.is_cross, len(cell.word_ids) > 1)

    def test_words_carry_ordered_coordinates(self) -> None:
        board = build_board(self.level)
        across, down = board.words
        self.assertEqual(list(across.cells), [Coord(0, 0), Coord(1, 0), Coord(2, 0)])
        self.assertEqual(list(down.cells), [Coord(0, 0), Coord(0, 1), Coord(0, 2)])
        self.assertEqual(across.placement.answer, "CAT")

    def test_cells_follow_word_then_index_order(self) -> None:
        board = build_board(self.level)
        self.assertEqual(
            list(board.cells),
            [Coord(0, 0), Coord(1, 0), Coord(2, 0), Coord(0, 1), Coord(0, 2)],
        )

    def test_build_is_deterministic(self) -> None:
        first = build_board(self.level)
        second = build_board(self.level)
        self.assertEqual(first.cells, second.cells)
        self.assertEqual(first.bounds, second.bounds)
        self.assertEqual((first.width, first.height), (second.width, second.height))

    def test_negative_coordinates_shift_bounds(self) -> None:
        board = build_board(
            level(
                word("a", Direction.ACROSS, -2, 3, "SUN"),
                word("b", Direction.DOWN, -1, 1, "YOU"),
            )
        )
        self.assertEqual(board.bounds.min_x, -2)
        self.assertEqual(board.bounds.min_y, 1)
        self.assertEqual(board.width, 3)
        self.assertEqual(board.height, 3)
        self.assertTrue(board.cell(Coord(-1, 3)).is_cross)

    def test_single_letter_word_has_unit_size(self) -> None:
        board = build_board(level(word(1, Direction.DOWN, 4, 7, "A")))
        self.assertEqual((board.width, board.height), (1, 1))

    def test_solution_is_lowercased_first_letter(self) -> None:
        board = build_board(self.level)
        self.assertEqual(
            board.solution(),
            {"0,0": "c", "1,0": "a", "2,0": "t", "0,1": "a", "0,2": "r"},
        )


class BoardAuthoringErrorTests(unittest.TestCase):
    def test_conflicting_cross_letters_raise(self) -> None:
        bad = level(
            word(1, Direction.ACROSS, 0, 0, "CAT"),
            word(2, Direction.DOWN, 0, 0, "DOG"),
        )
        with self.assertRaises(CrossLetterConflictError) as ctx:
            build_board(bad)
        self.assertEqual((ctx.exception.x, ctx.exception.y), (0, 0))
        self.assertEqual(ctx.exception.letters, ["C", "D"])
        self.assertIn("(0,0)", str(ctx.exception))

    def test_cross_check_is_case_sensitive(self) -> None:
        bad = level(
            word(1, Direction.ACROSS, 0, 0, "CAT"),
            word(2, Direction.DOWN, 0, 0, "cow"),
        )
        with self.assertRaises(CrossLetterConflictError):
            build_board(bad)

    def test_length_mismatch_names_word(self) -> None:
        bad = level(word(7, Direction.ACROSS, 0, 0, "CAT", length=4))
        with self.assertRaises(LengthMismatchError) as ctx:
            build_board(bad)
        self.assertEqual(ctx.exception.word_id, 7)
        self.assertEqual(ctx.exception.actual, 3)
        self.assertEqual(ctx.exception.declared, 4)
        self.assertIn("CAT", str(ctx.exception))

    def test_empty_level_raises(self) -> None:
        with self.assertRaises(EmptyBoardError):
            build_board(level())

    def test_authoring_errors_share_base(self) -> None:
        for error in (CrossLetterConflictError, LengthMismatchError, EmptyBoardError):
            self.assertTrue(issubclass(error, LevelDataError))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
