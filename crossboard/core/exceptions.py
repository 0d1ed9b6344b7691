"""Custom exception hierarchy for board construction and level loading."""

from __future__ import annotations

from typing import Sequence


class CrosswordError(Exception):
    """Base exception for crossboard failures."""


class LevelDataError(CrosswordError):
    """Raised when authored level data is malformed. Never retried."""


class LengthMismatchError(LevelDataError):
    """Raised when a word's answer does not match its declared length."""

    def __init__(self, word_id, answer: str, actual: int, declared: int) -> None:
        self.word_id = word_id
        self.answer = answer
        self.actual = actual
        self.declared = declared
        super().__init__(
            f"Word {word_id} answer '{answer}' has {actual} letters "
            f"but declares length {declared}"
        )


class CrossLetterConflictError(LevelDataError):
    """Raised when crossing words claim different letters for one cell."""

    def __init__(self, x: int, y: int, letters: Sequence[str]) -> None:
        self.x = x
        self.y = y
        self.letters = list(letters)
        super().__init__(
            f"Letter mismatch at position ({x},{y}): {', '.join(self.letters)}"
        )


class EmptyBoardError(LevelDataError):
    """Raised when a level yields no cells, so bounds cannot be computed."""


class LevelLoadError(LevelDataError):
    """Raised when the level document cannot be read or parsed."""


class LevelNotFoundError(CrosswordError):
    """Raised when the requested level id is absent from the store."""

    def __init__(self, level_id) -> None:
        self.level_id = level_id
        super().__init__(f"Level not found: {level_id}")
