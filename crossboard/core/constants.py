"""Shared constants and enumerations for board construction."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Word directions supported by the board."""

    ACROSS = "Across"
    DOWN = "Down"

    @classmethod
    def parse(cls, value: str) -> "Direction":
        """Parse a direction label, ignoring case (``"across"``, ``"DOWN"``...)."""

        for member in cls:
            if member.value.lower() == str(value).strip().lower():
                return member
        raise ValueError(f"Unknown direction: {value!r}")

    @property
    def step(self) -> Tuple[int, int]:
        return (1, 0) if self is Direction.ACROSS else (0, 1)


CELL_KEY_SEPARATOR = ","

MISSING_CELLS_MESSAGE = "Please fill in all required cells! Missing cells: {cells}"
