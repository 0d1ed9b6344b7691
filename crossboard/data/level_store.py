"""Level stores backed by a ``levels.json`` document.

The document has the shape ``{"levels": [{"levelId", "theme", "difficulty",
"words": [...]}]}``. Stores never cache: every call re-reads the source so
that edits to the level file are picked up by the next request and no board
state outlives a single call.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

import requests

from ..core.constants import Direction
from ..core.exceptions import LevelLoadError, LevelNotFoundError
from ..core.models import Coord, Level, LevelSummary, WordPlacement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

DEFAULT_LEVELS_PATH = Path(__file__).with_name("levels.json")


class LevelStore(Protocol):
    def list_levels(self) -> List[LevelSummary]:
        ...

    def get_level(self, level_id: int) -> Level:
        ...


@dataclass
class LevelStoreConfig:
    """Where levels come from. Environment variables override the defaults."""

    path: Path | str | None = None
    url: Optional[str] = None
    timeout_seconds: float = 10.0
    path_env: str = "CROSSBOARD_LEVELS"
    url_env: str = "CROSSBOARD_LEVELS_URL"

    def resolved_url(self) -> Optional[str]:
        return self.url or os.environ.get(self.url_env) or None

    def resolved_path(self) -> Path:
        if self.path is not None:
            return Path(self.path)
        return Path(os.environ.get(self.path_env, DEFAULT_LEVELS_PATH))


def resolve_store(config: Optional[LevelStoreConfig] = None) -> "LevelStore":
    """Build the store selected by ``config``: HTTP when a URL is set, else a file."""

    config = config or LevelStoreConfig()
    url = config.resolved_url()
    if url:
        LOGGER.debug("Using HTTP level store at %s", url)
        return HttpLevelStore(url, timeout_seconds=config.timeout_seconds)
    path = config.resolved_path()
    LOGGER.debug("Using JSON level store at %s", path)
    return JsonLevelStore(path)


class _DocumentLevelStore:
    """Shared lookup logic over a freshly loaded levels document."""

    def _load_document(self) -> Dict[str, Any]:
        raise NotImplementedError

    def load_levels(self) -> List[Level]:
        return parse_levels_document(self._load_document())

    def list_levels(self) -> List[LevelSummary]:
        return [level.summary() for level in self.load_levels()]

    def get_level(self, level_id: int) -> Level:
        for level in self.load_levels():
            if level.level_id == level_id:
                return level
        raise LevelNotFoundError(level_id)


class JsonLevelStore(_DocumentLevelStore):
    """Reads levels from a JSON file on every call."""

    def __init__(self, path: Path | str = DEFAULT_LEVELS_PATH) -> None:
        self.path = Path(path)

    def _load_document(self) -> Dict[str, Any]:
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise LevelLoadError(f"Cannot read level file {self.path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise LevelLoadError(f"Level file {self.path} is not valid UTF-8: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise LevelLoadError(f"Invalid JSON in level file {self.path}: {exc}") from exc


class HttpLevelStore(_DocumentLevelStore):
    """Fetches the levels document over HTTP on every call."""

    def __init__(self, url: str, timeout_seconds: float = 10.0) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds

    def _load_document(self) -> Dict[str, Any]:
        try:
            response = requests.get(self.url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise LevelLoadError(f"Level request failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            LOGGER.warning("Level response from %s is not JSON", self.url)
            raise LevelLoadError(f"Invalid JSON from {self.url}: {exc}") from exc


# ----------------------------------------------------------------------
# Document parsing
# ----------------------------------------------------------------------

def parse_levels_document(doc: Any) -> List[Level]:
    if not isinstance(doc, dict) or not isinstance(doc.get("levels"), list):
        raise LevelLoadError("Level document must be an object with a 'levels' list")
    return [parse_level(entry) for entry in doc["levels"]]


def parse_level(entry: Dict[str, Any]) -> Level:
    try:
        level_id = _expect(entry["levelId"], int, "levelId")
        words = tuple(parse_word(word, level_id) for word in entry["words"])
        return Level(
            level_id=level_id,
            theme=_expect(entry.get("theme", ""), str, "theme"),
            difficulty=_expect(entry.get("difficulty", ""), str, "difficulty"),
            words=words,
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise LevelLoadError(f"Malformed level entry {entry!r}: {exc}") from exc


def parse_word(entry: Dict[str, Any], level_id: int) -> WordPlacement:
    start = entry["startPos"]
    length = _expect(entry["length"], int, "length")
    if length <= 0:
        raise ValueError(f"word {entry.get('id')} in level {level_id} has non-positive length {length}")
    return WordPlacement(
        id=_expect(entry["id"], (int, str), "id"),
        direction=Direction.parse(_expect(entry["direction"], str, "direction")),
        start_pos=Coord(_expect(start["x"], int, "startPos.x"), _expect(start["y"], int, "startPos.y")),
        length=length,
        answer=_expect(entry["answer"], str, "answer"),
        clue=_expect(entry.get("clue", ""), str, "clue"),
    )


def _expect(value: Any, types, name: str) -> Any:
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, types):
        raise TypeError(f"'{name}' has unexpected type {type(value).__name__}: {value!r}")
    return value
