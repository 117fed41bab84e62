"""
Static exercise catalog.

The exercise dataset is a JSON array loaded once at startup and kept as an
immutable tuple for the life of the process. A missing or broken file yields
an empty catalog rather than preventing the service from starting.
"""
import json
import logging
import pathlib
import re
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple, Union

from backend.settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 100


def load_exercises(path: Union[str, pathlib.Path]) -> Tuple[Dict[str, Any], ...]:
    """
    Load the exercise dataset from a JSON file.

    Args:
        path: Path to a JSON file holding an array of exercise objects

    Returns:
        Tuple of exercise dicts, empty if the file can't be read or parsed
    """
    try:
        data = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error reading or parsing {path}: {e}")
        return ()

    if not isinstance(data, list):
        logger.error(f"Error reading {path}: expected a JSON array, got {type(data).__name__}")
        return ()

    exercises = tuple(ex for ex in data if isinstance(ex, dict))
    logger.info(f"Successfully loaded {len(exercises)} exercises.")
    return exercises


LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_int(value: Any, default: int) -> int:
    # Same as `parseInt(x) || default`: leading digits count, 0 and junk fall back.
    match = LEADING_INT.match(str(value)) if value is not None else None
    parsed = int(match.group(1)) if match else 0
    return parsed or default


class ExerciseCatalog:
    """Read-only queries over the loaded exercise list."""

    def __init__(self, exercises: Tuple[Dict[str, Any], ...] = ()):
        self._exercises = tuple(exercises)

    def __len__(self) -> int:
        return len(self._exercises)

    def page(self, page: Any = None, limit: Any = None) -> List[Dict[str, Any]]:
        """
        Return one page of exercises.

        Pages are 1-based and values are read like JavaScript's parseInt:
        "2abc" is 2 and "1.5" is 1. Missing, unparsable or zero values fall
        back to page 1 and a limit of 100. Negative values are kept and
        index from the end, so limit=-5 on page 1 drops the last five.
        """
        page = _parse_int(page, DEFAULT_PAGE)
        limit = _parse_int(limit, DEFAULT_LIMIT)
        start = (page - 1) * limit
        return list(self._exercises[start:page * limit])

    def body_parts(self) -> List[str]:
        """Distinct body parts in first-seen order."""
        seen: Dict[str, None] = {}
        for ex in self._exercises:
            part = ex.get("bodyPart")
            if part is not None:
                seen.setdefault(part, None)
        return list(seen)

    def by_body_part(self, part: str) -> List[Dict[str, Any]]:
        """Exercises whose body part equals ``part``, ignoring case."""
        wanted = part.lower()
        return [
            ex for ex in self._exercises
            if isinstance(ex.get("bodyPart"), str) and ex["bodyPart"].lower() == wanted
        ]


@lru_cache
def get_exercise_catalog(path: Optional[str] = None) -> ExerciseCatalog:
    """
    Get the process-wide exercise catalog (cached).

    Args:
        path: Dataset path override; defaults to Settings.exercises_path

    Returns:
        ExerciseCatalog built from the dataset
    """
    if path is None:
        path = get_settings().exercises_path
    return ExerciseCatalog(load_exercises(path))
