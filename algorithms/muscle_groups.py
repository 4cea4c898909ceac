from __future__ import annotations
import logging
import os
from typing import Iterable, Mapping, Optional

import yaml

logger = logging.getLogger(__name__)

MUSCLE_GROUPS: tuple[str, ...] = (
    "chest",
    "back",
    "shoulders",
    "legs",
    "arms",
    "abs",
    "glutes",
    "calves",
)

DEFAULT_CATALOG_PATH = os.path.join(os.path.dirname(__file__), "exercise_catalog.yaml")


class MuscleGroupClassifier:
    """Map free-text exercise names to a single muscle group.

    Both tables are supplied by the caller and never mutated. Lookup is an
    exact, case-insensitive catalog match first, then the first keyword
    contained in the name. Anything else is unclassified.
    """

    def __init__(
        self,
        catalog: Mapping[str, str],
        keywords: Iterable[tuple[str, str]] = (),
    ) -> None:
        self._catalog: dict[str, str] = {}
        for name, group in catalog.items():
            if group in MUSCLE_GROUPS:
                self._catalog[name.strip().lower()] = group
        self._keywords: tuple[tuple[str, str], ...] = tuple(
            (kw.lower(), group) for kw, group in keywords if group in MUSCLE_GROUPS
        )

    def classify(self, exercise_name: str) -> Optional[str]:
        normalized = exercise_name.strip().lower()
        group = self._catalog.get(normalized)
        if group is not None:
            return group
        for keyword, kw_group in self._keywords:
            if keyword in normalized:
                return kw_group
        return None



def load_catalog(path: str | None = None) -> tuple[dict[str, str], list[tuple[str, str]]]:
    """Read the exercise catalog and keyword table from a YAML file."""
    path = path or DEFAULT_CATALOG_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    exercises = {str(k): str(v) for k, v in (data.get("exercises") or {}).items()}
    keywords = [(str(k), str(g)) for k, g in (data.get("keywords") or [])]
    logger.debug(
        "Loaded %d catalog exercises and %d keywords from %s",
        len(exercises),
        len(keywords),
        path,
    )
    return exercises, keywords


def default_classifier(path: str | None = None) -> MuscleGroupClassifier:
    exercises, keywords = load_catalog(path)
    return MuscleGroupClassifier(exercises, keywords)
