from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator

from whatpicturepath.models import AddResult
from whatpicturepath.validate import is_valid_file

LOGGER = logging.getLogger(__name__)


def path_key(path: str) -> str:
    return path.casefold()


class SelectionSet:
    """Insertion-ordered, case-insensitively unique list of accepted files."""

    def __init__(self, validator: Callable[[str], bool] = is_valid_file) -> None:
        self._validator = validator
        self._paths: list[str] = []
        self._keys: set[str] = set()

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._paths))

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and path_key(path) in self._keys

    @property
    def paths(self) -> tuple[str, ...]:
        return tuple(self._paths)

    def add(self, candidates: Iterable[str]) -> int:
        return self.merge(candidates).added

    def merge(self, candidates: Iterable[str]) -> AddResult:
        requested = 0
        added = 0
        for candidate in candidates:
            requested += 1
            key = path_key(candidate)
            # membership is checked against the running set, so repeats
            # inside one batch are dropped too
            if key in self._keys or not self._validator(candidate):
                continue
            self._paths.append(candidate)
            self._keys.add(key)
            added += 1
        LOGGER.info("add batch requested=%s added=%s total=%s", requested, added, len(self._paths))
        return AddResult(requested=requested, added=added)
