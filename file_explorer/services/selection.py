from __future__ import annotations

import os
from typing import Iterable, Iterator


def absolute(path: str) -> str:
    return os.path.abspath(path)


class Selection:
    """Insertion-ordered set of absolute paths marked for bulk operations."""

    def __init__(self, paths: Iterable[str] = ()):
        self._paths: dict[str, None] = {}
        self.select(paths)

    def select(self, paths: Iterable[str]) -> None:
        for path in paths:
            self._paths[absolute(path)] = None

    def select_all(self, paths: Iterable[str]) -> None:
        self._paths.clear()
        self.select(paths)

    def deselect(self, paths: Iterable[str]) -> None:
        for path in paths:
            self._paths.pop(absolute(path), None)

    def discard(self, path: str) -> None:
        self._paths.pop(absolute(path), None)

    def replace(self, old: str, new: str) -> None:
        self.discard(old)
        self._paths[absolute(new)] = None

    def clear(self) -> None:
        self._paths.clear()

    def snapshot(self) -> list[str]:
        return list(self._paths)

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and absolute(path) in self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())
