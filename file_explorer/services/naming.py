from __future__ import annotations

import math
import random
from typing import Protocol, Sequence

DEFAULT_ADJECTIVES: tuple[str, ...] = (
    'brisk',
    'calm',
    'clever',
    'crisp',
    'daring',
    'eager',
    'fierce',
    'gentle',
    'glossy',
    'humble',
    'lively',
    'nimble',
    'noble',
    'plucky',
    'proud',
    'rapid',
    'rugged',
    'shiny',
    'steady',
    'swift',
)

DEFAULT_NOUNS: tuple[str, ...] = (
    'atlas',
    'boulder',
    'canyon',
    'cedar',
    'delta',
    'ember',
    'harbor',
    'horizon',
    'lagoon',
    'meadow',
    'mesa',
    'nebula',
    'oasis',
    'prairie',
    'quartz',
    'ridge',
    'summit',
    'terrace',
    'vale',
    'vista',
)


class DictionaryConfigError(ValueError):
    pass


class RandomPort(Protocol):
    def next(self) -> float:
        ...


class DirectoryNameGenerator(Protocol):
    def generate(self) -> str:
        ...


class SystemRandomPort:
    def next(self) -> float:
        return random.random()


class RandomDirectoryNameGenerator:
    """Builds "<adjective>-<noun>" names from two word lists."""

    def __init__(
        self,
        adjectives: Sequence[str] = DEFAULT_ADJECTIVES,
        nouns: Sequence[str] = DEFAULT_NOUNS,
        random_port: RandomPort | None = None,
    ):
        if not adjectives or not nouns:
            raise DictionaryConfigError('Both dictionaries must contain at least one entry.')
        self._adjectives = tuple(adjectives)
        self._nouns = tuple(nouns)
        self._random = random_port or SystemRandomPort()

    def generate(self) -> str:
        return f'{self._pick(self._adjectives)}-{self._pick(self._nouns)}'

    def _pick(self, words: tuple[str, ...]) -> str:
        index = math.floor(self._random.next() * len(words))
        return words[min(max(index, 0), len(words) - 1)]
