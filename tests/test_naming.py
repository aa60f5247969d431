from __future__ import annotations

import re

import pytest

from file_explorer.services.naming import (
    DEFAULT_ADJECTIVES,
    DEFAULT_NOUNS,
    DictionaryConfigError,
    RandomDirectoryNameGenerator,
)


class _SequenceRandom:
    def __init__(self, values: list[float]):
        self.values = list(values)

    def next(self) -> float:
        return self.values.pop(0)


def test_generate_uses_injected_random_source():
    generator = RandomDirectoryNameGenerator(random_port=_SequenceRandom([0.0, 0.999]))

    assert generator.generate() == f'{DEFAULT_ADJECTIVES[0]}-{DEFAULT_NOUNS[-1]}'


def test_generate_floors_index_from_random_value():
    generator = RandomDirectoryNameGenerator(['a', 'b', 'c', 'd'], ['x', 'y'], _SequenceRandom([0.5, 0.49]))

    assert generator.generate() == 'c-x'


def test_generate_clamps_out_of_range_values():
    generator = RandomDirectoryNameGenerator(['a', 'b'], ['x', 'y'], _SequenceRandom([1.0, 1.0]))

    assert generator.generate() == 'b-y'


def test_default_generator_produces_adjective_noun_names():
    name = RandomDirectoryNameGenerator().generate()

    assert re.fullmatch(r'[a-z]+-[a-z]+', name)


@pytest.mark.parametrize('adjectives, nouns', [([], ['x']), (['a'], []), ([], [])])
def test_empty_dictionary_is_rejected(adjectives, nouns):
    with pytest.raises(DictionaryConfigError):
        RandomDirectoryNameGenerator(adjectives, nouns)
