import random

import pytest

from swisspairing.models import Player


class NoShuffle(random.Random):
    """Random source whose shuffle keeps the standings order."""

    def shuffle(self, x, *args, **kwargs):
        return None


class ReverseShuffle(random.Random):
    def shuffle(self, x, *args, **kwargs):
        x.reverse()


@pytest.fixture
def no_shuffle():
    return NoShuffle()


@pytest.fixture
def reverse_shuffle():
    return ReverseShuffle()


@pytest.fixture
def make_players():
    def _make(count):
        return [Player.create(i, f"Player {i}") for i in range(count)]

    return _make
