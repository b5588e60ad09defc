"""Pytest fixtures for Klondike engine tests."""

import pytest
from random import Random

from klondike.cards import Deck
from klondike.game import Solitaire


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A freshly shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def game(rng):
    """A dealt game."""
    g = Solitaire(rng=rng)
    g.new_game()
    return g


@pytest.fixture
def empty_game(rng):
    """
    A dealt game with the tableau and stock cleared.

    Tests lay out exactly the cards they need on top of it.
    """
    g = Solitaire(rng=rng)
    g.new_game()
    for pile in g.tableau_piles:
        pile.clear()
    g.draw_pile.clear()
    g.discard_pile.clear()
    return g
