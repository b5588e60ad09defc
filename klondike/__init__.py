"""Klondike solitaire rules engine - 100% UI-agnostic."""

from klondike.cards import Card, Color, Deck, Rank, Suit
from klondike.foundation import FoundationPile
from klondike.game import Solitaire

__all__ = [
    "Card",
    "Color",
    "Deck",
    "Rank",
    "Suit",
    "FoundationPile",
    "Solitaire",
]
