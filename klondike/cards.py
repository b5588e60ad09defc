"""Card and Deck classes for a single-deck Klondike game."""

from enum import Enum, auto
from random import Random
from typing import Iterator, assert_never


class Color(Enum):
    """Card colors."""

    RED = auto()
    BLACK = auto()

    def __str__(self) -> str:
        return self.name.lower()


class Suit(Enum):
    """Card suits, in foundation pile order."""

    CLUBS = auto()
    SPADES = auto()
    HEARTS = auto()
    DIAMONDS = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.SPADES: "♠",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
        }
        return symbols[self]

    @property
    def color(self) -> Color:
        """Return the color of this suit."""
        match self:
            case Suit.HEARTS | Suit.DIAMONDS:
                return Color.RED
            case Suit.CLUBS | Suit.SPADES:
                return Color.BLACK
            case _:
                assert_never(self)


class Rank(Enum):
    """Card ranks, Ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_king(self) -> bool:
        """Check if this rank is a King."""
        return self == Rank.KING


class Card:
    """
    Playing card with a fixed identity and a flippable face.

    Suit and rank never change after construction; only the face-up flag
    does, through flip(). Equality and hashing ignore the face.
    """

    __slots__ = ("_suit", "_rank", "_face_up")

    def __init__(self, suit: Suit, rank: Rank | int, face_up: bool = False) -> None:
        if not isinstance(suit, Suit):
            raise ValueError(f"Invalid suit: {suit!r}")
        if not isinstance(rank, Rank):
            try:
                rank = Rank(rank)
            except ValueError:
                raise ValueError(f"Invalid rank: {rank!r}") from None
        self._suit = suit
        self._rank = rank
        self._face_up = face_up

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def value(self) -> int:
        """Return the numeric rank (Ace = 1, King = 13)."""
        return self._rank.value

    @property
    def is_face_up(self) -> bool:
        return self._face_up

    @property
    def color(self) -> Color:
        return self._suit.color

    def flip(self) -> None:
        """Turn the card over."""
        self._face_up = not self._face_up

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self._suit == other._suit and self._rank == other._rank

    def __hash__(self) -> int:
        return hash((self._suit, self._rank))

    def __str__(self) -> str:
        return f"{self._rank}{self._suit}"

    def __repr__(self) -> str:
        face = "up" if self._face_up else "down"
        return f"Card({self._rank.name}, {self._suit.name}, {face})"

    @classmethod
    def from_string(cls, s: str, face_up: bool = False) -> "Card":
        """Create a card from a string like 'A♠', 'QH', '10d'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {
            "A": Rank.ACE,
            "1": Rank.ACE,
            "2": Rank.TWO,
            "3": Rank.THREE,
            "4": Rank.FOUR,
            "5": Rank.FIVE,
            "6": Rank.SIX,
            "7": Rank.SEVEN,
            "8": Rank.EIGHT,
            "9": Rank.NINE,
            "10": Rank.TEN,
            "T": Rank.TEN,
            "J": Rank.JACK,
            "Q": Rank.QUEEN,
            "K": Rank.KING,
        }

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(suit_map[suit_str], rank_map[rank_str], face_up=face_up)


def full_deck() -> list[Card]:
    """Return one face-down card of every suit and rank, in order."""
    return [Card(suit, rank) for suit in Suit for rank in Rank]


class Deck:
    """
    The 52-card stock, split into a draw pile and a discard pile.

    The top of each pile is the end of its list. Both piles are exposed
    as plain lists so the game engine can push and pop directly.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a freshly shuffled deck."""
        self._rng = rng or Random()
        self._draw_pile: list[Card] = []
        self._discard_pile: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Rebuild all 52 cards into a shuffled draw pile and empty the discard pile."""
        self._draw_pile = full_deck()
        self._rng.shuffle(self._draw_pile)
        self._discard_pile = []

    def draw(self) -> Card | None:
        """Remove and return the top card of the draw pile, or None if it is empty."""
        if not self._draw_pile:
            return None
        return self._draw_pile.pop()

    def shuffle_in_discard_pile(self) -> None:
        """
        Shuffle the discard pile and make it the new draw pile.

        Recycled cards are turned face-down. Callers check that the draw
        pile is empty first; any cards still in it stay on top.
        """
        recycled = self._discard_pile
        self._discard_pile = []
        for card in recycled:
            if card.is_face_up:
                card.flip()
        self._rng.shuffle(recycled)
        self._draw_pile = recycled + self._draw_pile

    @property
    def draw_pile(self) -> list[Card]:
        return self._draw_pile

    @property
    def discard_pile(self) -> list[Card]:
        return self._discard_pile

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards left in the draw pile."""
        return len(self._draw_pile)

    def __len__(self) -> int:
        return len(self._draw_pile)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._draw_pile)
