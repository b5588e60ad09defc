"""Foundation piles - per-suit progress counters."""

from klondike.cards import Rank, Suit

MAX_VALUE = Rank.KING.value


class FoundationPile:
    """
    A foundation pile built upward from Ace to King.

    Only the progress is stored (0 = empty, 13 = complete), not the cards.
    add_card/remove_card clamp at the ends instead of failing; move
    legality is decided by the game engine before calling them.
    """

    def __init__(self, suit: Suit) -> None:
        self._suit = suit
        self._value = 0

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def value(self) -> int:
        """Return the highest rank accepted so far (0 when empty)."""
        return self._value

    @property
    def is_empty(self) -> bool:
        return self._value == 0

    @property
    def is_complete(self) -> bool:
        return self._value == MAX_VALUE

    @property
    def top_rank(self) -> Rank | None:
        """Return the rank showing on top of the pile, if any."""
        if self._value == 0:
            return None
        return Rank(self._value)

    def reset(self) -> None:
        """Empty the pile."""
        self._value = 0

    def add_card(self) -> None:
        if self._value == MAX_VALUE:
            return
        self._value += 1

    def remove_card(self) -> None:
        if self._value == 0:
            return
        self._value -= 1

    def __repr__(self) -> str:
        return f"FoundationPile({self._suit.name}, value={self._value})"
