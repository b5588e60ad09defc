"""Shared helpers for building and inspecting game layouts in tests."""

from hypothesis import strategies as st

from klondike.cards import Card, Rank, Suit
from klondike.game import Solitaire


def up(s: str) -> Card:
    """Build a face-up card from short notation."""
    return Card.from_string(s, face_up=True)


def down(s: str) -> Card:
    """Build a face-down card from short notation."""
    return Card.from_string(s)


def all_card_keys() -> list[tuple[Suit, Rank]]:
    return sorted(((suit, rank) for suit in Suit for rank in Rank), key=_sort_key)


def card_keys_in_play(game: Solitaire) -> list[tuple[Suit, Rank]]:
    """List every card the game accounts for, foundations included, sorted."""
    keys = [(c.suit, c.rank) for c in game.draw_pile]
    keys += [(c.suit, c.rank) for c in game.discard_pile]
    for pile in game.tableau_piles:
        keys += [(c.suit, c.rank) for c in pile]
    for foundation in game.foundation_piles:
        keys += [(foundation.suit, Rank(v)) for v in range(1, foundation.value + 1)]
    return sorted(keys, key=_sort_key)


def _sort_key(key: tuple[Suit, Rank]) -> tuple[int, int]:
    return key[0].value, key[1].value


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw, face_up=None):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    is_up = draw(st.booleans()) if face_up is None else face_up
    return Card(suit, rank, face_up=is_up)


pile_index = st.integers(min_value=-1, max_value=7)

move_strategy = st.one_of(
    st.just(("draw_card",)),
    st.just(("shuffle_discard_pile",)),
    st.just(("play_discard_pile_card_to_foundation",)),
    st.tuples(st.just("play_discard_pile_card_to_tableau"), pile_index),
    st.tuples(st.just("move_tableau_card_to_foundation"), pile_index),
    st.tuples(
        st.just("move_tableau_cards_to_another_tableau"),
        pile_index,
        st.integers(min_value=-1, max_value=19),
        pile_index,
    ),
    st.tuples(
        st.just("move_foundation_card_to_tableau"),
        st.integers(min_value=-1, max_value=4),
        pile_index,
    ),
    st.tuples(st.just("flip_top_tableau_card"), pile_index),
)


def snapshot(game: Solitaire) -> tuple:
    """Capture every pile, face included, for before/after comparisons."""
    def cards(pile):
        return tuple((c.suit, c.rank, c.is_face_up) for c in pile)

    return (
        cards(game.draw_pile),
        cards(game.discard_pile),
        tuple(cards(pile) for pile in game.tableau_piles),
        tuple(f.value for f in game.foundation_piles),
    )
