"""Klondike rules engine with lifecycle state machine."""

import logging
from random import Random
from typing import Callable, assert_never

from transitions import Machine

from config import GameConfig
from klondike.cards import Card, Deck, Suit
from klondike.foundation import FoundationPile
from klondike.game.events import EventEmitter, EventType, GameEvent
from klondike.game.state import TRANSITIONS, GameState

logger = logging.getLogger(__name__)

NUM_TABLEAU_PILES = 7


class Solitaire:
    """
    Klondike solitaire engine (draw one, single deck).

    Owns the deck, four foundation piles and seven tableau piles. Every
    move method either applies its whole effect and returns True, or
    leaves the game untouched and returns False. Illegal moves are normal
    input, so they are reported through the return value and an
    INVALID_MOVE event, never raised.
    """

    # State machine states
    STATES = [s.machine_name for s in GameState]

    # State machine transitions
    TRANSITIONS = TRANSITIONS

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize the engine. Call new_game() to deal.

        Args:
            rng: Random number generator for reproducible deals
        """
        self._deck = Deck(rng=rng)
        self._foundation_piles = [FoundationPile(suit) for suit in Suit]
        self._tableau_piles: list[list[Card]] = [[] for _ in range(NUM_TABLEAU_PILES)]
        self.events = EventEmitter()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="not_started",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @classmethod
    def from_config(cls, game_config: GameConfig) -> "Solitaire":
        """Build an engine, seeding the deck when the config carries a seed."""
        rng = Random(game_config.seed) if game_config.seed is not None else None
        return cls(rng=rng)

    @property
    def state(self) -> GameState:
        """Get current lifecycle state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    # Read views

    @property
    def draw_pile(self) -> list[Card]:
        return self._deck.draw_pile

    @property
    def discard_pile(self) -> list[Card]:
        return self._deck.discard_pile

    @property
    def tableau_piles(self) -> list[list[Card]]:
        return self._tableau_piles

    @property
    def foundation_piles(self) -> list[FoundationPile]:
        """Return the foundation piles: clubs, spades, hearts, diamonds."""
        return list(self._foundation_piles)

    @property
    def top_discard_card(self) -> Card | None:
        """Return the playable discard pile card, if any."""
        discard_pile = self._deck.discard_pile
        return discard_pile[-1] if discard_pile else None

    @property
    def won_game(self) -> bool:
        return all(pile.is_complete for pile in self._foundation_piles)

    @property
    def can_draw(self) -> bool:
        return len(self._deck.draw_pile) > 0

    @property
    def can_shuffle_discard_pile(self) -> bool:
        return not self._deck.draw_pile and len(self._deck.discard_pile) > 0

    def foundation_for(self, suit: Suit) -> FoundationPile:
        """Return the foundation pile that accepts cards of the given suit."""
        match suit:
            case Suit.CLUBS:
                index = 0
            case Suit.SPADES:
                index = 1
            case Suit.HEARTS:
                index = 2
            case Suit.DIAMONDS:
                index = 3
            case _:
                assert_never(suit)
        return self._foundation_piles[index]

    # Game flow

    def new_game(self) -> None:
        """Reset the deck and foundations and deal a fresh tableau."""
        self.events.clear_history()
        self._deck.reset()
        for pile in self._foundation_piles:
            pile.reset()
        self._tableau_piles = [[] for _ in range(NUM_TABLEAU_PILES)]

        # Deal in rounds: round i gives one card to piles i..6, face-up on pile i
        for i in range(NUM_TABLEAU_PILES):
            for j in range(i, NUM_TABLEAU_PILES):
                card = self._deck.draw()
                assert card is not None, "deck ran out while dealing"
                if j == i:
                    card.flip()
                self._tableau_piles[j].append(card)

        self.deal()
        logger.info("New game dealt, %d cards in draw pile", len(self._deck))
        self.events.emit_new(
            EventType.GAME_STARTED,
            draw_pile_size=len(self._deck),
        )

    def draw_card(self) -> bool:
        """Turn the top card of the draw pile face-up onto the discard pile."""
        card = self._deck.draw()
        if card is None:
            return self._reject("draw pile is empty")

        card.flip()
        self._deck.discard_pile.append(card)
        self.events.emit_new(EventType.CARD_DRAWN, card=str(card))
        return True

    def shuffle_discard_pile(self) -> bool:
        """Recycle the discard pile into the draw pile once the draw pile is empty."""
        if self._deck.draw_pile:
            return self._reject("draw pile is not empty")

        count = len(self._deck.discard_pile)
        self._deck.shuffle_in_discard_pile()
        self.events.emit_new(EventType.DISCARD_PILE_SHUFFLED, cards=count)
        return True

    # Moves

    def play_discard_pile_card_to_foundation(self) -> bool:
        card = self.top_discard_card
        if card is None:
            return self._reject("discard pile is empty")

        if not self.is_valid_foundation_move(card):
            return self._reject("card does not continue its foundation", card=str(card))

        self._deck.discard_pile.pop()
        self._add_card_to_foundation(card, source="discard")
        return True

    def play_discard_pile_card_to_tableau(self, target_index: int) -> bool:
        card = self.top_discard_card
        if card is None:
            return self._reject("discard pile is empty")

        target = self._tableau_pile(target_index)
        if target is None:
            return self._reject("invalid tableau pile", pile=target_index)

        if not self.is_valid_tableau_move(card, target):
            return self._reject(
                "card cannot be placed on tableau pile",
                card=str(card),
                pile=target_index,
            )

        self._deck.discard_pile.pop()
        target.append(card)
        self.events.emit_new(
            EventType.CARD_TO_TABLEAU,
            card=str(card),
            source="discard",
            pile=target_index,
        )
        return True

    def move_tableau_card_to_foundation(self, source_index: int) -> bool:
        """
        Move the top card of a tableau pile to its foundation.

        The card exposed underneath is not turned over; use
        flip_top_tableau_card() for that.
        """
        source = self._tableau_pile(source_index)
        if source is None:
            return self._reject("invalid tableau pile", pile=source_index)
        if not source:
            return self._reject("tableau pile is empty", pile=source_index)

        card = source[-1]
        if not card.is_face_up:
            return self._reject("card is face-down", card=str(card), pile=source_index)
        if not self.is_valid_foundation_move(card):
            return self._reject("card does not continue its foundation", card=str(card))

        source.pop()
        self._add_card_to_foundation(card, source=f"tableau:{source_index}")
        return True

    def move_tableau_cards_to_another_tableau(
        self,
        source_index: int,
        card_index: int,
        target_index: int,
    ) -> bool:
        """
        Move the run starting at card_index onto another tableau pile.

        Only the base card of the run is checked against the target pile;
        the cards above it were stacked by earlier legal moves and travel
        with it in the same order.
        """
        source = self._tableau_pile(source_index)
        target = self._tableau_pile(target_index)
        if source is None or target is None:
            return self._reject(
                "invalid tableau pile",
                source=source_index,
                target=target_index,
            )
        if source is target:
            return self._reject("source and target are the same pile", pile=source_index)
        if not 0 <= card_index < len(source):
            return self._reject("invalid card index", pile=source_index, index=card_index)

        card = source[card_index]
        if not card.is_face_up:
            return self._reject("card is face-down", card=str(card), pile=source_index)
        if not self.is_valid_tableau_move(card, target):
            return self._reject(
                "card cannot be placed on tableau pile",
                card=str(card),
                pile=target_index,
            )

        run = source[card_index:]
        del source[card_index:]
        target.extend(run)
        self.events.emit_new(
            EventType.CARDS_MOVED,
            cards=[str(c) for c in run],
            source=source_index,
            target=target_index,
        )
        return True

    def move_foundation_card_to_tableau(self, foundation_index: int, target_index: int) -> bool:
        """
        Take the top card of a foundation pile back into the tableau.

        Foundations only keep a count, so the card is rebuilt face-up from
        the pile's suit and current value.
        """
        if not 0 <= foundation_index < len(self._foundation_piles):
            logger.warning("Foundation pile index out of range: %r", foundation_index)
            return self._reject("invalid foundation pile", foundation=foundation_index)

        foundation = self._foundation_piles[foundation_index]
        if foundation.is_empty:
            return self._reject("foundation pile is empty", foundation=foundation_index)

        target = self._tableau_pile(target_index)
        if target is None:
            return self._reject("invalid tableau pile", pile=target_index)

        card = Card(foundation.suit, foundation.value, face_up=True)
        if not self.is_valid_tableau_move(card, target):
            return self._reject(
                "card cannot be placed on tableau pile",
                card=str(card),
                pile=target_index,
            )

        foundation.remove_card()
        target.append(card)
        self.events.emit_new(
            EventType.CARD_FROM_FOUNDATION,
            card=str(card),
            foundation=foundation_index,
            pile=target_index,
        )
        if self.state == GameState.WON:
            self.reopen()
        return True

    def flip_top_tableau_card(self, pile_index: int) -> bool:
        """Turn the face-down top card of a tableau pile face-up."""
        pile = self._tableau_pile(pile_index)
        if pile is None:
            return self._reject("invalid tableau pile", pile=pile_index)
        if not pile:
            return self._reject("tableau pile is empty", pile=pile_index)

        card = pile[-1]
        if card.is_face_up:
            return self._reject("top card is already face-up", pile=pile_index)

        card.flip()
        self.events.emit_new(EventType.CARD_FLIPPED, card=str(card), pile=pile_index)
        return True

    # Validation

    def is_valid_foundation_move(self, card: Card) -> bool:
        """Check that the card is the next rank for its suit's foundation."""
        return card.value == self.foundation_for(card.suit).value + 1

    def is_valid_tableau_move(self, card: Card, pile: list[Card]) -> bool:
        """
        Check whether a card may be placed on a tableau pile.

        Empty piles take only Kings. Otherwise the card must be one rank
        below the pile's top card and of the opposite color.
        """
        if not pile:
            return card.rank.is_king

        top = pile[-1]
        if top.rank.is_ace:
            return False
        if top.color == card.color:
            return False
        if top.value != card.value + 1:
            return False
        return True

    # Internals

    def _tableau_pile(self, index: int) -> list[Card] | None:
        """Look up a tableau pile, without Python's negative indexing."""
        if not 0 <= index < NUM_TABLEAU_PILES:
            logger.warning("Tableau pile index out of range: %r", index)
            return None
        return self._tableau_piles[index]

    def _add_card_to_foundation(self, card: Card, source: str) -> None:
        foundation = self.foundation_for(card.suit)
        foundation.add_card()
        self.events.emit_new(
            EventType.CARD_TO_FOUNDATION,
            card=str(card),
            source=source,
            value=foundation.value,
        )
        if self.won_game and self.state != GameState.WON:
            self.win()
            logger.info("Game won")
            self.events.emit_new(EventType.GAME_WON)

    def _reject(self, reason: str, **data) -> bool:
        logger.debug("Rejected move: %s %s", reason, data)
        self.events.emit_new(EventType.INVALID_MOVE, reason=reason, **data)
        return False
