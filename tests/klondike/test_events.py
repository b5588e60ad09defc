"""Tests for the event emitter."""

from klondike.game.events import EventEmitter, EventType, GameEvent


class TestEventEmitter:
    """Tests for the EventEmitter class."""

    def test_subscribe_to_type(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, EventType.CARD_DRAWN)

        emitter.emit_new(EventType.CARD_DRAWN, card="A♠")
        emitter.emit_new(EventType.CARD_FLIPPED, card="2♥")

        assert len(received) == 1
        assert received[0].data == {"card": "A♠"}

    def test_subscribe_to_all(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append)

        emitter.emit_new(EventType.CARD_DRAWN)
        emitter.emit_new(EventType.INVALID_MOVE, reason="nope")

        assert [e.event_type for e in received] == [
            EventType.CARD_DRAWN,
            EventType.INVALID_MOVE,
        ]

    def test_unsubscribe(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, EventType.CARD_DRAWN)

        assert emitter.unsubscribe(received.append, EventType.CARD_DRAWN)
        assert not emitter.unsubscribe(received.append, EventType.CARD_DRAWN)

        emitter.emit_new(EventType.CARD_DRAWN)
        assert received == []

    def test_history(self):
        emitter = EventEmitter()
        event = emitter.emit_new(EventType.GAME_STARTED)
        assert emitter.history == [event]

        emitter.history.clear()
        assert len(emitter.history) == 1

        emitter.clear_history()
        assert emitter.history == []

    def test_event_str(self):
        event = GameEvent(EventType.CARD_FLIPPED, {"pile": 3})
        assert str(event) == "CARD_FLIPPED: {'pile': 3}"

