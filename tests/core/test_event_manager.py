"""
test_event_manager.py
---------------------
Tests for the publish/subscribe channel.
"""

from cosmic_defender.core.services.event_manager import (
    EventManager,
    GameOverEvent,
    ScoreChangedEvent,
)


def test_dispatch_reaches_subscribers_of_that_type():
    events = EventManager()
    scores, overs = [], []
    events.subscribe(ScoreChangedEvent, scores.append)
    events.subscribe(GameOverEvent, overs.append)

    events.dispatch(ScoreChangedEvent(10))

    assert scores == [ScoreChangedEvent(10)]
    assert overs == []


def test_duplicate_subscription_ignored():
    events = EventManager()
    received = []
    events.subscribe(ScoreChangedEvent, received.append)
    events.subscribe(ScoreChangedEvent, received.append)
    events.dispatch(ScoreChangedEvent(1))
    assert len(received) == 1
    assert events.get_subscriber_count(ScoreChangedEvent) == 1


def test_unsubscribe():
    events = EventManager()
    received = []
    events.subscribe(ScoreChangedEvent, received.append)
    events.unsubscribe(ScoreChangedEvent, received.append)
    events.dispatch(ScoreChangedEvent(1))
    assert received == []


def test_failing_callback_does_not_block_others():
    events = EventManager()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    events.subscribe(GameOverEvent, broken)
    events.subscribe(GameOverEvent, received.append)
    events.dispatch(GameOverEvent(30))

    assert received == [GameOverEvent(30)]


def test_clear_all():
    events = EventManager()
    events.subscribe(ScoreChangedEvent, print)
    events.subscribe(GameOverEvent, print)
    assert events.get_subscriber_count() == 2
    events.clear_all()
    assert events.get_subscriber_count() == 0
