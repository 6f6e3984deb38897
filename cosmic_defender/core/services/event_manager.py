"""
event_manager.py
----------------
Publish/subscribe channel between the simulation and its collaborators.

The World only ever dispatches; the HUD overlay and tests
subscribe. Nothing flows back into the simulation through events.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from cosmic_defender.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class GameStartedEvent(BaseEvent):
    """Dispatched when a session starts or restarts."""
    pass


@dataclass(frozen=True)
class ScoreChangedEvent(BaseEvent):
    """Dispatched whenever the score changes, including the reset to zero."""
    score: int


@dataclass(frozen=True)
class EnemyDestroyedEvent(BaseEvent):
    """Dispatched when a bullet destroys an enemy."""
    position: tuple


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched once when the player is hit."""
    final_score: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.system(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="event_manager"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        callbacks = self._subscribers.get(event_type)
        if callbacks and callback in callbacks:
            callbacks.remove(callback)

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and skipped so the remaining
        subscribers still receive the event.
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(
                    f"Error in event callback {callback_name}: {e}",
                    category="event_manager"
                )

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def clear_all(self) -> None:
        """Remove all subscribers."""
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
