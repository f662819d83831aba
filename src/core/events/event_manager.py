"""
In-process event bus.

Slay resolution, identification, lore and the combat log never hold
references to one another; they publish events here and subscribe to the
ones they care about. Everything runs on the caller's thread: an event is
either delivered on the spot (publish_immediate) or parked in a queue until
process_events() drains it in priority order.
"""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


class EventPriority(Enum):
    """Delivery order for queued events, lowest first."""
    LOW = auto()
    NORMAL = auto()
    HIGH = auto()
    CRITICAL = auto()


@dataclass
class QueuedEvent:
    """Envelope around a published event."""
    event: "GameEvent"
    priority: EventPriority = EventPriority.NORMAL
    timestamp: datetime = field(default_factory=datetime.now)
    source: Optional[str] = None

    def _sort_key(self) -> tuple[int, datetime]:
        return (-self.priority.value, self.timestamp)

    def __lt__(self, other: "QueuedEvent") -> bool:
        # Higher priority first, FIFO within a priority
        return self._sort_key() < other._sort_key()


EventSubscriber = Callable[["GameEvent"], None]


def _name_of(subscriber: EventSubscriber, explicit: Optional[str] = None) -> str:
    return explicit or getattr(subscriber, "__name__", "anonymous")


class EventManager:
    """Synchronous publish/subscribe hub with a bounded event history."""

    def __init__(self, enable_debug_logging: bool = False, history_size: int = 1000):
        """
        Args:
            enable_debug_logging: Report bus activity through the debug callback
            history_size: How many delivered events get_history() can return
        """
        self.enable_debug_logging = enable_debug_logging

        self._subscribers: dict["EventType", list[EventSubscriber]] = defaultdict(list)
        self._universal_subscribers: list[EventSubscriber] = []
        self._event_queue: deque[QueuedEvent] = deque()
        self._event_history: deque[QueuedEvent] = deque(maxlen=history_size)
        self._counters = {"published": 0, "processed": 0, "errors": 0}

        self._debug_callback: Optional[Callable[[str], None]] = None

    def set_debug_callback(self, callback: Optional[Callable[[str], None]]) -> None:
        self._debug_callback = callback

    def _trace(self, message: str) -> None:
        if self.enable_debug_logging and self._debug_callback is not None:
            self._debug_callback(f"[EVENT] {message}")

    # ============== Subscriptions ==============

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Call subscriber for every delivered event of event_type."""
        self._subscribers[event_type].append(subscriber)
        self._trace(f"{_name_of(subscriber, subscriber_name)} listens to {event_type.name}")

    def subscribe_all(
        self,
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None
    ) -> None:
        """Call subscriber for every delivered event, whatever its type."""
        self._universal_subscribers.append(subscriber)
        self._trace(f"{_name_of(subscriber, subscriber_name)} listens to every event")

    def unsubscribe(self, event_type: "EventType", subscriber: EventSubscriber) -> bool:
        """Remove a typed subscription. Returns False if it was not registered."""
        listeners = self._subscribers.get(event_type, [])
        if subscriber not in listeners:
            return False
        listeners.remove(subscriber)
        self._trace(f"{_name_of(subscriber)} stopped listening to {event_type.name}")
        return True

    # ============== Publishing ==============

    def publish(
        self,
        event: "GameEvent",
        priority: EventPriority = EventPriority.NORMAL,
        source: Optional[str] = None
    ) -> None:
        """Queue event until the next process_events() call."""
        envelope = QueuedEvent(event=event, priority=priority, source=source or "unknown")
        self._event_queue.append(envelope)
        self._counters["published"] += 1
        self._trace(f"queued {type(event).__name__} from {envelope.source} ({priority.name})")

    def publish_immediate(self, event: "GameEvent", source: Optional[str] = None) -> None:
        """Deliver event to its subscribers before returning."""
        self._counters["published"] += 1
        self._deliver(QueuedEvent(event=event, priority=EventPriority.CRITICAL,
                                  source=source or "immediate"))

    def process_events(self, max_events: Optional[int] = None) -> int:
        """Deliver queued events, highest priority first.

        Args:
            max_events: Stop after this many deliveries and keep the rest
                queued (None drains everything)

        Returns:
            Number of events delivered
        """
        pending = sorted(self._event_queue)
        if max_events is not None:
            pending, deferred = pending[:max_events], pending[max_events:]
        else:
            deferred = []
        self._event_queue = deque(deferred)

        for envelope in pending:
            self._deliver(envelope)
        return len(pending)

    def _deliver(self, envelope: QueuedEvent) -> None:
        event = envelope.event
        self._event_history.append(envelope)
        self._counters["processed"] += 1
        self._trace(f"delivering {type(event).__name__} (turn {event.turn})")

        listeners = self._subscribers.get(event.event_type, []) + self._universal_subscribers
        for listener in listeners:
            try:
                listener(event)
            except Exception as e:
                # Remaining listeners still receive the event
                self._counters["errors"] += 1
                self._trace(f"{_name_of(listener)} failed on {type(event).__name__}: {e}")

    # ============== Inspection ==============

    def clear_queue(self) -> int:
        """Discard queued events without delivering them; returns how many."""
        dropped = len(self._event_queue)
        self._event_queue.clear()
        self._trace(f"dropped {dropped} queued events")
        return dropped

    def has_queued_events(self) -> bool:
        return bool(self._event_queue)

    def get_history(self, event_type: Optional["EventType"] = None) -> list["GameEvent"]:
        """Delivered events, oldest first, optionally of a single type."""
        events = (envelope.event for envelope in self._event_history)
        if event_type is None:
            return list(events)
        return [event for event in events if event.event_type == event_type]

    def get_statistics(self) -> dict[str, Any]:
        return {
            'events_published': self._counters["published"],
            'events_processed': self._counters["processed"],
            'events_queued': len(self._event_queue),
            'subscriber_errors': self._counters["errors"],
            'subscribers_count': sum(map(len, self._subscribers.values())),
            'universal_subscribers_count': len(self._universal_subscribers),
            'event_history_size': len(self._event_history),
        }

    def shutdown(self) -> None:
        """Forget every subscriber, queued event and history entry."""
        for store in (self._subscribers, self._universal_subscribers,
                      self._event_queue, self._event_history):
            store.clear()
