"""Event-driven system events.

This module defines the events that the slay, identification and lore
systems publish, so that logging and any interested manager can follow what
happens during combat without direct dependencies.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- All events include the combat turn on which they happened
- Events use proper enums instead of magic strings where the value is fixed
- Keep event types focused and avoid over-granular events
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

from ..data import ModifierSource, MonsterFlag

if TYPE_CHECKING:
    from ...game.entities.item import Item
    from ...game.entities.monster import MonsterRace
    from ...game.managers.log_manager import LogLevel


class EventType(Enum):
    """Types of events that managers can subscribe to."""
    # Combat Events
    ATTACK_MODIFIER_RESOLVED = auto()

    # Knowledge Events
    PROPERTY_NOTICED = auto()    # A brand or slay on an item became known
    ITEM_IDENTIFIED = auto()     # Every brand and slay on an item is known
    LORE_LEARNED = auto()        # A race flag was added to monster lore

    # Logging Events
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()

    # System Events
    CATALOG_LOADED = auto()
    SLAY_CACHE_BUILT = auto()
    LOG_SAVE_REQUESTED = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all game events."""
    turn: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class AttackModifierResolved(GameEvent):
    """Event emitted after a real attack has chosen its multiplier."""
    item: "Item"
    race: "MonsterRace"
    source: ModifierSource
    multiplier: int
    verb: Optional[str]

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.ATTACK_MODIFIER_RESOLVED)


@dataclass(frozen=True)
class PropertyNoticed(GameEvent):
    """Event emitted when the player learns a brand or slay on an item."""
    item: "Item"
    source: ModifierSource
    property_name: str
    multiplier: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.PROPERTY_NOTICED)


@dataclass(frozen=True)
class ItemIdentified(GameEvent):
    """Event emitted when all brands and slays on an item are known."""
    item: "Item"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ITEM_IDENTIFIED)


@dataclass(frozen=True)
class LoreLearned(GameEvent):
    """Event emitted when a race flag is newly recorded in monster lore."""
    race: "MonsterRace"
    flag: MonsterFlag

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LORE_LEARNED)


@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str
    level: "LogLevel"
    source: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event emitted for debug-specific messages."""
    message: str
    source: str
    context: Optional[dict] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)


@dataclass(frozen=True)
class CatalogLoaded(GameEvent):
    """Event emitted when the slay catalog has been built."""
    slay_count: int
    brand_count: int
    source_path: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.CATALOG_LOADED)


@dataclass(frozen=True)
class SlayCacheBuilt(GameEvent):
    """Event emitted when the slay cache has been populated."""
    combination_count: int
    template_count: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.SLAY_CACHE_BUILT)


@dataclass(frozen=True)
class LogSaveRequested(GameEvent):
    """Event emitted when the log buffer should be written to disk."""

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_SAVE_REQUESTED)
