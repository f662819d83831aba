"""
Combat log for slay, lore and cache messages.

Nothing writes to this log directly except the engine wiring: components
publish LogMessage and DebugMessage events and the LogManager collects them
into a bounded, categorised buffer. Views over the buffer can be filtered by
category and by level, and the whole buffer can be written to disk.
"""
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from pathlib import Path
from typing import Iterable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.events.event_manager import EventManager
    from ...core.events.events import GameEvent


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Startup, catalog and config loading
    BATTLE = auto()     # Player-facing combat messages
    LORE = auto()       # Monster lore updates
    CACHE = auto()      # Slay cache activity
    DEBUG = auto()
    WARNING = auto()
    ERROR = auto()


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.LORE: "LOR",
    LogCategory.CACHE: "CHE",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


class LogLevel(Enum):
    """Severity of a log message, lowest first."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


# Categories whose messages always carry the same level
CATEGORY_LEVELS = {
    LogCategory.DEBUG: LogLevel.DEBUG,
    LogCategory.CACHE: LogLevel.DEBUG,
    LogCategory.WARNING: LogLevel.WARNING,
    LogCategory.ERROR: LogLevel.ERROR,
}


@dataclass
class LogEntry:
    """One stored log line."""
    text: str
    category: LogCategory
    level: LogLevel = LogLevel.INFO
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        prefix = []
        if include_timestamp:
            prefix.append(self.timestamp.strftime("[%H:%M:%S]"))
        if include_category:
            prefix.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")
        return " ".join(prefix + [self.text])


class LogManager:
    """Collects log events and serves filtered views of them."""

    def __init__(
        self,
        event_manager: "EventManager",
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO
    ):
        """Create the log and subscribe it to the event bus.

        Args:
            event_manager: Bus the log listens on
            max_messages: Buffer size; the oldest lines are dropped first
            default_level: Lowest level shown by get_messages()
        """
        self.event_manager = event_manager
        self.messages: deque[LogEntry] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)

        from ...core.events import EventType

        handlers = (
            (EventType.LOG_MESSAGE, self._on_log_message, "log_message"),
            (EventType.DEBUG_MESSAGE, self._on_debug_message, "debug_message"),
            (EventType.LOG_SAVE_REQUESTED, self._on_save_requested, "log_save_request"),
        )
        for event_type, handler, name in handlers:
            event_manager.subscribe(event_type, handler, subscriber_name=f"LogManager.{name}")

    # ============== Event handlers ==============

    def _on_log_message(self, event: "GameEvent") -> None:
        from ...core.events import LogMessage
        if not isinstance(event, LogMessage):
            return

        category = LogCategory.__members__.get(str(event.category).upper(), LogCategory.SYSTEM)
        level = event.level if isinstance(event.level, LogLevel) else None
        self.log(event.message, category, level)

    def _on_debug_message(self, event: "GameEvent") -> None:
        from ...core.events import DebugMessage
        if isinstance(event, DebugMessage):
            self.log(f"[{event.source}] {event.message}", LogCategory.DEBUG)

    def _on_save_requested(self, event: "GameEvent") -> None:
        if self.save_log_to_file():
            self.system("Log file saved successfully")

    # ============== Writing ==============

    def log(
        self,
        text: str,
        category: LogCategory = LogCategory.SYSTEM,
        level: Optional[LogLevel] = None
    ) -> None:
        """Append a line; without an explicit level the category decides."""
        if level is None:
            level = CATEGORY_LEVELS.get(category, LogLevel.INFO)
        self.messages.append(LogEntry(text, category, level))

    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def battle(self, text: str) -> None:
        self.log(text, LogCategory.BATTLE)

    def lore(self, text: str) -> None:
        self.log(text, LogCategory.LORE)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def clear(self) -> None:
        self.messages.clear()

    # ============== Reading ==============

    def _visible(self, entry: LogEntry, categories: Optional[Iterable[LogCategory]]) -> bool:
        if entry.category not in self.enabled_categories:
            return False
        if categories is not None:
            return entry.category in categories
        return entry.level.value >= self.log_level.value

    def get_messages(
        self,
        count: Optional[int] = None,
        categories: Optional[set[LogCategory]] = None
    ) -> list[LogEntry]:
        """Get the newest visible lines, oldest first.

        Args:
            count: Maximum number of lines (None for all)
            categories: Only these categories; the level filter is skipped
                when categories are given
        """
        visible = [entry for entry in self.messages if self._visible(entry, categories)]
        if count is not None:
            return visible[-count:] if count > 0 else []
        return visible

    def get_texts(self, category: LogCategory) -> list[str]:
        """Raw text of every stored line in one category, ignoring all filters."""
        return [entry.text for entry in self.messages if entry.category == category]

    # ============== Filters ==============

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        return LogCategory.DEBUG in self.enabled_categories and self.log_level == LogLevel.DEBUG

    def toggle_debug(self) -> None:
        """Switch between showing and hiding debug lines."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.log_level = LogLevel.INFO
        else:
            self.enable_category(LogCategory.DEBUG)
            self.log_level = LogLevel.DEBUG

    # ============== Persistence ==============

    def save_log_to_file(self, log_dir: str = "logs") -> bool:
        """Write every stored line, unfiltered, to logs/slays_<timestamp>.log.

        Returns:
            True if the file was written
        """
        now = datetime.now()
        path = Path(log_dir) / f"slays_{now.strftime('%Y%m%d_%H%M%S')}.log"

        lines = ["Slay Engine - Combat Log",
                 f"Generated: {now.strftime('%Y-%m-%d %H:%M:%S')}",
                 "=" * 60,
                 ""]
        lines.extend(
            f"[{entry.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}] "
            f"[{entry.category.name}] {entry.text}"
            for entry in self.messages
        )
        if not self.messages:
            lines.append("No messages to save.")

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return False

        self.system(f"Combat log saved to {path}")
        return True
