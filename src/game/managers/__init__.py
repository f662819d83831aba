"""Manager systems for slay knowledge and logging.

This package contains the manager classes that coordinate player knowledge
and logging through the event-driven architecture.
"""

from .log_manager import LogManager, LogLevel, LogCategory, LogEntry
from .lore_manager import LoreManager
from .identify_manager import IdentifyManager

__all__ = [
    "LogManager",
    "LogLevel",
    "LogCategory",
    "LogEntry",
    "LoreManager",
    "IdentifyManager",
]
