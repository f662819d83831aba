"""
Cache of slay-combination values for item power scoring.

Item power scoring values the combination of slays, kills and brands on an
item, and the same few combinations appear on ego items over and over. The
cache is built once from the ego-item templates: every distinct non-empty
combination seen there gets an entry with value 0. After that the set of
cached combinations is fixed and only the stored values change.

Combinations are keyed by the canonical byte form of their flag set, so two
combinations share an entry exactly when their flag sets are bit-for-bit
equal.
"""
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, TYPE_CHECKING

from ...core.data import FlagSet
from ...core.events import LogMessage, SlayCacheBuilt
from ..managers.log_manager import LogLevel
from .slay_catalog import SlayCatalog

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ..entities.item import EgoItem


class SlayCacheError(Exception):
    """Raised when the slay cache is used outside its build-once lifecycle."""
    pass


@dataclass
class FlagCacheEntry:
    """One cached flag combination and its value."""
    flags: FlagSet
    value: int = 0


class SlayCache:
    """Values of slay combinations found on ego items."""

    def __init__(self, catalog: SlayCatalog, event_manager: Optional["EventManager"] = None):
        self.catalog = catalog
        self.event_manager = event_manager
        self._slay_mask = catalog.slay_mask()
        self._entries: dict[bytes, FlagCacheEntry] = {}
        self._built = False

    def _emit_log(self, message: str, level: LogLevel = LogLevel.DEBUG) -> None:
        if self.event_manager is None:
            return
        self.event_manager.publish(
            LogMessage(turn=0, message=message, category="CACHE", level=level,
                       source="SlayCache"),
            source="SlayCache"
        )

    @property
    def is_built(self) -> bool:
        return self._built

    @property
    def slay_mask(self) -> FlagSet:
        """Copy of the mask of slay, kill and brand flags."""
        return self._slay_mask.copy()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, flags: FlagSet) -> bool:
        return flags.to_key() in self._entries

    def build(self, templates: Iterable["EgoItem"]) -> int:
        """Populate the cache from ego-item templates.

        Args:
            templates: Ego-item templates to scan for slay combinations

        Returns:
            Number of distinct combinations cached

        Raises:
            SlayCacheError: If the cache is already built
        """
        if self._built:
            raise SlayCacheError("Slay cache is already built; clear() it first")

        # Nothing is kept if reading the templates fails partway
        entries: dict[bytes, FlagCacheEntry] = {}
        template_count = 0
        for template in templates:
            template_count += 1
            combination = template.flags.intersection(self._slay_mask)
            if not combination.is_empty():
                entries.setdefault(combination.to_key(), FlagCacheEntry(flags=combination))

        self._entries = entries
        self._built = True

        self._emit_log(
            f"Cached {len(self._entries)} slay combinations from {template_count} ego items",
            LogLevel.INFO
        )
        if self.event_manager is not None:
            self.event_manager.publish(
                SlayCacheBuilt(turn=0, combination_count=len(self._entries),
                               template_count=template_count),
                source="SlayCache"
            )
        return len(self._entries)

    def _key_for(self, flags: FlagSet) -> bytes:
        if not self._built:
            raise SlayCacheError("Slay cache used before build()")
        if flags.width != self._slay_mask.width:
            raise ValueError(
                f"FlagSet width mismatch: {flags.width} != {self._slay_mask.width}"
            )
        return flags.to_key()

    def lookup(self, flags: FlagSet) -> int:
        """Get the value of a slay combination.

        Returns:
            The stored value, or 0 if the combination is not cached

        Raises:
            ValueError: If flags is not as wide as the slay mask
        """
        entry = self._entries.get(self._key_for(flags))
        return entry.value if entry is not None else 0

    def fill(self, flags: FlagSet, value: int) -> bool:
        """Store the value of a cached slay combination.

        Returns:
            True if the combination is cached and its value was stored;
            False if it is not cached, in which case nothing changes
        """
        entry = self._entries.get(self._key_for(flags))
        if entry is None:
            return False
        entry.value = value
        return True

    def value_for(self, flags: FlagSet, compute: Callable[[FlagSet], int]) -> int:
        """Get a combination's value, computing and storing it on first use.

        Values of combinations that are not cached are computed every time.
        """
        value = self.lookup(flags)
        if value:
            return value

        value = compute(flags)
        if self.fill(flags, value):
            self._emit_log(f"Filled slay cache value {value} for flags {list(flags)}")
        return value

    def entries(self) -> list[FlagCacheEntry]:
        """Snapshot of the cached entries in insertion order."""
        return [FlagCacheEntry(entry.flags.copy(), entry.value)
                for entry in self._entries.values()]

    def clear(self) -> None:
        """Release the cache so that it can be built again."""
        self._entries.clear()
        self._built = False
