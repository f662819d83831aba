"""
Slay matching: deduplication, enumeration, display info and random picks.

Every operation here is a read-only query over the slay catalog; the only
thing mutated is a flag set explicitly handed to dedup_slays().
"""
import random
from collections import defaultdict
from typing import NamedTuple, Optional, Sequence, TYPE_CHECKING

from ...core.data import FlagSet, MonsterFlag, SlayInfo
from ...core.events import LogMessage
from ..managers.log_manager import LogLevel
from .slay_catalog import SlayCatalog

if TYPE_CHECKING:
    from ...core.events import EventManager


class SlayDescriptions(NamedTuple):
    """Parallel lists describing a list of slays."""
    descs: list[Optional[str]]
    brands: list[Optional[str]]
    multipliers: list[int]


class SlayMatcher:
    """Answers which catalog slays are present in a set of object flags."""

    def __init__(
        self,
        catalog: SlayCatalog,
        rng: Optional[random.Random] = None,
        event_manager: Optional["EventManager"] = None
    ):
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.event_manager = event_manager

    def _emit_log(self, message: str, category: str = "SYSTEM",
                  level: LogLevel = LogLevel.INFO) -> None:
        if self.event_manager is None:
            return
        self.event_manager.publish(
            LogMessage(turn=0, message=message, category=category, level=level,
                       source="SlayMatcher"),
            source="SlayMatcher"
        )

    def dedup_slays(self, flags: FlagSet) -> int:
        """Remove slays made redundant by a stronger slay of the same kind.

        Two slays are of the same kind when they share both monster flag and
        resist flag. Within a kind only the highest multiplier survives;
        slays tied at that multiplier all survive.

        Args:
            flags: Object flags to deduplicate, modified in place

        Returns:
            Number of flags turned off
        """
        groups: dict[tuple[MonsterFlag, MonsterFlag], list[SlayInfo]] = defaultdict(list)
        for slay in self.catalog.iter_non_null():
            if flags.has(slay.object_flag):
                groups[(slay.monster_flag, slay.resist_flag)].append(slay)

        count = 0
        for members in groups.values():
            if len(members) < 2:
                continue
            best = max(slay.multiplier for slay in members)
            for slay in members:
                if slay.multiplier < best and flags.turn_off(slay.object_flag):
                    count += 1
        return count

    def list_slays(self, flags: FlagSet, mask: FlagSet, dedup: bool = False) -> list[int]:
        """List the ids of catalog slays present in both flags and mask.

        Args:
            flags: Object flags to analyse, left unchanged
            mask: Object flags to restrict the search to
            dedup: Whether to drop slays made redundant by stronger ones

        Returns:
            Matching slay ids in ascending order
        """
        matched = flags.intersection(mask)
        if dedup:
            self.dedup_slays(matched)

        return [
            slay.slay_id for slay in self.catalog.iter_non_null()
            if matched.has(slay.object_flag)
        ]

    def slay_info_collect(self, slay_ids: Sequence[int]) -> SlayDescriptions:
        """Collect display information for a list of slay ids.

        Null ids (0) are skipped, so the lists may be shorter than slay_ids.
        """
        info = SlayDescriptions([], [], [])
        for slay_id in slay_ids:
            if not slay_id:
                continue
            slay = self.catalog.get_slay(slay_id)
            info.descs.append(slay.desc)
            info.brands.append(slay.brand)
            info.multipliers.append(slay.multiplier)
        return info

    def random_slay(self, mask: FlagSet) -> Optional[int]:
        """Pick a slay id uniformly among non-null slays whose flag is in mask.

        Returns:
            The chosen slay id, or None if no slay is eligible
        """
        eligible = [
            slay.slay_id for slay in self.catalog.iter_non_null()
            if mask.has(slay.object_flag)
        ]
        if not eligible:
            self._emit_log("No eligible slay for random pick", "WARNING", LogLevel.WARNING)
            return None
        return self.rng.choice(eligible)
