"""
Monster lore management.

Keeps one MonsterLore record per monster race and records the race flags
the player learns by fighting, announcing each new fact through the event
system.
"""
from typing import Optional, TYPE_CHECKING

from ...core.data import MonsterFlag
from ...core.events import LogMessage, LoreLearned
from ...core.knowledge import LoreService, MonsterLore
from .log_manager import LogLevel

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ..entities.monster import MonsterRace


class LoreManager(LoreService):
    """Stores monster lore records, one per race."""

    def __init__(self, event_manager: Optional["EventManager"] = None):
        self.event_manager = event_manager
        self._lore: dict["MonsterRace", MonsterLore] = {}
        self.turn = 0

    def get_lore(self, race: "MonsterRace") -> MonsterLore:
        """Get the lore record for a race, creating it on first use."""
        lore = self._lore.get(race)
        if lore is None:
            lore = MonsterLore(race=race)
            self._lore[race] = lore
        return lore

    def record_resist_learned(self, lore: MonsterLore, flag: MonsterFlag) -> bool:
        """Record that the player has learned a race flag.

        The null flag carries no information and is ignored.

        Returns:
            True if the flag was not known before
        """
        if flag == MonsterFlag.NONE:
            return False
        if not lore.flags.turn_on(flag):
            return False

        if self.event_manager is not None:
            self.event_manager.publish(
                LoreLearned(turn=self.turn, race=lore.race, flag=flag),
                source="LoreManager"
            )
            self.event_manager.publish(
                LogMessage(
                    turn=self.turn,
                    message=f"Lore: {lore.race.name} - learned {flag.name}",
                    category="LORE",
                    level=LogLevel.INFO,
                    source="LoreManager"
                ),
                source="LoreManager"
            )
        return True

    def known_races(self) -> list["MonsterRace"]:
        """Races with a lore record."""
        return list(self._lore)

    def clear(self) -> None:
        self._lore.clear()
