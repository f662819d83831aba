from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .data import FlagSet, MonsterFlag, RF_SIZE

if TYPE_CHECKING:
    from ..game.entities.item import Item
    from ..game.entities.monster import MonsterRace


@dataclass
class MonsterLore:
    """What the player has learned about one monster race."""
    race: "MonsterRace"
    flags: FlagSet = field(default_factory=lambda: FlagSet(RF_SIZE))

    def knows(self, flag: MonsterFlag) -> bool:
        return self.flags.has(flag)


class IdentifyService(ABC):

    @abstractmethod
    def notice_ego(self, item: "Item") -> None:
        pass

    @abstractmethod
    def describe(self, item: "Item") -> str:
        pass

    @abstractmethod
    def emit_message(self, text: str) -> None:
        pass

    @abstractmethod
    def check_for_ident(self, item: "Item") -> bool:
        pass


class LoreService(ABC):

    @abstractmethod
    def get_lore(self, race: "MonsterRace") -> MonsterLore:
        pass

    @abstractmethod
    def record_resist_learned(self, lore: MonsterLore, flag: MonsterFlag) -> bool:
        pass
