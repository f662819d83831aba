"""Monster races and monster instances as seen by the slay system."""

from dataclasses import dataclass, field
from typing import Iterable

from ...core.data import FlagSet, MonsterFlag, RF_SIZE


@dataclass(frozen=True)
class MonsterBase:
    """A broad family of monsters, e.g. "orc" or "dragon"."""
    name: str


@dataclass(eq=False)
class MonsterRace:
    """A kind of monster with its race flags.

    Races compare by identity: lore is kept per race object.
    """
    name: str
    base: MonsterBase
    flags: FlagSet = field(default_factory=lambda: FlagSet(RF_SIZE))

    @classmethod
    def create(cls, name: str, base_name: str, flags: Iterable[MonsterFlag] = ()) -> "MonsterRace":
        """Create a race from plain names and a list of race flags."""
        return cls(name=name, base=MonsterBase(base_name), flags=FlagSet(RF_SIZE, flags))

    def has_flag(self, flag: MonsterFlag) -> bool:
        return self.flags.has(flag)


@dataclass
class Monster:
    """A monster on the battlefield.

    Attributes:
        race: The monster's race
        visible: Whether the player can currently see the monster
    """
    race: MonsterRace
    visible: bool = True
