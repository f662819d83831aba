"""Static information about slays and brands.

This module provides the immutable records held by the slay catalog and the
built-in default tables used when no catalog file is configured.
"""

from dataclasses import dataclass
from typing import Optional

from .game_enums import Element, MonsterFlag, ObjectFlag


@dataclass(frozen=True)
class SlayInfo:
    """Static information about one kind of slay or brand.

    Entry 0 of every catalog is the null slay: it has no object flag and is
    never matched or randomly chosen.
    """
    slay_id: int
    object_flag: ObjectFlag
    monster_flag: MonsterFlag
    resist_flag: MonsterFlag
    multiplier: int
    desc: Optional[str] = None
    brand: Optional[str] = None

    @property
    def is_null(self) -> bool:
        return self.slay_id == 0


@dataclass(frozen=True)
class BrandInfo:
    """Display and resistance information for a brand element."""
    active_verb: str
    melee_verb: str
    melee_verb_weak: str
    resist_flag: MonsterFlag


NULL_SLAY = SlayInfo(0, ObjectFlag.NONE, MonsterFlag.NONE, MonsterFlag.NONE, 1)


# Centralized data for all slay kinds, indexed by slay id
SLAY_DATA: tuple[SlayInfo, ...] = (
    NULL_SLAY,
    SlayInfo(1, ObjectFlag.SLAY_EVIL, MonsterFlag.EVIL, MonsterFlag.NONE, 2,
             "evil creatures"),
    SlayInfo(2, ObjectFlag.SLAY_ANIMAL, MonsterFlag.ANIMAL, MonsterFlag.NONE, 2,
             "animals"),
    SlayInfo(3, ObjectFlag.SLAY_ORC, MonsterFlag.ORC, MonsterFlag.NONE, 3,
             "orcs"),
    SlayInfo(4, ObjectFlag.SLAY_TROLL, MonsterFlag.TROLL, MonsterFlag.NONE, 3,
             "trolls"),
    SlayInfo(5, ObjectFlag.SLAY_GIANT, MonsterFlag.GIANT, MonsterFlag.NONE, 3,
             "giants"),
    SlayInfo(6, ObjectFlag.SLAY_DEMON, MonsterFlag.DEMON, MonsterFlag.NONE, 3,
             "demons"),
    SlayInfo(7, ObjectFlag.SLAY_DRAGON, MonsterFlag.DRAGON, MonsterFlag.NONE, 3,
             "dragons"),
    SlayInfo(8, ObjectFlag.SLAY_UNDEAD, MonsterFlag.UNDEAD, MonsterFlag.NONE, 3,
             "undead"),
    SlayInfo(9, ObjectFlag.BRAND_ACID, MonsterFlag.NONE, MonsterFlag.IM_ACID, 3,
             "creatures not resistant to acid", "acid"),
    SlayInfo(10, ObjectFlag.BRAND_ELEC, MonsterFlag.NONE, MonsterFlag.IM_ELEC, 3,
             "creatures not resistant to lightning", "lightning"),
    SlayInfo(11, ObjectFlag.BRAND_FIRE, MonsterFlag.NONE, MonsterFlag.IM_FIRE, 3,
             "creatures not resistant to fire", "flames"),
    SlayInfo(12, ObjectFlag.BRAND_COLD, MonsterFlag.NONE, MonsterFlag.IM_COLD, 3,
             "creatures not resistant to cold", "frost"),
    SlayInfo(13, ObjectFlag.BRAND_POIS, MonsterFlag.NONE, MonsterFlag.IM_POIS, 3,
             "creatures not resistant to poison", "venom"),
    SlayInfo(14, ObjectFlag.KILL_DRAGON, MonsterFlag.DRAGON, MonsterFlag.NONE, 5,
             "dragons"),
    SlayInfo(15, ObjectFlag.KILL_DEMON, MonsterFlag.DEMON, MonsterFlag.NONE, 5,
             "demons"),
    SlayInfo(16, ObjectFlag.KILL_UNDEAD, MonsterFlag.UNDEAD, MonsterFlag.NONE, 5,
             "undead"),
    SlayInfo(17, ObjectFlag.BRAND_ACID_W, MonsterFlag.NONE, MonsterFlag.IM_ACID, 2,
             "creatures not resistant to acid", "weak acid"),
    SlayInfo(18, ObjectFlag.BRAND_ELEC_W, MonsterFlag.NONE, MonsterFlag.IM_ELEC, 2,
             "creatures not resistant to lightning", "weak lightning"),
    SlayInfo(19, ObjectFlag.BRAND_FIRE_W, MonsterFlag.NONE, MonsterFlag.IM_FIRE, 2,
             "creatures not resistant to fire", "weak flames"),
    SlayInfo(20, ObjectFlag.BRAND_COLD_W, MonsterFlag.NONE, MonsterFlag.IM_COLD, 2,
             "creatures not resistant to cold", "weak frost"),
    SlayInfo(21, ObjectFlag.BRAND_POIS_W, MonsterFlag.NONE, MonsterFlag.IM_POIS, 2,
             "creatures not resistant to poison", "weak venom"),
)

# Centralized data for all brand elements
BRAND_DATA: dict[Element, BrandInfo] = {
    Element.ACID: BrandInfo("spits", "dissolve", "corrode", MonsterFlag.IM_ACID),
    Element.ELEC: BrandInfo("crackles", "shock", "zap", MonsterFlag.IM_ELEC),
    Element.FIRE: BrandInfo("flares", "burn", "singe", MonsterFlag.IM_FIRE),
    Element.COLD: BrandInfo("grows cold", "freeze", "chill", MonsterFlag.IM_COLD),
    Element.POIS: BrandInfo("seethes", "poison", "sicken", MonsterFlag.IM_POIS),
}
