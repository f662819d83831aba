"""Centralized game enums and constants.

This module contains all core enums that are used across the slay and brand
modules, providing a single source of truth for flag numbering.

Object flags and monster flags are bit positions inside fixed-width flag
sets (see flag_set.py). Value 0 of each flag enum is the null flag and is
never set on a real object or monster.
"""

from enum import Enum, IntEnum, auto


class ObjectFlag(IntEnum):
    """Object property flags (bit positions in an object flag set)."""
    NONE = 0

    # Slays
    SLAY_EVIL = auto()
    SLAY_ANIMAL = auto()
    SLAY_ORC = auto()
    SLAY_TROLL = auto()
    SLAY_GIANT = auto()
    SLAY_DEMON = auto()
    SLAY_DRAGON = auto()
    SLAY_UNDEAD = auto()

    # Kills (strong slays)
    KILL_DRAGON = auto()
    KILL_DEMON = auto()
    KILL_UNDEAD = auto()

    # Brands
    BRAND_ACID = auto()
    BRAND_ELEC = auto()
    BRAND_FIRE = auto()
    BRAND_COLD = auto()
    BRAND_POIS = auto()

    # Weak brands
    BRAND_ACID_W = auto()
    BRAND_ELEC_W = auto()
    BRAND_FIRE_W = auto()
    BRAND_COLD_W = auto()
    BRAND_POIS_W = auto()

    # Non-slay properties
    SEE_INVIS = auto()
    FREE_ACT = auto()
    BLESSED = auto()
    IMPACT = auto()
    VAMPIRIC = auto()


class ObjectFlagType(Enum):
    """Groups of object flags, used to build flag masks."""
    NONE = auto()
    SLAY = auto()
    KILL = auto()
    BRAND = auto()
    PROPERTY = auto()


class MonsterFlag(IntEnum):
    """Monster race flags (bit positions in a race or lore flag set)."""
    NONE = 0

    # Kinds of monster
    EVIL = auto()
    ANIMAL = auto()
    ORC = auto()
    TROLL = auto()
    GIANT = auto()
    DEMON = auto()
    DRAGON = auto()
    UNDEAD = auto()

    # Elemental immunities
    IM_ACID = auto()
    IM_ELEC = auto()
    IM_FIRE = auto()
    IM_COLD = auto()
    IM_POIS = auto()

    # Other race properties
    UNIQUE = auto()
    INVISIBLE = auto()


class Element(IntEnum):
    """Elements a brand can deal damage with."""
    ACID = 0
    ELEC = 1
    FIRE = 2
    COLD = 3
    POIS = 4


class ModifierSource(Enum):
    """Which kind of property supplied the winning attack multiplier."""
    NONE = auto()
    BRAND = auto()
    SLAY = auto()


# Number of bits in each kind of flag set
OF_SIZE = len(ObjectFlag)
RF_SIZE = len(MonsterFlag)


OBJECT_FLAG_TYPES = {
    ObjectFlag.NONE: ObjectFlagType.NONE,
    ObjectFlag.SLAY_EVIL: ObjectFlagType.SLAY,
    ObjectFlag.SLAY_ANIMAL: ObjectFlagType.SLAY,
    ObjectFlag.SLAY_ORC: ObjectFlagType.SLAY,
    ObjectFlag.SLAY_TROLL: ObjectFlagType.SLAY,
    ObjectFlag.SLAY_GIANT: ObjectFlagType.SLAY,
    ObjectFlag.SLAY_DEMON: ObjectFlagType.SLAY,
    ObjectFlag.SLAY_DRAGON: ObjectFlagType.SLAY,
    ObjectFlag.SLAY_UNDEAD: ObjectFlagType.SLAY,
    ObjectFlag.KILL_DRAGON: ObjectFlagType.KILL,
    ObjectFlag.KILL_DEMON: ObjectFlagType.KILL,
    ObjectFlag.KILL_UNDEAD: ObjectFlagType.KILL,
    ObjectFlag.BRAND_ACID: ObjectFlagType.BRAND,
    ObjectFlag.BRAND_ELEC: ObjectFlagType.BRAND,
    ObjectFlag.BRAND_FIRE: ObjectFlagType.BRAND,
    ObjectFlag.BRAND_COLD: ObjectFlagType.BRAND,
    ObjectFlag.BRAND_POIS: ObjectFlagType.BRAND,
    ObjectFlag.BRAND_ACID_W: ObjectFlagType.BRAND,
    ObjectFlag.BRAND_ELEC_W: ObjectFlagType.BRAND,
    ObjectFlag.BRAND_FIRE_W: ObjectFlagType.BRAND,
    ObjectFlag.BRAND_COLD_W: ObjectFlagType.BRAND,
    ObjectFlag.BRAND_POIS_W: ObjectFlagType.BRAND,
    ObjectFlag.SEE_INVIS: ObjectFlagType.PROPERTY,
    ObjectFlag.FREE_ACT: ObjectFlagType.PROPERTY,
    ObjectFlag.BLESSED: ObjectFlagType.PROPERTY,
    ObjectFlag.IMPACT: ObjectFlagType.PROPERTY,
    ObjectFlag.VAMPIRIC: ObjectFlagType.PROPERTY,
}

ELEMENT_NAMES = {
    Element.ACID: "acid",
    Element.ELEC: "lightning",
    Element.FIRE: "fire",
    Element.COLD: "frost",
    Element.POIS: "poison",
}

MODIFIER_SOURCE_NAMES = {
    ModifierSource.NONE: "None",
    ModifierSource.BRAND: "Brand",
    ModifierSource.SLAY: "Slay",
}
