"""Core data structures and definitions.

This package contains fundamental data types and static game definitions:
- flag_set.py: FlagSet, the fixed-width bit-set used for object and race flags
- game_enums.py: Centralized enums for object flags, race flags and elements
- slay_info.py: Static slay and brand records and their default tables
"""

from .flag_set import FlagSet
from .game_enums import (
    ObjectFlag, ObjectFlagType, MonsterFlag, Element, ModifierSource,
    OF_SIZE, RF_SIZE, OBJECT_FLAG_TYPES, ELEMENT_NAMES, MODIFIER_SOURCE_NAMES,
)
from .slay_info import SlayInfo, BrandInfo, NULL_SLAY, SLAY_DATA, BRAND_DATA

__all__ = [
    "FlagSet",
    "ObjectFlag",
    "ObjectFlagType",
    "MonsterFlag",
    "Element",
    "ModifierSource",
    "OF_SIZE",
    "RF_SIZE",
    "OBJECT_FLAG_TYPES",
    "ELEMENT_NAMES",
    "MODIFIER_SOURCE_NAMES",
    "SlayInfo",
    "BrandInfo",
    "NULL_SLAY",
    "SLAY_DATA",
    "BRAND_DATA",
]
