"""Entity definitions for the slay system.

This package contains the objects that combat reasons about:
- item.py: Items, ego templates and their brand and slay chains
- monster.py: Monster bases, races and visible monster instances
"""

from .item import (
    DynamicSlay,
    DynamicBrand,
    Item,
    EgoItem,
    add_slays,
    add_brands,
    create_item_from_ego,
)
from .monster import MonsterBase, MonsterRace, Monster

__all__ = [
    "DynamicSlay",
    "DynamicBrand",
    "Item",
    "EgoItem",
    "add_slays",
    "add_brands",
    "create_item_from_ego",
    "MonsterBase",
    "MonsterRace",
    "Monster",
]
