"""Items and the brand and slay chains they own.

Each item owns its own brand and slay entries. Entries are never shared
between items: copying a template onto an item creates fresh, unknown
entries (see add_brands and add_slays). The order of a chain carries no
meaning; resolution treats every chain as an unordered collection.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from ...core.data import Element, FlagSet, MonsterFlag, ObjectFlag, OF_SIZE


@dataclass
class DynamicSlay:
    """A slay carried by one particular item.

    Attributes:
        name: Monster base name the slay is filtered on
        race_flag: Race flag of the monsters the slay hurts
        multiplier: Damage multiplier when the slay applies
        known: Whether the player has discovered this slay on this item
    """
    name: str
    race_flag: MonsterFlag
    multiplier: int
    known: bool = False


@dataclass
class DynamicBrand:
    """An elemental brand carried by one particular item."""
    name: str
    element: Element
    multiplier: int
    known: bool = False


@dataclass(eq=False)
class Item:
    """A weapon or other object that can carry brands and slays.

    Items compare by identity. ego_noticed and identified record what the
    player knows about the item as a whole.
    """
    name: str
    flags: FlagSet = field(default_factory=lambda: FlagSet(OF_SIZE))
    brands: list[DynamicBrand] = field(default_factory=list)
    slays: list[DynamicSlay] = field(default_factory=list)
    ego_name: Optional[str] = None
    ego_noticed: bool = False
    identified: bool = False

    @property
    def has_brands(self) -> bool:
        return bool(self.brands)

    @property
    def has_slays(self) -> bool:
        return bool(self.slays)

    def all_properties_known(self) -> bool:
        """Check whether every brand and slay on the item is known."""
        return (all(brand.known for brand in self.brands) and
                all(slay.known for slay in self.slays))


@dataclass
class EgoItem:
    """A template of bonus properties used to generate magic items."""
    name: str
    flags: FlagSet = field(default_factory=lambda: FlagSet(OF_SIZE))
    brands: list[DynamicBrand] = field(default_factory=list)
    slays: list[DynamicSlay] = field(default_factory=list)

    @classmethod
    def from_flags(cls, name: str, flags: Iterable[ObjectFlag]) -> "EgoItem":
        """Create a template carrying only object flags."""
        return cls(name=name, flags=FlagSet(OF_SIZE, flags))


def add_slays(dest: Item, source: Iterable[DynamicSlay]) -> int:
    """Copy slays onto an item as fresh, unknown entries.

    New entries are placed in front of the item's existing chain.

    Returns:
        Number of slays added
    """
    added = 0
    for slay in source:
        dest.slays.insert(0, DynamicSlay(slay.name, slay.race_flag, slay.multiplier))
        added += 1
    return added


def add_brands(dest: Item, source: Iterable[DynamicBrand]) -> int:
    """Copy brands onto an item as fresh, unknown entries.

    Returns:
        Number of brands added
    """
    added = 0
    for brand in source:
        dest.brands.insert(0, DynamicBrand(brand.name, brand.element, brand.multiplier))
        added += 1
    return added


def create_item_from_ego(name: str, ego: EgoItem) -> Item:
    """Create an item carrying copies of an ego template's properties."""
    item = Item(name=name, flags=ego.flags.copy(), ego_name=ego.name)
    add_brands(item, ego.brands)
    add_slays(item, ego.slays)
    return item
