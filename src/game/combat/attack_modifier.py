"""
Attack modifier resolution for brands and slays.

This module decides, for one weapon hitting one monster, which brand or
slay on the weapon gives the best damage multiplier and which verb describes
the blow. Real attacks also teach the player: unknown properties that apply
become known, the item may become identified, and visible monsters reveal
race flags to the monster lore. Simulated attacks (real=False) change
nothing.

Brands and slays compete for a single winner slot. The baseline multiplier
is 1, so only properties with a multiplier above 1 can win.
"""
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from ...core.data import ModifierSource, MonsterFlag
from ...core.events import AttackModifierResolved, PropertyNoticed
from ...core.knowledge import IdentifyService, LoreService, MonsterLore
from ..managers.identify_manager import IdentifyManager
from ..managers.lore_manager import LoreManager
from .slay_catalog import SlayCatalog

if TYPE_CHECKING:
    from ...core.events import EventManager
    from ..entities.item import DynamicBrand, DynamicSlay, Item
    from ..entities.monster import Monster, MonsterRace


BASE_MULTIPLIER = 1

# Brands below this multiplier use their weak verb
STRONG_BRAND_MULTIPLIER = 3

# Slays above this multiplier smite fiercely and glow brightly
STRONG_SLAY_MULTIPLIER = 3

SLAY_VERB = "smite"
STRONG_SLAY_VERB = "fiercely smite"


@dataclass
class AttackModifier:
    """The winning brand or slay of one attack, if any."""
    source: ModifierSource = ModifierSource.NONE
    brand: Optional["DynamicBrand"] = None
    slay: Optional["DynamicSlay"] = None
    verb: Optional[str] = None

    @property
    def multiplier(self) -> int:
        """Damage multiplier, read from the winning property itself."""
        if self.source == ModifierSource.BRAND and self.brand is not None:
            return self.brand.multiplier
        if self.source == ModifierSource.SLAY and self.slay is not None:
            return self.slay.multiplier
        return BASE_MULTIPLIER

    @property
    def has_bonus(self) -> bool:
        return self.source != ModifierSource.NONE


def slay_applies(slay: "DynamicSlay", race: "MonsterRace") -> bool:
    """Check whether a slay counts against a monster race.

    A slay applies when its monster base name differs from the race's
    base name, or when the race carries the slay's race flag.
    """
    return slay.name != race.base.name or race.has_flag(slay.race_flag)


class AttackModifierResolver:
    """Chooses the best brand or slay for an attack and applies what it teaches."""

    def __init__(
        self,
        catalog: SlayCatalog,
        identify: Optional[IdentifyService] = None,
        lore: Optional[LoreService] = None,
        event_manager: Optional["EventManager"] = None
    ):
        self.catalog = catalog
        self.event_manager = event_manager
        self.identify = identify or IdentifyManager(event_manager)
        self.lore = lore or LoreManager(event_manager)
        self.turn = 0

    def _brand_applies(self, brand: "DynamicBrand", race: "MonsterRace") -> bool:
        return not race.has_flag(self.catalog.get_brand(brand.element).resist_flag)

    def _learn(self, lore: MonsterLore, flag: MonsterFlag) -> None:
        self.lore.record_resist_learned(lore, flag)

    def resolve_attack(
        self,
        item: "Item",
        monster: "Monster",
        real: bool = False,
        known_only: bool = False
    ) -> AttackModifier:
        """Find the best multiplier the item's brands and slays give against a monster.

        Args:
            item: The weapon being used
            monster: The monster being hit
            real: True for an actual blow, which may teach the player about
                the item and the monster; False for a side-effect-free
                simulation
            known_only: Only consider brands and slays the player already knows

        Returns:
            The winning property and its verb. With no applicable property
            the result has source NONE, no verb and multiplier 1.
        """
        race = monster.race
        result = AttackModifier()
        best_mult = BASE_MULTIPLIER
        lore = self.lore.get_lore(race) if real else None

        for brand in item.brands:
            if known_only and not brand.known:
                continue

            info = self.catalog.get_brand(brand.element)

            if not race.has_flag(info.resist_flag):
                if brand.multiplier > best_mult:
                    best_mult = brand.multiplier
                    result.source = ModifierSource.BRAND
                    result.brand = brand
                    if brand.multiplier < STRONG_BRAND_MULTIPLIER:
                        result.verb = info.melee_verb_weak
                    else:
                        result.verb = info.melee_verb
                if real:
                    self.notice_brands(item, monster)
                    if monster.visible:
                        self._learn(lore, info.resist_flag)

            # A known brand always teaches about visible monsters
            if brand.known and monster.visible and real:
                self._learn(lore, info.resist_flag)

        for slay in item.slays:
            if known_only and not slay.known:
                continue

            if slay_applies(slay, race):
                if slay.multiplier > best_mult:
                    best_mult = slay.multiplier
                    result.source = ModifierSource.SLAY
                    result.brand = None
                    result.slay = slay
                    if slay.multiplier <= STRONG_SLAY_MULTIPLIER:
                        result.verb = SLAY_VERB
                    else:
                        result.verb = STRONG_SLAY_VERB
                if real:
                    self.notice_slays(item, monster)
                    if monster.visible:
                        self._learn(lore, slay.race_flag)

            if slay.known and monster.visible and real:
                self._learn(lore, slay.race_flag)

        if real and self.event_manager is not None:
            self.event_manager.publish(
                AttackModifierResolved(
                    turn=self.turn,
                    item=item,
                    race=race,
                    source=result.source,
                    multiplier=result.multiplier,
                    verb=result.verb,
                ),
                source="AttackModifierResolver"
            )

        return result

    def notice_brands(self, item: "Item", monster: Optional["Monster"] = None) -> None:
        """Learn every unknown brand on the item that affects the monster.

        With no monster, every unknown brand is learned.
        """
        for brand in item.brands:
            if brand.known:
                continue
            if monster is not None and not self._brand_applies(brand, monster.race):
                continue

            brand.known = True
            self.identify.notice_ego(item)
            name = self.identify.describe(item)
            verb = self.catalog.get_brand(brand.element).active_verb
            self.identify.emit_message(f"Your {name} {verb}!")
            self._publish_noticed(item, ModifierSource.BRAND, brand.name, brand.multiplier)

        self.identify.check_for_ident(item)

    def notice_slays(self, item: "Item", monster: "Monster") -> None:
        """Learn every unknown slay on the item that applies to the monster."""
        for slay in item.slays:
            if slay.known:
                continue
            if not slay_applies(slay, monster.race):
                continue

            slay.known = True
            self.identify.notice_ego(item)
            name = self.identify.describe(item)
            brightly = " brightly" if slay.multiplier > STRONG_SLAY_MULTIPLIER else ""
            self.identify.emit_message(f"Your {name} glows{brightly}!")
            self._publish_noticed(item, ModifierSource.SLAY, slay.name, slay.multiplier)

        self.identify.check_for_ident(item)

    def _publish_noticed(self, item: "Item", source: ModifierSource,
                         property_name: str, multiplier: int) -> None:
        if self.event_manager is None:
            return
        self.event_manager.publish(
            PropertyNoticed(
                turn=self.turn,
                item=item,
                source=source,
                property_name=property_name,
                multiplier=multiplier,
            ),
            source="AttackModifierResolver"
        )

    def react_to_slay(self, item: "Item", monster: "Monster") -> bool:
        """Check whether any slay on the item hurts the monster.

        Known and unknown slays both count.
        """
        race = monster.race
        for slay in item.slays:
            if race.has_flag(slay.race_flag):
                return True
            if slay.name != race.base.name:
                return True
        return False
