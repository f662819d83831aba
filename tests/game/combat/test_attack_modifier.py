"""
Unit tests for attack modifier resolution.

Covers winner selection between brands and slays, verbs, the difference
between real and simulated attacks, monster lore updates and react_to_slay.
"""
from unittest.mock import Mock

import pytest

from src.core.data import Element, ModifierSource, MonsterFlag
from src.core.events import EventType
from src.core.knowledge import IdentifyService, LoreService, MonsterLore
from src.game.combat.attack_modifier import AttackModifierResolver, slay_applies
from src.game.entities import DynamicBrand, DynamicSlay, Item, Monster, MonsterRace
from src.game.managers import LogCategory


class TestWinnerSelection:
    """Test which brand or slay wins an attack."""

    def test_strong_brand_uses_melee_verb(self, resolver, fire_sword, orc):
        result = resolver.resolve_attack(fire_sword, orc)

        assert result.source == ModifierSource.BRAND
        assert result.brand is fire_sword.brands[0]
        assert result.verb == "burn"
        assert result.multiplier == 3

    def test_resisted_brand_gives_no_bonus(self, resolver, fire_sword, fire_dragon):
        result = resolver.resolve_attack(fire_sword, fire_dragon)

        assert result.source == ModifierSource.NONE
        assert not result.has_bonus
        assert result.verb is None
        assert result.multiplier == 1

    def test_slay_beats_weaker_brand(self, resolver, orc):
        item = Item(name="Spear",
                    brands=[DynamicBrand("weak fire", Element.FIRE, 2)],
                    slays=[DynamicSlay("orc", MonsterFlag.ORC, 4)])

        result = resolver.resolve_attack(item, orc)

        assert result.source == ModifierSource.SLAY
        assert result.brand is None
        assert result.slay is item.slays[0]
        assert result.multiplier == 4
        assert result.verb == "fiercely smite"

    def test_weak_brand_verb(self, resolver, orc):
        item = Item(name="Dagger", brands=[DynamicBrand("weak cold", Element.COLD, 2)])

        result = resolver.resolve_attack(item, orc)

        assert result.verb == "chill"
        assert result.multiplier == 2

    def test_normal_slay_verb(self, resolver, orc):
        item = Item(name="Mace", slays=[DynamicSlay("orc", MonsterFlag.ORC, 3)])
        assert resolver.resolve_attack(item, orc).verb == "smite"

    def test_equal_multiplier_keeps_first_winner(self, resolver, orc):
        item = Item(name="Sword",
                    brands=[DynamicBrand("acid", Element.ACID, 3)],
                    slays=[DynamicSlay("orc", MonsterFlag.ORC, 3)])

        result = resolver.resolve_attack(item, orc)

        assert result.source == ModifierSource.BRAND
        assert result.verb == "dissolve"

    def test_best_brand_wins(self, resolver, orc):
        item = Item(name="Sword", brands=[
            DynamicBrand("weak fire", Element.FIRE, 2),
            DynamicBrand("lightning", Element.ELEC, 3),
        ])
        result = resolver.resolve_attack(item, orc)
        assert result.brand is item.brands[1]

    def test_plain_item_gives_no_bonus(self, resolver, orc):
        result = resolver.resolve_attack(Item(name="Club"), orc)
        assert result.source == ModifierSource.NONE
        assert result.multiplier == 1

    def test_known_only_skips_unknown(self, resolver, fire_sword, orc):
        assert not resolver.resolve_attack(fire_sword, orc, known_only=True).has_bonus

        fire_sword.brands[0].known = True
        assert resolver.resolve_attack(fire_sword, orc, known_only=True).has_bonus


class TestSlayApplicability:
    """Test the slay applicability rule."""

    def test_matching_base_needs_race_flag(self):
        race = MonsterRace.create("Cave orc", "orc", [MonsterFlag.EVIL])
        assert not slay_applies(DynamicSlay("orc", MonsterFlag.ORC, 3), race)

    def test_matching_base_with_race_flag(self, orc_race):
        assert slay_applies(DynamicSlay("orc", MonsterFlag.ORC, 3), orc_race)

    def test_other_base_name_applies(self, orc_race):
        assert slay_applies(DynamicSlay("dragon", MonsterFlag.DRAGON, 5), orc_race)

    def test_inapplicable_slay_gives_no_bonus(self, resolver):
        monster = Monster(MonsterRace.create("Cave orc", "orc", [MonsterFlag.EVIL]))
        item = Item(name="Axe", slays=[DynamicSlay("orc", MonsterFlag.ORC, 3)])

        assert not resolver.resolve_attack(item, monster, real=True).has_bonus
        assert not item.slays[0].known


class TestRealAttacks:
    """Test the side effects of real attacks."""

    def test_simulated_attack_changes_nothing(self, resolver, fire_sword, orc, lore_manager):
        resolver.resolve_attack(fire_sword, orc, real=False)

        assert not fire_sword.brands[0].known
        assert not fire_sword.ego_noticed
        assert lore_manager.known_races() == []

    def test_real_attack_learns_brand(self, resolver, fire_sword, orc, event_manager, log_manager):
        resolver.resolve_attack(fire_sword, orc, real=True)
        event_manager.process_events()

        assert fire_sword.brands[0].known
        assert fire_sword.ego_noticed
        assert fire_sword.identified
        assert log_manager.get_texts(LogCategory.BATTLE) == [
            "Your Long Sword flares!",
            "You have learned all there is to know about your Long Sword.",
        ]

    def test_real_attack_teaches_lore(self, resolver, fire_sword, orc, lore_manager):
        resolver.resolve_attack(fire_sword, orc, real=True)

        lore = lore_manager.get_lore(orc.race)
        assert lore.knows(MonsterFlag.IM_FIRE)

    def test_invisible_monster_teaches_no_lore(self, resolver, fire_sword, orc_race, lore_manager):
        hidden = Monster(orc_race, visible=False)

        resolver.resolve_attack(fire_sword, hidden, real=True)

        assert fire_sword.brands[0].known
        assert not lore_manager.get_lore(orc_race).knows(MonsterFlag.IM_FIRE)

    def test_known_brand_teaches_resistance(self, resolver, fire_sword, fire_dragon, lore_manager):
        fire_sword.brands[0].known = True

        resolver.resolve_attack(fire_sword, fire_dragon, real=True)

        assert lore_manager.get_lore(fire_dragon.race).knows(MonsterFlag.IM_FIRE)

    def test_invisible_monster_teaches_no_slay_lore(self, resolver, dragon_slayer,
                                                    fire_dragon_race, lore_manager):
        hidden = Monster(fire_dragon_race, visible=False)

        result = resolver.resolve_attack(dragon_slayer, hidden, real=True)

        assert result.source == ModifierSource.SLAY
        assert dragon_slayer.slays[0].known
        assert not lore_manager.get_lore(fire_dragon_race).knows(MonsterFlag.DRAGON)

    def test_known_slay_teaches_race_flag(self, resolver, dragon_slayer, lore_manager):
        # Same base as the slay but without the flag, so the slay does not apply
        drake = Monster(MonsterRace.create("Baby drake", "dragon", [MonsterFlag.EVIL]))
        dragon_slayer.slays[0].known = True

        result = resolver.resolve_attack(dragon_slayer, drake, real=True)

        assert result.source == ModifierSource.NONE
        assert lore_manager.get_lore(drake.race).knows(MonsterFlag.DRAGON)

    def test_unknown_slay_that_does_not_apply_teaches_nothing(self, resolver, dragon_slayer,
                                                              lore_manager):
        drake = Monster(MonsterRace.create("Baby drake", "dragon", [MonsterFlag.EVIL]))

        resolver.resolve_attack(dragon_slayer, drake, real=True)

        assert not dragon_slayer.slays[0].known
        assert not lore_manager.get_lore(drake.race).knows(MonsterFlag.DRAGON)

    def test_unknown_resisted_brand_stays_unknown(self, resolver, fire_sword, fire_dragon, lore_manager):
        resolver.resolve_attack(fire_sword, fire_dragon, real=True)

        assert not fire_sword.brands[0].known
        assert not lore_manager.get_lore(fire_dragon.race).knows(MonsterFlag.IM_FIRE)

    def test_strong_slay_glows_brightly(self, resolver, dragon_slayer, fire_dragon,
                                        event_manager, log_manager, lore_manager):
        result = resolver.resolve_attack(dragon_slayer, fire_dragon, real=True)
        event_manager.process_events()

        assert result.verb == "fiercely smite"
        assert dragon_slayer.slays[0].known
        assert "Your Broad Sword glows brightly!" in log_manager.get_texts(LogCategory.BATTLE)
        assert lore_manager.get_lore(fire_dragon.race).knows(MonsterFlag.DRAGON)

    def test_real_attack_publishes_events(self, resolver, fire_sword, orc, event_manager):
        resolver.turn = 7
        resolver.resolve_attack(fire_sword, orc, real=True)
        event_manager.process_events()

        resolved = event_manager.get_history(EventType.ATTACK_MODIFIER_RESOLVED)
        noticed = event_manager.get_history(EventType.PROPERTY_NOTICED)
        assert len(resolved) == 1
        assert resolved[0].turn == 7
        assert resolved[0].multiplier == 3
        assert resolved[0].verb == "burn"
        assert len(noticed) == 1
        assert noticed[0].property_name == "fire"
        assert len(event_manager.get_history(EventType.ITEM_IDENTIFIED)) == 1

    def test_simulated_attack_publishes_nothing(self, resolver, fire_sword, orc, event_manager):
        resolver.resolve_attack(fire_sword, orc)
        assert not event_manager.has_queued_events()

    def test_second_attack_does_not_repeat_messages(self, resolver, fire_sword, orc,
                                                     event_manager, log_manager):
        resolver.resolve_attack(fire_sword, orc, real=True)
        resolver.resolve_attack(fire_sword, orc, real=True)
        event_manager.process_events()

        assert log_manager.get_texts(LogCategory.BATTLE).count("Your Long Sword flares!") == 1

    def test_collaborators_are_called(self, catalog, fire_sword, orc):
        identify = Mock(spec=IdentifyService)
        identify.describe.return_value = "sword"
        lore = Mock(spec=LoreService)
        lore.get_lore.return_value = MonsterLore(race=orc.race)
        resolver = AttackModifierResolver(catalog, identify, lore)

        resolver.resolve_attack(fire_sword, orc, real=True)

        identify.notice_ego.assert_called_once_with(fire_sword)
        identify.emit_message.assert_called_once_with("Your sword flares!")
        identify.check_for_ident.assert_called_with(fire_sword)
        lore.record_resist_learned.assert_called_with(lore.get_lore.return_value,
                                                      MonsterFlag.IM_FIRE)

    def test_resolver_works_without_event_manager(self, catalog, fire_sword, orc):
        resolver = AttackModifierResolver(catalog)
        result = resolver.resolve_attack(fire_sword, orc, real=True)
        assert result.has_bonus
        assert fire_sword.identified


class TestNotice:
    """Test direct brand and slay noticing."""

    def test_notice_brands_without_monster_learns_all(self, resolver):
        item = Item(name="Whip", brands=[
            DynamicBrand("fire", Element.FIRE, 3),
            DynamicBrand("cold", Element.COLD, 3),
        ])
        resolver.notice_brands(item)

        assert all(brand.known for brand in item.brands)
        assert item.identified

    def test_notice_brands_skips_resisted(self, resolver, fire_dragon):
        item = Item(name="Whip", brands=[
            DynamicBrand("fire", Element.FIRE, 3),
            DynamicBrand("cold", Element.COLD, 3),
        ])
        resolver.notice_brands(item, fire_dragon)

        assert not item.brands[0].known
        assert item.brands[1].known
        assert not item.identified

    def test_notice_slays(self, resolver, orc):
        item = Item(name="Axe", slays=[
            DynamicSlay("orc", MonsterFlag.ORC, 3),
            DynamicSlay("orc", MonsterFlag.TROLL, 3),
        ])
        resolver.notice_slays(item, orc)

        assert item.slays[0].known
        assert not item.slays[1].known


class TestReactToSlay:
    """Test react_to_slay."""

    def test_no_slays(self, resolver, orc):
        assert not resolver.react_to_slay(Item(name="Club"), orc)

    def test_race_flag_match(self, resolver, orc):
        item = Item(name="Axe", slays=[DynamicSlay("orc", MonsterFlag.ORC, 3)])
        assert resolver.react_to_slay(item, orc)

    def test_other_base_name_reacts(self, resolver, orc):
        item = Item(name="Axe", slays=[DynamicSlay("dragon", MonsterFlag.DRAGON, 3)])
        assert resolver.react_to_slay(item, orc)

    def test_matching_base_without_flag(self, resolver, orc):
        item = Item(name="Axe", slays=[DynamicSlay("orc", MonsterFlag.TROLL, 3)])
        assert not resolver.react_to_slay(item, orc)

    @pytest.mark.parametrize("known", [True, False])
    def test_known_state_ignored(self, resolver, orc, known):
        item = Item(name="Axe", slays=[DynamicSlay("orc", MonsterFlag.ORC, 3, known=known)])
        assert resolver.react_to_slay(item, orc)

    def test_later_entry_can_react(self, resolver, orc):
        item = Item(name="Axe", slays=[
            DynamicSlay("orc", MonsterFlag.TROLL, 3),
            DynamicSlay("orc", MonsterFlag.ORC, 3),
        ])
        assert resolver.react_to_slay(item, orc)
