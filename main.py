#!/usr/bin/env python3

from src.core.data import MODIFIER_SOURCE_NAMES, Element, MonsterFlag
from src.game.entities import DynamicBrand, Item, Monster, MonsterRace
from src.game.managers import LogCategory
from src.game.slay_engine import SlayEngine


def main():
    engine = SlayEngine.from_config_file()
    engine.initialize()

    dagger = Item(name="Dagger", ego_name="of Burning",
                  brands=[DynamicBrand("fire", Element.FIRE, 3)])

    snaga = MonsterRace.create("Snaga", "orc", [MonsterFlag.ORC, MonsterFlag.EVIL])
    red_dragon = MonsterRace.create(
        "Young red dragon", "dragon",
        [MonsterFlag.DRAGON, MonsterFlag.EVIL, MonsterFlag.IM_FIRE]
    )

    try:
        for race in (snaga, red_dragon):
            engine.turn += 1
            result = engine.resolve_attack(dagger, Monster(race), real=True)
            print(f"You {result.verb or 'hit'} the {race.name} "
                  f"({MODIFIER_SOURCE_NAMES[result.source]} x{result.multiplier}).")
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
    finally:
        for text in engine.log_manager.get_texts(LogCategory.BATTLE):
            print(text)
        print(f"Cached slay combinations: {len(engine.slay_cache)}")
        engine.shutdown()


if __name__ == "__main__":
    main()
