"""
Basic test fixtures for the slay engine test suite.

Provides the catalog, event bus, managers and a small bestiary shared by the
core and game tests.
"""

import sys
import os
import random
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from src.core.data import Element, MonsterFlag
from src.core.events.event_manager import EventManager
from src.game.combat.attack_modifier import AttackModifierResolver
from src.game.combat.slay_catalog import SlayCatalog
from src.game.combat.slay_matcher import SlayMatcher
from src.game.entities import DynamicBrand, DynamicSlay, Item, Monster, MonsterRace
from src.game.managers import IdentifyManager, LogManager, LoreManager


@pytest.fixture
def catalog():
    """The built-in slay catalog."""
    return SlayCatalog.default()


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager(enable_debug_logging=False)


@pytest.fixture
def log_manager(event_manager):
    """Log manager listening on the test event manager."""
    return LogManager(event_manager)


@pytest.fixture
def matcher(catalog):
    """Slay matcher with a seeded random generator."""
    return SlayMatcher(catalog, random.Random(1234))


@pytest.fixture
def lore_manager(event_manager):
    return LoreManager(event_manager)


@pytest.fixture
def identify_manager(event_manager):
    return IdentifyManager(event_manager)


@pytest.fixture
def resolver(catalog, identify_manager, lore_manager, event_manager):
    """Attack modifier resolver wired to real managers."""
    return AttackModifierResolver(catalog, identify_manager, lore_manager, event_manager)


@pytest.fixture
def orc_race():
    return MonsterRace.create("Snaga", "orc", [MonsterFlag.ORC, MonsterFlag.EVIL])


@pytest.fixture
def fire_dragon_race():
    return MonsterRace.create(
        "Young red dragon", "dragon",
        [MonsterFlag.DRAGON, MonsterFlag.EVIL, MonsterFlag.IM_FIRE]
    )


@pytest.fixture
def orc(orc_race):
    return Monster(orc_race, visible=True)


@pytest.fixture
def fire_dragon(fire_dragon_race):
    return Monster(fire_dragon_race, visible=True)


@pytest.fixture
def fire_sword():
    """A sword with a single unknown fire brand (x3)."""
    return Item(name="Long Sword", ego_name="of Burning",
                brands=[DynamicBrand("fire", Element.FIRE, 3)])


@pytest.fixture
def dragon_slayer():
    """A sword with a single unknown dragon slay (x5)."""
    return Item(name="Broad Sword", ego_name="of *Slay Dragon*",
                slays=[DynamicSlay("dragon", MonsterFlag.DRAGON, 5)])
