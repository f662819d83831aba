"""
Slay engine orchestration.

This module wires the slay systems together: configuration, the event bus
and log manager, the catalog, the matcher, the attack modifier resolver with
its identification and lore managers, and the slay cache. The rest of the
combat code talks to the engine rather than to the individual parts.

Startup order matters: initialize() loads the catalog and builds the slay
cache before any attack is resolved or any cache value is read.
"""

import random
from typing import Iterable, Optional, Sequence, TypeVar

from ..core.config import ConfigLoader, SlayConfig
from ..core.data import FlagSet
from ..core.events.event_manager import EventManager
from ..core.events.events import LogMessage
from .combat.attack_modifier import AttackModifier, AttackModifierResolver
from .combat.catalog_loader import CatalogLoader
from .combat.slay_cache import SlayCache
from .combat.slay_catalog import SlayCatalog
from .combat.slay_matcher import SlayDescriptions, SlayMatcher
from .entities.item import EgoItem, Item
from .entities.monster import Monster
from .managers.identify_manager import IdentifyManager
from .managers.log_manager import LogLevel, LogManager
from .managers.lore_manager import LoreManager


TManager = TypeVar("TManager")


class SlayEngine:
    """Owns every slay system for one process run."""

    def __init__(self, config: Optional[SlayConfig] = None, config_loader: Optional[ConfigLoader] = None):
        self.config_loader = config_loader or ConfigLoader()
        self.config = config or self.config_loader.config

        self.event_manager = EventManager(enable_debug_logging=self.config.debug_logging)
        self.log_manager = LogManager(
            self.event_manager,
            max_messages=self.config.max_log_messages,
            default_level=LogLevel.DEBUG if self.config.debug_logging else LogLevel.INFO,
        )
        self.event_manager.set_debug_callback(self.log_manager.debug)

        self._catalog: Optional[SlayCatalog] = None
        self._matcher: Optional[SlayMatcher] = None
        self._resolver: Optional[AttackModifierResolver] = None
        self._slay_cache: Optional[SlayCache] = None
        self.lore_manager = LoreManager(self.event_manager)
        self.identify_manager = IdentifyManager(self.event_manager)
        self._turn = 0

    @classmethod
    def from_config_file(cls, config_path: Optional[str] = None) -> "SlayEngine":
        """Create an engine from a YAML configuration file (defaults on failure)."""
        loader = ConfigLoader(config_path)
        loader.load_config()
        return cls(loader.config, loader)

    def _require_manager(self, manager: Optional[TManager], name: str) -> TManager:
        if manager is None:
            raise RuntimeError(f"{name} not initialized. Call initialize() first.")
        return manager

    @property
    def catalog(self) -> SlayCatalog:
        return self._require_manager(self._catalog, "SlayCatalog")

    @property
    def matcher(self) -> SlayMatcher:
        return self._require_manager(self._matcher, "SlayMatcher")

    @property
    def resolver(self) -> AttackModifierResolver:
        return self._require_manager(self._resolver, "AttackModifierResolver")

    @property
    def slay_cache(self) -> SlayCache:
        return self._require_manager(self._slay_cache, "SlayCache")

    @property
    def turn(self) -> int:
        return self._turn

    @turn.setter
    def turn(self, value: int) -> None:
        self._turn = value
        self.lore_manager.turn = value
        self.identify_manager.turn = value
        if self._resolver is not None:
            self._resolver.turn = value

    def _emit_log(self, message: str, category: str = "SYSTEM", level: LogLevel = LogLevel.INFO) -> None:
        self.event_manager.publish(
            LogMessage(turn=self._turn, message=message, category=category, level=level,
                       source="SlayEngine"),
            source="SlayEngine"
        )

    def initialize(
        self,
        catalog: Optional[SlayCatalog] = None,
        templates: Optional[Iterable[EgoItem]] = None
    ) -> None:
        """Load the catalog and build the slay cache.

        Args:
            catalog: Catalog to use instead of the configured file
            templates: Ego templates to use instead of the configured file
        """
        self._catalog = catalog if catalog is not None else self._load_catalog()

        rng = random.Random(self.config.rng_seed)
        self._matcher = SlayMatcher(self._catalog, rng, self.event_manager)
        self._resolver = AttackModifierResolver(
            self._catalog,
            identify=self.identify_manager,
            lore=self.lore_manager,
            event_manager=self.event_manager,
        )
        self._resolver.turn = self._turn

        self._slay_cache = SlayCache(self._catalog, self.event_manager)
        if templates is None:
            templates = self._load_templates()
        self._slay_cache.build(templates)

        self._emit_log("Slay engine initialized")
        self.event_manager.process_events()

    def _load_catalog(self) -> SlayCatalog:
        path = self.config_loader.resolve_path(self.config.catalog_file) if self.config.catalog_file else None
        if path is None or not path.exists():
            self._emit_log("Using built-in slay catalog")
            return SlayCatalog.default()
        return CatalogLoader.load_from_file(str(path), self.event_manager)

    def _load_templates(self) -> list[EgoItem]:
        path = (self.config_loader.resolve_path(self.config.ego_items_file)
                if self.config.ego_items_file else None)
        if path is None or not path.exists():
            self._emit_log("No ego-item templates configured; slay cache is empty",
                           "WARNING", LogLevel.WARNING)
            return []
        return CatalogLoader.load_ego_items(str(path))

    # ============== Matching ==============

    def enumerate_slays(self, flags: FlagSet, mask: FlagSet, dedup: bool = False) -> list[int]:
        return self.matcher.list_slays(flags, mask, dedup)

    def collect_slay_info(self, slay_ids: Sequence[int]) -> SlayDescriptions:
        return self.matcher.slay_info_collect(slay_ids)

    def random_slay(self, mask: FlagSet) -> Optional[int]:
        result = self.matcher.random_slay(mask)
        self.event_manager.process_events()
        return result

    # ============== Attacks ==============

    def resolve_attack(
        self,
        item: Item,
        monster: Monster,
        real: bool = False,
        known_only: bool = False
    ) -> AttackModifier:
        """Best brand or slay of an item against a monster; see AttackModifierResolver."""
        result = self.resolver.resolve_attack(item, monster, real, known_only)
        self.event_manager.process_events()
        return result

    def react_to_slay(self, item: Item, monster: Monster) -> bool:
        return self.resolver.react_to_slay(item, monster)

    # ============== Slay cache ==============

    def build_slay_cache(self, templates: Iterable[EgoItem]) -> int:
        """Reload the slay cache from a new set of templates.

        This is an explicit reload: a built cache is cleared first, so every
        stored value is dropped and membership comes only from the new
        templates. SlayCache.build() itself never replaces a built cache.

        Returns:
            Number of distinct combinations cached
        """
        if self.slay_cache.is_built:
            self._emit_log(f"Reloading slay cache ({len(self.slay_cache)} combinations dropped)",
                           category="CACHE")
        self.slay_cache.clear()
        count = self.slay_cache.build(templates)
        self.event_manager.process_events()
        return count

    def cache_lookup(self, flags: FlagSet) -> int:
        return self.slay_cache.lookup(flags)

    def cache_fill(self, flags: FlagSet, value: int) -> bool:
        return self.slay_cache.fill(flags, value)

    def shutdown(self) -> None:
        """Release the slay cache and stop the event bus."""
        if self._slay_cache is not None:
            self._slay_cache.clear()
        self.event_manager.process_events()
        self.event_manager.shutdown()
