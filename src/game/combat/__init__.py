"""Combat system components for brands and slays.

This package contains the slay logic with clear separation of concerns:
- slay_catalog.py: Immutable registry of slay and brand kinds
- catalog_loader.py: YAML loading of catalogs and ego-item templates
- slay_matcher.py: Deduplication, enumeration and random choice of slays
- attack_modifier.py: Best multiplier and verb for an attack, and what it teaches
- slay_cache.py: Cached values of slay combinations for item power scoring
"""

from .slay_catalog import SlayCatalog, SlayCatalogError
from .catalog_loader import CatalogLoader
from .slay_matcher import SlayMatcher, SlayDescriptions
from .attack_modifier import AttackModifier, AttackModifierResolver, slay_applies
from .slay_cache import SlayCache, SlayCacheError, FlagCacheEntry

__all__ = [
    "SlayCatalog",
    "SlayCatalogError",
    "CatalogLoader",
    "SlayMatcher",
    "SlayDescriptions",
    "AttackModifier",
    "AttackModifierResolver",
    "slay_applies",
    "SlayCache",
    "SlayCacheError",
    "FlagCacheEntry",
]
