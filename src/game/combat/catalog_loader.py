"""
Loading of slay catalogs and ego-item templates from YAML files.

Catalog file layout:

    slays:
      - id: 1
        object_flag: SLAY_EVIL
        monster_flag: EVIL
        resist_flag: NONE
        multiplier: 2
        desc: evil creatures
    brands:
      FIRE:
        active_verb: flares
        melee_verb: burn
        melee_verb_weak: singe
        resist_flag: IM_FIRE

Ego-item file layout:

    ego_items:
      - name: of Burning
        flags: [BRAND_FIRE]
        brands:
          - {name: fire, element: FIRE, multiplier: 3}
        slays:
          - {name: orc, race_flag: ORC, multiplier: 3}

The null slay (id 0) is added automatically when a catalog file omits it.
"""
from pathlib import Path
from typing import Any, Optional, Type, TypeVar, TYPE_CHECKING
from enum import Enum

import yaml

from ...core.data import (
    ELEMENT_NAMES,
    NULL_SLAY,
    OF_SIZE,
    BrandInfo,
    Element,
    FlagSet,
    MonsterFlag,
    ObjectFlag,
    SlayInfo,
)
from ...core.events import CatalogLoaded, LogMessage
from ..entities import DynamicBrand, DynamicSlay, EgoItem
from ..managers.log_manager import LogLevel
from .slay_catalog import SlayCatalog, SlayCatalogError

if TYPE_CHECKING:
    from ...core.events import EventManager


E = TypeVar("E", bound=Enum)


def _read_yaml(file_path: str) -> dict[str, Any]:
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Data file not found: {file_path}")
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML data file {file_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Data file {file_path} must contain a mapping at top level")
    return data


def _enum_value(enum_type: Type[E], name: Any, context: str) -> E:
    try:
        return enum_type[str(name).upper()]
    except KeyError:
        raise SlayCatalogError(f"Unknown {enum_type.__name__} '{name}' in {context}")


class CatalogLoader:
    """Handles loading slay catalogs and ego templates from YAML files."""

    @staticmethod
    def load_from_file(
        file_path: str,
        event_manager: Optional["EventManager"] = None
    ) -> SlayCatalog:
        """Load a slay catalog from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid YAML
            SlayCatalogError: If the definitions are inconsistent
        """
        data = _read_yaml(file_path)
        catalog = CatalogLoader.parse_catalog(data)

        if event_manager is not None:
            brand_count = len(catalog.brands)
            event_manager.publish(
                CatalogLoaded(
                    turn=0,
                    slay_count=len(catalog) - 1,
                    brand_count=brand_count,
                    source_path=file_path,
                ),
                source="CatalogLoader"
            )
            event_manager.publish(
                LogMessage(
                    turn=0,
                    message=(f"Loaded {len(catalog) - 1} slays and {brand_count} brands "
                             f"from {Path(file_path).name}"),
                    category="SYSTEM",
                    level=LogLevel.INFO,
                    source="CatalogLoader"
                ),
                source="CatalogLoader"
            )
        return catalog

    @staticmethod
    def parse_catalog(data: dict[str, Any]) -> SlayCatalog:
        """Build a catalog from already-parsed YAML data."""
        slays = [CatalogLoader._parse_slay(entry) for entry in data.get("slays") or []]
        slays.sort(key=lambda slay: slay.slay_id)
        if not slays or slays[0].slay_id != 0:
            slays.insert(0, NULL_SLAY)

        brands: dict[Element, BrandInfo] = {}
        for element_name, brand_data in (data.get("brands") or {}).items():
            element = _enum_value(Element, element_name, "brands")
            try:
                brands[element] = BrandInfo(
                    active_verb=brand_data["active_verb"],
                    melee_verb=brand_data["melee_verb"],
                    melee_verb_weak=brand_data.get("melee_verb_weak", brand_data["melee_verb"]),
                    resist_flag=_enum_value(MonsterFlag, brand_data["resist_flag"],
                                            f"brand {element_name}"),
                )
            except KeyError as e:
                raise SlayCatalogError(f"Brand {element_name} missing field {e}")

        return SlayCatalog(slays, brands)

    @staticmethod
    def _parse_slay(entry: dict[str, Any]) -> SlayInfo:
        try:
            slay_id = int(entry["id"])
            context = f"slay {slay_id}"
            return SlayInfo(
                slay_id=slay_id,
                object_flag=_enum_value(ObjectFlag, entry["object_flag"], context),
                monster_flag=_enum_value(MonsterFlag, entry.get("monster_flag", "NONE"), context),
                resist_flag=_enum_value(MonsterFlag, entry.get("resist_flag", "NONE"), context),
                multiplier=int(entry["multiplier"]),
                desc=entry.get("desc"),
                brand=entry.get("brand"),
            )
        except KeyError as e:
            raise SlayCatalogError(f"Slay entry missing field {e}: {entry}")

    @staticmethod
    def load_ego_items(file_path: str) -> list[EgoItem]:
        """Load ego-item templates from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid YAML
            SlayCatalogError: If a template names an unknown flag or element
        """
        data = _read_yaml(file_path)
        return [CatalogLoader._parse_ego(entry) for entry in data.get("ego_items") or []]

    @staticmethod
    def _parse_ego(entry: dict[str, Any]) -> EgoItem:
        name = entry.get("name", "Unnamed Ego")
        context = f"ego item '{name}'"
        try:
            return CatalogLoader._build_ego(entry, name, context)
        except KeyError as e:
            raise SlayCatalogError(f"Ego item entry missing field {e} in {context}")

    @staticmethod
    def _build_ego(entry: dict[str, Any], name: str, context: str) -> EgoItem:
        flags = FlagSet(OF_SIZE)
        for flag_name in entry.get("flags") or []:
            flags.turn_on(_enum_value(ObjectFlag, flag_name, context))

        brands = []
        for brand in entry.get("brands") or []:
            element = _enum_value(Element, brand["element"], context)
            brands.append(DynamicBrand(
                name=brand.get("name") or ELEMENT_NAMES[element],
                element=element,
                multiplier=int(brand["multiplier"]),
            ))
        slays = [
            DynamicSlay(
                name=slay["name"],
                race_flag=_enum_value(MonsterFlag, slay.get("race_flag", "NONE"), context),
                multiplier=int(slay["multiplier"]),
            )
            for slay in entry.get("slays") or []
        ]
        return EgoItem(name=name, flags=flags, brands=brands, slays=slays)
