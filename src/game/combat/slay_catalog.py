"""
Slay catalog: the immutable registry of slay and brand kinds.

The catalog is built once at startup (from the built-in tables or from a
YAML file, see catalog_loader.py) and shared read-only for the rest of the
process. Entry 0 is always the null slay.
"""
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence

from ...core.data import (
    BRAND_DATA,
    OBJECT_FLAG_TYPES,
    OF_SIZE,
    SLAY_DATA,
    BrandInfo,
    Element,
    FlagSet,
    ObjectFlag,
    ObjectFlagType,
    SlayInfo,
)


class SlayCatalogError(Exception):
    """Raised when a slay catalog definition is inconsistent."""
    pass


class SlayCatalog:
    """Process-wide table of slay definitions and brand definitions."""

    def __init__(
        self,
        slays: Sequence[SlayInfo],
        brands: Mapping[Element, BrandInfo],
        flag_types: Optional[Mapping[ObjectFlag, ObjectFlagType]] = None
    ):
        """Build and validate a catalog.

        Args:
            slays: Slay definitions; slays[i].slay_id must equal i and
                entry 0 must be the null slay
            brands: Brand definitions by element
            flag_types: Type of every object flag, used by create_mask()

        Raises:
            SlayCatalogError: If the definitions are inconsistent
        """
        self._slays: tuple[SlayInfo, ...] = tuple(slays)
        self._brands: Mapping[Element, BrandInfo] = MappingProxyType(dict(brands))
        self._flag_types: Mapping[ObjectFlag, ObjectFlagType] = MappingProxyType(
            dict(flag_types if flag_types is not None else OBJECT_FLAG_TYPES)
        )
        self._validate()
        self._by_object_flag: Mapping[ObjectFlag, SlayInfo] = MappingProxyType({
            slay.object_flag: slay for slay in self._slays[1:]
        })

    @classmethod
    def default(cls) -> "SlayCatalog":
        """Create the catalog from the built-in tables."""
        return cls(SLAY_DATA, BRAND_DATA)

    def _validate(self) -> None:
        if not self._slays:
            raise SlayCatalogError("Catalog must contain at least the null slay")
        if not self._slays[0].is_null or self._slays[0].object_flag != ObjectFlag.NONE:
            raise SlayCatalogError("Catalog entry 0 must be the null slay")

        seen_flags: set[ObjectFlag] = set()
        for index, slay in enumerate(self._slays):
            if slay.slay_id != index:
                raise SlayCatalogError(
                    f"Slay at position {index} has id {slay.slay_id}"
                )
            if index == 0:
                continue
            if slay.object_flag == ObjectFlag.NONE:
                raise SlayCatalogError(f"Slay {index} has no object flag")
            if slay.object_flag in seen_flags:
                raise SlayCatalogError(
                    f"Object flag {slay.object_flag.name} used by more than one slay"
                )
            if slay.multiplier < 1:
                raise SlayCatalogError(
                    f"Slay {index} has multiplier {slay.multiplier}, must be at least 1"
                )
            seen_flags.add(slay.object_flag)

    # ============== Lookup ==============

    @property
    def slays(self) -> tuple[SlayInfo, ...]:
        """All slay definitions, indexed by slay id (entry 0 is null)."""
        return self._slays

    @property
    def brands(self) -> Mapping[Element, BrandInfo]:
        return self._brands

    def __len__(self) -> int:
        return len(self._slays)

    def get_slay(self, slay_id: int) -> SlayInfo:
        """Get a slay definition by id.

        Raises:
            IndexError: If the id is outside the catalog
        """
        if slay_id < 0 or slay_id >= len(self._slays):
            raise IndexError(f"Slay id {slay_id} out of range")
        return self._slays[slay_id]

    def get_brand(self, element: Element) -> BrandInfo:
        """Get the brand definition for an element.

        Raises:
            KeyError: If the catalog has no brand for the element
        """
        return self._brands[element]

    def slay_from_object_flag(self, flag: ObjectFlag) -> Optional[SlayInfo]:
        """Get the non-null slay whose object flag is flag, if any."""
        return self._by_object_flag.get(flag)

    def iter_non_null(self) -> Iterable[SlayInfo]:
        """Iterate over every slay except the null entry."""
        return iter(self._slays[1:])

    # ============== Masks ==============

    def create_mask(self, *flag_types: ObjectFlagType) -> FlagSet:
        """Create a mask of every object flag belonging to the given types."""
        wanted = set(flag_types)
        mask = FlagSet(OF_SIZE)
        for flag, flag_type in self._flag_types.items():
            if flag_type in wanted and flag != ObjectFlag.NONE:
                mask.turn_on(flag)
        return mask

    def slay_mask(self) -> FlagSet:
        """Mask of every slay, kill and brand object flag."""
        return self.create_mask(ObjectFlagType.SLAY, ObjectFlagType.KILL, ObjectFlagType.BRAND)
