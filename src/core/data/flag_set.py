"""Fixed-width flag sets.

This module provides the bit-set used for object flags, monster race flags
and monster lore. A flag set has a fixed width chosen at creation time and
stores one boolean per flag in a numpy array, so set algebra over a whole
set is a single vectorised operation.

All operations are total over flags inside the width. Only the mutating
forms (copy_from, intersect, turn_on, turn_off, clear) change the set.
"""

from typing import Iterable, Iterator, Optional

import numpy as np
from numpy.typing import NDArray


class FlagSet:
    """A fixed-width set of integer flags backed by a numpy bool array."""

    __slots__ = ("_bits",)

    def __init__(self, width: int, flags: Optional[Iterable[int]] = None):
        """Create an empty flag set, optionally with some flags turned on.

        Args:
            width: Number of flags the set can hold
            flags: Flags to turn on initially
        """
        if width < 0:
            raise ValueError("FlagSet width must not be negative")
        self._bits: NDArray[np.bool_] = np.zeros(width, dtype=np.bool_)
        if flags is not None:
            for flag in flags:
                self.turn_on(flag)

    @classmethod
    def from_numpy(cls, bits: NDArray[np.bool_]) -> "FlagSet":
        """Create a flag set from a 1-D boolean array (the array is copied)."""
        if bits.ndim != 1:
            raise ValueError("Array must be one-dimensional for FlagSet conversion")
        flag_set = cls(len(bits))
        flag_set._bits[:] = bits.astype(np.bool_)
        return flag_set

    @property
    def width(self) -> int:
        """Number of flags the set can hold."""
        return len(self._bits)

    @property
    def bits(self) -> NDArray[np.bool_]:
        """Read-only view of the underlying boolean array."""
        view = self._bits.view()
        view.flags.writeable = False
        return view

    def _check_width(self, other: "FlagSet") -> None:
        if self.width != other.width:
            raise ValueError(
                f"FlagSet width mismatch: {self.width} != {other.width}"
            )

    def _check_flag(self, flag: int) -> int:
        index = int(flag)
        if index < 0 or index >= self.width:
            raise IndexError(f"Flag {index} out of range for width {self.width}")
        return index

    # Non-mutating operations

    def copy(self) -> "FlagSet":
        """Return an independent copy of this flag set."""
        return FlagSet.from_numpy(self._bits)

    def has(self, flag: int) -> bool:
        """Check whether a flag is on."""
        return bool(self._bits[self._check_flag(flag)])

    def is_empty(self) -> bool:
        """Check whether no flag is on."""
        return not bool(self._bits.any())

    def is_equal(self, other: "FlagSet") -> bool:
        """Check whether both sets have exactly the same flags on."""
        self._check_width(other)
        return bool(np.array_equal(self._bits, other._bits))

    def intersection(self, other: "FlagSet") -> "FlagSet":
        """Return a new set holding the flags on in both sets."""
        result = self.copy()
        result.intersect(other)
        return result

    def count(self) -> int:
        """Number of flags that are on."""
        return int(np.count_nonzero(self._bits))

    def to_key(self) -> bytes:
        """Canonical byte form, usable as a dictionary key.

        Two sets have equal keys exactly when they have the same width and
        is_equal() holds between them. The width leads the key because
        packbits pads the last byte with zeros.
        """
        return self.width.to_bytes(4, "little") + np.packbits(self._bits).tobytes()

    def __iter__(self) -> Iterator[int]:
        """Iterate over the flags that are on, in ascending order."""
        for index in np.flatnonzero(self._bits):
            yield int(index)

    def __contains__(self, flag: int) -> bool:
        return self.has(flag)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlagSet):
            return NotImplemented
        return self.width == other.width and self.is_equal(other)

    def __repr__(self) -> str:
        return f"FlagSet(width={self.width}, flags={list(self)})"

    # Mutating operations

    def copy_from(self, source: "FlagSet") -> None:
        """Overwrite this set with the contents of source."""
        self._check_width(source)
        self._bits[:] = source._bits

    def intersect(self, other: "FlagSet") -> None:
        """Keep only the flags that are also on in other."""
        self._check_width(other)
        np.logical_and(self._bits, other._bits, out=self._bits)

    def turn_on(self, flag: int) -> bool:
        """Turn a flag on. Returns True if it was previously off."""
        index = self._check_flag(flag)
        changed = not self._bits[index]
        self._bits[index] = True
        return bool(changed)

    def turn_off(self, flag: int) -> bool:
        """Turn a flag off. Returns True if it was previously on."""
        index = self._check_flag(flag)
        changed = bool(self._bits[index])
        self._bits[index] = False
        return changed

    def clear(self) -> None:
        """Turn every flag off."""
        self._bits[:] = False
