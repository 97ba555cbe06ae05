"""Digit store: a fixed-capacity arena holding a movable window of limbs.

The window lists the limbs of one value, most-significant first. It starts
as a single zero limb in the middle of the arena so it can grow toward
either end without moving the limbs already written.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

from biguint.core.errors import CapacityExhausted, InternalInconsistency
from biguint.schemas.config import GrowthPolicy

if TYPE_CHECKING:
    from biguint.schemas.config import EngineConfig


class DigitStore:
    """Arena of limbs plus the (offset, length) window of the current value."""

    def __init__(
        self,
        digits_per_limb: int = 1,
        capacity: int = 1000,
        on_exhausted: GrowthPolicy = GrowthPolicy.REALLOCATE,
        growth_factor: int = 2,
    ) -> None:
        if capacity < 2:
            raise ValueError(f"capacity must be at least 2, got {capacity}")
        self.digits_per_limb = digits_per_limb
        self.base = 10**digits_per_limb
        self.on_exhausted = GrowthPolicy(on_exhausted)
        self.growth_factor = growth_factor
        self.storage: list[int] = [0] * capacity
        self.offset = capacity // 2
        self.length = 1

    @classmethod
    def from_config(cls, config: EngineConfig) -> DigitStore:
        """Create an empty (zero-valued) store using engine settings."""
        return cls(
            digits_per_limb=config.limbs.digits_per_limb,
            capacity=config.arena.capacity,
            on_exhausted=config.arena.on_exhausted,
            growth_factor=config.arena.growth_factor,
        )

    @property
    def capacity(self) -> int:
        return len(self.storage)

    def __len__(self) -> int:
        return self.length

    def _absolute(self, index: int) -> int:
        if not 0 <= index < self.length:
            raise IndexError(f"limb index {index} outside window of {self.length}")
        return self.offset + index

    def __getitem__(self, index: int) -> int:
        return self.storage[self._absolute(index)]

    def __setitem__(self, index: int, value: int) -> None:
        self.storage[self._absolute(index)] = value

    def limbs(self) -> tuple[int, ...]:
        """Limbs of the window, most-significant first."""
        return tuple(self.storage[self.offset : self.offset + self.length])

    def copy(self) -> DigitStore:
        """Return an independent store holding the same value and settings."""
        clone = DigitStore.__new__(DigitStore)
        clone.digits_per_limb = self.digits_per_limb
        clone.base = self.base
        clone.on_exhausted = self.on_exhausted
        clone.growth_factor = self.growth_factor
        clone.storage = list(self.storage)
        clone.offset = self.offset
        clone.length = self.length
        return clone

    # -- Growth ----------------------------------------------------------------

    def grow_right(self) -> None:
        """Append a zero least-significant limb after the window."""
        if self.offset + self.length == self.capacity:
            self._make_room("right")
        self.length += 1
        self.storage[self.offset + self.length - 1] = 0

    def grow_left(self) -> None:
        """Prepend a zero most-significant limb before the window."""
        if self.offset == 0:
            self._make_room("left")
        self.offset -= 1
        self.length += 1
        self.storage[self.offset] = 0

    def _make_room(self, side: str) -> None:
        if self.on_exhausted is GrowthPolicy.RAISE:
            raise CapacityExhausted(side=side, capacity=self.capacity)

        # Re-centre the window in a larger arena; leaves room on both sides.
        new_capacity = max(self.capacity * self.growth_factor, self.length + 2)
        new_offset = (new_capacity - self.length) // 2
        storage = [0] * new_capacity
        storage[new_offset : new_offset + self.length] = self.limbs()
        self.storage = storage
        self.offset = new_offset

    def trim_left(self) -> None:
        """Drop leading zero limbs, keeping at least one limb."""
        while self.length > 1 and self.storage[self.offset] == 0:
            self.offset += 1
            self.length -= 1

    # -- Views -----------------------------------------------------------------

    def view(self, mutable: bool = False) -> LimbView:
        """Expose the window as a view consumed from its least-significant end."""
        return LimbView(self, mutable=mutable)

    def validate(self) -> None:
        """Check the window invariants.

        Raises:
            InternalInconsistency: If any invariant does not hold
        """
        if self.length < 1:
            raise InternalInconsistency("window is empty")
        if self.offset < 0 or self.offset + self.length > self.capacity:
            raise InternalInconsistency(
                f"window [{self.offset}, {self.offset + self.length}) "
                f"exceeds arena of {self.capacity}"
            )
        limbs = self.limbs()
        for index, limb in enumerate(limbs):
            if not 0 <= limb < self.base:
                raise InternalInconsistency(
                    f"limb {index} = {limb} outside [0, {self.base})"
                )
        if self.length > 1 and limbs[0] == 0:
            raise InternalInconsistency("leading zero limb in non-zero value")


class LimbView:
    """Most-significant-first sequence over a store's window.

    The arithmetic engine reads and writes ``back`` (the current
    least-significant limb) and calls ``shrink()`` to move one limb toward the
    most-significant end. A view is invalidated by ``grow_left()``.
    """

    def __init__(self, store: DigitStore, mutable: bool = False) -> None:
        self._store = store
        self._mutable = mutable
        self._size = len(store)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        for index in range(self._size):
            yield self._store[index]

    @property
    def position(self) -> int:
        """Window index of the current least-significant limb."""
        if not self._size:
            raise IndexError("limb view is exhausted")
        return self._size - 1

    @property
    def back(self) -> int:
        return self._store[self.position]

    @back.setter
    def back(self, value: int) -> None:
        if not self._mutable:
            raise TypeError("limb view is read-only")
        self._store[self.position] = value

    def shrink(self) -> None:
        """Drop the current least-significant limb from the view."""
        if not self._size:
            raise IndexError("limb view is exhausted")
        self._size -= 1
