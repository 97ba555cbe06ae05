"""BigUint value type and the library-level arithmetic functions."""

from __future__ import annotations

from functools import total_ordering
from typing import TYPE_CHECKING

from biguint.core import arithmetic
from biguint.core.arithmetic import Ordering
from biguint.core.formatter import format_store
from biguint.core.parser import parse_digits, store_from_int

if TYPE_CHECKING:
    from biguint.core.store import DigitStore
    from biguint.schemas.config import EngineConfig


@total_ordering
class BigUint:
    """Immutable arbitrary-precision unsigned integer.

    Subtraction is a difference of magnitudes: ``a - b`` equals ``b - a``.
    Use ``signed_difference()`` when the sign matters.
    """

    __slots__ = ("_store",)

    def __init__(self, store: DigitStore) -> None:
        self._store = store

    @classmethod
    def parse(cls, text: str, config: EngineConfig | None = None) -> BigUint:
        return cls(parse_digits(text, config))

    @classmethod
    def from_int(cls, value: int, config: EngineConfig | None = None) -> BigUint:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        return cls(store_from_int(value, config))

    # -- Introspection ---------------------------------------------------------

    @property
    def limbs(self) -> tuple[int, ...]:
        return self._store.limbs()

    @property
    def base(self) -> int:
        return self._store.base

    @property
    def window(self) -> tuple[int, int]:
        """``(offset, length)`` of the value inside its arena."""
        return self._store.offset, self._store.length

    @property
    def capacity(self) -> int:
        return self._store.capacity

    @property
    def is_zero(self) -> bool:
        return self.limbs == (0,)

    def __len__(self) -> int:
        return len(self._store)

    def __int__(self) -> int:
        value = 0
        for limb in self.limbs:
            value = value * self.base + limb
        return value

    def __str__(self) -> str:
        return format_store(self._store)

    def __repr__(self) -> str:
        return f"BigUint('{self}')"

    # -- Ordering --------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BigUint):
            return NotImplemented
        if self.base != other.base:
            return int(self) == int(other)
        return arithmetic.compare(self._store, other._store) is Ordering.EQUAL

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BigUint):
            return NotImplemented
        return arithmetic.compare(self._store, other._store) is Ordering.LESS

    def __hash__(self) -> int:
        return hash(int(self))

    # -- Arithmetic ------------------------------------------------------------

    def __add__(self, other: object) -> BigUint:
        if not isinstance(other, BigUint):
            return NotImplemented
        return BigUint(arithmetic.add_stores(self._store, other._store))

    def __sub__(self, other: object) -> BigUint:
        if not isinstance(other, BigUint):
            return NotImplemented
        return BigUint(arithmetic.subtract_stores(self._store, other._store))


def parse(text: str, config: EngineConfig | None = None) -> BigUint:
    """Parse decimal text into a BigUint.

    Raises:
        ParseError: If the text is not a non-negative decimal integer
    """
    return BigUint.parse(text, config)


def compare(a: BigUint, b: BigUint) -> Ordering:
    """Compare two values; see ``Ordering``."""
    return arithmetic.compare(a._store, b._store)


def equals(a: BigUint, b: BigUint) -> bool:
    """Same as ``a == b``: values with different limb bases compare numerically."""
    return a == b


def less_than(a: BigUint, b: BigUint) -> bool:
    return compare(a, b) is Ordering.LESS


def add(a: BigUint, b: BigUint) -> BigUint:
    return a + b


def subtract(a: BigUint, b: BigUint) -> BigUint:
    """Return ``max(a, b) - min(a, b)``, whatever the argument order."""
    return a - b


def signed_difference(a: BigUint, b: BigUint) -> tuple[BigUint, bool]:
    """Return the magnitude of ``a - b`` and whether ``a - b`` is negative.

    Examples:
        >>> signed_difference(parse("3"), parse("10"))
        (BigUint('7'), True)
    """
    magnitude, negative = arithmetic.signed_difference(a._store, b._store)
    return BigUint(magnitude), negative


def format_decimal(value: BigUint) -> str:
    """Render a value as canonical decimal text (``"0"`` for zero)."""
    return str(value)
