"""Comparison, addition and subtraction over digit stores.

Operands are never mutated: each operation copies the larger operand and
works on the copy. Subtraction is unsigned and always computes
``max(a, b) - min(a, b)``.
"""

from __future__ import annotations

from enum import Enum

from biguint.core.errors import InternalInconsistency, LimbBaseMismatch
from biguint.core.store import DigitStore


class Ordering(str, Enum):
    """Result of comparing two values."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


def _check_bases(a: DigitStore, b: DigitStore) -> None:
    if a.base != b.base:
        raise LimbBaseMismatch(a.base, b.base)


def compare(a: DigitStore, b: DigitStore) -> Ordering:
    """Compare two canonical stores.

    Fewer limbs means smaller; equal lengths are compared limb by limb from
    the most-significant end.

    Raises:
        LimbBaseMismatch: If the stores use different limb bases
    """
    _check_bases(a, b)

    if len(a) != len(b):
        return Ordering.LESS if len(a) < len(b) else Ordering.GREATER

    for left, right in zip(a.view(), b.view()):
        if left != right:
            return Ordering.LESS if left < right else Ordering.GREATER
    return Ordering.EQUAL


def order_by_size(a: DigitStore, b: DigitStore) -> tuple[DigitStore, DigitStore]:
    """Return ``(smaller, bigger)``."""
    if compare(a, b) is Ordering.LESS:
        return a, b
    return b, a


def add_stores(a: DigitStore, b: DigitStore) -> DigitStore:
    """Return a new store holding ``a + b``."""
    smaller, bigger = order_by_size(a, b)
    result = bigger.copy()
    base = result.base

    small = smaller.view()
    res = result.view(mutable=True)
    carry = False

    while small:
        value = res.back + small.back + carry
        carry = value >= base
        res.back = value - base if carry else value
        res.shrink()
        small.shrink()

    while carry:
        if not res:
            # Carry escaped the top limb.
            result.grow_left()
            result[0] = 1
            break
        value = res.back + 1
        carry = value >= base
        res.back = value - base if carry else value
        res.shrink()

    result.validate()
    return result


def _borrow(result: DigitStore, position: int) -> None:
    """Borrow one unit of the base for the limb at ``position``.

    The nearest non-zero limb above ``position`` is decremented, the zero
    limbs in between become ``base - 1`` and the limb at ``position`` gains
    ``base``.
    """
    lender = position - 1
    while lender >= 0 and result[lender] == 0:
        lender -= 1
    if lender < 0:
        raise InternalInconsistency(f"no non-zero limb above position {position} to borrow from")

    result[lender] -= 1
    for index in range(lender + 1, position):
        result[index] += result.base - 1
    result[position] += result.base


def subtract_stores(a: DigitStore, b: DigitStore) -> DigitStore:
    """Return a new store holding ``max(a, b) - min(a, b)``."""
    smaller, bigger = order_by_size(a, b)
    result = bigger.copy()

    small = smaller.view()
    res = result.view(mutable=True)

    while small:
        if res.back < small.back:
            _borrow(result, res.position)
        res.back = res.back - small.back
        res.shrink()
        small.shrink()

    result.trim_left()
    result.validate()
    return result


def signed_difference(a: DigitStore, b: DigitStore) -> tuple[DigitStore, bool]:
    """Return ``(|a - b|, a < b)``."""
    negative = compare(a, b) is Ordering.LESS
    return subtract_stores(a, b), negative
