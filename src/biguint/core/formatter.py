"""Formatter rendering a digit store as canonical decimal text."""

from __future__ import annotations

from biguint.core.store import DigitStore


def format_store(store: DigitStore) -> str:
    """Render a store as a decimal string.

    The most-significant limb is written as is; every later limb is
    zero-padded to the limb width so interior zeros are not lost.

    Args:
        store: A canonical digit store

    Returns:
        Decimal text without leading zeros (``"0"`` for zero)

    Examples:
        >>> from biguint.core.parser import parse_digits
        >>> format_store(parse_digits("1000"))
        '1000'
    """
    width = store.digits_per_limb
    head, *tail = store.limbs()
    return str(head) + "".join(f"{limb:0{width}d}" for limb in tail)
