"""Parser turning decimal text into a digit store."""

from __future__ import annotations

from biguint.core.errors import ParseError
from biguint.core.store import DigitStore
from biguint.schemas.config import DEFAULT_CONFIG, EngineConfig

DECIMAL_BASE = 10
DECIMAL_DIGITS = frozenset("0123456789")


def parse_digits(text: str, config: EngineConfig | None = None) -> DigitStore:
    """Parse a non-negative decimal integer into a new digit store.

    Leading zeros are skipped; surrounding whitespace is ignored.

    Args:
        text: Decimal token such as ``"00123"``
        config: Engine settings (limb width, arena size); defaults apply if omitted

    Returns:
        A canonical store holding the parsed value

    Raises:
        ParseError: If the token is empty or holds a non-digit character

    Examples:
        >>> parse_digits("0042").limbs()
        (4, 2)
    """
    token = text.strip()
    if not token:
        raise ParseError("empty number", text=text)

    for position, char in enumerate(token):
        if char not in DECIMAL_DIGITS:
            raise ParseError(f"invalid digit {char!r}", text=token, position=position)

    store = DigitStore.from_config(config or DEFAULT_CONFIG)
    digits = token.lstrip("0")
    if not digits:
        return store

    # Limbs are aligned at the least-significant end, so only the first
    # limb may hold fewer than digits_per_limb digits.
    width = store.digits_per_limb
    room = len(digits) % width or width
    filled = 0

    for char in digits:
        if filled == room:
            store.grow_right()
            room, filled = width, 0
        last = len(store) - 1
        store[last] = store[last] * DECIMAL_BASE + (ord(char) - ord("0"))
        filled += 1

    return store


def store_from_int(value: int, config: EngineConfig | None = None) -> DigitStore:
    """Build a digit store from a non-negative int without going through text.

    Limbs are produced least-significant first and prepended with
    ``grow_left()``.

    Raises:
        ValueError: If value is negative
    """
    if value < 0:
        raise ValueError("BigUint cannot hold a negative value")

    store = DigitStore.from_config(config or DEFAULT_CONFIG)
    value, store[0] = divmod(value, store.base)
    while value:
        store.grow_left()
        value, store[0] = divmod(value, store.base)
    return store
