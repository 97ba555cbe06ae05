"""Arbitrary-precision unsigned integer arithmetic.

Decimal text is parsed into limbs held in a fixed arena, compared, added
and subtracted limb by limb, and rendered back to decimal.
"""

__version__ = "0.1.0"

from biguint.core.arithmetic import Ordering
from biguint.core.errors import (
    BigUintError,
    CapacityExhausted,
    InternalInconsistency,
    LimbBaseMismatch,
    ParseError,
)
from biguint.core.number import (
    BigUint,
    add,
    compare,
    equals,
    format_decimal,
    less_than,
    parse,
    signed_difference,
    subtract,
)
from biguint.schemas.config import EngineConfig, GrowthPolicy

__all__ = [
    "BigUint",
    "BigUintError",
    "CapacityExhausted",
    "EngineConfig",
    "GrowthPolicy",
    "InternalInconsistency",
    "LimbBaseMismatch",
    "Ordering",
    "ParseError",
    "add",
    "compare",
    "equals",
    "format_decimal",
    "less_than",
    "parse",
    "signed_difference",
    "subtract",
]
