"""Exception types for the BigUint engine."""

from __future__ import annotations

from dataclasses import dataclass


class BigUintError(Exception):
    """Base class for every error raised by the engine."""


@dataclass
class ParseError(BigUintError, ValueError):
    """Error raised when a token is not a non-negative decimal integer."""

    message: str
    text: str = ""
    position: int | None = None

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} (at position {self.position} in {self.text!r})"


@dataclass
class CapacityExhausted(BigUintError, RuntimeError):
    """Error raised when a digit store cannot grow inside its arena."""

    side: str
    capacity: int

    def __str__(self) -> str:
        return f"arena exhausted: cannot grow {self.side} (capacity {self.capacity} limbs)"


class InternalInconsistency(BigUintError, AssertionError):
    """Raised when an arithmetic invariant is broken. Indicates a bug."""


class LimbBaseMismatch(BigUintError, ValueError):
    """Raised when two operands use different limb bases."""

    def __init__(self, left: int, right: int) -> None:
        self.left = left
        self.right = right
        super().__init__(f"limb base mismatch: {left} vs {right}")
