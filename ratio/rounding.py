"""Rounding modes for rational numbers."""
from __future__ import annotations

from contextvars import ContextVar, Token
from enum import Enum, unique


@unique
class Rounding(Enum):
    """Enumeration of rounding modes."""

    def __new__(cls, value: int, doc: str) -> "Rounding":
        member = object.__new__(cls)
        member._value_ = value
        member.__doc__ = doc
        return member

    TO_NEAREST_OR_EVEN = (1, "Round to nearest with ties going to the even integer.")
    TO_NEAREST_OR_AWAY_FROM_ZERO = (2, "Round to nearest with ties going away from zero.")
    TO_NEAREST_OR_TOWARD_ZERO = (3, "Round to nearest with ties going towards zero.")
    UP = (4, "Round towards +Infinity.")
    DOWN = (5, "Round towards -Infinity.")
    TOWARD_ZERO = (6, "Round towards zero.")
    AWAY_FROM_ZERO = (7, "Round away from zero.")


_default_rounding: ContextVar[Rounding] = ContextVar(
    "default_rounding", default=Rounding.TO_NEAREST_OR_AWAY_FROM_ZERO
)


def get_default_rounding() -> Rounding:
    """Return the rounding mode used by ``Rational.rounded()`` without a mode."""
    return _default_rounding.get()


def set_default_rounding(rounding: Rounding) -> Token:
    """Set the default rounding mode for the current context.

    Returns the :class:`contextvars.Token` needed to restore the previous
    mode via :func:`reset_default_rounding`.

    Raises:
        TypeError: *rounding* is not a :class:`Rounding` member.
    """
    if not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    return _default_rounding.set(rounding)


def reset_default_rounding(token: Token) -> None:
    _default_rounding.reset(token)


def round_quotient(numerator: int, denominator: int, rounding: Rounding) -> int:
    """Round ``numerator / denominator`` to an integer using *rounding*.

    *denominator* must be positive.
    """
    if not isinstance(rounding, Rounding):
        raise TypeError(f"Illegal rounding mode: {rounding!r}")
    sign = -1 if numerator < 0 else 1
    quotient = sign * (abs(numerator) // denominator)
    remainder = numerator - quotient * denominator
    if remainder == 0:
        return quotient

    if rounding is Rounding.TOWARD_ZERO:
        return quotient
    if rounding is Rounding.AWAY_FROM_ZERO:
        return quotient + sign
    if rounding is Rounding.UP:
        return quotient + 1 if sign > 0 else quotient
    if rounding is Rounding.DOWN:
        return quotient if sign > 0 else quotient - 1

    twice = 2 * abs(remainder)
    if twice < denominator:
        return quotient
    if twice > denominator:
        return quotient + sign
    # exactly halfway
    if rounding is Rounding.TO_NEAREST_OR_EVEN:
        return quotient if quotient % 2 == 0 else quotient + sign
    if rounding is Rounding.TO_NEAREST_OR_AWAY_FROM_ZERO:
        return quotient + sign
    return quotient


__all__ = [
    "Rounding",
    "get_default_rounding",
    "reset_default_rounding",
    "round_quotient",
    "set_default_rounding",
]
