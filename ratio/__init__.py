"""Fixed-width rational numbers."""

from .integers import DEFAULT_DTYPE
from .rational import (
    Mixed,
    Rational,
    Sign,
    as_rational_array,
    rationalize,
    zeros,
    zeros_like,
)
from .rounding import (
    Rounding,
    get_default_rounding,
    reset_default_rounding,
    set_default_rounding,
)

__all__ = [
    "Rational",
    "Rounding",
    "Sign",
    "Mixed",
    "rationalize",
    "DEFAULT_DTYPE",
    "get_default_rounding",
    "set_default_rounding",
    "reset_default_rounding",
    "as_rational_array",
    "zeros",
    "zeros_like",
]
