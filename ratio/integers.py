"""Fixed-width signed integer domains backed by NumPy dtypes."""
from __future__ import annotations

import numbers
from typing import Any, Optional

import numpy as np

DEFAULT_DTYPE = np.dtype(np.int64)


def resolve_dtype(dtype: Any = None) -> np.dtype:
    """Return the signed integer ``numpy.dtype`` described by *dtype*."""
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        raise TypeError(f"{dtype!r} is not a NumPy dtype") from exc
    if not np.issubdtype(resolved, np.signedinteger):
        raise TypeError(f"integer domain must be a signed integer dtype, got {resolved}")
    return resolved


def bounds(dtype: np.dtype) -> tuple:
    info = np.iinfo(dtype)
    return int(info.min), int(info.max)


def fits(value: int, dtype: np.dtype) -> bool:
    lo, hi = bounds(dtype)
    return lo <= value <= hi


def checked(value: int, dtype: np.dtype) -> int:
    """Return *value* unchanged if it is representable in *dtype*.

    Raises:
        OverflowError: *value* lies outside ``numpy.iinfo(dtype)``.
    """
    if not fits(value, dtype):
        raise OverflowError(f"{value} is out of range for {dtype}")
    return value


def as_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it is an integer."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (numbers.Integral, np.integer)):
        return int(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def infer_dtype(*values: Any) -> Optional[np.dtype]:
    """Return the promoted dtype of the NumPy signed integer scalars among *values*."""
    found = None
    for value in values:
        if isinstance(value, np.signedinteger):
            found = value.dtype if found is None else np.promote_types(found, value.dtype)
    return found


def promote(a: np.dtype, b: np.dtype) -> np.dtype:
    """Return the narrowest signed integer dtype able to hold both *a* and *b*."""
    if a == b:
        return a
    return resolve_dtype(np.promote_types(a, b))


__all__ = [
    "DEFAULT_DTYPE",
    "as_int",
    "bounds",
    "checked",
    "fits",
    "infer_dtype",
    "promote",
    "resolve_dtype",
]
