"""Fixed-width rational numbers with IEEE-754 style special values.

A :class:`Rational` stores a reduced numerator/denominator pair drawn from a
NumPy signed integer domain (``int64`` unless told otherwise).  Zero
denominators encode the special values: ``0/0`` is NaN, ``1/0`` is +Infinity
and ``-1/0`` is -Infinity.  Results that do not fit the domain raise
:class:`OverflowError` instead of wrapping.
"""
from __future__ import annotations

import math
import numbers
import operator
from enum import Enum
from fractions import Fraction
from typing import Any, Callable, NamedTuple, Optional, Tuple, Union

import numpy as np

from .integers import (
    DEFAULT_DTYPE,
    as_int,
    bounds,
    checked,
    fits,
    infer_dtype,
    promote,
    resolve_dtype,
)
from .rounding import Rounding, get_default_rounding, round_quotient

NumberLike = Union["Rational", Fraction, numbers.Real]


class Sign(Enum):
    PLUS = "plus"
    MINUS = "minus"


class Mixed(NamedTuple):
    """Mixed-number view of a finite :class:`Rational`."""

    whole: int
    fractional: "Rational"


def _signum(value: int) -> int:
    return (value > 0) - (value < 0)


def _normalize(num: int, den: int, dtype: np.dtype) -> Tuple[int, int]:
    """Return the canonical ``(numerator, denominator)`` pair within *dtype*."""
    if den == 0:
        return _signum(num), 0
    if num == 0:
        return 0, 1
    if den < 0:
        num, den = -num, -den
    gcd = math.gcd(num, den)
    return checked(num // gcd, dtype), checked(den // gcd, dtype)


def _float_ratio(value: Any) -> Tuple[int, int]:
    """Decompose a binary floating-point value into an exact integer ratio."""
    if isinstance(value, np.floating):
        number = value
    elif isinstance(value, numbers.Real) and not isinstance(value, numbers.Rational):
        number = float(value)
    else:
        raise TypeError(f"expected a floating-point value, got {type(value)!r}")
    if math.isnan(number):
        return 0, 0
    if math.isinf(number):
        return (1 if number > 0 else -1), 0
    num, den = number.as_integer_ratio()
    return int(num), int(den)


def _terms(value: Any) -> Optional[Tuple[int, int]]:
    """Return the exact ``(numerator, denominator)`` of *value*, unbounded.

    Used by comparisons, which must not lose information by squeezing the
    other operand into a fixed-width domain.
    """
    if isinstance(value, Rational):
        return value._numerator, value._denominator
    if isinstance(value, (numbers.Integral, np.integer)):
        return int(value), 1
    if isinstance(value, numbers.Rational):
        return int(value.numerator), int(value.denominator)
    if isinstance(value, (numbers.Real, np.floating)):
        return _float_ratio(value)
    return None


def _compare_terms(an: int, ad: int, bn: int, bd: int) -> Optional[int]:
    if (an == 0 and ad == 0) or (bn == 0 and bd == 0):
        return None
    if ad == 0 or bd == 0:
        # finite values sit between the two infinities
        left = an if ad == 0 else 0
        right = bn if bd == 0 else 0
    else:
        left = an * bd
        right = bn * ad
    return (left > right) - (left < right)


class Rational:
    """Exact fraction over a fixed-width signed integer domain.

    ``Rational(numerator, denominator)`` reduces its arguments to canonical
    form; the domain is taken from the *dtype* keyword, inferred from NumPy
    integer arguments, or defaults to ``int64``.
    """

    __slots__ = ("_numerator", "_denominator", "_dtype")
    __array_priority__ = 1000.0  # Prefer Rational semantics in NumPy expressions.

    nan: "Rational"
    infinity: "Rational"
    zero: "Rational"
    one: "Rational"

    def __init__(
        self,
        numerator: Union[int, numbers.Integral] = 0,
        denominator: Union[int, numbers.Integral] = 1,
        *,
        dtype: Any = None,
    ) -> None:
        if dtype is None:
            dtype = infer_dtype(numerator, denominator)
        dtype = resolve_dtype(dtype)
        num = checked(as_int(numerator, name="numerator"), dtype)
        den = checked(as_int(denominator, name="denominator"), dtype)
        self._numerator, self._denominator = _normalize(num, den, dtype)
        self._dtype = dtype

    @classmethod
    def _make(cls, num: int, den: int, dtype: np.dtype) -> "Rational":
        """Build a value from unbounded intermediate terms."""
        self = object.__new__(cls)
        self._numerator, self._denominator = _normalize(num, den, dtype)
        self._dtype = dtype
        return self

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def from_integer(cls, value: Any, *, dtype: Any = None) -> "Rational":
        """Return *value* as a whole-number :class:`Rational`."""
        return cls(value, 1, dtype=dtype)

    @classmethod
    def from_float(cls, value: Any, *, dtype: Any = None) -> "Rational":
        """Return the :class:`Rational` closest to the floating-point *value*.

        Finite values are converted exactly when numerator and denominator fit
        the domain.  Otherwise magnitudes beyond the domain saturate to an
        infinity, and everything else becomes the nearest fraction whose
        terms fit (tiny subnormals end up as zero).  Use :meth:`exactly` to
        reject inexact conversions instead.
        """
        dtype = resolve_dtype(dtype)
        num, den = _float_ratio(value)
        if den == 0 or (fits(num, dtype) and fits(den, dtype)):
            return cls._make(num, den, dtype)

        lo, hi = bounds(dtype)
        if num > hi * den or num < lo * den:
            return cls._make(num, 0, dtype)
        # |numerator| stays within the bound on the value's side; denominator within hi
        bound = hi if num > 0 else -lo
        magnitude = Fraction(abs(num), den)
        limit = max(1, min(hi, bound // (math.floor(magnitude) + 1)))
        approx = Fraction(num, den).limit_denominator(limit)
        return cls._make(approx.numerator, approx.denominator, dtype)

    @classmethod
    def exactly(cls, value: Any, *, dtype: Any = None) -> Optional["Rational"]:
        """Return *value* as a :class:`Rational`, or ``None`` if that loses information.

        Besides out-of-range terms, a numerator equal to the domain minimum is
        rejected because it has no negation within the domain.
        """
        if isinstance(value, Rational):
            num, den = value._numerator, value._denominator
            if dtype is None:
                dtype = value._dtype
        elif isinstance(value, (numbers.Integral, np.integer)):
            num, den = int(value), 1
            if dtype is None:
                dtype = infer_dtype(value)
        elif isinstance(value, numbers.Rational):
            num, den = int(value.numerator), int(value.denominator)
        elif isinstance(value, (numbers.Real, np.floating)):
            num, den = _float_ratio(value)
        else:
            raise TypeError(f"Cannot convert {type(value)!r} to Rational")
        dtype = resolve_dtype(dtype)
        lo, hi = bounds(dtype)
        if not (lo < num <= hi and den <= hi):
            return None
        return cls._make(num, den, dtype)

    @classmethod
    def rationalize(cls, value: NumberLike, *, dtype: Any = None) -> "Rational":
        """Coerce a numeric-like value into :class:`Rational`."""
        if isinstance(value, Rational):
            if dtype is None:
                return value
            return value.astype(dtype)
        if isinstance(value, Fraction):
            return cls(value.numerator, value.denominator, dtype=dtype)
        if isinstance(value, (numbers.Integral, np.integer)):
            return cls.from_integer(value, dtype=dtype)
        if isinstance(value, (numbers.Real, np.floating)):
            return cls.from_float(value, dtype=dtype)
        if isinstance(value, np.generic):
            return cls.rationalize(value.item(), dtype=dtype)
        raise TypeError(f"Cannot convert {type(value)!r} to Rational")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numerator(self) -> int:
        return self._numerator

    @property
    def denominator(self) -> int:
        return self._denominator

    @property
    def dtype(self) -> np.dtype:
        """The integer domain holding numerator and denominator."""
        return self._dtype

    @property
    def is_nan(self) -> bool:
        return self._denominator == 0 and self._numerator == 0

    @property
    def is_infinite(self) -> bool:
        return self._denominator == 0 and self._numerator != 0

    @property
    def is_finite(self) -> bool:
        return self._denominator != 0

    @property
    def is_zero(self) -> bool:
        return self._numerator == 0 and self._denominator == 1

    @property
    def is_canonical(self) -> bool:
        """Whether the stored terms are in reduced, sign-normalized form."""
        num, den = self._numerator, self._denominator
        if den == 0:
            return num in (-1, 0, 1)
        return den > 0 and math.gcd(num, den) == 1 and fits(num, self._dtype) and fits(den, self._dtype)

    @property
    def sign(self) -> Sign:
        """``Sign.PLUS`` or ``Sign.MINUS``; zero is always positive.

        Raises:
            ValueError: the value is NaN, which carries no sign.
        """
        if self.is_nan:
            raise ValueError("NaN has no sign")
        return Sign.MINUS if self._numerator < 0 else Sign.PLUS

    @property
    def mixed(self) -> Mixed:
        """Split into whole part (truncated toward zero) and fractional remainder."""
        self._require_finite("split")
        whole = round_quotient(self._numerator, self._denominator, Rounding.TOWARD_ZERO)
        fractional = Rational._make(
            self._numerator - whole * self._denominator, self._denominator, self._dtype
        )
        return Mixed(whole, fractional)

    def astype(self, dtype: Any) -> "Rational":
        """Return the same value in another integer domain."""
        dtype = resolve_dtype(dtype)
        if dtype == self._dtype:
            return self
        return Rational._make(self._numerator, self._denominator, dtype)

    def as_fraction(self) -> Fraction:
        """Return a :class:`Fraction` with the same value."""
        self._require_finite("convert")
        return Fraction(self._numerator, self._denominator)

    def as_integer_ratio(self) -> Tuple[int, int]:
        self._require_finite("convert")
        return self._numerator, self._denominator

    def _require_finite(self, action: str) -> None:
        if self.is_nan:
            raise ValueError(f"cannot {action} NaN")
        if self.is_infinite:
            raise OverflowError(f"cannot {action} infinity")

    # ------------------------------------------------------------------
    # Rounding
    def rounded(self, rounding: Optional[Rounding] = None) -> int:
        """Return the integer nearest to this value under *rounding*.

        Without a mode the context default applies, which rounds ties away
        from zero unless changed with :func:`ratio.set_default_rounding`.

        Raises:
            ValueError: the value is NaN.
            OverflowError: the value is infinite.
        """
        if rounding is None:
            rounding = get_default_rounding()
        self._require_finite("round")
        return round_quotient(self._numerator, self._denominator, rounding)

    def __floor__(self) -> int:
        return self.rounded(Rounding.DOWN)

    def __ceil__(self) -> int:
        return self.rounded(Rounding.UP)

    def __trunc__(self) -> int:
        return self.rounded(Rounding.TOWARD_ZERO)

    def __round__(self, ndigits: Optional[int] = None) -> Any:
        if ndigits is None:
            return self.rounded(Rounding.TO_NEAREST_OR_EVEN)
        if not self.is_finite:
            return self
        shift = 10 ** abs(ndigits)
        if ndigits >= 0:
            scaled = round_quotient(
                self._numerator * shift, self._denominator, Rounding.TO_NEAREST_OR_EVEN
            )
            return Rational._make(scaled, shift, self._dtype)
        scaled = round_quotient(
            self._numerator, self._denominator * shift, Rounding.TO_NEAREST_OR_EVEN
        )
        return Rational._make(scaled * shift, 1, self._dtype)

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        if self._denominator == 0:
            if self._numerator == 0:
                return math.nan
            return math.copysign(math.inf, self._numerator)
        return self._numerator / self._denominator

    def to_float(self, dtype: Any = np.float64) -> np.floating:
        """Return the value as a NumPy floating-point scalar (possibly rounded)."""
        target = np.dtype(dtype)
        if not np.issubdtype(target, np.floating):
            raise TypeError(f"expected a floating-point dtype, got {target}")
        return target.type(float(self))

    def __int__(self) -> int:
        return self.rounded(Rounding.TOWARD_ZERO)

    def to_integer(self, dtype: Any = None, *, exact: bool = False) -> Any:
        """Return the value as a NumPy integer scalar of *dtype*.

        By default the value is truncated toward zero and a result outside
        *dtype* raises :class:`OverflowError`.  With ``exact=True`` ``None`` is
        returned for values that are not integral, not finite, or out of range.
        """
        target = self._dtype if dtype is None else np.dtype(dtype)
        if not np.issubdtype(target, np.integer):
            raise TypeError(f"expected an integer dtype, got {target}")
        info = np.iinfo(target)
        if exact:
            if self._denominator != 1 or not info.min <= self._numerator <= info.max:
                return None
            return target.type(self._numerator)
        value = int(self)
        if not info.min <= value <= info.max:
            raise OverflowError(f"{value} is out of range for {target}")
        return target.type(value)

    def __bool__(self) -> bool:
        return not self.is_zero

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        if self._denominator != 0:
            if self._dtype == DEFAULT_DTYPE:
                return f"Rational({self._numerator}, {self._denominator})"
            return f"Rational({self._numerator}, {self._denominator}, dtype={self._dtype.name})"
        if self._numerator == 0:
            text = "Rational.nan"
        else:
            text = "Rational.infinity" if self._numerator > 0 else "-Rational.infinity"
        if self._dtype != DEFAULT_DTYPE:
            text = f"{text}.astype({self._dtype.name})"
        return text

    def __str__(self) -> str:
        if self._denominator == 0:
            if self._numerator == 0:
                return "nan"
            return "inf" if self._numerator > 0 else "-inf"
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __format__(self, format_spec: str) -> str:
        """Format as ``n/d`` for ``""``/``"r"``, otherwise through :class:`float`.

        String presentation specs that :class:`float` rejects (``"s"``,
        ``">12s"``) are applied to the ``n/d`` text.
        """
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            return format(float(self), format_spec)
        except ValueError:
            return format(str(self), format_spec)

    def __copy__(self) -> "Rational":
        return self

    def __deepcopy__(self, memo: Any) -> "Rational":
        return self

    def __reduce__(self) -> Any:
        return (_restore, (self._numerator, self._denominator, self._dtype.name))

    # ------------------------------------------------------------------
    # Internal helpers
    def _coerce_scalar(self, value: Any) -> Optional["Rational"]:
        if isinstance(value, Rational):
            return value
        if isinstance(value, np.signedinteger):
            return Rational(value)
        if isinstance(value, np.generic):  # NumPy scalars
            return self._coerce_scalar(value.item())
        if isinstance(value, Fraction):
            return Rational(value.numerator, value.denominator, dtype=self._dtype)
        if isinstance(value, numbers.Integral):
            return Rational(int(value), 1, dtype=self._dtype)
        if isinstance(value, numbers.Real):
            return Rational.from_float(value, dtype=self._dtype)
        return None

    def _require(self, value: Any) -> "Rational":
        other = self._coerce_scalar(value)
        if other is None:
            raise TypeError(f"Cannot interpret {type(value)!r} as Rational")
        return other

    def _binary_operation(self, other: Any, op: Callable, reflected: bool = False) -> Any:
        if isinstance(other, np.ndarray):
            if reflected:
                vectorised = np.vectorize(lambda x: op(self._require(x), self), otypes=[object])
            else:
                vectorised = np.vectorize(lambda x: op(self, self._require(x)), otypes=[object])
            return vectorised(other)
        if isinstance(other, (list, tuple)):
            if reflected:
                return [op(self._require(x), self) for x in other]
            return [op(self, self._require(x)) for x in other]
        other_rat = self._coerce_scalar(other)
        if other_rat is None:
            return NotImplemented
        if reflected:
            return op(other_rat, self)
        return op(self, other_rat)

    def _coerce_power(self, value: Any) -> int:
        if isinstance(value, (numbers.Integral, np.integer)):
            return int(value)
        if isinstance(value, Rational):
            if value._denominator != 1:
                raise ValueError("Exponent must be an integer")
            return value._numerator
        if isinstance(value, np.generic):
            return self._coerce_power(value.item())
        if isinstance(value, numbers.Real):
            if not float(value).is_integer():
                raise ValueError("Exponent must be an integer")
            return int(value)
        raise TypeError("Unsupported exponent type")

    # ------------------------------------------------------------------
    # Arithmetic
    def add(self, other: Any) -> "Rational":
        """Return ``self + other``; opposite infinities give NaN."""
        other = self._require(other)
        return _sum(self, other._numerator, other._denominator, _common_dtype(self, other))

    def subtract(self, other: Any) -> "Rational":
        """Return ``self - other``; an infinity minus itself gives NaN."""
        other = self._require(other)
        return _sum(self, -other._numerator, other._denominator, _common_dtype(self, other))

    def multiply(self, other: Any) -> "Rational":
        """Return ``self * other``; infinity times zero gives NaN."""
        other = self._require(other)
        return _product(self, other._numerator, other._denominator, _common_dtype(self, other))

    def divide(self, other: Any) -> "Rational":
        """Return ``self * other.reciprocal()``; ``x/0`` is a signed infinity, ``0/0`` NaN."""
        other = self._require(other)
        return _product(self, other._denominator, other._numerator, _common_dtype(self, other))

    def negate(self) -> "Rational":
        return Rational._make(-self._numerator, self._denominator, self._dtype)

    def reciprocal(self) -> "Rational":
        """Return ``1 / self``; zero and infinity map onto each other."""
        return Rational._make(self._denominator, self._numerator, self._dtype)

    def compare(self, other: Any) -> Optional[int]:
        """Return -1, 0 or 1 ordering ``self`` against *other*, ``None`` if either is NaN."""
        terms = _terms(other)
        if terms is None:
            raise TypeError(f"Cannot compare Rational with {type(other)!r}")
        return _compare_terms(self._numerator, self._denominator, *terms)

    def __add__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.add)

    def __radd__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.subtract)

    def __rsub__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.subtract, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.multiply)

    def __rmul__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.multiply, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.divide)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary_operation(other, Rational.divide, reflected=True)

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        power = self._coerce_power(exponent)
        if self.is_nan:
            return self
        base = self if power >= 0 else self.reciprocal()
        power = abs(power)
        num, den = base._numerator, base._denominator
        if (abs(num) > 1 or den > 1) and power >= self._dtype.itemsize * 8:
            raise OverflowError(f"{self} ** {exponent} is out of range for {self._dtype}")
        return Rational._make(num ** power, den ** power, self._dtype)

    def __neg__(self) -> "Rational":
        return self.negate()

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return self.negate() if self._numerator < 0 else self

    # ------------------------------------------------------------------
    # Comparisons
    def _order(self, other: Any) -> Any:
        terms = _terms(other)
        if terms is None:
            return NotImplemented
        return _compare_terms(self._numerator, self._denominator, *terms)

    def _compare(self, other: Any, op) -> Any:
        order = self._order(other)
        if order is NotImplemented:
            return order
        return order is not None and op(order, 0)

    def __eq__(self, other: Any) -> Any:
        return self._compare(other, operator.eq)

    def __ne__(self, other: Any) -> Any:
        order = self._order(other)
        if order is NotImplemented:
            return order
        return order is None or order != 0

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, operator.lt)

    def __le__(self, other: Any) -> Any:
        return self._compare(other, operator.le)

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, operator.gt)

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, operator.ge)

    def __hash__(self) -> int:
        if self._denominator == 0:
            return hash(float(self))
        return hash(Fraction(self._numerator, self._denominator))

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: abs,
        np.power: operator.pow,
        np.equal: operator.eq,
        np.not_equal: operator.ne,
        np.less: operator.lt,
        np.less_equal: operator.le,
        np.greater: operator.gt,
        np.greater_equal: operator.ge,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Rational ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Rational):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                vectorised = np.vectorize(self._require, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            elif op is operator.pow and coerced:
                coerced.append(value)
            else:
                coerced.append(self._require(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def _common_dtype(a: Rational, b: Rational) -> np.dtype:
    return promote(a._dtype, b._dtype)


def _sum(a: Rational, num: int, den: int, dtype: np.dtype) -> Rational:
    if a._denominator == 0 or den == 0:
        # NaN is 0/0, so it falls out of the sign rules: any disagreement is NaN
        if a._denominator == 0 and den == 0:
            return Rational._make(a._numerator if a._numerator == num else 0, 0, dtype)
        return Rational._make(a._numerator if a._denominator == 0 else num, 0, dtype)
    return Rational._make(a._numerator * den + num * a._denominator, a._denominator * den, dtype)


def _product(a: Rational, num: int, den: int, dtype: np.dtype) -> Rational:
    if den < 0:
        num, den = -num, -den
    if a._denominator == 0 or den == 0:
        # zero and NaN both have signum 0, which turns the product into NaN
        return Rational._make(_signum(a._numerator) * _signum(num), 0, dtype)
    return Rational._make(a._numerator * num, a._denominator * den, dtype)


def _restore(num: int, den: int, dtype: str) -> Rational:
    return Rational._make(num, den, resolve_dtype(dtype))


Rational.nan = Rational(0, 0)
Rational.infinity = Rational(1, 0)
Rational.zero = Rational(0, 1)
Rational.one = Rational(1, 1)


def rationalize(value: NumberLike, *, dtype: Any = None) -> Rational:
    """Convert *value* into a :class:`Rational` in the integer domain *dtype*.

    Floats take the lossy :meth:`Rational.from_float` path; use
    :meth:`Rational.exactly` to refuse inexact conversions.
    """
    return Rational.rationalize(value, dtype=dtype)


def as_rational_array(values: Any, *, dtype: Any = None, copy: bool = True) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`Rational` values.

    ``values`` can be any iterable containing numeric-like entries or an existing
    NumPy array. When ``copy`` is ``False`` and ``values`` is already a NumPy
    array with ``dtype=object`` holding only :class:`Rational` values, the
    original array is returned.
    """

    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype == object and dtype is None and all(
            isinstance(item, Rational) for item in array.flat
        ):
            return array
        vectorised = np.vectorize(
            lambda item: Rational.rationalize(item, dtype=dtype),
            otypes=[object],
        )
        return vectorised(array)

    if isinstance(values, (list, tuple)):
        array = np.empty(len(values), dtype=object)
        for index, item in enumerate(values):
            array[index] = Rational.rationalize(item, dtype=dtype)
        return array

    return as_rational_array(list(values), dtype=dtype, copy=copy)


def zeros(length: int, *, dtype: Any = None) -> np.ndarray:
    """Return a one-dimensional array of length ``length`` filled with zeros."""

    if length < 0:
        raise ValueError("length must be non-negative")
    zero = Rational.zero.astype(dtype) if dtype is not None else Rational.zero
    array = np.empty(length, dtype=object)
    array.fill(zero)
    return array


def zeros_like(values: Any, *, dtype: Any = None) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    shape = np.shape(values)
    zero = Rational.zero.astype(dtype) if dtype is not None else Rational.zero
    array = np.empty(shape, dtype=object)
    array.fill(zero)
    return array


__all__ = [
    "Mixed",
    "NumberLike",
    "Rational",
    "Sign",
    "as_rational_array",
    "rationalize",
    "zeros",
    "zeros_like",
]
