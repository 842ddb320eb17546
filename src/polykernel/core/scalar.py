"""
Scalar capability abstraction.

Every geometric predicate in the package is written once against the
capabilities defined here and runs identically over exact rationals and
floating point approximations:

- ScalarRef: ordering, the four arithmetic operations and negation
- PolygonScalar: ScalarRef plus mixed arithmetic with integer constants
- ScalarField: adapter supplying identities, integer conversion and summation
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from numbers import Integral, Rational, Real
from typing import Any, Callable, Iterable, Protocol, runtime_checkable


@runtime_checkable
class ScalarRef(Protocol):
    """Reference-capable scalar: ordered, closed under + - * / and negation."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __neg__(self) -> Any: ...
    def __lt__(self, other: Any) -> bool: ...
    def __le__(self, other: Any) -> bool: ...


@runtime_checkable
class PolygonScalar(ScalarRef, Protocol):
    """
    Owning-capable scalar: a ScalarRef that also combines with integer
    constants on either side, so ``3 * value`` and ``1 - value`` work.

    In-place accumulation (``total += value``, ``total *= value``) is not
    listed as ``__iadd__`` or ``__imul__``. Python falls back to ``__add__``
    and ``__mul__`` when those are missing, and neither Fraction nor float
    defines them, so listing them would make ``isinstance`` reject both
    built-in representations.
    """

    def __radd__(self, other: Any) -> Any: ...
    def __rsub__(self, other: Any) -> Any: ...
    def __rmul__(self, other: Any) -> Any: ...
    def __rtruediv__(self, other: Any) -> Any: ...


@dataclass(frozen=True)
class ScalarField:
    """
    Adapter for one concrete scalar representation.

    Python numbers carry no class-level identities, so the additive and
    multiplicative identities, conversion from small unsigned integers and
    finite summation live here instead of on the number type.

    Attributes
    ----------
    name : str
        Short name of the representation ("exact" or "approx").
    kind : type
        Number type every coordinate is coerced to.
    coerce : Callable
        Conversion from any accepted number into ``kind``.
    """
    name: str
    kind: type
    coerce: Callable[[Any], Any]

    def zero(self):
        return self.coerce(0)

    def one(self):
        return self.coerce(1)

    def from_int(self, n: int):
        """Convert a small unsigned integer into this representation."""
        if n < 0:
            raise ValueError(f"Expected an unsigned integer, got {n}")
        return self.coerce(n)

    def sum(self, values: Iterable):
        """Finite summation starting from the additive identity."""
        total = self.zero()
        for value in values:
            total += value
        return total

    def accepts(self, value) -> bool:
        return isinstance(value, self.kind)

    def __repr__(self) -> str:
        return f"ScalarField({self.name!r})"


def _to_fraction(value) -> Fraction:
    if isinstance(value, Fraction):
        return value
    if isinstance(value, Integral):
        return Fraction(int(value))
    return Fraction(value)


def _to_float(value) -> float:
    try:
        return float(value)
    except OverflowError:
        # Rationals beyond the float range saturate like float arithmetic does
        return math.inf if value > 0 else -math.inf


EXACT = ScalarField("exact", Fraction, _to_fraction)
APPROX = ScalarField("approx", float, _to_float)


def field_of(value) -> ScalarField:
    """
    Select the scalar adapter for a coordinate value.

    Integers and rationals map to EXACT, any other real number (Python or
    numpy float) maps to APPROX.

    Raises
    ------
    TypeError
        If the value is not a real number.
    """
    if isinstance(value, bool):
        raise TypeError("Booleans are not valid coordinates")
    if isinstance(value, (Integral, Rational)):
        return EXACT
    if isinstance(value, Real):
        return APPROX
    raise TypeError(f"Unsupported coordinate type: {type(value).__name__}")


def common_field(values: Iterable) -> ScalarField:
    """
    Pick one adapter for a collection of coordinates.

    A single approximate coordinate makes the whole collection approximate.
    An empty collection is exact.
    """
    field = EXACT
    for value in values:
        if field_of(value) is APPROX:
            field = APPROX
    return field


def to_approx(value) -> float:
    """
    Lossy conversion into the approximate representation.

    Never raises for a real number: values too large for a float become
    signed infinity and values too small become zero.
    """
    return APPROX.coerce(value)


def to_exact(value) -> Fraction:
    """
    Conversion of a finite number into the exact representation.

    Raises
    ------
    OverflowError, ValueError
        If the value is infinite or NaN, which have no rational value.
    """
    return EXACT.coerce(value)
