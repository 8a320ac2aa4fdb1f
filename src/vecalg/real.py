"""Real-number scalars and cross-type scalar arithmetic.

A real number is a field scalar with a single float view (``real_value``)
that can also be built back from a float (``from_real``). Arithmetic between
two *different* real scalar types goes through that view:

    U op V  ->  U.from_real(u.real_value op v.real_value)

The result is always typed as the LEFT operand. For non-float
representations this is a lossy bridge, not true arithmetic on ``U``.

Builtin registrations: float, int (truncates toward zero), numpy.float16,
numpy.float32, numpy.float64, numpy.int32, numpy.int64.

Example:
    >>> import numpy as np
    >>> from vecalg.real import combine, real_add
    >>> real_add(np.float32(1.5), 2)
    np.float32(3.5)
    >>> real_add(2, 1.75)  # left operand is int
    3
"""

from __future__ import annotations

import numbers
import operator
from abc import abstractmethod
from collections.abc import Callable
from operator import attrgetter
from typing import Any, Self

import numpy as np

from vecalg.errors import ScalarTypeError
from vecalg.field import Field, FieldSpec, _register_spec, field_spec
from vecalg.types import BinaryOp


class RealNumber(Field):
    """Abstract base for field scalars with a float view.

    Subclasses implement ``zero``, ``real_value``, ``from_real`` and the
    same-type hooks ``_add``, ``_sub``, ``_mul`` and ``_truediv``. The
    operators supplied here dispatch on the other operand:

    - same type: the hook (true arithmetic on this type)
    - another real scalar: :func:`combine`, typed as the left operand
    - anything else: ``NotImplemented``

    Reflected operators keep the left operand's type too, so
    ``2.0 + Cents(150)`` is a float while ``Cents(150) + 2.0`` is Cents.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def real_value(self) -> float:
        """Float magnitude of this value."""

    @classmethod
    @abstractmethod
    def from_real(cls, value: float) -> Self:
        """Build a value of this type from a float magnitude."""

    @abstractmethod
    def _add(self, other: Self) -> Self: ...

    @abstractmethod
    def _sub(self, other: Self) -> Self: ...

    @abstractmethod
    def _mul(self, other: Self) -> Self: ...

    @abstractmethod
    def _truediv(self, other: Self) -> Self: ...

    def _dispatch(self, other: Any, hook: Callable, op: BinaryOp):
        if type(other) is type(self):
            return hook(other)
        if is_real_scalar(other):
            return combine(self, other, op)
        return NotImplemented

    def _reflect(self, other: Any, op: BinaryOp):
        if is_real_scalar(other):
            return combine(other, self, op)
        return NotImplemented

    def __add__(self, other):
        return self._dispatch(other, self._add, operator.add)

    def __sub__(self, other):
        return self._dispatch(other, self._sub, operator.sub)

    def __mul__(self, other):
        return self._dispatch(other, self._mul, operator.mul)

    def __truediv__(self, other):
        return self._dispatch(other, self._truediv, operator.truediv)

    def __radd__(self, other):
        return self._reflect(other, operator.add)

    def __rsub__(self, other):
        return self._reflect(other, operator.sub)

    def __rmul__(self, other):
        return self._reflect(other, operator.mul)

    def __rtruediv__(self, other):
        return self._reflect(other, operator.truediv)

    @classmethod
    def _field_spec(cls) -> FieldSpec:
        return FieldSpec(cls, cls.zero(), to_real=attrgetter("real_value"), from_real=cls.from_real)


def register_real_number(
    scalar_type: type,
    zero: Any,
    to_real: Callable[[Any], float] = float,
    from_real: Callable[[float], Any] | None = None,
) -> FieldSpec:
    """Register an existing type as a real-number scalar.

    :param scalar_type: Type to register
    :param zero: Additive identity
    :param to_real: Projection to float (default: ``float``)
    :param from_real: Construction from float (default: the type itself)
    :returns: The stored spec
    """
    return _register_spec(
        FieldSpec(scalar_type, zero, to_real=to_real, from_real=from_real or scalar_type)
    )


def is_real_number(scalar_type: type) -> bool:
    """Check whether ``scalar_type`` is a registered or derived real scalar."""
    try:
        return field_spec(scalar_type).is_real
    except ScalarTypeError:
        return False


def is_real_scalar(value: Any) -> bool:
    """Check whether a value's type is a real scalar."""
    return is_real_number(type(value))


def _real_spec(scalar_type: type) -> FieldSpec:
    spec = field_spec(scalar_type)
    if not spec.is_real:
        raise ScalarTypeError(f"{scalar_type.__name__} is not a real-number scalar")
    return spec


def real_value(a: Any) -> float:
    """Float magnitude of a real scalar."""
    return _real_spec(type(a)).to_real(a)


def from_real(scalar_type: type, value: float) -> Any:
    """Build a ``scalar_type`` value from a float magnitude.

    Out-of-range magnitudes follow the target's own conversion rules
    (``int(float("inf"))`` raises OverflowError, numpy types saturate to inf).
    """
    return _real_spec(scalar_type).from_real(value)


def combine(a: Any, b: Any, op: BinaryOp) -> Any:
    """Apply ``op`` to two real scalars in the float domain.

    Asymmetric: the result is always built as ``type(a)``, whatever ``b`` is.

    :param a: Left operand (decides the result type)
    :param b: Right operand
    :param op: Float binary operator, e.g. ``operator.add``
    :returns: ``type(a).from_real(op(real_value(a), real_value(b)))``
    """
    return from_real(type(a), op(real_value(a), real_value(b)))


def real_add(a: Any, b: Any) -> Any:
    return combine(a, b, operator.add)


def real_sub(a: Any, b: Any) -> Any:
    return combine(a, b, operator.sub)


def real_mul(a: Any, b: Any) -> Any:
    return combine(a, b, operator.mul)


def real_div(a: Any, b: Any) -> Any:
    return combine(a, b, operator.truediv)


def coerce_scalar(value: Any, scalar_type: type) -> Any:
    """Convert a scalar to ``scalar_type``.

    Values of exactly that type pass through; subclasses (``bool`` for
    ``int``, ``numpy.float64`` for ``float``) are converted like any other
    source. Integer sources into integer targets convert exactly. Otherwise
    both types must be real scalars and the value is bridged through its
    float view.

    :param value: Scalar to convert
    :param scalar_type: Target scalar type
    :returns: Value of ``scalar_type``
    :raises ScalarTypeError: If no conversion exists
    """
    if type(value) is scalar_type:
        return value
    target = field_spec(scalar_type)
    try:
        source = field_spec(type(value))
    except ScalarTypeError:
        raise ScalarTypeError(
            f"Cannot use {type(value).__name__} as a {scalar_type.__name__} scalar"
        ) from None
    if not (source.is_real and target.is_real):
        # Field-only subclass: no float view to convert through
        if isinstance(value, scalar_type):
            return value
        raise ScalarTypeError(
            f"Cannot convert {type(value).__name__} to {scalar_type.__name__}: "
            "both must be real-number scalars"
        )
    if isinstance(value, numbers.Integral) and issubclass(scalar_type, numbers.Integral):
        return target.from_real(operator.index(value))
    return target.from_real(source.to_real(value))


# ============================================================================
# Builtin scalar registrations
# ============================================================================

register_real_number(float, 0.0)
register_real_number(int, 0)
register_real_number(np.float16, np.float16(0.0))
register_real_number(np.float32, np.float32(0.0))
register_real_number(np.float64, np.float64(0.0))
register_real_number(np.int32, np.int32(0))
register_real_number(np.int64, np.int64(0))
