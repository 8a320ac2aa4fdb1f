"""Scalar field abstraction.

A field scalar is any value type closed under ``+ - * /`` with an additive
identity. Two ways to take part:

- subclass :class:`Field` and implement ``zero`` and the four operators, or
- register an existing type with :func:`register_field` (used for builtin and
  numpy scalars that cannot be subclassed retroactively).

Unary negation is always derived as ``zero - a``.

Example:
    >>> from vecalg.field import negate, zero_of
    >>> zero_of(float)
    0.0
    >>> negate(2.5)
    -2.5
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Self

from vecalg.errors import ScalarTypeError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldSpec:
    """Registry entry describing how to treat a scalar type.

    Attributes:
        scalar_type: The registered type
        zero: Additive identity of the type
        to_real: Projection to a float magnitude (None for non-real fields)
        from_real: Construction from a float magnitude (None for non-real fields)
    """

    scalar_type: type
    zero: Any
    to_real: Callable[[Any], float] | None = None
    from_real: Callable[[float], Any] | None = None

    @property
    def is_real(self) -> bool:
        """True if the type can be viewed as a single float."""
        return self.to_real is not None and self.from_real is not None

    def __repr__(self) -> str:
        kind = "real" if self.is_real else "field"
        return f"FieldSpec({self.scalar_type.__name__}, zero={self.zero!r}, {kind})"


class Field(ABC):
    """Abstract base for scalar types with an additive identity.

    Subclasses implement :meth:`zero` and the four binary operators. Negation
    is supplied as ``zero() - self``.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def zero(cls) -> Self:
        """Additive identity of this type."""

    @abstractmethod
    def __add__(self, other: Self) -> Self: ...

    @abstractmethod
    def __sub__(self, other: Self) -> Self: ...

    @abstractmethod
    def __mul__(self, other: Self) -> Self: ...

    @abstractmethod
    def __truediv__(self, other: Self) -> Self: ...

    def __neg__(self) -> Self:
        return type(self).zero() - self

    @classmethod
    def _field_spec(cls) -> FieldSpec:
        return FieldSpec(cls, cls.zero())


# Registered scalar types, keyed by exact type
_FIELDS: dict[type, FieldSpec] = {}


def register_field(scalar_type: type, zero: Any) -> FieldSpec:
    """Register an existing type as a field scalar.

    :param scalar_type: Type to register
    :param zero: Additive identity of that type
    :returns: The stored spec
    """
    spec = FieldSpec(scalar_type, zero)
    _FIELDS[scalar_type] = spec
    logger.debug("[Field] Registered %s", scalar_type.__name__)
    return spec


def _register_spec(spec: FieldSpec) -> FieldSpec:
    _FIELDS[spec.scalar_type] = spec
    logger.debug("[Field] Registered %r", spec)
    return spec


def field_spec(scalar_type: type) -> FieldSpec:
    """Resolve the field spec for a scalar type.

    Registered types are looked up along the MRO, so subclasses of a
    registered type inherit its spec. Concrete :class:`Field` subclasses
    describe themselves.

    :param scalar_type: Scalar type to resolve
    :returns: Matching FieldSpec
    :raises ScalarTypeError: If the type is not a known field scalar
    """
    if not isinstance(scalar_type, type):
        raise ScalarTypeError(f"Expected a scalar type, got {scalar_type!r}")

    spec = _FIELDS.get(scalar_type)
    if spec is not None:
        return spec

    if issubclass(scalar_type, Field) and not getattr(scalar_type, "__abstractmethods__", None):
        return _register_spec(scalar_type._field_spec())

    for klass in scalar_type.__mro__[1:]:
        spec = _FIELDS.get(klass)
        if spec is not None:
            return spec

    raise ScalarTypeError(f"{scalar_type.__name__} is not a registered field scalar")


def is_scalar(value: Any) -> bool:
    """Check whether a value's type is a known field scalar."""
    try:
        field_spec(type(value))
    except ScalarTypeError:
        return False
    return True


def zero_of(scalar_type: type) -> Any:
    """Additive identity of ``scalar_type``."""
    return field_spec(scalar_type).zero


def negate(a: Any) -> Any:
    """Additive inverse, computed as ``zero - a``."""
    return zero_of(type(a)) - a
