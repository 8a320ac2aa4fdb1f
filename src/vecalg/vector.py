"""Fixed-dimension vectors over a field scalar.

A conforming type supplies four things:

- ``dimension``: class-level coordinate count
- ``scalar_type``: the field scalar used for components
- ``coordinates``: get/set projection between its named components and an
  ordered list of exactly ``dimension`` scalars
- a parameterless constructor

:class:`Vector` then supplies, for free: ``+``, unary ``-``, binary ``-``,
scalar ``*`` in both operand orders, ``+= -= *=``, indexed get/set,
sequence construction with zero-padding and conversion from any other
conforming type over the same scalar.

Example:
    >>> from vecalg import Point2, Vector2
    >>> p = Point2.from_sequence([1, 2])
    >>> p + Vector2(dx=0.5, dy=0.5)  # result typed as the left operand
    Point2(x=1.5, y=2.5)
    >>> Point2.from_sequence([5])
    Point2(x=5.0, y=0.0)
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, ClassVar, Literal, Self

import numpy as np

from vecalg import config
from vecalg.errors import DimensionMismatch, PreconditionViolation, ScalarTypeError
from vecalg.field import field_spec, is_scalar, negate, zero_of
from vecalg.real import coerce_scalar
from vecalg.types import ScalarSequence
from vecalg.validators import validate_dimension, validate_index

logger = logging.getLogger(__name__)


class Vector(ABC):
    """Abstract base for fixed-dimension vectors.

    Subclasses declare ``dimension`` and ``scalar_type`` as class attributes
    and implement the ``coordinates`` property. Intermediate bases that leave
    ``dimension`` undeclared are not validated.

    Instances are plain values: arithmetic always builds a new instance via
    the default constructor plus one ``coordinates`` assignment. In-place
    operators write the result back into the left operand.
    """

    dimension: ClassVar[int]
    scalar_type: ClassVar[type]

    # Keep numpy scalars from broadcasting over vectors in `a * v`
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        dimension = getattr(cls, "dimension", None)
        if dimension is None:
            return
        validate_dimension(cls.__name__, dimension)
        scalar_type = getattr(cls, "scalar_type", None)
        if scalar_type is None:
            raise ScalarTypeError(f"{cls.__name__} declares a dimension but no scalar_type")
        field_spec(scalar_type)

    # ========================================================================
    # Coordinate access
    # ========================================================================

    @property
    @abstractmethod
    def coordinates(self) -> list[Any]:
        """Ordered coordinates, exactly ``dimension`` long."""

    @coordinates.setter
    @abstractmethod
    def coordinates(self, values: list[Any]) -> None: ...

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self.coordinates))

    @validate_index
    def __getitem__(self, index: int) -> Any:
        return self.coordinates[index]

    @validate_index
    def __setitem__(self, index: int, value: Any) -> None:
        # Hosts may only synthesize the sequence on access, so the whole
        # sequence is read, patched and written back.
        coordinates = list(self.coordinates)
        coordinates[index] = coerce_scalar(value, self.scalar_type)
        self.coordinates = coordinates

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def _build(cls, coordinates: list[Any]) -> Self:
        vector = cls()
        vector.coordinates = coordinates
        return vector

    @classmethod
    def from_sequence(
        cls,
        elements: ScalarSequence,
        *,
        strict: bool | None = None,
        overflow: Literal["truncate", "error"] | None = None,
    ) -> Self:
        """Build a vector from an ordered list of scalars.

        Leading coordinates come from ``elements`` in order (converted to
        ``scalar_type``); missing trailing coordinates are the scalar's zero.

        :param elements: Ordered scalars (list, tuple or 1-D array)
        :param strict: If True, a list shorter than ``dimension`` is an error
            (default: ``CONFIG.strict_literals``)
        :param overflow: "truncate" keeps the first ``dimension`` elements,
            "error" rejects longer lists (default: ``CONFIG.literal_overflow``)
        :returns: New vector
        :raises PreconditionViolation: On a short strict list or a rejected
            long list

        Example:
            >>> Vector3.from_sequence([5]).coordinates
            [np.float32(5.0), np.float32(0.0), np.float32(0.0)]
        """
        cfg = config.CONFIG
        strict = cfg.strict_literals if strict is None else strict
        overflow = cfg.literal_overflow if overflow is None else overflow

        values = list(elements)
        dimension = cls.dimension
        if strict and len(values) < dimension:
            raise PreconditionViolation(
                f"{cls.__name__} needs at least {dimension} numbers, got {len(values)}."
            )
        if len(values) > dimension:
            if overflow == "error":
                raise PreconditionViolation(
                    f"{cls.__name__} takes at most {dimension} numbers, got {len(values)}."
                )
            logger.debug(
                "[Vector] Truncating %d elements to %s dimension %d",
                len(values),
                cls.__name__,
                dimension,
            )
            values = values[:dimension]

        coordinates = [coerce_scalar(value, cls.scalar_type) for value in values]
        coordinates.extend(zero_of(cls.scalar_type) for _ in range(dimension - len(values)))
        return cls._build(coordinates)

    @classmethod
    def zero(cls) -> Self:
        """Vector whose coordinates are all the scalar's zero."""
        return cls.from_sequence([])

    @classmethod
    def from_vector(cls, v: Vector) -> Self:
        """Convert another conforming vector over the same scalar type.

        The coordinate sequence is copied verbatim.

        :param v: Source vector
        :returns: New instance of this type
        :raises DimensionMismatch: If dimensions differ
        :raises ScalarTypeError: If scalar types differ
        """
        cls._check_compatible(v)
        if v.scalar_type is not cls.scalar_type:
            raise ScalarTypeError(
                f"Cannot convert {type(v).__name__} ({v.scalar_type.__name__}) to "
                f"{cls.__name__} ({cls.scalar_type.__name__}): scalar types differ"
            )
        return cls._build(list(v.coordinates))

    @classmethod
    def _check_compatible(cls, v: Any) -> None:
        if not isinstance(v, Vector):
            raise TypeError(f"Expected a Vector, got {type(v).__name__}")
        if v.dimension != cls.dimension:
            raise DimensionMismatch(
                f"Cannot convert {type(v).__name__} (dimension {v.dimension}) to "
                f"{cls.__name__} (dimension {cls.dimension})"
            )

    def copy(self) -> Self:
        """Independent vector of the same type with the same coordinates."""
        return type(self)._build(list(self.coordinates))

    def __copy__(self) -> Self:
        return self.copy()

    # ========================================================================
    # Arithmetic
    # ========================================================================

    def __add__(self, other):
        """Coordinate-wise sum; a foreign type over the same scalar is converted first."""
        if not isinstance(other, Vector):
            return NotImplemented
        if type(other) is not type(self):
            if other.scalar_type is not self.scalar_type:
                raise ScalarTypeError(
                    f"Cannot add {type(other).__name__} ({other.scalar_type.__name__}) to "
                    f"{type(self).__name__} ({self.scalar_type.__name__}): "
                    "convert it with from_vector() first"
                )
            other = type(self).from_vector(other)
        return type(self)._build(
            [a + b for a, b in zip(self.coordinates, other.coordinates, strict=True)]
        )

    def __neg__(self) -> Self:
        return type(self)._build([negate(c) for c in self.coordinates])

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self + (-other)

    def __rmul__(self, a):
        """Scalar multiplication ``a * v``."""
        if isinstance(a, Vector) or not is_scalar(a):
            return NotImplemented
        a = coerce_scalar(a, self.scalar_type)
        return type(self)._build([a * c for c in self.coordinates])

    def __mul__(self, a):
        """Scalar multiplication ``v * a``, defined as ``a * v``."""
        return self.__rmul__(a)

    def __iadd__(self, other):
        result = self.__add__(other)
        if result is NotImplemented:
            return NotImplemented
        self.coordinates = result.coordinates
        return self

    def __isub__(self, other):
        result = self.__sub__(other)
        if result is NotImplemented:
            return NotImplemented
        self.coordinates = result.coordinates
        return self

    def __imul__(self, a):
        result = self.__mul__(a)
        if result is NotImplemented:
            return NotImplemented
        self.coordinates = result.coordinates
        return self

    # ========================================================================
    # NumPy interop
    # ========================================================================

    def to_array(self, dtype: Any = None) -> np.ndarray:
        """Coordinates as a 1-D numpy array.

        :param dtype: Optional dtype (default: inferred from the scalars)
        :returns: Array of shape ``(dimension,)``
        """
        return np.array(self.coordinates, dtype=dtype)

    def __array__(self, dtype=None, copy=None):
        return self.to_array(dtype)
