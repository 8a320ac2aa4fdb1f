"""Vectors over real-number scalars.

A :class:`RealVector` can be converted from any other real vector of the same
dimension, even when the two use different scalar types. Each coordinate is
bridged through its float view:

    dest[i] = dest.scalar_type.from_real(src[i].real_value)

so precision and rounding follow the destination scalar's own float
conversion (``int`` truncates toward zero, ``numpy.float32`` rounds to
nearest).
"""

from __future__ import annotations

from typing import Self

from vecalg.errors import ScalarTypeError
from vecalg.real import from_real, is_real_number, real_value
from vecalg.vector import Vector


class RealVector(Vector):
    """Vector whose scalar type is a real number."""

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        scalar_type = getattr(cls, "scalar_type", None)
        if getattr(cls, "dimension", None) is not None and not is_real_number(scalar_type):
            raise ScalarTypeError(
                f"{cls.__name__}.scalar_type={scalar_type.__name__} is not a real-number scalar"
            )

    @classmethod
    def from_vector(cls, v: Vector) -> Self:
        """Convert another vector, bridging scalar types when they differ.

        :param v: Source vector of the same dimension
        :returns: New instance of this type
        :raises DimensionMismatch: If dimensions differ
        :raises ScalarTypeError: If the scalars differ and ``v`` is not a
            real vector
        """
        if isinstance(v, RealVector) and v.scalar_type is not cls.scalar_type:
            cls._check_compatible(v)
            return cls._build(
                [from_real(cls.scalar_type, real_value(v[i])) for i in range(cls.dimension)]
            )
        return super().from_vector(v)
