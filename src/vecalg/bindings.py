"""Adapters wiring host geometry types into the vector algebra.

:func:`conform` takes a host type with named components and produces a
subclass that is a :class:`~vecalg.real_vector.RealVector` (or a plain
:class:`~vecalg.vector.Vector` for non-real fields). The named components
become the ordered ``coordinates``; every operation comes from the base.

Bound types:
- Point2: Point (x, y), float
- Vector2: Offset (dx, dy), float
- Size2: Size (width, height), float
- Vector3: Float3 (x, y, z), numpy.float32
- Vector4: Float4 (x, y, z, w), numpy.float32

Example:
    >>> from dataclasses import dataclass
    >>> @conform(("col", "row"), int)
    ... @dataclass
    ... class Cell:
    ...     col: int = 0
    ...     row: int = 0
    >>> Cell.from_sequence([3, 4]) + Cell.from_sequence([1])
    Cell(col=4, row=4)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from vecalg.errors import DimensionMismatch, PreconditionViolation
from vecalg.geometry import Float3, Float4, Offset, Point, Size
from vecalg.protocols import SupportsCoordinates
from vecalg.real import coerce_scalar
from vecalg.real_vector import RealVector
from vecalg.types import ScalarSequence
from vecalg.vector import Vector

logger = logging.getLogger(__name__)


def _coordinates_property(components: tuple[str, ...]) -> property:
    dimension = len(components)

    def getter(self) -> list[Any]:
        return [getattr(self, name) for name in components]

    def setter(self, values: Sequence[Any]) -> None:
        values = list(values)
        if len(values) != dimension:
            raise DimensionMismatch(
                f"{type(self).__name__} expects {dimension} coordinates, got {len(values)}"
            )
        values = [coerce_scalar(value, self.scalar_type) for value in values]
        for name, value in zip(components, values, strict=True):
            setattr(self, name, value)

    return property(getter, setter, doc=f"Coordinates ({', '.join(components)}).")


def conform(
    components: Sequence[str],
    scalar_type: type,
    *,
    real: bool = True,
    name: str | None = None,
) -> Callable[[type], type]:
    """Class decorator making a host type a conforming vector.

    The host must be constructible with no arguments and expose each name
    in ``components`` as a readable and writable attribute.

    :param components: Attribute names, in coordinate order
    :param scalar_type: Field scalar used for the components
    :param real: If True, bind as RealVector (scalar must be a real number)
    :param name: Name of the new class (default: the host's name)
    :returns: Decorator producing the bound subclass
    """
    components = tuple(components)
    base = RealVector if real else Vector

    def decorator(host: type) -> type:
        class_name = name or host.__name__
        namespace = {
            "__module__": host.__module__,
            "__qualname__": class_name,
            "__doc__": host.__doc__,
            "dimension": len(components),
            "scalar_type": scalar_type,
            "components": components,
            "coordinates": _coordinates_property(components),
        }
        bound = type(class_name, (host, base), namespace)
        logger.debug(
            "[Bindings] Conformed %s as %s (%s, dimension=%d, scalar=%s)",
            host.__name__,
            class_name,
            base.__name__,
            len(components),
            scalar_type.__name__,
        )
        return bound

    return decorator


# ============================================================================
# Bound host types
# ============================================================================

Point2 = conform(("x", "y"), float, name="Point2")(Point)
Vector2 = conform(("dx", "dy"), float, name="Vector2")(Offset)
Size2 = conform(("width", "height"), float, name="Size2")(Size)
Vector3 = conform(("x", "y", "z"), np.float32, name="Vector3")(Float3)
Vector4 = conform(("x", "y", "z", "w"), np.float32, name="Vector4")(Float4)


@dataclass
class Rect:
    """Axis-aligned rectangle with a movable center.

    Example:
        >>> rect = Rect.from_sequence([10, 10, 40, 30])
        >>> rect.center
        Point2(x=30.0, y=25.0)
        >>> rect.center = [0, 0]
        >>> rect.origin
        Point2(x=-20.0, y=-15.0)
    """

    origin: Point2 = field(default_factory=Point2)
    size: Size2 = field(default_factory=Size2)

    @classmethod
    def from_sequence(cls, elements: ScalarSequence) -> Rect:
        """Build from ``[x, y, width, height]``.

        :raises PreconditionViolation: If fewer than 4 numbers are given
        """
        values = list(elements)
        if len(values) < 4:
            raise PreconditionViolation(
                f"Rect needs: x, y, width, height (got {len(values)} numbers)."
            )
        return cls(
            origin=Point2.from_sequence(values[:2]),
            size=Size2.from_sequence(values[2:4]),
        )

    @property
    def mid_x(self) -> float:
        return self.origin.x + self.size.width / 2

    @property
    def mid_y(self) -> float:
        return self.origin.y + self.size.height / 2

    @property
    def center(self) -> Point2:
        return Point2.from_sequence([self.mid_x, self.mid_y])

    @center.setter
    def center(self, new_center: Vector | ScalarSequence) -> None:
        if not isinstance(new_center, SupportsCoordinates):
            new_center = Point2.from_sequence(new_center, strict=True)
        # Rebind instead of += so an origin shared with another rect is untouched
        self.origin = self.origin + (Point2.from_vector(new_center) - self.center)
