"""Tests for host-type bindings and the Rect helper."""

from dataclasses import dataclass

import numpy as np
import pytest

from vecalg.bindings import Point2, Rect, Size2, Vector2, Vector3, Vector4, conform
from vecalg.errors import DimensionMismatch, PreconditionViolation
from vecalg.geometry import Float3, Offset, Point, Size
from vecalg.protocols import SupportsCoordinates
from vecalg.real_vector import RealVector


class TestBoundTypes:
    """Test each bound host type exposes its named components in order."""

    @pytest.mark.parametrize(
        "cls, components, scalar_type",
        [
            (Point2, ("x", "y"), float),
            (Vector2, ("dx", "dy"), float),
            (Size2, ("width", "height"), float),
            (Vector3, ("x", "y", "z"), np.float32),
            (Vector4, ("x", "y", "z", "w"), np.float32),
        ],
    )
    def test_declaration(self, cls, components, scalar_type):
        """Test dimension, scalar type and component order."""
        assert cls.dimension == len(components)
        assert cls.scalar_type is scalar_type
        assert cls.components == components
        assert issubclass(cls, RealVector)

    def test_coordinates_follow_named_fields(self):
        """Test coordinates are synthesized from the named fields."""
        size = Size2(width=3.0, height=4.0)
        assert size.coordinates == [3.0, 4.0]
        size.height = 9.0
        assert size[1] == 9.0

    def test_setter_writes_named_fields(self):
        """Test index writes land on the named fields."""
        offset = Vector2(dx=1.0, dy=2.0)
        offset[0] = 5.0
        assert offset.dx == 5.0
        assert offset.dy == 2.0

    def test_setter_checks_length(self):
        """Test assigning the wrong number of coordinates raises."""
        point = Point2()
        with pytest.raises(DimensionMismatch, match="expects 2 coordinates, got 3"):
            point.coordinates = [1.0, 2.0, 3.0]

    def test_setter_coerces_values(self):
        """Test whole-sequence and index writes store the same scalar type."""
        point = Point2()
        point.coordinates = [1, 2]
        assert all(type(c) is float for c in point.coordinates)
        point[0] = 3
        assert type(point.x) is float
        assert point == Point2(x=3.0, y=2.0)

    def test_keyword_constructor_from_host(self):
        """Test the host's own constructor still works."""
        vec = Vector4(x=np.float32(1), y=np.float32(2), z=np.float32(3), w=np.float32(4))
        assert vec.to_array().tolist() == [1.0, 2.0, 3.0, 4.0]

    def test_default_constructor(self):
        """Test the parameterless constructor gives the zero vector."""
        assert Point2().coordinates == Point2.zero().coordinates == [0.0, 0.0]
        assert Vector3().coordinates == [0.0, 0.0, 0.0]

    def test_bound_types_are_host_subclasses(self):
        """Test bound types keep their host type."""
        assert issubclass(Point2, Point)
        assert issubclass(Vector2, Offset)
        assert issubclass(Size2, Size)
        assert issubclass(Vector3, Float3)

    def test_host_type_untouched(self):
        """Test the plain host type gets no arithmetic."""
        with pytest.raises(TypeError):
            Point(1.0, 2.0) + Point(1.0, 2.0)

    def test_repr_uses_bound_name(self):
        """Test the dataclass repr shows the bound name."""
        assert repr(Point2(x=1.0, y=2.0)) == "Point2(x=1.0, y=2.0)"

    def test_protocol_conformance(self):
        """Test bound instances satisfy SupportsCoordinates."""
        assert isinstance(Point2(), SupportsCoordinates)
        assert isinstance(Vector4(), SupportsCoordinates)
        assert not isinstance(Point(), SupportsCoordinates)
        assert not isinstance([1.0, 2.0], SupportsCoordinates)


class TestConform:
    """Test the conform() class decorator."""

    def test_named_class(self):
        """Test an explicit name."""

        @dataclass
        class Pair:
            left: float = 0.0
            right: float = 0.0

        Bound = conform(("left", "right"), float, name="BoundPair")(Pair)
        assert Bound.__name__ == "BoundPair"
        assert Bound.from_sequence([1, 2]) == Bound(left=1.0, right=2.0)

    def test_component_order_is_coordinate_order(self):
        """Test components may be listed in any order."""

        @conform(("y", "x"), float)
        @dataclass
        class Swapped:
            x: float = 0.0
            y: float = 0.0

        swapped = Swapped.from_sequence([1, 2])
        assert (swapped.x, swapped.y) == (2.0, 1.0)

    def test_plain_class_host(self):
        """Test a non-dataclass host with a default constructor."""

        class Polar:
            def __init__(self):
                self.r = 0.0
                self.theta = 0.0

        Bound = conform(("r", "theta"), float)(Polar)
        bound = Bound.from_sequence([2.0, 0.5]) * 2
        assert (bound.r, bound.theta) == (4.0, 1.0)

    def test_too_many_components(self):
        """Test component count is checked against the dimension bounds."""

        @dataclass
        class Five:
            a: float = 0.0
            b: float = 0.0
            c: float = 0.0
            d: float = 0.0
            e: float = 0.0

        with pytest.raises(PreconditionViolation):
            conform(("a", "b", "c", "d", "e"), float)(Five)


class TestRect:
    """Test the rectangle helper."""

    def test_from_sequence(self):
        """Test [x, y, width, height] construction."""
        rect = Rect.from_sequence([10, 10, 40, 30])
        assert rect.origin == Point2(x=10.0, y=10.0)
        assert rect.size == Size2(width=40.0, height=30.0)

    def test_from_sequence_needs_four(self):
        """Test fewer than four numbers is a precondition violation."""
        with pytest.raises(PreconditionViolation, match="Rect needs: x, y, width, height"):
            Rect.from_sequence([10, 10, 40])

    def test_center_get(self):
        """Test center is the midpoint."""
        rect = Rect.from_sequence([10, 10, 40, 30])
        assert (rect.mid_x, rect.mid_y) == (30.0, 25.0)
        assert rect.center == Point2(x=30.0, y=25.0)

    def test_center_set_from_sequence(self):
        """Test setting the center from a list moves the origin."""
        rect = Rect.from_sequence([10, 10, 40, 30])
        rect.center = [0, 0]
        assert rect.origin == Point2(x=-20.0, y=-15.0)
        assert rect.size == Size2(width=40.0, height=30.0)
        assert rect.center == Point2(x=0.0, y=0.0)

    def test_center_set_from_vector(self):
        """Test any 2D float vector can be the new center."""
        rect = Rect.from_sequence([0, 0, 2, 2])
        rect.center = Vector2(dx=5.0, dy=5.0)
        assert rect.origin == Point2(x=4.0, y=4.0)

    def test_center_set_short_list(self):
        """Test a one-element center is rejected."""
        rect = Rect()
        with pytest.raises(PreconditionViolation):
            rect.center = [1]

    def test_center_set_leaves_shared_origin(self):
        """Test moving one rect does not move another sharing its origin."""
        origin = Point2(x=1.0, y=1.0)
        a = Rect(origin=origin, size=Size2(width=2.0, height=2.0))
        b = Rect(origin=origin, size=Size2(width=2.0, height=2.0))
        a.center = [10, 10]
        assert b.origin == Point2(x=1.0, y=1.0)
        assert origin == Point2(x=1.0, y=1.0)
