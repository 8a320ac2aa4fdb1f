"""
Example: vecalg vector algebra usage.

Demonstrates how to use the vecalg abstraction for:
- Arithmetic on bound 2D/3D types
- Sequence construction with zero-padding
- Cross-type addition (left operand wins)
- Conversion across scalar types
- Conforming your own host type
"""

import logging
from dataclasses import dataclass

import numpy as np

from vecalg import Point2, Rect, Size2, Vector2, Vector3, conform
from vecalg.real import real_add

# Configure logging to see binding and truncation messages
logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


@conform(("col", "row"), int)
@dataclass
class Cell:
    """Integer grid cell."""

    col: int = 0
    row: int = 0


def example_1_arithmetic():
    """Example 1: Arithmetic on bound types."""
    print("\n" + "=" * 70)
    print("EXAMPLE 1: Arithmetic")
    print("=" * 70)

    p = Point2(x=1.0, y=2.0)
    q = Point2.from_sequence([3, 4])
    print(f"p + q      = {p + q}")
    print(f"p - q      = {p - q}")
    print(f"-p         = {-p}")
    print(f"2 * p      = {2 * p}")
    print(f"p * 0.5    = {p * 0.5}")

    p += q
    print(f"p += q     -> {p}")


def example_2_literals():
    """Example 2: Sequence construction with zero-padding."""
    print("\n" + "=" * 70)
    print("EXAMPLE 2: Sequence Construction")
    print("=" * 70)

    print(f"Vector3 [5]          = {Vector3.from_sequence([5])}")
    print(f"Vector3 [1, 2, 3]    = {Vector3.from_sequence([1, 2, 3])}")
    print(f"Point2 [1, 2, 3, 4]  = {Point2.from_sequence([1, 2, 3, 4])}  (truncated)")
    print(f"Vector3 from ndarray = {Vector3.from_sequence(np.arange(3))}")


def example_3_cross_type():
    """Example 3: Cross-type addition and conversion."""
    print("\n" + "=" * 70)
    print("EXAMPLE 3: Cross-Type Operations")
    print("=" * 70)

    origin = Point2(x=10.0, y=10.0)
    offset = Vector2(dx=2.5, dy=-1.0)
    print(f"Point2 + Vector2 = {origin + offset}")
    print(f"Vector2 + Point2 = {offset + origin}")
    print(f"Size2 from Point2 = {Size2.from_vector(origin)}")

    # Different scalar types go through the float view
    print(f"Cell from Point2(1.5, -2.5) = {Cell.from_vector(Point2(x=1.5, y=-2.5))}")
    print(f"int + float (left wins) = {real_add(2, 1.75)}")


def example_4_rect():
    """Example 4: Rect center."""
    print("\n" + "=" * 70)
    print("EXAMPLE 4: Rect")
    print("=" * 70)

    rect = Rect.from_sequence([10, 10, 40, 30])
    print(f"rect.center = {rect.center}")
    rect.center = [0, 0]
    print(f"after recentering, origin = {rect.origin}")


def main():
    """Run all examples."""
    print("=" * 70)
    print("VECALG EXAMPLES")
    print("=" * 70)

    example_1_arithmetic()
    example_2_literals()
    example_3_cross_type()
    example_4_rect()

    print("\n" + "=" * 70)
    print("ALL EXAMPLES COMPLETED")
    print("=" * 70)


if __name__ == "__main__":
    main()
