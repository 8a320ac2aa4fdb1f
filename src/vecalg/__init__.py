"""
vecalg - Generic Vector Algebra

Fixed-dimension (2, 3, 4) vector arithmetic shared by heterogeneous
point/vector/size types over any scalar field.

Features:
- Field / RealNumber scalar abstraction with registry for builtin and numpy scalars
- Vector / RealVector bases supplying +, -, scalar *, +=, -=, *=, indexing
- Sequence construction with zero-padding (strict and overflow policies configurable)
- Conversion between conforming types, including across real scalar types
- Left-operand result typing for cross-type arithmetic
- Host adapters for 2D points, offsets and sizes, and float32 3D/4D vectors

Example - Bound types:
    >>> from vecalg import Point2, Vector2, Vector3
    >>>
    >>> p = Point2.from_sequence([1, 2])
    >>> p += Vector2(dx=3.0, dy=4.0)   # Point2(x=4.0, y=6.0)
    >>> 2 * p                          # Point2(x=8.0, y=12.0)
    >>> Vector3.from_sequence([5])     # Vector3(x=5.0, y=0.0, z=0.0)

Example - Conforming your own type:
    >>> from dataclasses import dataclass
    >>> from vecalg import conform
    >>>
    >>> @conform(("col", "row"), int)
    ... @dataclass
    ... class Cell:
    ...     col: int = 0
    ...     row: int = 0
    >>>
    >>> Cell.from_vector(Point2(x=1.5, y=-2.5))  # Cell(col=1, row=-2)
"""

__version__ = "0.1.0"

# Configuration
from vecalg.config import CONFIG, VectorConfig

# Errors
from vecalg.errors import (
    DimensionMismatch,
    IndexOutOfBounds,
    PreconditionViolation,
    ScalarTypeError,
    VectorError,
)

# Scalar abstraction
from vecalg.field import Field, FieldSpec, field_spec, is_scalar, negate, register_field, zero_of

# Protocols
from vecalg.protocols import SupportsCoordinates
from vecalg.real import (
    RealNumber,
    coerce_scalar,
    combine,
    from_real,
    is_real_number,
    real_add,
    real_div,
    real_mul,
    real_sub,
    real_value,
    register_real_number,
)

# Vector abstraction
from vecalg.real_vector import RealVector
from vecalg.vector import Vector

# Host bindings
from vecalg.bindings import Point2, Rect, Size2, Vector2, Vector3, Vector4, conform

__all__ = [
    # Version
    "__version__",
    # Configuration
    "CONFIG",
    "VectorConfig",
    # Errors
    "VectorError",
    "PreconditionViolation",
    "IndexOutOfBounds",
    "DimensionMismatch",
    "ScalarTypeError",
    # Field
    "Field",
    "FieldSpec",
    "field_spec",
    "register_field",
    "is_scalar",
    "zero_of",
    "negate",
    # RealNumber
    "RealNumber",
    "register_real_number",
    "is_real_number",
    "real_value",
    "from_real",
    "combine",
    "real_add",
    "real_sub",
    "real_mul",
    "real_div",
    "coerce_scalar",
    # Protocols
    "SupportsCoordinates",
    # Vectors
    "Vector",
    "RealVector",
    # Bindings
    "conform",
    "Point2",
    "Vector2",
    "Size2",
    "Vector3",
    "Vector4",
    "Rect",
]
