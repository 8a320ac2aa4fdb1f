"""Exception types for vecalg.

Structural violations (bad indices, mismatched dimensions, short literals) are
programmer errors and surface as exceptions. Scalar arithmetic edge cases such as
division by zero are left to the scalar type itself.
"""

from __future__ import annotations


class VectorError(Exception):
    """Base class for all vecalg errors."""


class PreconditionViolation(VectorError, ValueError):
    """A construction precondition was not met (e.g. strict literal too short)."""


class IndexOutOfBounds(VectorError, IndexError):
    """Coordinate index outside ``[0, dimension)``."""


class DimensionMismatch(VectorError, ValueError):
    """Two vector types or a coordinate sequence disagree on dimension."""


class ScalarTypeError(VectorError, TypeError):
    """A scalar type is unknown or cannot be used where it was given."""
