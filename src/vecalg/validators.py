"""Validation helpers for vector types.

Provides:
- validate_index: decorator checking a coordinate index argument
- validate_dimension: check applied when a conforming class is created
"""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable
from typing import Any, TypeVar

from vecalg import config
from vecalg.errors import IndexOutOfBounds, PreconditionViolation

F = TypeVar("F", bound=Callable[..., Any])


def validate_index(func: F) -> F:
    """Decorator checking that the first argument after ``self`` is a valid index.

    The index must be an integer in ``[0, self.dimension)``. Negative indices are
    rejected rather than counted from the end.

    :param func: Method taking ``(self, index, ...)``
    :returns: Wrapped method
    :raises TypeError: If the index is not an integer
    :raises IndexOutOfBounds: If the index is outside the valid range

    Example:
        >>> class V:
        ...     dimension = 2
        ...     @validate_index
        ...     def get(self, index):
        ...         return index
    """

    @functools.wraps(func)
    def wrapper(self, index, *args, **kwargs):
        try:
            i = operator.index(index)
        except TypeError:
            raise TypeError(
                f"index must be an integer, got {type(index).__name__}"
            ) from None
        dimension = self.dimension
        if not 0 <= i < dimension:
            raise IndexOutOfBounds(
                f"index={i} is outside valid range [0, {dimension}) "
                f"for {type(self).__name__}"
            )
        return func(self, i, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


def validate_dimension(owner: str, dimension: Any) -> int:
    """Check a declared dimension against the configured bounds.

    :param owner: Name of the declaring class (for messages)
    :param dimension: Declared dimension
    :returns: The dimension as an int
    :raises PreconditionViolation: If not an integer or out of bounds
    """
    if isinstance(dimension, bool) or not isinstance(dimension, int):
        raise PreconditionViolation(
            f"{owner}.dimension must be an integer, got {type(dimension).__name__}"
        )
    cfg = config.CONFIG
    if not cfg.min_dimension <= dimension <= cfg.max_dimension:
        raise PreconditionViolation(
            f"{owner}.dimension={dimension} is outside valid range "
            f"[{cfg.min_dimension}, {cfg.max_dimension}]"
        )
    return dimension
