"""Configuration for vector construction policies.

Usage:
    from vecalg import config
    config.CONFIG.max_dimension  # 4
    config.CONFIG.literal_overflow  # "truncate"

The singleton is read at call time, so replacing ``config.CONFIG`` with a new
``VectorConfig`` changes the behavior of subsequent operations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class VectorConfig:
    """Policies shared by every conforming vector type.

    Attributes:
        min_dimension: Smallest dimension a conforming type may declare
        max_dimension: Largest dimension a conforming type may declare
        strict_literals: If True, sequence construction rejects lists shorter
            than the dimension instead of zero-padding them
        literal_overflow: What to do with lists longer than the dimension
            ("truncate" keeps the leading coordinates, "error" raises)
    """

    min_dimension: int = 2
    max_dimension: int = 4
    strict_literals: bool = False
    literal_overflow: Literal["truncate", "error"] = "truncate"

    def validate(self) -> VectorConfig:
        """Check the configuration is self-consistent.

        :returns: self, for chaining
        :raises ValueError: If bounds are inverted or a policy is unknown
        """
        if self.min_dimension < 1:
            raise ValueError(f"min_dimension must be positive, got {self.min_dimension}")
        if self.max_dimension < self.min_dimension:
            raise ValueError(
                f"max_dimension={self.max_dimension} is below "
                f"min_dimension={self.min_dimension}"
            )
        if self.literal_overflow not in ("truncate", "error"):
            raise ValueError(
                f"literal_overflow must be 'truncate' or 'error', got {self.literal_overflow!r}"
            )
        return self

    def __repr__(self) -> str:
        return (
            f"VectorConfig(dimension=[{self.min_dimension}, {self.max_dimension}], "
            f"strict_literals={self.strict_literals}, "
            f"literal_overflow={self.literal_overflow!r})"
        )


# Main singleton instance
CONFIG = VectorConfig().validate()
