"""Type aliases for vecalg.

Provides unified type hints for scalar sequences and operators across modules.
"""

from collections.abc import Callable, Sequence
from typing import Any, TypeAlias

import numpy as np

# Ordered scalars accepted by sequence construction
ScalarSequence: TypeAlias = Sequence[Any] | np.ndarray

# Binary operator applied in the float domain
BinaryOp: TypeAlias = Callable[[float, float], float]
