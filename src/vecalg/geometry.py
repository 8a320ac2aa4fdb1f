"""Host geometry value types.

Plain records with named components and no arithmetic of their own. They
are wired into the vector algebra by ``vecalg.bindings``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


@dataclass
class Point:
    """2D position."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Offset:
    """2D displacement."""

    dx: float = 0.0
    dy: float = 0.0


@dataclass
class Size:
    """2D extent."""

    width: float = 0.0
    height: float = 0.0


@dataclass
class Float3:
    """Single-precision 3D vector (render-engine layout)."""

    x: np.float32 = np.float32(0.0)
    y: np.float32 = np.float32(0.0)
    z: np.float32 = np.float32(0.0)


@dataclass
class Float4:
    """Single-precision 4D vector (render-engine layout)."""

    x: np.float32 = np.float32(0.0)
    y: np.float32 = np.float32(0.0)
    z: np.float32 = np.float32(0.0)
    w: np.float32 = np.float32(0.0)
