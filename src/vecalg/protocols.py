"""Protocol definitions for the vecalg capability contract.

Defines the structural interface a host geometry type has to satisfy to take
part in vector arithmetic. Scalars are not described by a protocol: whether a
type is a field or real-number scalar is decided by the registry in
``vecalg.field`` (see ``is_scalar`` and ``vecalg.real.is_real_number``), which
also covers builtin types such as ``float`` and ``numpy.float32``.
"""

from __future__ import annotations

from typing import Any, ClassVar, Protocol, runtime_checkable


@runtime_checkable
class SupportsCoordinates(Protocol):
    """
    Protocol for host types that can act as fixed-dimension vectors.

    A conforming type reports its dimension and scalar type, exposes its named
    components as an ordered coordinate list, and can be built with no
    arguments. Everything else (arithmetic, indexing, literal construction,
    conversion) is supplied by ``vecalg.vector.Vector``.
    """

    dimension: ClassVar[int]
    scalar_type: ClassVar[type]

    @property
    def coordinates(self) -> list[Any]:
        """Ordered coordinates, exactly ``dimension`` long."""
        ...

    @coordinates.setter
    def coordinates(self, values: list[Any]) -> None: ...
