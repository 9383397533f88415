"""Cell-dispatch showcase: one primitive per grid cell on a floor plane.

The X/Z plane is split into square cells of :data:`CELL_SIZE` units.  Each
cell listed in the catalog holds one shape, placed at a fixed world offset;
cells not in the catalog hold nothing but the floor.

Usage::

    from voxelcave.generators import CellCatalogGenerator
    from voxelcave.grid import sample_lattice

    grid = sample_lattice(CellCatalogGenerator(), (25, 10, 20))
"""

from __future__ import annotations

import dataclasses
from functools import partial
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Tuple

import numpy as np
import numpy.typing as npt

from .. import sdf_lib as sdf
from ..generator import Field, Generator

_Array = npt.NDArray[np.floating]

CELL_SIZE = 6.0

_UP = np.array([0.0, 1.0, 0.0])


# ===========================================================================
# Local-frame shapes
# ===========================================================================

def _bounded_cylinder(p: _Array, c: _Array, bounds: _Array) -> _Array:
    return sdf.opIntersection(sdf.sdBox(p, bounds), sdf.sdCylinder(p, c))


def _bounded_cone(p: _Array, c: _Array, bounds: _Array) -> _Array:
    return sdf.opIntersection(sdf.udBox(p, bounds), sdf.sdCone(p, c))


def _sphere_box_union(p: _Array, radius: float, half_size: _Array) -> _Array:
    return sdf.opUnion(sdf.sdSphere(p, radius), sdf.udBox(p, half_size))


def _sphere_box_subtraction(p: _Array, radius: float, half_size: _Array) -> _Array:
    # The box is carved out of the sphere.
    return sdf.opSubtraction(sdf.udBox(p, half_size), sdf.sdSphere(p, radius))


def _sphere_box_intersection(p: _Array, radius: float, half_size: _Array) -> _Array:
    return sdf.opIntersection(sdf.sdSphere(p, radius), sdf.udBox(p, half_size))


def _twisted_torus(
    p: _Array, t: _Array, pre_twist: float, rotation: _Array, post_twist: float
) -> _Array:
    q = sdf.opTwist(p, pre_twist)
    q = sdf.opRotateTranslate(q, sdf.trs_matrix(euler=rotation))
    return sdf.sdTorus(sdf.opTwist(q, post_twist), t)


SHAPES: Dict[str, Callable[..., _Array]] = {
    "sphere":                  lambda p, radius: sdf.sdSphere(p, radius),
    "box":                     lambda p, half_size: sdf.udBox(p, half_size),
    "round_box":               lambda p, half_size, border: sdf.udRoundBox(p, half_size, border),
    "signed_box":              lambda p, half_size: sdf.sdBox(p, half_size),
    "torus":                   lambda p, t: sdf.sdTorus(p, t),
    "bounded_cylinder":        _bounded_cylinder,
    "bounded_cone":            _bounded_cone,
    "hex_prism":               lambda p, h: sdf.sdHexPrism(p, h),
    "tri_prism":               lambda p, h: sdf.sdTriPrism(p, h),
    "capped_cylinder":         lambda p, h: sdf.sdCappedCylinder(p, h),
    "ellipsoid":               lambda p, radii: sdf.sdEllipsoid(p, radii),
    "sphere_box_union":        _sphere_box_union,
    "sphere_box_subtraction":  _sphere_box_subtraction,
    "sphere_box_intersection": _sphere_box_intersection,
    "twisted_torus":           _twisted_torus,
}


# ===========================================================================
# Catalog
# ===========================================================================

def _read_only(value: Any) -> Any:
    if isinstance(value, np.ndarray):
        value = value.copy()
        value.flags.writeable = False
    return value


@dataclasses.dataclass(frozen=True)
class CellCatalogEntry:
    """A shape *kind* from :data:`SHAPES`, its world *offset* and *params*."""

    kind: str
    offset: Tuple[float, float, float]
    params: Mapping[str, Any] = dataclasses.field(default_factory=dict)

    def __post_init__(self) -> None:
        # Arrays are stored as read-only copies.
        frozen = {name: _read_only(value) for name, value in self.params.items()}
        object.__setattr__(self, "params", MappingProxyType(frozen))

    def field(self) -> Field:
        """Return the shape as a :class:`Field` placed at :attr:`offset`."""
        return Field(partial(SHAPES[self.kind], **self.params)).translate(*self.offset)


_HALF_BOX = np.array([2.0, 1.0, 1.5])
_HALF_BOX.flags.writeable = False

DEFAULT_CATALOG: Dict[Tuple[int, int], CellCatalogEntry] = {
    (0, 0): CellCatalogEntry("sphere", (4.0, 4.0, 4.0), {"radius": 2.0}),
    (1, 0): CellCatalogEntry("box", (10.0, 4.0, 4.0), {"half_size": _HALF_BOX}),
    (2, 0): CellCatalogEntry("round_box", (16.0, 4.0, 4.0),
                             {"half_size": _HALF_BOX, "border": 0.5}),
    (3, 0): CellCatalogEntry("signed_box", (22.0, 4.0, 4.0), {"half_size": _HALF_BOX}),
    (4, 0): CellCatalogEntry("torus", (28.0, 4.0, 4.0), {"t": np.array([2.0, 0.5])}),
    (0, 1): CellCatalogEntry("bounded_cylinder", (4.0, 4.0, 10.0),
                             {"c": np.array([0.5, 0.5, 2.0]),
                              "bounds": np.array([3.0, 2.0, 3.0])}),
    (1, 1): CellCatalogEntry("bounded_cone", (10.0, 4.0, 10.0),
                             {"c": np.array([0.6, 0.3]) / np.hypot(0.6, 0.3),
                              "bounds": np.array([2.0, 2.0, 2.0])}),
    (2, 1): CellCatalogEntry("hex_prism", (16.0, 4.0, 10.0), {"h": np.array([2.0, 1.0])}),
    (3, 1): CellCatalogEntry("tri_prism", (22.0, 4.0, 10.0), {"h": np.array([2.0, 1.0])}),
    (4, 1): CellCatalogEntry("capped_cylinder", (28.0, 4.0, 10.0),
                             {"h": np.array([2.0, 3.0])}),
    (0, 2): CellCatalogEntry("ellipsoid", (4.0, 4.0, 16.0),
                             {"radii": np.array([3.0, 2.0, 1.0])}),
    (1, 2): CellCatalogEntry("sphere_box_union", (10.0, 4.0, 16.0),
                             {"radius": 2.0, "half_size": _HALF_BOX}),
    (2, 2): CellCatalogEntry("sphere_box_subtraction", (16.0, 4.0, 16.0),
                             {"radius": 2.0, "half_size": _HALF_BOX}),
    (3, 2): CellCatalogEntry("sphere_box_intersection", (22.0, 4.0, 16.0),
                             {"radius": 1.75, "half_size": _HALF_BOX}),
    (4, 2): CellCatalogEntry("twisted_torus", (28.0, 4.0, 16.0),
                             {"t": np.array([2.0, 0.75]),
                              "pre_twist": np.radians(45.0),
                              "rotation": np.radians([90.0, 0.0, 0.0]),
                              "post_twist": np.radians(20.0)}),
}


class CellCatalogGenerator(Generator):
    """Union of a floor plane and the catalog shape of the sampled cell.

    Cells are ``floor(x / cell_size), floor(z / cell_size)``.  The running
    value starts at *ceiling*, is unioned with the floor plane ``y`` and then
    with the cell's shape, if the cell has one.

    Parameters
    ----------
    catalog:
        Mapping from ``(cell_x, cell_z)`` to :class:`CellCatalogEntry`.
    cell_size:
        Edge length of a cell in world units.
    ceiling:
        Upper cap on the field.  The default ``inf`` leaves the floor plane
        value untouched; ``1.0`` clamps the whole field to at most one unit.
    """

    def __init__(
        self,
        catalog: Mapping[Tuple[int, int], CellCatalogEntry] = DEFAULT_CATALOG,
        cell_size: float = CELL_SIZE,
        ceiling: float = np.inf,
    ) -> None:
        self.cell_size = cell_size
        self.ceiling = ceiling
        self._fields = {cell: entry.field() for cell, entry in catalog.items()}

    def cell_of(self, p: _Array) -> Tuple[npt.NDArray[np.int_], npt.NDArray[np.int_]]:
        """Integer ``(cell_x, cell_z)`` arrays for points *p*."""
        p = np.asarray(p, dtype=float)
        cell_x = np.floor(p[..., 0] / self.cell_size).astype(int)
        cell_z = np.floor(p[..., 2] / self.cell_size).astype(int)
        return cell_x, cell_z

    def sample(self, p: _Array) -> _Array:
        p = np.asarray(p, dtype=float)
        pts = p.reshape(-1, 3)
        d = np.full(len(pts), self.ceiling, dtype=float)
        d = sdf.opUnion(d, sdf.sdPlane(pts, _UP, 0.0))

        cell_x, cell_z = self.cell_of(pts)
        for (cx, cz), shape in self._fields.items():
            mask = (cell_x == cx) & (cell_z == cz)
            if mask.any():
                d[mask] = sdf.opUnion(d[mask], shape.sample(pts[mask]))
        return d.reshape(p.shape[:-1])
