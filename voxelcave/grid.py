"""Lattice sampling: turn a continuous field into a dense voxel grid."""

from __future__ import annotations

import logging
from typing import Sequence, Tuple

import numpy as np
import numpy.typing as npt

from .generator import Generator

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]
_Shape3D = Tuple[int, int, int]


def lattice_points(
    shape: _Shape3D,
    spacing: float = 1.0,
    origin: Sequence[float] = (0.0, 0.0, 0.0),
) -> _Array:
    """Positions of every integer lattice coordinate in *shape*.

    Parameters
    ----------
    shape:
        ``(width, height, length)`` number of lattice points per axis.
    spacing:
        World units between neighbouring lattice points.
    origin:
        World position of lattice point ``(0, 0, 0)``.

    Returns
    -------
    numpy.ndarray
        Shape ``(width, height, length, 3)``, indexed ``[x, y, z]``.
    """
    nx, ny, nz = shape
    xs = np.arange(nx, dtype=float)
    ys = np.arange(ny, dtype=float)
    zs = np.arange(nz, dtype=float)

    X, Y, Z = np.meshgrid(xs, ys, zs, indexing="ij")
    return np.stack([X, Y, Z], axis=-1) * spacing + np.asarray(origin, dtype=float)


def sample_lattice(
    generator: Generator,
    shape: _Shape3D,
    spacing: float = 1.0,
    origin: Sequence[float] = (0.0, 0.0, 0.0),
) -> np.ndarray:
    """Sample *generator* once per lattice point and return the voxel grid.

    Generators that declare ``lattice_indices`` receive raw indices and
    *spacing*/*origin* are ignored for them.  The returned array has shape
    *shape* and is indexed ``grid[x, y, z]``.
    """
    if generator.lattice_indices:
        p = lattice_points(shape)
    else:
        p = lattice_points(shape, spacing, origin)
    grid = np.asarray(generator.sample(p))
    if grid.size and logger.isEnabledFor(logging.DEBUG):
        logger.debug("sampled %s on %dx%dx%d lattice (%s, range %s..%s)",
                     type(generator).__name__, *shape, grid.dtype, grid.min(), grid.max())
    return grid


def threshold_grid(values: _Array, threshold: float) -> npt.NDArray[np.int_]:
    """0/1 occupancy: ``1`` where *values* exceed *threshold*."""
    return np.where(np.asarray(values) > threshold, 1, 0)
