"""Boundary to the isosurface mesher that consumes voxel grids.

:class:`Mesher` is the contract the pipeline relies on: a settable grid, a
blocking build call and a progress ratio polled by a display.
:class:`MarchingCubesMesher` is a reference implementation on top of
:func:`skimage.measure.marching_cubes`.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol

import numpy as np
import numpy.typing as npt
from skimage import measure

logger = logging.getLogger(__name__)

_Array = npt.NDArray[np.floating]


class Mesher(Protocol):
    """What the generation pipeline needs from a mesher."""

    voxel_data: Optional[np.ndarray]

    @property
    def progress(self) -> float:
        """Build progress in ``[0, 1]``; ``>= 1`` means done."""
        ...

    def generate_mesh(self) -> None:
        """Build a mesh from :attr:`voxel_data`, blocking until finished."""
        ...


def progress_text(progress: float) -> str:
    """Format a progress ratio as a whole percentage, e.g. ``"42%"``."""
    return f"{progress:.0%}"


def is_complete(progress: float) -> bool:
    """True once *progress* has reached ``1.0``."""
    return progress >= 1.0


class MarchingCubesMesher:
    """Extract the isosurface of a voxel grid with marching cubes.

    Integer grids are occupancy (0/1) and are cut at ``0.5``; floating grids
    are distance fields and are cut at ``0.0``, unless *level* is given.

    After :meth:`generate_mesh`, :attr:`vertices` holds ``(V, 3)`` positions
    in lattice units and :attr:`faces` holds ``(F, 3)`` vertex indices.
    """

    def __init__(self, level: Optional[float] = None) -> None:
        self.level = level
        self.voxel_data: Optional[np.ndarray] = None
        self.vertices: _Array = np.empty((0, 3))
        self.faces: npt.NDArray[np.int_] = np.empty((0, 3), dtype=int)
        self._progress = 0.0

    @property
    def progress(self) -> float:
        return self._progress

    def iso_level(self) -> float:
        """The level the current grid is cut at."""
        if self.level is not None:
            return self.level
        if self.voxel_data is not None and np.issubdtype(self.voxel_data.dtype, np.integer):
            return 0.5
        return 0.0

    def generate_mesh(self) -> None:
        if self.voxel_data is None:
            raise RuntimeError("generate_mesh() called before voxel_data was set")

        self._progress = 0.0
        volume = np.asarray(self.voxel_data, dtype=float)
        level = self.iso_level()

        if not volume.min() < level < volume.max():
            logger.warning("grid range %s..%s does not cross level %s; mesh is empty",
                           volume.min(), volume.max(), level)
            self.vertices = np.empty((0, 3))
            self.faces = np.empty((0, 3), dtype=int)
        else:
            self.vertices, self.faces, _, _ = measure.marching_cubes(volume, level=level)
            logger.info("meshed %s grid: %d vertices, %d faces",
                        volume.shape, len(self.vertices), len(self.faces))
        self._progress = 1.0
