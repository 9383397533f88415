"""Binary occupancy from two summed Perlin noise lookups."""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ..generator import Generator
from ..perlin import perlin01, seed_offsets

_Array = npt.NDArray[np.floating]


class NoiseThresholdGenerator(Generator):
    """Occupancy grid generator working directly on lattice indices.

    For a cell ``(x, y, z)`` the accumulated value is::

        P(x*2/W, y*2/H) + P(-x*3/W, z*3/H)

    with ``P`` the ``[0, 1]`` Perlin noise of :func:`~voxelcave.perlin.perlin01`.
    The cell is solid (``1``) when the sum exceeds *threshold*, else ``0``.
    The second lookup scales ``z`` by the height, not the length.

    Parameters
    ----------
    width, height, length:
        Lattice dimensions used to scale the noise lookups.
    seed:
        Picks the noise lookup offsets; equal seeds give equal grids.
    threshold:
        Cut-off for the summed noise.
    """

    lattice_indices = True

    def __init__(
        self,
        width: int,
        height: int,
        length: int,
        seed: int = 0,
        threshold: float = 1.0,
    ) -> None:
        self.width = width
        self.height = height
        self.length = length
        self.seed = seed
        self.threshold = threshold
        self._offsets = seed_offsets(seed, 2)

    def sample(self, p: _Array) -> npt.NDArray[np.int_]:
        p = np.asarray(p, dtype=float)
        x, y, z = p[..., 0], p[..., 1], p[..., 2]
        (ax, ay), (bx, by) = self._offsets
        acc = (
            perlin01(x * 2.0 / self.width + ax, y * 2.0 / self.height + ay)
            + perlin01(-x * 3.0 / self.width + bx, z * 3.0 / self.height + by)
        )
        return np.where(acc > self.threshold, 1, 0)
