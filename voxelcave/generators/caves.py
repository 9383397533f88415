"""Analytic cave fields: tiled pillars between a floor and a ceiling.

Both generators here inline their own implicit surface instead of composing
named primitives.  The sign convention is signed: negative is rock, positive
is open cave.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from ..generator import Generator
from ..perlin import perlin01, seed_offsets

_Array = npt.NDArray[np.floating]

# Subtracted from every [0, 1] noise factor of the perturbed field.
NOISE_BIAS = 0.2


class PeriodicCaveGenerator(Generator):
    """Repeating pillars standing in a slab of open space.

    X and Z are folded into *period* with a floored modulo and re-centred,
    so every tile holds one vertical pillar of *pillar_radius*.  The open
    slab spans ``floor < y < ceiling``; everything outside it is rock.

    Parameters
    ----------
    period:
        Tile size along X and Z.
    pillar_radius:
        Radius of the pillar in each tile.
    floor, ceiling:
        Heights bounding the open slab.
    """

    def __init__(
        self,
        period: float = 8.0,
        pillar_radius: float = 1.5,
        floor: float = 2.0,
        ceiling: float = 8.0,
    ) -> None:
        self.period = period
        self.pillar_radius = pillar_radius
        self.floor = floor
        self.ceiling = ceiling

    def sample(self, p: _Array) -> _Array:
        p = np.asarray(p, dtype=float)
        half = 0.5 * self.period
        qx = np.mod(p[..., 0], self.period) - half
        qz = np.mod(p[..., 2], self.period) - half
        pillar = np.sqrt(qx * qx + qz * qz) - self.pillar_radius

        mid = 0.5 * (self.floor + self.ceiling)
        gap = 0.5 * (self.ceiling - self.floor) - np.abs(p[..., 1] - mid)
        return np.minimum(pillar, gap)


class PerturbedCaveGenerator(PeriodicCaveGenerator):
    """:class:`PeriodicCaveGenerator` roughened by three noise factors.

    The periodic value is multiplied by ``(P(x, y) - 0.2)``, ``(P(y, z) - 0.2)``
    and ``(P(z, x) - 0.2)``, each lookup taken on positions scaled by
    *noise_scale* and shifted by seed-derived offsets.  A factor that drops
    below zero flips the sign locally; that is what breaks up the tiling.
    """

    def __init__(self, seed: int = 0, noise_scale: float = 0.25, **kwargs: float) -> None:
        super().__init__(**kwargs)
        self.seed = seed
        self.noise_scale = noise_scale
        self._offsets = seed_offsets(seed, 3)

    def sample(self, p: _Array) -> _Array:
        p = np.asarray(p, dtype=float)
        value = super().sample(p)
        s = p * self.noise_scale
        x, y, z = s[..., 0], s[..., 1], s[..., 2]
        (ax, ay), (bx, by), (cx, cy) = self._offsets
        value = value * (perlin01(x + ax, y + ay) - NOISE_BIAS)
        value = value * (perlin01(y + bx, z + by) - NOISE_BIAS)
        value = value * (perlin01(z + cx, x + cy) - NOISE_BIAS)
        return value
