"""2-D Perlin noise sampled over numpy arrays.

Thin wrapper around :func:`noise.pnoise2`, remapped to ``[0, 1]`` so that
sums of noise samples can be compared against fixed thresholds.
"""

from __future__ import annotations

import noise
import numpy as np
import numpy.typing as npt

_Array = npt.NDArray[np.floating]

# Offsets are drawn from [0, _OFFSET_RANGE) so the lookups stay well inside
# pnoise2's default repeat period of 1024.
_OFFSET_RANGE = 256.0
_SEED_MASK = (1 << 64) - 1

_pnoise2 = np.vectorize(noise.pnoise2, otypes=[float])


def perlin01(x: _Array, y: _Array) -> _Array:
    """Perlin noise at ``(x, y)`` in ``[0, 1]``; 0.5 at integer lattice points."""
    return np.clip(0.5 + 0.5 * _pnoise2(x, y), 0.0, 1.0)


def seed_offsets(seed: int, count: int) -> _Array:
    """Deterministic ``(count, 2)`` lookup offsets derived from *seed*.

    Any integer is accepted; negative seeds wrap to their unsigned 64-bit
    pattern.
    """
    rng = np.random.default_rng(int(seed) & _SEED_MASK)
    return rng.uniform(0.0, _OFFSET_RANGE, size=(count, 2))
