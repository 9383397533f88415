"""Shared vector helpers for the voxelcave field functions.

This module provides:

* **Type alias**: :data:`_F`
* **Constants**: :data:`ZERO2`, :data:`ZERO3`
* **Vector constructors**: :func:`vec2`, :func:`vec3`
* **Math helpers**: :func:`length`, :func:`dot`, :func:`fmod_floor`

Not meant to be imported directly by end users — import from
:mod:`voxelcave.sdf_lib` instead.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------
_F = npt.NDArray[np.floating]

__all__ = [
    "_F",
    "ZERO2", "ZERO3",
    "vec2", "vec3",
    "length", "dot", "fmod_floor",
]

ZERO2 = np.zeros(2)
ZERO2.flags.writeable = False

ZERO3 = np.zeros(3)
ZERO3.flags.writeable = False


# ===========================================================================
# Vector constructors
# ===========================================================================

def vec2(x: _F, y: _F) -> _F:
    """Stack *x* and *y* into a ``(..., 2)`` array."""
    x, y = np.broadcast_arrays(x, y)
    return np.stack([x, y], axis=-1)


def vec3(x: _F, y: _F, z: _F) -> _F:
    """Stack *x*, *y*, *z* into a ``(..., 3)`` array."""
    x, y, z = np.broadcast_arrays(x, y, z)
    return np.stack([x, y, z], axis=-1)


# ===========================================================================
# Math helpers
# ===========================================================================

def length(v: _F) -> _F:
    """Euclidean length along the last axis."""
    return np.linalg.norm(v, axis=-1)


def dot(a: _F, b: _F) -> _F:
    """Dot product along the last axis."""
    return np.sum(a * b, axis=-1)


def fmod_floor(a: _F, b: _F) -> _F:
    """Floored remainder ``a - b * floor(a / b)``; result has the sign of *b*."""
    return np.mod(a, b)
