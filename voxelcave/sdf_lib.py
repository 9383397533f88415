"""Field math for the voxelcave package.

Re-exports the shared helpers from :mod:`voxelcave._common`, then adds the
implicit-shape primitives, the boolean (CSG) combinators and the domain
transforms used by the generators.

All functions accept and return ``numpy.ndarray`` objects and support
broadcasting over arbitrary leading batch dimensions.  A "point array" *p*
has shape ``(..., 3)``; scalar field results have shape ``(...,)`` and
transformed points keep the ``(..., 3)`` shape.

Sign conventions
----------------
``sd*`` functions are *signed*: negative inside, zero on the surface,
positive outside.  ``ud*`` functions are *unsigned*: zero on and inside the
surface, positive outside.  Mixing the two only happens through an explicit
combinator call.

Formulas are adapted from Inigo Quilez's distance function reference:
https://iquilezles.org/articles/distfunctions/
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ._common import *  # noqa: F401, F403
from ._common import _F

# sin(60°), used by the prism bounds.
_SIN60 = 0.866025


# ===========================================================================
# Primitive fields
# ===========================================================================

def sdSphere(p: _F, r: float) -> _F:
    """Sphere of radius *r* centred at the origin (signed)."""
    return length(p) - r


def udBox(p: _F, b: _F) -> _F:
    """Axis-aligned box with half-extents *b* (unsigned)."""
    return length(np.maximum(np.abs(p) - b, 0.0))


def udRoundBox(p: _F, b: _F, rr: float) -> _F:
    """Unsigned box with half-extents *b* grown by a border radius *rr*.

    Zero marks the rounded surface; points inside the core box read ``-rr``,
    so the value is unsigned-derived rather than a true signed distance.
    """
    return length(np.maximum(np.abs(p) - b, 0.0)) - rr


def sdBox(p: _F, b: _F) -> _F:
    """Axis-aligned box with half-extents *b* (signed)."""
    d = np.abs(p) - b
    inner = np.maximum(d[..., 0], np.maximum(d[..., 1], d[..., 2]))
    return np.minimum(inner, 0.0) + length(np.maximum(d, 0.0))


def sdTorus(p: _F, t: _F) -> _F:
    """Torus in the XZ plane; *t* = ``(R, r)`` (major, minor radii)."""
    q = vec2(length(p[..., [0, 2]]) - t[0], p[..., 1])
    return length(q) - t[1]


def sdCylinder(p: _F, c: _F) -> _F:
    """Infinite cylinder along Y; *c* = ``(cx, cz, radius)``."""
    return length(vec2(p[..., 0] - c[0], p[..., 2] - c[1])) - c[2]


def sdCone(p: _F, c: _F) -> _F:
    """Infinite cone around the Z axis with its apex at the origin.

    *c* must be normalized.  The field grows without bound, so callers
    intersect it with a bounding volume to keep it finite.
    """
    q = length(p[..., [0, 1]])
    return c[0] * q + c[1] * p[..., 2]


def sdPlane(p: _F, n: _F, offset: float) -> _F:
    """Half-space below the plane with unit normal *n* and *offset*."""
    return dot(p, n) + offset


def sdHexPrism(p: _F, h: _F) -> _F:
    """Hexagonal prism along Z; *h* = ``(radius, half_depth)``."""
    q = np.abs(p)
    hexagon = np.maximum(q[..., 0] * _SIN60 + q[..., 1] * 0.5, q[..., 1])
    return np.maximum(q[..., 2] - h[1], hexagon - h[0])


def sdTriPrism(p: _F, h: _F) -> _F:
    """Triangular prism along Z; *h* = ``(size, half_depth)``."""
    q = np.abs(p)
    triangle = np.maximum(q[..., 0] * _SIN60 + p[..., 1] * 0.5, -p[..., 1])
    return np.maximum(q[..., 2] - h[1], triangle - h[0] * 0.5)


def sdCappedCylinder(p: _F, h: _F) -> _F:
    """Capped cylinder along Y; *h* = ``(radius, half_height)``."""
    d = np.abs(vec2(length(p[..., [0, 2]]), p[..., 1])) - h
    return np.minimum(np.maximum(d[..., 0], d[..., 1]), 0.0) + length(np.maximum(d, 0.0))


def sdEllipsoid(p: _F, r: _F) -> _F:
    """Ellipsoid with semi-axes *r* (bound, not exact).

    Every component of *r* must be nonzero.
    """
    return (length(p / r) - 1.0) * np.min(r)


# ===========================================================================
# Boolean combinators
# ===========================================================================

def opUnion(d1: _F, d2: _F) -> _F:
    """Union of two fields: ``min(d1, d2)``."""
    return np.minimum(d1, d2)


def opIntersection(d1: _F, d2: _F) -> _F:
    """Intersection of two fields: ``max(d1, d2)``."""
    return np.maximum(d1, d2)


def opSubtraction(d1: _F, d2: _F) -> _F:
    """Remove *d1* from *d2*: ``max(-d1, d2)``.  Operand order matters."""
    return np.maximum(-d1, d2)


# ===========================================================================
# Domain transforms (position -> position)
# ===========================================================================

def opTranslate(p: _F, t: _F) -> _F:
    """Move the local origin to world position *t*."""
    return p - t


def opRotateTranslate(p: _F, m: _F) -> _F:
    """Map world points into the local frame of placement matrix *m*.

    *m* is either a ``(3, 3)`` linear map or a ``(4, 4)`` affine matrix whose
    last column holds the translation.  Points are treated as homogeneous
    with ``w = 1``.  *m* must be invertible.
    """
    return opTransform(p, np.linalg.inv(np.asarray(m, dtype=float)))


def opTransform(p: _F, m: _F) -> _F:
    """Apply a ``(3, 3)`` or ``(4, 4)`` matrix *m* to points *p* directly."""
    m = np.asarray(m, dtype=float)
    if m.shape == (4, 4):
        return p @ m[:3, :3].T + m[:3, 3]
    return p @ m.T


def opTwist(p: _F, k: float) -> _F:
    """Rotate *p* around +Y by ``k * p.y`` radians.

    Same handedness as :func:`rotation_y`: ``opTwist(p, k)`` equals
    ``rotation_y(k * p.y) @ p`` point by point.
    """
    c = np.cos(k * p[..., 1])
    s = np.sin(k * p[..., 1])
    x = c * p[..., 0] + s * p[..., 2]
    z = -s * p[..., 0] + c * p[..., 2]
    return vec3(x, p[..., 1], z)


def opRepeat(p: _F, c: _F) -> _F:
    """Fold space into tiles of size *c* centred on the origin.

    Uses a floored modulo so the fold stays periodic for negative
    coordinates.  Every component of *c* must be nonzero.
    """
    return fmod_floor(p, c) - 0.5 * np.asarray(c)


# ===========================================================================
# Placement matrices
# ===========================================================================

def rotation_x(angle: float) -> _F:
    """``(3, 3)`` rotation around X by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]])


def rotation_y(angle: float) -> _F:
    """``(3, 3)`` rotation around Y by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]])


def rotation_z(angle: float) -> _F:
    """``(3, 3)`` rotation around Z by *angle* radians."""
    c, s = np.cos(angle), np.sin(angle)
    return np.array([[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]])


def trs_matrix(
    translation: Sequence[float] = ZERO3,
    euler: Sequence[float] = ZERO3,
) -> _F:
    """Build a ``(4, 4)`` placement matrix.

    *euler* holds X/Y/Z angles in radians, applied Z first, then X, then Y.
    """
    ax, ay, az = euler
    m = np.eye(4)
    m[:3, :3] = rotation_y(ay) @ rotation_x(ax) @ rotation_z(az)
    m[:3, 3] = translation
    return m
