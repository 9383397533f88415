"""Sampling interface and composable field expressions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Sequence

import numpy as np
import numpy.typing as npt

from . import sdf_lib as sdf

# ---------------------------------------------------------------------------
# Type aliases
# ---------------------------------------------------------------------------
_Array = npt.NDArray[np.floating]
_FieldFunc = Callable[[_Array], _Array]


# ===========================================================================
# Sampling interface
# ===========================================================================

class Generator(ABC):
    """Anything that can be sampled at a position.

    :meth:`sample` takes a ``(..., 3)`` array and returns one field value per
    point, shape ``(...)``.  Generators that interpret their input as raw
    lattice indices rather than world positions set :attr:`lattice_indices`;
    the lattice materializer then ignores any spacing or origin.
    """

    lattice_indices: bool = False

    @abstractmethod
    def sample(self, p: _Array) -> _Array:
        """Evaluate the field at *p* (shape ``(..., 3)``)."""

    def __call__(self, p: _Array) -> _Array:
        return self.sample(p)


# ===========================================================================
# Field expressions
# ===========================================================================

class Field(Generator):
    """A generator wrapping a callable ``func(p) -> values``.

    Expressions are built by chaining and evaluated eagerly on every call.

    Implements:
    - Boolean operations: :meth:`union`, :meth:`subtract`, :meth:`intersect`
    - Transforms:         :meth:`translate`, :meth:`transform`,
                          :meth:`twist`, :meth:`repeat`
    """

    def __init__(self, func: _FieldFunc) -> None:
        self._func = func

    def sample(self, p: _Array) -> _Array:
        return self._func(p)

    # ------------------------------------------------------------------
    # Boolean operations
    # ------------------------------------------------------------------

    def union(self, other: Generator) -> Field:
        """Return the union (min) of this field and *other*."""
        return Field(lambda p: sdf.opUnion(self.sample(p), other.sample(p)))

    def subtract(self, other: Generator) -> Field:
        """Remove *other* from this field."""
        return Field(lambda p: sdf.opSubtraction(other.sample(p), self.sample(p)))

    def intersect(self, other: Generator) -> Field:
        """Return the intersection (max) of this field and *other*."""
        return Field(lambda p: sdf.opIntersection(self.sample(p), other.sample(p)))

    # ------------------------------------------------------------------
    # Transforms
    # ------------------------------------------------------------------

    def translate(self, tx: float, ty: float, tz: float) -> Field:
        """Place the field's origin at ``(tx, ty, tz)``."""
        t = np.array([tx, ty, tz], dtype=float)
        return Field(lambda p: self.sample(sdf.opTranslate(p, t)))

    def transform(self, matrix: _Array) -> Field:
        """Place the field with a ``(3, 3)`` or ``(4, 4)`` matrix.

        The inverse is computed once here rather than on every sample.
        """
        inv = np.linalg.inv(np.asarray(matrix, dtype=float))
        return Field(lambda p: self.sample(sdf.opTransform(p, inv)))

    def twist(self, k: float) -> Field:
        """Twist around Y by *k* radians per unit of height."""
        return Field(lambda p: self.sample(sdf.opTwist(p, k)))

    def repeat(self, period: Sequence[float]) -> Field:
        """Tile the field infinitely with cell size *period*."""
        c = np.array(period, dtype=float)
        return Field(lambda p: self.sample(sdf.opRepeat(p, c)))
