"""
voxelcave — Volumetric Field Generation for Cave Meshes
=======================================================

Procedurally generates the scalar voxel grids an isosurface mesher turns
into terrain and cave meshes, based on Inigo Quilez's distance function
collection.

Implemented features
--------------------
- Primitive fields: sphere, box, round box, signed box, torus, cylinder,
  cone, plane, hexagonal/triangular prism, capped cylinder, ellipsoid
- Boolean operations: union, intersection, subtraction
- Transforms: translate, rotate-and-translate, twist, repeat
- Sampling interface: :class:`Generator`, composable :class:`Field`
- Generators: noise threshold, periodic caves, noise-perturbed caves,
  cell-dispatch catalog
- Lattice sampling: :func:`sample_lattice`
- Pipeline entry point: :func:`generate`, with a marching cubes mesher

Quick start
-----------

::

    from voxelcave import GenerationConfig, MarchingCubesMesher, generate

    mesher = MarchingCubesMesher()
    grid = generate(GenerationConfig(seed=3, width=25, height=10, length=20,
                                     strategy="catalog"), mesher)
    print(grid.shape, len(mesher.faces))

Composing fields directly::

    from voxelcave import Field, sample_lattice, sdf_lib as sdf

    ball = Field(lambda p: sdf.sdSphere(p, 2.0)).translate(5, 5, 5)
    grid = sample_lattice(ball, (10, 10, 10))
"""

from . import sdf_lib
from .config import GenerationConfig
from .generator import Field, Generator
from .generators import (
    CellCatalogEntry,
    CellCatalogGenerator,
    NoiseThresholdGenerator,
    PeriodicCaveGenerator,
    PerturbedCaveGenerator,
    make_generator,
)
from .grid import lattice_points, sample_lattice, threshold_grid
from .mesher import MarchingCubesMesher, Mesher, is_complete, progress_text
from .pipeline import generate

__version__ = "0.1.0"

__all__ = [
    "sdf_lib",

    # Sampling
    "Generator",
    "Field",

    # Generators
    "NoiseThresholdGenerator",
    "PeriodicCaveGenerator",
    "PerturbedCaveGenerator",
    "CellCatalogEntry",
    "CellCatalogGenerator",
    "make_generator",

    # Grid utilities
    "lattice_points",
    "sample_lattice",
    "threshold_grid",

    # Pipeline
    "GenerationConfig",
    "generate",
    "Mesher",
    "MarchingCubesMesher",
    "progress_text",
    "is_complete",
]
