"""voxelcave.generators — concrete field generators.

Implemented generators
----------------------
:class:`NoiseThresholdGenerator`
    0/1 occupancy from summed Perlin noise, sampled on lattice indices.

:class:`PeriodicCaveGenerator`
    Analytic tiled pillars between a floor and a ceiling.

:class:`PerturbedCaveGenerator`
    The periodic caves multiplied by three Perlin noise factors.

:class:`CellCatalogGenerator`
    One primitive per 6x6 cell over a floor plane.

Generators are selected by name through :func:`make_generator`.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..config import GenerationConfig
from ..generator import Generator
from .catalog import CELL_SIZE, DEFAULT_CATALOG, SHAPES, CellCatalogEntry, CellCatalogGenerator
from .caves import PerturbedCaveGenerator, PeriodicCaveGenerator
from .noise_threshold import NoiseThresholdGenerator

# Open space is kept two units clear of the lattice's top and bottom faces.
_SLAB_MARGIN = 2.0

GENERATORS: Dict[str, Callable[[GenerationConfig], Generator]] = {
    "noise": lambda config: NoiseThresholdGenerator(
        config.width, config.height, config.length, seed=config.seed
    ),
    "periodic": lambda config: PeriodicCaveGenerator(
        floor=_SLAB_MARGIN, ceiling=config.height - _SLAB_MARGIN
    ),
    "perturbed": lambda config: PerturbedCaveGenerator(
        seed=config.seed, floor=_SLAB_MARGIN, ceiling=config.height - _SLAB_MARGIN
    ),
    "catalog": lambda config: CellCatalogGenerator(),
}


def make_generator(name: str, config: GenerationConfig) -> Generator:
    """Build the generator registered under *name* for *config*."""
    try:
        factory = GENERATORS[name]
    except KeyError:
        raise ValueError(
            f"Unknown generator {name!r}; expected one of {sorted(GENERATORS)}"
        ) from None
    return factory(config)


__all__ = [
    "GENERATORS",
    "make_generator",

    "NoiseThresholdGenerator",
    "PeriodicCaveGenerator",
    "PerturbedCaveGenerator",

    "CELL_SIZE",
    "SHAPES",
    "DEFAULT_CATALOG",
    "CellCatalogEntry",
    "CellCatalogGenerator",
]
