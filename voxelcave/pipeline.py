"""The "generate now" entry point: config in, voxel grid out."""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .config import GenerationConfig
from .generators import make_generator
from .grid import sample_lattice
from .mesher import Mesher

logger = logging.getLogger(__name__)


def generate(config: GenerationConfig, mesher: Optional[Mesher] = None) -> np.ndarray:
    """Run one generation pass synchronously.

    Builds the generator named by ``config.strategy``, samples it once per
    lattice point and, when *mesher* is given, hands it the finished grid and
    triggers its build.  Nothing is cached between calls.

    Returns
    -------
    numpy.ndarray
        The voxel grid, shape ``config.shape``, indexed ``[x, y, z]``.
    """
    logger.info("generating %s grid %dx%dx%d (seed=%d)",
                config.strategy, *config.shape, config.seed)
    generator = make_generator(config.strategy, config)
    grid = sample_lattice(generator, config.shape)

    if mesher is not None:
        mesher.voxel_data = grid
        mesher.generate_mesh()
    return grid
