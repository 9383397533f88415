"""Tunable inputs for a generation run."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from typing import Any, Mapping, Tuple

logger = logging.getLogger(__name__)

MIN_DIMENSION = 5
MAX_DIMENSION = 25
DEFAULT_DIMENSION = 10
DEFAULT_STRATEGY = "catalog"


def clamp_dimension(value: int) -> int:
    """Clamp a lattice dimension into ``[MIN_DIMENSION, MAX_DIMENSION]``."""
    return max(MIN_DIMENSION, min(MAX_DIMENSION, int(value)))


@dataclass(frozen=True)
class GenerationConfig:
    """Seed, lattice dimensions and generator strategy for one run.

    Dimensions outside ``[5, 25]`` are clamped with a warning rather than
    rejected.
    """

    seed: int = 0
    width: int = DEFAULT_DIMENSION
    height: int = DEFAULT_DIMENSION
    length: int = DEFAULT_DIMENSION
    strategy: str = DEFAULT_STRATEGY

    def __post_init__(self) -> None:
        object.__setattr__(self, "seed", int(self.seed))
        for name in ("width", "height", "length"):
            raw = getattr(self, name)
            clamped = clamp_dimension(raw)
            if clamped != raw:
                logger.warning("%s=%r outside [%d, %d]; using %d",
                               name, raw, MIN_DIMENSION, MAX_DIMENSION, clamped)
            object.__setattr__(self, name, clamped)

    @property
    def shape(self) -> Tuple[int, int, int]:
        return (self.width, self.height, self.length)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> GenerationConfig:
        """Build a config from host-style keys (``Seed``, ``Width``, ...).

        Keys are matched case-insensitively; unknown keys are ignored.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in values.items():
            name = key.lower()
            if name in known:
                kwargs[name] = value
            else:
                logger.debug("ignoring unknown config key %r", key)
        return cls(**kwargs)
