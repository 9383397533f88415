"""Tests for the generate() entry point, the mesher boundary and logging setup."""

import logging

import numpy as np
import numpy.testing as npt
import pytest

from voxelcave import GenerationConfig, MarchingCubesMesher, generate, is_complete, progress_text
from voxelcave.setup_logging import setup_logging


class _RecordingMesher:
    """Stand-in mesher that records what the pipeline hands it."""

    def __init__(self):
        self.voxel_data = None
        self.calls = []
        self._progress = 0.0

    @property
    def progress(self):
        return self._progress

    def generate_mesh(self):
        self.calls.append(self.voxel_data)
        self._progress = 1.0


# ===========================================================================
# generate()
# ===========================================================================

class TestGenerate:
    @pytest.mark.parametrize("strategy", ["noise", "periodic", "perturbed", "catalog"])
    def test_grid_matches_config(self, strategy):
        cfg = GenerationConfig(seed=3, width=6, height=8, length=5, strategy=strategy)
        grid = generate(cfg)
        assert grid.shape == (6, 8, 5)

    def test_ten_cube_has_thousand_entries(self):
        grid = generate(GenerationConfig(width=10, height=10, length=10))
        assert grid.size == 1000

    def test_noise_grid_is_binary(self):
        grid = generate(GenerationConfig(seed=17, width=25, height=25, length=25,
                                         strategy="noise"))
        assert set(np.unique(grid)) <= {0, 1}

    def test_same_seed_same_grid(self):
        cfg = GenerationConfig(seed=8, width=9, height=9, length=9, strategy="perturbed")
        npt.assert_array_equal(generate(cfg), generate(cfg))

    def test_hands_grid_to_mesher_once(self):
        mesher = _RecordingMesher()
        grid = generate(GenerationConfig(), mesher)
        assert len(mesher.calls) == 1
        assert mesher.calls[0] is grid
        assert is_complete(mesher.progress)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            generate(GenerationConfig(strategy="lava"))


# ===========================================================================
# Marching cubes mesher
# ===========================================================================

class TestMarchingCubesMesher:
    def test_meshes_catalog(self):
        mesher = MarchingCubesMesher()
        generate(GenerationConfig(width=25, height=10, length=20), mesher)
        assert mesher.progress == 1.0
        assert len(mesher.faces) > 0
        assert mesher.vertices.shape[1] == 3
        assert mesher.faces.max() < len(mesher.vertices)

    def test_level_follows_dtype(self):
        mesher = MarchingCubesMesher()
        mesher.voxel_data = np.zeros((5, 5, 5), dtype=int)
        assert mesher.iso_level() == 0.5
        mesher.voxel_data = np.zeros((5, 5, 5))
        assert mesher.iso_level() == 0.0
        assert MarchingCubesMesher(level=0.25).iso_level() == 0.25

    def test_occupancy_grid(self):
        grid = np.zeros((6, 6, 6), dtype=int)
        grid[2:4, 2:4, 2:4] = 1
        mesher = MarchingCubesMesher()
        mesher.voxel_data = grid
        mesher.generate_mesh()
        assert len(mesher.faces) > 0
        assert (mesher.vertices >= 1.0).all() and (mesher.vertices <= 4.0).all()

    def test_no_crossing_gives_empty_mesh(self, caplog):
        mesher = MarchingCubesMesher()
        mesher.voxel_data = np.ones((5, 5, 5))
        with caplog.at_level(logging.WARNING, logger="voxelcave.mesher"):
            mesher.generate_mesh()
        assert mesher.faces.shape == (0, 3)
        assert mesher.progress == 1.0
        assert "mesh is empty" in caplog.text

    def test_requires_data(self):
        with pytest.raises(RuntimeError):
            MarchingCubesMesher().generate_mesh()

    def test_progress_starts_at_zero(self):
        assert MarchingCubesMesher().progress == 0.0


class TestProgressDisplay:
    @pytest.mark.parametrize("ratio, text", [(0.0, "0%"), (0.42, "42%"), (1.0, "100%")])
    def test_text(self, ratio, text):
        assert progress_text(ratio) == text

    def test_complete(self):
        assert not is_complete(0.99)
        assert is_complete(1.0)
        assert is_complete(1.5)


# ===========================================================================
# Logging
# ===========================================================================

class TestSetupLogging:
    def test_writes_log_file(self, tmp_path):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        log_file = tmp_path / "logs" / "voxelcave.log"
        try:
            setup_logging(logging.DEBUG, log_file=log_file)
            logging.getLogger("voxelcave.test").info("hello caves")
            for h in root.handlers:
                h.flush()
            assert "hello caves" in log_file.read_text(encoding="utf-8")
            assert logging.getLogger("skimage").level == logging.WARNING
        finally:
            for h in root.handlers:
                h.close()
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
