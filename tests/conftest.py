import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mazegen import Generator, MazeConfig  # noqa: E402


@pytest.fixture(autouse=True)
def _quiet_logs(monkeypatch):
    # keep structured log lines out of captured CLI output unless a test opts in
    monkeypatch.setenv("MAZEGEN_LOG_LEVEL", "warn")
    monkeypatch.delenv("MAZEGEN_LOG_JSON", raising=False)


@pytest.fixture()
def make_generator():
    """Return a factory producing a freshly generated maze for a pinned seed."""

    def _make(seed=12345, width=43, height=27, config=None, constraints=(), backend=None):
        gen = Generator(backend)
        gen.set_seed(seed)
        gen.generate(width, height, config or MazeConfig(), constraints)
        return gen

    return _make


@pytest.fixture()
def prepared():
    """Generator with grid, config, constraints and RNG initialized but no phase run yet."""

    def _prepare(width=11, height=11, config=None, constraints=(), seed=1):
        gen = Generator()
        gen.set_seed(seed)
        gen._reset()
        gen._init_generation(width, height, config or MazeConfig(room_base_number=0), constraints)
        return gen

    return _prepare
