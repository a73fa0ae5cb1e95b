import os

import pytest

os.environ.setdefault("MPLBACKEND", "Agg")

from xoshiro_project.generator.xoshiro256 import Xoshiro256


@pytest.fixture
def rng():
    return Xoshiro256(1, 2, 3, 4)


@pytest.fixture
def seeded():
    def make(seed=12345, variant="starstar"):
        return Xoshiro256.from_seed(seed, variant=variant)
    return make
