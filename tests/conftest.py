import os

# Widget tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import numpy as np
import pytest

from kmeansplayground.config import SimulationConfig, get_preset
from kmeansplayground.model.geometry_primitives import Rect
from kmeansplayground.model.state import SimulationState


@pytest.fixture
def config() -> SimulationConfig:
    return get_preset("classic")


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)


@pytest.fixture
def state(config, rng) -> SimulationState:
    s = SimulationState(config=config, bounds=Rect(0.0, 0.0, 400.0, 300.0), rng=rng)
    s.initialize()
    return s
