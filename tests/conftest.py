import numpy as np
import pytest

from oceanfft.ocean.ocean_config import OceanConfig
from oceanfft.ocean.ocean_simulation import initialize


@pytest.fixture
def small_config() -> OceanConfig:
    return OceanConfig(resolution=64, ocean_size=128.0, wind_speed=10.0, seed=7)


@pytest.fixture(scope="session")
def scenario_config() -> OceanConfig:
    # N=256, L=256, 15 m/s wind blowing along (1, 1)
    return OceanConfig(resolution=256, ocean_size=256.0, wind_speed=15.0,
                       wind_direction=(1.0, 1.0), seed=42)


@pytest.fixture(scope="session")
def scenario_state(scenario_config):
    return initialize(scenario_config)


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
