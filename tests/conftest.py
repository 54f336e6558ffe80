import matplotlib

matplotlib.use("Agg")

import pytest

from config import PlantConfig, TreeConfig
from rendering import RecordingSceneAdapter


@pytest.fixture
def adapter() -> RecordingSceneAdapter:
    return RecordingSceneAdapter()


@pytest.fixture
def tree_config() -> TreeConfig:
    return TreeConfig()


@pytest.fixture
def plant_config() -> PlantConfig:
    return PlantConfig()
