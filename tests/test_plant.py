import pytest

from config import PlantConfig
from lsystem import Plant, UnbalancedBranchError


class TestPlantGrowth:
    def test_initial_state(self, plant_config) -> None:
        plant = Plant(plant_config)
        assert plant.sentence == "S"
        assert plant.iteration == 0
        assert plant.segments == []

    def test_first_tick(self, plant_config) -> None:
        plant = Plant(plant_config)
        assert plant.tick()
        assert plant.sentence == "F[+F][-F]"
        trunk, right, left = plant.segments
        assert trunk.end.to_tuple() == pytest.approx((2, 0, 0))
        assert right.start.to_tuple() == pytest.approx((2, 0, 0))
        assert left.start.to_tuple() == pytest.approx((2, 0, 0))

    def test_second_tick(self, plant_config) -> None:
        plant = Plant(plant_config)
        plant.tick()
        plant.tick()
        assert plant.sentence == "FF[+FF][-FF]"
        assert len(plant.segments) == 6

    def test_stops_at_max_iterations(self, plant_config) -> None:
        plant = Plant(plant_config)
        assert plant.grow() == 5
        sentence = plant.sentence
        assert not plant.tick()
        assert plant.sentence == sentence
        # F doubles every generation after the first
        assert len(plant.segments) == 3 * 2 ** 4


class TestPlantDisplay:
    def test_display_rebuilt_every_tick(self, plant_config, adapter) -> None:
        plant = Plant(plant_config, adapter=adapter)
        plant.tick()
        assert len(adapter.live) == 3
        plant.tick()
        assert len(adapter.live) == 6
        assert adapter.disposed == 3
        assert adapter.materialized == 9

    def test_display_order_matches_interpretation(self, plant_config, adapter) -> None:
        plant = Plant(plant_config, adapter=adapter)
        plant.tick()
        plant.tick()
        assert adapter.snapshot() == [s.to_dict() for s in plant.segments]

    def test_dispose(self, plant_config, adapter) -> None:
        plant = Plant(plant_config, adapter=adapter)
        plant.tick()
        plant.dispose()
        assert adapter.live == {}


class TestPlantBrackets:
    def test_strict_by_default(self, adapter) -> None:
        plant = Plant(PlantConfig(axiom="F", rules={"F": "F]"}), adapter=adapter)
        assert not plant.tick()
        assert isinstance(plant.error, UnbalancedBranchError)
        assert plant.sentence == "F"
        assert adapter.live == {}

    def test_lenient_brackets(self) -> None:
        plant = Plant(PlantConfig(axiom="F", rules={"F": "F]"}, lenient_brackets=True))
        assert plant.tick()
        assert plant.tick()
        assert plant.sentence == "F]]"
        assert plant.error is None
        assert len(plant.segments) == 1
