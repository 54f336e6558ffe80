import math

import pytest

from config import PlantConfig, TreeConfig, load_config, plant_preset, save_config
from lsystem import ConfigError, Plant


class TestTreeConfig:
    def test_defaults(self) -> None:
        config = TreeConfig()
        assert config.axiom == "F"
        assert config.rules == {"F": "F[+F][-F][^F][&F]"}
        assert config.angle == pytest.approx(math.pi / 6)
        assert config.max_iterations == 5

    @pytest.mark.parametrize("kwargs", [
        {"branch_length": 0.0},
        {"branch_length": -0.5},
        {"branch_thickness": 0.0},
        {"growth_factor": 0.0},
        {"growth_factor": -1.5},
        {"growth_factor": 0.5},
        {"growth_factor": 1.0},
        {"max_iterations": -1},
        {"max_iterations": 2.5},
        {"axiom": ""},
        {"rules": {"FF": "F"}},
        {"rules": {"F": 3}},
        {"angle": float("inf")},
        {"draw_symbols": ""},
    ])
    def test_rejects_degenerate(self, kwargs) -> None:
        with pytest.raises(ConfigError):
            TreeConfig(**kwargs)

    def test_config_error_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            TreeConfig(branch_length=0)


class TestPlantConfig:
    def test_defaults(self) -> None:
        config = PlantConfig()
        assert config.axiom == "S"
        assert config.angle == pytest.approx(math.radians(25))
        assert not config.lenient_brackets

    @pytest.mark.parametrize("kwargs", [
        {"segment_length": 0.0},
        {"line_width": -1.0},
        {"start_heading": float("nan")},
    ])
    def test_rejects_degenerate(self, kwargs) -> None:
        with pytest.raises(ConfigError):
            PlantConfig(**kwargs)


class TestPresets:
    def test_plant_preset(self) -> None:
        config = plant_preset("bush")
        assert config.axiom == "F"
        assert config.rules == {"F": "FF+[+F-F-F]-[-F+F+F]"}
        assert config.angle == pytest.approx(math.radians(22.5))
        assert config.max_iterations == 4

    def test_preset_override(self) -> None:
        config = plant_preset("fern", max_iterations=2)
        assert config.max_iterations == 2
        plant = Plant(config)
        assert plant.grow() == 2

    def test_preset_grows_upwards(self) -> None:
        plant = Plant(plant_preset("sprout"))
        plant.tick()
        trunk = plant.segments[0]
        assert trunk.end.to_tuple() == pytest.approx((0, 2, 0), abs=1e-9)


class TestLoadSave:
    def test_round_trip_tree(self, tmp_path) -> None:
        path = tmp_path / "tree.json"
        config = TreeConfig(branch_length=0.25, growth_factor=1.2, max_iterations=3)
        save_config(config, str(path))
        assert load_config(str(path), kind="tree") == config

    def test_round_trip_plant(self, tmp_path) -> None:
        path = tmp_path / "nested" / "plant.json"
        config = plant_preset("weed")
        save_config(config, str(path))
        assert load_config(str(path), kind="plant") == config

    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        assert load_config(str(tmp_path / "absent.json"), kind="plant") == PlantConfig()

    def test_invalid_file_rejected(self, tmp_path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"branch_length": 0}')
        with pytest.raises(ConfigError):
            load_config(str(path), kind="tree")

    def test_unknown_field_rejected(self, tmp_path) -> None:
        path = tmp_path / "typo.json"
        path.write_text('{"branch_lenght": 1}')
        with pytest.raises(ConfigError, match="branch_lenght"):
            load_config(str(path), kind="tree")
