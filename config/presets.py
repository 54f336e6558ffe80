"""
Named presets and JSON load/save for engine configs.
"""

import json
from dataclasses import asdict, fields
from pathlib import Path
from typing import Dict, Union

import numpy as np

from lsystem.errors import ConfigError
from lsystem.grammar import parse_rules
from .lsystem_config import TreeConfig, PlantConfig

AnyConfig = Union[TreeConfig, PlantConfig]

CONFIG_KINDS = {
    'tree': TreeConfig,
    'plant': PlantConfig,
}

# axiom;rules, angle in degrees, iterations
PLANT_PRESETS: Dict[str, tuple] = {
    'sprout': ("S; S=F[+F][-F]; F=FF", 25.0, 5),
    'bush': ("F; F=FF+[+F-F-F]-[-F+F+F]", 22.5, 4),
    'weed': ("F; F=F[+FF][-FF]F[-F][+F]F", 35.0, 3),
    'fern': ("X; F=FF; X=F[+X]F[-X]+X", 20.0, 5),
}


def plant_preset(name: str, **overrides) -> PlantConfig:
    """Build a PlantConfig from one of PLANT_PRESETS; keyword overrides win."""
    cmd, angle_deg, iterations = PLANT_PRESETS[name]
    axiom, rules = parse_rules(cmd)
    params = dict(axiom=axiom, rules=rules, angle=float(np.radians(angle_deg)),
                  max_iterations=iterations, start_heading=float(np.pi / 2))
    params.update(overrides)
    return PlantConfig(**params)


def load_config(path: str, kind: str = 'tree') -> AnyConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_cls = CONFIG_KINDS[kind]
    config_path = Path(path)
    if not config_path.exists():
        return config_cls()

    with open(config_path, 'r') as f:
        data = json.load(f)

    data.pop('kind', None)
    unknown = sorted(set(data) - {f.name for f in fields(config_cls)})
    if unknown:
        raise ConfigError(f"unknown {kind} config field(s) in {config_path}: {', '.join(unknown)}")
    return config_cls(**data)


def save_config(config: AnyConfig, path: str):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    kind = next(k for k, cls in CONFIG_KINDS.items() if isinstance(config, cls))
    data = {'kind': kind}
    data.update(asdict(config))

    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"Saved config to {config_path}")
