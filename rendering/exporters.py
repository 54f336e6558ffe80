"""
Data exporters to convert engine state into renderer-friendly format.
Keeps the rendering module decoupled from the L-system engines.
"""

import json
from pathlib import Path
from typing import Any, Dict, List


def snapshot(engine) -> Dict[str, Any]:
    """
    Current geometry of an engine.

    Format:
    {
        "iteration": int,
        "sentence_length": int,
        "segments": [
            {
                "start": [x, y, z],
                "end": [x, y, z],
                "length": float,
                "thickness": float,
                "generation": int  # tree branches only
            }
        ]
    }
    """
    items = getattr(engine, 'branches', None)
    if items is None:
        items = engine.segments

    return {
        "iteration": engine.iteration,
        "sentence_length": len(engine.sentence),
        "segments": [item.to_dict() for item in items],
    }


def collect_growth_frames(engine) -> List[Dict[str, Any]]:
    """Tick engine until it is inert, taking a snapshot after every tick."""
    frames = []
    engine.grow(callback=lambda e, iteration: frames.append(snapshot(e)))
    return frames


def export_growth_data(frames: List[Dict[str, Any]], output_path: str) -> Dict[str, Any]:
    data = {
        "num_frames": len(frames),
        "frames": frames,
    }

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w') as f:
        json.dump(data, f, indent=2)

    return data


def load_growth_data(input_path: str) -> List[Dict[str, Any]]:
    with open(input_path, 'r') as f:
        data = json.load(f)
    return data['frames']
