"""
Rendering Script

Grows an L-system engine headlessly, exports one snapshot per tick to JSON and
renders the growth with Cairo.

Modes:
    tree   - 3D tree with retained, growing branches (projected onto x-y)
    plant  - 2D plant rebuilt every tick

Run:
    python render.py tree --output outputs/tree
    python render.py plant --preset bush --config plant.json
"""

import argparse
from pathlib import Path

from config import (
    PLANT_PRESETS,
    PlantConfig,
    SegmentRenderConfig,
    TreeConfig,
    load_config,
    plant_preset,
)
from logging_config import setup_logging
from lsystem import Plant, Tree
from rendering import SegmentRenderer, collect_growth_frames, export_growth_data


def build_engine(args):
    if args.mode == 'tree':
        return Tree(load_config(args.config, kind='tree') if args.config else TreeConfig())
    if args.preset:
        return Plant(plant_preset(args.preset))
    return Plant(load_config(args.config, kind='plant') if args.config else PlantConfig())


def render(args):
    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    engine = build_engine(args)
    print(f"Growing {args.mode}: {engine.grammar}")
    frames = collect_growth_frames(engine)

    if engine.error is not None:
        print(f"Warning: growth halted early: {engine.error}")
    if not frames:
        print("Nothing to render.")
        return

    name = args.preset or args.mode
    export_growth_data(frames, str(output_dir / f'{name}_growth.json'))

    # Tree thickness is in world units, plant line width is in pixels
    render_config = SegmentRenderConfig(
        output_width=args.size,
        output_height=args.size,
        pixel_widths=(args.mode == 'plant'),
    )
    renderer = SegmentRenderer(render_config)
    renderer.save_frame(frames[-1], str(output_dir / f'{name}_final.png'))
    renderer.render_animation(frames, str(output_dir / f'{name}_growth.gif'), fps=args.fps)


def main():
    parser = argparse.ArgumentParser(description="Render L-system growth with Cairo")
    parser.add_argument('mode', choices=['tree', 'plant'])
    parser.add_argument('--config', help="JSON config file (defaults are used if missing)")
    parser.add_argument('--preset', choices=sorted(PLANT_PRESETS), help="plant preset")
    parser.add_argument('--output', default='outputs', help="output directory")
    parser.add_argument('--size', type=int, default=512, help="image size in pixels")
    parser.add_argument('--fps', type=int, default=2)
    args = parser.parse_args()

    setup_logging()
    render(args)

    print("\n=== Done ===")


if __name__ == '__main__':
    main()
