import matplotlib.pyplot as plt
import numpy as np
import pytest

from config import PlantConfig, SegmentRenderConfig, TreeConfig
from lsystem import Plant, Tree, plot_growth_statistics, visualize_segments
from main_sphere import shade, sphere_mesh
from rendering import (
    FrameDriver,
    MatplotlibSceneAdapter,
    RecordingSceneAdapter,
    SegmentRenderer,
    collect_growth_frames,
    compute_bounds,
    export_growth_data,
    load_growth_data,
    snapshot,
)


class TestRecordingAdapter:
    def test_double_dispose_is_reported(self) -> None:
        adapter = RecordingSceneAdapter()
        plant = Plant(PlantConfig(), adapter=adapter)
        plant.tick()
        handle = next(iter(adapter.live))
        adapter.dispose(handle)
        with pytest.raises(KeyError):
            adapter.dispose(handle)


class TestFrameDriver:
    def test_headless_run(self, adapter) -> None:
        tree = Tree(TreeConfig(max_iterations=3), adapter=adapter)
        driver = FrameDriver(tree.tick)
        driver.run(6)
        assert tree.iteration == 3
        assert driver.frame == 5
        assert len(adapter.live) == len(tree.branches)

    def test_on_frame_called_after_tick(self) -> None:
        plant = Plant(PlantConfig())
        seen = []
        driver = FrameDriver(plant.tick, on_frame=lambda f: seen.append((f, plant.iteration)))
        driver.run(2)
        assert seen == [(0, 1), (1, 2)]

    def test_start_requires_figure(self) -> None:
        with pytest.raises(ValueError):
            FrameDriver(lambda: None).start()

    def test_start_with_figure(self) -> None:
        fig = plt.figure()
        driver = FrameDriver(lambda: None, fig=fig, interval=10)
        anim = driver.start()
        assert driver.animation is anim
        plt.close(fig)


class TestExporters:
    def test_tree_snapshot(self) -> None:
        tree = Tree(TreeConfig())
        tree.tick()
        data = snapshot(tree)
        assert data["iteration"] == 1
        assert data["sentence_length"] == len("F[+F][-F][^F][&F]")
        assert len(data["segments"]) == 5
        assert data["segments"][0]["generation"] == 1

    def test_collect_frames(self) -> None:
        frames = collect_growth_frames(Tree(TreeConfig(max_iterations=3)))
        assert [f["iteration"] for f in frames] == [1, 2, 3]
        assert [len(f["segments"]) for f in frames] == [5, 21, 85]

    def test_export_and_load(self, tmp_path) -> None:
        frames = collect_growth_frames(Plant(PlantConfig(max_iterations=2)))
        path = tmp_path / "out" / "plant.json"
        export_growth_data(frames, str(path))
        assert load_growth_data(str(path)) == frames


class TestSegmentRenderer:
    def test_bounds(self) -> None:
        frames = collect_growth_frames(Plant(PlantConfig(max_iterations=1)))
        min_x, min_y, max_x, max_y = compute_bounds(frames)
        assert min_x == pytest.approx(0.0)
        assert max_x > 2.0
        assert min_y < 0 < max_y

    def test_empty_bounds(self) -> None:
        assert compute_bounds([{"segments": []}]) is None

    def test_render_frame(self) -> None:
        frames = collect_growth_frames(Tree(TreeConfig(max_iterations=2)))
        renderer = SegmentRenderer(SegmentRenderConfig(output_width=64, output_height=48))
        image = renderer.render_frame(frames[-1])
        assert image.shape == (48, 64, 4)
        assert image.dtype == np.uint8
        # something other than the white background was drawn
        assert (image[:, :, :3] < 250).any()

    def test_render_empty_frame(self) -> None:
        renderer = SegmentRenderer(SegmentRenderConfig(output_width=16, output_height=16))
        image = renderer.render_frame({"segments": []})
        assert (image == 255).all()

    def test_save_frame(self, tmp_path) -> None:
        frames = collect_growth_frames(Plant(PlantConfig(max_iterations=2)))
        config = SegmentRenderConfig(output_width=32, output_height=32, pixel_widths=True)
        path = tmp_path / "plant.png"
        SegmentRenderer(config).save_frame(frames[-1], str(path))
        assert path.exists()


class TestMatplotlibAdapter:
    def test_tree_lines_follow_branches(self) -> None:
        fig = plt.figure()
        ax = fig.add_subplot(projection="3d")
        tree = Tree(TreeConfig(), adapter=MatplotlibSceneAdapter(ax))
        tree.tick()
        tree.tick()
        assert len(ax.lines) == len(tree.branches)

        tree.dispose()
        assert len(ax.lines) == 0
        plt.close(fig)

    def test_axes_are_swapped(self) -> None:
        fig = plt.figure()
        ax = fig.add_subplot(projection="3d")
        tree = Tree(TreeConfig(max_iterations=1), adapter=MatplotlibSceneAdapter(ax))
        tree.tick()
        xs, ys, zs = tree.branches[0].handle.get_data_3d()
        # turtle y (up) is drawn on matplotlib's z axis
        assert list(zs) == pytest.approx([0.0, 0.75])
        assert list(ys) == pytest.approx([0.0, 0.0])
        plt.close(fig)


class TestSphere:
    def test_mesh_on_sphere(self) -> None:
        x, y, z = sphere_mesh(3.0, 16)
        assert x.shape == (16, 16)
        assert np.sqrt(x ** 2 + y ** 2 + z ** 2) == pytest.approx(np.full((16, 16), 3.0))

    def test_shading_in_range(self) -> None:
        x, y, z = sphere_mesh(1.0, 8)
        colors = shade(x, y, z, "#00FF83", (10, 10, 10), 0.3)
        assert colors.shape == (8, 8, 4)
        assert colors.min() >= 0.0
        assert colors.max() <= 1.0


class TestVisualization:
    def test_visualize_segments(self, tmp_path) -> None:
        tree = Tree(TreeConfig(max_iterations=2))
        tree.grow()
        path = tmp_path / "tree.png"
        fig, ax = visualize_segments(tree.segments, save_path=str(path), show=False)
        assert path.exists()
        assert len(ax.collections) == 1
        plt.close(fig)

    def test_visualize_nothing(self) -> None:
        fig, ax = visualize_segments([], show=False)
        assert len(ax.collections) == 0
        plt.close(fig)

    def test_growth_statistics(self, tmp_path) -> None:
        tree = Tree(TreeConfig(max_iterations=3))
        tree.grow()
        path = tmp_path / "stats.png"
        fig, axes = plot_growth_statistics(tree, save_path=str(path), show=False)
        heights = [patch.get_height() for patch in axes[1].patches]
        assert heights == [5, 16, 64]
        plt.close(fig)
