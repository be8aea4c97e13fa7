"""Tests for the render hand-off and console bars."""

import numpy as np

from visualizer import ConsoleVisualizer, RenderUniforms


def test_update_copies_values():
    uniforms = RenderUniforms.for_size(8)
    data = np.ones((8, 4), dtype=np.float32)
    uniforms.update(data, 120, 40)
    data[:] = 0.0
    assert np.all(uniforms.normalized_data == 1.0)
    assert uniforms.viewport_width == 120.0
    assert uniforms.viewport_height == 40.0


def test_bar_line_width_follows_viewport():
    uniforms = RenderUniforms.for_size(8)
    uniforms.update(np.full((8, 4), 0.5, dtype=np.float32), 50, 10)
    line = ConsoleVisualizer(32).bar_line(uniforms)
    assert len(line) == 50
    assert line.startswith("|") and line.endswith("|")


def test_silence_draws_blanks():
    uniforms = RenderUniforms.for_size(8)
    uniforms.update(np.zeros((8, 4), dtype=np.float32), 34, 10)
    assert ConsoleVisualizer(32).bar_line(uniforms) == "|" + " " * 32 + "|"


def test_full_scale_uses_top_glyph():
    uniforms = RenderUniforms.for_size(8)
    uniforms.update(np.ones((8, 4), dtype=np.float32), 34, 10)
    assert ConsoleVisualizer(32).bar_line(uniforms) == "|" + "█" * 32 + "|"


def test_for_size_follows_bucket_count():
    uniforms = RenderUniforms.for_size(16, 80, 24)
    assert uniforms.normalized_data.shape == (16, 4)
    assert np.all(uniforms.normalized_data == 0.0)
    assert uniforms.viewport_width == 80.0
    assert uniforms.viewport_height == 24.0


def test_for_size_draws_all_buckets():
    uniforms = RenderUniforms.for_size(16, 66, 10)
    uniforms.update(np.ones((16, 4), dtype=np.float32), 66, 10)
    assert ConsoleVisualizer(64).bar_line(uniforms) == "|" + "█" * 64 + "|"
