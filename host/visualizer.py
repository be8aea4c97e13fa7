"""Render-side hand-off for the normalised bucket values.

RenderUniforms is the block a shader would read: the packed vec4 rows plus
the viewport size.  ConsoleVisualizer draws it as a one-line bar chart.
"""

from dataclasses import dataclass

import numpy as np

_BAR_CHARS = "▁▂▃▄▅▆▇█"


@dataclass
class RenderUniforms:
    """Values copied into the renderer each time the pipeline produces output."""

    normalized_data: np.ndarray
    viewport_width: float = 0.0
    viewport_height: float = 0.0

    @classmethod
    def for_size(cls, uniform_size: int, width: float = 0.0,
                 height: float = 0.0) -> "RenderUniforms":
        """All-zero uniforms with `uniform_size` vec4 rows."""
        return cls(np.zeros((uniform_size, 4), dtype=np.float32),
                   float(width), float(height))

    def update(self, normalized: np.ndarray, width: float, height: float):
        self.normalized_data = np.array(normalized, dtype=np.float32, copy=True)
        self.viewport_width = float(width)
        self.viewport_height = float(height)


class ConsoleVisualizer:
    """Draws the uniforms as block characters across the terminal width."""

    def __init__(self, num_buckets: int):
        self._num_buckets = num_buckets

    def bar_line(self, uniforms: RenderUniforms) -> str:
        """Build the bar chart string, one glyph per column of the viewport."""
        values = uniforms.normalized_data.ravel()[:self._num_buckets]
        width = max(int(uniforms.viewport_width) - 2, 1)
        if values.size == 0:
            return "|" + " " * width + "|"

        # Stretch (or squeeze) the buckets across the available columns
        cols = np.floor(np.arange(width) * values.size / width).astype(int)
        levels = np.round(values[cols] * len(_BAR_CHARS)).astype(int)
        chars = "".join(_BAR_CHARS[min(v, len(_BAR_CHARS)) - 1] if v > 0 else " "
                        for v in levels)
        return f"|{chars}|"

    def render(self, uniforms: RenderUniforms):
        print(f"\r{self.bar_line(uniforms)}", end="", flush=True)
