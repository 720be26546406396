"""Drawing surfaces that the density plots render onto.

A canvas exposes the six primitives the plotting functions need. Styles are
plain dicts with canvas-neutral keys:

    lw, ls, color     line width, line style ("-" or "--"), colour
    frame             False suppresses the default box and ticks (curves)
    angle, density    hatch angle in degrees and lines per inch (fills)
    border            None draws the fill without an outline
    cex               text size relative to the base font size
"""

import abc

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Polygon

from ._common import FONT_SIZE, STYLE

# Number of points a curve is sampled at
CURVE_POINTS = 101

# Single hatch stroke per angle (degrees mod 180)
_HATCH_BY_ANGLE = {0: "-", 45: "/", 90: "|", 135: "\\"}


class Canvas(abc.ABC):
    """Abstract 2-D drawing surface."""

    @abc.abstractmethod
    def draw_curve(self, fn, start, end, style):
        """Plot y = fn(x) over [start, end]."""

    @abc.abstractmethod
    def draw_baseline(self, y):
        """Draw a horizontal line across the whole plot at y."""

    @abc.abstractmethod
    def draw_axis(self, orientation, ticks, labels):
        """Draw the "x" or "y" axis with the given tick positions and labels."""

    @abc.abstractmethod
    def draw_segment(self, x0, y0, x1, y1, style):
        """Draw a straight line from (x0, y0) to (x1, y1)."""

    @abc.abstractmethod
    def fill_polygon(self, points, style):
        """Fill the closed polygon through points, a sequence of (x, y)."""

    @abc.abstractmethod
    def draw_text(self, x, y, text, style):
        """Place text centred on (x, y)."""


def hatch_pattern(angle, density):
    """Translate a hatch angle and density into a matplotlib hatch string."""
    stroke = _HATCH_BY_ANGLE.get(angle % 180, "/")
    return stroke * max(1, round(density / 10))


class MatplotlibCanvas(Canvas):
    """Canvas backed by a matplotlib Axes."""

    def __init__(self, ax):
        self.ax = ax

    def _hide_frame(self):
        for spine in self.ax.spines.values():
            spine.set_visible(False)
        self.ax.tick_params(
            bottom=False, left=False, labelbottom=False, labelleft=False
        )

    def draw_curve(self, fn, start, end, style):
        if not style.get("frame", True):
            self._hide_frame()
        xs = np.linspace(start, end, CURVE_POINTS)
        self.ax.plot(
            xs,
            fn(xs),
            color=style.get("color", STYLE["curve"]),
            lw=style.get("lw", 1),
            ls=style.get("ls", "-"),
        )

    def draw_baseline(self, y):
        self.ax.axhline(y=y, color=STYLE["curve"], lw=1)

    def draw_axis(self, orientation, ticks, labels):
        if orientation == "x":
            spine, axis = self.ax.spines["bottom"], self.ax.xaxis
            self.ax.tick_params(axis="x", bottom=True, labelbottom=True)
        elif orientation == "y":
            spine, axis = self.ax.spines["left"], self.ax.yaxis
            self.ax.tick_params(axis="y", left=True, labelleft=True)
        else:
            raise ValueError(f"unknown axis orientation {orientation!r}")
        spine.set_visible(True)
        spine.set_color(STYLE["axis"])
        spine.set_bounds(ticks[0], ticks[-1])
        axis.set_ticks(ticks, labels=labels)
        self.ax.tick_params(axis=orientation, colors=STYLE["axis"], labelsize=9)

    def draw_segment(self, x0, y0, x1, y1, style):
        self.ax.plot(
            [x0, x1],
            [y0, y1],
            color=style.get("color", STYLE["marker"]),
            lw=style.get("lw", 1),
            ls=style.get("ls", "-"),
        )

    def fill_polygon(self, points, style):
        border = style.get("border")
        patch = Polygon(
            np.asarray(points, dtype=float),
            closed=True,
            fill=False,
            hatch=hatch_pattern(style.get("angle", 45), style.get("density", 30)),
            edgecolor=style.get("color", STYLE["shade"]),
            lw=0 if border is None else style.get("lw", 1),
        )
        self.ax.add_patch(patch)

    def draw_text(self, x, y, text, style):
        self.ax.text(
            x,
            y,
            text,
            color=style.get("color", STYLE["text"]),
            fontsize=FONT_SIZE * style.get("cex", 1),
            ha="center",
            va="center",
        )


def current_canvas():
    """Canvas on the current pyplot axes."""
    return MatplotlibCanvas(plt.gca())
