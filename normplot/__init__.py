"""normplot — Quick Normal distribution plots with labelled axes and shading.

Draws a Normal density curve with x ticks at whole standard deviations from
the mean, y ticks at quarters of the peak density, and an optional hatched
region (tail or interval) with a caption.

Usage:
    import matplotlib.pyplot as plt
    from normplot import normal_plot, shade, vline_at

    normal_plot(mean=72, sd=16, x1=80, label="P(X > 80)")
    plt.savefig("upper_tail.png")

    python -m normplot --list               # list gallery examples
    python -m normplot --all --out figures  # render the gallery

Requires: pip install numpy scipy matplotlib
"""

from .canvas import Canvas, MatplotlibCanvas
from .density import density, sample_step
from .plot import normal_plot, shade, vline_at

__all__ = [
    "Canvas",
    "MatplotlibCanvas",
    "density",
    "normal_plot",
    "sample_step",
    "shade",
    "vline_at",
]
