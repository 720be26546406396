"""Annotated Normal density plots with optional shaded regions."""

import numpy as np

from .canvas import current_canvas
from .density import density, sample_step

# Fewer than this many standard deviations leaves too few ticks to read
MIN_SD_FROM_MEAN = 2

# Fractions of the peak density labelled on the y axis
Y_TICK_FRACTIONS = (0, 0.25, 0.5, 0.75, 1.0)

CURVE_STYLE = {"lw": 1, "frame": False}
MARKER_STYLE = {"ls": "--"}
SHADE_STYLE = {"angle": 45, "density": 30, "color": "grey", "border": None}
LABEL_STYLE = {"cex": 0.8}


# ---------------------------------------------------------------------------
# Domain and ticks
# ---------------------------------------------------------------------------


def plot_domain(mean, sd, max_sd_from_mean=4):
    """Return (x_first, x_last, k) with k clamped to at least 2 sd."""
    k = max(MIN_SD_FROM_MEAN, max_sd_from_mean)
    return mean - k * sd, mean + k * sd, k


def x_ticks(mean, sd, k):
    """Tick positions at every whole standard deviation in [-k, k]."""
    # Whole steps from -k that do not pass +k (k=2.3 stops at 1.7)
    steps = -k + np.arange(int(np.floor(2 * k + 1e-9)) + 1)
    return [mean + z * sd for z in steps.tolist()]


def y_ticks(mean, sd):
    """Tick positions at 0, 25, 50, 75 and 100% of the peak density."""
    peak = float(density(mean, mean, sd))
    return [peak * f for f in Y_TICK_FRACTIONS]


def format_tick(value):
    """Tick label at 7 significant digits, hiding float noise in mean + i*sd."""
    return format(value, ".7g")


# ---------------------------------------------------------------------------
# Interval defaults (shading and labelling default differently)
# ---------------------------------------------------------------------------


def resolve_shade_bounds(x1, x2, x_first, x_last):
    """Shaded interval, or None when neither bound is given.

    A missing bound extends to the edge of the plotted domain, so x1 alone
    is an upper tail and x2 alone a lower tail.
    """
    if x1 is None and x2 is None:
        return None
    return (
        x_first if x1 is None else x1,
        x_last if x2 is None else x2,
    )


def resolve_label_bounds(mean, sd, x1, x2):
    """Interval the caption is centred on; missing bounds are mean -/+ 2 sd."""
    return (
        mean - 2 * sd if x1 is None else x1,
        mean + 2 * sd if x2 is None else x2,
    )


# ---------------------------------------------------------------------------
# Drawing
# ---------------------------------------------------------------------------


def vline_at(x, mean, sd, canvas=None):
    """Dashed vertical line from the baseline up to the curve at x."""
    if canvas is None:
        canvas = current_canvas()
    canvas.draw_segment(x, 0, x, float(density(x, mean, sd)), MARKER_STYLE)


def shade_points(mean, sd, x1, x2):
    """Closed outline of the area under the curve between x1 and x2."""
    step = sample_step(sd)
    # 1e-10 keeps x2 when (x2 - x1) / step lands just under a whole number
    count = int(np.floor((x2 - x1) / step + 1e-10)) + 1
    xs = x1 + np.arange(max(count, 0)) * step
    ys = density(xs, mean, sd)
    return [(x1, 0.0)] + list(zip(xs.tolist(), ys.tolist())) + [(x2, 0.0)]


def shade(mean, sd, x1, x2, canvas=None):
    """Mark x1 and x2 and hatch the area under the curve between them.

    Expects x1 <= x2. x1 == x2 draws a zero-area fill.
    """
    if canvas is None:
        canvas = current_canvas()
    vline_at(x1, mean, sd, canvas)
    vline_at(x2, mean, sd, canvas)
    canvas.fill_polygon(shade_points(mean, sd, x1, x2), SHADE_STYLE)


def normal_plot(
    mean,
    sd,
    x1=None,
    x2=None,
    label=None,
    show_x_axis_labels=True,
    show_y_axis_labels=True,
    max_sd_from_mean=4,
    canvas=None,
):
    """Normal density curve with labelled axes and an optional shaded region.

    Args:
        mean: Mean of the distribution.
        sd: Standard deviation, assumed positive.
        x1: Left edge of the shaded region; alone it shades the upper tail.
        x2: Right edge of the shaded region; alone it shades the lower tail.
        label: Caption placed inside the region (mean -/+ 2 sd when a bound
            is missing).
        show_x_axis_labels: Draw the x axis at every whole sd from the mean.
        show_y_axis_labels: Draw the y axis at quarters of the peak density.
        max_sd_from_mean: Half-width of the plotted range in sd, at least 2.
        canvas: Surface to draw on; defaults to the current pyplot axes.
    """
    if canvas is None:
        canvas = current_canvas()

    x_first, x_last, k = plot_domain(mean, sd, max_sd_from_mean)
    x_values = x_ticks(mean, sd, k)
    y_values = y_ticks(mean, sd)

    canvas.draw_curve(lambda x: density(x, mean, sd), x_first, x_last, CURVE_STYLE)
    canvas.draw_baseline(0)

    if show_x_axis_labels:
        canvas.draw_axis("x", x_values, [format_tick(v) for v in x_values])
    if show_y_axis_labels:
        canvas.draw_axis("y", y_values, [format_tick(round(v, 3)) for v in y_values])

    bounds = resolve_shade_bounds(x1, x2, x_first, x_last)
    if bounds is not None:
        shade(mean, sd, *bounds, canvas=canvas)

    if label is not None:
        lo, hi = resolve_label_bounds(mean, sd, x1, x2)
        mid = (lo + hi) / 2
        canvas.draw_text(mid, float(density(mid, mean, sd)) / 2, label, LABEL_STYLE)
