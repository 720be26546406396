"""Example figures showing the typical uses of normal_plot."""

from ._common import save, setup_figure
from .canvas import MatplotlibCanvas
from .plot import normal_plot, shade, vline_at

# ---------------------------------------------------------------------------
# upper_tail.png
# ---------------------------------------------------------------------------


def diagram_upper_tail(out_dir):
    """N(72, 16) with everything above 80 shaded."""
    fig, ax = setup_figure()
    normal_plot(mean=72, sd=16, x1=80, label="P(X > 80)", canvas=MatplotlibCanvas(ax))
    return save(fig, out_dir, "upper_tail.png")


# ---------------------------------------------------------------------------
# interval.png
# ---------------------------------------------------------------------------


def diagram_interval(out_dir):
    """Shade [80, 90] on an existing plot and mark the mean."""
    fig, ax = setup_figure()
    canvas = MatplotlibCanvas(ax)
    normal_plot(mean=72, sd=16, canvas=canvas)
    shade(mean=72, sd=16, x1=80, x2=90, canvas=canvas)
    vline_at(72, mean=72, sd=16, canvas=canvas)
    return save(fig, out_dir, "interval.png")


# ---------------------------------------------------------------------------
# narrow_upper_tail.png
# ---------------------------------------------------------------------------


def diagram_narrow_upper_tail(out_dir):
    """Small sd: shading samples every 0.01 so the outline stays smooth."""
    fig, ax = setup_figure()
    normal_plot(mean=5.2, sd=0.08, x1=5.3, canvas=MatplotlibCanvas(ax))
    return save(fig, out_dir, "narrow_upper_tail.png")


# ---------------------------------------------------------------------------
# lower_tail.png
# ---------------------------------------------------------------------------


def diagram_lower_tail(out_dir):
    """Lowest 5% of the standard normal."""
    fig, ax = setup_figure()
    normal_plot(mean=0, sd=1, x2=-1.645, label="5%", canvas=MatplotlibCanvas(ax))
    return save(fig, out_dir, "lower_tail.png")


# ---------------------------------------------------------------------------
# minimal.png
# ---------------------------------------------------------------------------


def diagram_minimal(out_dir):
    """Narrowest range (2 sd) and no y axis."""
    fig, ax = setup_figure()
    normal_plot(
        mean=100,
        sd=15,
        show_y_axis_labels=False,
        max_sd_from_mean=2,
        canvas=MatplotlibCanvas(ax),
    )
    return save(fig, out_dir, "minimal.png")
